from ..config.FetchConfig import DEFAULT_MIN_CONTENT_LENGTH


def is_content_too_short(content: str, min_length: int = DEFAULT_MIN_CONTENT_LENGTH) -> bool:
    """True when converted markdown is too short to be a meaningfully rendered page."""
    return len(content.strip()) < min_length
