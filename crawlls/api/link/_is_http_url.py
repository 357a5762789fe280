from urllib.parse import urlparse


def _is_http_url(target: str) -> bool:
    parsed = urlparse(target)
    return parsed.scheme.lower() in ("http", "https") and bool(parsed.netloc)
