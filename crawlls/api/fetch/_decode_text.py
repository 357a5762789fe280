import requests  # type: ignore


def _decode_text(response: requests.Response) -> str:
    """Decode a text body, honoring an explicit charset and defaulting to UTF-8.

    requests falls back to ISO-8859-1 for ``text/*`` without a charset, which
    garbles UTF-8 markdown.
    """
    content_type = response.headers.get("Content-Type", "")
    if "charset=" in content_type.lower() and response.encoding:
        return response.text
    return response.content.decode("utf-8", errors="replace")
