import json
from typing import Any


def encode_message(message: dict[str, Any]) -> bytes:
    """Frame a message: ``Content-Length: <bytes>\\r\\n\\r\\n<compact json>``.

    The length counts UTF-8 bytes of the body, not characters.
    """
    body = json.dumps(message, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return f"Content-Length: {len(body)}\r\n\r\n".encode("ascii") + body
