from .FramingError import FramingError


def _parse_content_length(header_block: bytes) -> int:
    """Extract Content-Length from a header block (terminator already stripped).

    Header names are matched case-insensitively; other headers are ignored.

    Raises:
        FramingError: If Content-Length is missing, not an integer, or negative
    """
    text = header_block.decode("ascii", errors="replace")
    for header_line in text.split("\r\n"):
        name, sep, value = header_line.partition(":")
        if not sep or name.strip().lower() != "content-length":
            continue
        try:
            length = int(value.strip())
        except ValueError as e:
            raise FramingError(f"Invalid Content-Length header: {header_line!r}") from e
        if length < 0:
            raise FramingError(f"Negative Content-Length header: {header_line!r}")
        return length
    raise FramingError(f"Missing Content-Length header in {text!r}")
