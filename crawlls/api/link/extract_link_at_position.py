"""Return the URL under the cursor."""

from .find_link_spans import find_link_spans


def extract_link_at_position(line: str, character: int) -> str | None:
    """Return the URL of the link span containing ``character``, or None.

    Args:
        line: One line of the document, without its line terminator
        character: Cursor offset within the line
    """
    if character < 0:
        return None
    for span in find_link_spans(line):
        if span.contains(character):
            return span.url
    return None
