"""Link API domain."""

from .extract_link_at_position import extract_link_at_position
from .find_link_spans import find_link_spans
from .LinkSpan import LinkSpan
from .utf16_offset_to_index import utf16_offset_to_index

__all__ = [
    "LinkSpan",
    "extract_link_at_position",
    "find_link_spans",
    "utf16_offset_to_index",
]
