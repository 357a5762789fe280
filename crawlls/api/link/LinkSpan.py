"""Link span dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkSpan:
    """A link found on a single line.

    ``start`` and ``end`` are character offsets into the line, half-open.
    """

    start: int
    end: int
    url: str
    link_type: str  # "markdown", "image", "autolink", "bare"

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end
