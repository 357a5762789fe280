"""Fetch failure."""


class FetchError(RuntimeError):
    """Raised when a URL cannot be downloaded or converted to markdown."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason
