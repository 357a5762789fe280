"""Outcome of fetching a URL."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FetchResult:
    """``is_external`` results carry no path: nothing was cached and the URL
    must be opened by the client instead."""

    is_external: bool
    path: Path | None = None
