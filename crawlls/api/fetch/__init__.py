"""Fetch API domain: classify, download and convert URLs to markdown."""

from .fetch_url import fetch_url
from .FetchError import FetchError
from .FetchResult import FetchResult
from .is_content_too_short import is_content_too_short
from .is_external_url import is_external_url

__all__ = [
    "FetchError",
    "FetchResult",
    "fetch_url",
    "is_content_too_short",
    "is_external_url",
]
