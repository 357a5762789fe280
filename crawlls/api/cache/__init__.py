"""Cache API domain: URL to on-disk markdown location."""

from .check_cache import check_cache
from .get_cache_path import get_cache_path
from .normalize_url import normalize_url
from .save_to_cache import save_to_cache

__all__ = [
    "check_cache",
    "get_cache_path",
    "normalize_url",
    "save_to_cache",
]
