"""Deterministic cache location for a URL."""

import hashlib
import re
from collections.abc import Iterable
from pathlib import Path
from urllib.parse import urlsplit

from ._slug_from_path import _slug_from_path
from .normalize_url import normalize_url


def get_cache_path(url: str, cache_dir: Path, tracking_params: Iterable[str] = ()) -> Path:
    """Get the cache file path for a given URL.

    Layout: ``<cache_dir>/<host>/<slug>-<digest>.md`` where ``digest`` is the
    first 32 hex characters of the SHA-256 of the normalized URL.

    Args:
        url: Absolute http(s) URL
        cache_dir: Cache root directory
        tracking_params: Query parameters excluded from the key

    Returns:
        Path of the markdown file (which may not exist yet)
    """
    normalized = normalize_url(url, tracking_params)
    digest = hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:32]

    parts = urlsplit(normalized)
    host_dir = re.sub(r"[^A-Za-z0-9.-]+", "_", parts.netloc)
    return Path(cache_dir) / host_dir / f"{_slug_from_path(parts.path)}-{digest}.md"
