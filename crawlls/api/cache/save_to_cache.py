"""Persist markdown into the cache."""

from contextlib import suppress
from pathlib import Path


def save_to_cache(cache_path: Path, content: str) -> Path:
    """Write ``content`` to ``cache_path`` atomically, creating parent directories.

    Writes to a temp file and renames it so readers never see a partial entry.
    """
    cache_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = cache_path.with_suffix(cache_path.suffix + ".tmp")
    try:
        temp_path.write_text(content, encoding="utf-8")
        temp_path.replace(cache_path)
    except OSError:
        with suppress(OSError):
            temp_path.unlink()
        raise
    return cache_path
