"""Cache presence check."""

import stat
from pathlib import Path


def check_cache(cache_path: Path) -> bool:
    """Return True if a cached file exists at ``cache_path``.

    Only a missing file counts as a miss; any other OSError (permissions,
    I/O failure) propagates to the caller.
    """
    try:
        st = cache_path.stat()
    except FileNotFoundError:
        return False
    return stat.S_ISREG(st.st_mode)
