import re
from urllib.parse import unquote


def _slug_from_path(path: str) -> str:
    """Readable filename stem from the last non-empty path component."""
    segs = [s for s in path.split("/") if s]
    if not segs:
        return "index"
    last = unquote(segs[-1])
    # Drop a trailing extension such as .html
    last = re.sub(r"\.[A-Za-z0-9]{1,5}$", "", last)
    slug = re.sub(r"[^A-Za-z0-9]+", "-", last).strip("-").lower()
    return slug[:60] or "index"
