from pathlib import Path
from typing import Any

from ...utils.path_to_uri import path_to_uri


def make_location(path: Path) -> dict[str, Any]:
    """Location addressing a whole file: zero-width range at the document start."""
    start = {"line": 0, "character": 0}
    return {
        "uri": path_to_uri(path),
        "range": {"start": dict(start), "end": dict(start)},
    }
