from pathlib import Path


def path_to_uri(path: Path) -> str:
    """Convert Path to an absolute file:/// URI (no hostname, as editors expect)."""
    return Path(path).expanduser().absolute().as_uri()
