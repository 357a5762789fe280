from pathlib import Path
from urllib.parse import unquote


def uri_to_path(uri: str) -> Path:
    """Convert file:// URI to Path.

    Handles both standard 'file:///' URIs and machine-prefixed 'file://host/' URIs.

    Args:
        uri: URI string like 'file:///home/user/notes.md' or 'file://host/home/user/notes.md'

    Returns:
        Path object
    """
    if uri.startswith("file://"):
        path_part = uri[7:]

        # file://hostname/path -> hostname/path -> find('/') at hostname's end
        # file:///path -> /path -> find('/') at 0
        first_slash = path_part.find("/")
        path_part = path_part[first_slash:] if first_slash != -1 else "/"

        return Path(unquote(path_part))
    return Path(uri)
