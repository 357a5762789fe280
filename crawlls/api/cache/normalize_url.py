"""URL normalization for cache keys."""

from collections.abc import Iterable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_url(url: str, tracking_params: Iterable[str] = ()) -> str:
    """Normalize a URL so that equivalent links share one cache entry.

    Lower-cases scheme and host, drops the default port and the fragment,
    maps an empty path to "/", removes tracking query parameters and sorts
    the remaining ones. Parameter values are kept verbatim.

    Raises:
        ValueError: If the URL has no scheme or host
    """
    parts = urlsplit(url.strip())
    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    if not scheme or not host:
        raise ValueError(f"Cannot normalize URL without scheme and host: {url!r}")

    netloc = f"[{host}]" if ":" in host else host
    if parts.port is not None and parts.port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{netloc}:{parts.port}"

    path = parts.path or "/"

    dropped = {key.lower() for key in tracking_params}
    query_pairs = [
        (key, value) for key, value in parse_qsl(parts.query, keep_blank_values=True) if key.lower() not in dropped
    ]
    query = urlencode(sorted(query_pairs))

    return urlunsplit((scheme, netloc, path, query, ""))
