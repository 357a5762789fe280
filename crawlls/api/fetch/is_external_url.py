from collections.abc import Iterable
from urllib.parse import urlsplit

from ..config.FetchConfig import DEFAULT_EXTERNAL_DOMAINS


def is_external_url(url: str, external_domains: Iterable[str] = DEFAULT_EXTERNAL_DOMAINS) -> bool:
    """True if the URL's host is one of ``external_domains`` or a subdomain of one."""
    host = (urlsplit(url).hostname or "").lower()
    if not host:
        return False
    for domain in external_domains:
        domain = domain.lower().lstrip(".")
        if host == domain or host.endswith("." + domain):
            return True
    return False
