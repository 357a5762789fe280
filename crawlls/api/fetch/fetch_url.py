"""Fetch a URL into the markdown cache."""

from pathlib import Path

from ...utils.get_logger import get_logger
from ..cache.get_cache_path import get_cache_path
from ..cache.save_to_cache import save_to_cache
from ..config.FetchConfig import FetchConfig
from ._convert_with_docling import _convert_with_docling
from ._decode_text import _decode_text
from ._download import _download
from ._MIME_TO_SUFFIX import _PASSTHROUGH_MIMES
from ._suffix_for import _suffix_for
from .FetchError import FetchError
from .FetchResult import FetchResult
from .is_content_too_short import is_content_too_short
from .is_external_url import is_external_url

logger = get_logger("fetch")


def fetch_url(url: str, cache_dir: Path, config: FetchConfig) -> FetchResult:
    """Download ``url``, convert it to markdown and store it in the cache.

    External-only URLs (configured domains, or pages whose markdown is too
    short to be useful) are never downloaded into the cache; the result is
    marked ``is_external`` and has no path.

    Args:
        url: Absolute http(s) URL
        cache_dir: Cache root directory
        config: Fetch settings

    Returns:
        FetchResult with the cache path for fetchable URLs

    Raises:
        FetchError: On network failure, non-2xx status, or conversion failure
    """
    if is_external_url(url, config.external_domains):
        logger.info("External-only URL, not fetching: %s", url)
        return FetchResult(is_external=True)

    response = _download(url, config)
    content_type = response.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
    logger.debug("Downloaded %s (%s, %d bytes)", url, content_type or "unknown type", len(response.content))

    if content_type in _PASSTHROUGH_MIMES:
        content = _decode_text(response)
    else:
        try:
            content = _convert_with_docling(response.content, _suffix_for(content_type, url), config.timeout_secs)
        except RuntimeError as exc:
            raise FetchError(url, str(exc)) from exc

    if is_content_too_short(content, config.min_content_length):
        logger.info("Content too short (%d chars), opening externally: %s", len(content.strip()), url)
        return FetchResult(is_external=True)

    cache_path = get_cache_path(url, cache_dir, config.tracking_params)
    save_to_cache(cache_path, content)
    logger.info("Cached %s at %s", url, cache_path)
    return FetchResult(is_external=False, path=cache_path)
