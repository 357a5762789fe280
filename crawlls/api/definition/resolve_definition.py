"""Resolve the link under the cursor to a cached markdown file."""

from typing import Any

from ...utils.get_logger import get_logger
from ...utils.uri_to_path import uri_to_path
from ..cache.check_cache import check_cache
from ..cache.get_cache_path import get_cache_path
from ..config.ServerContext import ServerContext
from ..fetch.fetch_url import fetch_url
from ..link.extract_link_at_position import extract_link_at_position
from ..link.utf16_offset_to_index import utf16_offset_to_index
from ..protocol.send_notification import send_notification
from .make_location import make_location

logger = get_logger("definition")


def resolve_definition(document_uri: str, line: int, character: int, context: ServerContext) -> dict[str, Any] | None:
    """Resolve a definition request.

    Steps run strictly in order: load the document, extract the link at the
    cursor, check the cache, fetch on a miss. External-only URLs trigger a
    ``window/showDocument`` notification and resolve to None.

    Args:
        document_uri: file:// URI of the document being edited
        line: Zero-based line index
        character: Zero-based offset within the line, in UTF-16 code units
        context: Server context

    Returns:
        A Location dict for the cached file, or None when there is nothing to go to

    Raises:
        OSError: If the document or cache cannot be read/written
        FetchError: If downloading or converting the link fails
    """
    config = context.config

    content = uri_to_path(document_uri).read_text(encoding="utf-8")
    lines = content.split("\n")
    if line >= len(lines):
        logger.debug("Line %d beyond end of %s (%d lines)", line, document_uri, len(lines))
        return None

    text = lines[line].rstrip("\r")
    url = extract_link_at_position(text, utf16_offset_to_index(text, character))
    if url is None:
        logger.debug("No link at %s:%d:%d", document_uri, line, character)
        return None

    cache_path = get_cache_path(url, config.cache_dir, config.fetch.tracking_params)
    if check_cache(cache_path):
        logger.info("Cache hit for %s", url)
    else:
        logger.info("Cache miss for %s", url)
        result = fetch_url(url, config.cache_dir, config.fetch)
        if result.is_external:
            send_notification(context, "window/showDocument", {"uri": url, "external": True})
            return None
        assert result.path is not None
        cache_path = result.path

    return make_location(cache_path)
