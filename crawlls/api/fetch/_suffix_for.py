import mimetypes
from pathlib import PurePosixPath
from urllib.parse import urlsplit

from ._MIME_TO_SUFFIX import _MIME_TO_SUFFIX


def _suffix_for(content_type: str, url: str) -> str:
    """Input suffix for the converter.

    A known content type wins, then a known URL suffix (servers often send
    generic types such as ``application/octet-stream``), then whatever
    ``mimetypes`` guesses, then HTML.
    """
    if content_type in _MIME_TO_SUFFIX:
        return _MIME_TO_SUFFIX[content_type]
    url_suffix = PurePosixPath(urlsplit(url).path).suffix.lower()
    if url_suffix in _MIME_TO_SUFFIX.values():
        return url_suffix
    guessed = mimetypes.guess_extension(content_type) if content_type else None
    if guessed:
        return guessed
    return ".html"
