"""Find every http(s) link span on a line of text."""

from ._is_http_url import _is_http_url
from ._PATTERNS import AUTOLINK_PATTERN, BARE_URL_PATTERN, MARKDOWN_URL_PATTERN, TRAILING_PUNCTUATION
from .LinkSpan import LinkSpan


def find_link_spans(line: str) -> list[LinkSpan]:
    """Return link spans ordered by start offset.

    Markdown links and autolinks claim their whole construct; a bare URL is
    only reported when it does not overlap one of those. Non-http targets
    (relative paths, mailto:, anchors) are skipped.
    """
    spans: list[LinkSpan] = []

    for match in MARKDOWN_URL_PATTERN.finditer(line):
        url = match.group(3).strip()
        if not _is_http_url(url):
            continue
        link_type = "image" if match.group(1) else "markdown"
        spans.append(LinkSpan(start=match.start(), end=match.end(), url=url, link_type=link_type))

    for match in AUTOLINK_PATTERN.finditer(line):
        if any(span.start <= match.start() < span.end for span in spans):
            continue
        spans.append(LinkSpan(start=match.start(), end=match.end(), url=match.group(1), link_type="autolink"))

    claimed = list(spans)
    for match in BARE_URL_PATTERN.finditer(line):
        if any(span.start < match.end() and match.start() < span.end for span in claimed):
            continue
        url = match.group(0).rstrip(TRAILING_PUNCTUATION)
        # Keep a closing paren that balances one inside the URL (wiki-style links)
        if match.group(0)[len(url) :].startswith(")") and url.count("(") > url.count(")"):
            url += ")"
        if not _is_http_url(url):
            continue
        spans.append(LinkSpan(start=match.start(), end=match.start() + len(url), url=url, link_type="bare"))

    spans.sort(key=lambda span: span.start)
    return spans
