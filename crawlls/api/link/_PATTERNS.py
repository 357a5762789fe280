"""Compiled regex patterns for link spans on a single line."""

import re

# [Alias](Target "optional title") and ![Alt](Target); Target may hold one level of balanced parens
MARKDOWN_URL_PATTERN = re.compile(
    r"(!)?\[([^\]]*)\]\(\s*<?((?:[^()\s<>]|\([^()\s<>]*\))+)>?(?:\s+[\"'][^\"']*[\"'])?\s*\)"
)
# <https://example.com>
AUTOLINK_PATTERN = re.compile(r"<(https?://[^\s>]+)>", re.IGNORECASE)
# Matches http:// or https:// followed by non-whitespace
BARE_URL_PATTERN = re.compile(r"https?://[^\s<>\"'`]+", re.IGNORECASE)
# Naive cleanup of trailing punctuation on bare URLs
TRAILING_PUNCTUATION = ",.;:)!]?'\""
