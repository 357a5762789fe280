"""Download content types and the file suffix docling needs to pick its input format."""

_MIME_TO_SUFFIX: dict[str, str] = {
    "text/html": ".html",
    "application/xhtml+xml": ".html",
    "application/pdf": ".pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": ".pptx",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": ".xlsx",
    "text/csv": ".csv",
    "text/asciidoc": ".adoc",
}

# Bodies stored as-is, without conversion
_PASSTHROUGH_MIMES = frozenset({"text/markdown", "text/x-markdown", "text/plain"})
