from typing import Any


def _parse_definition_params(params: Any) -> tuple[str, int, int]:
    """Pull (uri, line, character) out of textDocument/definition params.

    Raises:
        ValueError: If the params do not have the definition shape
    """
    if not isinstance(params, dict):
        raise ValueError("textDocument/definition params must be an object")
    text_document = params.get("textDocument")
    position = params.get("position")
    if not isinstance(text_document, dict) or not isinstance(text_document.get("uri"), str):
        raise ValueError("textDocument.uri must be a string")
    if not isinstance(position, dict):
        raise ValueError("position must be an object")
    line = position.get("line")
    character = position.get("character")
    for name, value in (("line", line), ("character", character)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"position.{name} must be a non-negative integer")
    return text_document["uri"], line, character
