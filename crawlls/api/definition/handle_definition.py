"""textDocument/definition request handler."""

from typing import Any

from ..config.ServerContext import ServerContext
from ._parse_definition_params import _parse_definition_params
from .resolve_definition import resolve_definition


def handle_definition(params: Any, context: ServerContext) -> dict[str, Any] | None:
    """Handle textDocument/definition; returns a Location or None."""
    document_uri, line, character = _parse_definition_params(params)
    return resolve_definition(document_uri, line, character, context)
