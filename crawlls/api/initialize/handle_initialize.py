"""initialize request handler."""

from typing import Any

from ... import __version__
from ..config.ServerContext import ServerContext


def handle_initialize(params: Any, context: ServerContext) -> dict[str, Any]:  # noqa: ARG001
    """Return the static capability declaration (definition support only)."""
    return {
        "capabilities": {"definitionProvider": True},
        "serverInfo": {"name": "crawlls", "version": __version__},
    }
