"""Method name to handler routing table."""

from collections.abc import Callable
from typing import Any

from ..api.config.ServerContext import ServerContext
from ..api.definition.handle_definition import handle_definition
from ..api.initialize.handle_initialize import handle_initialize

Handler = Callable[[Any, ServerContext], Any]

# Every supported method; anything else is "method not found"
HANDLERS: dict[str, Handler] = {
    "initialize": handle_initialize,
    "textDocument/definition": handle_definition,
}
