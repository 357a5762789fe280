"""Start the language server on stdin/stdout."""

from ..api.config.ServerConfig import ServerConfig
from ..api.config.ServerContext import ServerContext
from ..lsp.LspServer import LspServer
from ..lsp.MessageTransport import MessageTransport
from ..utils.configure_logging import configure_logging


def _run_server(config: ServerConfig) -> None:
    """Build the process context once and serve until stdin closes."""
    configure_logging(config.log.level, config.log.file)
    context = ServerContext(config=config, transport=MessageTransport())
    LspServer(context).run()
