"""Single-threaded request loop."""

from ..api.config.ServerContext import ServerContext
from ..utils.get_logger import get_logger
from .Dispatcher import Dispatcher
from .FramingError import FramingError

logger = get_logger("server")


class LspServer:
    """Reads one message, answers it fully, then reads the next."""

    def __init__(self, context: ServerContext):
        self._context = context
        self._transport = context.transport
        self._dispatcher = Dispatcher(context)

    def serve_one(self) -> bool:
        """Process at most one message.

        Returns:
            False once the input stream has ended, True otherwise
        """
        try:
            raw = self._transport.read_message()
        except FramingError as e:
            logger.error("Framing error, dropping frame: %s", e)
            return True

        if raw is None:
            return not self._transport.at_eof

        response = self._dispatcher.handle(raw)
        if response is not None:
            self._transport.write_message(response)
        return True

    def run(self) -> None:
        """Run the request loop until the input stream ends."""
        logger.info("crawlls listening (cache: %s)", self._context.config.cache_dir)
        while self.serve_one():
            pass
        logger.info("Input stream closed, stopping")
