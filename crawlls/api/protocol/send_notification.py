"""Write a one-way server-to-client notification."""

from typing import Any

from ...utils.get_logger import get_logger
from ..config.ServerContext import ServerContext
from .JSONRPC_VERSION import JSONRPC_VERSION
from .validate_notification import validate_notification

logger = get_logger("protocol")


def send_notification(context: ServerContext, method: str, params: dict[str, Any] | None = None) -> bool:
    """Validate and write a notification on the context's transport.

    Returns:
        True if the notification was written, False if it failed its shape check
    """
    message: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "method": method}
    if params is not None:
        message["params"] = params

    checked = validate_notification(message)
    if not checked.ok:
        logger.error("Refusing to send invalid notification %s: %s", method, checked.error)
        return False

    context.transport.write_message(message)
    logger.debug("Sent notification %s", method)
    return True
