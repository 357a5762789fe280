"""Validate, route and answer one decoded message."""

import json
from typing import Any

from ..api.config.ServerContext import ServerContext
from ..api.protocol.ErrorCode import ErrorCode
from ..api.protocol.make_error_response import make_error_response
from ..api.protocol.make_response import make_response
from ..api.protocol.validate_request import validate_request
from ..api.protocol.validate_response import validate_response
from ..utils.get_logger import get_logger
from .HANDLERS import HANDLERS, Handler

logger = get_logger("dispatcher")


class Dispatcher:
    """Turns a raw message body into the response to write, if any."""

    def __init__(self, context: ServerContext, handlers: dict[str, Handler] | None = None):
        self._context = context
        self._handlers = HANDLERS if handlers is None else handlers

    def handle(self, raw: bytes) -> dict[str, Any] | None:
        """Handle a single message body.

        Returns:
            The validated response, or None when nothing should be written:
            undecodable or invalid input, notifications, or a response that
            fails its own shape check.
        """
        try:
            message = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("Dropping undecodable message: %s", e)
            return None

        checked = validate_request(message)
        if not checked.ok:
            logger.error("Received invalid JSON-RPC request: %s", checked.error)
            return None

        request = checked.value
        response = self._dispatch(request)
        if response is None:
            return None

        checked_response = validate_response(response)
        if not checked_response.ok:
            logger.error("Not sending invalid response for %s: %s", request["method"], checked_response.error)
            return None
        return response

    def _dispatch(self, request: dict[str, Any]) -> dict[str, Any] | None:
        method = request["method"]
        is_notification = "id" not in request
        request_id = request.get("id")

        handler = self._handlers.get(method)
        if handler is None:
            if is_notification:
                logger.debug("Ignoring notification %s", method)
                return None
            logger.warning("Method not found: %s", method)
            return make_error_response(request_id, ErrorCode.METHOD_NOT_FOUND, f"Method not found: {method}")

        try:
            result = handler(request.get("params"), self._context)
        except Exception:
            logger.exception("Handler error for %s (id=%r)", method, request_id)
            if is_notification:
                return None
            return make_error_response(request_id, ErrorCode.INTERNAL_ERROR, "Internal error")

        if is_notification:
            return None
        return make_response(request_id, result)
