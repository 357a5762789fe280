"""Shape check for outgoing responses."""

from typing import Any

from ._is_valid_id import _is_valid_id
from .JSONRPC_VERSION import JSONRPC_VERSION
from .ValidationResult import ValidationResult


def validate_response(message: Any) -> ValidationResult:
    """Check a response before it is written.

    A response carries ``jsonrpc`` "2.0", an ``id`` (integer, string or null)
    and exactly one of ``result`` or ``error``; an error has an integer
    ``code`` and a string ``message``.
    """
    if not isinstance(message, dict):
        return ValidationResult.failure(f"response must be an object, got {type(message).__name__}")
    if message.get("jsonrpc") != JSONRPC_VERSION:
        return ValidationResult.failure(f"jsonrpc must be {JSONRPC_VERSION!r}")
    if "id" not in message:
        return ValidationResult.failure("response is missing id")
    if message["id"] is not None and not _is_valid_id(message["id"]):
        return ValidationResult.failure(f"id must be an integer, string or null, got {message['id']!r}")

    has_result = "result" in message
    has_error = "error" in message
    if has_result == has_error:
        return ValidationResult.failure("response must carry exactly one of result or error")

    if has_error:
        error = message["error"]
        if not isinstance(error, dict):
            return ValidationResult.failure("error must be an object")
        code = error.get("code")
        if isinstance(code, bool) or not isinstance(code, int):
            return ValidationResult.failure("error.code must be an integer")
        if not isinstance(error.get("message"), str):
            return ValidationResult.failure("error.message must be a string")
    return ValidationResult.success(message)
