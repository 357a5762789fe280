"""Shape check for incoming requests and notifications."""

from typing import Any

from ._is_valid_id import _is_valid_id
from .JSONRPC_VERSION import JSONRPC_VERSION
from .ValidationResult import ValidationResult


def validate_request(message: Any) -> ValidationResult:
    """Check an incoming message against the request shape.

    Required: ``jsonrpc`` equal to "2.0" and a string ``method``.
    Optional: ``id`` (integer or string; absent for notifications) and
    ``params`` (object or array).
    """
    if not isinstance(message, dict):
        return ValidationResult.failure(f"message must be an object, got {type(message).__name__}")
    if message.get("jsonrpc") != JSONRPC_VERSION:
        return ValidationResult.failure(f"jsonrpc must be {JSONRPC_VERSION!r}, got {message.get('jsonrpc')!r}")
    if not isinstance(message.get("method"), str):
        return ValidationResult.failure("method must be a string")
    if "id" in message and not _is_valid_id(message["id"]):
        return ValidationResult.failure(f"id must be an integer or string, got {message['id']!r}")
    if "params" in message and not isinstance(message["params"], (dict, list)):
        return ValidationResult.failure("params must be an object or array")
    return ValidationResult.success(message)
