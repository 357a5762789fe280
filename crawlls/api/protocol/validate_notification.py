"""Shape check for outgoing notifications."""

from typing import Any

from .JSONRPC_VERSION import JSONRPC_VERSION
from .ValidationResult import ValidationResult


def validate_notification(message: Any) -> ValidationResult:
    """A notification has ``jsonrpc``, a string ``method``, optional ``params`` and no ``id``."""
    if not isinstance(message, dict):
        return ValidationResult.failure(f"notification must be an object, got {type(message).__name__}")
    if message.get("jsonrpc") != JSONRPC_VERSION:
        return ValidationResult.failure(f"jsonrpc must be {JSONRPC_VERSION!r}")
    if not isinstance(message.get("method"), str):
        return ValidationResult.failure("method must be a string")
    if "id" in message:
        return ValidationResult.failure("notification must not carry an id")
    if "params" in message and not isinstance(message["params"], (dict, list)):
        return ValidationResult.failure("params must be an object or array")
    return ValidationResult.success(message)
