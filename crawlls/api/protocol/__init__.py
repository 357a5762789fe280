"""JSON-RPC message shapes: constants, constructors and shape checks."""

from .ErrorCode import ErrorCode
from .JSONRPC_VERSION import JSONRPC_VERSION
from .make_error_response import make_error_response
from .make_response import make_response
from .send_notification import send_notification
from .validate_notification import validate_notification
from .validate_request import validate_request
from .validate_response import validate_response
from .ValidationResult import ValidationResult

__all__ = [
    "JSONRPC_VERSION",
    "ErrorCode",
    "ValidationResult",
    "make_error_response",
    "make_response",
    "send_notification",
    "validate_notification",
    "validate_request",
    "validate_response",
]
