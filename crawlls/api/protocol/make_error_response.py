from typing import Any

from .JSONRPC_VERSION import JSONRPC_VERSION


def make_error_response(request_id: Any, code: int, message: str, data: Any = None) -> dict[str, Any]:
    """Build an error response."""
    error: dict[str, Any] = {"code": int(code), "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error}
