from typing import Any

from .JSONRPC_VERSION import JSONRPC_VERSION


def make_response(request_id: Any, result: Any) -> dict[str, Any]:
    """Build a success response."""
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}
