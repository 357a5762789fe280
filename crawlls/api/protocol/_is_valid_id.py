from typing import Any


def _is_valid_id(value: Any) -> bool:
    """Request ids are integers or strings; bool is rejected even though it subclasses int."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, str))
