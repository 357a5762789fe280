"""Initialize API domain."""

from .handle_initialize import handle_initialize

__all__ = ["handle_initialize"]
