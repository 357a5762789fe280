"""Definition API domain."""

from .handle_definition import handle_definition
from .make_location import make_location
from .resolve_definition import resolve_definition

__all__ = ["handle_definition", "make_location", "resolve_definition"]
