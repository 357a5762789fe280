"""Outcome of a message shape check."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationResult:
    """Either ``ok`` with the checked ``value`` or not ``ok`` with an ``error`` summary."""

    ok: bool
    value: Any = None
    error: str = ""

    @classmethod
    def success(cls, value: Any) -> "ValidationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ValidationResult":
        return cls(ok=False, error=error)
