"""Explicit per-process context handed to every handler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .ServerConfig import ServerConfig

if TYPE_CHECKING:
    from ...lsp.MessageTransport import MessageTransport


@dataclass(frozen=True)
class ServerContext:
    """Configuration plus the active transport (for outbound notifications)."""

    config: ServerConfig
    transport: MessageTransport
