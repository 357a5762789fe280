"""Config API module."""

from .FetchConfig import FetchConfig
from .LogConfig import LogConfig
from .ServerConfig import DEFAULT_CACHE_DIR, ServerConfig
from .ServerContext import ServerContext

__all__ = ["DEFAULT_CACHE_DIR", "FetchConfig", "LogConfig", "ServerConfig", "ServerContext"]
