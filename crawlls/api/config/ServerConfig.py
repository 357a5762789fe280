"""Top-level crawlls configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .FetchConfig import FetchConfig
from .LogConfig import LogConfig

DEFAULT_CACHE_DIR = Path("/tmp/crawl-ls")


class ServerConfig(BaseModel):
    """Process-wide configuration, built once at startup."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    cache_dir: Path = Field(DEFAULT_CACHE_DIR, description="Root directory for cached markdown")
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def load(cls, path: Path) -> "ServerConfig":
        """Load and validate config from a JSON file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: top level of {path} must be an object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
