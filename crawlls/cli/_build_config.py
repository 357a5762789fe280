"""Resolve the server configuration from CLI options."""

from pathlib import Path

from pydantic import ValidationError

from ..api.config.ServerConfig import ServerConfig


def _build_config(
    cache_dir: Path | None,
    config_file: Path | None,
    log_level: str | None,
    log_file: Path | None,
) -> ServerConfig:
    """Load the optional config file, then apply command-line overrides.

    Raises:
        ValueError: If the config file is missing or invalid, or an override is invalid
    """
    config = ServerConfig.load(config_file.expanduser()) if config_file is not None else ServerConfig()

    log_updates: dict = {}
    if log_level is not None:
        log_updates["level"] = log_level.upper()
    if log_file is not None:
        log_updates["file"] = log_file.expanduser()

    # Re-validate through the models so overrides get the same checks as the file
    data = config.model_dump()
    if cache_dir is not None:
        data["cache_dir"] = cache_dir.expanduser()
    data["log"].update(log_updates)
    try:
        return ServerConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid option: {e}") from e
