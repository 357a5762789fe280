"""Tests for the crawlls CLI entry point and option handling."""

import importlib
import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from crawlls.api.config.ServerConfig import ServerConfig
from crawlls.cli import main
from crawlls.cli._build_config import _build_config

create_app_module = importlib.import_module("crawlls.cli._create_app")


def test_defaults_without_options():
    config = _build_config(None, None, None, None)
    assert config == ServerConfig()
    assert config.cache_dir == Path("/tmp/crawl-ls")
    assert config.log.level == "INFO"


def test_cli_overrides(tmp_path: Path):
    config = _build_config(tmp_path / "cache", None, "debug", tmp_path / "crawlls.log")
    assert config.cache_dir == tmp_path / "cache"
    assert config.log.level == "DEBUG"
    assert config.log.file == tmp_path / "crawlls.log"


def test_overrides_win_over_file(tmp_path: Path):
    config_file = tmp_path / "crawlls.json"
    config_file.write_text(
        json.dumps({"cache_dir": str(tmp_path / "from-file"), "fetch": {"timeout_secs": 5}}),
        encoding="utf-8",
    )
    config = _build_config(tmp_path / "from-cli", config_file, None, None)
    assert config.cache_dir == tmp_path / "from-cli"
    assert config.fetch.timeout_secs == 5


def test_invalid_log_level():
    with pytest.raises(ValueError, match="Invalid option"):
        _build_config(None, None, "verbose", None)


def test_missing_config_file(tmp_path: Path):
    with pytest.raises(ValueError, match="Configuration file not found"):
        _build_config(None, tmp_path / "missing.json", None, None)


def test_main_help(capsys):
    assert main(["--help"]) == 0
    assert "--cache-dir" in capsys.readouterr().out


def test_main_runs_server(tmp_path: Path):
    with patch.object(create_app_module, "_run_server") as mock_run:
        assert main(["--cache-dir", str(tmp_path), "--log-level", "WARNING"]) == 0
    (config,), _ = mock_run.call_args
    assert config.cache_dir == tmp_path
    assert config.log.level == "WARNING"


def test_main_bad_config_exits_2(tmp_path: Path, capsys):
    with patch.object(create_app_module, "_run_server") as mock_run:
        assert main(["--config", str(tmp_path / "missing.json")]) == 2
    mock_run.assert_not_called()
    assert "Configuration file not found" in capsys.readouterr().err


def test_main_unknown_option():
    assert main(["--no-such-option"]) == 1


def test_configure_logging_sets_level():
    from crawlls.utils.configure_logging import configure_logging

    configure_logging("WARNING")
    try:
        assert logging.getLogger("crawlls").level == logging.WARNING
    finally:
        configure_logging("INFO")


def test_configure_logging_attaches_file_once(tmp_path: Path):
    from logging.handlers import RotatingFileHandler

    from crawlls.utils.configure_logging import configure_logging

    log_file = tmp_path / "logs" / "crawlls.log"
    logger = logging.getLogger("crawlls")
    try:
        configure_logging("INFO", log_file)
        configure_logging("INFO", log_file)
        handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1
        logging.getLogger("crawlls.tests").warning("written to file")
        handlers[0].flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]:
            logger.removeHandler(handler)
            handler.close()


def test_config_file_must_hold_an_object(tmp_path: Path):
    config_file = tmp_path / "crawlls.json"
    config_file.write_text(json.dumps(["not", "an", "object"]), encoding="utf-8")
    with pytest.raises(ValueError, match="must be an object"):
        _build_config(None, config_file, None, None)


def test_main_array_config_exits_2(tmp_path: Path, capsys):
    config_file = tmp_path / "crawlls.json"
    config_file.write_text("[1, 2]", encoding="utf-8")
    with patch.object(create_app_module, "_run_server") as mock_run:
        assert main(["--config", str(config_file)]) == 2
    mock_run.assert_not_called()
    assert "must be an object" in capsys.readouterr().err


def test_main_reports_unhandled_errors(tmp_path: Path, capsys):
    with patch.object(create_app_module, "_run_server", side_effect=RuntimeError("stdin is closed")):
        assert main(["--cache-dir", str(tmp_path)]) == 1
    assert "Unhandled error: stdin is closed" in capsys.readouterr().err
