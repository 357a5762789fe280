import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent duplicate stderr handlers
_CONFIGURED = False


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """Configure unified crawlls logging.

    Stdout carries protocol frames, so console output always goes to stderr.
    Safe to call again: later calls update the level and attach a log file
    that is not attached yet.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional rotating log file. If None, only stderr is used.
    """
    global _CONFIGURED

    root_logger = logging.getLogger("crawlls")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.propagate = False

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not _CONFIGURED:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

        # Suppress noisy third-party loggers
        logging.getLogger("docling").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        _CONFIGURED = True

    if log_file is not None:
        target = str(log_file.expanduser().absolute())
        attached = any(
            isinstance(h, RotatingFileHandler) and h.baseFilename == target for h in root_logger.handlers
        )
        if not attached:
            Path(target).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                target,
                maxBytes=5 * 1024 * 1024,
                backupCount=3,  # 5MB * 3
            )
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
