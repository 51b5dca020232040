"""Logging configuration for urikit.

JSON-formatted logging to stderr and optional human-readable file logging.
Library modules only obtain loggers through get_logger(); handlers are
installed solely by an explicit setup_logging() call, never at import time.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

# Extra record attributes copied into JSON log lines
EXTRA_FIELDS = ("path", "uri", "prefix", "flags", "error_code")


class JsonFormatter(logging.Formatter):
    """Format log records as JSON lines for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as a JSON line.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log line
        """
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_obj[key] = getattr(record, key)

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj)


def setup_logging(config: "Config | None" = None) -> None:
    """
    Configure logging based on config.log_mode.

    Args:
        config: Configuration instance with logging settings. Defaults to
            get_config().

    Logging Modes:
        - "stderr": JSON formatter to stderr
        - "file": Human-readable format to config.log_file
        - "both": Both outputs

    Handlers are attached to the "urikit" logger only, so applications
    embedding urikit keep control of the root logger.
    """
    if config is None:
        from .config import get_config

        config = get_config()

    urikit_logger = logging.getLogger("urikit")
    urikit_logger.setLevel(config.log_level)

    # Clear any existing handlers to avoid duplicates
    urikit_logger.handlers.clear()

    json_formatter = JsonFormatter()
    human_formatter = logging.Formatter(
        "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if config.log_mode in ("stderr", "both"):
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(json_formatter)
        urikit_logger.addHandler(stderr_handler)

    if config.log_mode in ("file", "both"):
        log_file = _get_log_file(config)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setFormatter(human_formatter)
        urikit_logger.addHandler(file_handler)

    urikit_logger.debug(
        "Logging initialized",
        extra={"log_mode": config.log_mode, "log_level": config.log_level},
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the urikit namespace.

    Args:
        name: Logger name (e.g., "factories.curie")

    Returns:
        Logger instance for "urikit.<name>"

    Example:
        >>> logger = get_logger("factories.curie")
        >>> logger.name
        'urikit.factories.curie'
    """
    return logging.getLogger(f"urikit.{name}")


def _get_log_file(config: "Config") -> Path:
    """
    Get log file path, auto-determining if not specified.

    Args:
        config: Configuration instance

    Returns:
        Path to log file
    """
    if config.log_file:
        return config.log_file

    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    return _get_log_directory() / f"urikit-{timestamp}.log"


def _get_log_directory() -> Path:
    """Get platform-appropriate log directory."""
    if sys.platform == "win32":
        return Path.home() / "AppData" / "Local" / "urikit" / "logs"
    return Path.home() / ".urikit" / "logs"
