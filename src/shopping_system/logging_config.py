"""Configure application logging using the Python standard library.

This module defines a function that sets up the root logger with a
rotating JSON file handler and a plain stderr handler.  The file gets
every record at the configured level as one JSON object per line
(timestamp, level, module, message and any ``extra`` context).  The
console only shows warnings and above so that log output does not
interleave with the interactive menu.
"""

import json
import logging
import logging.handlers
import os
from datetime import datetime, UTC

LOG_FILE_NAME = "shopping_system.log"


class ConsoleFilter(logging.Filter):
    """Drop records logged with ``extra={"file_only": True}``."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not getattr(record, "file_only", False)


class JsonFormatter(logging.Formatter):
    """Format log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "module": record.module,
            "message": record.getMessage(),
        }
        # Context passed as extra={"extra": {...}} is merged top-level
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            log_record.update(extra)
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def configure_logging(
    log_dir: str = "logs",
    level: int = logging.INFO,
    console_level: int = logging.WARNING,
) -> None:
    """Configure root logger with JSON file output and a stderr echo.

    Args:
        log_dir: Directory where log files are written.  The directory
            will be created if it does not exist.
        level: Logging level for the root logger and the file handler.
        console_level: Minimum level echoed to stderr.
    """
    os.makedirs(log_dir, exist_ok=True)
    logger = logging.getLogger()
    logger.setLevel(level)
    # Remove any default handlers (e.g. from basicConfig)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    console_handler.setLevel(console_level)
    console_handler.addFilter(ConsoleFilter())
    logger.addHandler(console_handler)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, LOG_FILE_NAME),
        maxBytes=5 * 1024 * 1024,  # 5 MB per log file
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(JsonFormatter())
    file_handler.setLevel(level)
    logger.addHandler(file_handler)
