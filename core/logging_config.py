"""Logging setup: readable console output plus JSON lines on disk."""

import json
import logging
import logging.handlers
from datetime import UTC, datetime
from pathlib import Path

# Extra fields attached by the dispatcher and commands
EXTRA_FIELDS = ("destination", "locale", "request_type", "user_id", "command")


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Formats log records as JSON for easier parsing with tools like jq, grep,
    or log aggregators.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def configure_logging(log_file: Path, level: int = logging.INFO) -> None:
    """Install the console and rotating JSON file handlers on the root logger.

    Args:
        log_file: Path of the JSON log file.
        level: Minimum level for both handlers.
    """
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    file_handler = logging.handlers.RotatingFileHandler(
        str(log_file),
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(StructuredFormatter())

    logging.basicConfig(
        level=level,
        handlers=[console_handler, file_handler],
        force=True,
    )
