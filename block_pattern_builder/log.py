"""
Logging setup

Plain-text logging by default; JSON-formatted records when structured
output is requested (suitable for log aggregation systems).
"""

import json
import logging
from datetime import datetime, timezone

# Extra attributes copied onto the JSON payload when present on a record
EXTRA_FIELDS = ("component", "hook", "manifest", "asset", "method", "path", "status_code")


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, default=str)


def configure_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure the root logger (no-op once the root logger has handlers).

    Args:
        level:       Level name, e.g. "DEBUG" or "INFO".
        json_format: Emit one JSON object per line instead of plain text.
    """
    if json_format:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
        logging.basicConfig(level=level.upper(), handlers=[handler])
    else:
        logging.basicConfig(
            level=level.upper(),
            format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        )
