import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict


class JsonFormatter(logging.Formatter):
    """Formatter that renders log records as structured JSON."""

    standard_attrs = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_payload["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self.standard_attrs and key not in log_payload:
                log_payload[key] = value

        return json.dumps(log_payload, default=str)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging to emit structured JSON to stderr."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    logging.basicConfig(level=level, handlers=[handler], force=True)
