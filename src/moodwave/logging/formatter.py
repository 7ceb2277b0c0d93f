"""JSON log formatter for structured logging output."""

import json
import logging
from datetime import UTC, datetime

# Optional per-record attributes, set via ``extra=`` or the request-id filter
CONTEXT_FIELDS = ("request_id", "user_id", "mood", "status_code")


class JSONLogFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Output format::

        {"timestamp": "...", "level": "INFO", "service": "moodwave",
         "logger": "moodwave.recommendations.service", "message": "...",
         "request_id": "...", "mood": "chill"}

    Context fields are only emitted when the record carries a non-empty value.
    """

    def __init__(self, service: str = "moodwave") -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            {name: value for name in CONTEXT_FIELDS if (value := getattr(record, name, None)) not in (None, "")}
        )

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
