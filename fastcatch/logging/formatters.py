"""
Custom log formatters.

Currently supports JSON formatting for structured logging.

Limitations:
- JSON logs include only timestamp, level, logger name and message by default.
- Extra fields passed to logger (via extra=...) are not included unless you extend the formatter.
"""

import json
import logging
from datetime import datetime


class JsonFormatter(logging.Formatter):
    """
    Format log records as JSON for structured logging.

    To include extra fields, subclass and extend this formatter.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the specified record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string containing the formatted log record
        """
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)
