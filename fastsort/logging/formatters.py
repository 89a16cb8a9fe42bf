"""
Log formatters for fastsort.
"""

import json
import logging
from datetime import datetime

# Attributes passed through ``extra=`` that are copied into JSON output
CONTEXT_FIELDS = ("sort_field", "direction", "dependency")


class JsonFormatter(logging.Formatter):
    """
    Format log records as single-line JSON.

    Besides timestamp, level, logger and message, the sort context attached
    with ``extra={"sort_field": ..., "direction": ...}`` is included when
    present, so rejected sorts can be aggregated by field.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)
        return json.dumps(log_data)
