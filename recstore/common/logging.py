"""
Structured logging configuration for recstore components.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Any

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "extra"}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    fields = {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}
    context = getattr(record, "extra", None)
    if isinstance(context, dict):
        fields.update(context)
    return fields


class RecstoreJSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_data.update(_extra_fields(record))
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


def setup_logging(
    level: int | str = logging.INFO,
    json_format: bool = False,
    extra_fields: dict[str, Any] | None = None,
    stream=None,
) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for existing in root_logger.filters[:]:
        root_logger.removeFilter(existing)
    handler = logging.StreamHandler(stream or sys.stderr)
    formatter = (
        RecstoreJSONFormatter()
        if json_format
        else logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    if extra_fields:

        class ExtraFieldsFilter(logging.Filter):
            def filter(self, record):
                if not hasattr(record, "extra"):
                    record.extra = {}
                record.extra.update(extra_fields)
                return True

        # Handler-level so records from child loggers are tagged too.
        handler.addFilter(ExtraFieldsFilter())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
