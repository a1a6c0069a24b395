"""
Logging Configuration

Provides:
- CustomJsonFormatter: one JSON object per log record
- setup_logging: YAML dictConfig loader with ${VAR} environment substitution
"""

import json
import logging
import logging.config
import os
import string
from collections import ChainMap
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import yaml

from ..config import config

# Attributes every LogRecord carries; anything else came in through extra=.
_STANDARD_ATTRS = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}


class CustomJsonFormatter(logging.Formatter):
    """
    JSON Formatter.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level: Log level
      - logger: Logger name (e.g. lambdaproxy.codec)
      - message: Log message
      - exception: formatted traceback, when present
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def _render(path: Path) -> dict:
    # ${VAR} placeholders; settings values apply unless the environment overrides them.
    placeholders = ChainMap(os.environ, {"LOG_LEVEL": config.LOG_LEVEL})
    rendered = string.Template(path.read_text(encoding="utf-8")).safe_substitute(placeholders)
    return yaml.safe_load(rendered)


def setup_logging(config_path: Optional[str] = None) -> Optional[Path]:
    """
    Apply the YAML logging definition.

    Args:
        config_path: YAML file; defaults to LOG_CONFIG_PATH

    Returns:
        The file that was applied, or None when it was missing and
        basicConfig on stderr was used instead.
    """
    path = Path(config_path or config.LOG_CONFIG_PATH)
    if not path.is_file():
        logging.basicConfig(level=config.LOG_LEVEL)
        return None

    logging.config.dictConfig(_render(path))
    return path
