"""Log output for the ``invtrack`` command.

Modules log through ``logging.getLogger(__name__)``; this module only
decides where those records go.  Everything is written to stderr so that
tables printed by the CLI on stdout stay clean.
"""

from __future__ import annotations

import json
import logging
import logging.config

CONSOLE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_STANDARD_FIELDS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with ``extra=`` fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_FIELDS and key not in entry
        )
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def logging_config(level: str, json_logs: bool = False) -> dict:
    """Build the ``dictConfig`` mapping for a CLI run."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": CONSOLE_FORMAT, "datefmt": "%H:%M:%S"},
            "json": {"()": JsonFormatter},
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "json" if json_logs else "plain",
            }
        },
        "loggers": {
            "invtrack": {"handlers": ["stderr"], "level": level, "propagate": False},
        },
    }


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    logging.config.dictConfig(logging_config(level, json_logs))
