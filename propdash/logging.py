"""Logging setup for propdash: plain text for terminals, JSON for collectors."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from propdash.exceptions import ConfigurationError

ROOT_LOGGER = "propdash"
LOG_FORMATS = ("standard", "json")

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure the root logger for propdash.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        "standard" or "json".
    stream : TextIO | None
        Destination; defaults to stdout.

    Raises
    ------
    ConfigurationError
        If ``format_type`` is not a known format.
    """
    if format_type not in LOG_FORMATS:
        raise ConfigurationError(
            f"Unknown log format {format_type!r}; expected one of {list(LOG_FORMATS)}"
        )
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger(ROOT_LOGGER).setLevel(log_level)

    # Faker logs every provider lookup at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, including fields passed via ``extra=``.

    Values json cannot encode (Decimal, date, enums) are written with
    ``str``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``propdash`` namespace.

    Names outside it (scripts, ``__main__``) are nested under
    ``propdash`` so that :func:`setup_logging` levels apply to them.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
