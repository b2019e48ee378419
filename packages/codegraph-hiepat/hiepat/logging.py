"""
Structured Logging for hiepat

Provides consistent, structured logging across the codebase.
Compatible with JSON logging for production environments.

Importing the library never attaches handlers; call ``setup_logger`` or
``configure_logging`` from the application that drives the matcher.
"""

import json
import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

if TYPE_CHECKING:
    from hiepat.config import HiepatSettings

ROOT_LOGGER_NAME = "hiepat"
PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_HANDLER_MARKER = "_hiepat_handler"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys() | {"message", "asctime"}
)

# ==============================================================================
# Logger Configuration
# ==============================================================================


def _qualify(name: str) -> str:
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return name
    return f"{ROOT_LOGGER_NAME}.{name}"


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: int = logging.INFO,
    structured: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a hiepat handler to a logger under the ``hiepat`` namespace.

    Args:
        name: ``"hiepat"``, a dotted child such as ``"hiepat.edsl"``, or a
            bare suffix such as ``"edsl"``
        level: Logging level for the logger and its handler
        structured: Emit one JSON object per record
        stream: Output stream, ``sys.stderr`` by default

    Returns:
        Configured logger

    Calling again replaces the handler installed by the previous call and
    leaves handlers added by the application alone.

    Example:
        logger = setup_logger("edsl", level=logging.DEBUG, structured=True)
        logger.debug("Built name pattern", extra={"names": 3})
    """
    logger = logging.getLogger(_qualify(name))
    logger.setLevel(level)

    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setLevel(level)
    setattr(handler, _HANDLER_MARKER, True)

    if structured:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(fmt=PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def configure_logging(settings: "HiepatSettings", stream: TextIO | None = None) -> logging.Logger:
    """Apply ``HiepatSettings`` logging options to the package logger."""
    return setup_logger(
        ROOT_LOGGER_NAME,
        level=logging.getLevelName(settings.log_level),
        structured=settings.structured_logs,
        stream=stream,
    )


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=repr)


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger in the ``hiepat`` namespace; ``"edsl"`` and ``"hiepat.edsl"`` are the same logger."""
    return logging.getLogger(ROOT_LOGGER_NAME if name is None else _qualify(name))


__all__ = [
    "ROOT_LOGGER_NAME",
    "setup_logger",
    "configure_logging",
    "get_logger",
    "StructuredFormatter",
]
