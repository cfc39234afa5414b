"""Logging setup for seeding runs (plain or JSON lines)."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that only matter when something is wrong
QUIET_LOGGERS = ("faker", "psycopg")


def _formatter_for(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=STANDARD_DATEFMT)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: IO[str] | None = None,
) -> None:
    """Route all seeding output through one root handler.

    Any handler already on the root logger is replaced, so calling this
    twice does not duplicate lines.

    Parameters
    ----------
    level : str
        Level name; unknown names fall back to INFO.
    format_type : str
        ``"standard"`` or ``"json"``.
    stream : IO[str] | None
        Destination, stdout by default.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(_formatter_for(format_type))

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)

    logging.getLogger("listing_seed").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Run context attached by :class:`BatchLoggerAdapter` (``record.extra``)
    is merged into the top level.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        entry.update(getattr(record, "extra", None) or {})
        return json.dumps(entry, default=str)


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass ``__name__``."""
    return logging.getLogger(name)


class BatchLoggerAdapter(logging.LoggerAdapter):
    """Attach seeding-run context (run id, phase) to every record.

    The context is stored on ``record.extra`` so :class:`JsonFormatter`
    emits it as top-level fields; the standard formatter ignores it.
    """

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        context = dict(self.extra or {})
        context.update(kwargs.pop("extra", None) or {})
        kwargs["extra"] = {"extra": context}
        return msg, kwargs

    def with_phase(self, phase: str) -> "BatchLoggerAdapter":
        """Return an adapter sharing this run context, tagged with ``phase``."""
        return BatchLoggerAdapter(self.logger, {**(self.extra or {}), "phase": phase})
