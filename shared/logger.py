"""
PassGauge Structured Logger
============================

:class:`GaugeLogger` is a :class:`logging.LoggerAdapter` bound to one
PassGauge component (``engine``, ``server``...). Records go to a Rich
console handler and, optionally, to a rotating file as plain text or
JSON lines.

Structured values are passed as keyword arguments::

    log.debug("Scored password", length=12, score=6, strength="Moderate")

Only the names in :data:`LOG_FIELDS` are accepted, so password material
has no route into a log record. The active operation is held in a
:class:`contextvars.ContextVar`, which keeps concurrent requests from
seeing each other's operation.

References:
    - Python logging cookbook. https://docs.python.org/3/howto/logging-cookbook.html
    - Rich logging handler. https://rich.readthedocs.io/en/latest/logging.html
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, MutableMapping

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from shared.config import GlobalConfig

# Structured values a record may carry; anything else is a TypeError.
LOG_FIELDS: tuple[str, ...] = (
    "length",
    "score",
    "strength",
    "tokens",
    "matcher",
    "cross_check",
    "kmp",
    "naive",
    "elapsed",
)

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    }
)

_current_operation: ContextVar[str | None] = ContextVar(
    "passgauge_operation", default=None
)


def current_operation() -> str | None:
    """Operation bound in the current context, if any."""
    return _current_operation.get()


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {name: getattr(record, name) for name in LOG_FIELDS if hasattr(record, name)}


# ============================== Formatters =================================


class _KeyValueFormatter(logging.Formatter):
    """Append ``key=value`` pairs for the structured fields of a record."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = " ".join(f"{k}={v}" for k, v in _record_fields(record).items())
        return f"{line} [{pairs}]" if pairs else line


class _JSONLinesFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``time``, ``level``, ``component``, ``message`` and, when
    present, ``operation``, ``fields`` and ``error``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "component": getattr(record, "component", record.name),
            "message": record.getMessage(),
        }
        operation = getattr(record, "operation", None)
        if operation:
            entry["operation"] = operation
        fields = _record_fields(record)
        if fields:
            entry["fields"] = fields
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


# ================================ Adapter ==================================


class GaugeLogger(logging.LoggerAdapter):
    """Component logger for PassGauge.

    Args:
        component:      Component name; the stdlib logger is ``passgauge.<component>``.
        log_level:      Minimum severity name.
        log_file:       Rotating log file, or ``None`` for no file output.
        json_logs:      Write JSON lines instead of plain text to *log_file*.
        console_output: Attach a Rich handler on stderr.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        console_output: bool = True,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
    ) -> None:
        logger = logging.getLogger(f"passgauge.{component}")
        logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
        logger.propagate = False

        # Loggers are process-wide; rebuilding one replaces its handlers.
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        if console_output:
            console = RichHandler(
                console=Console(theme=_LOG_THEME, stderr=True),
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            )
            console.setFormatter(_KeyValueFormatter("%(message)s"))
            logger.addHandler(console)

        if log_file is not None:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
            file_handler.setFormatter(
                _JSONLinesFormatter()
                if json_logs
                else _KeyValueFormatter(
                    "%(asctime)s | %(levelname)-8s | %(component)s | %(message)s"
                )
            )
            logger.addHandler(file_handler)

        super().__init__(logger, {"component": component})

    @classmethod
    def from_config(cls, component: str, settings: GlobalConfig) -> GaugeLogger:
        """Build a logger from the ``[global]`` configuration section."""
        return cls(
            component,
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
            console_output=settings.console_logging,
        )

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(self.extra or {})
        extra["operation"] = _current_operation.get()
        for name in list(kwargs):
            if name in LOG_FIELDS:
                extra[name] = kwargs.pop(name)
            elif name not in ("exc_info", "stack_info", "stacklevel", "extra"):
                raise TypeError(f"Unsupported log field: {name!r}")
        extra.update(kwargs.pop("extra", None) or {})
        kwargs["extra"] = extra
        return msg, kwargs

    @contextmanager
    def operation(self, name: str) -> Iterator[GaugeLogger]:
        """Tag every record logged in this context with ``operation=name``."""
        token = _current_operation.set(name)
        try:
            yield self
        finally:
            _current_operation.reset(token)

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log the elapsed time of the block at DEBUG level."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.debug("Completed: %s", label, elapsed=round(time.perf_counter() - start, 6))
