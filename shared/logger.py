"""
Keyspace Structured Logger
===========================

:class:`KeyspaceLogger` writes Rich-formatted records to stderr and,
when a log file is configured, plain-text or JSON-lines records to a
rotating file.

Records may carry structured fields as keyword arguments::

    log.info("Projection done", length=12, pool_size=94)

Field names that could hold secret material (``password``,
``candidate``, ``confirmation``) are replaced with ``"[redacted]"``
before the record is emitted, so a careless call site cannot leak a
password into a log file.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler

SECRET_FIELDS = frozenset({"password", "candidate", "confirmation"})
REDACTED = "[redacted]"

_PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def redact(fields: dict[str, Any]) -> dict[str, Any]:
    """Return *fields* with every secret-bearing value masked."""
    return {
        key: REDACTED if key.lower() in SECRET_FIELDS else value
        for key, value in fields.items()
    }


class _JSONLinesFormatter(logging.Formatter):
    """One JSON object per record: time, level, logger, message, context."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "component": getattr(record, "component", None),
        }
        operation = getattr(record, "operation", None)
        if operation:
            entry["operation"] = operation
        fields = getattr(record, "fields", None)
        if fields:
            entry["fields"] = fields
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class KeyspaceLogger:
    """Logger bound to one Keyspace component (``"engine"``, ``"cli"`` ...).

    Usage::

        log = KeyspaceLogger("engine", log_file="keyspace.log", json_logs=True)
        with log.operation("simulate_attack"):
            log.info("Brute-force projection", length=12, pool_size=94)

    Args:
        component:      Name appended to the ``keyspace.`` logger namespace.
        log_level:      Minimum level name (DEBUG, INFO, WARNING, ...).
        log_file:       Rotating log file; ``None`` disables file output.
        json_logs:      Emit JSON lines instead of plain text to the file.
        max_bytes:      Rotation threshold for the log file.
        backup_count:   Rotated files to keep.
        console_output: Attach the Rich stderr handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self.component = component
        self._operation: str | None = None
        level = getattr(logging, log_level.upper(), logging.INFO)

        self.logger = logging.getLogger(f"keyspace.{component}")
        self.logger.setLevel(level)
        self.logger.propagate = False

        # Loggers are process-wide; release handlers from a previous instance.
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if console_output:
            self.logger.addHandler(
                RichHandler(
                    console=Console(stderr=True),
                    level=level,
                    show_path=False,
                    markup=False,
                    rich_tracebacks=True,
                )
            )

        if log_file is not None:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(
                _JSONLinesFormatter()
                if json_logs
                else logging.Formatter(_PLAIN_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
            )
            self.logger.addHandler(file_handler)

    # ------------------------------------------------------------------ #
    #  Context
    # ------------------------------------------------------------------ #

    @contextmanager
    def operation(self, name: str) -> Iterator[KeyspaceLogger]:
        """Tag every record inside the block with ``operation=name``."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log the wall-clock duration of the block at DEBUG level."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = round((time.perf_counter() - start) * 1000, 3)
            self.debug("%s took %.3f ms", label, elapsed_ms, elapsed_ms=elapsed_ms)

    # ------------------------------------------------------------------ #
    #  Emitters
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple[Any, ...], fields: dict[str, Any]) -> None:
        if not self.logger.isEnabledFor(level):
            return
        self.logger.log(
            level,
            msg,
            *args,
            extra={
                "component": self.component,
                "operation": self._operation,
                "fields": redact(fields),
            },
        )

    def debug(self, msg: str, *args: Any, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, args, fields)

    def info(self, msg: str, *args: Any, **fields: Any) -> None:
        self._log(logging.INFO, msg, args, fields)

    def warning(self, msg: str, *args: Any, **fields: Any) -> None:
        self._log(logging.WARNING, msg, args, fields)
