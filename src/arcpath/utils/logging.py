"""Logging utilities for arcpath.

Library modules log through ``logging.getLogger(__name__)``. The command-line
tool calls :func:`configure_logging` once per run, which routes those records
to stderr and an optional log file, and sets up structlog for the tool's own
operation records.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

FILE_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_installed_handlers: list[logging.Handler] = []


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


@dataclass
class OperationStats:
    """Counters for the path operations run in one session."""

    completed_count: int = 0
    error_count: int = 0
    segments_out: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    def record_success(self, segments: int) -> None:
        self.completed_count += 1
        self.segments_out += segments
        self.end_time = time.perf_counter()

    def record_failure(self, operation: str, message: str) -> None:
        self.error_count += 1
        self.errors.append((operation, message))
        self.end_time = time.perf_counter()

    @property
    def duration_seconds(self) -> float:
        """Time from the first operation start to the last result."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        return self.end_time - self.start_time


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Send log records to stderr and, optionally, to a file.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_file: File receiving every record at ``file_level`` and above
        console_level: Lowest level shown on stderr
        file_level: Lowest level written to ``log_file``
        quiet: Only show errors on stderr, whatever ``console_level`` says

    Returns:
        The structlog logger of the command-line tool
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = []
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(_level(file_level))
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else _level(console_level))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    handlers.append(console_handler)

    for handler in handlers:
        root_logger.addHandler(handler)
        _installed_handlers.append(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("arcpath")
    logger.info(
        "Logging initialized",
        log_file=None if log_file is None else str(log_file),
        console_level="ERROR" if quiet else console_level.upper(),
    )
    return logger


class OperationLogger:
    """Logs path operations and keeps their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = OperationStats()

    def log_operation_start(self, operation: str, **operands: str) -> None:
        if self._stats.start_time is None:
            self._stats.start_time = time.perf_counter()
        self._logger.debug("Operation started", operation=operation, **operands)

    def log_operation_complete(self, operation: str, segments: int, duration_ms: float) -> None:
        self._logger.info(
            "Operation complete",
            operation=operation,
            segments=segments,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.record_success(segments)

    def log_operation_error(self, operation: str, error: Exception) -> None:
        """Log a failed operation with the type of error that stopped it."""
        self._logger.error(
            "Operation failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.record_failure(operation, str(error))

    @property
    def stats(self) -> OperationStats:
        return self._stats
