"""Logging utilities for Photosquid."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class SessionStats:
    """Statistics from an editing session."""

    events_dispatched: int = 0
    shapes_created: int = 0
    shapes_deleted: int = 0
    undo_count: int = 0
    redo_count: int = 0
    history_pushes: int = 0
    captures: Counter[str] = field(default_factory=Counter)

    @property
    def shapes_alive(self) -> int:
        """Shapes created and not deleted, ignoring undo/redo."""
        return self.shapes_created - self.shapes_deleted


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"photosquid_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("photosquid")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class EditorLogger:
    """Logger for tracking editor activity and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("photosquid.editor")
        self._stats = SessionStats()

    def log_event(self, event: str, capture: str) -> None:
        """Log an input event and the capture it resolved to."""
        self._logger.debug("Event dispatched", input_event=event, capture=capture)
        self._stats.events_dispatched += 1
        self._stats.captures[capture] += 1

    def log_shape_created(self, kind: str, index: int) -> None:
        self._logger.debug("Shape created", kind=kind, index=index)
        self._stats.shapes_created += 1

    def log_shape_deleted(self, kind: str, index: int) -> None:
        self._logger.debug("Shape deleted", kind=kind, index=index)
        self._stats.shapes_deleted += 1

    def log_selection(self, count: int) -> None:
        self._logger.debug("Selection changed", selected=count)

    def log_operation(self, operation: str, collectively: bool) -> None:
        """Log the start of a keyboard-initiated gesture."""
        self._logger.debug("Operation initiated", operation=operation, collectively=collectively)

    def log_history_push(self, entries: int) -> None:
        self._logger.debug("History marker", entries=entries)
        self._stats.history_pushes += 1

    def log_undo(self, applied: bool) -> None:
        self._logger.debug("Undo", applied=applied)
        if applied:
            self._stats.undo_count += 1

    def log_redo(self, applied: bool) -> None:
        self._logger.debug("Redo", applied=applied)
        if applied:
            self._stats.redo_count += 1

    @property
    def stats(self) -> SessionStats:
        """Get current session statistics."""
        return self._stats
