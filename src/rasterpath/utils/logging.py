"""Logging utilities for rasterpath."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_PREFIX = "rasterpath."


@dataclass
class ProcessingStats:
    """Statistics from a batch tracing run."""

    processed_count: int = 0
    error_count: int = 0
    outline_count: int = 0
    hole_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    grid_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_grid_time_ms(self) -> float | None:
        """Average tracing time per grid in milliseconds."""
        if not self.grid_timings_ms:
            return None
        return sum(self.grid_timings_ms) / len(self.grid_timings_ms)


def _replace_handler(root_logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(_HANDLER_PREFIX + name)
    for existing in list(root_logger.handlers):
        if existing.get_name() == handler.get_name():
            root_logger.removeHandler(existing)
            existing.close()
    root_logger.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _replace_handler(root_logger, file_handler, "file")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _replace_handler(root_logger, console_handler, "console")

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

    logger = structlog.get_logger("rasterpath")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking batch progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_grid_start(self, grid_name: str, width: int, height: int) -> None:
        """Log start of grid tracing."""
        self._logger.debug("Tracing grid", grid=grid_name, width=width, height=height)

    def log_grid_complete(
        self,
        grid_name: str,
        outline_count: int,
        hole_count: int,
        duration_ms: float,
    ) -> None:
        """Log successful grid tracing."""
        self._logger.info(
            "Grid traced",
            grid=grid_name,
            outlines=outline_count,
            holes=hole_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.outline_count += outline_count
        self._stats.hole_count += hole_count
        self._stats.grid_timings_ms.append(duration_ms)

    def log_grid_error(
        self,
        grid_name: str,
        error: str,
        error_type: str,
        traceback: str | None = None,
    ) -> None:
        """Log grid tracing error."""
        self._logger.error(
            "Grid tracing failed",
            grid=grid_name,
            error=error,
            error_type=error_type,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((grid_name, error))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
