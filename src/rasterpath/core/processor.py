"""Parallel tracing of independent grids.

Each grid's trace is isolated and stateless relative to the others, so a batch
fans out over a ProcessPoolExecutor. Grids and outlines cross the process
boundary as plain dictionaries.

Key components:
- process_grid: Top-level picklable function for parallel execution
- BatchTracer: Orchestrator for a batch of named grids
"""

import time
import traceback
from collections.abc import Callable, Mapping
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from rasterpath.config import RasterPathSettings, TracingConfig
from rasterpath.core.tracer import OutlineTracer
from rasterpath.domain import Grid, Outline
from rasterpath.utils import ProcessingLogger, ProcessingStats, configure_logging


def process_grid(grid_dict: dict[str, Any], config_dict: dict[str, Any]) -> dict[str, Any]:
    """Trace a single serialized grid.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        grid_dict: Serialized grid (from Grid.to_dict())
        config_dict: Serialized tracing configuration

    Returns:
        Dictionary containing either:
        - Success: {"outlines": [outline_dict, ...], "duration_ms": float}
        - Error: {"error": str, "error_type": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        grid = Grid.from_dict(grid_dict)
        tracer = OutlineTracer(TracingConfig(**config_dict))
        outlines = tracer.trace(grid)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "outlines": [outline.to_dict() for outline in outlines],
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


@dataclass
class BatchResult:
    """Outcome of a batch run.

    Attributes:
        outlines: Traced outlines per grid name, for grids that succeeded
        stats: Counts, timings and per-grid errors
    """

    outlines: dict[str, list[Outline]] = field(default_factory=dict)
    stats: ProcessingStats = field(default_factory=ProcessingStats)

    @property
    def failed(self) -> list[str]:
        """Names of grids that could not be traced."""
        return [name for name, _ in self.stats.errors]


class BatchTracer:
    """Traces many grids in parallel.

    Example:
        tracer = BatchTracer(RasterPathSettings())
        result = tracer.process({"qr": grid}, max_workers=4)
        outlines = result.outlines["qr"]
    """

    def __init__(self, config: RasterPathSettings | None = None) -> None:
        """Initialize batch tracer.

        Args:
            config: Settings with tracing, processing and logging config
        """
        self.config = config or RasterPathSettings()
        self.logger = configure_logging(
            log_file=self.config.logging.log_file,
            console_level=self.config.logging.log_level,
            file_level=self.config.logging.file_log_level,
        )

    def process(
        self,
        grids: Mapping[str, Grid],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> BatchResult:
        """Trace every grid in a batch.

        Args:
            grids: Grids keyed by name
            max_workers: Maximum worker processes (None = config default,
                1 = trace in the calling process)
            progress_callback: Optional callback(completed, total, grid_name, success)

        Returns:
            BatchResult with outlines per grid and statistics

        Raises:
            KeyboardInterrupt: If processing is cancelled by user
        """
        processing_logger = ProcessingLogger(self.logger)
        result = BatchResult(stats=processing_logger.stats)
        result.stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        config_dict = self.config.tracing.model_dump()

        self.logger.info(
            "Starting batch",
            grid_count=len(grids),
            max_workers=max_workers,
        )

        for name, grid in grids.items():
            processing_logger.log_grid_start(name, grid.width, grid.height)

        if max_workers == 1:
            total = len(grids)
            for completed, (name, grid) in enumerate(grids.items(), start=1):
                outcome = process_grid(grid.to_dict(), config_dict)
                success = self._collect(name, outcome, result, processing_logger)
                if progress_callback is not None:
                    progress_callback(completed, total, name, success)
        else:
            self._process_parallel(
                grids, config_dict, max_workers, result, processing_logger, progress_callback
            )

        result.stats.end_time = time.time()

        self.logger.info(
            "Batch complete",
            processed=result.stats.processed_count,
            errors=result.stats.error_count,
            outlines=result.stats.outline_count,
            duration_seconds=round(result.stats.duration_seconds, 2),
        )

        return result

    def _process_parallel(
        self,
        grids: Mapping[str, Grid],
        config_dict: dict[str, Any],
        max_workers: int | None,
        result: BatchResult,
        processing_logger: ProcessingLogger,
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> None:
        """Trace grids using ProcessPoolExecutor."""
        total = len(grids)
        completed = 0
        pending_futures: dict[Future, str] = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for name, grid in grids.items():
                future = executor.submit(process_grid, grid.to_dict(), config_dict)
                pending_futures[future] = name

            try:
                for future in as_completed(list(pending_futures)):
                    name = pending_futures.pop(future)

                    try:
                        outcome = future.result()
                    except Exception as e:
                        # Executor-level error (worker died, pickling failed)
                        outcome = {
                            "error": str(e),
                            "error_type": type(e).__name__,
                            "traceback": traceback.format_exc(),
                        }
                    success = self._collect(name, outcome, result, processing_logger)

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, name, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                result.stats.was_cancelled = True
                result.stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise

    @staticmethod
    def _collect(
        name: str,
        outcome: dict[str, Any],
        result: BatchResult,
        processing_logger: ProcessingLogger,
    ) -> bool:
        """Record one worker outcome; returns True on success."""
        if "error" in outcome:
            processing_logger.log_grid_error(
                grid_name=name,
                error=outcome["error"],
                error_type=outcome["error_type"],
                traceback=outcome.get("traceback"),
            )
            return False

        outlines = [Outline.from_dict(data) for data in outcome["outlines"]]
        result.outlines[name] = outlines
        processing_logger.log_grid_complete(
            grid_name=name,
            outline_count=len(outlines),
            hole_count=sum(1 for outline in outlines if outline.is_hole),
            duration_ms=outcome.get("duration_ms", 0.0),
        )
        return True
