"""Configuration settings for rasterpath."""

from pathlib import Path

from pydantic import BaseModel, Field


class TracingConfig(BaseModel):
    """Configuration for tracing a single grid."""

    verify_coverage: bool = Field(
        default=False,
        description="Rasterize the traced outlines and compare them with the input grid",
    )
    canonical_order: bool = Field(
        default=True,
        description="Start each outline at its top-left vertex and sort outlines by it",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None = auto, 1 = run in-process)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RasterPathSettings(BaseModel):
    """Main library settings."""

    tracing: TracingConfig = Field(default_factory=TracingConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RasterPathSettings:
    """Get default settings."""
    return RasterPathSettings()
