"""Configuration management for rasterpath.

This module provides configuration management using Pydantic models.
Every setting has a default, so the library works without any configuration.

Key classes:
- TracingConfig: Per-grid tracing settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- RasterPathSettings: Main settings
"""

from rasterpath.config.settings import (
    LoggingConfig,
    ProcessingConfig,
    RasterPathSettings,
    TracingConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "ProcessingConfig",
    "RasterPathSettings",
    "TracingConfig",
    "get_default_settings",
]
