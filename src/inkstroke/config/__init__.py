"""Configuration management for inkstroke.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, presets or defaults.

Key classes:
- DrawingConfig: Pen width, color, smoothing and velocity response
- ExportConfig: Raster export background and cropping
- LoggingConfig: Logging settings
- InkSettings: Main application settings
"""

from inkstroke.config.settings import (
    PRESETS,
    Background,
    DrawingConfig,
    ExportConfig,
    InkSettings,
    LoggingConfig,
    get_default_settings,
    get_preset,
)

__all__ = [
    "PRESETS",
    "Background",
    "DrawingConfig",
    "ExportConfig",
    "InkSettings",
    "LoggingConfig",
    "get_default_settings",
    "get_preset",
]
