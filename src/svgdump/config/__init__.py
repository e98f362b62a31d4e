"""Configuration management for svgdump.

This module provides configuration management using Pydantic models.
Configuration is built from CLI arguments or defaults.

Key classes:
- ReaderConfig: Font and table selection settings
- LoggingConfig: Logging settings
- SvgDumpSettings: Main application settings
"""

from svgdump.config.settings import (
    SVG_TABLE_TAG,
    LoggingConfig,
    ReaderConfig,
    SvgDumpSettings,
    get_default_settings,
)

__all__ = [
    "SVG_TABLE_TAG",
    "LoggingConfig",
    "ReaderConfig",
    "SvgDumpSettings",
    "get_default_settings",
]
