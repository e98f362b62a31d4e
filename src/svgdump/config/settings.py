"""Configuration settings for svgdump."""

from pathlib import Path

from pydantic import BaseModel, Field

SVG_TABLE_TAG = "SVG "


class ReaderConfig(BaseModel):
    """Configuration for locating the SVG table in a font file."""

    font_number: int = Field(
        default=0,
        ge=0,
        description="Face index inside a font collection (ignored for single fonts)",
    )
    table_tag: str = Field(
        default=SVG_TABLE_TAG,
        min_length=4,
        max_length=4,
        description="Table directory tag of the SVG table",
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


class SvgDumpSettings(BaseModel):
    """Main application settings."""

    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SvgDumpSettings:
    """Get default application settings."""
    return SvgDumpSettings()
