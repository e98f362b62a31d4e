"""Utility functions for svgdump.

This module provides logging setup and run statistics.
"""

from svgdump.utils.logging import (
    DumpLogger,
    DumpStats,
    configure_logging,
)

__all__ = [
    "DumpLogger",
    "DumpStats",
    "configure_logging",
]
