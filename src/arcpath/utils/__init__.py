"""Utility functions for arcpath.

This module provides utility functions including:

- Logging setup and configuration
- Operation statistics for the command-line tool
- Debug geometry output for failing operations
"""

from arcpath.utils.debug import (
    debug_geometry,
    debug_output_dir,
    disable_debug_output,
    enable_debug_output,
)
from arcpath.utils.logging import (
    OperationLogger,
    OperationStats,
    configure_logging,
)

__all__ = [
    "OperationLogger",
    "OperationStats",
    "configure_logging",
    "debug_geometry",
    "debug_output_dir",
    "disable_debug_output",
    "enable_debug_output",
]
