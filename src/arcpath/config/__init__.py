"""Configuration management for arcpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Tolerance context threaded through every geometric primitive
- LoggingConfig: Logging settings
- DebugConfig: Debug visualization output settings
- ArcpathSettings: Main application settings
"""

from arcpath.config.settings import (
    DEFAULT_TOLERANCE,
    ArcpathSettings,
    BooleanOperation,
    DebugConfig,
    GeometryConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_TOLERANCE",
    "ArcpathSettings",
    "BooleanOperation",
    "DebugConfig",
    "GeometryConfig",
    "LoggingConfig",
    "get_default_settings",
]
