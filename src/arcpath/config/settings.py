"""Configuration settings for arcpath."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class BooleanOperation(str, Enum):
    """Boolean operation between two closed paths."""

    INTERSECTION = "intersection"
    DIFFERENCE = "difference"
    UNION = "union"


class GeometryConfig(BaseModel):
    """Tolerances used by the vector, circle and path primitives.

    A single instance is shared by every primitive call that does not receive
    an explicit one, so the model is frozen.
    """

    model_config = ConfigDict(frozen=True)

    epsilon: float = Field(
        default=1e-5,
        gt=0.0,
        le=1.0,
        description="Point coincidence, bounding-box inflation and parameter range tolerance",
    )
    collinear_epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Cross-product threshold for collinearity and parallel lines",
    )
    circle_epsilon: float = Field(
        default=1e-4,
        gt=0.0,
        le=1.0,
        description="Chord slack, discriminant snapping and center comparison for circles",
    )
    merge_distance: float = Field(
        default=1e-1,
        gt=0.0,
        description="Largest endpoint gap accepted when merging two subpaths",
    )
    loop_step_limit: int = Field(
        default=10,
        ge=2,
        le=10_000,
        description="Iteration cap of the boolean loop walk",
    )
    flatten_angle: float = Field(
        default=0.01,
        gt=0.0,
        le=0.5,
        description="Angular step in radians used when flattening arcs into polylines",
    )


DEFAULT_TOLERANCE = GeometryConfig()


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


class DebugConfig(BaseModel):
    """Debug visualization configuration."""

    output_dir: Path | None = Field(
        default=None,
        description="Directory receiving SVG snapshots of failing operations (None = disabled)",
    )


class ArcpathSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    debug: DebugConfig = Field(default_factory=DebugConfig)


def get_default_settings() -> ArcpathSettings:
    """Get default application settings."""
    return ArcpathSettings()
