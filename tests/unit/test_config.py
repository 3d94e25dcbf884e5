"""Unit tests for configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from arcpath import Path as ArcPath
from arcpath.config import (
    DEFAULT_TOLERANCE,
    ArcpathSettings,
    BooleanOperation,
    GeometryConfig,
    get_default_settings,
)


class TestGeometryConfig:
    """Tests for the tolerance context."""

    def test_defaults(self):
        """Test default tolerances."""
        config = GeometryConfig()
        assert config.epsilon == 1e-5
        assert config.collinear_epsilon == 1e-6
        assert config.circle_epsilon == 1e-4
        assert config.merge_distance == 0.1
        assert config.loop_step_limit == 10
        assert config.flatten_angle == 0.01

    def test_frozen(self):
        """Test the shared default cannot be modified."""
        with pytest.raises(ValidationError):
            DEFAULT_TOLERANCE.epsilon = 1.0

    @pytest.mark.parametrize(
        "field, value",
        [
            ("epsilon", 0.0),
            ("epsilon", 2.0),
            ("merge_distance", -1.0),
            ("loop_step_limit", 1),
            ("flatten_angle", 1.0),
        ],
    )
    def test_validation(self, field: str, value: float):
        """Test out-of-range tolerances are rejected."""
        with pytest.raises(ValidationError):
            GeometryConfig(**{field: value})

    def test_paths_share_their_tolerance(self):
        """Test paths derived from a path keep its tolerance."""
        loose = GeometryConfig(merge_distance=5.0)
        path = ArcPath.from_d("M 0 0 L 1 0", loose)
        assert path.invert().tolerance is loose
        assert path.translate((1, 1)).tolerance is loose

        path.merge(ArcPath.from_d("M 4 0 L 5 0"))
        assert path.to_string() == "M 0 0 L 1 0 L 5 0"


class TestSettings:
    """Tests for application settings."""

    def test_default_settings(self):
        """Test default settings aggregate every section."""
        settings = get_default_settings()
        assert isinstance(settings, ArcpathSettings)
        assert settings.geometry == GeometryConfig()
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"
        assert settings.logging.file_log_level == "DEBUG"
        assert settings.debug.output_dir is None

    def test_paths_are_coerced(self):
        """Test string paths become Path objects."""
        settings = ArcpathSettings.model_validate(
            {"logging": {"log_file": "run.log"}, "debug": {"output_dir": "snapshots"}}
        )
        assert settings.logging.log_file == Path("run.log")
        assert settings.debug.output_dir == Path("snapshots")

    def test_boolean_operation_values(self):
        """Test operation names used on the command line."""
        assert BooleanOperation("difference") is BooleanOperation.DIFFERENCE
        assert [op.value for op in BooleanOperation] == ["intersection", "difference", "union"]
