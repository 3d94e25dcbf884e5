"""Tests for affine transforms and their application to paths."""

import math

import pytest

from arcpath import Path
from arcpath.core.transform import AffineTransform
from arcpath.exceptions import ImpossibleGeometryError, PathSyntaxError, UnsupportedGeometryError


class TestAffineTransform:
    """Tests for the transform algebra."""

    def test_svg_functions_apply_right_to_left(self) -> None:
        """The last function in the attribute acts first."""
        transform = AffineTransform.from_svg("translate(10 20) scale(2)")
        assert transform.apply((1, 1)) == pytest.approx((12, 22))

    def test_rotate_about_center(self) -> None:
        """``rotate(angle cx cy)`` turns about the given point."""
        transform = AffineTransform.from_svg("rotate(90 5 5)")
        assert transform.apply((10, 5)) == pytest.approx((5, 10))

    def test_matrix_and_commas(self) -> None:
        """``matrix`` takes the six coefficients directly."""
        transform = AffineTransform.from_svg("matrix(1,0,0,1,7,-3)")
        assert transform == AffineTransform(e=7, f=-3)

    def test_wrong_argument_count(self) -> None:
        """Functions reject the wrong number of arguments."""
        with pytest.raises(PathSyntaxError):
            AffineTransform.from_svg("matrix(1 2 3)")

    def test_compose_and_then(self) -> None:
        """``then`` is ``compose`` with the operands swapped."""
        move = AffineTransform.translation(1)
        grow = AffineTransform.scaling(2)
        assert move.then(grow).apply((0, 0)) == pytest.approx((2, 0))
        assert move.compose(grow).apply((0, 0)) == pytest.approx((1, 0))

    def test_inverse(self) -> None:
        """The inverse undoes the map."""
        transform = AffineTransform.from_svg("translate(3 4) rotate(30) scale(2)")
        point = transform.inverse().apply(transform.apply((7, -2)))
        assert point == pytest.approx((7, -2))

    def test_singular_has_no_inverse(self) -> None:
        """A map collapsing the plane cannot be inverted."""
        with pytest.raises(ImpossibleGeometryError):
            AffineTransform.scaling(0).inverse()

    def test_conformal_maps(self) -> None:
        """Rotations, uniform scalings and reflections keep circles round."""
        assert AffineTransform.rotation(0.3).is_conformal()
        assert AffineTransform.scaling(3).is_conformal()
        assert AffineTransform.scaling(3).scale_factor == pytest.approx(3)
        reflection = AffineTransform.scaling(-1, 1)
        assert reflection.is_conformal()
        assert reflection.is_orientation_reversing
        assert not AffineTransform.scaling(2, 1).is_conformal()
        assert not AffineTransform.from_svg("skewX(30)").is_conformal()


class TestPathTransform:
    """Tests for transforming paths."""

    def test_uniform_scale_scales_radii(self) -> None:
        """Arc radii grow with the points."""
        circle = Path.make_circle(1)
        assert circle.scale(2).to_string() == "M 2 0 A 2 2 0 0 1 -2 0 A 2 2 0 0 1 2 0 Z"
        assert circle.to_string() == "M 1 0 A 1 1 0 0 1 -1 0 A 1 1 0 0 1 1 0 Z"

    def test_reflection_flips_sweep(self) -> None:
        """A mirrored circle winds the other way."""
        mirrored = Path.make_circle(1).scale(-1, 1)
        assert all(c.sweep == 0 for c in mirrored.controls[1:3])
        assert mirrored.signed_area() == pytest.approx(-math.pi)

    def test_non_uniform_scale_of_arcs(self) -> None:
        """Circles would turn into ellipses."""
        with pytest.raises(UnsupportedGeometryError):
            Path.make_circle(1).scale(2, 1)

    def test_non_uniform_scale_of_lines(self, square: Path) -> None:
        """Straight paths accept any affine map."""
        assert square.scale(2, 1).to_string() == "M 0 0 L 0 10 L 20 10 L 20 0 Z"

    def test_translate_and_rotate(self, square: Path) -> None:
        """Translation and rotation leave the area unchanged."""
        assert square.translate((5, 5)).to_string() == "M 5 5 L 5 15 L 15 15 L 15 5 Z"
        turned = square.rotate(math.pi / 2, (5, 5))
        assert turned.area() == pytest.approx(100)
        assert turned.points()[0] == pytest.approx((10, 0))
