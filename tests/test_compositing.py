"""Tests for cond, lerp, darken and lighten."""

from functional_images.color import Color, Colors
from functional_images.compositing import cond, darken, lerp, lighten
from functional_images.coordinate import Cartesian
from functional_images.images import constant
from functional_images.shapes import checker, circle, rings, vertical_stripe


def busy_image():
    """A non-uniform image to compare against."""
    return checker(1.5, Colors.vermilion, Colors.caramel)


class TestCond:
    """Tests for cond."""

    def test_hard_switch(self):
        """Red inside the region, blue outside, exactly."""
        region = circle(Cartesian(0.0, 0.0), 5.0, True, False)
        image = cond(region, constant(Colors.red), constant(Colors.blue))

        assert image(Cartesian(0.0, 0.0)) == Colors.red
        assert image(Cartesian(3.0, 4.0)) == Colors.red
        assert image(Cartesian(5.0, 5.0)) == Colors.blue
        assert image(Cartesian(-20.0, 1.0)) == Colors.blue

    def test_selected_image_sampled_at_same_point(self, sample_points):
        region = vertical_stripe(6.0, True, False)
        inner = checker(1.0, Colors.white, Colors.black)
        outer = rings(Cartesian(0.0, 0.0), 2.0, Colors.red, Colors.green)
        image = cond(region, inner, outer)

        for p in sample_points:
            expected = inner(p) if region(p) else outer(p)
            assert image(p) == expected

    def test_unselected_image_not_evaluated(self):
        """Only the chosen image is sampled."""

        def explode(p):
            raise AssertionError("should not be sampled")

        image = cond(constant(True), constant(Colors.gray), explode)
        assert image(Cartesian(1.0, 1.0)) == Colors.gray


class TestLerp:
    """Tests for lerp."""

    def test_zero_blend_gives_first_image(self, sample_points):
        a = busy_image()
        b = constant(Colors.blue)
        mixed = lerp(constant(0.0), a, b)
        for p in sample_points:
            assert mixed(p) == a(p)

    def test_full_blend_gives_second_image(self, sample_points):
        a = constant(Colors.blue)
        b = busy_image()
        mixed = lerp(constant(1.0), a, b)
        for p in sample_points:
            assert mixed(p) == b(p)

    def test_half_blend(self):
        mixed = lerp(constant(0.5), constant(Colors.red), constant(Colors.blue))
        assert mixed(Cartesian(7.0, -3.0)) == Color(128, 0, 128)

    def test_blend_varies_with_point(self):
        """The weight is taken from the blend at the sampled point."""
        blend = vertical_stripe(2.0, 0.0, 1.0)
        mixed = lerp(blend, constant(Colors.white), constant(Colors.black))

        assert mixed(Cartesian(0.0, 0.0)) == Colors.white
        assert mixed(Cartesian(10.0, 0.0)) == Colors.black


class TestDarkenLighten:
    """Tests for darken and lighten."""

    def test_darken_full_is_black(self, sample_points):
        image = darken(busy_image(), constant(1.0))
        for p in sample_points:
            assert image(p) == Colors.black

    def test_darken_zero_is_copy(self, sample_points):
        original = busy_image()
        image = darken(original, constant(0.0))
        for p in sample_points:
            assert image(p) == original(p)

    def test_lighten_full_is_white(self, sample_points):
        image = lighten(busy_image(), constant(1.0))
        for p in sample_points:
            assert image(p) == Colors.white

    def test_lighten_zero_is_copy(self, sample_points):
        original = busy_image()
        image = lighten(original, constant(0.0))
        for p in sample_points:
            assert image(p) == original(p)

    def test_partial_darken(self):
        image = darken(constant(Color(200, 100, 50)), constant(0.5))
        assert image(Cartesian(0.0, 0.0)) == Color(100, 50, 25)

    def test_repeated_sampling_is_stable(self, sample_points):
        """Sampling the same point twice gives the same color."""
        image = lighten(busy_image(), rings(Cartesian(1.0, 1.0), 3.0, 0.2, 0.8))
        for p in sample_points:
            assert image(p) == image(p)
