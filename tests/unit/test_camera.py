"""Unit tests for the viewer camera."""

import math

import pytest

from islands.viz.camera import Camera


class TestCamera:
    """Tests for Camera."""

    def test_for_grid(self):
        cam = Camera.for_grid(520, 680)
        assert cam.x == 260.0
        assert cam.y == pytest.approx(-math.sqrt(3) * 680 / 4)
        assert cam.zoom == 100.0
        assert cam.rotation == 0.0

    def test_pan(self):
        cam = Camera(x=10.0, y=-5.0)
        cam.pan(10, 5)
        assert cam.x == pytest.approx(8.0)
        assert cam.y == pytest.approx(-4.0)

    def test_zoom_in(self):
        cam = Camera(x=0.0, y=0.0)
        cam.scroll(120)
        assert cam.zoom == pytest.approx(80.0)

    def test_zoom_out(self):
        cam = Camera(x=0.0, y=0.0)
        cam.scroll(-120)
        assert cam.zoom == pytest.approx(120.0)

    def test_zoom_stays_positive(self):
        cam = Camera(x=0.0, y=0.0, zoom=10.0)
        cam.scroll(120)
        assert cam.zoom == 10.0

    def test_rotate(self):
        cam = Camera(x=0.0, y=0.0)
        cam.scroll(120, rotate=True)
        assert cam.rotation == pytest.approx(4.0)
        assert cam.zoom == 100.0

    def test_rotation_wraps(self):
        cam = Camera(x=0.0, y=0.0)
        cam.scroll(-120, rotate=True)
        assert cam.rotation == pytest.approx(356.0)

        cam = Camera(x=0.0, y=0.0, rotation=358.0)
        cam.scroll(120, rotate=True)
        assert cam.rotation == pytest.approx(2.0)

    def test_elevation(self):
        assert Camera(x=0.0, y=0.0).elevation == 90.0
        assert Camera(x=0.0, y=0.0, rotation=30.0).elevation == 60.0

    def test_look_at_top_down(self):
        cam = Camera(x=3.0, y=-2.0, zoom=50.0)
        eye, center, up = cam.look_at()
        assert eye == pytest.approx((3.0, -2.0, 50.0))
        assert center == (3.0, -2.0, 0.0)
        assert up == pytest.approx((0.0, 1.0, 0.0))

    def test_look_at_tilted(self):
        cam = Camera(x=0.0, y=0.0, zoom=10.0, rotation=90.0)
        eye, _, up = cam.look_at()
        assert eye == pytest.approx((0.0, 10.0, 0.0), abs=1e-9)
        assert up == pytest.approx((0.0, 0.0, -1.0), abs=1e-9)

    def test_limits(self):
        cam = Camera(x=10.0, y=-10.0, zoom=20.0)
        (xmin, xmax), (ymin, ymax) = cam.limits()
        assert (xmin, xmax) == (0.0, 20.0)
        assert (ymin, ymax) == (-20.0, 0.0)
