"""Unit tests for domain value types."""

import math

import pytest

from photosquid.domain.camera import Camera
from photosquid.domain.color import Color
from photosquid.domain.vec import Vec2, div_or_zero


class TestVec2:
    """Tests for Vec2."""

    def test_arithmetic(self) -> None:
        assert Vec2(1.0, 2.0) + Vec2(3.0, 4.0) == Vec2(4.0, 6.0)
        assert Vec2(1.0, 2.0) - Vec2(3.0, 4.0) == Vec2(-2.0, -2.0)
        assert 2.0 * Vec2(1.0, 2.0) == Vec2(2.0, 4.0)
        assert -Vec2(1.0, -2.0) == Vec2(-1.0, 2.0)

    def test_rotation(self) -> None:
        rotated = Vec2(1.0, 0.0).rotated(math.pi / 2)
        assert rotated.x == pytest.approx(0.0, abs=1e-12)
        assert rotated.y == pytest.approx(1.0)

    def test_div_or_zero(self) -> None:
        assert div_or_zero(1.0, 0.0) == 0.0
        assert div_or_zero(6.0, 3.0) == 2.0


class TestCamera:
    """Tests for Camera."""

    @pytest.fixture
    def window(self) -> Vec2:
        return Vec2(800.0, 600.0)

    def test_identity_maps_points_to_themselves(self, window: Vec2) -> None:
        camera = Camera.identity(window)
        assert camera.apply(Vec2(12.0, 34.0)) == Vec2(12.0, 34.0)
        assert camera.apply_reverse(Vec2(12.0, 34.0)) == Vec2(12.0, 34.0)

    def test_zoom_is_about_window_center(self, window: Vec2) -> None:
        camera = Camera(position=Vec2(), zoom=2.0, window=window)

        assert camera.apply(Vec2(400.0, 300.0)) == Vec2(400.0, 300.0)
        assert camera.apply(Vec2(500.0, 300.0)) == Vec2(600.0, 300.0)
        assert camera.apply_reverse(Vec2(600.0, 300.0)) == Vec2(500.0, 300.0)

    def test_vectors_and_scales(self, window: Vec2) -> None:
        camera = Camera(position=Vec2(50.0, 50.0), zoom=4.0, window=window)

        assert camera.apply_to_vector(Vec2(1.0, 2.0)) == Vec2(4.0, 8.0)
        assert camera.apply_reverse_to_vector(Vec2(4.0, 8.0)) == Vec2(1.0, 2.0)
        assert camera.apply_to_scale(2.5) == 10.0
        assert camera.apply_reverse_to_scale(10.0) == 2.5

    def test_zero_zoom_does_not_raise(self, window: Vec2) -> None:
        camera = Camera(position=Vec2(), zoom=0.0, window=window)
        assert camera.apply_reverse_to_vector(Vec2(1.0, 1.0)) == Vec2()

    def test_view_round_trip(self, window: Vec2) -> None:
        camera = Camera(position=Vec2(10.0, -20.0), zoom=2.0, window=window)

        position, zoom = Camera.view_to_components(window, camera.to_view())

        assert position == camera.position
        assert zoom == pytest.approx(2.0)

    @pytest.mark.parametrize("anchor", [Vec2(0.0, 0.0), Vec2(800.0, 600.0), Vec2(123.0, 456.0)])
    def test_zoom_keeps_anchor_fixed(self, window: Vec2, anchor: Vec2) -> None:
        """Test that the world point under the cursor stays under the cursor."""
        camera = Camera(position=Vec2(30.0, 40.0), zoom=1.5, window=window)
        before = camera.apply_reverse(anchor)

        zoomed = camera.zoomed_about(2.0, anchor)
        after = zoomed.apply(before)

        assert zoomed.zoom == pytest.approx(3.0)
        assert after.x == pytest.approx(anchor.x)
        assert after.y == pytest.approx(anchor.y)

    def test_non_positive_zoom_multiplier_is_ignored(self, window: Vec2) -> None:
        camera = Camera.identity(window)
        assert camera.zoomed_about(0.0, Vec2()) is camera

    def test_lerp(self, window: Vec2) -> None:
        start = Camera(position=Vec2(), zoom=1.0, window=window)
        end = Camera(position=Vec2(10.0, 0.0), zoom=3.0, window=window)

        halfway = start.lerp(end, 0.5)
        assert halfway.position == Vec2(5.0, 0.0)
        assert halfway.zoom == 2.0


class TestColor:
    """Tests for Color."""

    def test_parse_rgb(self) -> None:
        assert Color.from_hex("#ff0000") == Color(1.0, 0.0, 0.0, 1.0)

    def test_parse_rgba_without_hash(self) -> None:
        color = Color.from_hex("00ff0080")
        assert color.g == 1.0
        assert color.a == pytest.approx(128 / 255)

    @pytest.mark.parametrize("text", ["", "#fff", "#gggggg", "#12345", "not a color"])
    def test_malformed_is_transparent_black(self, text: str) -> None:
        assert Color.from_hex(text) == Color.transparent_black()

    def test_to_hex(self) -> None:
        assert Color(1.0, 0.0, 1.0, 1.0).to_hex() == "#ff00ffff"
        assert Color.white().to_bytes() == (255, 255, 255, 255)

    def test_hsv_round_trip(self) -> None:
        color = Color(0.2, 0.4, 0.6)
        h, s, v = color.to_hsv()
        back = Color.from_hsv(h, s, v)

        assert back.r == pytest.approx(0.2)
        assert back.g == pytest.approx(0.4)
        assert back.b == pytest.approx(0.6)

    def test_hue_stays_below_one(self) -> None:
        h, _, _ = Color(1.0, 0.0, 0.0).to_hsv()
        assert 0.0 <= h < 1.0
