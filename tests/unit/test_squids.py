"""Unit tests for circles, rectangles and triangles."""

import math

import pytest

from photosquid.config.settings import InteractionOptions
from photosquid.core.squid import Circle, Initiation, Rect, Tri
from photosquid.domain.camera import Camera
from photosquid.domain.capture import ALLOW_DRAG, MISS, MoveSelected, RotateSelected
from photosquid.domain.color import Color
from photosquid.domain.interaction import (
    Click,
    Drag,
    Modifiers,
    MouseButton,
    MouseRelease,
    PreClick,
)
from photosquid.domain.vec import Vec2


class FakeClock:
    """Clock advanced by hand."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def real_position(squid) -> Vec2:
    return squid.get_real().position.reveal()


def drag_to(start: Vec2, current: Vec2, modifiers: Modifiers | None = None) -> Drag:
    return Drag(
        delta=current - start,
        start=start,
        current=current,
        modifiers=modifiers or Modifiers(),
    )


class TestCircle:
    """Tests for Circle."""

    @pytest.fixture
    def clock(self) -> FakeClock:
        return FakeClock()

    @pytest.fixture
    def circle(self, clock: FakeClock) -> Circle:
        return Circle.create(Vec2(10.0, 10.0), 5.0, Color.white(), duration=1.0, clock=clock)

    def test_hit_test_is_strict(self, circle: Circle) -> None:
        """Test that points exactly on the rim are not over the circle."""
        camera = Camera.identity()

        assert circle.is_point_over(Vec2(10.0, 14.0), camera)
        assert not circle.is_point_over(Vec2(10.0, 15.0), camera)

    def test_rotate_handle_on_rim(self, circle: Circle) -> None:
        assert circle.get_rotate_handle(Camera.identity()) == Vec2(15.0, 10.0)

    def test_duplicate_is_offset_and_at_rest(self, circle: Circle) -> None:
        copy = circle.duplicate(Vec2(3.0, 3.0))

        assert real_position(copy) == Vec2(13.0, 13.0)
        assert copy.get_real().radius == 5.0
        assert copy.data.get_previous() == copy.get_real()
        assert copy.get_creation_time() > circle.get_creation_time()

    def test_rotate_handle_drag_resizes(self, circle: Circle) -> None:
        """Test that dragging the rim handle changes radius and virtual rotation."""
        camera = Camera.identity()
        options = InteractionOptions()

        assert circle.interact(Click(MouseButton.LEFT, Vec2(15.0, 10.0)), camera, options) == ALLOW_DRAG
        capture = circle.interact(drag_to(Vec2(15.0, 10.0), Vec2(10.0, 2.0)), camera, options)

        assert capture == ALLOW_DRAG
        real = circle.get_real()
        assert real.radius == pytest.approx(8.0)
        assert real.virtual_rotation == pytest.approx(math.pi / 2)

    def test_scale(self, circle: Circle) -> None:
        circle.initiate(Initiation.scale())
        circle.scale(2.0, InteractionOptions())
        assert circle.get_real().radius == 10.0

    def test_names(self, circle: Circle) -> None:
        assert circle.get_name() == "Unnamed Circle"
        circle.set_name("Sun")
        assert circle.get_name() == "Sun"

    def test_set_color_does_not_blend(self, circle: Circle, clock: FakeClock) -> None:
        red = Color(1.0, 0.0, 0.0)
        circle.set_color(red)
        clock.now = 0.1

        assert circle.get_color() == red
        assert circle.get_animated().color == red

    def test_clone_is_independent(self, circle: Circle) -> None:
        clone = circle.clone()
        clone.reposition_by(Vec2(5.0, 0.0))

        assert real_position(circle) == Vec2(10.0, 10.0)
        assert real_position(clone) == Vec2(15.0, 10.0)
        assert clone.get_creation_time() == circle.get_creation_time()

    def test_ordering_by_creation(self, clock: FakeClock) -> None:
        first = Circle.create(Vec2(), 1.0, Color.white(), clock=clock)
        second = Circle.create(Vec2(), 1.0, Color.white(), clock=clock)

        assert first < second
        assert sorted([second, first]) == [first, second]


class TestRect:
    """Tests for Rect."""

    @pytest.fixture
    def rect(self) -> Rect:
        return Rect.create(
            Vec2(0.0, 0.0), Vec2(100.0, 50.0), 0.0, Color.white(), duration=0.0
        )

    @pytest.fixture
    def camera(self) -> Camera:
        return Camera.identity()

    def test_corners_in_cyclic_order(self, rect: Rect) -> None:
        assert rect.get_world_corners() == [
            Vec2(50.0, 25.0),
            Vec2(-50.0, 25.0),
            Vec2(-50.0, -25.0),
            Vec2(50.0, -25.0),
        ]

    def test_rotate_handle_outside_right_edge(self, rect: Rect, camera: Camera) -> None:
        assert rect.get_rotate_handle(camera) == Vec2(74.0, 0.0)

    def test_hit_test(self, rect: Rect, camera: Camera) -> None:
        assert rect.is_point_over(Vec2(49.0, 24.0), camera)
        assert not rect.is_point_over(Vec2(60.0, 0.0), camera)

    def test_corner_drag_keeps_opposite_corner(self, rect: Rect, camera: Camera) -> None:
        options = InteractionOptions()

        assert rect.interact(Click(MouseButton.LEFT, Vec2(50.0, 25.0)), camera, options) == ALLOW_DRAG
        capture = rect.interact(drag_to(Vec2(50.0, 25.0), Vec2(70.0, 45.0)), camera, options)

        assert capture == ALLOW_DRAG
        assert rect.get_real().size == Vec2(120.0, 70.0)
        assert real_position(rect) == Vec2(10.0, 10.0)

    def test_corner_drag_with_alt_keeps_center(self, rect: Rect, camera: Camera) -> None:
        options = InteractionOptions()
        rect.interact(Click(MouseButton.LEFT, Vec2(50.0, 25.0)), camera, options)
        rect.interact(
            drag_to(Vec2(50.0, 25.0), Vec2(70.0, 45.0), Modifiers(alt=True)), camera, options
        )

        assert rect.get_real().size == Vec2(140.0, 90.0)
        assert real_position(rect) == Vec2(0.0, 0.0)

    def test_release_forgets_corner(self, rect: Rect, camera: Camera) -> None:
        options = InteractionOptions()
        rect.interact(Click(MouseButton.LEFT, Vec2(50.0, 25.0)), camera, options)
        rect.interact(MouseRelease(MouseButton.LEFT, Vec2(50.0, 25.0)), camera, options)

        assert rect.interact(drag_to(Vec2(50.0, 25.0), Vec2(70.0, 45.0)), camera, options) == MISS
        assert rect.get_real().size == Vec2(100.0, 50.0)

    def test_body_drag_moves_selection(self, rect: Rect, camera: Camera) -> None:
        """Test that a body drag emits a batch move that snaps when applied."""
        options = InteractionOptions(translation_snapping=1.0)

        assert rect.interact(Click(MouseButton.LEFT, Vec2(0.0, 0.0)), camera, options) == ALLOW_DRAG
        capture = rect.interact(drag_to(Vec2(0.0, 0.0), Vec2(10.4, 0.0)), camera, options)

        assert capture == MoveSelected(Vec2(10.4, 0.0))
        rect.translate(capture.delta_in_world, options)
        assert real_position(rect) == Vec2(10.0, 0.0)

    def test_preclick_resets_gesture(self, rect: Rect, camera: Camera) -> None:
        options = InteractionOptions()
        rect.interact(Click(MouseButton.LEFT, Vec2(0.0, 0.0)), camera, options)
        rect.interact(PreClick(), camera, options)

        assert rect.interact(drag_to(Vec2(0.0, 0.0), Vec2(5.0, 0.0)), camera, options) == MISS

    def test_rotate_handle_drag_emits_rotation(self, rect: Rect, camera: Camera) -> None:
        options = InteractionOptions()
        rect.interact(Click(MouseButton.LEFT, Vec2(74.0, 0.0)), camera, options)
        capture = rect.interact(drag_to(Vec2(74.0, 0.0), Vec2(0.0, -74.0)), camera, options)

        assert isinstance(capture, RotateSelected)
        assert capture.delta_theta == pytest.approx(math.pi / 2)

    def test_scale_and_rotate(self, rect: Rect) -> None:
        options = InteractionOptions(rotation_snapping=0.0)
        rect.initiate(Initiation.scale())
        rect.scale(2.0, options)
        rect.rotate(0.5, options)

        assert rect.get_real().size == Vec2(200.0, 100.0)
        assert rect.get_real().rotation == pytest.approx(0.5)

    def test_viewport(self) -> None:
        viewport = Rect.create(Vec2(), Vec2(10.0, 10.0), 0.0, Color.white(), is_viewport=True)
        plain = Rect.create(Vec2(), Vec2(10.0, 10.0), 0.0, Color.white())

        assert viewport.get_name() == "Unnamed Viewport"
        assert viewport.as_viewport() is not None
        assert plain.get_name() == "Unnamed Rect"
        assert plain.as_viewport() is None


class TestTri:
    """Tests for Tri."""

    @pytest.fixture
    def points(self) -> tuple[Vec2, Vec2, Vec2]:
        return (Vec2(0.0, -10.0), Vec2(10.0, 10.0), Vec2(-10.0, 10.0))

    @pytest.fixture
    def camera(self) -> Camera:
        return Camera.identity()

    def test_created_around_centroid(self, points: tuple[Vec2, Vec2, Vec2]) -> None:
        tri = Tri.create(points, 0.0, Color.white(), duration=0.0)

        assert real_position(tri) == Vec2(0.0, 10.0 / 3.0)
        for actual, expected in zip(tri.get_world_points(), points):
            assert actual.x == pytest.approx(expected.x)
            assert actual.y == pytest.approx(expected.y)

    def test_vertex_drag(self, points: tuple[Vec2, Vec2, Vec2], camera: Camera) -> None:
        tri = Tri.create(points, 0.0, Color.white(), duration=1.0, clock=FakeClock())
        options = InteractionOptions()

        assert tri.interact(Click(MouseButton.LEFT, Vec2(10.0, 10.0)), camera, options) == ALLOW_DRAG
        tri.interact(drag_to(Vec2(10.0, 10.0), Vec2(20.0, 10.0)), camera, options)

        expected = (Vec2(0.0, -10.0), Vec2(20.0, 10.0), Vec2(-10.0, 10.0))
        for actual, want in zip(tri.get_world_points(), expected):
            assert actual.x == pytest.approx(want.x)
            assert actual.y == pytest.approx(want.y)

    def test_fold_keeps_shape_and_handle(
        self, points: tuple[Vec2, Vec2, Vec2], camera: Camera
    ) -> None:
        """Test that folding the rotation into the vertices changes nothing visible."""
        tri = Tri.create(points, 0.3, Color.white(), duration=1.0, clock=FakeClock())
        options = InteractionOptions()
        before = tri.get_world_points()
        handle_before = tri.get_rotate_handle(camera)

        tri.interact(Click(MouseButton.LEFT, before[0]), camera, options)
        tri.interact(drag_to(before[0], before[0]), camera, options)

        assert tri.get_real().rotation == 0.0
        assert tri.virtual_rotation == pytest.approx(0.3)
        for actual, want in zip(tri.get_world_points(), before):
            assert actual.x == pytest.approx(want.x)
            assert actual.y == pytest.approx(want.y)
        handle_after = tri.get_rotate_handle(camera)
        assert handle_after.x == pytest.approx(handle_before.x)
        assert handle_after.y == pytest.approx(handle_before.y)

    def test_rotate_handle_outside_silhouette(
        self, points: tuple[Vec2, Vec2, Vec2], camera: Camera
    ) -> None:
        tri = Tri.create(points, 0.0, Color.white(), duration=0.0)
        handle = tri.get_rotate_handle(camera)

        assert not tri.is_point_over(handle, camera)
        assert handle.x > 10.0

    def test_scale_vertices(self, points: tuple[Vec2, Vec2, Vec2]) -> None:
        tri = Tri.create(points, 0.0, Color.white(), duration=0.0)
        tri.initiate(Initiation.scale())
        tri.scale(2.0, InteractionOptions())

        first = tri.get_real().revealed_points()[0]
        assert first.x == pytest.approx(0.0)
        assert first.y == pytest.approx(-80.0 / 3.0)

    def test_clone_keeps_virtual_rotation(self, points: tuple[Vec2, Vec2, Vec2]) -> None:
        tri = Tri.create(points, 0.0, Color.white(), duration=0.0)
        tri.virtual_rotation = 0.7
        assert tri.clone().virtual_rotation == 0.7


class TestCollectiveGestures:
    """Tests for spread, revolve and dilate started through initiate."""

    @pytest.fixture
    def circle(self) -> Circle:
        return Circle.create(Vec2(10.0, 0.0), 5.0, Color.white(), duration=0.0)

    def test_spread(self, circle: Circle) -> None:
        circle.initiate(Initiation.spread(Vec2(5.0, 0.0), Vec2(0.0, 0.0)))
        circle.spread(Vec2(10.0, 0.0), InteractionOptions())

        assert real_position(circle) == Vec2(20.0, 0.0)

    def test_revolve(self, circle: Circle) -> None:
        circle.initiate(Initiation.revolve(Vec2(10.0, 0.0), Vec2(0.0, 0.0)))
        circle.revolve(Vec2(0.0, 10.0), InteractionOptions(rotation_snapping=0.0))

        position = real_position(circle)
        assert position.x == pytest.approx(0.0, abs=1e-9)
        assert position.y == pytest.approx(10.0)
        assert circle.get_real().virtual_rotation == pytest.approx(-math.pi / 2)

    def test_revolve_without_initiation_does_nothing(self, circle: Circle) -> None:
        circle.revolve(Vec2(0.0, 10.0), InteractionOptions())
        assert real_position(circle) == Vec2(10.0, 0.0)

    def test_dilate(self, circle: Circle) -> None:
        circle.initiate(Initiation.dilate(Vec2(5.0, 0.0), Vec2(0.0, 0.0)))
        circle.dilate(Vec2(15.0, 0.0), InteractionOptions())

        assert real_position(circle) == Vec2(30.0, 0.0)
        assert circle.get_real().radius == pytest.approx(15.0)
