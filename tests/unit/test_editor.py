"""Unit tests for the editor's input dispatch."""

import math

import pytest

from photosquid.config import InteractionOptions, PhotosquidSettings
from photosquid.core.editor import Editor, scroll_zoom_multiplier
from photosquid.core.operation import GrabOperation, RotateOperation, SpreadOperation
from photosquid.core.squid import Circle, Rect
from photosquid.domain.camera import Camera
from photosquid.domain.capture import ALLOW_DRAG, KEYBOARD, MISS, NO_DRAG
from photosquid.domain.color import Color
from photosquid.domain.interaction import KeyCode, Modifiers, MouseButton
from photosquid.domain.vec import Vec2
from photosquid.io.script import ManualClock

CIRCLE_TOOL = 2
RECT_TOOL = 3


def click(
    editor: Editor,
    x: float,
    y: float,
    button: MouseButton = MouseButton.LEFT,
    modifiers: Modifiers | None = None,
) -> None:
    editor.mouse_down(button, Vec2(x, y), modifiers)
    editor.mouse_up(button, Vec2(x, y))


def draw(editor: Editor, tool: int, x: float, y: float) -> None:
    previous = editor.tool_index
    editor.select_tool(tool)
    click(editor, x, y)
    editor.select_tool(previous)


def positions(editor: Editor) -> list[Vec2]:
    return [squid.get_real().position.reveal() for _, squid in editor.ocean.get_squids_lowest()]


def assert_close(actual: Vec2, expected: Vec2) -> None:
    assert actual.x == pytest.approx(expected.x, abs=1e-9)
    assert actual.y == pytest.approx(expected.y, abs=1e-9)


class RecordingContext:
    """Render context that records draw calls."""

    def __init__(self, camera: Camera) -> None:
        self.camera = camera
        self.calls: list[tuple[str, str]] = []

    def draw_circle(self, name, center, radius, rotation, color) -> None:
        self.calls.append(("circle", name))

    def draw_rect(self, name, center, size, rotation, color, is_viewport) -> None:
        self.calls.append(("rect", name))

    def draw_triangle(self, name, points, rotation, color) -> None:
        self.calls.append(("triangle", name))

    def draw_handle(self, screen_position) -> None:
        self.calls.append(("handle", ""))


class TestEditor:
    """Tests for Editor."""

    @pytest.fixture
    def clock(self) -> ManualClock:
        return ManualClock()

    @pytest.fixture
    def editor(self, clock: ManualClock) -> Editor:
        settings = PhotosquidSettings(
            interaction=InteractionOptions(duplication_offset=(10.0, 10.0))
        )
        return Editor(settings, clock=clock, window=Vec2(800.0, 600.0))

    def test_drawing_tool_inserts_shape(self, editor: Editor) -> None:
        editor.select_tool(CIRCLE_TOOL)
        capture = editor.mouse_down(MouseButton.LEFT, Vec2(100.0, 100.0))
        editor.mouse_up(MouseButton.LEFT, Vec2(100.0, 100.0))

        assert capture == ALLOW_DRAG
        assert positions(editor) == [Vec2(100.0, 100.0)]
        _, squid = editor.ocean.get_squids_lowest()[0]
        assert isinstance(squid, Circle)
        assert squid.get_real().radius == 50.0
        assert len(editor.history) == 2
        assert editor.log.stats.shapes_created == 1

    def test_select_and_drag_then_undo(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)

        editor.mouse_down(MouseButton.LEFT, Vec2(100.0, 100.0))
        editor.mouse_move(Vec2(130.0, 110.0))
        editor.mouse_up(MouseButton.LEFT, Vec2(130.0, 110.0))

        assert len(editor.selections) == 1
        assert positions(editor) == [Vec2(130.0, 110.0)]

        assert editor.press_key(KeyCode.Z, Modifiers(ctrl=True)) == KEYBOARD
        assert positions(editor) == [Vec2(100.0, 100.0)]

        editor.press_key(KeyCode.Z, Modifiers(ctrl=True, shift=True))
        assert positions(editor) == [Vec2(130.0, 110.0)]
        assert editor.log.stats.undo_count == 1
        assert editor.log.stats.redo_count == 1

    def test_click_on_empty_space_clears_selection(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0)
        history_length = len(editor.history)

        click(editor, 500.0, 500.0)

        assert editor.selections == []
        assert len(editor.history) == history_length

    def test_shift_click_extends_selection(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        draw(editor, CIRCLE_TOOL, 300.0, 100.0)

        click(editor, 100.0, 100.0)
        click(editor, 300.0, 100.0, modifiers=Modifiers(shift=True))
        assert len(editor.selections) == 2

        click(editor, 300.0, 100.0)
        assert len(editor.selections) == 2

    def test_plain_click_replaces_selection(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        draw(editor, CIRCLE_TOOL, 300.0, 100.0)

        click(editor, 100.0, 100.0)
        click(editor, 300.0, 100.0)

        assert len(editor.selections) == 1
        assert editor.get_selection_group_center() == Vec2(300.0, 100.0)

    def test_topmost_selected_shape_takes_the_click(self, editor: Editor) -> None:
        """Test that a newer selected shape covering an older one's handle wins."""
        older = Circle.create(Vec2(200.0, 200.0), 50.0, editor.color, **editor.squid_options())
        newer = Circle.create(Vec2(250.0, 200.0), 20.0, editor.color, **editor.squid_options())
        editor.insert(older)
        editor.insert(newer)

        click(editor, 250.0, 200.0)
        click(editor, 170.0, 200.0, modifiers=Modifiers(shift=True))
        assert len(editor.selections) == 2

        editor.mouse_down(MouseButton.LEFT, Vec2(250.0, 200.0))
        editor.mouse_move(Vec2(250.0, 240.0))
        editor.mouse_up(MouseButton.LEFT, Vec2(250.0, 240.0))

        assert not older.rotating
        assert older.get_real().radius == 50.0
        assert positions(editor) == [Vec2(200.0, 240.0), Vec2(250.0, 240.0)]

    def test_drag_on_empty_canvas_is_allowed_without_history(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        history_length = len(editor.history)

        editor.mouse_down(MouseButton.LEFT, Vec2(500.0, 500.0))
        capture = editor.mouse_move(Vec2(520.0, 520.0))
        editor.mouse_up(MouseButton.LEFT, Vec2(520.0, 520.0))

        assert capture == ALLOW_DRAG
        assert positions(editor) == [Vec2(100.0, 100.0)]
        assert len(editor.history) == history_length

    def test_selecting_picks_up_color(self, editor: Editor) -> None:
        editor.color = Color(1.0, 0.0, 0.0)
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        editor.color = Color.white()

        click(editor, 100.0, 100.0)
        assert editor.color == Color(1.0, 0.0, 0.0)

    def test_delete_selected(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0)

        assert editor.press_key(KeyCode.X) == KEYBOARD
        assert len(editor.ocean) == 0
        assert editor.selections == []
        assert editor.log.stats.shapes_deleted == 1

    def test_duplicate_selected(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0)
        original = editor.selections[0]

        editor.press_key(KeyCode.D, Modifiers(shift=True))

        assert positions(editor) == [Vec2(100.0, 100.0), Vec2(110.0, 110.0)]
        assert len(editor.selections) == 1
        assert editor.selections[0] != original

    def test_grab_follows_pointer_until_click(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0)

        assert editor.press_key(KeyCode.G) == KEYBOARD
        assert isinstance(editor.operation, GrabOperation)

        editor.mouse_move(Vec2(150.0, 120.0))
        editor.mouse_up(MouseButton.LEFT, Vec2(150.0, 120.0))
        assert editor.operation is not None

        history_length = len(editor.history)
        assert editor.mouse_down(MouseButton.LEFT, Vec2(150.0, 120.0)) == NO_DRAG

        assert editor.operation is None
        assert positions(editor) == [Vec2(150.0, 120.0)]
        assert len(editor.history) == history_length + 1

    def test_rotate_operation(self, editor: Editor) -> None:
        draw(editor, RECT_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0)
        editor.mouse_move(Vec2(200.0, 100.0))

        editor.press_key(KeyCode.R)
        assert isinstance(editor.operation, RotateOperation)

        editor.mouse_move(Vec2(100.0, 0.0))

        _, rect = editor.ocean.get_squids_lowest()[0]
        assert isinstance(rect, Rect)
        assert rect.get_real().rotation == pytest.approx(math.pi / 2)

    def test_scale_operation(self, editor: Editor) -> None:
        draw(editor, RECT_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0)
        editor.mouse_move(Vec2(150.0, 100.0))

        editor.press_key(KeyCode.S)
        editor.mouse_move(Vec2(200.0, 100.0))

        _, rect = editor.ocean.get_squids_lowest()[0]
        assert rect.get_real().size == Vec2(200.0, 200.0)

    def test_operation_needs_selection(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        editor.press_key(KeyCode.G)
        assert editor.operation is None

    def test_collective_spread(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        draw(editor, CIRCLE_TOOL, 300.0, 100.0)
        click(editor, 100.0, 100.0)
        click(editor, 300.0, 100.0, modifiers=Modifiers(shift=True))

        assert editor.press_key(KeyCode.C) == KEYBOARD
        assert editor.collectively
        editor.press_key(KeyCode.G)

        assert isinstance(editor.operation, SpreadOperation)
        assert not editor.collectively

        editor.mouse_move(Vec2(400.0, 100.0))
        first, second = positions(editor)
        assert_close(first, Vec2(0.0, 100.0))
        assert_close(second, Vec2(400.0, 100.0))

    def test_collective_revolve(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        draw(editor, CIRCLE_TOOL, 300.0, 100.0)
        click(editor, 100.0, 100.0)
        click(editor, 300.0, 100.0, modifiers=Modifiers(shift=True))

        editor.press_key(KeyCode.C)
        editor.press_key(KeyCode.R)
        editor.mouse_move(Vec2(200.0, 200.0))

        first, second = positions(editor)
        assert_close(first, Vec2(200.0, 0.0))
        assert_close(second, Vec2(200.0, 200.0))

    def test_selection_as_group_setting(self, clock: ManualClock) -> None:
        settings = PhotosquidSettings(interaction=InteractionOptions(treat_selection_as_group=True))
        editor = Editor(settings, clock=clock, window=Vec2(800.0, 600.0))
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0)

        editor.press_key(KeyCode.G)
        assert isinstance(editor.operation, SpreadOperation)

    def test_context_menu_delete(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)

        assert editor.mouse_down(MouseButton.RIGHT, Vec2(100.0, 100.0)) == NO_DRAG
        editor.mouse_up(MouseButton.RIGHT, Vec2(100.0, 100.0))
        assert editor.context_menu is not None

        assert editor.mouse_down(MouseButton.LEFT, Vec2(110.0, 105.0)) == NO_DRAG
        assert editor.context_menu is None
        assert len(editor.ocean) == 0

    def test_context_menu_closes_on_outside_click(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0, MouseButton.RIGHT)

        click(editor, 700.0, 500.0)

        assert editor.context_menu is None
        assert len(editor.ocean) == 1
        assert editor.selections == []

    def test_escape_closes_context_menu(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0, MouseButton.RIGHT)

        assert editor.press_key(KeyCode.ESCAPE) == KEYBOARD
        assert editor.context_menu is None

    def test_undo_redo_shape_creation(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)

        assert editor.undo()
        assert len(editor.ocean) == 0
        assert not editor.undo()
        assert editor.redo()
        assert len(editor.ocean) == 1
        assert not editor.redo()

    def test_undo_prunes_selection(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0)

        editor.undo()

        assert editor.selections == []

    def test_number_keys_switch_tools(self, editor: Editor) -> None:
        assert editor.press_key(KeyCode.KEY3) == KEYBOARD
        assert editor.current_tool().name == "Circle"
        assert editor.press_key(KeyCode.KEY1) == KEYBOARD
        assert editor.current_tool().name == "Pointer"
        assert editor.press_key(KeyCode.KEY9) == MISS
        assert editor.press_key(KeyCode.KEY0) == MISS
        assert editor.current_tool().name == "Pointer"

    def test_pan_moves_camera(self, editor: Editor) -> None:
        editor.select_tool(1)
        editor.mouse_down(MouseButton.LEFT, Vec2(100.0, 100.0))
        editor.mouse_move(Vec2(150.0, 120.0))
        editor.mouse_up(MouseButton.LEFT, Vec2(150.0, 120.0))

        camera = editor.get_camera()
        assert camera.position == Vec2(-50.0, -20.0)
        assert camera.apply(Vec2(0.0, 0.0)) == Vec2(50.0, 20.0)
        assert len(editor.history) == 0

    def test_scroll_zooms_about_pointer(self, editor: Editor) -> None:
        anchor = Vec2(200.0, 150.0)
        world = editor.get_camera().apply_reverse(anchor)

        editor.scroll(100.0, anchor)

        camera = editor.get_camera()
        assert camera.zoom == pytest.approx(1.1)
        assert_close(camera.apply(world), anchor)

    def test_scroll_zoom_multiplier(self) -> None:
        assert scroll_zoom_multiplier(100.0) == pytest.approx(1.1)
        assert scroll_zoom_multiplier(-100.0) == pytest.approx(1.0 / 1.1)
        assert scroll_zoom_multiplier(0.0) == 1.0

    def test_rect_corner_drag_through_editor(self, editor: Editor) -> None:
        draw(editor, RECT_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0)

        editor.mouse_down(MouseButton.LEFT, Vec2(150.0, 150.0))
        editor.mouse_move(Vec2(170.0, 170.0))
        editor.mouse_up(MouseButton.LEFT, Vec2(170.0, 170.0))

        _, rect = editor.ocean.get_squids_lowest()[0]
        assert rect.get_real().size == Vec2(120.0, 120.0)
        assert len(editor.selections) == 1

    def test_set_color_recolors_selection(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0)
        blue = Color(0.0, 0.0, 1.0)

        editor.set_color(blue)

        _, squid = editor.ocean.get_squids_lowest()[0]
        assert squid.get_color() == blue

    def test_animation_settles(self, editor: Editor, clock: ManualClock) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        click(editor, 100.0, 100.0)
        editor.mouse_down(MouseButton.LEFT, Vec2(100.0, 100.0))
        editor.mouse_move(Vec2(200.0, 100.0))

        _, squid = editor.ocean.get_squids_lowest()[0]
        assert squid.get_center() == Vec2(100.0, 100.0)

        clock.advance(editor.duration)
        assert squid.get_center() == Vec2(200.0, 100.0)

    def test_render_order(self, editor: Editor) -> None:
        draw(editor, CIRCLE_TOOL, 100.0, 100.0)
        draw(editor, RECT_TOOL, 400.0, 300.0)
        click(editor, 100.0, 100.0)
        ctx = RecordingContext(editor.get_camera())

        editor.render(ctx)

        assert ctx.calls == [
            ("circle", "Unnamed Circle"),
            ("rect", "Unnamed Rect"),
            ("handle", ""),
            ("handle", ""),
        ]
