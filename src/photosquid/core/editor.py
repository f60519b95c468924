"""Top-level editor state and input dispatch.

The Editor owns the document (an Ocean), its history, the selection, the
camera, and the active tool. Raw input enters through ``mouse_down``,
``mouse_move``, ``mouse_up``, ``press_key`` and ``scroll``; each event is
offered to candidate handlers in priority order:

1. an open context menu (clicks only)
2. a running keyboard operation (a click ends it)
3. the active tool, which offers the event to the selected shapes first

Batch captures returned by a handler are applied to every selected shape
that still exists.
"""

from functools import partial
from typing import Any

import structlog

from photosquid.config.settings import InteractionOptions, PhotosquidSettings, get_default_settings
from photosquid.core.geometry import screen_bearing
from photosquid.core.history import History
from photosquid.core.ocean import Ocean
from photosquid.core.operation import (
    DilateOperation,
    GrabOperation,
    Operation,
    RevolveOperation,
    RotateOperation,
    ScaleOperation,
    SpreadOperation,
    operation_name,
)
from photosquid.core.render import RenderContext
from photosquid.core.smooth import Clock, Smooth
from photosquid.core.squid import Initiation, InitiationKind, Squid
from photosquid.core.tools import Tool, default_tools
from photosquid.domain.camera import Camera
from photosquid.domain.capture import (
    KEYBOARD,
    MISS,
    NO_DRAG,
    Capture,
    DilateSelected,
    MoveSelected,
    RevolveSelected,
    RotateSelected,
    ScaleSelected,
    SpreadSelected,
    capture_name,
    first_capture,
    is_batch,
    is_miss,
)
from photosquid.domain.color import Color
from photosquid.domain.context_menu import ContextAction, ContextMenu
from photosquid.domain.interaction import (
    Click,
    Dragging,
    Interaction,
    KeyCode,
    KeyPress,
    Modifiers,
    MouseButton,
    MouseRelease,
    PreClick,
)
from photosquid.domain.selection import Selection, SquidRef, selection_contains
from photosquid.domain.vec import Vec2
from photosquid.utils.logging import EditorLogger

logger = structlog.get_logger(__name__)

DEFAULT_WINDOW = Vec2(1280.0, 720.0)


def scroll_zoom_multiplier(delta_y: float) -> float:
    """Zoom factor for a scroll wheel delta (positive zooms in)."""
    if delta_y < 0:
        return 1.0 / (1.0 - delta_y / 1000.0)
    return 1.0 + delta_y / 1000.0


class Editor:
    """Interactive shape editor.

    Args:
        settings: Editor settings (defaults when None)
        clock: Time source shared by every animation
        window: Window size in screen units
        editor_logger: Statistics logger (a fresh one when None)
    """

    def __init__(
        self,
        settings: PhotosquidSettings | None = None,
        *,
        clock: Clock | None = None,
        window: Vec2 = DEFAULT_WINDOW,
        editor_logger: EditorLogger | None = None,
    ) -> None:
        self.settings = settings or get_default_settings()
        self.clock = clock
        self.duration = self.settings.animation.smooth_duration

        self.ocean = Ocean()
        self.history = History(self.settings.history.max_entries)
        self.selections: list[Selection] = []
        self.camera: Smooth[Camera] = Smooth(Camera.identity(window), self.duration, clock)
        self.context_menu: ContextMenu | None = None
        self.operation: Operation | None = None
        self.collectively = False
        self.color = Color.from_hex(self.settings.tools.color)

        self.tools: list[Tool] = default_tools()
        self.tool_index = 0

        self.mouse_position = Vec2()
        self.modifiers = Modifiers()
        self.dragging: Dragging | None = None
        self.dirty = False

        self.log = editor_logger or EditorLogger()

    @property
    def options(self) -> InteractionOptions:
        return self.settings.interaction

    def get_camera(self) -> Camera:
        """Camera used to interpret input (the real, not the animated, one)."""
        return self.camera.get_real()

    def current_tool(self) -> Tool:
        return self.tools[self.tool_index]

    def select_tool(self, index: int) -> bool:
        """Activate the tool at ``index``. Returns False if there is none."""
        if not 0 <= index < len(self.tools):
            return False
        self.tool_index = index
        logger.debug("Tool selected", tool=self.tools[index].name)
        return True

    def squid_options(self) -> dict[str, Any]:
        """Keyword arguments for constructing shapes that animate with this editor."""
        return {"duration": self.duration, "clock": self.clock}

    # Selection helpers

    def get_selected_squids(self) -> list[tuple[SquidRef, Squid]]:
        """Whole-shape selections that still resolve, in selection order."""
        selected = []
        for selection in self.selections:
            if selection.limb_id is not None:
                continue
            squid = self.ocean.get(selection.squid_id)
            if squid is not None:
                selected.append((selection.squid_id, squid))
        return selected

    def get_closest_selection_center(self) -> Vec2 | None:
        """Center of the selected shape nearest to the pointer, in world space."""
        underneath = self.get_camera().apply_reverse(self.mouse_position)
        centers = [squid.get_center() for _, squid in self.get_selected_squids()]
        if not centers:
            return None
        return min(centers, key=lambda center: center.distance_squared(underneath))

    def get_selection_group_center(self) -> Vec2 | None:
        """Average center of the selected shapes, in world space."""
        centers = [squid.get_center() for _, squid in self.get_selected_squids()]
        if not centers:
            return None
        total = Vec2()
        for center in centers:
            total = total + center
        return total / len(centers)

    def prune_selections(self) -> None:
        """Drop selections whose shape no longer exists."""
        self.selections = [s for s in self.selections if s.squid_id in self.ocean]

    # Dispatch

    def preclick(self) -> None:
        """Let every shape reset its per-click state."""
        camera = self.get_camera()
        for _, squid in self.ocean.items():
            squid.interact(PreClick(), camera, self.options)

    def try_interact_with_selections(self, interaction: Interaction) -> Capture:
        """Offer an interaction to selected shapes, topmost first."""
        camera = self.get_camera()
        whole = [s for s in self.selections if s.limb_id is None]
        handlers = [
            partial(squid.interact, interaction, camera, self.options)
            for reference, squid in self.ocean.get_squids_highest()
            if selection_contains(whole, reference)
        ]
        return first_capture(handlers)

    def do_capture(self, capture: Capture) -> None:
        """Apply a batch capture to every selected shape."""
        if not is_batch(capture):
            return

        options = self.options
        for _, squid in self.get_selected_squids():
            if isinstance(capture, MoveSelected):
                squid.translate(capture.delta_in_world, options)
            elif isinstance(capture, RotateSelected):
                squid.rotate(capture.delta_theta, options)
            elif isinstance(capture, ScaleSelected):
                squid.scale(capture.total_scale_factor, options)
            elif isinstance(capture, SpreadSelected):
                squid.spread(capture.current, options)
            elif isinstance(capture, RevolveSelected):
                squid.revolve(capture.current, options)
            elif isinstance(capture, DilateSelected):
                squid.dilate(capture.current, options)

        self.dirty = True

    def mouse_down(
        self,
        button: MouseButton,
        position: Vec2,
        modifiers: Modifiers | None = None,
    ) -> Capture:
        """Handle a mouse button press at a screen position."""
        modifiers = modifiers or Modifiers()
        self.mouse_position = position
        self.modifiers = modifiers

        capture = self._mouse_down(button, position, modifiers)
        if capture != NO_DRAG:
            self.dragging = Dragging.start(position)

        self.log.log_event("click", capture_name(capture))
        return capture

    def _mouse_down(self, button: MouseButton, position: Vec2, modifiers: Modifiers) -> Capture:
        if self.context_menu is not None:
            menu, self.context_menu = self.context_menu, None
            action = menu.click(button, position)
            if action is not None:
                self.run_context_action(action)
                return NO_DRAG

        if self.operation is not None:
            self.finish_operation()
            return NO_DRAG

        capture = self.current_tool().interact(Click(button, position, modifiers), self)
        self.do_capture(capture)
        return capture

    def mouse_move(self, position: Vec2) -> Capture:
        """Handle pointer motion to a screen position."""
        self.mouse_position = position
        if self.dragging is None:
            return MISS

        self.dragging.update(position)
        capture = self.current_tool().interact(self.dragging.to_interaction(self.modifiers), self)
        self.do_capture(capture)

        self.log.log_event("drag", capture_name(capture))
        return capture

    def mouse_up(self, button: MouseButton, position: Vec2) -> Capture:
        """Handle a mouse button release.

        A running keyboard operation keeps following the pointer; it ends on
        the next press instead.
        """
        self.mouse_position = position
        if self.operation is not None:
            return MISS

        self.dragging = None
        camera = self.get_camera()
        release = MouseRelease(button, position)
        for _, squid in self.ocean.items():
            squid.interact(release, camera, self.options)

        if self.dirty:
            self.add_history_marker()

        self.log.log_event("release", capture_name(MISS))
        return MISS

    def press_key(self, code: KeyCode, modifiers: Modifiers | None = None) -> Capture:
        """Handle a key press."""
        modifiers = modifiers or Modifiers()
        self.modifiers = modifiers

        capture = self._press_key(KeyPress(code, modifiers))
        self.do_capture(capture)

        self.log.log_event("key", capture_name(capture))
        return capture

    def _press_key(self, key: KeyPress) -> Capture:
        if key.modifiers.ctrl and key.code is KeyCode.Z:
            if key.modifiers.shift:
                self.redo()
            else:
                self.undo()
            return KEYBOARD

        capture = self.current_tool().interact(key, self)
        if not is_miss(capture):
            return capture

        digit = key.code.digit()
        if digit is not None:
            return KEYBOARD if self.select_tool(digit - 1) else MISS

        if key.code is KeyCode.X:
            self.delete_selected()
            return KEYBOARD

        if key.code is KeyCode.ESCAPE:
            self.context_menu = None
            return KEYBOARD

        if key.code is KeyCode.D and key.modifiers.shift:
            self.duplicate_selected()
            return KEYBOARD

        return MISS

    def scroll(self, delta_y: float, position: Vec2 | None = None) -> None:
        """Zoom about the pointer (or ``position``) by a scroll wheel delta."""
        point = self.mouse_position if position is None else position
        real = self.camera.get_real()
        self.camera.set(real.zoomed_about(scroll_zoom_multiplier(delta_y), point))
        logger.debug("Camera zoomed", zoom=self.camera.get_real().zoom)

    # Operations

    def initiate(self, kind: InitiationKind) -> None:
        """Begin a keyboard operation on the selection.

        When "collectively" is on (or the selection is always treated as a
        group) grab, rotate and scale become spread, revolve and dilate about
        the center of the selection. "Collectively" resets afterwards.
        """
        collectively = self.collectively or self.options.treat_selection_as_group
        self.collectively = False

        closest = self.get_closest_selection_center()
        group_center = self.get_selection_group_center()
        if closest is None or group_center is None:
            return

        camera = self.get_camera()
        point = camera.apply_reverse(self.mouse_position)
        operation: Operation

        if kind is InitiationKind.TRANSLATE:
            if collectively:
                operation = SpreadOperation(point=point, origin=group_center)
                initiation = Initiation.spread(point, group_center)
            else:
                operation = GrabOperation()
                initiation = Initiation.translate()

        elif kind is InitiationKind.ROTATE:
            if collectively:
                operation = RevolveOperation(point=point, origin=group_center)
                initiation = Initiation.revolve(point, group_center)
            else:
                pivot = camera.apply(closest)
                operation = RotateOperation(point=pivot, rotation=screen_bearing(pivot, self.mouse_position))
                initiation = Initiation.rotate()

        elif kind is InitiationKind.SCALE:
            if collectively:
                operation = DilateOperation(point=point, origin=group_center)
                initiation = Initiation.dilate(point, group_center)
            else:
                operation = ScaleOperation(origin=closest, point=point)
                initiation = Initiation.scale()

        else:
            return

        self.operation = operation
        self.dragging = Dragging.start(self.mouse_position)
        for _, squid in self.get_selected_squids():
            squid.initiate(initiation)

        self.log.log_operation(operation_name(operation), collectively)

    def finish_operation(self) -> None:
        """End the running keyboard operation and record it in history."""
        if self.operation is None:
            return

        self.operation = None
        self.dragging = None
        camera = self.get_camera()
        release = MouseRelease(MouseButton.LEFT, self.mouse_position)
        for _, squid in self.get_selected_squids():
            squid.interact(PreClick(), camera, self.options)
            squid.interact(release, camera, self.options)
            squid.revolve_behavior.unset()

        self.add_history_marker()

    def run_context_action(self, action: ContextAction) -> None:
        if action is ContextAction.DELETE_SELECTED:
            self.delete_selected()
        elif action is ContextAction.DUPLICATE_SELECTED:
            self.duplicate_selected()
        elif action is ContextAction.GRAB_SELECTED:
            self.initiate(InitiationKind.TRANSLATE)
        elif action is ContextAction.ROTATE_SELECTED:
            self.initiate(InitiationKind.ROTATE)
        elif action is ContextAction.SCALE_SELECTED:
            self.initiate(InitiationKind.SCALE)
        elif action is ContextAction.COLLECTIVELY:
            self.collectively = not self.collectively

    # Document edits

    def insert(self, squid: Squid) -> SquidRef:
        """Add a shape to the document and record it in history."""
        self.prune_selections()
        reference = self.ocean.insert(squid)
        self.log.log_shape_created(squid.kind_name, reference.index)
        self.add_history_marker()
        return reference

    def delete_selected(self) -> None:
        removed = 0
        for reference, squid in self.get_selected_squids():
            self.ocean.remove(reference)
            self.log.log_shape_deleted(squid.kind_name, reference.index)
            removed += 1

        self.selections.clear()
        self.log.log_selection(0)
        if removed:
            self.add_history_marker()

    def duplicate_selected(self) -> None:
        """Duplicate the selected shapes and select the copies."""
        offset = self.options.get_duplication_offset()
        copies = []
        for _, squid in self.get_selected_squids():
            reference = self.ocean.insert(squid.duplicate(offset))
            self.log.log_shape_created(squid.kind_name, reference.index)
            copies.append(Selection(reference))

        if not copies:
            return

        self.selections = copies
        self.log.log_selection(len(copies))
        self.add_history_marker()

    def set_color(self, color: Color) -> None:
        """Set the drawing color and recolor the selected shapes."""
        self.color = color
        selected = self.get_selected_squids()
        for _, squid in selected:
            squid.set_color(color)
        if selected:
            self.add_history_marker()

    # History

    def add_history_marker(self) -> None:
        self.history.push(self.ocean)
        self.dirty = False
        self.log.log_history_push(len(self.history))

    def undo(self) -> bool:
        ocean = self.history.undo()
        self.log.log_undo(ocean is not None)
        if ocean is None:
            return False
        self._restore(ocean)
        return True

    def redo(self) -> bool:
        ocean = self.history.redo()
        self.log.log_redo(ocean is not None)
        if ocean is None:
            return False
        self._restore(ocean)
        return True

    def _restore(self, ocean: Ocean) -> None:
        self.ocean = ocean
        self.operation = None
        self.dragging = None
        self.dirty = False
        self.prune_selections()

    # Output

    def render(self, ctx: RenderContext) -> None:
        """Draw shapes oldest-first, then selection indicators on top."""
        for _, squid in self.ocean.get_squids_lowest():
            squid.render(ctx)
        for _, squid in self.get_selected_squids():
            squid.render_selection_indicators(ctx)
