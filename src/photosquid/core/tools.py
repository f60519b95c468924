"""Editor tools.

The active tool is offered every click, drag and key press that nothing
with higher priority (an open context menu, a running operation) took.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from photosquid.core.geometry import angle_difference, screen_bearing
from photosquid.core.operation import (
    DilateOperation,
    GrabOperation,
    RevolveOperation,
    RotateOperation,
    ScaleOperation,
    SpreadOperation,
)
from photosquid.core.squid import Circle, InitiationKind, Rect, Tri
from photosquid.domain.capture import (
    ALLOW_DRAG,
    KEYBOARD,
    MISS,
    NO_DRAG,
    Capture,
    DilateSelected,
    RevolveSelected,
    RotateSelected,
    ScaleSelected,
    SpreadSelected,
    is_miss,
)
from photosquid.domain.interaction import (
    Click,
    Drag,
    Interaction,
    KeyCode,
    KeyPress,
    MouseButton,
)
from photosquid.domain.selection import NewSelection, SelectOutcome
from photosquid.domain.vec import Vec2, div_or_zero

if TYPE_CHECKING:
    from photosquid.core.editor import Editor

_OPERATION_KEYS = {
    KeyCode.G: InitiationKind.TRANSLATE,
    KeyCode.R: InitiationKind.ROTATE,
    KeyCode.S: InitiationKind.SCALE,
}


class Tool(ABC):
    """A tool of the editor's toolbox."""

    name: ClassVar[str] = "Tool"

    @abstractmethod
    def interact(self, interaction: Interaction, editor: "Editor") -> Capture:
        """Handle an interaction, returning ``MISS`` if it was not used."""


class Pointer(Tool):
    """Selects shapes, drags them and runs keyboard operations."""

    name = "Pointer"

    def interact(self, interaction: Interaction, editor: "Editor") -> Capture:
        if isinstance(interaction, Click):
            return self._click(interaction, editor)
        if isinstance(interaction, Drag):
            return self._drag(interaction, editor)
        if isinstance(interaction, KeyPress):
            return self._key(interaction, editor)
        return MISS

    def _click(self, click: Click, editor: "Editor") -> Capture:
        editor.preclick()
        camera = editor.get_camera()
        result = editor.ocean.try_select(click.position, camera, editor.selections)

        # Already-selected shapes get first refusal over whatever is underneath
        if not isinstance(result, NewSelection):
            capture = editor.try_interact_with_selections(click)
            if not is_miss(capture):
                return capture

        if isinstance(result, NewSelection):
            if not click.modifiers.shift:
                editor.selections.clear()
            editor.selections.append(result.selection)

            squid = editor.ocean.get(result.selection.squid_id)
            if squid is not None:
                squid.select()
            if result.info.color is not None:
                editor.color = result.info.color
            editor.log.log_selection(len(editor.selections))

        elif result is SelectOutcome.DISCARD and editor.selections:
            editor.selections.clear()
            editor.log.log_selection(0)

        if click.button == MouseButton.RIGHT:
            menu = editor.ocean.try_context_menu(click.position, camera)
            if menu is not None:
                editor.context_menu = menu
                return NO_DRAG

        return ALLOW_DRAG

    def _drag(self, drag: Drag, editor: "Editor") -> Capture:
        operation = editor.operation
        if operation is None or isinstance(operation, GrabOperation):
            capture = editor.try_interact_with_selections(drag)
            if is_miss(capture):
                return ALLOW_DRAG
            editor.dirty = True
            return capture

        world = editor.get_camera().apply_reverse(drag.current)

        if isinstance(operation, RotateOperation):
            bearing = screen_bearing(operation.point, drag.current)
            delta_theta = angle_difference(operation.rotation, bearing)
            operation.rotation = bearing
            return RotateSelected(delta_theta)

        if isinstance(operation, ScaleOperation):
            factor = div_or_zero(
                operation.origin.distance(world), operation.origin.distance(operation.point)
            )
            return ScaleSelected(factor)

        if isinstance(operation, SpreadOperation):
            return SpreadSelected(world)

        if isinstance(operation, RevolveOperation):
            return RevolveSelected(world)

        if isinstance(operation, DilateOperation):
            return DilateSelected(world)

        return MISS

    def _key(self, key: KeyPress, editor: "Editor") -> Capture:
        capture = editor.try_interact_with_selections(key)
        if not is_miss(capture):
            return capture

        if key.modifiers.ctrl:
            return MISS

        kind = _OPERATION_KEYS.get(key.code)
        if kind is not None:
            editor.initiate(kind)
            return KEYBOARD

        if key.code is KeyCode.C:
            editor.collectively = not editor.collectively
            return KEYBOARD

        return MISS


class Pan(Tool):
    """Moves the camera."""

    name = "Pan"

    def interact(self, interaction: Interaction, editor: "Editor") -> Capture:
        if isinstance(interaction, Click):
            return ALLOW_DRAG

        if isinstance(interaction, Drag):
            real = editor.camera.get_real()
            position = real.position - real.apply_reverse_to_vector(interaction.delta)
            editor.camera.set(real.with_position(position))
            return ALLOW_DRAG

        return MISS


class _DrawingTool(Tool):
    """Inserts a new shape where the left button is pressed."""

    def interact(self, interaction: Interaction, editor: "Editor") -> Capture:
        if not isinstance(interaction, Click) or interaction.button != MouseButton.LEFT:
            return MISS

        world = editor.get_camera().apply_reverse(interaction.position)
        self.create(world, editor)
        return ALLOW_DRAG

    @abstractmethod
    def create(self, world: Vec2, editor: "Editor") -> None:
        """Insert a shape at a world position."""


class CircleTool(_DrawingTool):
    name = "Circle"

    def create(self, world: Vec2, editor: "Editor") -> None:
        config = editor.settings.tools
        editor.insert(Circle.create(world, config.circle_radius, editor.color, **editor.squid_options()))


class RectTool(_DrawingTool):
    name = "Rect"

    def create(self, world: Vec2, editor: "Editor") -> None:
        config = editor.settings.tools
        size = Vec2(config.rect_width, config.rect_height)
        editor.insert(Rect.create(world, size, 0.0, editor.color, **editor.squid_options()))


class TriTool(_DrawingTool):
    name = "Tri"

    def create(self, world: Vec2, editor: "Editor") -> None:
        extent = editor.settings.tools.tri_half_extent
        points = (
            world + Vec2(0.0, -extent),
            world + Vec2(extent, extent),
            world + Vec2(-extent, extent),
        )
        editor.insert(Tri.create(points, 0.0, editor.color, **editor.squid_options()))


def default_tools() -> list[Tool]:
    """Toolbox in number-key order (1 = Pointer)."""
    return [Pointer(), Pan(), CircleTool(), RectTool(), TriTool()]
