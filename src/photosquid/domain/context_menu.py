"""Context menu model.

The menu is laid out as a vertical list of fixed-height entries starting
just above its anchor position. Drawing it is left to the UI layer.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from photosquid.domain.interaction import MouseButton
from photosquid.domain.vec import Vec2

MENU_WIDTH = 192.0
ENTRY_HEIGHT = 30.0
TEXT_OFFSET = 16.0 * 0.8


class ContextAction(Enum):
    """Actions offered by a context menu."""

    DELETE_SELECTED = auto()
    DUPLICATE_SELECTED = auto()
    GRAB_SELECTED = auto()
    ROTATE_SELECTED = auto()
    SCALE_SELECTED = auto()
    COLLECTIVELY = auto()


@dataclass(frozen=True, slots=True)
class ContextMenuOption:
    """One entry of a context menu."""

    friendly_name: str
    friendly_shortcut: str
    action: ContextAction


@dataclass
class ContextMenu:
    """A context menu anchored at a screen position."""

    position: Vec2
    options: list[ContextMenuOption] = field(default_factory=list)

    def get_area(self) -> tuple[float, float, float, float]:
        """Get the clickable area as (min_x, min_y, width, height)."""
        height = TEXT_OFFSET + ENTRY_HEIGHT * len(self.options)
        return (self.position.x, self.position.y - 12.0, MENU_WIDTH, height)

    def contains(self, point: Vec2) -> bool:
        min_x, min_y, width, height = self.get_area()
        return min_x <= point.x <= min_x + width and min_y <= point.y <= min_y + height

    def click(self, button: MouseButton, position: Vec2) -> ContextAction | None:
        """Map a click to the action of the entry under it.

        Args:
            button: Button that was pressed
            position: Screen position of the click

        Returns:
            The chosen action, or None if the click missed the menu
        """
        if button != MouseButton.LEFT or not self.options or not self.contains(position):
            return None

        y_offset = 8.0 * 0.8
        index = int((position.y - self.position.y + y_offset) / ENTRY_HEIGHT)
        index = max(0, min(index, len(self.options) - 1))
        return self.options[index].action


def common_context_menu(position: Vec2) -> ContextMenu:
    """Build the context menu shared by all shapes."""
    return ContextMenu(
        position=position,
        options=[
            ContextMenuOption("Delete", "X", ContextAction.DELETE_SELECTED),
            ContextMenuOption("Duplicate", "Shift+D", ContextAction.DUPLICATE_SELECTED),
            ContextMenuOption("Grab", "G", ContextAction.GRAB_SELECTED),
            ContextMenuOption("Rotate", "R", ContextAction.ROTATE_SELECTED),
            ContextMenuOption("Scale", "S", ContextAction.SCALE_SELECTED),
            ContextMenuOption("Collectively", "C", ContextAction.COLLECTIVELY),
        ],
    )
