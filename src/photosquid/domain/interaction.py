"""Input interactions offered to shapes, tools and UI layers.

An interaction is one of:
- PreClick: fired once per press, before hit-testing
- Click: a mouse button was pressed
- Drag: the pointer moved while a button is held
- MouseRelease: a mouse button was released
- KeyPress: a key was pressed
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from photosquid.domain.vec import Vec2


class MouseButton(Enum):
    """Mouse buttons."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


class KeyCode(str, Enum):
    """Keys the editor reacts to."""

    G = "g"
    R = "r"
    S = "s"
    C = "c"
    D = "d"
    X = "x"
    Z = "z"
    ESCAPE = "escape"
    KEY0 = "0"
    KEY1 = "1"
    KEY2 = "2"
    KEY3 = "3"
    KEY4 = "4"
    KEY5 = "5"
    KEY6 = "6"
    KEY7 = "7"
    KEY8 = "8"
    KEY9 = "9"

    def digit(self) -> int | None:
        """Numeric value of a number key, or None for other keys."""
        return int(self.value) if self.value.isdigit() else None


@dataclass(frozen=True, slots=True)
class Modifiers:
    """Modifier keys held during an interaction."""

    shift: bool = False
    ctrl: bool = False
    alt: bool = False


@dataclass(frozen=True, slots=True)
class PreClick:
    """Sent to every shape before a click is hit-tested."""


@dataclass(frozen=True, slots=True)
class Click:
    """A mouse button press at a screen position."""

    button: MouseButton
    position: Vec2
    modifiers: Modifiers = field(default_factory=Modifiers)


@dataclass(frozen=True, slots=True)
class Drag:
    """Pointer motion while a button is held.

    Attributes:
        delta: Screen-space motion since the previous drag event
        start: Screen position where the drag began
        current: Current screen position
        modifiers: Modifier keys held
    """

    delta: Vec2
    start: Vec2
    current: Vec2
    modifiers: Modifiers = field(default_factory=Modifiers)


@dataclass(frozen=True, slots=True)
class MouseRelease:
    """A mouse button release at a screen position."""

    button: MouseButton
    position: Vec2


@dataclass(frozen=True, slots=True)
class KeyPress:
    """A key press."""

    code: KeyCode
    modifiers: Modifiers = field(default_factory=Modifiers)


Interaction = PreClick | Click | Drag | MouseRelease | KeyPress


@dataclass
class Dragging:
    """Tracks an in-progress drag and produces Drag interactions.

    Attributes:
        down: Screen position where the button went down
        current: Latest pointer position
        last: Pointer position before the latest update
    """

    down: Vec2
    current: Vec2
    last: Vec2

    @classmethod
    def start(cls, position: Vec2) -> "Dragging":
        return cls(down=position, current=position, last=position)

    def update(self, position: Vec2) -> None:
        self.last = self.current
        self.current = position

    def get_delta(self) -> Vec2:
        return self.current - self.last

    def to_interaction(self, modifiers: Modifiers | None = None) -> Drag:
        return Drag(
            delta=self.get_delta(),
            start=self.down,
            current=self.current,
            modifiers=modifiers or Modifiers(),
        )
