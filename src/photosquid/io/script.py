"""Interaction scripts.

A script is a JSON list of recorded input events that can be replayed into
an Editor without a window. Each event is an object with a ``type`` field:

- ``click``: press a mouse button at (x, y)
- ``drag``: move the pointer to (x, y)
- ``release``: release a mouse button at (x, y)
- ``key``: press a key
- ``scroll``: turn the scroll wheel
- ``tool``: switch tools
- ``wait``: let time pass (animations progress)

Example:
    [
        {"type": "tool", "name": "circle"},
        {"type": "click", "x": 100, "y": 100},
        {"type": "release", "x": 100, "y": 100},
        {"type": "wait", "seconds": 1.0}
    ]
"""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from photosquid.config.settings import PhotosquidSettings
from photosquid.core.editor import Editor
from photosquid.domain.interaction import KeyCode, Modifiers, MouseButton
from photosquid.domain.vec import Vec2
from photosquid.exceptions import ScriptFormatError, ScriptLoadError
from photosquid.utils.logging import EditorLogger

ButtonName = Literal["left", "right", "middle"]
ToolName = Literal["pointer", "pan", "circle", "rect", "tri"]

_BUTTONS = {
    "left": MouseButton.LEFT,
    "right": MouseButton.RIGHT,
    "middle": MouseButton.MIDDLE,
}


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += max(0.0, seconds)


class _Event(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def apply(self, editor: Editor, clock: ManualClock) -> None:
        raise NotImplementedError


class _PointerEvent(_Event):
    x: float = Field(..., description="Screen x coordinate")
    y: float = Field(..., description="Screen y coordinate")

    @property
    def position(self) -> Vec2:
        return Vec2(self.x, self.y)


class _ModifierFields(BaseModel):
    shift: bool = Field(default=False, description="Shift held")
    ctrl: bool = Field(default=False, description="Ctrl held")
    alt: bool = Field(default=False, description="Alt held")

    @property
    def modifiers(self) -> Modifiers:
        return Modifiers(shift=self.shift, ctrl=self.ctrl, alt=self.alt)


class ClickEvent(_PointerEvent, _ModifierFields):
    type: Literal["click"]
    button: ButtonName = "left"

    def apply(self, editor: Editor, clock: ManualClock) -> None:
        editor.mouse_down(_BUTTONS[self.button], self.position, self.modifiers)


class DragEvent(_PointerEvent):
    type: Literal["drag"]

    def apply(self, editor: Editor, clock: ManualClock) -> None:
        editor.mouse_move(self.position)


class ReleaseEvent(_PointerEvent):
    type: Literal["release"]
    button: ButtonName = "left"

    def apply(self, editor: Editor, clock: ManualClock) -> None:
        editor.mouse_up(_BUTTONS[self.button], self.position)


class KeyEvent(_Event, _ModifierFields):
    type: Literal["key"]
    key: KeyCode

    def apply(self, editor: Editor, clock: ManualClock) -> None:
        editor.press_key(self.key, self.modifiers)


class ScrollEvent(_Event):
    type: Literal["scroll"]
    delta: float = Field(..., description="Scroll wheel delta, positive zooms in")

    def apply(self, editor: Editor, clock: ManualClock) -> None:
        editor.scroll(self.delta)


class ToolEvent(_Event):
    type: Literal["tool"]
    name: ToolName

    def apply(self, editor: Editor, clock: ManualClock) -> None:
        names = [tool.name.lower() for tool in editor.tools]
        editor.select_tool(names.index(self.name))


class WaitEvent(_Event):
    type: Literal["wait"]
    seconds: float = Field(..., ge=0.0, description="Time to let pass")

    def apply(self, editor: Editor, clock: ManualClock) -> None:
        clock.advance(self.seconds)


ScriptEvent = Annotated[
    ClickEvent | DragEvent | ReleaseEvent | KeyEvent | ScrollEvent | ToolEvent | WaitEvent,
    Field(discriminator="type"),
]

_SCRIPT_ADAPTER = TypeAdapter(list[ScriptEvent])


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']} ({error.error_count()} error(s))"


def parse_script(text: str, source: str = "<string>") -> list[ScriptEvent]:
    """Validate the JSON text of a script.

    Args:
        text: JSON document
        source: Name used in error messages

    Returns:
        The events in order

    Raises:
        ScriptFormatError: If the text is not valid JSON or an event is malformed
    """
    try:
        return _SCRIPT_ADAPTER.validate_json(text)
    except ValidationError as e:
        raise ScriptFormatError(source, _describe(e)) from e


def load_script(path: Path) -> list[ScriptEvent]:
    """Read and validate a script file.

    Raises:
        ScriptLoadError: If the file cannot be read
        ScriptFormatError: If its contents are malformed
    """
    if not path.exists():
        raise ScriptLoadError(str(path), "file not found")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScriptLoadError(str(path), str(e)) from e

    return parse_script(text, str(path))


class ScriptRunner:
    """Replays script events into an Editor driven by a manual clock.

    Example:
        runner = ScriptRunner()
        editor = runner.run(load_script(Path("session.json")))
        print(len(editor.ocean))
    """

    def __init__(
        self,
        settings: PhotosquidSettings | None = None,
        editor_logger: EditorLogger | None = None,
    ) -> None:
        self.clock = ManualClock()
        self.editor = Editor(settings, clock=self.clock, editor_logger=editor_logger)

    def run(self, events: list[ScriptEvent]) -> Editor:
        """Apply every event in order and let animations settle."""
        for event in events:
            event.apply(self.editor, self.clock)
        self.clock.advance(self.editor.duration)
        return self.editor
