"""Domain models for photosquid.

This module contains the value types shared by every layer: vectors, colors,
the camera, input interactions, capture results, selections and the context
menu. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Independent of any rendering or windowing library

Key classes:
- Vec2: A 2D vector
- Color: An RGBA color
- Camera: Mapping between world space and screen space
- Click, Drag, KeyPress, MouseRelease, PreClick: Input interactions
- Capture: Result of offering an interaction to one handler
- Selection, SquidRef: Handles to shapes in an Ocean
- ContextMenu: Menu of actions on the selection
"""

from photosquid.domain.camera import Camera
from photosquid.domain.capture import (
    ALLOW_DRAG,
    KEYBOARD,
    MISS,
    NO_DRAG,
    TAKE_FOCUS,
    Capture,
    CaptureKind,
    DilateSelected,
    MoveSelected,
    RevolveSelected,
    RotateSelected,
    ScaleSelected,
    SimpleCapture,
    SpreadSelected,
    first_capture,
    is_batch,
    is_miss,
)
from photosquid.domain.color import Color
from photosquid.domain.context_menu import ContextAction, ContextMenu, ContextMenuOption
from photosquid.domain.interaction import (
    Click,
    Drag,
    Dragging,
    Interaction,
    KeyCode,
    KeyPress,
    Modifiers,
    MouseButton,
    MouseRelease,
    PreClick,
)
from photosquid.domain.selection import (
    NewSelection,
    NewSelectionInfo,
    Selection,
    SelectOutcome,
    SquidRef,
    selection_contains,
)
from photosquid.domain.vec import Vec2, div_or_zero

__all__: list[str] = [
    # Core types
    "Vec2",
    "Color",
    "Camera",
    # Interactions
    "Click",
    "Drag",
    "Dragging",
    "Interaction",
    "KeyCode",
    "KeyPress",
    "Modifiers",
    "MouseButton",
    "MouseRelease",
    "PreClick",
    # Captures
    "ALLOW_DRAG",
    "KEYBOARD",
    "MISS",
    "NO_DRAG",
    "TAKE_FOCUS",
    "Capture",
    "CaptureKind",
    "DilateSelected",
    "MoveSelected",
    "RevolveSelected",
    "RotateSelected",
    "ScaleSelected",
    "SimpleCapture",
    "SpreadSelected",
    "first_capture",
    "is_batch",
    "is_miss",
    # Selection
    "NewSelection",
    "NewSelectionInfo",
    "Selection",
    "SelectOutcome",
    "SquidRef",
    "selection_contains",
    # Context menu
    "ContextAction",
    "ContextMenu",
    "ContextMenuOption",
    "div_or_zero",
]
