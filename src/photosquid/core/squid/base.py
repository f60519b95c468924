"""Shape contract shared by circles, rectangles and triangles.

A shape ("squid") owns a ``Smooth``-wrapped data snapshot plus the transient
state of whatever gesture is acting on it. Concrete shapes supply geometry
(hit-testing, handles, size capture); everything that is the same for all
kinds of shape lives here.
"""

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Any, ClassVar

from photosquid.config.settings import InteractionOptions
from photosquid.core.accumulator import Accumulator
from photosquid.core.behavior import (
    DilateBehavior,
    RevolveBehavior,
    SpreadBehavior,
    TranslateBehavior,
)
from photosquid.core.render import RenderContext
from photosquid.core.smooth import DEFAULT_DURATION, Clock, MultiLerp, Smooth
from photosquid.domain.camera import Camera
from photosquid.domain.capture import ALLOW_DRAG, MISS, Capture, MoveSelected
from photosquid.domain.color import Color
from photosquid.domain.context_menu import ContextMenu, common_context_menu
from photosquid.domain.interaction import (
    Click,
    Drag,
    Interaction,
    MouseButton,
    MouseRelease,
    PreClick,
)
from photosquid.domain.selection import NewSelection, NewSelectionInfo, Selection, SquidRef
from photosquid.domain.vec import Vec2

HANDLE_RADIUS = 8.0
ROTATE_HANDLE_MARGIN = 24.0

_creation_counter = itertools.count()


def next_creation_time() -> int:
    """Get a fresh, strictly increasing creation stamp."""
    return next(_creation_counter)


class InitiationKind(Enum):
    """Gestures a shape can be told to begin."""

    TRANSLATE = auto()
    ROTATE = auto()
    SCALE = auto()
    SPREAD = auto()
    REVOLVE = auto()
    DILATE = auto()


@dataclass(frozen=True, slots=True)
class Initiation:
    """Request to begin a gesture.

    Attributes:
        kind: Gesture to begin
        point: World-space pointer position when the gesture began
            (spread, revolve and dilate only)
        center: World-space pivot of the gesture (spread, revolve and dilate only)
    """

    kind: InitiationKind
    point: Vec2 | None = None
    center: Vec2 | None = None

    @classmethod
    def translate(cls) -> "Initiation":
        return cls(InitiationKind.TRANSLATE)

    @classmethod
    def rotate(cls) -> "Initiation":
        return cls(InitiationKind.ROTATE)

    @classmethod
    def scale(cls) -> "Initiation":
        return cls(InitiationKind.SCALE)

    @classmethod
    def spread(cls, point: Vec2, center: Vec2) -> "Initiation":
        return cls(InitiationKind.SPREAD, point, center)

    @classmethod
    def revolve(cls, point: Vec2, center: Vec2) -> "Initiation":
        return cls(InitiationKind.REVOLVE, point, center)

    @classmethod
    def dilate(cls, point: Vec2, center: Vec2) -> "Initiation":
        return cls(InitiationKind.DILATE, point, center)


def get_rotate_handle(position: Vec2, rotation: float, distance: float, camera: Camera) -> Vec2:
    """Screen position of a rotate handle ``distance`` away from ``position``."""
    world = position + Vec2.from_angle(-rotation) * distance
    return camera.apply(world)


class Squid(ABC):
    """A shape in the document.

    Args:
        data: Initial snapshot, already at rest
        name: Optional user-facing name
        duration: Animation length in seconds
        clock: Time source used for animation
        created: Creation stamp; a fresh one is taken when omitted
    """

    kind_name: ClassVar[str] = "Shape"

    def __init__(
        self,
        data: Any,
        *,
        name: str | None = None,
        duration: float = DEFAULT_DURATION,
        clock: Clock | None = None,
        created: int | None = None,
    ) -> None:
        self.name = name
        self.created = next_creation_time() if created is None else created
        self.data: Smooth[Any] = Smooth(data, duration, clock)

        self.translate_behavior = TranslateBehavior()
        self.rotating = False
        self.rotation_accumulator: Accumulator[float] = Accumulator(0.0)
        self.prescale_size = self.capture_size(data)
        self.spread_behavior = SpreadBehavior()
        self.revolve_behavior = RevolveBehavior()
        self.dilate_behavior = DilateBehavior()

    # Geometry supplied by each kind of shape

    @abstractmethod
    def is_point_over(self, mouse_position: Vec2, camera: Camera) -> bool:
        """Check whether a screen-space point lies over the shape body."""

    @abstractmethod
    def get_rotate_handle(self, camera: Camera) -> Vec2:
        """Screen position of the rotate handle."""

    @abstractmethod
    def get_limb_handles(self, camera: Camera) -> list[Vec2]:
        """Screen positions of corner or vertex handles."""

    @abstractmethod
    def capture_size(self, data: Any) -> Any:
        """Extract the size that scaling is relative to."""

    @abstractmethod
    def scaled(self, data: Any, total_scale_factor: float) -> Any:
        """Snapshot with the size set to ``prescale_size * total_scale_factor``."""

    @abstractmethod
    def rotated_by(self, data: Any, delta_theta: float) -> Any:
        """Snapshot rotated by ``delta_theta``."""

    @abstractmethod
    def render(self, ctx: RenderContext) -> None:
        """Draw the shape from its animated snapshot."""

    @abstractmethod
    def clone(self) -> "Squid":
        """Independent copy that keeps the creation stamp and name."""

    # Hooks for shapes with draggable limbs

    def grab_limb(self, mouse_position: Vec2, camera: Camera) -> bool:
        """Try to start dragging a corner or vertex under the mouse."""
        return False

    def drag_limb(self, drag: Drag, camera: Camera) -> bool:
        """Continue a limb drag. Returns False if no limb is held."""
        return False

    def release_limbs(self) -> None:
        """Forget any held limb."""

    def rotate_drag(self, mouse_position: Vec2, camera: Camera) -> Capture:
        """Handle a drag of the rotate handle."""
        return MISS

    # Snapshot access

    def get_real(self) -> Any:
        return self.data.get_real()

    def get_animated(self) -> Any:
        return self.data.get_animated()

    def get_center(self) -> Vec2:
        """Displayed center of the shape in world space."""
        return self.data.get_animated().position.reveal()

    def get_creation_time(self) -> int:
        return self.created

    def get_name(self) -> str:
        if self.name is not None:
            return self.name
        return f"Unnamed {self.kind_name}"

    def set_name(self, name: str) -> None:
        self.name = name

    def get_color(self) -> Color:
        return self.data.get_real().color

    def set_color(self, color: Color) -> None:
        self.data.set(replace(self.data.get_real(), color=color))

    def get_opaque_handles(self) -> list[Vec2]:
        """World positions of handles that keep the shape selected when clicked."""
        identity = Camera.identity()
        return [*self.get_limb_handles(identity), self.get_rotate_handle(identity)]

    def get_selection_points(self, camera: Camera) -> list[Vec2]:
        """Screen positions of every selection indicator."""
        return [
            camera.apply(self.get_center()),
            self.get_rotate_handle(camera),
            *self.get_limb_handles(camera),
        ]

    def render_selection_indicators(self, ctx: RenderContext) -> None:
        for point in self.get_selection_points(ctx.camera):
            ctx.draw_handle(point)

    # Interaction

    def interact(self, interaction: Interaction, camera: Camera, options: InteractionOptions) -> Capture:
        """Offer an interaction to this (selected) shape.

        Args:
            interaction: The input event
            camera: Camera the event's screen coordinates belong to
            options: Current interaction options

        Returns:
            How the interaction was captured, ``MISS`` if it was not
        """
        if isinstance(interaction, PreClick):
            self.translate_behavior.moving = False
            self.rotating = False
            self.release_limbs()

        elif isinstance(interaction, Click) and interaction.button == MouseButton.LEFT:
            position = interaction.position

            if self.grab_limb(position, camera):
                return ALLOW_DRAG

            if position.distance(self.get_rotate_handle(camera)) <= HANDLE_RADIUS * 2.0:
                self.rotating = True
                return ALLOW_DRAG

            if self.is_point_over(position, camera):
                self.translate_behavior.moving = True
                return ALLOW_DRAG

        elif isinstance(interaction, Drag):
            if self.drag_limb(interaction, camera):
                return ALLOW_DRAG

            if self.rotating:
                return self.rotate_drag(interaction.current, camera)

            if self.translate_behavior.moving:
                return MoveSelected(camera.apply_reverse_to_vector(interaction.delta))

        elif isinstance(interaction, MouseRelease) and interaction.button == MouseButton.LEFT:
            self.rotating = False
            self.release_limbs()
            self.translate_behavior.accumulator.clear()
            self.rotation_accumulator.clear()

        return MISS

    def select(self) -> None:
        """Mark the shape as freshly selected so that a drag moves it."""
        self.translate_behavior.moving = True

    def try_select(self, underneath: Vec2, camera: Camera, self_reference: SquidRef) -> NewSelection | None:
        if not self.is_point_over(underneath, camera):
            return None
        return NewSelection(
            selection=Selection(self_reference),
            info=NewSelectionInfo(color=self.get_color()),
        )

    def try_context_menu(self, underneath: Vec2, camera: Camera) -> ContextMenu | None:
        if self.is_point_over(underneath, camera):
            return common_context_menu(underneath)
        return None

    # Edits

    def reposition_by(self, delta: Vec2) -> None:
        if delta.is_zero():
            return
        real = self.data.get_real()
        self.data.set(replace(real, position=MultiLerp.linear(real.position.reveal() + delta)))

    def rotate_by(self, delta_theta: float) -> None:
        self.data.set(self.rotated_by(self.data.get_real(), delta_theta))

    def translate(self, world_delta: Vec2, options: InteractionOptions) -> None:
        """Move the shape body by a snapped world-space delta."""
        self.reposition_by(self.translate_behavior.express(world_delta, options.translation_snapping))

    def rotate(self, mouse_delta_theta: float, options: InteractionOptions) -> None:
        """Rotate the shape body about its center."""
        delta_theta = self.rotation_accumulator.accumulate(mouse_delta_theta, options.rotation_snapping)
        if delta_theta is not None:
            self.rotate_by(delta_theta)

    def scale(self, total_scale_factor: float, options: InteractionOptions) -> None:
        """Scale relative to the size captured when scaling began."""
        self.data.set(self.scaled(self.data.get_real(), total_scale_factor))

    def spread(self, current: Vec2, options: InteractionOptions) -> None:
        real = self.data.get_real()
        position = MultiLerp.linear(self.spread_behavior.express(current))
        self.data.set(replace(real, position=position))

    def revolve(self, current: Vec2, options: InteractionOptions) -> None:
        expression = self.revolve_behavior.express(current, options.rotation_snapping)
        if expression is None:
            return

        real = self.rotated_by(self.data.get_real(), expression.delta_object_rotation)
        position = MultiLerp.circle(expression.apply_origin_rotation_to_center(), expression.origin)
        self.data.set(replace(real, position=position))

    def dilate(self, current: Vec2, options: InteractionOptions) -> None:
        expression = self.dilate_behavior.express(current)
        real = self.scaled(self.data.get_real(), expression.total_scale_factor)
        self.data.set(replace(real, position=MultiLerp.linear(expression.position)))

    def initiate(self, initiation: Initiation) -> None:
        """Begin a keyboard-initiated gesture."""
        real = self.data.get_real()
        start = real.position.reveal()
        kind = initiation.kind

        if kind is InitiationKind.TRANSLATE:
            self.translate_behavior.moving = True
            self.release_limbs()
        elif kind is InitiationKind.SCALE:
            self.prescale_size = self.capture_size(real)
        elif kind is InitiationKind.SPREAD:
            self.spread_behavior = SpreadBehavior(
                origin=initiation.center or Vec2(), start=start, point=initiation.point or Vec2()
            )
        elif kind is InitiationKind.REVOLVE:
            self.revolve_behavior.set(initiation.center or Vec2(), start, initiation.point or Vec2())
        elif kind is InitiationKind.DILATE:
            self.prescale_size = self.capture_size(real)
            self.dilate_behavior = DilateBehavior(
                origin=initiation.center or Vec2(), start=start, point=initiation.point or Vec2()
            )

    def duplicate(self, offset: Vec2) -> "Squid":
        """New shape from the real snapshot shifted by ``offset``, at rest."""
        real = self.data.get_real()
        data = replace(real, position=MultiLerp.from_value(real.position.reveal() + offset))
        return type(self)(data, duration=self.data.duration, clock=self.data.clock)

    def __lt__(self, other: "Squid") -> bool:
        return self.created < other.created

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.get_name()!r}, created={self.created})"
