"""Camera mapping between world space and screen space."""

from dataclasses import dataclass

from photosquid.domain.vec import Vec2, div_or_zero


@dataclass(frozen=True, slots=True)
class Camera:
    """A 2D camera.

    Screen coordinates are world coordinates offset by ``position`` and
    scaled by ``zoom`` about the center of the window.

    Attributes:
        position: World-space offset of the view
        zoom: Magnification factor (1.0 = identity)
        window: Window dimensions in screen units
    """

    position: Vec2 = Vec2()
    zoom: float = 1.0
    window: Vec2 = Vec2()

    @classmethod
    def identity(cls, window: Vec2 | None = None) -> "Camera":
        return cls(position=Vec2(), zoom=1.0, window=window or Vec2())

    def apply(self, point: Vec2) -> Vec2:
        """Map a world-space point to screen space."""
        half_window = self.window * 0.5
        return (point - self.position - half_window) * self.zoom + half_window

    def apply_reverse(self, point: Vec2) -> Vec2:
        """Map a screen-space point to world space."""
        half_window = self.window * 0.5
        scaled = point - half_window
        return (
            Vec2(div_or_zero(scaled.x, self.zoom), div_or_zero(scaled.y, self.zoom))
            + self.position
            + half_window
        )

    def apply_to_vector(self, vector: Vec2) -> Vec2:
        """Map a world-space direction to screen space (no translation)."""
        return vector * self.zoom

    def apply_reverse_to_vector(self, vector: Vec2) -> Vec2:
        """Map a screen-space direction to world space (no translation)."""
        return Vec2(div_or_zero(vector.x, self.zoom), div_or_zero(vector.y, self.zoom))

    def apply_to_scale(self, scale: float) -> float:
        return scale * self.zoom

    def apply_reverse_to_scale(self, scale: float) -> float:
        return div_or_zero(scale, self.zoom)

    def with_position(self, position: Vec2) -> "Camera":
        return Camera(position=position, zoom=self.zoom, window=self.window)

    def to_view(self) -> tuple[Vec2, Vec2]:
        """Get the view rectangle centered on ``position`` as (top_left, bottom_right)."""
        view_size = Vec2(
            div_or_zero(self.window.x, self.zoom),
            div_or_zero(self.window.y, self.zoom),
        )
        return (self.position - view_size * 0.5, self.position + view_size * 0.5)

    @staticmethod
    def view_to_components(window: Vec2, view: tuple[Vec2, Vec2]) -> tuple[Vec2, float]:
        """Convert a view rectangle back into (position, zoom).

        Zoom is determined by the x extent only.
        """
        top_left, bottom_right = view
        view_size = bottom_right - top_left
        position = top_left + view_size * 0.5
        zoom = div_or_zero(window.x, view_size.x)
        return (position, zoom)

    def lerp(self, other: "Camera", t: float) -> "Camera":
        return Camera(
            position=self.position.lerp(other.position, t),
            zoom=self.zoom * (1.0 - t) + other.zoom * t,
            window=other.window,
        )

    def zoomed_about(self, zoom_multiplier: float, screen_point: Vec2) -> "Camera":
        """Zoom by ``zoom_multiplier`` keeping what is under ``screen_point`` in place.

        Args:
            zoom_multiplier: Factor to multiply the zoom by (> 1 zooms in)
            screen_point: Screen position that should not move

        Returns:
            The zoomed camera, or this camera if the multiplier is not positive
        """
        if zoom_multiplier <= 0:
            return self

        top_left, bottom_right = self.to_view()
        view_size = bottom_right - top_left
        ratios = Vec2(
            div_or_zero(screen_point.x, self.window.x),
            div_or_zero(screen_point.y, self.window.y),
        )
        point = top_left + ratios.component_mul(view_size)

        new_top_left = point - ratios.component_mul(view_size) / zoom_multiplier
        new_bottom_right = new_top_left + view_size / zoom_multiplier
        position, zoom = Camera.view_to_components(self.window, (new_top_left, new_bottom_right))
        return Camera(position=position, zoom=zoom, window=self.window)
