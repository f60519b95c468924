"""RGBA color type.

Channels are floats in [0.0, 1.0]. Parsing never raises: malformed hex
strings degrade to transparent black.
"""

import colorsys
import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color.

    Attributes:
        r: Red channel
        g: Green channel
        b: Blue channel
        a: Alpha channel
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def transparent_black(cls) -> "Color":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> "Color":
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse ``RRGGBB`` or ``RRGGBBAA``, with or without a leading ``#``.

        Args:
            text: Hex color string

        Returns:
            Parsed color, or transparent black if ``text`` is malformed
        """
        digits = text.strip().removeprefix("#")
        if len(digits) not in (6, 8):
            return cls.transparent_black()

        try:
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            return cls.transparent_black()

        if len(channels) == 3:
            channels.append(255)

        r, g, b, a = (channel / 255.0 for channel in channels)
        return cls(r, g, b, a)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> "Color":
        """Create an opaque color from hue, saturation and value in [0, 1]."""
        r, g, b = colorsys.hsv_to_rgb(h % 1.0, s, v)
        return cls(r, g, b, 1.0)

    def to_hsv(self) -> tuple[float, float, float]:
        """Convert to (hue, saturation, value), each in [0, 1)."""
        h, s, v = colorsys.rgb_to_hsv(self.r, self.g, self.b)
        if math.isclose(h, 1.0):
            h = 0.0
        return (h, s, v)

    def to_hex(self) -> str:
        """Format as ``#RRGGBBAA``."""
        r, g, b, a = self.to_bytes()
        return f"#{r:02x}{g:02x}{b:02x}{a:02x}"

    def to_bytes(self) -> tuple[int, int, int, int]:
        return (
            int(self.r * 255.0),
            int(self.g * 255.0),
            int(self.b * 255.0),
            int(self.a * 255.0),
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)
