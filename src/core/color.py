# core/color.py
from typing import Tuple


def quantize_channel(c: float) -> int:
    """
    Converts a [0, 1] channel to 8 bits with floor(255.999 * c).

    Out-of-range input saturates to 0..255 and nan maps to 0, matching a
    saturating float-to-byte cast.
    """
    scaled = 255.999 * c
    if scaled != scaled:
        return 0
    if scaled <= 0.0:
        return 0
    if scaled >= 255.0:
        return 255
    return int(scaled)


def pack_rgb(r: int, g: int, b: int) -> int:
    """Packs 8-bit channels as 0xRRGGBB."""
    return (r << 16) | (g << 8) | b


class Color:
    """
    Linear RGB color with float channels, used for blending before the final
    8-bit quantization.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, other: float) -> "Color":
        return Color(other * self.r, other * self.g, other * self.b)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    @staticmethod
    def lerp(start: "Color", end: "Color", t: float) -> "Color":
        """
        Blends linearly from start (t = 0) to end (t = 1).
        """
        return (1.0 - t) * start + t * end

    def to_bytes(self) -> Tuple[int, int, int]:
        return (quantize_channel(self.r),
                quantize_channel(self.g),
                quantize_channel(self.b))

    def to_packed(self) -> int:
        return pack_rgb(*self.to_bytes())

    def __str__(self) -> str:
        r, g, b = self.to_bytes()
        return f"{r} {g} {b}"

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)
