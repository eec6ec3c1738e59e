# core/color.py
from typing import Iterable, Tuple

CHANNEL_MAX = 255

def clamp_channel(value: int) -> int:
    """Clamp an integer channel value into [0, 255]."""
    if value < 0:
        return 0
    if value > CHANNEL_MAX:
        return CHANNEL_MAX
    return value

class Color:
    """
    An 8-bit-per-channel RGB color.

    All arithmetic saturates: scaling truncates each product toward zero and
    clamps it, addition clamps the channel sum. A saturated channel keeps no
    record of the overshoot.
    """
    def __init__(self, r: int = 0, g: int = 0, b: int = 0):
        self.r = clamp_channel(int(r))
        self.g = clamp_channel(int(g))
        self.b = clamp_channel(int(b))

    @classmethod
    def from_sequence(cls, values: Iterable[int]) -> "Color":
        values = list(values)
        if len(values) != 3:
            raise ValueError(f"Expected 3 channels, got {len(values)}")
        return cls(values[0], values[1], values[2])

    def __mul__(self, s: float) -> "Color":
        return Color(
            clamp_channel(int(self.r * s)),
            clamp_channel(int(self.g * s)),
            clamp_channel(int(self.b * s))
        )

    def __rmul__(self, s: float) -> "Color":
        return self.__mul__(s)

    def __add__(self, other: "Color") -> "Color":
        return Color(
            clamp_channel(self.r + other.r),
            clamp_channel(self.g + other.g),
            clamp_channel(self.b + other.b)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def brightness(self) -> float:
        """Mean channel value normalized to [0, 1]."""
        return (self.r + self.g + self.b) / (3.0 * CHANNEL_MAX)

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
DEFAULT_BACKGROUND = Color(80, 90, 110)
