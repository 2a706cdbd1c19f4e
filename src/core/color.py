# core/color.py
from dataclasses import dataclass

@dataclass(frozen=True)
class Color:
    """
    An 8-bit RGB color. This is the only thing the renderer hands back for a pixel.
    """
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"Color channel {name} must be an integer in 0..255, got {value!r}")

    def to_tuple(self) -> tuple:
        return (self.r, self.g, self.b)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


class ColorPresets:
    """Named colors used by the bundled scenes."""
    WHITE = Color(255, 255, 255)
    BLACK = Color(0, 0, 0)
    RED = Color(255, 0, 0)
    GREEN = Color(0, 255, 0)
    BLUE = Color(0, 0, 255)
