# renderer/framebuffer.py
import numpy as np
from PIL import Image
from core.color import Color

def from_u8_rgb(r: int, g: int, b: int) -> int:
    """Packs three 8-bit channels into a 0xRRGGBB pixel word."""
    return (r << 16) | (g << 8) | b

class FrameBuffer:
    """
    Row-major buffer of packed 0xRRGGBB words with a top-left origin.

    put_pixel takes centered coordinates (y up) and drops anything that
    lands outside the buffer.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Frame buffer size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        bx = self.width // 2 + x
        by = self.height // 2 - y - 1
        if bx < 0 or bx >= self.width or by < 0 or by >= self.height:
            return
        self.pixels[by, bx] = from_u8_rgb(color.r, color.g, color.b)

    def get_pixel(self, x: int, y: int) -> Color:
        """Reads back the color stored at buffer column x, row y."""
        word = int(self.pixels[y, x])
        return Color((word >> 16) & 0xFF, (word >> 8) & 0xFF, word & 0xFF)

    def clear(self) -> None:
        self.pixels.fill(0)

    def to_rgb_array(self) -> np.ndarray:
        """
        Unpacks the buffer into a (height, width, 3) uint8 image.
        """
        rgb = np.empty((self.height, self.width, 3), dtype=np.uint8)
        rgb[..., 0] = (self.pixels >> 16) & 0xFF
        rgb[..., 1] = (self.pixels >> 8) & 0xFF
        rgb[..., 2] = self.pixels & 0xFF
        return rgb

    def to_surface_array(self) -> np.ndarray:
        # pygame.surfarray indexes (x, y)
        return np.ascontiguousarray(self.to_rgb_array().transpose(1, 0, 2))

    def save(self, path: str) -> None:
        Image.fromarray(self.to_rgb_array()).save(path)
