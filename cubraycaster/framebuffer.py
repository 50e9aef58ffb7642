"""An in-memory 32-bit pixel buffer the renderer draws into."""

from __future__ import annotations

import sys
from array import array

WIN_WIDTH = 1820
WIN_HEIGHT = 920

_MASK = 0xFFFFFFFF


class Framebuffer:
    """A ``width`` x ``height`` grid of 0xRRGGBB pixels, row by row."""

    def __init__(self, width: int = WIN_WIDTH, height: int = WIN_HEIGHT, fill: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = array("I", [fill & _MASK]) * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the buffer are ignored."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = color & _MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour of one pixel."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the framebuffer")
        return self._pixels[y * self.width + x]

    def fill_column(self, x: int, y_start: int, y_end: int, color: int) -> None:
        """Paint rows ``y_start`` to ``y_end`` (inclusive) of column ``x``.

        The span is clipped to the buffer; nothing is drawn if it is empty.
        """
        if not 0 <= x < self.width:
            return
        y_start = max(0, y_start)
        y_end = min(self.height - 1, y_end)
        if y_start > y_end:
            return
        count = y_end - y_start + 1
        first = y_start * self.width + x
        last = y_end * self.width + x
        self._pixels[first:last + 1:self.width] = array("I", [color & _MASK]) * count

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels as packed 8-bit R, G, B triplets, row by row."""
        pixels = self._pixels
        if sys.byteorder == "big":
            pixels = array("I", pixels)
            pixels.byteswap()
        raw = pixels.tobytes()
        out = bytearray(self.width * self.height * 3)
        out[0::3] = raw[2::4]
        out[1::3] = raw[1::4]
        out[2::3] = raw[0::4]
        return bytes(out)