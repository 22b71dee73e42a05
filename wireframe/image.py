"""In-memory pixel images with a packed little-endian byte layout."""

from __future__ import annotations


class Image:
    """A ``width`` by ``height`` image stored as packed rows of bytes.

    Each pixel takes ``bpp // 8`` bytes, least significant byte first, and
    each row takes ``line_len`` bytes. The raw bytes are exposed as ``data``
    so callers can write pixels directly.
    """

    def __init__(self, width: int, height: int, bpp: int = 32) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        if bpp <= 0 or bpp % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {bpp}")
        self.width = width
        self.height = height
        self.bpp = bpp
        self.endian = 0
        self.line_len = width * bpp // 8
        self.data = bytearray(self.line_len * height)

    @property
    def _opp(self) -> int:
        return self.bpp // 8

    @property
    def _mask(self) -> int:
        return (1 << self.bpp) - 1

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside the {self.width}x{self.height} image"
            )
        return y * self.line_len + x * self._opp

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at column ``x`` of row ``y``."""
        start = self._offset(x, y)
        self.data[start : start + self._opp] = (color & self._mask).to_bytes(
            self._opp, "little"
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour stored at column ``x`` of row ``y``."""
        start = self._offset(x, y)
        return int.from_bytes(self.data[start : start + self._opp], "little")

    def clear(self, color: int = 0) -> None:
        """Fill every pixel with ``color``."""
        pixel = (color & self._mask).to_bytes(self._opp, "little")
        self.data[:] = pixel * (self.width * self.height)

    def blit(self, source: Image, x: int = 0, y: int = 0) -> None:
        """Copy ``source`` onto this image with its top-left corner at (x, y).

        Parts of ``source`` that fall outside this image are clipped.
        """
        x0, x1 = max(x, 0), min(x + source.width, self.width)
        y0, y1 = max(y, 0), min(y + source.height, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        if source.bpp == self.bpp:
            opp = self._opp
            count = (x1 - x0) * opp
            for row in range(y0, y1):
                src = (row - y) * source.line_len + (x0 - x) * opp
                dst = row * self.line_len + x0 * opp
                self.data[dst : dst + count] = source.data[src : src + count]
            return
        for row in range(y0, y1):
            for col in range(x0, x1):
                self.set_pixel(col, row, source.get_pixel(col - x, row - y))