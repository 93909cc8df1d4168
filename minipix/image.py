"""In-memory 32 bits-per-pixel images."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass, field

BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = BITS_PER_PIXEL // 8


@dataclass(eq=False)
class Image:
    """A ZPixmap-style image: rows of 32-bit pixel values in ``data``.

    ``endian`` is 0 when pixel values are stored little endian and 1 when
    big endian; it follows the host byte order.
    """

    width: int
    height: int
    bpp: int = field(init=False, default=BITS_PER_PIXEL)
    size_line: int = field(init=False)
    endian: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"image size must be positive, got {self.width}x{self.height}"
            )
        self.size_line = self.width * _BYTES_PER_PIXEL
        self.endian = 0 if sys.byteorder == "little" else 1
        self.data = bytearray(self.size_line * self.height)

    @property
    def _byte_order(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.size_line + x * _BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (taken modulo 2**32) at column ``x``, row ``y``."""
        offset = self._offset(x, y)
        self.data[offset:offset + _BYTES_PER_PIXEL] = (
            color & 0xFFFFFFFF
        ).to_bytes(_BYTES_PER_PIXEL, self._byte_order)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned 32-bit value at column ``x``, row ``y``."""
        offset = self._offset(x, y)
        return int.from_bytes(
            self.data[offset:offset + _BYTES_PER_PIXEL], self._byte_order
        )

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Yield each row, top to bottom, as a tuple of pixel values."""
        view = memoryview(self.data)
        for y in range(self.height):
            start = y * self.size_line
            row = view[start:start + self.width * _BYTES_PER_PIXEL]
            yield tuple(
                int.from_bytes(row[i:i + _BYTES_PER_PIXEL], self._byte_order)
                for i in range(0, len(row), _BYTES_PER_PIXEL)
            )