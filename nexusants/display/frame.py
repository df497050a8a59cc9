"""Frame sinks — where each tick's monochrome picture ends up.

A sink is anything with a fixed size that accepts "light pixel (x, y)"
calls followed by a ``flush``.  ``PixelFrame`` keeps the picture in a
NumPy boolean array and is used for headless runs and tests; the Pygame
window in ``nexusants.ui`` is the interactive one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import numpy as np
from numpy.typing import NDArray


class FrameSink(Protocol):
    """Fixed-size boolean display that receives one frame per tick."""

    width: int
    height: int

    def set_pixel(self, x: int, y: int) -> None: ...

    def flush(self) -> None: ...


@dataclass
class PixelFrame:
    """In-memory frame buffer.

    Attributes:
        width: Pixel columns.
        height: Pixel rows.
        pixels: Pixels lit since the last flush, indexed ``pixels[y, x]``.
        last_frame: Copy of the most recently flushed picture, or None.
        flushes: Number of frames flushed so far.
    """

    width: int
    height: int
    pixels: NDArray[np.bool_] = field(init=False, repr=False)
    last_frame: NDArray[np.bool_] | None = field(default=None, repr=False)
    flushes: int = 0

    def __post_init__(self) -> None:
        self.pixels = np.zeros((self.height, self.width), dtype=np.bool_)

    def set_pixel(self, x: int, y: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = True

    def flush(self) -> None:
        """Publish the current picture and start a blank one."""
        self.last_frame = self.pixels.copy()
        self.pixels[:] = False
        self.flushes += 1

    def lit_count(self) -> int:
        return int(self.pixels.sum())
