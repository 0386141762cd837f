"""5x5 addressable LED matrix wired in serpentine order."""

from __future__ import annotations

from collections.abc import Callable, Sequence

NUM_PIXELS = 25
ROW_LENGTH = 5
INTENSITY_MAX = 10


def urgb_u32(r: float, g: float, b: float) -> int:
    """Pack a colour into the GRB word the LEDs expect."""
    return (int(r) << 8) | (int(g) << 16) | int(b)


def serpentine(pattern: Sequence[bool]) -> list[bool]:
    """Reorder a row-major 5x5 pattern so rows 1 and 3 run right to left."""
    if len(pattern) != NUM_PIXELS:
        raise ValueError(f"pattern must have {NUM_PIXELS} entries, got {len(pattern)}")
    result: list[bool] = []
    for row in range(ROW_LENGTH):
        cells = [bool(v) for v in pattern[row * ROW_LENGTH:(row + 1) * ROW_LENGTH]]
        result.extend(reversed(cells) if row in (1, 3) else cells)
    return result


class LedMatrix:
    """Matrix driver that sends one 32-bit word per LED to a sink."""

    def __init__(
        self,
        sink: Callable[[int], None],
        color: tuple[int, int, int] = (INTENSITY_MAX, 0, 0),
    ) -> None:
        self.sink = sink
        self.color = color
        self.buffer: list[bool] = [False] * NUM_PIXELS

    def set_leds(self, r: int, g: int, b: int) -> None:
        """Push the buffer, last LED first, lit ones in the given colour."""
        word = urgb_u32(r, g, b)
        for lit in reversed(self.buffer):
            self.sink(((word if lit else 0) << 8) & 0xFFFFFFFF)

    def update(self, pattern: Sequence[bool]) -> None:
        """Load a row-major pattern and show it."""
        self.buffer = serpentine(pattern)
        self.set_leds(*self.color)