"""Character grid that frames are rasterised into."""

from __future__ import annotations

from typing import List


class FrameBuffer:
    """Fixed-size grid of single characters, rebuilt for every frame."""

    __slots__ = ("width", "height", "_rows")

    def __init__(self, width: int, height: int, fill: str = " ") -> None:
        if width < 1 or height < 1:
            raise ValueError("FrameBuffer requires a positive width and height")
        if len(fill) != 1:
            raise ValueError("fill must be a single character")
        self.width = width
        self.height = height
        self._rows: List[List[str]] = [[fill] * width for _ in range(height)]

    def plot(self, x: int, y: int, char: str) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._rows[y][x] = char

    def get(self, x: int, y: int) -> str:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} buffer")
        return self._rows[y][x]

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, char: str) -> None:
        """Bresenham line from ``(x0, y0)`` to ``(x1, y1)``, both ends inclusive."""

        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        step_x = 1 if x0 < x1 else -1
        step_y = 1 if y0 < y1 else -1
        err = dx + dy

        while True:
            self.plot(x0, y0, char)
            if x0 == x1 and y0 == y1:
                break
            doubled = 2 * err
            if doubled >= dy:
                err += dy
                x0 += step_x
            if doubled <= dx:
                err += dx
                y0 += step_y

    def rows(self) -> List[str]:
        return ["".join(row) for row in self._rows]

    def to_text(self) -> str:
        return "".join(row + "\n" for row in self.rows())
