from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


class CascadePlacer:
    """
    Running origin for new windows.

    The first window is centered on the screen area; each later one sits at
    the previous window's origin plus (dx, dy). A cascaded window that would
    cross the right or bottom edge starts again from the area's top-left.
    """

    def __init__(self, dx: int = 30, dy: int = 30) -> None:
        self.dx = dx
        self.dy = dy
        self._last: tuple[int, int] | None = None

    @property
    def last_origin(self) -> tuple[int, int] | None:
        return self._last

    def next_origin(self, size: tuple[int, int], screen: Rect) -> tuple[int, int]:
        w, h = size
        if self._last is None:
            return (
                screen.x + max(0, (screen.width - w) // 2),
                screen.y + max(0, (screen.height - h) // 2),
            )
        x, y = self._last[0] + self.dx, self._last[1] + self.dy
        if x + w > screen.right or y + h > screen.bottom:
            x, y = screen.x, screen.y
        return x, y

    def remember(self, origin: tuple[int, int]) -> None:
        """Record where the newest window actually ended up."""
        self._last = (int(origin[0]), int(origin[1]))
