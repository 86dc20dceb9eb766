"""Drawing surface contract shared by segments and the editor.

The editor only ever needs two primitives: wipe the whole surface and stroke a
straight line with the surface's default pen. The Qt-backed implementation
lives in ``widgets.py``; ``RecordingSurface`` keeps the command stream in
memory for headless runs.
"""
from __future__ import annotations

from typing import List, Protocol, Tuple, runtime_checkable

from linesketch_playground.geometry import Point, as_point

Command = Tuple[object, ...]


@runtime_checkable
class DrawingSurface(Protocol):
    def clear(self) -> None:
        ...

    def stroke_line(self, a: Point, b: Point) -> None:
        ...


class RecordingSurface:
    """Surface that records ``("clear",)`` and ``("line", a, b)`` commands."""

    def __init__(self) -> None:
        self.commands: List[Command] = []

    def clear(self) -> None:
        self.commands.append(("clear",))

    def stroke_line(self, a: Point, b: Point) -> None:
        self.commands.append(("line", as_point(a), as_point(b)))

    def lines(self) -> List[Tuple[Point, Point]]:
        """Lines stroked since the most recent clear, in stroke order."""
        out: List[Tuple[Point, Point]] = []
        for command in self.commands:
            if command[0] == "clear":
                out.clear()
            else:
                out.append((command[1], command[2]))
        return out

    def reset(self) -> None:
        self.commands.clear()


__all__ = ["DrawingSurface", "RecordingSurface"]
