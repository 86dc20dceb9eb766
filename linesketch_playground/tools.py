"""Interactive tools for the LineSketch Playground canvas."""
from __future__ import annotations

from PySide6.QtCore import Qt

from linesketch_playground.geometry import Point


class ToolBase:
    """Common interface every tool implements."""

    def __init__(self, canvas):
        self.canvas = canvas

    def mouse_press(self, event):  # pragma: no cover - GUI entry point
        pass

    def mouse_move(self, event):  # pragma: no cover - GUI entry point
        pass

    def mouse_release(self, event):  # pragma: no cover - GUI entry point
        pass

    def key_press(self, event):  # pragma: no cover - GUI entry point
        pass

    def deactivate(self):  # pragma: no cover - GUI entry point
        pass


def event_point(event) -> Point:
    """Widget-local position of a Qt mouse event."""
    pos = event.position()
    return (float(pos.x()), float(pos.y()))


class LineTool(ToolBase):
    """Draw, move and rotate segments with the left mouse button.

    Press on empty space draws, press on a start handle moves and press on an
    end handle rotates. Escape ends the current gesture as if the button had
    been released.
    """

    def mouse_press(self, event):
        if event.button() != Qt.LeftButton:
            return
        self.canvas.editor.pointer_down(event_point(event))

    def mouse_move(self, event):
        self.canvas.editor.pointer_move(event_point(event))

    def mouse_release(self, event):
        if event.button() != Qt.LeftButton:
            return
        self.canvas.editor.pointer_up()
        self.canvas.refresh_status()

    def key_press(self, event):
        if event.key() == Qt.Key_Escape:
            self.deactivate()

    def deactivate(self):
        self.canvas.editor.pointer_up()
        self.canvas.refresh_status()
