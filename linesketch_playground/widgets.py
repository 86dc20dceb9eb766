"""Qt widgets for the LineSketch Playground UI."""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from PySide6.QtCore import QPointF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QImage, QPainter, QPen
from PySide6.QtWidgets import QWidget

from linesketch_playground.config import EditorConfig, load_config
from linesketch_playground.editor import Editor
from linesketch_playground.geometry import Point, total_length
from linesketch_playground.tools import LineTool

logger = logging.getLogger(__name__)

BACKGROUND = QColor(255, 255, 255)
STROKE = QColor(30, 30, 30)


class ImageSurface:
    """Drawing surface backed by a ``QImage`` the canvas blits on paint."""

    def __init__(self, width: int, height: int):
        self._pen = QPen(STROKE)
        self._pen.setWidthF(1.0)
        self._image = self._allocate(width, height)

    @staticmethod
    def _allocate(width: int, height: int) -> QImage:
        image = QImage(max(1, int(width)), max(1, int(height)), QImage.Format_ARGB32_Premultiplied)
        image.fill(BACKGROUND)
        return image

    def clear(self) -> None:
        self._image.fill(BACKGROUND)

    def stroke_line(self, a: Point, b: Point) -> None:
        painter = QPainter(self._image)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.setPen(self._pen)
            painter.drawLine(QPointF(float(a[0]), float(a[1])), QPointF(float(b[0]), float(b[1])))
        finally:
            painter.end()

    def resize(self, width: int, height: int) -> None:
        self._image = self._allocate(width, height)

    def size(self) -> Tuple[int, int]:
        return (self._image.width(), self._image.height())

    def image(self) -> QImage:
        return self._image


class Canvas(QWidget):
    """Drawing surface handling pointer input and rendering."""

    status_changed = Signal(dict)

    def __init__(self, config: Optional[EditorConfig] = None):
        super().__init__()
        self.setObjectName("LineSketchCanvas")
        self.setMinimumSize(QSize(640, 480))
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMouseTracking(True)
        self.setToolTip(
            "Canvas: drag on empty space to draw a line.\n"
            "Drag a line's start to move it, drag its end to rotate it."
        )

        self._surface = ImageSurface(self.width(), self.height())
        self.editor = Editor(self._surface, config or load_config(), on_change=self._on_editor_changed)
        self._tool = LineTool(self)
        self._status_state: Dict[str, Optional[float | int | str]] = {}
        self._emit_default_status()

    def surface(self) -> ImageSurface:
        return self._surface

    def tool(self) -> LineTool:
        return self._tool

    # ------------------------------------------------------------------
    # Status helpers
    def _emit_status(self, updates: Dict[str, Optional[float | int | str]]) -> None:
        self._status_state.update(updates)
        self.status_changed.emit(dict(self._status_state))

    def post_status_message(self, message: str) -> None:
        self._emit_status({"message": message})

    def _emit_default_status(self) -> None:
        self._status_state = {
            "mode": self.editor.mode,
            "segments": 0,
            "total_length": 0.0,
            "length": None,
            "angle": None,
            "message": "",
        }
        self.status_changed.emit(dict(self._status_state))

    def refresh_status(self) -> None:
        segments = self.editor.segments
        selected = self.editor.selected_segment
        self._emit_status(
            {
                "mode": self.editor.mode,
                "segments": len(segments),
                "total_length": total_length([(s.start, s.end) for s in segments]),
                "length": None if selected is None else selected.length(),
                "angle": None if selected is None or selected.is_degenerate() else selected.angle_deg(),
            }
        )

    def _on_editor_changed(self) -> None:
        self.refresh_status()
        self.update()

    # ------------------------------------------------------------------
    # Painting
    def paintEvent(self, event):  # pragma: no cover - GUI entry point
        painter = QPainter(self)
        painter.drawImage(0, 0, self._surface.image())
        painter.end()

    # ------------------------------------------------------------------
    # Event forwarding to the active tool
    def resizeEvent(self, event):  # pragma: no cover - GUI layout handling
        super().resizeEvent(event)
        size = event.size()
        self._surface.resize(size.width(), size.height())
        logger.debug("Surface resized to %dx%d", size.width(), size.height())
        self.editor.redraw()

    def mousePressEvent(self, event):  # pragma: no cover - GUI entry point
        self._tool.mouse_press(event)

    def mouseMoveEvent(self, event):  # pragma: no cover - GUI entry point
        self._tool.mouse_move(event)

    def mouseReleaseEvent(self, event):  # pragma: no cover - GUI entry point
        self._tool.mouse_release(event)

    def keyPressEvent(self, event):  # pragma: no cover - GUI entry point
        if event.key() == Qt.Key_Escape:
            self._tool.key_press(event)
        else:
            super().keyPressEvent(event)
