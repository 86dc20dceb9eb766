"""Application bootstrap for the LineSketch Playground."""
from __future__ import annotations

import logging
import sys
from typing import Dict, Optional

from PySide6.QtGui import QKeySequence
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QStatusBar

from linesketch_playground.config import load_config
from linesketch_playground.logging_config import init_logging
from linesketch_playground.widgets import Canvas

logger = logging.getLogger(__name__)


class Main(QMainWindow):
    """Top-level window wiring together the canvas and its chrome."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("LineSketch Playground")

        self._status_labels: Dict[str, QLabel] = {}
        self._setup_status_bar()

        self.canvas = Canvas(load_config())
        self.setCentralWidget(self.canvas)
        self._make_menu()

        self.canvas.status_changed.connect(self._on_status_changed)
        self.canvas.refresh_status()
        self.resize(1000, 700)

    # ------------------------------------------------------------------
    # UI scaffolding
    def _setup_status_bar(self) -> None:
        bar = QStatusBar()
        bar.setSizeGripEnabled(False)
        self.setStatusBar(bar)

        self._status_labels = {
            "mode": QLabel("mode: idle"),
            "segments": QLabel("lines: 0"),
            "total": QLabel("total: 0.0"),
            "length": QLabel("length: --"),
            "angle": QLabel("angle: --"),
        }
        status_help = {
            "mode": "Current gesture: idle, drawing, moving or rotating.",
            "segments": "Number of lines on the canvas.",
            "total": "Combined length of every line on the canvas.",
            "length": "Length of the selected line.",
            "angle": "Direction of the selected line, start to end, in degrees.",
        }
        for key, label in self._status_labels.items():
            label.setToolTip(status_help.get(key, ""))
            bar.addPermanentWidget(label)

    def _make_menu(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        quit_action = file_menu.addAction("Quit")
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        quit_action.setStatusTip("Close the playground.")

    # ------------------------------------------------------------------
    # Event handlers
    def _on_status_changed(self, payload: dict) -> None:
        message = payload.get("message")
        if message is not None:
            if message:
                self.statusBar().showMessage(message, 4000)
            else:
                self.statusBar().clearMessage()
        self._status_labels["mode"].setText(f"mode: {payload.get('mode', 'idle')}")
        self._status_labels["segments"].setText(f"lines: {payload.get('segments', 0)}")
        self._status_labels["total"].setText(self._format_value("total", payload.get("total_length"), precision=1))
        self._status_labels["length"].setText(self._format_value("length", payload.get("length"), precision=1))
        self._status_labels["angle"].setText(self._format_value("angle", payload.get("angle"), precision=1))

    def _format_value(self, label: str, value: Optional[float], precision: int) -> str:
        if value is None:
            return f"{label}: --"
        return f"{label}: {value:.{precision}f}"


def main() -> int:
    init_logging()
    app = QApplication(sys.argv)
    window = Main()
    window.show()
    logger.info("LineSketch Playground started")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
