"""
Shared fixtures for LineSketch Playground tests.

Provides a recording surface, editors built on it and a fake Qt mouse event.
"""
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from linesketch_playground.editor import Editor
from linesketch_playground.segment import Segment
from linesketch_playground.surface import RecordingSurface


class FakeMouseEvent:
    """Just enough of QMouseEvent for the tools."""

    def __init__(self, x, y, button=None):
        from PySide6.QtCore import QPointF, Qt

        self._pos = QPointF(float(x), float(y))
        self._button = Qt.LeftButton if button is None else button

    def position(self):
        return self._pos

    def button(self):
        return self._button


class FakeKeyEvent:
    def __init__(self, key):
        self._key = key

    def key(self):
        return self._key


@pytest.fixture
def surface():
    """Fresh recording surface"""
    return RecordingSurface()


@pytest.fixture
def editor(surface):
    """Empty editor bound to the recording surface"""
    return Editor(surface)


@pytest.fixture
def editor_with_line(editor):
    """Editor holding one line (0,0)-(10,0), drawn through the pointer handlers"""
    editor.pointer_down((0, 0))
    editor.pointer_move((10, 0))
    editor.pointer_up()
    return editor


@pytest.fixture
def horizontal_segment():
    return Segment((0, 0), (100, 0))


@pytest.fixture
def mouse_event():
    """Factory for fake left-button (or given button) mouse events"""
    return FakeMouseEvent


@pytest.fixture
def key_event():
    """Factory for fake key events"""
    return FakeKeyEvent
