"""LineSketch Playground: draw, move and rotate straight lines on a canvas."""
from linesketch_playground.editor import (
    Drawing,
    Editor,
    EditorState,
    Idle,
    Moving,
    PointerEvent,
    PointerKind,
    Rotating,
)
from linesketch_playground.segment import Segment
from linesketch_playground.surface import DrawingSurface, RecordingSurface

__all__ = [
    "Drawing",
    "DrawingSurface",
    "Editor",
    "EditorState",
    "Idle",
    "Moving",
    "PointerEvent",
    "PointerKind",
    "RecordingSurface",
    "Rotating",
    "Segment",
]
