"""Pointer-driven line editor: segment list plus interaction state machine.

A press on empty space starts a new segment, a press on a segment's start
handle moves the whole segment and a press on its end handle swings the end
around the start. Every handler returns the resulting state so callers can
drive the editor from a plain dispatch loop as well as from Qt events.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from linesketch_playground.config import EditorConfig
from linesketch_playground.geometry import Point, as_point, delta
from linesketch_playground.segment import HANDLE_END, HANDLE_START, Segment
from linesketch_playground.surface import DrawingSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Drawing:
    index: int


@dataclass(frozen=True)
class Moving:
    index: int
    last: Point


@dataclass(frozen=True)
class Rotating:
    index: int
    # Press position; rotation follows the absolute pointer so this never moves.
    last: Point


EditorState = Union[Idle, Drawing, Moving, Rotating]

_MODE_NAMES = {Idle: "idle", Drawing: "drawing", Moving: "moving", Rotating: "rotating"}


class PointerKind(str, Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"


@dataclass(frozen=True)
class PointerEvent:
    kind: PointerKind
    point: Optional[Point] = None


class Editor:
    """Owns the segments and routes pointer gestures to them."""

    def __init__(
        self,
        surface: DrawingSurface,
        config: Optional[EditorConfig] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self._surface = surface
        self._config = config or EditorConfig()
        self._on_change = on_change
        self._segments: List[Segment] = []
        self._state: EditorState = Idle()

    # ------------------------------------------------------------------
    # Accessors
    @property
    def surface(self) -> DrawingSurface:
        return self._surface

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return tuple(self._segments)

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def mode(self) -> str:
        return _MODE_NAMES[type(self._state)]

    @property
    def last_pointer_pos(self) -> Optional[Point]:
        if isinstance(self._state, (Moving, Rotating)):
            return self._state.last
        return None

    @property
    def selected_index(self) -> Optional[int]:
        for idx, segment in enumerate(self._segments):
            if segment.selected:
                return idx
        return None

    @property
    def selected_segment(self) -> Optional[Segment]:
        idx = self.selected_index
        return None if idx is None else self._segments[idx]

    # ------------------------------------------------------------------
    # Pointer handlers
    def pointer_down(self, point: Point) -> EditorState:
        point = as_point(point)
        hit_index: Optional[int] = None
        # When several segments are under the pointer the last one in list
        # order wins the selection.
        for idx, segment in enumerate(self._segments):
            if self._hit_test(segment, point) is not None:
                hit_index = idx
        for idx, segment in enumerate(self._segments):
            segment.selected = idx == hit_index

        if hit_index is not None:
            handle = self._hit_test(self._segments[hit_index], point)
            if handle == HANDLE_START:
                self._set_state(Moving(hit_index, point))
            elif handle == HANDLE_END:
                self._set_state(Rotating(hit_index, point))
            else:
                logger.warning("Segment %d lost its hit on re-test at %s; staying idle", hit_index, point)
                self._set_state(Idle())
        else:
            segment = Segment(point, point, selected=True)
            self._segments.append(segment)
            self._set_state(Drawing(len(self._segments) - 1))

        self.redraw()
        return self._state

    def pointer_move(self, point: Point) -> EditorState:
        point = as_point(point)
        state = self._state
        if isinstance(state, Idle):
            return state

        if isinstance(state, Drawing):
            segment = self._segment_at(state.index, require_selected=False)
            if segment is None:
                return state
            segment.set_end(point)
        elif isinstance(state, Moving):
            segment = self._segment_at(state.index, require_selected=True)
            if segment is None:
                return state
            dx, dy = delta(state.last, point)
            segment.translate(dx, dy)
            self._state = Moving(state.index, point)
        elif isinstance(state, Rotating):
            segment = self._segment_at(state.index, require_selected=True)
            if segment is None:
                return state
            segment.set_end(point)

        self.redraw()
        return self._state

    def pointer_up(self) -> EditorState:
        if not isinstance(self._state, Idle):
            self._set_state(Idle())
        return self._state

    def dispatch(self, event: PointerEvent) -> EditorState:
        kind = PointerKind(event.kind)
        if kind is PointerKind.UP:
            return self.pointer_up()
        if event.point is None:
            raise ValueError(f"{kind.value} events need a point")
        if kind is PointerKind.DOWN:
            return self.pointer_down(event.point)
        return self.pointer_move(event.point)

    # ------------------------------------------------------------------
    # Rendering
    def redraw(self) -> None:
        self._surface.clear()
        for segment in self._segments:
            segment.draw(self._surface)
        if self._on_change is not None:
            self._on_change()

    # ------------------------------------------------------------------
    # Internals
    def _hit_test(self, segment: Segment, point: Point) -> Optional[str]:
        return segment.hit_test(
            point,
            proximity=self._config.proximity,
            capture_radius=self._config.capture_radius,
        )

    def _segment_at(self, index: int, *, require_selected: bool) -> Optional[Segment]:
        if not 0 <= index < len(self._segments):
            logger.warning("Active segment %d is out of range (%d segments)", index, len(self._segments))
            return None
        segment = self._segments[index]
        if require_selected and not segment.selected:
            logger.warning("Active segment %d is not selected; ignoring move", index)
            return None
        return segment

    def _set_state(self, state: EditorState) -> None:
        if state != self._state:
            logger.debug("%s -> %s", self._state, state)
        self._state = state


__all__ = [
    "Editor",
    "EditorState",
    "Idle",
    "Drawing",
    "Moving",
    "Rotating",
    "PointerKind",
    "PointerEvent",
]
