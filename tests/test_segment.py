import pytest

from linesketch_playground.segment import HANDLE_END, HANDLE_START, Segment
from linesketch_playground.surface import RecordingSurface


class TestHitTest:
    """Endpoint handle detection."""

    def test_near_start(self, horizontal_segment):
        assert horizontal_segment.hit_test((2, 0)) == HANDLE_START

    def test_near_end(self, horizontal_segment):
        assert horizontal_segment.hit_test((98, 0)) == HANDLE_END

    def test_middle_of_long_segment_is_not_a_handle(self, horizontal_segment):
        assert horizontal_segment.hit_test((50, 0)) is None

    def test_too_far_from_line(self, horizontal_segment):
        assert horizontal_segment.hit_test((2, 20)) is None

    def test_proximity_is_strict(self, horizontal_segment):
        assert horizontal_segment.hit_test((2, 4.9)) == HANDLE_START
        assert horizontal_segment.hit_test((2, 5)) is None

    def test_capture_radius_is_strict(self, horizontal_segment):
        assert horizontal_segment.hit_test((9.9, 0)) == HANDLE_START
        assert horizontal_segment.hit_test((10, 0)) is None

    def test_start_wins_when_both_handles_are_in_reach(self):
        short = Segment((0, 0), (4, 0))
        assert short.hit_test((3, 0)) == HANDLE_START

    def test_beyond_the_end_along_the_line(self, horizontal_segment):
        assert horizontal_segment.hit_test((105, 1)) == HANDLE_END

    def test_custom_thresholds(self, horizontal_segment):
        assert horizontal_segment.hit_test((15, 0)) is None
        assert horizontal_segment.hit_test((15, 0), capture_radius=20) == HANDLE_START
        assert horizontal_segment.hit_test((2, 8), proximity=10) == HANDLE_START


class TestDegenerate:
    def test_hit_on_the_point_returns_start(self):
        dot = Segment((10, 10), (10, 10))
        assert dot.hit_test((10, 10)) == HANDLE_START

    def test_far_point_misses(self):
        dot = Segment((10, 10), (10, 10))
        assert dot.hit_test((50, 50)) is None

    def test_nearby_point_within_proximity(self):
        dot = Segment((10, 10), (10, 10))
        assert dot.hit_test((13, 10)) == HANDLE_START
        assert dot.hit_test((16, 10)) is None

    def test_is_degenerate(self):
        assert Segment((1, 1), (1, 1)).is_degenerate()
        assert not Segment((1, 1), (2, 1)).is_degenerate()

    def test_near_coincident_endpoints_agree_with_hit_test(self):
        dot = Segment((10, 10), (10 + 1e-13, 10))
        assert dot.is_degenerate()
        assert dot.hit_test((13, 10)) == HANDLE_START
        assert dot.hit_test((10, 16)) is None


def test_translate_moves_both_endpoints():
    seg = Segment((0, 0), (10, 0))
    seg.translate(3, 4)
    assert seg.start == (3.0, 4.0)
    assert seg.end == (13.0, 4.0)


def test_set_end_keeps_start():
    seg = Segment((0, 0), (10, 0))
    seg.set_end((0, 10))
    assert seg.start == (0.0, 0.0)
    assert seg.end == (0.0, 10.0)


def test_draw_strokes_once_without_mutating():
    seg = Segment((1, 2), (3, 4), selected=True)
    surface = RecordingSurface()
    seg.draw(surface)
    assert surface.commands == [("line", (1.0, 2.0), (3.0, 4.0))]
    assert seg == Segment((1, 2), (3, 4), selected=True)


def test_length_and_angle():
    seg = Segment((0, 0), (0, 10))
    assert seg.length() == pytest.approx(10.0)
    assert seg.angle_deg() == pytest.approx(90.0)


def test_endpoints_are_normalised_to_float_tuples():
    seg = Segment([1, 2], [3, 4])
    assert seg.start == (1.0, 2.0)
    assert seg.end == (3.0, 4.0)
