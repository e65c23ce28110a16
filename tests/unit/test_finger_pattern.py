"""Unit tests for finger pattern generation and finger counting."""

import pytest

from boxmaker.domain.services import calculate_finger_count, generate_finger_pattern
from boxmaker.domain.value_objects import FingerPattern, FingerSegment


class TestGenerateFingerPattern:
    """Tests for generate_finger_pattern."""

    def test_exact_fit_uses_midpoint_width(self) -> None:
        """A 30 mm edge with a 5..15 range splits into three 10 mm segments."""
        pattern = generate_finger_pattern(30.0, 5.0, 15.0)

        assert pattern.segment_count == 3
        assert pattern.finger_width == pytest.approx(10.0)
        assert [(s.start, s.end) for s in pattern.segments] == [
            pytest.approx((0.0, 10.0)),
            pytest.approx((10.0, 20.0)),
            pytest.approx((20.0, 30.0)),
        ]

    def test_even_count_is_bumped_to_odd(self) -> None:
        """100 / 10 = 10 segments becomes 11."""
        pattern = generate_finger_pattern(100.0, 5.0, 15.0)

        assert pattern.segment_count == 11
        assert pattern.finger_width == pytest.approx(100.0 / 11)

    def test_half_rounds_up(self) -> None:
        """80 / 10 = 8 is bumped to 9 segments."""
        pattern = generate_finger_pattern(80.0, 5.0, 15.0)

        assert pattern.segment_count == 9

    def test_short_edge_stops_at_three_segments(self) -> None:
        """An edge shorter than the minimum width keeps three narrow segments."""
        pattern = generate_finger_pattern(2.0, 5.0, 15.0)

        assert pattern.segment_count == 3
        assert pattern.finger_width == pytest.approx(2.0 / 3)
        assert pattern.finger_width < 5.0

    def test_sub_millimetre_edge_keeps_its_length(self) -> None:
        """Edges shorter than 1 mm are split over their own length."""
        pattern = generate_finger_pattern(0.1, 5.0, 15.0)

        assert pattern.length == 0.1
        assert pattern.segment_count == 3
        assert pattern.segments[-1].end == 0.1
        assert pattern.finger_width == pytest.approx(0.1 / 3)

    def test_negative_length_is_treated_as_zero(self) -> None:
        """Negative lengths collapse to an empty edge."""
        pattern = generate_finger_pattern(-4.0, 5.0, 15.0)

        assert pattern.length == 0.0
        assert pattern.segment_count == 3
        assert pattern.segments[-1].end == 0.0

    def test_wide_steps_add_segments(self) -> None:
        """Widths above the maximum add segments two at a time."""
        pattern = generate_finger_pattern(100.0, 2.0, 4.0)

        assert pattern.finger_width <= 4.0
        assert pattern.finger_width >= 2.0
        assert pattern.segment_count % 2 == 1

    def test_inverted_range_is_widened(self) -> None:
        """min > max is tolerated and still yields a valid pattern."""
        pattern = generate_finger_pattern(100.0, 15.0, 5.0)

        assert pattern.segment_count % 2 == 1
        assert pattern.segment_count >= 3
        assert pattern.finger_width >= 15.0

    def test_last_segment_snaps_to_length(self) -> None:
        """The final segment ends exactly at the edge length."""
        pattern = generate_finger_pattern(47.3, 5.0, 15.0)

        assert pattern.segments[-1].end == 47.3

    def test_same_input_gives_identical_pattern(self) -> None:
        """Generation is deterministic."""
        assert generate_finger_pattern(123.4, 4.0, 9.0) == generate_finger_pattern(
            123.4, 4.0, 9.0
        )


class TestFingerPatternProperties:
    """Structural properties over a grid of lengths and ranges."""

    @pytest.mark.parametrize(
        "length", [0.1, 0.5, 1.0, 2.5, 10.0, 30.0, 47.3, 100.0, 250.0, 999.9]
    )
    @pytest.mark.parametrize("low,high", [(5.0, 15.0), (3.0, 6.0), (10.0, 20.0)])
    def test_pattern_structure(self, length: float, low: float, high: float) -> None:
        """Odd count, contiguous cover, alternating tabs, width within bounds."""
        pattern = generate_finger_pattern(length, low, high)
        segments = pattern.segments

        assert pattern.segment_count >= 3
        assert pattern.segment_count % 2 == 1
        assert segments[0].start == 0.0
        assert segments[-1].end == length
        for previous, current in zip(segments, segments[1:]):
            assert current.start == pytest.approx(previous.end)
        assert [s.is_tab for s in segments] == [i % 2 == 0 for i in range(len(segments))]
        assert segments[0].is_tab and segments[-1].is_tab

        assert pattern.finger_width <= high + 1e-9
        if pattern.segment_count > 3:
            assert pattern.finger_width >= low - 1e-9


class TestFingerPatternValueObject:
    """Tests for FingerPattern preconditions."""

    def test_rejects_fewer_than_three_segments(self) -> None:
        """Two segments cannot start and end with a tab."""
        segments = (FingerSegment(0, 5, True), FingerSegment(5, 10, False))
        with pytest.raises(ValueError, match="at least 3"):
            FingerPattern(length=10, finger_width=5, segments=segments)

    def test_rejects_even_segment_count(self) -> None:
        """Even segment counts are rejected."""
        segments = tuple(FingerSegment(i, i + 1, i % 2 == 0) for i in range(4))
        with pytest.raises(ValueError, match="odd"):
            FingerPattern(length=4, finger_width=1, segments=segments)

    def test_tab_count(self) -> None:
        """Tabs sit on the even indices."""
        pattern = generate_finger_pattern(100.0, 5.0, 15.0)

        assert pattern.tab_count == 6


class TestCalculateFingerCount:
    """Tests for calculate_finger_count."""

    def test_prefers_fewest_tabs_within_maximum(self) -> None:
        """60 mm with 5..15: at least ceil(60/30)=2 tabs, at most 6."""
        assert calculate_finger_count(60.0, 5.0, 15.0) == 2

    def test_capped_by_minimum_width(self) -> None:
        """The count never drops the cell width below the minimum."""
        assert calculate_finger_count(40.0, 10.0, 1.0) == 2

    def test_tiny_length_gives_one_tab(self) -> None:
        """Lengths too short for a minimum-width pair still yield one tab."""
        assert calculate_finger_count(0.5, 5.0, 15.0) == 1

    @pytest.mark.parametrize("length", [1.0, 15.0, 63.0, 200.0, 1500.0])
    def test_always_at_least_one(self, length: float) -> None:
        """The result is never below one."""
        assert calculate_finger_count(length, 5.0, 15.0) >= 1
