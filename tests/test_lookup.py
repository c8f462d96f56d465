"""Tests for finding the shift covering a point in time."""

from datetime import datetime, timedelta, timezone
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from oncall import Shift, find_shift_index, find_shift


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def weekly_shifts():
    return [
        Shift(user='alice', start_at=utc(2024, 1, 1), end_at=utc(2024, 1, 8)),
        Shift(user='bob', start_at=utc(2024, 1, 8), end_at=utc(2024, 1, 15)),
        Shift(user='alice', start_at=utc(2024, 1, 15), end_at=utc(2024, 1, 22)),
    ]


def gapped_shifts():
    return [
        Shift(user='alice', start_at=utc(2024, 1, 1), end_at=utc(2024, 1, 5)),
        Shift(user='bob', start_at=utc(2024, 1, 10), end_at=utc(2024, 1, 15)),
        Shift(user='carol', start_at=utc(2024, 1, 15), end_at=utc(2024, 1, 20)),
    ]


class TestFindShiftIndex:
    """Test binary search over sorted shifts."""

    def test_inside_shift(self):
        """Test times strictly inside each shift."""
        shifts = weekly_shifts()

        assert find_shift_index(utc(2024, 1, 3), shifts) == 0
        assert find_shift_index(utc(2024, 1, 10, 12), shifts) == 1
        assert find_shift_index(utc(2024, 1, 21, 23, 59), shifts) == 2

    def test_handover_resolves_to_earlier_shift(self):
        """Test that a handover instant belongs to the outgoing shift."""
        shifts = weekly_shifts()

        assert find_shift_index(utc(2024, 1, 8), shifts) == 0
        assert find_shift_index(utc(2024, 1, 15), shifts) == 1

    def test_outer_bounds_are_inclusive(self):
        """Test the very first start and very last end."""
        shifts = weekly_shifts()

        assert find_shift_index(utc(2024, 1, 1), shifts) == 0
        assert find_shift_index(utc(2024, 1, 22), shifts) == 2

    def test_outside_sequence(self):
        """Test times before the first and after the last shift."""
        shifts = weekly_shifts()

        assert find_shift_index(utc(2023, 12, 31, 23, 59), shifts) is None
        assert find_shift_index(utc(2024, 1, 22, 0, 1), shifts) is None

    def test_gap(self):
        """Test times between two non-adjacent shifts."""
        shifts = gapped_shifts()

        assert find_shift_index(utc(2024, 1, 7), shifts) is None
        assert find_shift_index(utc(2024, 1, 5), shifts) == 0
        assert find_shift_index(utc(2024, 1, 10), shifts) == 1

    def test_empty(self):
        """Test lookup in an empty list."""
        assert find_shift_index(utc(2024, 1, 1), []) is None

    def test_single_shift(self):
        """Test lookup with a single shift."""
        shifts = [Shift(user='alice', start_at=utc(2024, 1, 1), end_at=utc(2024, 1, 8))]

        assert find_shift_index(utc(2024, 1, 4), shifts) == 0
        assert find_shift_index(utc(2024, 1, 9), shifts) is None

    def test_matches_linear_scan(self):
        """Test against a linear scan on a long daily rotation."""
        start = utc(2024, 1, 1)
        shifts = [
            Shift(user=f'user{i}', start_at=start + timedelta(days=i), end_at=start + timedelta(days=i + 1))
            for i in range(37)
        ]

        for hour in range(-24, 24 * 39, 6):
            time = start + timedelta(hours=hour)
            expected = next(
                (i for i, shift in enumerate(shifts) if shift.start_at <= time <= shift.end_at),
                None
            )
            assert find_shift_index(time, shifts) == expected


class TestFindShift:
    """Test shift lookup returning the shift itself."""

    def test_found(self):
        shifts = gapped_shifts()

        assert find_shift(utc(2024, 1, 12), shifts).user == 'bob'

    def test_not_found(self):
        shifts = gapped_shifts()

        assert find_shift(utc(2024, 1, 25), shifts) is None
