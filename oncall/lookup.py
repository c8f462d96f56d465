"""Lookup of the shift covering a point in time."""

from datetime import datetime
from typing import Optional

from .models import Shift


def find_shift_index(time: datetime, shifts: list[Shift]) -> Optional[int]:
    """
    Find the index of the shift covering `time`, or None.
    
    `shifts` must be sorted and non-overlapping. Both ends of a shift count
    as covered, so at a handover the outgoing (earlier) shift is returned.
    """
    # Invariant
    #   i < lo: shifts[i].end_at < time
    #   i >= hi: shifts[i].end_at >= time
    lo, hi = 0, len(shifts)
    while lo < hi:
        mid = (lo + hi) // 2
        if shifts[mid].end_at < time:
            lo = mid + 1
        else:
            hi = mid
    
    if lo < len(shifts) and shifts[lo].start_at <= time:
        return lo
    return None


def find_shift(time: datetime, shifts: list[Shift]) -> Optional[Shift]:
    """Find the shift covering `time`, or None."""
    index = find_shift_index(time, shifts)
    return shifts[index] if index is not None else None
