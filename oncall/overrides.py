"""Applying overrides on top of a shift schedule."""

import bisect
import logging
from datetime import datetime

from .errors import InvalidIntervalError
from .lookup import find_shift_index
from .models import Shift

logger = logging.getLogger(__name__)


def _first_starting_at_or_after(time: datetime, shifts: list[Shift]) -> int:
    return bisect.bisect_left(shifts, time, key=lambda shift: shift.start_at)


def apply_override(shifts: list[Shift], override: Shift) -> None:
    """
    Apply a single override to a sorted shift list, in place.

    Afterwards a copy of the override occupies exactly
    [override.start_at, override.end_at): shifts it partially overlaps are
    truncated to abut it, shifts it fully covers are removed, and a shift
    that contains it entirely is split into a left and a right remainder.

    When one of the override's edges is not covered by any shift (before the
    first shift, after the last one, or in a gap), nothing is truncated on
    that side and the edge is positioned by start time alone.

    Args:
        shifts: Sorted, non-overlapping shifts to modify
        override: Shift to place on top

    Raises:
        InvalidIntervalError: If the override ends at or before its start.
            The list is left untouched.
    """
    if not override.is_valid():
        raise InvalidIntervalError(override.start_at, override.end_at, 'override end_at must be after start_at')

    prev_index = find_shift_index(override.start_at, shifts)
    post_index = find_shift_index(override.end_at, shifts)

    # Override falls inside a single shift: split it so both remainders can be trimmed
    if prev_index is not None and prev_index == post_index:
        shifts.insert(prev_index + 1, shifts[prev_index].model_copy())
        post_index = prev_index + 1

    # [remove_from, remove_until) is the slice replaced by the override
    if prev_index is None:
        remove_from = _first_starting_at_or_after(override.start_at, shifts)
    elif override.start_at > shifts[prev_index].start_at:
        shifts[prev_index].set_end_at(override.start_at)
        remove_from = prev_index + 1
    else:
        remove_from = prev_index

    if post_index is None:
        remove_until = _first_starting_at_or_after(override.end_at, shifts)
    elif override.end_at < shifts[post_index].end_at:
        shifts[post_index].set_start_at(override.end_at)
        remove_until = post_index
    else:
        remove_until = post_index + 1

    removed = remove_until - remove_from
    shifts[remove_from:remove_until] = [override.model_copy()]

    logger.debug(
        "Applied override for %s %s-%s, replacing %d shift(s) at index %d",
        override.user, override.start_at.isoformat(), override.end_at.isoformat(),
        removed, remove_from
    )


def apply_overrides(shifts: list[Shift], overrides: list[Shift]) -> None:
    """
    Apply overrides to a shift list in place, one at a time.

    Overrides must be in ascending priority order: each one is applied to
    the result of the previous ones, so later overrides win any conflict.

    Time complexity: O(n × m)
    n = number of shifts,
    m = number of overrides
    """
    if not overrides:
        return

    for override in overrides:
        apply_override(shifts, override)

    logger.debug("Applied %d override(s), %d shifts in schedule", len(overrides), len(shifts))
