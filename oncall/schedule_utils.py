"""Utility functions for rendering a schedule within a time window."""

import logging
from datetime import datetime, timezone

from .models import Schedule, Shift
from .overrides import apply_overrides
from .rotation import generate_base_schedule

logger = logging.getLogger(__name__)


def render_schedule(schedule: Schedule, overrides: list[Shift], from_time: datetime, until_time: datetime,
                    merge: bool = False) -> list[Shift]:
    """
    Generate schedule shifts with overrides applied.

    Algorithm:
    1. Generate base schedule shifts for all users in the rotation
    2. Apply overrides one at a time, lowest priority first
    3. Truncate to the requested time window
    4. Optionally merge consecutive shifts with the same user

    Args:
        schedule: Schedule configuration
        overrides: Override shifts in ascending priority order
        from_time: Start of requested time window
        until_time: End of requested time window
        merge: Whether to merge adjacent shifts of the same user

    Returns:
        Final schedule shifts
    """
    # Step 1: Generate base schedule
    shifts = generate_base_schedule(schedule, until_time)

    # Step 2: Apply overrides
    apply_overrides(shifts, overrides)

    # Step 3: Truncate to the requested time window
    truncated_shifts = truncate_to_window(shifts, from_time, until_time)

    # Step 4: Merge consecutive shifts with the same user
    if merge:
        return merge_consecutive_entries(truncated_shifts)
    return truncated_shifts


def truncate_to_window(shifts: list[Shift], from_time: datetime, until_time: datetime) -> list[Shift]:
    """
    Truncate schedule shifts to fit within the requested time window.

    Shifts outside [from_time, until_time) are dropped. The first remaining
    shift is moved to start at from_time and the last one to end at
    until_time, but a shift is never stretched beyond its own bounds, so a
    window opening before the first shift (even an override starting ahead
    of the rotation) leaves its start alone. Only
    those two shifts can change, and either is dropped if nothing of it is
    left. The input list is not modified.

    Args:
        shifts: Sorted, non-overlapping shifts to truncate
        from_time: Start of the time window
        until_time: End of the time window

    Returns:
        Shifts truncated to the time window
    """
    from_time = from_time.astimezone(timezone.utc)
    until_time = until_time.astimezone(timezone.utc)

    truncated_shifts = [
        shift.model_copy()
        for shift in shifts
        if shift.end_at > from_time and shift.start_at < until_time
    ]

    if truncated_shifts:
        first, last = truncated_shifts[0], truncated_shifts[-1]
        if from_time > first.start_at:
            first.start_at = from_time
        if until_time < last.end_at:
            last.end_at = until_time

    # Only possible when from_time >= until_time
    valid_shifts = [shift for shift in truncated_shifts if shift.is_valid()]

    logger.debug(
        "Truncated %d shifts to %d within %s-%s",
        len(shifts), len(valid_shifts), from_time.isoformat(), until_time.isoformat()
    )
    return valid_shifts


def merge_consecutive_entries(shifts: list[Shift]) -> list[Shift]:
    """
    Merge consecutive shifts with the same user.

    If a user has multiple consecutive shifts (e.g., due to override splits),
    combine them into a single shift.

    Args:
        shifts: Schedule shifts to merge

    Returns:
        Merged schedule shifts
    """
    if not shifts:
        return []

    merged_shifts = []
    current_merged = shifts[0].model_copy()

    for shift in shifts[1:]:
        if shift.user == current_merged.user and shift.start_at == current_merged.end_at:
            # Merge
            current_merged.set_end_at(shift.end_at)
        else:
            merged_shifts.append(current_merged)
            current_merged = shift.model_copy()

    merged_shifts.append(current_merged)

    return merged_shifts
