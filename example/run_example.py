#!/usr/bin/env python3
"""
Simple example demonstrating the on-call scheduling system.
Renders two weeks of a three-person rotation with two overlapping overrides.
"""

from datetime import datetime, timezone
import sys
import os

# Add parent directory to path so we can import oncall
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from oncall import Schedule, Shift, render_schedule, find_shift
from oncall.cli import format_shifts


def main():
    # Alice, Bob, Charlie rotating weekly
    # Starting Friday Nov 7, 2025 at 5pm
    schedule = Schedule(
        users=["alice", "bob", "charlie"],
        handover_start_at=datetime(2025, 11, 7, 17, 0, tzinfo=timezone.utc),
        handover_interval_days=7
    )

    # Ascending priority: dave's cover on Tuesday evening wins over charlie's
    overrides = [
        Shift(
            user="charlie",
            start_at=datetime(2025, 11, 10, 17, 0, tzinfo=timezone.utc),
            end_at=datetime(2025, 11, 12, 17, 0, tzinfo=timezone.utc)
        ),
        Shift(
            user="dave",
            start_at=datetime(2025, 11, 11, 17, 0, tzinfo=timezone.utc),
            end_at=datetime(2025, 11, 11, 22, 0, tzinfo=timezone.utc)
        )
    ]

    from_time = datetime(2025, 11, 7, 17, 0, tzinfo=timezone.utc)
    until_time = datetime(2025, 11, 21, 17, 0, tzinfo=timezone.utc)

    print(f"Generating schedule from {from_time.strftime('%Y-%m-%d')} to {until_time.strftime('%Y-%m-%d')}...")

    shifts = render_schedule(schedule, overrides, from_time, until_time)

    print(format_shifts(shifts))
    print(format_shifts(shifts, pretty=True))

    on_call = find_shift(datetime(2025, 11, 11, 20, 0, tzinfo=timezone.utc), shifts)
    print(f"On call at Tue Nov 11, 8pm: {on_call.user if on_call else 'nobody'}")


if __name__ == '__main__':
    main()
