"""Command-line interface for rendering on-call schedules."""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import pydantic

from .errors import ScheduleError
from .models import Schedule, Shift, UtcDatetime
from .schedule_utils import render_schedule

logger = logging.getLogger(__name__)

_timestamp_adapter = pydantic.TypeAdapter(UtcDatetime)
_overrides_adapter = pydantic.TypeAdapter(list[Shift])


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp with an explicit offset (e.g. 2025-11-07T17:00:00Z)."""
    try:
        return _timestamp_adapter.validate_python(value)
    except pydantic.ValidationError:
        raise argparse.ArgumentTypeError(f"invalid timestamp {value!r}, expected ISO 8601 with timezone")


def load_schedule(path: Path) -> Schedule:
    return Schedule.model_validate_json(path.read_text())


def load_overrides(path: Path) -> list[Shift]:
    """
    Load overrides from a JSON array.

    The file lists overrides most important first; the result is reversed
    into ascending priority order, ready for apply_overrides.
    """
    overrides = _overrides_adapter.validate_json(path.read_text())
    overrides.reverse()
    return overrides


def format_shifts(shifts: list[Shift], pretty: bool = False) -> str:
    if pretty:
        return '\n'.join(str(shift) for shift in shifts)
    return json.dumps([shift.model_dump(mode='json') for shift in shifts], indent=2)


def _warn_about_window(schedule: Schedule, from_time: datetime, until_time: datetime) -> None:
    if from_time > until_time:
        logger.warning("--from=%s is after --until=%s", from_time.isoformat(), until_time.isoformat())
    for name, time in (('from', from_time), ('until', until_time)):
        if time < schedule.handover_start_at:
            logger.warning(
                "--%s=%s is before schedule start %s",
                name, time.isoformat(), schedule.handover_start_at.isoformat()
            )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='oncall-schedule',
        description='Render on-call schedule with overrides'
    )
    parser.add_argument('--schedule', required=True, type=Path,
                        help='Path to schedule JSON file (users, handover_start_at, handover_interval_days)')
    parser.add_argument('--overrides', required=True, type=Path,
                        help='Path to overrides JSON file, most important override first')
    parser.add_argument('--from', dest='from_time', required=True, type=parse_timestamp,
                        help='Start time (ISO 8601 format)')
    parser.add_argument('--until', dest='until_time', required=True, type=parse_timestamp,
                        help='End time (ISO 8601 format)')
    parser.add_argument('-p', '--pretty-print', action='store_true',
                        help='Print one line per shift instead of JSON')
    parser.add_argument('-O', '--outfile', type=Path,
                        help='Also write the rendered schedule to this file')
    parser.add_argument('--merge', action='store_true',
                        help='Merge consecutive shifts of the same user')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(levelname)s: %(message)s',
        stream=sys.stderr
    )

    try:
        schedule = load_schedule(args.schedule)
        overrides = load_overrides(args.overrides)
        _warn_about_window(schedule, args.from_time, args.until_time)

        shifts = render_schedule(schedule, overrides, args.from_time, args.until_time, merge=args.merge)
        if not shifts:
            logger.warning("No shifts scheduled")
            return 0

        output = format_shifts(shifts, pretty=args.pretty_print)
        print(output)

        if args.outfile:
            args.outfile.write_text(output + '\n')
            print(f"Schedule saved as '{args.outfile}'", file=sys.stderr)
    except OSError as e:
        logger.error("Could not access file: %s", e)
        return 1
    except pydantic.ValidationError as e:
        logger.error("Invalid input: %s", e)
        return 1
    except ScheduleError as e:
        logger.error("%s", e)
        return 1

    return 0
