"""On-call schedule rendering with overrides."""

from .errors import (
    ScheduleError,
    ConfigurationError,
    InvalidIntervalError
)
from .models import Schedule, Shift
from .rotation import generate_base_schedule
from .lookup import find_shift_index, find_shift
from .overrides import apply_override, apply_overrides
from .schedule_utils import (
    render_schedule,
    truncate_to_window,
    merge_consecutive_entries
)

__all__ = [
    'ScheduleError',
    'ConfigurationError',
    'InvalidIntervalError',
    'Schedule',
    'Shift',
    'generate_base_schedule',
    'find_shift_index',
    'find_shift',
    'apply_override',
    'apply_overrides',
    'render_schedule',
    'truncate_to_window',
    'merge_consecutive_entries'
]
