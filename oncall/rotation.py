"""Base rotation generation."""

import logging
from datetime import datetime, timedelta

from .errors import ConfigurationError
from .models import Schedule, Shift

logger = logging.getLogger(__name__)


def generate_base_schedule(schedule: Schedule, until_time: datetime) -> list[Shift]:
    """
    Generate base schedule shifts based on the rotation configuration.
    
    Users take turns in list order, each holding the rotation for
    handover_interval_days, starting at handover_start_at. Only whole
    shifts ending at or before until_time are generated; a trailing
    partial shift is left out.
    
    Args:
        schedule: The schedule configuration with users and handover details
        until_time: Generate shifts up to this time
        
    Returns:
        Shifts sorted by start time, each starting where the previous one ends
        
    Raises:
        ConfigurationError: If the user list is empty or the interval is not positive
    """
    if not schedule.users:
        raise ConfigurationError('users list cannot be empty')
    if schedule.handover_interval_days <= 0:
        raise ConfigurationError('handover_interval_days must be greater than 0')
    
    interval = timedelta(days=schedule.handover_interval_days)
    shift_count = max(0, (until_time - schedule.handover_start_at) // interval)
    
    base_shifts = []
    for shift_num in range(shift_count):
        start_at = schedule.handover_start_at + shift_num * interval
        base_shifts.append(Shift(
            user=schedule.users[shift_num % len(schedule.users)],
            start_at=start_at,
            end_at=start_at + interval
        ))
    
    logger.debug("Generated %d base shifts until %s", len(base_shifts), until_time.isoformat())
    return base_shifts
