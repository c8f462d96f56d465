"""Exceptions raised by the scheduling engine."""


class ScheduleError(Exception):
    """Base class for all scheduling errors."""


class ConfigurationError(ScheduleError, ValueError):
    """The rotation definition cannot produce a schedule."""


class InvalidIntervalError(ScheduleError, ValueError):
    """A shift would end at or before its start."""

    def __init__(self, start_at, end_at, message: str = 'end_at must be after start_at'):
        super().__init__(f'{message} (start_at={start_at.isoformat()}, end_at={end_at.isoformat()})')
        self.start_at = start_at
        self.end_at = end_at
