"""Schedule and shift models."""

from datetime import datetime, timezone
from typing import Annotated

import pydantic

from .errors import InvalidIntervalError

# Timestamps are stored in UTC whatever offset they were given with
UtcDatetime = Annotated[pydantic.AwareDatetime, pydantic.AfterValidator(lambda v: v.astimezone(timezone.utc))]


class Schedule(pydantic.BaseModel):
    users: list[str]
    handover_start_at: UtcDatetime
    handover_interval_days: int
    
    @pydantic.field_validator('handover_interval_days')
    @classmethod
    def validate_handover_interval(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('handover_interval_days must be greater than 0')
        return v
    
    @pydantic.field_validator('users')
    @classmethod
    def validate_users(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError('users list cannot be empty')
        return v


class Shift(pydantic.BaseModel):
    """
    A half-open period [start_at, end_at) during which `user` is on call.
    
    Used both for generated rotation shifts and for overrides. Once built,
    bounds should only be changed through set_start_at/set_end_at so that
    a shift can never end up empty or inverted.
    """
    user: str
    start_at: UtcDatetime
    end_at: UtcDatetime
    
    @pydantic.model_validator(mode='after')
    def validate_time_order(self) -> 'Shift':
        if self.end_at <= self.start_at:
            raise ValueError('end_at must be after start_at')
        return self
    
    def is_valid(self) -> bool:
        return self.start_at < self.end_at
    
    def set_start_at(self, start_at: datetime) -> None:
        if start_at >= self.end_at:
            raise InvalidIntervalError(start_at, self.end_at)
        self.start_at = start_at
    
    def set_end_at(self, end_at: datetime) -> None:
        if end_at <= self.start_at:
            raise InvalidIntervalError(self.start_at, end_at)
        self.end_at = end_at
    
    def __str__(self) -> str:
        start_str = self.start_at.strftime('%a %b %d %Y, %H:%M')
        end_str = self.end_at.strftime('%a %b %d %Y, %H:%M')
        hours = (self.end_at - self.start_at).total_seconds() / 3600
        if hours < 24:
            duration_str = f"{hours:.1f} hours"
        else:
            duration_str = f"{hours / 24:.1f} days"
        return f"{self.user:8} | {start_str} → {end_str} ({duration_str})"
