"""
Internal data types for booking logic.
decoupled from SQLAlchemy models for cleaner logic.
"""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import Optional


MINUTES_PER_DAY = 24 * 60


def time_to_minutes(t: time) -> float:
    """Minutes since midnight, seconds kept as a fraction."""
    return t.hour * 60 + t.minute + t.second / 60


class BookingStatus(str, Enum):
    RESERVED = "reserved"
    PENDING = "pending"
    OCCUPIED = "occupied"
    IN_PROGRESS = "in_progress"
    DELAYED = "delayed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


TERMINAL_STATUSES = frozenset({
    BookingStatus.COMPLETED,
    BookingStatus.CANCELLED,
    BookingStatus.NO_SHOW,
})

# a booking in one of these statuses no longer holds its table
RELEASING_STATUSES = TERMINAL_STATUSES


def releases_table(status: str) -> bool:
    """True for statuses after which the table is handed back."""
    return BookingStatus(status) in RELEASING_STATUSES


@dataclass(frozen=True)
class TimeInterval:
    """
    A start/end pair of local times.

    When end <= start the interval runs past midnight; only comparisons see
    the extended end, the stored times are never changed.
    """
    start: time
    end: time

    @property
    def crosses_midnight(self) -> bool:
        return self.end <= self.start

    @property
    def start_minutes(self) -> float:
        return time_to_minutes(self.start)

    @property
    def end_minutes(self) -> float:
        end = time_to_minutes(self.end)
        if self.crosses_midnight:
            end += MINUTES_PER_DAY
        return end


@dataclass
class Booking:
    id: int
    table_id: Optional[int]
    booking_date: date
    interval: TimeInterval
    party_size: int
    status: BookingStatus


@dataclass
class Table:
    id: int
    min_capacity: int
    max_capacity: int
    table_number: Optional[int] = None


@dataclass(frozen=True)
class TableAssignment:
    """Outcome of automatic assignment. No table means the booking stays pending."""
    table_id: Optional[int]
    status: BookingStatus

    @property
    def is_assigned(self) -> bool:
        return self.table_id is not None


@dataclass
class TableAvailability:
    table: Table
    is_available: bool


@dataclass
class BusinessConfig:
    """Per-business toggles for time-triggered status changes."""
    auto_mark_in_progress: bool = True
    auto_complete_in_progress: bool = True
    auto_complete_delayed: bool = True
    mark_delayed_as_no_show: bool = False
