"""
Internal data types for employee schedule logic.
decoupled from SQLAlchemy models for cleaner logic.
"""

from dataclasses import dataclass, field
from datetime import date, time, timedelta
from enum import IntEnum
from typing import Iterator, Optional


class DayOfWeek(IntEnum):
    """
    Day numbering used by stored schedules and requests: 0=Sunday..6=Saturday.
    Python's date.weekday() counts from Monday=0, use day_of_week() to convert.
    """
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def day_of_week(d: date) -> DayOfWeek:
    return DayOfWeek((d.weekday() + 1) % 7)


@dataclass(frozen=True)
class ScheduleCell:
    """One employee on one date."""
    employee_id: int
    date: date


@dataclass
class ScheduleSlot:
    employee_id: int
    date: date
    is_day_off: bool
    start_time: Optional[time] = None  # None on day-off rows
    end_time: Optional[time] = None
    order: int = 1

    @property
    def cell(self) -> ScheduleCell:
        return ScheduleCell(self.employee_id, self.date)


@dataclass
class CellSlot:
    """A slot without its employee/date key, used as a copy source."""
    is_day_off: bool
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    order: int = 1


@dataclass
class VacationRange:
    employee_id: int
    start_date: date
    end_date: date

    def contains(self, d: date) -> bool:
        """Inclusive on both ends."""
        return self.start_date <= d <= self.end_date


@dataclass
class DateSelection:
    """
    Dates a recurring schedule applies to: an inclusive range, or an
    explicit list of dates. Exactly one of the two must be given.
    """
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    explicit_dates: Optional[list[date]] = None

    def __post_init__(self):
        has_range = self.date_from is not None or self.date_to is not None
        if has_range and self.explicit_dates is not None:
            raise ValueError("Pass either a date range or explicit dates, not both")
        if self.explicit_dates is not None:
            if not self.explicit_dates:
                raise ValueError("Select at least one date")
            return
        if self.date_from is None or self.date_to is None:
            raise ValueError("A date range needs both a start and an end date")
        if self.date_from > self.date_to:
            raise ValueError(f"Range start {self.date_from} is after range end {self.date_to}")

    @property
    def is_range(self) -> bool:
        return self.explicit_dates is None

    @property
    def first(self) -> date:
        return self.date_from if self.is_range else min(self.explicit_dates)

    @property
    def last(self) -> date:
        return self.date_to if self.is_range else max(self.explicit_dates)

    def dates(self) -> Iterator[date]:
        """Selected dates, ascending, without duplicates."""
        if not self.is_range:
            yield from sorted(set(self.explicit_dates))
            return
        current = self.date_from
        while current <= self.date_to:
            yield current
            current += timedelta(days=1)

    def includes(self, d: date) -> bool:
        if self.is_range:
            return self.date_from <= d <= self.date_to
        return d in self.explicit_dates


@dataclass
class VacationConflict:
    employee_name: str
    start: str  # dd/MM/yyyy
    end: str


@dataclass
class ScheduleConflictReport:
    schedule_conflicts: list[str] = field(default_factory=list)
    vacation_conflicts: list[VacationConflict] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.schedule_conflicts or self.vacation_conflicts)
