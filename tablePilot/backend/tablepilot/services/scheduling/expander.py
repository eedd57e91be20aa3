"""
Recurring schedule expansion.
Turns a days-of-week + dates + time slots request into concrete daily rows.
"""

import logging
from datetime import date
from typing import Iterable

from tablepilot.services.booking.overlap import intervals_overlap
from tablepilot.services.booking.types import TimeInterval

from .types import (
    DateSelection,
    DayOfWeek,
    ScheduleSlot,
    VacationRange,
    day_of_week,
)


logger = logging.getLogger(__name__)


def vacations_by_employee(vacations: Iterable[VacationRange]) -> dict[int, list[VacationRange]]:
    grouped: dict[int, list[VacationRange]] = {}
    for vacation in vacations:
        grouped.setdefault(vacation.employee_id, []).append(vacation)
    return grouped


def is_on_vacation(employee_id: int, d: date, vacations: Iterable[VacationRange]) -> bool:
    """Check if a date falls inside one of the employee's vacation ranges."""
    return any(v.employee_id == employee_id and v.contains(d) for v in vacations)


def find_overlapping_slots(time_slots: list[TimeInterval]) -> list[tuple[int, int]]:
    """Index pairs of same-day slots that overlap each other."""
    pairs = []
    for i, a in enumerate(time_slots):
        for j in range(i + 1, len(time_slots)):
            if intervals_overlap(a, time_slots[j]):
                pairs.append((i, j))
    return pairs


def expand_fixed_schedule(
    employee_ids: list[int],
    days_of_week: Iterable[int],
    time_slots: list[TimeInterval],
    selection: DateSelection,
    vacations: Iterable[VacationRange] = (),
) -> list[ScheduleSlot]:
    """
    Expand a recurring schedule into one row per employee, date and slot.

    A date produces rows only if its day of week is selected and the employee
    is not on vacation that day. Rows come out grouped by employee (in the
    order given), then by date, then by slot order.
    """
    selected_days = {DayOfWeek(d) for d in days_of_week}
    vacation_map = vacations_by_employee(vacations)
    dates = [d for d in selection.dates() if day_of_week(d) in selected_days]

    slots = []
    seen_employees = set()
    for employee_id in employee_ids:
        if employee_id in seen_employees:
            continue
        seen_employees.add(employee_id)

        employee_vacations = vacation_map.get(employee_id, [])
        for d in dates:
            if is_on_vacation(employee_id, d, employee_vacations):
                logger.debug(f"Skipping {d} for employee {employee_id}: on vacation")
                continue
            for index, interval in enumerate(time_slots):
                slots.append(ScheduleSlot(
                    employee_id=employee_id,
                    date=d,
                    is_day_off=False,
                    start_time=interval.start,
                    end_time=interval.end,
                    order=index + 1,
                ))

    return slots
