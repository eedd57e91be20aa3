"""
Advisory checks run before a recurring schedule overwrites existing rows.
Nothing here writes; the caller decides whether to warn or go ahead.
"""

from datetime import date, timedelta
from typing import Iterable, Optional

from .types import (
    DateSelection,
    DayOfWeek,
    ScheduleConflictReport,
    ScheduleSlot,
    VacationConflict,
    VacationRange,
    day_of_week,
)


UNKNOWN_EMPLOYEE_NAME = "Employee"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"


def _vacation_hits_selection(
    vacation: VacationRange,
    selected_days: set[DayOfWeek],
    selection: DateSelection,
) -> bool:
    if selection.is_range:
        # only the part of the vacation inside the range matters
        current = max(vacation.start_date, selection.date_from)
        last = min(vacation.end_date, selection.date_to)
        while current <= last:
            if day_of_week(current) in selected_days:
                return True
            current += timedelta(days=1)
        return False

    return any(
        day_of_week(d) in selected_days and vacation.contains(d)
        for d in selection.explicit_dates
    )


def detect_schedule_conflicts(
    existing: Iterable[ScheduleSlot],
    vacations: Iterable[VacationRange],
    days_of_week: Iterable[int],
    selection: DateSelection,
    employee_names: Optional[dict[int, str]] = None,
) -> ScheduleConflictReport:
    """
    Report what a recurring schedule would collide with.

    Returns:
        ScheduleConflictReport with
        - schedule_conflicts: names of employees who already have rows on a
          selected day inside the window
        - vacation_conflicts: vacation ranges containing a selected day
    """
    names = employee_names or {}
    selected_days = {DayOfWeek(d) for d in days_of_week}
    report = ScheduleConflictReport()

    def name_of(employee_id: int) -> str:
        return names.get(employee_id, UNKNOWN_EMPLOYEE_NAME)

    flagged = set()
    for slot in existing:
        if slot.employee_id in flagged:
            continue
        if selection.includes(slot.date) and day_of_week(slot.date) in selected_days:
            flagged.add(slot.employee_id)
            report.schedule_conflicts.append(name_of(slot.employee_id))

    for vacation in vacations:
        if vacation.start_date > selection.last or vacation.end_date < selection.first:
            continue
        if _vacation_hits_selection(vacation, selected_days, selection):
            report.vacation_conflicts.append(VacationConflict(
                employee_name=name_of(vacation.employee_id),
                start=vacation.start_date.strftime(DISPLAY_DATE_FORMAT),
                end=vacation.end_date.strftime(DISPLAY_DATE_FORMAT),
            ))

    return report
