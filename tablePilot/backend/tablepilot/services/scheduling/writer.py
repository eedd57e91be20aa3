"""
Writes schedule rows back to the database.
Cells are always replaced whole: every existing row for a written
(employee, date) goes before the new rows are inserted.
"""

import logging
from collections import defaultdict
from typing import Iterable

from sqlalchemy import delete, and_
from sqlalchemy.orm import Session

from tablepilot.db.models.employee_schedules import EmployeeWeeklySchedules, EmployeeSchedules
from tablepilot.services.booking.types import TimeInterval

from .types import ScheduleCell, ScheduleSlot


logger = logging.getLogger(__name__)


def _delete_cells(db: Session, cells: Iterable[ScheduleCell]) -> None:
    dates_by_employee = defaultdict(set)
    for cell in cells:
        dates_by_employee[cell.employee_id].add(cell.date)

    for employee_id, dates in dates_by_employee.items():
        db.execute(
            delete(EmployeeWeeklySchedules).where(
                and_(
                    EmployeeWeeklySchedules.employee_id == employee_id,
                    EmployeeWeeklySchedules.date.in_(dates),
                )
            )
        )


def replace_cells(
    db: Session,
    slots: list[ScheduleSlot],
    cells: Iterable[ScheduleCell] = (),
    commit: bool = True,
) -> list[EmployeeWeeklySchedules]:
    """
    Replace the given cells (plus every cell the slots belong to) with the slots.
    A cell listed without slots ends up empty.
    """
    all_cells = set(cells) | {s.cell for s in slots}
    _delete_cells(db, all_cells)
    # the deletes must reach the database before inserts reuse the same keys
    db.flush()

    rows = [
        EmployeeWeeklySchedules(
            employee_id=s.employee_id,
            date=s.date,
            is_day_off=s.is_day_off,
            start_time=s.start_time,
            end_time=s.end_time,
            slot_order=s.order,
        )
        for s in slots
    ]
    db.add_all(rows)

    if commit:
        db.commit()
    logger.info(f"Replaced {len(all_cells)} schedule cell(s) with {len(rows)} row(s)")
    return rows


def replace_weekly_templates(
    db: Session,
    employee_id: int,
    days_of_week: Iterable[int],
    time_slots: list[TimeInterval],
) -> None:
    """Store the recurring pattern, replacing the employee's templates for those days."""
    days = sorted({int(d) for d in days_of_week})
    db.execute(
        delete(EmployeeSchedules).where(
            and_(
                EmployeeSchedules.employee_id == employee_id,
                EmployeeSchedules.day_of_week.in_(days),
            )
        )
    )
    for day in days:
        for index, interval in enumerate(time_slots):
            db.add(EmployeeSchedules(
                employee_id=employee_id,
                day_of_week=day,
                start_time=interval.start,
                end_time=interval.end,
                slot_order=index + 1,
            ))
