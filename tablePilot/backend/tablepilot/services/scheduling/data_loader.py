"""
Data loader for scheduling service.
Fetches schedule rows and vacations and converts to internal types.
"""

from datetime import date
from typing import Optional

from sqlalchemy import select, and_
from sqlalchemy.orm import Session

from tablepilot.db.models.employees import Employees
from tablepilot.db.models.employee_vacations import EmployeeVacations
from tablepilot.db.models.employee_schedules import EmployeeWeeklySchedules

from .types import ScheduleSlot, VacationRange


def to_schedule_slot(row: EmployeeWeeklySchedules) -> ScheduleSlot:
    return ScheduleSlot(
        employee_id=row.employee_id,
        date=row.date,
        is_day_off=row.is_day_off,
        start_time=row.start_time,
        end_time=row.end_time,
        order=row.slot_order,
    )


def load_vacations(
    db: Session,
    employee_ids: list[int],
    window_start: Optional[date] = None,
    window_end: Optional[date] = None,
) -> list[VacationRange]:
    """Load vacation ranges of a set of employees, optionally only those touching a window."""
    if not employee_ids:
        return []

    conditions = [EmployeeVacations.employee_id.in_(employee_ids)]
    if window_start is not None:
        conditions.append(EmployeeVacations.end_date >= window_start)
    if window_end is not None:
        conditions.append(EmployeeVacations.start_date <= window_end)

    stmt = select(EmployeeVacations).where(and_(*conditions)).order_by(EmployeeVacations.start_date)
    rows = db.execute(stmt).scalars().all()

    return [
        VacationRange(employee_id=r.employee_id, start_date=r.start_date, end_date=r.end_date)
        for r in rows
    ]


def load_schedule_slots(
    db: Session,
    employee_ids: list[int],
    window_start: date,
    window_end: date,
) -> list[ScheduleSlot]:
    """Load schedule rows of a set of employees inside an inclusive window."""
    if not employee_ids:
        return []

    stmt = select(EmployeeWeeklySchedules).where(
        and_(
            EmployeeWeeklySchedules.employee_id.in_(employee_ids),
            EmployeeWeeklySchedules.date >= window_start,
            EmployeeWeeklySchedules.date <= window_end,
        )
    ).order_by(
        EmployeeWeeklySchedules.employee_id,
        EmployeeWeeklySchedules.date,
        EmployeeWeeklySchedules.slot_order,
    )
    rows = db.execute(stmt).scalars().all()
    return [to_schedule_slot(r) for r in rows]


def load_employee_names(db: Session, employee_ids: list[int]) -> dict[int, str]:
    if not employee_ids:
        return {}
    stmt = select(Employees.id, Employees.name).where(Employees.id.in_(employee_ids))
    return {row.id: row.name for row in db.execute(stmt)}
