"""
Schedule generator - orchestration layer.

Combines loading, the pure expansion/copy logic and the writer into the
flows the API exposes.
"""

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from tablepilot.services.booking.types import TimeInterval

from .cells import copy_slots_to_cells, validate_cell_slots
from .conflicts import detect_schedule_conflicts
from .data_loader import load_employee_names, load_schedule_slots, load_vacations
from .expander import expand_fixed_schedule
from .types import CellSlot, DateSelection, ScheduleCell, ScheduleConflictReport, ScheduleSlot
from .writer import replace_cells, replace_weekly_templates


logger = logging.getLogger(__name__)


def check_fixed_schedule_conflicts(
    db: Session,
    employee_ids: list[int],
    days_of_week: Iterable[int],
    selection: DateSelection,
) -> ScheduleConflictReport:
    """Load what a recurring schedule would touch and report the conflicts."""
    existing = load_schedule_slots(db, employee_ids, selection.first, selection.last)
    vacations = load_vacations(db, employee_ids, selection.first, selection.last)
    names = load_employee_names(db, employee_ids)
    return detect_schedule_conflicts(existing, vacations, days_of_week, selection, names)


def apply_fixed_schedule(
    db: Session,
    employee_ids: list[int],
    days_of_week: Iterable[int],
    time_slots: list[TimeInterval],
    selection: DateSelection,
) -> list[ScheduleSlot]:
    """
    Generate and store a recurring schedule.

    This function:
    1. Loads the employees' vacations inside the selection
    2. Expands the request into daily rows, skipping vacation days
    3. Replaces the written cells and the recurring templates in one commit

    Returns:
        The slots written
    """
    days = list(days_of_week)
    vacations = load_vacations(db, employee_ids, selection.first, selection.last)
    slots = expand_fixed_schedule(employee_ids, days, time_slots, selection, vacations)

    replace_cells(db, slots, commit=False)
    for employee_id in dict.fromkeys(employee_ids):
        replace_weekly_templates(db, employee_id, days, time_slots)
    db.commit()

    logger.info(
        f"Fixed schedule for {len(set(employee_ids))} employee(s) "
        f"{selection.first} to {selection.last}: {len(slots)} row(s)"
    )
    return slots


def apply_cell(
    db: Session,
    cell: ScheduleCell,
    cell_slots: list[CellSlot],
) -> list[ScheduleSlot]:
    """Set one cell to a day off, a list of shifts, or nothing."""
    validate_cell_slots(cell_slots)
    slots = copy_slots_to_cells(cell_slots, [cell])
    replace_cells(db, slots, [cell])
    return slots


def apply_copy(
    db: Session,
    source_slots: list[CellSlot],
    target_cells: list[ScheduleCell],
) -> list[ScheduleSlot]:
    """Paste the source slots over every target cell."""
    validate_cell_slots(source_slots)
    slots = copy_slots_to_cells(source_slots, target_cells)
    replace_cells(db, slots, target_cells)
    return slots
