"""
Employee scheduling service package.

Usage:
    from datetime import date, time
    from tablepilot.services.scheduling import DateSelection, apply_fixed_schedule
    from tablepilot.services.booking import TimeInterval

    # Mondays and Fridays, 09:00-17:00, for the next quarter
    selection = DateSelection(date_from=date(2025, 1, 20), date_to=date(2025, 4, 20))
    slots = apply_fixed_schedule(
        db, employee_ids=[1, 2], days_of_week=[1, 5],
        time_slots=[TimeInterval(time(9, 0), time(17, 0))], selection=selection,
    )

    # Or expand without touching the database
    from tablepilot.services.scheduling import expand_fixed_schedule
    slots = expand_fixed_schedule([1], [1, 5], time_slots, selection, vacations)
"""

from .types import (
    CellSlot,
    DateSelection,
    DayOfWeek,
    ScheduleCell,
    ScheduleConflictReport,
    ScheduleSlot,
    VacationConflict,
    VacationRange,
    day_of_week,
)
from .expander import expand_fixed_schedule, find_overlapping_slots, is_on_vacation
from .conflicts import detect_schedule_conflicts
from .cells import copy_slots_to_cells, validate_cell_slots
from .generator import apply_cell, apply_copy, apply_fixed_schedule, check_fixed_schedule_conflicts

__all__ = [
    # Types
    "CellSlot",
    "DateSelection",
    "DayOfWeek",
    "ScheduleCell",
    "ScheduleConflictReport",
    "ScheduleSlot",
    "VacationConflict",
    "VacationRange",
    "day_of_week",
    # Pure logic
    "expand_fixed_schedule",
    "find_overlapping_slots",
    "is_on_vacation",
    "detect_schedule_conflicts",
    "copy_slots_to_cells",
    "validate_cell_slots",
    # Database-backed entry points
    "apply_cell",
    "apply_copy",
    "apply_fixed_schedule",
    "check_fixed_schedule_conflicts",
]
