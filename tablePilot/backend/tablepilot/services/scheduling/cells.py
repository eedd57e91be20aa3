"""
Per-cell operations: copy/paste between cells and the day-off rule.
"""

from typing import Iterable

from tablepilot.services.booking.types import TimeInterval

from .expander import find_overlapping_slots
from .types import CellSlot, ScheduleCell, ScheduleSlot


def validate_cell_slots(slots: list) -> None:
    """
    A cell holds a single day-off row or interval rows, never both.

    Raises:
        ValueError: if the slots mix the two kinds, hold more than one
            day-off row, share an order value, overlap each other, or an
            interval row is missing a time
    """
    day_off = [s for s in slots if s.is_day_off]
    if day_off and len(slots) > 1:
        raise ValueError("A day off cannot be combined with other slots on the same date")
    for s in slots:
        if not s.is_day_off and (s.start_time is None or s.end_time is None):
            raise ValueError("Working slots need a start and an end time")

    orders = [s.order for s in slots]
    if len(orders) != len(set(orders)):
        raise ValueError(f"Slot order values must be unique within a day, got {sorted(orders)}")

    intervals = [TimeInterval(s.start_time, s.end_time) for s in slots if not s.is_day_off]
    overlapping = find_overlapping_slots(intervals)
    if overlapping:
        first, second = overlapping[0]
        raise ValueError(f"Time slots {first + 1} and {second + 1} overlap")


def copy_slots_to_cells(
    source_slots: Iterable[CellSlot],
    target_cells: Iterable[ScheduleCell],
) -> list[ScheduleSlot]:
    """
    Paste the same slots into every target cell.

    Source order values are kept. No vacation check happens here: pasting is
    a manual override and may write over a vacation day.
    """
    ordered = sorted(source_slots, key=lambda s: s.order)
    result = []
    seen = set()
    for cell in target_cells:
        if cell in seen:
            continue
        seen.add(cell)
        for slot in ordered:
            result.append(ScheduleSlot(
                employee_id=cell.employee_id,
                date=cell.date,
                is_day_off=slot.is_day_off,
                start_time=None if slot.is_day_off else slot.start_time,
                end_time=None if slot.is_day_off else slot.end_time,
                order=slot.order,
            ))
    return result
