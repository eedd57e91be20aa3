"""
Overlap checking and table assignment.
Decides which tables are free for a requested interval and picks the best fit.
"""

from datetime import time, datetime, timedelta
from typing import Iterable, Optional

from .types import (
    MINUTES_PER_DAY,
    Booking,
    BookingStatus,
    Table,
    TableAssignment,
    TableAvailability,
    TimeInterval,
)


def _minutes_overlap(a_start: float, a_end: float, b_start: float, b_end: float) -> bool:
    return a_start < b_end and b_start < a_end


def intervals_overlap(a: TimeInterval, b: TimeInterval) -> bool:
    """
    Check if two intervals overlap, extending any that cross midnight.

    An interval crossing midnight also covers the early hours of the next
    day, so the other interval is compared a second time one day later.
    Ends are exclusive: back-to-back intervals do not overlap.
    """
    if _minutes_overlap(a.start_minutes, a.end_minutes, b.start_minutes, b.end_minutes):
        return True
    if a.crosses_midnight and not b.crosses_midnight:
        return _minutes_overlap(
            a.start_minutes, a.end_minutes,
            b.start_minutes + MINUTES_PER_DAY, b.end_minutes + MINUTES_PER_DAY,
        )
    if b.crosses_midnight and not a.crosses_midnight:
        return _minutes_overlap(
            a.start_minutes + MINUTES_PER_DAY, a.end_minutes + MINUTES_PER_DAY,
            b.start_minutes, b.end_minutes,
        )
    return False


def bookings_blocking_create(bookings: Iterable[Booking]) -> list[Booking]:
    """Bookings that hold a table when a new booking is created."""
    ignored = {BookingStatus.CANCELLED, BookingStatus.COMPLETED}
    return [b for b in bookings if b.status not in ignored]


def bookings_blocking_edit(bookings: Iterable[Booking], booking_id: int) -> list[Booking]:
    """
    Bookings that hold a table while an existing booking is edited.
    The edited booking never blocks itself; completed bookings still count.
    """
    return [
        b for b in bookings
        if b.id != booking_id and b.status != BookingStatus.CANCELLED
    ]


def get_occupied_table_ids(
    existing_bookings: Iterable[Booking],
    interval: TimeInterval,
    exclude_booking_id: Optional[int] = None,
) -> set[int]:
    """Tables held by a booking overlapping the interval."""
    occupied = set()
    for booking in existing_bookings:
        if booking.table_id is None:
            continue
        if exclude_booking_id is not None and booking.id == exclude_booking_id:
            continue
        if intervals_overlap(booking.interval, interval):
            occupied.add(booking.table_id)
    return occupied


def table_fits_party(table: Table, party_size: int) -> bool:
    return table.min_capacity <= party_size <= table.max_capacity


def find_available_table(
    existing_bookings: Iterable[Booking],
    tables: list[Table],
    interval: TimeInterval,
    party_size: int,
    exclude_booking_id: Optional[int] = None,
) -> TableAssignment:
    """
    Pick a table for a booking.

    Priority: exact max capacity > smallest max capacity that fits.
    Nothing free returns a pending assignment without a table.
    """
    occupied = get_occupied_table_ids(existing_bookings, interval, exclude_booking_id)

    candidates = [
        t for t in tables
        if table_fits_party(t, party_size) and t.id not in occupied
    ]
    if not candidates:
        return TableAssignment(table_id=None, status=BookingStatus.PENDING)

    exact_match = next((t for t in candidates if t.max_capacity == party_size), None)
    if exact_match:
        return TableAssignment(table_id=exact_match.id, status=BookingStatus.RESERVED)

    smallest = sorted(candidates, key=lambda t: t.max_capacity)[0]
    return TableAssignment(table_id=smallest.id, status=BookingStatus.RESERVED)


def tables_with_availability(
    existing_bookings: Iterable[Booking],
    tables: list[Table],
    interval: TimeInterval,
) -> list[TableAvailability]:
    """Every table with a free/occupied flag, ordered by table number."""
    occupied = get_occupied_table_ids(existing_bookings, interval)

    def sort_key(table: Table) -> tuple[bool, int]:
        # unnumbered tables go last
        return (table.table_number is None, table.table_number or 0)

    return [
        TableAvailability(table=t, is_available=t.id not in occupied)
        for t in sorted(tables, key=sort_key)
    ]


def default_end_time(start: time, duration_minutes: int) -> time:
    """End time after the business slot duration, wrapping past midnight."""
    end = datetime.combine(datetime.min.date(), start) + timedelta(minutes=duration_minutes)
    return end.time()
