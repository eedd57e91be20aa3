"""
Booking service package.

Usage:
    from tablepilot.services.booking import assign_table_for_create, TimeInterval

    assignment = assign_table_for_create(
        db, business_id=1, booking_date=date(2025, 1, 20),
        interval=TimeInterval(time(20, 0), time(22, 0)), party_size=4,
    )

    # Or call the pure resolver with rows already in hand
    from tablepilot.services.booking import find_available_table
    assignment = find_available_table(bookings, tables, interval, party_size=4)
"""

from .types import (
    Booking,
    BookingStatus,
    BusinessConfig,
    Table,
    TableAssignment,
    TableAvailability,
    TimeInterval,
    releases_table,
)
from .overlap import (
    intervals_overlap,
    find_available_table,
    bookings_blocking_create,
    bookings_blocking_edit,
    tables_with_availability,
    default_end_time,
)
from .status import advance_status
from .assignment import (
    TableUnavailableError,
    assign_table_for_create,
    assign_table_for_edit,
    list_table_availability,
)
from .status_job import advance_business_bookings

__all__ = [
    # Types
    "Booking",
    "BookingStatus",
    "BusinessConfig",
    "Table",
    "TableAssignment",
    "TableAvailability",
    "TimeInterval",
    "releases_table",
    # Pure logic
    "intervals_overlap",
    "find_available_table",
    "bookings_blocking_create",
    "bookings_blocking_edit",
    "tables_with_availability",
    "default_end_time",
    "advance_status",
    # Database-backed entry points
    "TableUnavailableError",
    "assign_table_for_create",
    "assign_table_for_edit",
    "list_table_availability",
    "advance_business_bookings",
]
