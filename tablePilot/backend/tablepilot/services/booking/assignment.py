"""
Table assignment for the create and edit booking flows.

Each flow loads the day's bookings, narrows them to the ones that block a
table in that flow, and hands them to the pure resolver.
"""

import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from tablepilot.db.models.bookings import Bookings

from .data_loader import load_bookings_for_date, load_tables
from .overlap import (
    bookings_blocking_create,
    bookings_blocking_edit,
    find_available_table,
    tables_with_availability,
)
from .types import BookingStatus, TableAssignment, TableAvailability, TimeInterval


logger = logging.getLogger(__name__)


class TableUnavailableError(Exception):
    pass


def assign_table_for_create(
    db: Session,
    business_id: int,
    booking_date: date,
    interval: TimeInterval,
    party_size: int,
) -> TableAssignment:
    tables = load_tables(db, business_id)
    bookings = bookings_blocking_create(load_bookings_for_date(db, business_id, booking_date))

    assignment = find_available_table(bookings, tables, interval, party_size)
    if not assignment.is_assigned:
        logger.info(
            f"No table for party of {party_size} at business {business_id} "
            f"on {booking_date} {interval.start}-{interval.end}, booking left pending"
        )
    return assignment


def list_table_availability(
    db: Session,
    business_id: int,
    booking_date: date,
    interval: TimeInterval,
    exclude_booking_id: Optional[int] = None,
) -> list[TableAvailability]:
    """Tables with their availability for a slot, ignoring the booking being edited."""
    tables = load_tables(db, business_id)
    bookings = load_bookings_for_date(db, business_id, booking_date)
    if exclude_booking_id is not None:
        bookings = bookings_blocking_edit(bookings, exclude_booking_id)
    else:
        bookings = bookings_blocking_create(bookings)
    return tables_with_availability(bookings, tables, interval)


def assign_table_for_edit(
    db: Session,
    booking: Bookings,
    booking_date: date,
    interval: TimeInterval,
    party_size: int,
    selected_table_id: Optional[int] = None,
) -> TableAssignment:
    """
    Assignment for an edited booking.

    A manually selected table must still be free for the new slot, otherwise
    TableUnavailableError is raised. Without a selection the resolver picks one.
    """
    bookings = bookings_blocking_edit(
        load_bookings_for_date(db, booking.business_id, booking_date),
        booking.id,
    )
    tables = load_tables(db, booking.business_id)

    if selected_table_id is not None:
        availability = tables_with_availability(bookings, tables, interval)
        selected = next((a for a in availability if a.table.id == selected_table_id), None)
        if selected is None or not selected.is_available:
            raise TableUnavailableError(f"Table {selected_table_id} is no longer available")
        return TableAssignment(table_id=selected_table_id, status=BookingStatus.RESERVED)

    assignment = find_available_table(
        bookings, tables, interval, party_size, exclude_booking_id=booking.id
    )
    if not assignment.is_assigned:
        logger.info(f"Booking {booking.id} updated without a table, left pending")
    return assignment
