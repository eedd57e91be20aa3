"""
Data loader for booking service.
Fetches tables and bookings from the database and converts to internal types.
"""

from datetime import date
from typing import Optional

from sqlalchemy import select, and_
from sqlalchemy.orm import Session

from tablepilot.db.models.bookings import Bookings
from tablepilot.db.models.businesses import Businesses
from tablepilot.db.models.tables import DiningTables

from .types import (
    Booking,
    BookingStatus,
    BusinessConfig,
    Table,
    TimeInterval,
)


def to_booking(row: Bookings) -> Booking:
    return Booking(
        id=row.id,
        table_id=row.table_id,
        booking_date=row.booking_date,
        interval=TimeInterval(start=row.start_time, end=row.end_time),
        party_size=row.party_size,
        status=BookingStatus(row.status.value),
    )


def to_table(row: DiningTables) -> Table:
    return Table(
        id=row.id,
        min_capacity=row.min_capacity,
        max_capacity=row.max_capacity,
        table_number=row.table_number,
    )


def to_business_config(business: Businesses) -> BusinessConfig:
    return BusinessConfig(
        auto_mark_in_progress=business.auto_mark_in_progress,
        auto_complete_in_progress=business.auto_complete_in_progress,
        auto_complete_delayed=business.auto_complete_delayed,
        mark_delayed_as_no_show=business.mark_delayed_as_no_show,
    )


def load_tables(db: Session, business_id: int) -> list[Table]:
    """Load all tables of a business, smallest first."""
    stmt = (
        select(DiningTables)
        .where(DiningTables.business_id == business_id)
        .order_by(DiningTables.max_capacity, DiningTables.table_number)
    )
    rows = db.execute(stmt).scalars().all()
    return [to_table(r) for r in rows]


def load_bookings_for_date(
    db: Session,
    business_id: int,
    booking_date: date,
    exclude_booking_id: Optional[int] = None,
) -> list[Booking]:
    """Load every booking of a business on a date, whatever its status."""
    conditions = [
        Bookings.business_id == business_id,
        Bookings.booking_date == booking_date,
    ]
    if exclude_booking_id is not None:
        conditions.append(Bookings.id != exclude_booking_id)

    stmt = select(Bookings).where(and_(*conditions)).order_by(Bookings.start_time)
    rows = db.execute(stmt).scalars().all()
    return [to_booking(r) for r in rows]
