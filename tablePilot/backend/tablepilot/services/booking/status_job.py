"""
Applies the status policy to stored bookings.
Run by whatever owns the clock: a cron job, a worker, or the HTTP trigger.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from sqlalchemy import select, and_
from sqlalchemy.orm import Session

from tablepilot.db.models.bookings import Bookings, BookingStatus as BookingStatusColumn
from tablepilot.db.models.businesses import Businesses

from .data_loader import to_booking, to_business_config
from .status import advance_status
from .types import BookingStatus, RELEASING_STATUSES, TERMINAL_STATUSES


logger = logging.getLogger(__name__)


def business_now(business: Businesses) -> datetime:
    """Current wall-clock time in the business time zone, without tzinfo."""
    return datetime.now(ZoneInfo(business.timezone)).replace(tzinfo=None)


def to_business_local(business: Businesses, moment: datetime) -> datetime:
    """
    Naive local time in the business time zone.
    Naive input is taken as already local; aware input is converted.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(ZoneInfo(business.timezone)).replace(tzinfo=None)


def advance_business_bookings(
    db: Session,
    business: Businesses,
    now: Optional[datetime] = None,
) -> list[Bookings]:
    """
    Advance every open booking of a business dated yesterday or today.
    Yesterday is included for bookings running past midnight. An aware
    `now` is converted to the business time zone first.

    Returns:
        The bookings whose status changed, already committed.
    """
    if now is None:
        now = business_now(business)
    else:
        now = to_business_local(business, now)

    open_statuses = [
        BookingStatusColumn(s.value) for s in BookingStatus if s not in TERMINAL_STATUSES
    ]
    stmt = select(Bookings).where(
        and_(
            Bookings.business_id == business.id,
            Bookings.booking_date >= now.date() - timedelta(days=1),
            Bookings.booking_date <= now.date(),
            Bookings.status.in_(open_statuses),
        )
    )
    rows = db.execute(stmt).scalars().all()
    config = to_business_config(business)

    changed = []
    for row in rows:
        new_status = advance_status(to_booking(row), now, config)
        if new_status is None:
            continue
        logger.info(f"Booking {row.id}: {row.status.value} -> {new_status.value}")
        row.status = BookingStatusColumn(new_status.value)
        if new_status in RELEASING_STATUSES:
            row.table_id = None
        changed.append(row)

    if changed:
        db.commit()
    return changed
