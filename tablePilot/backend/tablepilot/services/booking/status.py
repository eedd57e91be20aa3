"""
Time-triggered booking status transitions.

Only the decision lives here. Whatever runs it (a cron job, a polling
client, the advance-status endpoint) passes the current local time in.
"""

from datetime import datetime, timedelta
from typing import Optional

from .types import (
    Booking,
    BookingStatus,
    BusinessConfig,
    TERMINAL_STATUSES,
)


def booking_start_datetime(booking: Booking) -> datetime:
    return datetime.combine(booking.booking_date, booking.interval.start)


def booking_end_datetime(booking: Booking) -> datetime:
    """End of the booking, on the next day when the interval crosses midnight."""
    end_date = booking.booking_date
    if booking.interval.crosses_midnight:
        end_date += timedelta(days=1)
    return datetime.combine(end_date, booking.interval.end)


def _next_status(
    status: BookingStatus,
    started: bool,
    ended: bool,
    config: BusinessConfig,
) -> Optional[BookingStatus]:
    if status in TERMINAL_STATUSES:
        return None

    if status == BookingStatus.RESERVED and started:
        if config.auto_mark_in_progress:
            return BookingStatus.IN_PROGRESS
        return BookingStatus.DELAYED

    if status in (BookingStatus.OCCUPIED, BookingStatus.IN_PROGRESS) and ended:
        if config.auto_complete_in_progress:
            return BookingStatus.COMPLETED
        return None

    if status in (BookingStatus.DELAYED, BookingStatus.PENDING) and ended:
        if config.auto_complete_delayed:
            if config.mark_delayed_as_no_show:
                return BookingStatus.NO_SHOW
            return BookingStatus.COMPLETED
        return None

    return None


def advance_status(
    booking: Booking,
    now: datetime,
    config: BusinessConfig,
) -> Optional[BookingStatus]:
    """
    Work out where a booking's status should be at `now`.

    Rules are applied until none fires, so a booking nobody looked at
    during its whole slot moves straight to its final state.

    Returns:
        The new status, or None if the booking stays as it is.
    """
    started = now >= booking_start_datetime(booking)
    ended = now >= booking_end_datetime(booking)

    status = booking.status
    # every transition moves forward, so the chain is at most a few steps
    for _ in range(len(BookingStatus)):
        nxt = _next_status(status, started, ended, config)
        if nxt is None:
            break
        status = nxt

    return status if status != booking.status else None
