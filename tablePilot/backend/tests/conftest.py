import pytest
from datetime import date, time

from tablepilot.services.booking.types import (
    Booking,
    BookingStatus,
    Table,
    TimeInterval,
)


@pytest.fixture
def monday() -> date:
    # fixed Monday for deterministic tests
    return date(2025, 1, 20)


@pytest.fixture
def three_tables() -> list[Table]:
    # 2, 4 and 6 seaters, smallest first
    return [
        Table(id=1, min_capacity=1, max_capacity=2, table_number=1),
        Table(id=2, min_capacity=1, max_capacity=4, table_number=2),
        Table(id=3, min_capacity=1, max_capacity=6, table_number=3),
    ]


@pytest.fixture
def dinner() -> TimeInterval:
    return TimeInterval(time(20, 0), time(22, 0))


@pytest.fixture
def make_booking(monday):
    # factory so tests only spell out what they care about
    def _make(
        id: int,
        table_id,
        start: time,
        end: time,
        status: BookingStatus = BookingStatus.RESERVED,
        party_size: int = 2,
        booking_date: date = None,
    ) -> Booking:
        return Booking(
            id=id,
            table_id=table_id,
            booking_date=booking_date or monday,
            interval=TimeInterval(start, end),
            party_size=party_size,
            status=status,
        )
    return _make
