import pytest
from datetime import time

from tablepilot.services.booking.types import (
    BookingStatus,
    Table,
    TimeInterval,
)
from tablepilot.services.booking.overlap import (
    intervals_overlap,
    find_available_table,
    bookings_blocking_create,
    bookings_blocking_edit,
    tables_with_availability,
    default_end_time,
)


class TestIntervalsOverlap:
    def test_no_overlap(self):
        a = TimeInterval(time(9, 0), time(10, 0))
        b = TimeInterval(time(12, 0), time(13, 0))
        assert intervals_overlap(a, b) is False

    def test_back_to_back_no_overlap(self):
        a = TimeInterval(time(9, 0), time(10, 0))
        b = TimeInterval(time(10, 0), time(11, 0))
        assert intervals_overlap(a, b) is False
        assert intervals_overlap(b, a) is False

    def test_overlap(self):
        a = TimeInterval(time(9, 0), time(11, 0))
        b = TimeInterval(time(10, 30), time(12, 0))
        assert intervals_overlap(a, b) is True

    def test_contained(self):
        a = TimeInterval(time(9, 0), time(17, 0))
        b = TimeInterval(time(12, 0), time(13, 0))
        assert intervals_overlap(a, b) is True
        assert intervals_overlap(b, a) is True

    @pytest.mark.parametrize("a,b", [
        ((time(9, 0), time(10, 0)), (time(9, 30), time(11, 0))),
        ((time(13, 0), time(14, 0)), (time(8, 0), time(9, 0))),
        ((time(18, 0), time(23, 59)), (time(23, 0), time(23, 30))),
    ])
    def test_symmetric_within_a_day(self, a, b):
        first, second = TimeInterval(*a), TimeInterval(*b)
        assert intervals_overlap(first, second) == intervals_overlap(second, first)

    def test_midnight_crossing_extends_end(self):
        late = TimeInterval(time(23, 0), time(1, 0))
        after_midnight = TimeInterval(time(0, 30), time(2, 0))
        assert intervals_overlap(late, after_midnight) is True

    def test_midnight_crossing_against_evening(self):
        late = TimeInterval(time(23, 0), time(1, 0))
        evening = TimeInterval(time(22, 0), time(23, 30))
        assert intervals_overlap(late, evening) is True

    def test_midnight_crossing_back_to_back(self):
        late = TimeInterval(time(21, 0), time(0, 0))
        assert late.crosses_midnight
        before = TimeInterval(time(19, 0), time(21, 0))
        assert intervals_overlap(late, before) is False

    def test_seconds_are_respected(self):
        a = TimeInterval(time(9, 0), time(10, 0, 30))
        b = TimeInterval(time(10, 0), time(11, 0))
        assert intervals_overlap(a, b) is True


class TestFindAvailableTable:
    def test_exact_capacity_preferred(self, three_tables, dinner):
        result = find_available_table([], three_tables, dinner, party_size=4)
        assert result.table_id == 2
        assert result.status == BookingStatus.RESERVED

    def test_smallest_sufficient_when_no_exact(self, dinner):
        tables = [
            Table(id=10, min_capacity=1, max_capacity=2),
            Table(id=11, min_capacity=1, max_capacity=6),
        ]
        result = find_available_table([], tables, dinner, party_size=3)
        assert result.table_id == 11
        assert result.status == BookingStatus.RESERVED

    def test_smallest_regardless_of_input_order(self, dinner):
        tables = [
            Table(id=1, min_capacity=1, max_capacity=8),
            Table(id=2, min_capacity=1, max_capacity=5),
            Table(id=3, min_capacity=1, max_capacity=6),
        ]
        result = find_available_table([], tables, dinner, party_size=3)
        assert result.table_id == 2

    def test_min_capacity_is_inclusive(self, dinner):
        tables = [Table(id=1, min_capacity=4, max_capacity=8)]
        assert find_available_table([], tables, dinner, party_size=4).table_id == 1
        assert find_available_table([], tables, dinner, party_size=3).table_id is None

    def test_occupied_table_skipped(self, three_tables, dinner, make_booking):
        existing = [make_booking(1, table_id=2, start=time(19, 0), end=time(21, 0))]
        result = find_available_table(existing, three_tables, dinner, party_size=4)
        assert result.table_id == 3

    def test_all_suitable_occupied_is_pending(self, three_tables, dinner, make_booking):
        existing = [
            make_booking(1, table_id=2, start=time(20, 0), end=time(22, 0)),
            make_booking(2, table_id=3, start=time(21, 0), end=time(23, 0)),
        ]
        result = find_available_table(existing, three_tables, dinner, party_size=4)
        assert result.table_id is None
        assert result.status == BookingStatus.PENDING
        assert result.is_assigned is False

    def test_no_tables_is_pending(self, dinner):
        result = find_available_table([], [], dinner, party_size=2)
        assert result.table_id is None
        assert result.status == BookingStatus.PENDING

    def test_party_too_large_is_pending(self, three_tables, dinner):
        result = find_available_table([], three_tables, dinner, party_size=7)
        assert result.status == BookingStatus.PENDING

    def test_back_to_back_booking_frees_table(self, three_tables, dinner, make_booking):
        existing = [make_booking(1, table_id=2, start=time(18, 0), end=time(20, 0))]
        result = find_available_table(existing, three_tables, dinner, party_size=4)
        assert result.table_id == 2

    def test_midnight_booking_blocks_late_request(self, three_tables, make_booking):
        existing = [make_booking(1, table_id=1, start=time(23, 0), end=time(1, 0))]
        request = TimeInterval(time(0, 30), time(2, 0))
        result = find_available_table(existing, three_tables, request, party_size=2)
        assert result.table_id == 2

    def test_excluded_booking_does_not_block(self, three_tables, dinner, make_booking):
        existing = [make_booking(5, table_id=2, start=time(20, 0), end=time(22, 0))]
        result = find_available_table(existing, three_tables, dinner, party_size=4, exclude_booking_id=5)
        assert result.table_id == 2

    def test_unassigned_bookings_ignored(self, three_tables, dinner, make_booking):
        existing = [make_booking(1, table_id=None, start=time(20, 0), end=time(22, 0),
                                 status=BookingStatus.PENDING)]
        result = find_available_table(existing, three_tables, dinner, party_size=2)
        assert result.table_id == 1


class TestBlockingFilters:
    def test_create_flow_ignores_cancelled_and_completed(self, make_booking):
        bookings = [
            make_booking(1, 1, time(20, 0), time(22, 0), status=BookingStatus.CANCELLED),
            make_booking(2, 2, time(20, 0), time(22, 0), status=BookingStatus.COMPLETED),
            make_booking(3, 3, time(20, 0), time(22, 0), status=BookingStatus.OCCUPIED),
        ]
        assert [b.id for b in bookings_blocking_create(bookings)] == [3]

    def test_edit_flow_keeps_completed_and_drops_self(self, make_booking):
        bookings = [
            make_booking(1, 1, time(20, 0), time(22, 0), status=BookingStatus.CANCELLED),
            make_booking(2, 2, time(20, 0), time(22, 0), status=BookingStatus.COMPLETED),
            make_booking(3, 3, time(20, 0), time(22, 0)),
        ]
        assert [b.id for b in bookings_blocking_edit(bookings, booking_id=3)] == [2]


class TestTablesWithAvailability:
    def test_flags_and_order(self, dinner, make_booking):
        tables = [
            Table(id=7, min_capacity=1, max_capacity=4, table_number=3),
            Table(id=8, min_capacity=1, max_capacity=2, table_number=1),
        ]
        existing = [make_booking(1, table_id=7, start=time(21, 0), end=time(23, 0))]

        listing = tables_with_availability(existing, tables, dinner)
        assert [a.table.table_number for a in listing] == [1, 3]
        assert [a.is_available for a in listing] == [True, False]


class TestDefaultEndTime:
    def test_same_day(self):
        assert default_end_time(time(20, 0), 90) == time(21, 30)

    def test_wraps_past_midnight(self):
        assert default_end_time(time(23, 0), 120) == time(1, 0)
