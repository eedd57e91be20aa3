from datetime import date, time, timedelta

from tablepilot.services.scheduling.types import (
    DateSelection,
    DayOfWeek,
    ScheduleSlot,
    VacationRange,
)
from tablepilot.services.scheduling.conflicts import detect_schedule_conflicts


NAMES = {1: "Ana", 2: "Luis"}


def working(employee_id: int, d: date) -> ScheduleSlot:
    return ScheduleSlot(employee_id, d, False, time(9, 0), time(13, 0))


class TestScheduleConflicts:
    def test_no_existing_rows(self, monday):
        selection = DateSelection(date_from=monday, date_to=monday + timedelta(days=6))
        report = detect_schedule_conflicts([], [], [DayOfWeek.MONDAY], selection, NAMES)
        assert report.schedule_conflicts == []
        assert report.vacation_conflicts == []
        assert report.has_conflicts is False

    def test_existing_row_on_selected_day(self, monday):
        selection = DateSelection(date_from=monday, date_to=monday + timedelta(days=6))
        existing = [working(1, monday), working(1, monday), working(2, monday)]
        report = detect_schedule_conflicts(existing, [], [DayOfWeek.MONDAY], selection, NAMES)
        assert report.schedule_conflicts == ["Ana", "Luis"]

    def test_existing_row_on_unselected_day_ignored(self, monday):
        selection = DateSelection(date_from=monday, date_to=monday + timedelta(days=6))
        existing = [working(1, monday + timedelta(days=1))]
        report = detect_schedule_conflicts(existing, [], [DayOfWeek.MONDAY], selection, NAMES)
        assert report.schedule_conflicts == []

    def test_existing_row_outside_explicit_dates_ignored(self, monday):
        next_monday = monday + timedelta(days=7)
        selection = DateSelection(explicit_dates=[next_monday])
        report = detect_schedule_conflicts(
            [working(1, monday)], [], [DayOfWeek.MONDAY], selection, NAMES
        )
        assert report.schedule_conflicts == []

    def test_unknown_employee_name(self, monday):
        selection = DateSelection(date_from=monday, date_to=monday)
        report = detect_schedule_conflicts([working(9, monday)], [], [DayOfWeek.MONDAY], selection)
        assert report.schedule_conflicts == ["Employee"]


class TestVacationConflicts:
    def test_vacation_on_selected_day_is_reported(self, monday):
        selection = DateSelection(date_from=monday, date_to=monday + timedelta(days=13))
        vacations = [VacationRange(1, monday + timedelta(days=6), monday + timedelta(days=8))]
        report = detect_schedule_conflicts([], vacations, [DayOfWeek.MONDAY], selection, NAMES)

        assert len(report.vacation_conflicts) == 1
        conflict = report.vacation_conflicts[0]
        assert conflict.employee_name == "Ana"
        assert conflict.start == "26/01/2025"
        assert conflict.end == "28/01/2025"
        assert report.has_conflicts is True

    def test_vacation_without_selected_day_ignored(self, monday):
        selection = DateSelection(date_from=monday, date_to=monday + timedelta(days=6))
        # Tuesday to Thursday, only Mondays selected
        vacations = [VacationRange(1, monday + timedelta(days=1), monday + timedelta(days=3))]
        report = detect_schedule_conflicts([], vacations, [DayOfWeek.MONDAY], selection, NAMES)
        assert report.vacation_conflicts == []

    def test_vacation_outside_window_ignored(self, monday):
        selection = DateSelection(date_from=monday, date_to=monday + timedelta(days=6))
        vacations = [VacationRange(2, monday + timedelta(days=30), monday + timedelta(days=40))]
        report = detect_schedule_conflicts([], vacations, list(range(7)), selection, NAMES)
        assert report.vacation_conflicts == []

    def test_explicit_dates_checked_one_by_one(self, monday):
        wednesday = monday + timedelta(days=2)
        selection = DateSelection(explicit_dates=[monday, monday + timedelta(days=4)])
        vacations = [VacationRange(2, wednesday, wednesday + timedelta(days=1))]
        # window spans the vacation but no selected date falls inside it
        report = detect_schedule_conflicts([], vacations, list(range(7)), selection, NAMES)
        assert report.vacation_conflicts == []
