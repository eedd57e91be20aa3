import pytest


@pytest.fixture
def employee(client, business_url):
    response = client.post(f"{business_url}/employees", json={"name": "Ana", "position": "waiter"})
    assert response.status_code == 201
    return response.json()


def fixed_request(employee_ids, **overrides):
    payload = {
        "employee_ids": employee_ids,
        "days_of_week": [1],  # Monday
        "time_slots": [
            {"start_time": "09:00:00", "end_time": "13:00:00"},
            {"start_time": "17:00:00", "end_time": "21:00:00"},
        ],
        "selection": {"date_from": "2025-01-20", "date_to": "2025-02-02"},
    }
    payload.update(overrides)
    return payload


class TestFixedSchedule:
    def test_two_mondays_two_slots(self, client, business_url, employee):
        response = client.post(f"{business_url}/schedules/fixed", json=fixed_request([employee["id"]]))
        assert response.status_code == 201
        rows = response.json()
        assert [(r["date"], r["order"]) for r in rows] == [
            ("2025-01-20", 1), ("2025-01-20", 2), ("2025-01-27", 1), ("2025-01-27", 2),
        ]

        stored = client.get(
            f"{business_url}/schedules",
            params={"start_date": "2025-01-20", "end_date": "2025-02-02"},
        ).json()
        assert len(stored) == 4

    def test_vacation_days_skipped(self, client, business_url, employee):
        client.post(
            f"{business_url}/employees/{employee['id']}/vacations",
            json={"start_date": "2025-01-26", "end_date": "2025-01-28"},
        )
        response = client.post(
            f"{business_url}/schedules/fixed",
            json=fixed_request([employee["id"]], force=True),
        )
        assert response.status_code == 201
        assert {r["date"] for r in response.json()} == {"2025-01-20"}

    def test_conflicts_refuse_without_force(self, client, business_url, employee):
        client.post(f"{business_url}/schedules/fixed", json=fixed_request([employee["id"]]))

        response = client.post(f"{business_url}/schedules/fixed", json=fixed_request([employee["id"]]))
        assert response.status_code == 409
        assert response.json()["detail"]["schedule_conflicts"] == ["Ana"]

    def test_force_overwrites(self, client, business_url, employee):
        client.post(f"{business_url}/schedules/fixed", json=fixed_request([employee["id"]]))
        request = fixed_request(
            [employee["id"]],
            time_slots=[{"start_time": "10:00:00", "end_time": "18:00:00"}],
            force=True,
        )
        response = client.post(f"{business_url}/schedules/fixed", json=request)
        assert response.status_code == 201

        stored = client.get(
            f"{business_url}/schedules",
            params={"start_date": "2025-01-20", "end_date": "2025-02-02"},
        ).json()
        assert [(r["date"], r["start_time"]) for r in stored] == [
            ("2025-01-20", "10:00:00"), ("2025-01-27", "10:00:00"),
        ]

    def test_conflict_report(self, client, business_url, employee):
        client.post(
            f"{business_url}/employees/{employee['id']}/vacations",
            json={"start_date": "2025-01-27", "end_date": "2025-01-27"},
        )
        response = client.post(
            f"{business_url}/schedules/fixed/conflicts",
            json=fixed_request([employee["id"]]),
        )
        assert response.status_code == 200
        assert response.json() == {
            "schedule_conflicts": [],
            "vacation_conflicts": [
                {"employee_name": "Ana", "start": "27/01/2025", "end": "27/01/2025"},
            ],
        }

    def test_overlapping_slots_rejected(self, client, business_url, employee):
        request = fixed_request(
            [employee["id"]],
            time_slots=[
                {"start_time": "09:00:00", "end_time": "14:00:00"},
                {"start_time": "13:00:00", "end_time": "18:00:00"},
            ],
        )
        response = client.post(f"{business_url}/schedules/fixed", json=request)
        assert response.status_code == 400

    def test_both_selection_modes_rejected(self, client, business_url, employee):
        request = fixed_request(
            [employee["id"]],
            selection={"date_from": "2025-01-20", "date_to": "2025-01-26", "dates": ["2025-01-20"]},
        )
        response = client.post(f"{business_url}/schedules/fixed", json=request)
        assert response.status_code == 400

    def test_invalid_day_of_week(self, client, business_url, employee):
        response = client.post(
            f"{business_url}/schedules/fixed",
            json=fixed_request([employee["id"]], days_of_week=[7]),
        )
        assert response.status_code == 422

    def test_unknown_employee(self, client, business_url, employee):
        response = client.post(f"{business_url}/schedules/fixed", json=fixed_request([999]))
        assert response.status_code == 404


class TestCells:
    def test_day_off_replaces_shifts(self, client, business_url, employee):
        client.post(f"{business_url}/schedules/fixed", json=fixed_request([employee["id"]]))

        response = client.put(
            f"{business_url}/schedules/{employee['id']}/2025-01-20",
            json={"is_day_off": True},
        )
        assert response.status_code == 200

        stored = client.get(
            f"{business_url}/schedules",
            params={"start_date": "2025-01-20", "end_date": "2025-01-20"},
        ).json()
        assert len(stored) == 1
        assert stored[0]["is_day_off"] is True
        assert stored[0]["start_time"] is None

    def test_day_off_with_slots_rejected(self, client, business_url, employee):
        response = client.put(
            f"{business_url}/schedules/{employee['id']}/2025-01-20",
            json={"is_day_off": True, "time_slots": [{"start_time": "09:00:00", "end_time": "13:00:00"}]},
        )
        assert response.status_code == 422

    def test_copy_overwrites_targets(self, client, business_url, employee):
        client.post(f"{business_url}/schedules/fixed", json=fixed_request([employee["id"]]))

        response = client.post(
            f"{business_url}/schedules/copy",
            json={
                "source_slots": [
                    {"is_day_off": False, "start_time": "12:00:00", "end_time": "16:00:00", "order": 1},
                ],
                "target_cells": [
                    {"employee_id": employee["id"], "date": "2025-01-20"},
                    {"employee_id": employee["id"], "date": "2025-01-21"},
                ],
            },
        )
        assert response.status_code == 200
        assert len(response.json()) == 2

        stored = client.get(
            f"{business_url}/schedules",
            params={"start_date": "2025-01-20", "end_date": "2025-01-21"},
        ).json()
        assert [(r["date"], r["start_time"]) for r in stored] == [
            ("2025-01-20", "12:00:00"), ("2025-01-21", "12:00:00"),
        ]

    def test_copy_mixed_day_off_rejected(self, client, business_url, employee):
        response = client.post(
            f"{business_url}/schedules/copy",
            json={
                "source_slots": [
                    {"is_day_off": True, "order": 1},
                    {"is_day_off": False, "start_time": "12:00:00", "end_time": "16:00:00", "order": 2},
                ],
                "target_cells": [{"employee_id": employee["id"], "date": "2025-01-20"}],
            },
        )
        assert response.status_code == 400

    def test_copy_without_order_values_rejected(self, client, business_url, employee):
        response = client.post(
            f"{business_url}/schedules/copy",
            json={
                "source_slots": [
                    {"is_day_off": False, "start_time": "09:00:00", "end_time": "13:00:00"},
                    {"is_day_off": False, "start_time": "17:00:00", "end_time": "21:00:00"},
                ],
                "target_cells": [{"employee_id": employee["id"], "date": "2025-01-20"}],
            },
        )
        assert response.status_code == 400

        stored = client.get(
            f"{business_url}/schedules",
            params={"start_date": "2025-01-20", "end_date": "2025-01-20"},
        ).json()
        assert stored == []

    def test_copy_overlapping_slots_rejected(self, client, business_url, employee):
        response = client.post(
            f"{business_url}/schedules/copy",
            json={
                "source_slots": [
                    {"is_day_off": False, "start_time": "09:00:00", "end_time": "14:00:00", "order": 1},
                    {"is_day_off": False, "start_time": "13:00:00", "end_time": "18:00:00", "order": 2},
                ],
                "target_cells": [{"employee_id": employee["id"], "date": "2025-01-20"}],
            },
        )
        assert response.status_code == 400

    def test_copy_two_ordered_slots(self, client, business_url, employee):
        response = client.post(
            f"{business_url}/schedules/copy",
            json={
                "source_slots": [
                    {"is_day_off": False, "start_time": "17:00:00", "end_time": "21:00:00", "order": 2},
                    {"is_day_off": False, "start_time": "09:00:00", "end_time": "13:00:00", "order": 1},
                ],
                "target_cells": [{"employee_id": employee["id"], "date": "2025-01-20"}],
            },
        )
        assert response.status_code == 200
        assert [(r["order"], r["start_time"]) for r in response.json()] == [
            (1, "09:00:00"), (2, "17:00:00"),
        ]
