"""HTTP-level tests: storage endpoints and the agenda views built on them."""

from datetime import date, time
from uuid import uuid4

from salon_agenda.models.custom_slot import CustomSlot
from salon_agenda.routers import calendar

MONDAY = "2026-10-19"
SATURDAY = "2026-10-24"


def _url(professional, path):
    return f"/professionals/{professional.professional_id}{path}"


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestProfessionals:
    def test_create_and_list(self, client):
        created = client.post("/professionals", json={"name": "Beatriz"})
        assert created.status_code == 201
        assert created.json()["is_active"] is True

        names = [p["name"] for p in client.get("/professionals").json()]
        assert names == ["Beatriz"]

    def test_unknown_professional_is_404(self, client):
        response = client.get(f"/professionals/{uuid4()}/agenda/free-slots", params={"date": MONDAY})
        assert response.status_code == 404


class TestSessions:
    def test_create_list_update_delete(self, client, professional):
        created = client.post(
            _url(professional, "/sessions"),
            json={"client_name": "Carla", "session_date": MONDAY, "session_time": "10:00", "duration_code": "1h30"},
        )
        assert created.status_code == 201
        session_id = created.json()["session_id"]
        assert created.json()["session_time"] == "10:00"
        assert created.json()["status"] == "scheduled"

        listed = client.get(_url(professional, "/sessions"), params={"session_date": MONDAY}).json()
        assert [s["session_id"] for s in listed] == [session_id]

        patched = client.patch(f"/sessions/{session_id}", json={"status": "confirmed", "is_confirmed_by_client": True})
        assert patched.status_code == 200
        assert patched.json()["status"] == "confirmed"
        assert patched.json()["is_confirmed_by_client"] is True

        assert client.delete(f"/sessions/{session_id}").status_code == 200
        assert client.get(_url(professional, "/sessions")).json() == []

    def test_invalid_time_is_400(self, client, professional):
        response = client.post(
            _url(professional, "/sessions"),
            json={"client_name": "Carla", "session_date": MONDAY, "session_time": "9h"},
        )
        assert response.status_code == 400

    def test_unknown_status_is_400(self, client, professional):
        response = client.post(
            _url(professional, "/sessions"),
            json={"client_name": "Carla", "session_date": MONDAY, "session_time": "09:00", "status": "maybe"},
        )
        assert response.status_code == 400

    def test_missing_session_is_404(self, client):
        assert client.delete(f"/sessions/{uuid4()}").status_code == 404


class TestCustomSlots:
    def test_add_list_and_remove(self, client, professional):
        assert client.post(_url(professional, "/custom-slots"), json={"slot_date": MONDAY, "slot_time": "19:00"}).status_code == 201
        assert client.post(_url(professional, "/custom-slots"), json={"slot_date": MONDAY, "slot_time": "07:30"}).status_code == 201

        listed = client.get(_url(professional, "/custom-slots"), params={"slot_date": MONDAY}).json()
        assert listed == ["07:30", "19:00"]

        removed = client.delete(_url(professional, "/custom-slots"), params={"slot_date": MONDAY, "slot_time": "07:30"})
        assert removed.status_code == 200
        assert client.get(_url(professional, "/custom-slots"), params={"slot_date": MONDAY}).json() == ["19:00"]

    def test_duplicate_is_409(self, client, professional):
        payload = {"slot_date": MONDAY, "slot_time": "19:00"}
        assert client.post(_url(professional, "/custom-slots"), json=payload).status_code == 201
        assert client.post(_url(professional, "/custom-slots"), json=payload).status_code == 409

    def test_concurrent_duplicate_is_409(self, client, db_session, professional, monkeypatch):
        # Another request stored the slot after this one checked for it
        db_session.add(CustomSlot(professional_id=professional.professional_id, slot_date=date(2026, 10, 19), slot_time=time(19, 0)))
        db_session.commit()
        monkeypatch.setattr(calendar, "_custom_slot_exists", lambda *args: False)

        response = client.post(_url(professional, "/custom-slots"), json={"slot_date": MONDAY, "slot_time": "19:00"})

        assert response.status_code == 409
        assert client.get(_url(professional, "/custom-slots"), params={"slot_date": MONDAY}).json() == ["19:00"]

    def test_bad_time_is_400(self, client, professional):
        response = client.post(_url(professional, "/custom-slots"), json={"slot_date": MONDAY, "slot_time": "7:30"})
        assert response.status_code == 400


class TestBlocks:
    def test_partial_block_needs_both_times(self, client, professional):
        response = client.post(_url(professional, "/blocks"), json={"block_date": MONDAY, "start_time": "10:00"})
        assert response.status_code == 400

    def test_end_must_follow_start(self, client, professional):
        response = client.post(
            _url(professional, "/blocks"),
            json={"block_date": MONDAY, "start_time": "11:00", "end_time": "10:00"},
        )
        assert response.status_code == 400

    def test_full_day_block_carries_no_times(self, client, professional):
        response = client.post(
            _url(professional, "/blocks"),
            json={"block_date": MONDAY, "is_full_day": True, "start_time": "10:00", "end_time": "11:00"},
        )
        assert response.status_code == 400

    def test_create_and_delete(self, client, professional):
        created = client.post(
            _url(professional, "/blocks"),
            json={"block_date": MONDAY, "start_time": "13:00", "end_time": "14:00", "reason": "lunch"},
        )
        assert created.status_code == 201
        block = created.json()
        assert (block["start_time"], block["end_time"]) == ("13:00", "14:00")

        assert len(client.get(_url(professional, "/blocks"), params={"block_date": MONDAY}).json()) == 1
        assert client.delete(f"/blocks/{block['block_id']}").status_code == 200
        assert client.get(_url(professional, "/blocks"), params={"block_date": MONDAY}).json() == []


class TestDayStart:
    def test_round_trip(self, client, professional):
        path = _url(professional, f"/day-start/{MONDAY}")
        assert client.get(path).json() == {"config_date": MONDAY, "start_time": None}

        assert client.put(path, json={"start_time": "09:30"}).json()["start_time"] == "09:30"
        assert client.get(path).json()["start_time"] == "09:30"

        assert client.put(path, json={"start_time": "10:00"}).json()["start_time"] == "10:00"
        assert client.get(path).json()["start_time"] == "10:00"

        assert client.put(path, json={"start_time": ""}).json()["start_time"] is None
        assert client.get(path).json()["start_time"] is None

    def test_delete_resets(self, client, professional):
        path = _url(professional, f"/day-start/{MONDAY}")
        client.put(path, json={"start_time": "09:30"})
        assert client.delete(path).status_code == 200
        assert client.get(path).json()["start_time"] is None

    def test_invalid_value_is_400(self, client, professional):
        response = client.put(_url(professional, f"/day-start/{MONDAY}"), json={"start_time": "25:00"})
        assert response.status_code == 400


class TestFreeSlots:
    def test_empty_weekday(self, client, professional):
        body = client.get(_url(professional, "/agenda/free-slots"), params={"date": MONDAY}).json()
        assert body["duration_minutes"] == 60
        assert body["granularity_minutes"] == 15
        assert body["free_slots"][0] == "08:00"
        assert body["free_slots"][-1] == "18:00"

    def test_reflects_stored_session_and_override(self, client, professional):
        client.post(
            _url(professional, "/sessions"),
            json={"client_name": "Carla", "session_date": SATURDAY, "session_time": "10:00"},
        )
        body = client.get(_url(professional, "/agenda/free-slots"), params={"date": SATURDAY}).json()
        assert body["free_slots"] == ["08:45", "11:15", "12:30", "13:45", "15:00"]

        client.put(_url(professional, f"/day-start/{MONDAY}"), json={"start_time": "09:30"})
        body = client.get(_url(professional, "/agenda/free-slots"), params={"date": MONDAY}).json()
        assert body["free_slots"][0] == "09:30"

    def test_cancelled_session_frees_the_time(self, client, professional):
        created = client.post(
            _url(professional, "/sessions"),
            json={"client_name": "Carla", "session_date": SATURDAY, "session_time": "10:00"},
        ).json()
        client.patch(f"/sessions/{created['session_id']}", json={"status": "cancelled_by_client"})

        body = client.get(_url(professional, "/agenda/free-slots"), params={"date": SATURDAY}).json()
        assert body["free_slots"][0] == "08:00"

    def test_duration_minutes_beats_code(self, client, professional):
        body = client.get(
            _url(professional, "/agenda/free-slots"),
            params={"date": MONDAY, "duration_code": "2h", "duration_minutes": 30},
        ).json()
        assert body["duration_minutes"] == 30

    def test_duration_code(self, client, professional):
        body = client.get(
            _url(professional, "/agenda/free-slots"),
            params={"date": MONDAY, "duration_code": "1h30"},
        ).json()
        assert body["duration_minutes"] == 90

    def test_full_day_block_empties_the_day(self, client, professional):
        client.post(_url(professional, "/blocks"), json={"block_date": MONDAY, "is_full_day": True})
        body = client.get(_url(professional, "/agenda/free-slots"), params={"date": MONDAY}).json()
        assert body["free_slots"] == []

    def test_sunday_is_empty(self, client, professional):
        body = client.get(_url(professional, "/agenda/free-slots"), params={"date": "2026-10-25"}).json()
        assert body["free_slots"] == []


class TestWeek:
    def test_six_days_from_monday(self, client, professional):
        body = client.get(_url(professional, "/agenda/week"), params={"start": "2026-10-22"}).json()
        assert body["week_start"] == MONDAY
        assert [d["date"] for d in body["days"]] == [
            "2026-10-19",
            "2026-10-20",
            "2026-10-21",
            "2026-10-22",
            "2026-10-23",
            "2026-10-24",
        ]

    def test_booked_and_free_times_combined(self, client, professional):
        created = client.post(
            _url(professional, "/sessions"),
            json={"client_name": "Carla", "session_date": SATURDAY, "session_time": "10:00"},
        ).json()
        client.put(_url(professional, f"/day-start/{MONDAY}"), json={"start_time": "09:30"})

        days = {d["date"]: d for d in client.get(_url(professional, "/agenda/week"), params={"start": MONDAY}).json()["days"]}

        saturday = days[SATURDAY]
        booked = [t for t in saturday["times"] if t["kind"] == "booked"]
        assert booked == [{"time": "10:00", "kind": "booked", "session_id": created["session_id"]}]
        assert [t["time"] for t in saturday["times"]] == ["08:45", "10:00", "11:15", "12:30", "13:45", "15:00"]

        assert days[MONDAY]["day_start"] == "09:30"
        assert days[MONDAY]["free_slots"][0] == "09:30"
