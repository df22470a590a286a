"""
Error handling and edge case tests through the HTTP layer.

These tests run against the real (in-memory SQLite) database so the full
path from route to repository is covered:
- Error envelope shape for every service error type
- Not found and ownership checks
- Duplicate entries
- Health data authorization
- Boundary validation
"""

import uuid
from datetime import date, timedelta

import pytest
from sqlalchemy.orm import Session

from test_fixtures import client, db_session, unique_email


def create_user(name="Emma Johnson"):
    r = client.post("/users", json={"email": unique_email("emma"), "full_name": name})
    assert r.status_code == 201
    return r.json()["user_id"]


def assert_error(response, status_code, code):
    assert response.status_code == status_code
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == code
    assert body["error"]["message"]
    assert "timestamp" in body


# =============================================================================
# USERS
# =============================================================================


def test_duplicate_email_is_conflict(db_session: Session):
    email = unique_email("dup")
    assert client.post("/users", json={"email": email}).status_code == 201
    r = client.post("/users", json={"email": email.upper()})
    assert_error(r, 409, "CONFLICT")


def test_unknown_user_is_not_found(db_session: Session):
    assert_error(client.get(f"/users/{uuid.uuid4()}"), 404, "NOT_FOUND")
    assert_error(client.get(f"/dashboard/{uuid.uuid4()}"), 404, "NOT_FOUND")
    assert_error(client.post(f"/logs/{uuid.uuid4()}", json={"calories": 100}), 404, "NOT_FOUND")


def test_malformed_uuid_is_validation_error(db_session: Session):
    assert_error(client.get("/users/not-a-uuid"), 422, "VALIDATION_ERROR")


def test_unknown_route_uses_envelope(db_session: Session):
    assert_error(client.get("/nope"), 404, "HTTP_404")


def test_delete_user_removes_everything(db_session: Session):
    user_id = create_user()
    client.post(f"/logs/{user_id}", json={"calories": 500})
    client.post(f"/weights/{user_id}", json={"weight": 70})

    assert client.delete(f"/users/{user_id}").status_code == 200
    assert_error(client.get(f"/users/{user_id}"), 404, "NOT_FOUND")
    assert_error(client.delete(f"/users/{user_id}"), 404, "NOT_FOUND")


# =============================================================================
# PROFILE
# =============================================================================


def test_unknown_dashboard_card_rejected(db_session: Session):
    user_id = create_user()
    r = client.patch(f"/users/{user_id}/profile", json={"dashboard_layout": ["projection", "horoscope"]})
    assert_error(r, 400, "SERVICE_VALIDATION_ERROR")
    assert "allowed" in r.json()["error"]["details"]


def test_unknown_tutorial_section(db_session: Session):
    user_id = create_user()
    r = client.get(f"/users/{user_id}/profile/tutorial/settings")
    assert_error(r, 404, "NOT_FOUND")


def test_goal_change_via_api_records_phases(db_session: Session):
    user_id = create_user()
    client.post(f"/weights/{user_id}", json={"weight": 80})
    r = client.put(
        f"/users/{user_id}/profile/goals",
        json={
            "goal_type": "Maintenance",
            "target_weight": 80,
            "maintenance_calories": 2500,
            "daily_calorie_goal": 2500,
        },
    )
    assert r.status_code == 200

    periods = client.get(f"/goals/{user_id}/periods").json()
    assert sorted(p["goal_type"] for p in periods) == ["Cutting", "Maintenance"]


def test_goal_settings_bounds(db_session: Session):
    user_id = create_user()
    r = client.put(
        f"/users/{user_id}/profile/goals",
        json={
            "goal_type": "Cutting",
            "target_weight": 0,
            "maintenance_calories": 2500,
            "daily_calorie_goal": 2000,
        },
    )
    assert_error(r, 422, "VALIDATION_ERROR")


# =============================================================================
# LOGS AND WEIGHTS
# =============================================================================


def test_reversed_log_range(db_session: Session):
    user_id = create_user()
    r = client.get(f"/logs/{user_id}", params={"start_date": "2026-03-31", "end_date": "2026-03-01"})
    assert_error(r, 400, "SERVICE_VALIDATION_ERROR")


def test_overrides_need_existing_log(db_session: Session):
    user_id = create_user()
    r = client.patch(f"/logs/{user_id}/2026-03-31/overrides", json={"manual_calories": 100})
    assert_error(r, 404, "NOT_FOUND")


def test_log_add_and_set_over_http(db_session: Session):
    user_id = create_user()
    today = date.today().isoformat()
    client.post(f"/logs/{user_id}", json={"log_date": today, "calories": 400})
    client.post(f"/logs/{user_id}", json={"log_date": today, "calories": 600})
    assert client.get(f"/logs/{user_id}/{today}").json()["calories_consumed"] == 1000

    client.post(f"/logs/{user_id}", json={"log_date": today, "calories": 1500, "mode": "set"})
    assert client.get(f"/logs/{user_id}/{today}").json()["calories_consumed"] == 1500


def test_weight_of_other_user_not_found(db_session: Session):
    owner = create_user("Michael Chen")
    other = create_user("Emma Johnson")
    weight_id = client.post(f"/weights/{owner}", json={"weight": 80}).json()["weight_id"]

    assert_error(client.get(f"/weights/{other}/{weight_id}"), 404, "NOT_FOUND")
    assert client.get(f"/weights/{owner}/{weight_id}").status_code == 200


def test_weight_listing_by_range(db_session: Session):
    user_id = create_user()
    old = (date.today() - timedelta(days=40)).isoformat() + "T08:00:00"
    client.post(f"/weights/{user_id}", json={"weight": 82, "recorded_at": old})
    client.post(f"/weights/{user_id}", json={"weight": 80})

    recent = client.get(f"/weights/{user_id}", params={"time_range": "30 Days"}).json()
    assert [w["weight"] for w in recent] == [80.0]
    assert len(client.get(f"/weights/{user_id}").json()) == 2


# =============================================================================
# WORKOUT LIBRARY
# =============================================================================


def test_duplicate_exercise_conflict(db_session: Session):
    user_id = create_user()
    client.post(f"/exercises/{user_id}/defaults")
    r = client.post(f"/exercises/{user_id}", json={"name": "deadlift"})
    assert_error(r, 409, "CONFLICT")


def test_imperial_workout_sets_stored_metric(db_session: Session):
    user_id = create_user("Michael Chen")
    client.patch(f"/users/{user_id}/profile", json={"unit_system": "imperial"})

    r = client.post(
        f"/workouts/{user_id}",
        json={
            "category": "Push",
            "exercises": [
                {"name": "Barbell Bench Press", "reps": 5, "weight": 225},
                {"name": "Running", "duration": 25, "distance": 5, "distance_unit": "km", "is_cardio": True},
            ],
        },
    )
    assert r.status_code == 201
    bench, run = r.json()["exercises"]
    assert bench["weight"] == pytest.approx(102.06, abs=0.01)
    assert bench["display_weight"] == pytest.approx(225.0)
    assert bench["weight_unit"] == "lbs"
    assert run["distance"] == pytest.approx(5.0)
    assert run["display_distance"] == pytest.approx(3.11)
    assert run["distance_unit"] == "mi"

    listed = client.get(f"/workouts/{user_id}").json()
    assert listed[0]["exercises"][0]["display_weight"] == pytest.approx(225.0)


def test_template_of_other_user_not_found(db_session: Session):
    owner = create_user("Michael Chen")
    other = create_user("Emma Johnson")
    template_id = client.post(
        f"/templates/{owner}",
        json={"name": "Legs A", "category": "Legs", "exercises": [{"name": "Back Squat", "reps": 5, "weight": 120}]},
    ).json()["template_id"]

    r = client.post(f"/templates/{other}/{template_id}/start", json={})
    assert_error(r, 404, "NOT_FOUND")


# =============================================================================
# HEALTH SYNC
# =============================================================================


def test_health_totals_refused_when_sync_disabled(db_session: Session):
    user_id = create_user()
    client.patch(f"/users/{user_id}/profile", json={"enable_health_sync": False})

    r = client.get(
        f"/health-sync/{user_id}/totals",
        params={"start": "2026-03-31T00:00:00", "end": "2026-04-01T00:00:00"},
    )
    assert_error(r, 401, "UNAUTHORIZED")


def test_health_push_and_apply(db_session: Session):
    user_id = create_user()
    day = date.today().isoformat()
    r = client.post(
        "/health-sync/samples",
        json={
            "user_id": user_id,
            "samples": [
                {"metric": "dietary_energy", "value": 1900, "recorded_at": f"{day}T12:30:00"},
                {"metric": "active_energy", "value": 320, "recorded_at": f"{day}T18:00:00"},
            ],
        },
    )
    assert r.status_code == 201
    assert r.json()["stored"] == 2

    log = client.post(f"/health-sync/{user_id}/apply", json={"log_date": day}).json()
    assert log["calories_consumed"] == 1900
    assert log["calories_burned"] == 320
    assert log["net_calories"] == 1580


def test_health_totals_reversed_range(db_session: Session):
    user_id = create_user()
    r = client.get(
        f"/health-sync/{user_id}/totals",
        params={"start": "2026-04-01T00:00:00", "end": "2026-03-31T00:00:00"},
    )
    assert_error(r, 400, "SERVICE_VALIDATION_ERROR")


def test_unknown_health_metric(db_session: Session):
    r = client.post(
        "/health-sync/samples",
        json={"user_id": str(uuid.uuid4()), "samples": [{"metric": "steps", "value": 9000}]},
    )
    assert_error(r, 422, "VALIDATION_ERROR")
