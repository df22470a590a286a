"""
Repository tests against a real (in-memory SQLite) database session.
"""

import uuid
from datetime import date, datetime, timedelta

import pytest
from sqlalchemy.orm import Session

from test_fixtures import db_session, unique_email
from app.exceptions import ConflictError
from domain.enums import GoalType, HealthMetric
from domain.models import (
    DailyLog,
    WeightEntry,
    WeightPhoto,
    Workout,
    ExerciseEntry,
    ExerciseDefinition,
    GoalPeriod,
    HealthSample,
)
from repositories import (
    UserRepository,
    UserProfileRepository,
    DailyLogRepository,
    WeightRepository,
    WorkoutRepository,
    ExerciseDefinitionRepository,
    GoalPeriodRepository,
    HealthSampleRepository,
)


def _user(db: Session):
    return UserRepository(db).create_user(unique_email("repo"), "Repo User")


# =============================================================================
# USERS AND PROFILES
# =============================================================================


def test_create_user_with_default_profile(db_session: Session):
    user = _user(db_session)

    assert user.user_id is not None
    assert user.profile is not None
    assert user.profile.daily_calorie_goal == 2000
    assert user.profile.goal_type == GoalType.CUTTING
    assert user.profile.tracked_muscle_list[:2] == ["Chest", "Back"]


def test_duplicate_email_conflicts(db_session: Session):
    email = unique_email("dup")
    UserRepository(db_session).create_user(email)
    with pytest.raises(ConflictError):
        UserRepository(db_session).create_user(email.upper())


def test_get_by_email_is_case_insensitive(db_session: Session):
    user = _user(db_session)
    found = UserRepository(db_session).get_by_email(user.email.upper())
    assert found.user_id == user.user_id


def test_delete_user_cascades(db_session: Session):
    user = _user(db_session)
    db_session.add(DailyLog(user_id=user.user_id, log_date=date.today(), calories_consumed=100))
    db_session.commit()

    assert UserRepository(db_session).delete_user(user.user_id) is True
    assert db_session.query(DailyLog).count() == 0
    assert UserProfileRepository(db_session).get_by_id(user.user_id) is None


def test_profile_get_or_create(db_session: Session):
    user = _user(db_session)
    repo = UserProfileRepository(db_session)
    assert repo.get_or_create(user.user_id) is user.profile


def test_custom_muscles_ignore_case(db_session: Session):
    profile = _user(db_session).profile
    assert profile.add_custom_muscle("Forearms") is True
    assert profile.add_custom_muscle("forearms") is False
    assert profile.add_custom_muscle("  ") is False
    assert profile.custom_muscle_list == ["Forearms"]


# =============================================================================
# LOGS, WEIGHTS, WORKOUTS
# =============================================================================


def test_daily_log_range_and_order(db_session: Session):
    user = _user(db_session)
    today = date.today()
    for offset in range(5):
        db_session.add(
            DailyLog(user_id=user.user_id, log_date=today - timedelta(days=offset), calories_consumed=2000)
        )
    db_session.commit()

    repo = DailyLogRepository(db_session)
    logs = repo.get_by_user_id(user.user_id, start_date=today - timedelta(days=2))
    assert [l.log_date for l in logs] == [today - timedelta(days=d) for d in range(3)]
    assert repo.get_by_date(user.user_id, today).net_calories == 2000


def test_weights_newest_first_with_photos(db_session: Session):
    user = _user(db_session)
    now = datetime.now()
    older = WeightEntry(user_id=user.user_id, recorded_at=now - timedelta(days=3), weight=81.0)
    newer = WeightEntry(user_id=user.user_id, recorded_at=now, weight=80.2)
    newer.photos.append(WeightPhoto(content_type="image/png", image_data=b"\x89PNG"))
    db_session.add_all([older, newer])
    db_session.commit()

    repo = WeightRepository(db_session)
    entries = repo.get_by_user_id(user.user_id, with_photos=True)
    assert [e.weight for e in entries] == [80.2, 81.0]
    assert len(entries[0].photos) == 1
    assert repo.get_latest(user.user_id).weight == 80.2
    assert repo.get_photo(newer.weight_id, entries[0].photos[0].photo_id) is not None
    assert repo.get_for_user(uuid.uuid4(), newer.weight_id) is None


def test_workout_exercises_kept_in_order(db_session: Session):
    user = _user(db_session)
    workout = Workout(
        user_id=user.user_id,
        workout_date=date.today(),
        category="Legs",
        muscle_groups=["Legs"],
        exercises=[
            ExerciseEntry(position=1, name="Leg Press", reps=10, weight=150.0),
            ExerciseEntry(position=0, name="Back Squat", reps=5, weight=120.0),
        ],
    )
    WorkoutRepository(db_session).create(workout)
    db_session.expire_all()

    loaded = WorkoutRepository(db_session).get_for_user(user.user_id, workout.workout_id)
    assert [e.name for e in loaded.exercises] == ["Back Squat", "Leg Press"]


def test_exercise_definition_lookup_by_name(db_session: Session):
    user = _user(db_session)
    db_session.add(ExerciseDefinition(user_id=user.user_id, name="Pull Up", muscle_groups=["Back"]))
    db_session.commit()

    repo = ExerciseDefinitionRepository(db_session)
    assert repo.get_by_name(user.user_id, "pull up").muscle_groups == ["Back"]
    assert repo.get_by_name(user.user_id, "Chin Up") is None


# =============================================================================
# GOAL PERIODS AND HEALTH SAMPLES
# =============================================================================


def test_open_goal_period(db_session: Session):
    user = _user(db_session)
    db_session.add_all(
        [
            GoalPeriod(
                user_id=user.user_id,
                goal_type=GoalType.BULKING,
                start_date=date(2025, 9, 1),
                end_date=date(2026, 1, 1),
            ),
            GoalPeriod(user_id=user.user_id, goal_type=GoalType.CUTTING, start_date=date(2026, 1, 1)),
        ]
    )
    db_session.commit()

    repo = GoalPeriodRepository(db_session)
    assert repo.get_open(user.user_id).goal_type == GoalType.CUTTING
    assert [p.goal_type for p in repo.get_by_user_id(user.user_id)] == [
        GoalType.CUTTING,
        GoalType.BULKING,
    ]


def test_health_samples_summed_per_metric(db_session: Session):
    user = _user(db_session)
    start = datetime(2026, 3, 30)
    repo = HealthSampleRepository(db_session)
    repo.add_many(
        [
            HealthSample(user_id=user.user_id, metric=HealthMetric.DIETARY_ENERGY, value=600, recorded_at=start + timedelta(hours=8)),
            HealthSample(user_id=user.user_id, metric=HealthMetric.DIETARY_ENERGY, value=900, recorded_at=start + timedelta(hours=13)),
            HealthSample(user_id=user.user_id, metric=HealthMetric.ACTIVE_ENERGY, value=350, recorded_at=start + timedelta(hours=18)),
            HealthSample(user_id=user.user_id, metric=HealthMetric.DIETARY_ENERGY, value=700, recorded_at=start + timedelta(days=1, hours=8)),
        ]
    )
    db_session.commit()

    sums = repo.sum_by_metric(user.user_id, start, start + timedelta(days=1))
    assert sums == {HealthMetric.DIETARY_ENERGY: 1500.0, HealthMetric.ACTIVE_ENERGY: 350.0}
