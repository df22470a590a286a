"""
Tests for the weight projection helpers.

All calculations are pure, so records are SimpleNamespace stand-ins and
`today` is pinned.
"""

from datetime import date, timedelta

import pytest

from test_fixtures import make_log, make_weight
from domain.enums import EstimationMethod, GoalType
from services import projection
from services.projection import DashboardSettings

TODAY = date(2026, 3, 31)


def weights_losing():
    """82 kg sixteen days ago down to 80 kg today: -0.125 kg/day"""
    return [
        make_weight(80.0, days_ago=0, today=TODAY),
        make_weight(82.0, days_ago=16, today=TODAY),
        make_weight(81.0, days_ago=8, today=TODAY),
    ]


def logs_between(days_back_start, days_back_end, calories):
    return [
        make_log(log_date=TODAY - timedelta(days=d), calories_consumed=calories)
        for d in range(days_back_end, days_back_start + 1)
    ]


def dash(**overrides):
    values = dict(
        daily_goal=2000,
        target_weight=70.0,
        goal_type=GoalType.CUTTING,
        maintenance_calories=2500,
    )
    values.update(overrides)
    return DashboardSettings(**values)


# =============================================================================
# MAINTENANCE ESTIMATE
# =============================================================================


def test_estimate_maintenance_from_trend_and_intake():
    logs = logs_between(16, 1, 2000)
    # 2000 kcal average while losing 2 kg over 16 days: 2000 + 2*7700/16
    assert projection.estimate_maintenance(logs, weights_losing(), TODAY) == 2962


def test_estimate_maintenance_needs_two_weights_in_window():
    weights = [
        make_weight(80.0, days_ago=0, today=TODAY),
        make_weight(85.0, days_ago=45, today=TODAY),
    ]
    logs = logs_between(20, 1, 2000)
    assert projection.estimate_maintenance(logs, weights, TODAY) is None


def test_estimate_maintenance_same_day_weights_unknown():
    weights = [
        make_weight(80.0, days_ago=3, today=TODAY),
        make_weight(80.4, days_ago=3, today=TODAY),
    ]
    assert projection.estimate_maintenance(logs_between(5, 1, 2000), weights, TODAY) is None


def test_estimate_maintenance_ignores_today_and_empty_days():
    logs = [
        make_log(log_date=TODAY, calories_consumed=5000),
        make_log(log_date=TODAY - timedelta(days=2), calories_consumed=0),
    ]
    assert projection.estimate_maintenance(logs, weights_losing(), TODAY) is None


def test_estimate_maintenance_skips_first_weigh_in_day():
    weights = [
        make_weight(80.0, days_ago=0, today=TODAY),
        make_weight(80.0, days_ago=4, today=TODAY),
    ]
    logs = [
        make_log(log_date=TODAY - timedelta(days=4), calories_consumed=2300),
        make_log(log_date=TODAY - timedelta(days=2), calories_consumed=2500),
    ]
    assert projection.estimate_maintenance(logs, weights, TODAY) == 2500


def test_estimate_maintenance_unknown_with_only_first_day_logged():
    weights = [
        make_weight(80.0, days_ago=0, today=TODAY),
        make_weight(80.0, days_ago=4, today=TODAY),
    ]
    logs = [make_log(log_date=TODAY - timedelta(days=4), calories_consumed=2300)]
    assert projection.estimate_maintenance(logs, weights, TODAY) is None


def test_window_cutoff_is_calendar_day():
    weights = [
        make_weight(80.0, days_ago=0, today=TODAY),
        make_weight(83.0, days_ago=30, today=TODAY),
        make_weight(90.0, days_ago=31, today=TODAY),
    ]
    rate = projection.kg_change_per_day(
        EstimationMethod.TREND, weights, [], 2500, 2000, TODAY
    )
    assert rate == pytest.approx(-0.1)


# =============================================================================
# DAILY RATE
# =============================================================================


def test_trend_rate():
    rate = projection.kg_change_per_day(
        EstimationMethod.TREND, weights_losing(), [], 2500, 2000, TODAY
    )
    assert rate == pytest.approx(-0.125)


def test_trend_rate_unknown_with_single_weight():
    rate = projection.kg_change_per_day(
        EstimationMethod.TREND, [make_weight(80.0, today=TODAY)], [], 2500, 2000, TODAY
    )
    assert rate is None


def test_average_intake_rate_uses_last_seven_days_only():
    logs = logs_between(7, 1, 2000) + [
        make_log(log_date=TODAY, calories_consumed=9000),
        make_log(log_date=TODAY - timedelta(days=10), calories_consumed=9000),
    ]
    rate = projection.kg_change_per_day(
        EstimationMethod.AVERAGE_INTAKE, [], logs, 2500, 2000, TODAY
    )
    assert rate == pytest.approx(-500 / 7700)


def test_average_intake_rate_unknown_without_logs():
    rate = projection.kg_change_per_day(
        EstimationMethod.AVERAGE_INTAKE, [], [], 2500, 2000, TODAY
    )
    assert rate is None


def test_fixed_target_rate():
    rate = projection.kg_change_per_day(
        EstimationMethod.FIXED_TARGET, [], [], 2500, 3000, TODAY
    )
    assert rate == pytest.approx(500 / 7700)


# =============================================================================
# DAYS REMAINING
# =============================================================================


def test_days_remaining_for_trend():
    assert projection.calculate_days_remaining(weights_losing(), [], dash(), TODAY) == 80


def test_cutting_with_non_negative_rate_has_no_estimate():
    assert projection.days_to_goal(80.0, 70.0, 0.1, GoalType.CUTTING) is None
    assert projection.days_to_goal(80.0, 70.0, 0.0, GoalType.CUTTING) is None

    gaining = [
        make_weight(80.0, days_ago=10, today=TODAY),
        make_weight(81.0, days_ago=0, today=TODAY),
    ]
    assert projection.calculate_days_remaining(gaining, [], dash(), TODAY) is None


def test_bulking_needs_positive_rate():
    assert projection.days_to_goal(70.0, 75.0, -0.1, GoalType.BULKING) is None
    assert projection.days_to_goal(70.0, 75.0, 0.25, GoalType.BULKING) == 20


def test_maintenance_is_not_rejected_on_sign():
    assert projection.days_to_goal(72.0, 70.0, -0.5, GoalType.MAINTENANCE) == 4


def test_days_remaining_already_past_target():
    assert projection.days_to_goal(68.0, 70.0, -0.5, GoalType.CUTTING) is None


def test_days_remaining_without_weights():
    assert projection.calculate_days_remaining([], [], dash(), TODAY) is None


# =============================================================================
# PROJECTIONS
# =============================================================================


def test_projection_series_for_every_known_method():
    logs = logs_between(7, 1, 2000)
    points = projection.generate_projections(weights_losing(), logs, dash(), TODAY)

    labels = {p.method for p in points}
    assert labels == {"Trend (30d)", "Avg Intake (7d)", "Fixed Goal"}

    trend = [p for p in points if p.method == "Trend (30d)"]
    assert len(trend) == 61
    assert trend[0].day == TODAY
    assert trend[0].weight == 80.0
    assert trend[-1].day == TODAY + timedelta(days=60)
    assert trend[-1].weight == pytest.approx(72.5)


def test_projection_skips_methods_without_rate():
    points = projection.generate_projections(weights_losing(), [], dash(), TODAY)
    assert {p.method for p in points} == {"Trend (30d)", "Fixed Goal"}


def test_projection_only_trend_when_counting_disabled():
    settings = dash(is_calorie_counting_enabled=False, estimation_method=2)
    assert settings.effective_method == EstimationMethod.TREND

    points = projection.generate_projections(weights_losing(), [], settings, TODAY)
    assert {p.method for p in points} == {"Trend (30d)"}


def test_projection_empty_without_weights():
    assert projection.generate_projections([], [], dash(), TODAY) == []


# =============================================================================
# WEIGHT CHANGE, DESCRIPTIONS AND WARNINGS
# =============================================================================


def test_weight_changes_fall_back_to_oldest_entry():
    changes = {c.period: c.value for c in projection.weight_changes(weights_losing(), TODAY)}
    assert changes == {
        "7 Days": pytest.approx(-1.0),
        "30 Days": pytest.approx(-2.0),
        "90 Days": pytest.approx(-2.0),
        "All Time": pytest.approx(-2.0),
    }


def test_weight_changes_empty_without_weights():
    assert projection.weight_changes([], TODAY) == []


def test_weight_changes_reference_on_boundary_day():
    weights = [
        make_weight(80.0, days_ago=0, today=TODAY),
        make_weight(80.5, days_ago=7, today=TODAY),
        make_weight(82.0, days_ago=8, today=TODAY),
    ]
    changes = {c.period: c.value for c in projection.weight_changes(weights, TODAY)}
    assert changes["7 Days"] == pytest.approx(-0.5)


def test_logic_descriptions():
    assert projection.logic_description(0) == "Based on 30-day Weight Trend"
    assert projection.logic_description(1) == "Based on 7-day Average Calorie Intake"
    assert projection.logic_description(2) == "Based on Fixed Daily Calorie Amount"


@pytest.mark.parametrize(
    "method,goal,expected",
    [
        (0, GoalType.CUTTING, "Need more weight data over 30 days, or trend is moving away from goal."),
        (1, GoalType.CUTTING, "Eat less than maintenance on average to see estimate"),
        (1, GoalType.BULKING, "Eat more than maintenance on average to see estimate"),
        (2, GoalType.CUTTING, "Your daily goal must be lower than your maintenance (2500)"),
        (2, GoalType.BULKING, "Your daily goal must be higher than your maintenance (2500)"),
    ],
)
def test_progress_warnings(method, goal, expected):
    settings = dash(estimation_method=method, goal_type=goal)
    assert projection.progress_warning(settings, has_estimate=False) == expected
    assert projection.progress_warning(settings, has_estimate=True) == ""


# =============================================================================
# RECOMMENDED GOAL AND FULL METRICS
# =============================================================================


def test_recommended_goal_for_cut():
    goal = projection.recommended_daily_goal(
        GoalType.CUTTING, 2500, 80.0, 75.0, TODAY + timedelta(days=50), TODAY
    )
    assert goal == 1730


def test_recommended_goal_maintenance_equals_maintenance():
    goal = projection.recommended_daily_goal(
        GoalType.MAINTENANCE, 2400, None, 75.0, TODAY, TODAY
    )
    assert goal == 2400


def test_recommended_goal_rejects_conflicts():
    future = TODAY + timedelta(days=30)
    assert projection.recommended_daily_goal(GoalType.CUTTING, 2500, 70.0, 75.0, future, TODAY) is None
    assert projection.recommended_daily_goal(GoalType.BULKING, 2500, 80.0, 75.0, future, TODAY) is None
    assert projection.recommended_daily_goal(GoalType.CUTTING, 2500, 80.0, 75.0, TODAY, TODAY) is None
    assert projection.recommended_daily_goal(GoalType.CUTTING, 2500, None, 75.0, future, TODAY) is None


def test_compute_metrics_combines_everything():
    logs = logs_between(16, 1, 2000)
    metrics = projection.compute_metrics(logs, weights_losing(), dash(), TODAY)

    assert metrics.estimated_maintenance == 2962
    assert metrics.kg_per_day == pytest.approx(-0.125)
    assert metrics.days_remaining == 80
    assert metrics.progress_warning == ""
    assert metrics.logic_description == "Based on 30-day Weight Trend"
    assert len(metrics.weight_changes) == 4


def test_compute_metrics_without_counting_hides_maintenance():
    settings = dash(is_calorie_counting_enabled=False)
    metrics = projection.compute_metrics(logs_between(16, 1, 2000), weights_losing(), settings, TODAY)
    assert metrics.estimated_maintenance is None
    assert metrics.days_remaining == 80
