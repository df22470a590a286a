"""
Weight projection helpers used by the dashboard.

Every function here is a pure transformation over records that are already
loaded: weight entries expose ``recorded_at`` (datetime) and ``weight`` (kg),
daily logs expose ``log_date`` (date) and ``calories_consumed``. ``today`` is
always passed in so results are reproducible.

Insufficient data yields ``None`` rather than an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Sequence

from domain.enums import EstimationMethod, GoalType

KCAL_PER_KG = 7700.0

METHOD_LABELS = {
    EstimationMethod.TREND: "Trend (30d)",
    EstimationMethod.AVERAGE_INTAKE: "Avg Intake (7d)",
    EstimationMethod.FIXED_TARGET: "Fixed Goal",
}

LOGIC_DESCRIPTIONS = {
    EstimationMethod.TREND: "Based on 30-day Weight Trend",
    EstimationMethod.AVERAGE_INTAKE: "Based on 7-day Average Calorie Intake",
    EstimationMethod.FIXED_TARGET: "Based on Fixed Daily Calorie Amount",
}

WEIGHT_CHANGE_PERIODS = (7, 30, 90)


@dataclass
class DashboardSettings:
    """Everything the projection needs from the user profile"""

    daily_goal: int
    target_weight: float
    goal_type: GoalType
    maintenance_calories: int
    estimation_method: int = EstimationMethod.TREND
    enable_calories_burned: bool = True
    is_calorie_counting_enabled: bool = True
    kcal_per_kg: float = KCAL_PER_KG
    trend_window_days: int = 30
    intake_window_days: int = 7
    projection_days: int = 60

    @property
    def effective_method(self) -> EstimationMethod:
        # Without calorie data only the weight trend is meaningful
        if not self.is_calorie_counting_enabled:
            return EstimationMethod.TREND
        try:
            return EstimationMethod(int(self.estimation_method))
        except ValueError:
            return EstimationMethod.TREND


@dataclass
class ProjectionPoint:
    day: date
    weight: float
    method: str


@dataclass
class WeightChangeMetric:
    period: str
    value: Optional[float]


@dataclass
class DashboardMetrics:
    estimated_maintenance: Optional[int] = None
    days_remaining: Optional[int] = None
    kg_per_day: Optional[float] = None
    logic_description: str = ""
    progress_warning: str = ""
    projection_points: List[ProjectionPoint] = field(default_factory=list)
    weight_changes: List[WeightChangeMetric] = field(default_factory=list)


def _day(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def sort_weights_newest_first(weights: Iterable) -> list:
    return sorted(weights, key=lambda w: w.recorded_at, reverse=True)


def _window_weights(weights: Iterable, today: date, window_days: int) -> list:
    """Weights dated within the window, oldest first.

    The cutoff is a calendar day: every weigh-in on `today - window_days`
    counts, whatever its time of day.
    """
    cutoff = today - timedelta(days=window_days)
    recent = [w for w in weights if _day(w.recorded_at) >= cutoff]
    return sorted(recent, key=lambda w: w.recorded_at)


def _span(first, last) -> int:
    return (_day(last.recorded_at) - _day(first.recorded_at)).days


def estimate_maintenance(
    logs: Sequence,
    weights: Sequence,
    today: date,
    kcal_per_kg: float = KCAL_PER_KG,
    window_days: int = 30,
) -> Optional[int]:
    """Estimate maintenance calories from the weight change and intake over the window.

    Intake counts the logged days after the first weigh-in day, up to and
    including the last weigh-in day.

    Returns None when the window holds fewer than two weigh-ins, they fall on
    the same day, or no completed day with logged calories lies between them.
    """
    recent = _window_weights(weights, today, window_days)
    if len(recent) < 2:
        return None

    first, last = recent[0], recent[-1]
    days = _span(first, last)
    if days <= 0:
        return None

    first_day = _day(first.recorded_at)
    last_day = _day(last.recorded_at)
    relevant = [
        log
        for log in logs
        if first_day < log.log_date <= last_day
        and log.log_date < today
        and (log.calories_consumed or 0) > 0
    ]
    if not relevant:
        return None

    avg_intake = sum(log.calories_consumed for log in relevant) / len(relevant)
    daily_imbalance = (last.weight - first.weight) * kcal_per_kg / days
    return int(avg_intake - daily_imbalance)


def kg_change_per_day(
    method: int,
    weights: Sequence,
    logs: Sequence,
    maintenance_calories: int,
    daily_goal: int,
    today: date,
    kcal_per_kg: float = KCAL_PER_KG,
    trend_window_days: int = 30,
    intake_window_days: int = 7,
) -> Optional[float]:
    """Signed daily rate of weight change in kg for one estimation method."""
    if method == EstimationMethod.TREND:
        recent = _window_weights(weights, today, trend_window_days)
        if len(recent) < 2:
            return None
        span = _span(recent[0], recent[-1])
        if span <= 0:
            return None
        return (recent[-1].weight - recent[0].weight) / span

    if method == EstimationMethod.AVERAGE_INTAKE:
        start = today - timedelta(days=intake_window_days)
        recent_logs = [log for log in logs if start <= log.log_date < today]
        if not recent_logs:
            return None
        avg = sum(log.calories_consumed or 0 for log in recent_logs) / len(recent_logs)
        return (avg - maintenance_calories) / kcal_per_kg

    if method == EstimationMethod.FIXED_TARGET:
        return (daily_goal - maintenance_calories) / kcal_per_kg

    return None


def days_to_goal(
    current_weight: float,
    target_weight: float,
    kg_per_day: Optional[float],
    goal_type: GoalType,
) -> Optional[int]:
    """Days until target weight; None when the rate points away from the goal."""
    if kg_per_day is None or kg_per_day == 0:
        return None
    if goal_type == GoalType.CUTTING and kg_per_day >= 0:
        return None
    if goal_type == GoalType.BULKING and kg_per_day <= 0:
        return None

    days = (target_weight - current_weight) / kg_per_day
    return int(days) if days > 0 else None


def _rate_for(method: int, weights, logs, settings: DashboardSettings, today: date):
    return kg_change_per_day(
        method,
        weights,
        logs,
        settings.maintenance_calories,
        settings.daily_goal,
        today,
        kcal_per_kg=settings.kcal_per_kg,
        trend_window_days=settings.trend_window_days,
        intake_window_days=settings.intake_window_days,
    )


def calculate_days_remaining(
    weights: Sequence, logs: Sequence, settings: DashboardSettings, today: date
) -> Optional[int]:
    if not weights:
        return None
    current = sort_weights_newest_first(weights)[0].weight
    rate = _rate_for(settings.effective_method, weights, logs, settings, today)
    return days_to_goal(current, settings.target_weight, rate, settings.goal_type)


def generate_projections(
    weights: Sequence, logs: Sequence, settings: DashboardSettings, today: date
) -> List[ProjectionPoint]:
    """Linear series from today's weight for every method with a known rate."""
    if not weights:
        return []
    start_weight = sort_weights_newest_first(weights)[0].weight

    if settings.is_calorie_counting_enabled:
        methods = list(EstimationMethod)
    else:
        methods = [EstimationMethod.TREND]

    points: List[ProjectionPoint] = []
    for method in methods:
        rate = _rate_for(method, weights, logs, settings, today)
        if rate is None:
            continue
        label = METHOD_LABELS[method]
        points.append(ProjectionPoint(day=today, weight=start_weight, method=label))
        for i in range(1, settings.projection_days + 1):
            points.append(
                ProjectionPoint(
                    day=today + timedelta(days=i),
                    weight=start_weight + rate * i,
                    method=label,
                )
            )
    return points


def weight_changes(weights: Sequence, today: date) -> List[WeightChangeMetric]:
    """Change versus 7, 30 and 90 days ago and over all time.

    The reference is the newest weigh-in dated on or before the calendar day
    `today - period`. Short histories fall back to the oldest entry.
    """
    ordered = sort_weights_newest_first(weights)
    if not ordered:
        return []

    current = ordered[0].weight
    oldest = ordered[-1]
    metrics = []
    for days in WEIGHT_CHANGE_PERIODS:
        target = today - timedelta(days=days)
        past = next((w for w in ordered if _day(w.recorded_at) <= target), oldest)
        metrics.append(WeightChangeMetric(period=f"{days} Days", value=current - past.weight))

    metrics.append(WeightChangeMetric(period="All Time", value=current - oldest.weight))
    return metrics


def logic_description(method: int) -> str:
    try:
        return LOGIC_DESCRIPTIONS[EstimationMethod(int(method))]
    except ValueError:
        return ""


def progress_warning(settings: DashboardSettings, has_estimate: bool) -> str:
    """Static hint shown when no day count can be given."""
    if has_estimate:
        return ""

    cutting = settings.goal_type == GoalType.CUTTING
    method = settings.effective_method
    if method == EstimationMethod.TREND:
        return "Need more weight data over 30 days, or trend is moving away from goal."
    if method == EstimationMethod.AVERAGE_INTAKE:
        if cutting:
            return "Eat less than maintenance on average to see estimate"
        return "Eat more than maintenance on average to see estimate"
    if method == EstimationMethod.FIXED_TARGET:
        direction = "lower" if cutting else "higher"
        return (
            f"Your daily goal must be {direction} than your maintenance "
            f"({settings.maintenance_calories})"
        )
    return ""


def recommended_daily_goal(
    goal_type: GoalType,
    maintenance_calories: int,
    current_weight: Optional[float],
    target_weight: float,
    target_date: date,
    today: date,
    kcal_per_kg: float = KCAL_PER_KG,
) -> Optional[int]:
    """Calorie goal that reaches target_weight by target_date."""
    if goal_type == GoalType.MAINTENANCE:
        return maintenance_calories
    if current_weight is None:
        return None

    diff = target_weight - current_weight
    if (goal_type == GoalType.CUTTING and diff > 0) or (
        goal_type == GoalType.BULKING and diff < 0
    ):
        return None

    days = (target_date - today).days
    if days <= 0:
        return None
    return maintenance_calories + int(diff * kcal_per_kg / days)


def compute_metrics(
    logs: Sequence, weights: Sequence, settings: DashboardSettings, today: date
) -> DashboardMetrics:
    """Run every dashboard calculation for one user."""
    method = settings.effective_method
    metrics = DashboardMetrics(logic_description=logic_description(method))

    if settings.is_calorie_counting_enabled:
        metrics.estimated_maintenance = estimate_maintenance(
            logs,
            weights,
            today,
            kcal_per_kg=settings.kcal_per_kg,
            window_days=settings.trend_window_days,
        )

    metrics.kg_per_day = _rate_for(method, weights, logs, settings, today)
    metrics.days_remaining = calculate_days_remaining(weights, logs, settings, today)
    metrics.progress_warning = progress_warning(
        settings, metrics.days_remaining is not None
    )
    metrics.projection_points = generate_projections(weights, logs, settings, today)
    metrics.weight_changes = weight_changes(weights, today)
    return metrics
