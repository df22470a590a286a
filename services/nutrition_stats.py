"""
Nutrition aggregations over daily logs.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from domain.enums import NutritionMetric


@dataclass
class MonthlyAverage:
    month: date  # first day of the month
    value: float


def metric_value(log, metric: NutritionMetric) -> float:
    if metric == NutritionMetric.CALORIES:
        return float(log.calories_consumed or 0)
    return float(getattr(log, metric.value) or 0)


def monthly_averages(logs: Sequence, metric: NutritionMetric) -> List[MonthlyAverage]:
    """Average per calendar month, ignoring days where the metric is zero or missing."""
    by_month = defaultdict(list)
    for log in logs:
        by_month[(log.log_date.year, log.log_date.month)].append(metric_value(log, metric))

    results = []
    for (year, month), values in by_month.items():
        valid = [v for v in values if v > 0]
        if not valid:
            continue
        results.append(MonthlyAverage(month=date(year, month, 1), value=sum(valid) / len(valid)))
    return sorted(results, key=lambda m: m.month)


def calories_left(
    logs: Sequence, daily_goal: int, today: date, include_burned: bool = True
) -> Optional[int]:
    """Remaining calories for today; None when nothing is logged yet."""
    log = next((l for l in logs if l.log_date == today), None)
    if log is None:
        return None
    burned = (log.calories_burned or 0) if include_burned else 0
    return daily_goal + burned - (log.calories_consumed or 0)
