"""
Tests for monthly nutrition averages and calories left today.
"""

from datetime import date

import pytest

from test_fixtures import make_log
from domain.enums import NutritionMetric
from services import nutrition_stats


def test_monthly_average_excludes_zero_days():
    logs = [
        make_log(log_date=date(2026, 1, 5), calories_consumed=2000),
        make_log(log_date=date(2026, 1, 6), calories_consumed=0),
        make_log(log_date=date(2026, 1, 7), calories_consumed=2400),
    ]
    months = nutrition_stats.monthly_averages(logs, NutritionMetric.CALORIES)
    assert len(months) == 1
    assert months[0].month == date(2026, 1, 1)
    assert months[0].value == pytest.approx(2200)


def test_months_without_valid_days_are_omitted_and_sorted():
    logs = [
        make_log(log_date=date(2026, 3, 1), protein=140),
        make_log(log_date=date(2026, 2, 1), protein=0),
        make_log(log_date=date(2025, 12, 31), protein=None),
        make_log(log_date=date(2026, 1, 15), protein=120),
        make_log(log_date=date(2026, 1, 16), protein=160),
    ]
    months = nutrition_stats.monthly_averages(logs, NutritionMetric.PROTEIN)
    assert [(m.month, m.value) for m in months] == [
        (date(2026, 1, 1), pytest.approx(140)),
        (date(2026, 3, 1), pytest.approx(140)),
    ]


def test_metric_units():
    assert NutritionMetric.CALORIES.unit == "kcal"
    assert NutritionMetric.FAT.unit == "g"


def test_calories_left_counts_burned_when_enabled():
    today = date(2026, 3, 31)
    logs = [make_log(log_date=today, calories_consumed=1500, calories_burned=300)]

    assert nutrition_stats.calories_left(logs, 2000, today) == 800
    assert nutrition_stats.calories_left(logs, 2000, today, include_burned=False) == 500


def test_calories_left_unknown_without_todays_log():
    logs = [make_log(log_date=date(2026, 3, 30))]
    assert nutrition_stats.calories_left(logs, 2000, date(2026, 3, 31)) is None
