"""Test price assessment bands and suggested price"""
import math

import pytest

from src.models import MonthRecord, PriceAssessment, round_half_up
from src.pricer import (
    assessment_color,
    assessment_label,
    classify_price,
    compute_price_to_revenue_ratio,
    compute_suggested_price,
)
from src.projector import first_crossing


@pytest.mark.parametrize("ratio,expected", [
    (0.0, PriceAssessment.EXCELLENT),
    (0.29, PriceAssessment.EXCELLENT),
    (0.3, PriceAssessment.GOOD),
    (0.49, PriceAssessment.GOOD),
    (0.5, PriceAssessment.NORMAL),
    (0.8, PriceAssessment.HIGH),
    (1.19, PriceAssessment.HIGH),
    (1.2, PriceAssessment.VERY_HIGH),
    (math.inf, PriceAssessment.VERY_HIGH),
])
def test_price_bands_use_strict_upper_bound(ratio, expected):
    assert classify_price(ratio) == expected


def test_price_to_revenue_ratio_guards():
    assert compute_price_to_revenue_ratio(50000, 100000) == 0.5
    assert compute_price_to_revenue_ratio(0, 100000) == 0.0
    assert compute_price_to_revenue_ratio(0, 0) == 0.0
    assert math.isinf(compute_price_to_revenue_ratio(50000, 0))


def make_months(n, step=1000):
    return [
        MonthRecord(month=i, multiplier=1.0, streams=0, revenue=step,
                    cumulative_revenue=i * step, investment=0, profit=i * step)
        for i in range(1, n + 1)
    ]


def test_suggested_price_uses_month_33():
    months = make_months(36)
    assert compute_suggested_price(months, 36000.0) == 26400  # 33,000 * 0.8


def test_suggested_price_short_series_uses_final():
    months = make_months(10)
    assert compute_suggested_price(months, 10000.4) == 8000


def test_labels_and_colors():
    assert assessment_label(PriceAssessment.NORMAL) == "Fair Price"
    assert assessment_label(PriceAssessment.VERY_HIGH) == "Very High Price"
    assert assessment_color(PriceAssessment.EXCELLENT) == "#22c55e"
    assert assessment_label(None) == "Unknown"
    assert assessment_color(None) == "#6b7280"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(0.49) == 0
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3


def test_first_crossing_is_single_assignment():
    assert first_crossing(3, 100.0, 50.0, None) == 3
    assert first_crossing(4, 10.0, 50.0, None) is None
    # Once set, later months never overwrite it, even below threshold
    assert first_crossing(5, 10.0, 50.0, 3) == 3
    assert first_crossing(6, 200.0, 50.0, 3) == 3


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
