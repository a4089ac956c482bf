"""
Fair-price assessment for a track investment.

Compares the asking price with the expected revenue at the current
run-rate and suggests a price the buyer can recoup within the target
window while keeping a safety margin.
"""

import math
from typing import List, Optional

from ..config import EngineSettings, settings
from ..models import MonthRecord, PriceAssessment, round_half_up


# (upper bound, band), strict less-than, checked in ascending order
PRICE_BANDS = [
    (0.3, PriceAssessment.EXCELLENT),
    (0.5, PriceAssessment.GOOD),
    (0.8, PriceAssessment.NORMAL),
    (1.2, PriceAssessment.HIGH),
]

ASSESSMENT_LABELS = {
    PriceAssessment.EXCELLENT: "Excellent Deal",
    PriceAssessment.GOOD: "Good Price",
    PriceAssessment.NORMAL: "Fair Price",
    PriceAssessment.HIGH: "High Price",
    PriceAssessment.VERY_HIGH: "Very High Price",
}

ASSESSMENT_COLORS = {
    PriceAssessment.EXCELLENT: "#22c55e",
    PriceAssessment.GOOD: "#84cc16",
    PriceAssessment.NORMAL: "#eab308",
    PriceAssessment.HIGH: "#f97316",
    PriceAssessment.VERY_HIGH: "#ef4444",
}

UNKNOWN_LABEL = "Unknown"
UNKNOWN_COLOR = "#6b7280"


def compute_price_to_revenue_ratio(investment: float, expected_revenue: float) -> float:
    """
    Ratio of the asking price to expected revenue.

    A zero investment is always 0.0. A positive investment against zero
    expected revenue is infinite.
    """
    if investment <= 0:
        return 0.0
    if expected_revenue <= 0:
        return math.inf
    return investment / expected_revenue


def classify_price(ratio: float) -> PriceAssessment:
    for upper, band in PRICE_BANDS:
        if ratio < upper:
            return band
    return PriceAssessment.VERY_HIGH


def compute_suggested_price(
    months: List[MonthRecord], final_cumulative: float, config: Optional[EngineSettings] = None
) -> int:
    """
    Suggested acquisition price.

    Takes cumulative revenue at the target month (or the final cumulative
    revenue if the series is shorter) and applies the safety margin.

    Args:
        months: Monthly records in order
        final_cumulative: Cumulative revenue at the end of the series
        config: Engine settings

    Returns:
        Suggested price, rounded to the nearest whole unit
    """
    config = config or settings.engine
    target_idx = config.price_target_month - 1
    if 0 <= target_idx < len(months):
        revenue_at_target = months[target_idx].cumulative_revenue
    else:
        revenue_at_target = final_cumulative
    return round_half_up(revenue_at_target * config.price_safety_margin)


def assessment_label(assessment: Optional[PriceAssessment]) -> str:
    return ASSESSMENT_LABELS.get(assessment, UNKNOWN_LABEL)


def assessment_color(assessment: Optional[PriceAssessment]) -> str:
    return ASSESSMENT_COLORS.get(assessment, UNKNOWN_COLOR)
