"""Data models for the track projector."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import pandas as pd


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return int(math.floor(value + 0.5))


class Scenario(Enum):
    """Growth scenarios for stream volume over the horizon."""

    DECLINING = "declining"
    STABLE = "stable"
    MODEST_GROWTH = "modest_growth"
    HIGH_GROWTH = "high_growth"


class PriceAssessment(Enum):
    """Price bands, ordered from most to least favourable to the buyer."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NORMAL = "normal"
    HIGH = "high"
    VERY_HIGH = "very_high"


@dataclass(frozen=True)
class InvestmentRequest:
    """User inputs for a track projection."""

    investment: float
    genre: str
    daily_streams: int
    markets: Tuple[str, ...]
    scenario: Scenario = Scenario.STABLE
    song_title: str = ""


@dataclass(frozen=True)
class RateSummary:
    """Resolved per-stream rates."""

    reference_rate: float  # mean of market rates on the reference platform
    genre_multiplier: float
    effective_reference_rate: float
    blended_rate: float  # total revenue per stream across all platforms


@dataclass(frozen=True)
class MonthRecord:
    """Projection data for a single month."""

    month: int
    multiplier: float
    streams: int
    revenue: int
    cumulative_revenue: int
    investment: float
    profit: int


@dataclass(frozen=True)
class PlatformRevenue:
    """Revenue allocated to one distribution platform."""

    platform: str
    revenue: int
    percentage: float


@dataclass(frozen=True)
class ProjectionResult:
    """Complete projection result."""

    request: InvestmentRequest
    months: List[MonthRecord]
    rates: RateSummary

    # None means the investment is never recovered within the horizon
    break_even_month: Optional[int]
    # None when the investment is zero and ROI is not applicable
    final_roi: Optional[float]
    total_streams: int
    final_revenue: int
    suggested_price: int
    price_to_revenue_ratio: float
    price_assessment: PriceAssessment
    platform_breakdown: List[PlatformRevenue] = field(default_factory=list)

    @property
    def is_profitable(self) -> bool:
        if self.final_roi is None:
            return self.final_revenue > 0
        return self.final_roi > 0

    def first_months(self, n: int = 12) -> List[MonthRecord]:
        return self.months[:n]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Monthly projection as a DataFrame.

        Returns:
            DataFrame with one row per month and columns month, streams,
            revenue, cumulative_revenue, investment, profit
        """
        return pd.DataFrame(
            [
                {
                    "month": m.month,
                    "streams": m.streams,
                    "revenue": m.revenue,
                    "cumulative_revenue": m.cumulative_revenue,
                    "investment": m.investment,
                    "profit": m.profit,
                }
                for m in self.months
            ],
            columns=["month", "streams", "revenue", "cumulative_revenue", "investment", "profit"],
        )

    def platform_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [{"platform": p.platform, "revenue": p.revenue, "percentage": p.percentage}
             for p in self.platform_breakdown],
            columns=["platform", "revenue", "percentage"],
        )
