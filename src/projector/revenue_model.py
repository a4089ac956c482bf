"""
Revenue calculation model for converting streams to revenue.

This module turns a stream multiplier curve into monthly stream and revenue
records using the blended per-stream rate, and splits the total across
distribution platforms.
"""

from functools import reduce
from typing import Dict, List, NamedTuple, Optional, Sequence

import numpy as np

from ..models import MonthRecord, PlatformRevenue, round_half_up


class Accumulator(NamedTuple):
    """Fold state carried from month to month."""

    cumulative: float
    break_even_month: Optional[int]
    records: tuple


def first_crossing(month: int, cumulative: float, threshold: float, current: Optional[int]) -> Optional[int]:
    """Keep the first month at which cumulative reaches threshold."""
    if current is not None:
        return current
    if cumulative >= threshold:
        return month
    return None


class RevenueModel:
    """Model for calculating monthly revenue from a stream curve."""

    def __init__(self, blended_rate: float, investment: float, days_per_month: int = 30) -> None:
        """
        Initialize the revenue model.

        Args:
            blended_rate: Total revenue per stream across all platforms
            investment: Upfront investment to recover
            days_per_month: Days used to convert daily streams to monthly
        """
        self.blended_rate = blended_rate
        self.investment = investment
        self.days_per_month = days_per_month

    def calculate_monthly_streams(self, daily_streams: float, curve: np.ndarray) -> np.ndarray:
        return daily_streams * self.days_per_month * curve

    def calculate_revenue_from_streams(self, streams: float) -> float:
        return streams * self.blended_rate

    def _step(self, acc: Accumulator, month_data) -> Accumulator:
        month, multiplier, streams = month_data
        revenue = self.calculate_revenue_from_streams(streams)
        cumulative = acc.cumulative + revenue

        record = MonthRecord(
            month=month,
            multiplier=multiplier,
            streams=round_half_up(streams),
            revenue=round_half_up(revenue),
            cumulative_revenue=round_half_up(cumulative),
            investment=self.investment,
            profit=round_half_up(cumulative - self.investment),
        )
        return Accumulator(
            cumulative=cumulative,
            break_even_month=first_crossing(month, cumulative, self.investment, acc.break_even_month),
            records=acc.records + (record,),
        )

    def project(self, daily_streams: float, curve: np.ndarray) -> Accumulator:
        """
        Accumulate monthly revenue over the curve.

        Records hold rounded figures; the running total and the break-even
        test use the unrounded values.

        Args:
            daily_streams: Baseline daily streams on the reference platform
            curve: Stream multiplier per month, month 1 first

        Returns:
            Final accumulator with the unrounded cumulative revenue,
            the break-even month (None if never) and the monthly records
        """
        monthly_streams = self.calculate_monthly_streams(daily_streams, curve)
        months = zip(
            range(1, len(curve) + 1),
            (float(m) for m in curve),
            (float(s) for s in monthly_streams),
        )
        return reduce(self._step, months, Accumulator(0.0, None, ()))

    @staticmethod
    def total_streams(records: Sequence[MonthRecord]) -> int:
        return sum(r.streams for r in records)

    def expected_revenue(self, total_streams: int) -> float:
        """Lifetime revenue at the current run-rate."""
        return total_streams * self.blended_rate

    def compute_roi(self, final_cumulative: float) -> Optional[float]:
        """
        Return on investment as a percentage.

        Returns:
            ROI, or None when the investment is zero
        """
        if self.investment <= 0:
            return None
        return (final_cumulative / self.investment - 1) * 100


def create_platform_breakdown(final_cumulative: float, platform_shares: Dict[str, float]) -> List[PlatformRevenue]:
    """
    Split cumulative revenue across platforms.

    Each part is rounded on its own, so the parts may not add up exactly to
    the rounded total.
    """
    return [
        PlatformRevenue(
            platform=platform,
            revenue=round_half_up(final_cumulative * share),
            percentage=share * 100,
        )
        for platform, share in platform_shares.items()
    ]


def create_revenue_model(blended_rate: float, investment: float, days_per_month: int = 30) -> RevenueModel:
    """
    Create a RevenueModel instance.

    Args:
        blended_rate: Total revenue per stream
        investment: Upfront investment
        days_per_month: Days per month

    Returns:
        RevenueModel instance
    """
    return RevenueModel(blended_rate, investment, days_per_month)
