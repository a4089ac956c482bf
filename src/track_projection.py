"""
Unified facade for track projections - combines pricer and projector functionality.

Pipeline: rate resolution, scenario curve, monthly accumulation,
summary derivation, platform split. Every call is independent and pure;
the configuration tables are shared read-only.
"""

import logging
from typing import Optional

from .config import EngineSettings, settings
from .models import InvestmentRequest, ProjectionResult, round_half_up
from .pricer import (
    build_scenario_curve,
    classify_price,
    compute_price_to_revenue_ratio,
    compute_suggested_price,
    get_scenario_params,
    parse_scenario,
    resolve_rates,
)
from .projector import create_platform_breakdown, create_revenue_model

logger = logging.getLogger(__name__)


class ProjectionEngine:
    """Computes 36-month projections for a track investment."""

    def __init__(self, config: Optional[EngineSettings] = None):
        self.config = config or settings.engine

    def compute(self, request: InvestmentRequest) -> ProjectionResult:
        """
        Run the projection.

        Args:
            request: Validated investment request

        Returns:
            Projection result with monthly records and summary metrics
        """
        config = self.config

        rates = resolve_rates(request.markets, request.genre, config)

        scenario = parse_scenario(request.scenario)
        params = get_scenario_params(scenario, config)
        curve = build_scenario_curve(params, config.horizon_months)

        model = create_revenue_model(rates.blended_rate, request.investment, config.days_per_month)
        acc = model.project(request.daily_streams, curve)
        months = list(acc.records)

        total_streams = model.total_streams(months)
        ratio = compute_price_to_revenue_ratio(
            request.investment, model.expected_revenue(total_streams)
        )

        result = ProjectionResult(
            request=request,
            months=months,
            rates=rates,
            break_even_month=acc.break_even_month,
            final_roi=model.compute_roi(acc.cumulative),
            total_streams=total_streams,
            final_revenue=round_half_up(acc.cumulative),
            suggested_price=compute_suggested_price(months, acc.cumulative, config),
            price_to_revenue_ratio=ratio,
            price_assessment=classify_price(ratio),
            platform_breakdown=create_platform_breakdown(acc.cumulative, config.platform_shares),
        )

        logger.debug(
            "Projected %s: scenario=%s break_even=%s roi=%s assessment=%s",
            request.song_title or "untitled track",
            scenario.value,
            result.break_even_month,
            result.final_roi,
            result.price_assessment.value,
        )
        return result


_engine: Optional[ProjectionEngine] = None


def get_engine() -> ProjectionEngine:
    """Get or create the default engine instance."""
    global _engine
    if _engine is None:
        _engine = ProjectionEngine()
    return _engine


def compute(request: InvestmentRequest) -> ProjectionResult:
    """Compute a projection with the default settings."""
    return get_engine().compute(request)
