"""
Pricer module for track investment pricing.

Provides per-stream rate resolution, scenario curves and price assessment.
"""

from .rates import (
    COUNTRY_ALIASES,
    MarketTier,
    normalize_market,
    normalize_markets,
    country_name,
    get_market_rate,
    get_genre_multiplier,
    compute_reference_rate,
    resolve_rates,
    market_tier,
    list_markets,
)
from .scenario import (
    SCENARIO_ALIASES,
    parse_scenario,
    get_scenario_params,
    ramp_multiplier,
    decay_multiplier,
    stream_multiplier,
    build_scenario_curve,
)
from .assessment import (
    PRICE_BANDS,
    compute_price_to_revenue_ratio,
    classify_price,
    compute_suggested_price,
    assessment_label,
    assessment_color,
)

__version__ = "1.0.0"

__all__ = [
    # rates.py
    "COUNTRY_ALIASES",
    "MarketTier",
    "normalize_market",
    "normalize_markets",
    "country_name",
    "get_market_rate",
    "get_genre_multiplier",
    "compute_reference_rate",
    "resolve_rates",
    "market_tier",
    "list_markets",
    # scenario.py
    "SCENARIO_ALIASES",
    "parse_scenario",
    "get_scenario_params",
    "ramp_multiplier",
    "decay_multiplier",
    "stream_multiplier",
    "build_scenario_curve",
    # assessment.py
    "PRICE_BANDS",
    "compute_price_to_revenue_ratio",
    "classify_price",
    "compute_suggested_price",
    "assessment_label",
    "assessment_color",
]
