"""
Per-stream rate resolution for the reference platform.

Averages country rates over the target markets, applies the genre
multiplier and scales up to a blended all-platform rate.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from ..config import EngineSettings, settings
from ..models import RateSummary


# Country name aliases for market code matching
COUNTRY_ALIASES = {
    "uk": "GB",
    "united kingdom": "GB",
    "great britain": "GB",
    "britain": "GB",
    "england": "GB",
    "usa": "US",
    "united states": "US",
    "america": "US",
    "germany": "DE",
    "deutschland": "DE",
    "holland": "NL",
    "netherlands": "NL",
    "brasil": "BR",
    "brazil": "BR",
}

# (minimum mean rate, label, colour), checked top down
MARKET_TIERS = [
    (0.025, "Premium Markets", "#22c55e"),
    (0.020, "Strong Markets", "#84cc16"),
    (0.015, "Good Markets", "#eab308"),
    (0.010, "Moderate Markets", "#f97316"),
]
EMERGING_TIER = ("Emerging Markets", "#ef4444")


@dataclass(frozen=True)
class MarketTier:
    """Display tier for a market selection."""

    label: str
    color: str
    mean_rate: float


def normalize_market(market: str, config: Optional[EngineSettings] = None) -> str:
    """
    Normalize a market code or country name to a rate table code.

    Unrecognised input is returned upper-cased so it resolves to the
    default rate instead of failing.
    """
    config = config or settings.engine
    code = market.strip().upper()
    if code in config.country_rates:
        return code

    alias = COUNTRY_ALIASES.get(market.strip().lower())
    if alias is not None:
        return alias

    for known_code, name in config.country_names.items():
        if name.lower() == market.strip().lower():
            return known_code

    return code


def normalize_markets(markets: Iterable[str], config: Optional[EngineSettings] = None) -> List[str]:
    """Normalize market codes and drop duplicates, keeping first occurrence order."""
    seen = set()
    result = []
    for market in markets:
        code = normalize_market(market, config)
        if code and code not in seen:
            seen.add(code)
            result.append(code)
    return result


def country_name(code: str, config: Optional[EngineSettings] = None) -> str:
    """Display name for a country code, falling back to the code itself."""
    config = config or settings.engine
    return config.country_names.get(code, code)


def get_market_rate(code: str, config: Optional[EngineSettings] = None) -> float:
    """Reference platform rate for a market, or the default rate if unknown."""
    config = config or settings.engine
    return config.country_rates.get(code, config.default_market_rate)


def get_genre_multiplier(genre: str, config: Optional[EngineSettings] = None) -> float:
    config = config or settings.engine
    return config.genre_multipliers.get(genre, config.default_genre_multiplier)


def compute_reference_rate(markets: Sequence[str], config: Optional[EngineSettings] = None) -> float:
    """
    Arithmetic mean of reference platform rates across markets.

    Args:
        markets: Market codes. An empty selection yields the default rate.

    Returns:
        Mean per-stream rate
    """
    config = config or settings.engine
    if not markets:
        return config.default_market_rate
    if len(markets) == 1:
        return get_market_rate(markets[0], config)
    return sum(get_market_rate(m, config) for m in markets) / len(markets)


def resolve_rates(
    markets: Sequence[str], genre: str, config: Optional[EngineSettings] = None
) -> RateSummary:
    """
    Resolve the blended total revenue per stream.

    The reference platform rate is the only measured one; revenue on the
    other platforms is inferred from its fixed share of total revenue.
    """
    config = config or settings.engine
    reference_rate = compute_reference_rate(markets, config)
    genre_multiplier = get_genre_multiplier(genre, config)
    effective_rate = reference_rate * genre_multiplier

    return RateSummary(
        reference_rate=reference_rate,
        genre_multiplier=genre_multiplier,
        effective_reference_rate=effective_rate,
        blended_rate=effective_rate / config.reference_share,
    )


def market_tier(markets: Sequence[str], config: Optional[EngineSettings] = None) -> MarketTier:
    """Classify a market selection by its mean reference rate."""
    mean_rate = compute_reference_rate(markets, config)
    for threshold, label, color in MARKET_TIERS:
        if mean_rate >= threshold:
            return MarketTier(label=label, color=color, mean_rate=mean_rate)
    label, color = EMERGING_TIER
    return MarketTier(label=label, color=color, mean_rate=mean_rate)


def list_markets(config: Optional[EngineSettings] = None) -> Dict[str, str]:
    """Available market codes mapped to display names, in display order."""
    config = config or settings.engine
    return {code: country_name(code, config) for code in sorted(config.country_rates)}
