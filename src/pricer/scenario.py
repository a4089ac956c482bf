"""
Scenario curves for monthly stream volume.

Each growth scenario ramps linearly from the baseline (1.0 at month 0) to
its peak multiplier at the peak month, then decays exponentially:

    m <= peak_month:  1 + (peak - 1) * m / peak_month
    m >  peak_month:  peak * exp(-decay * (m - peak_month))

Both branches equal the peak multiplier at the peak month, and the decay
branch approaches zero without reaching it.
"""

from typing import Optional, Union

import numpy as np

from ..config import EngineSettings, ScenarioParams, settings
from ..models import Scenario


# Accepted spellings for scenario names
SCENARIO_ALIASES = {
    "declining": Scenario.DECLINING,
    "decreasing": Scenario.DECLINING,
    "stable": Scenario.STABLE,
    "modest_growth": Scenario.MODEST_GROWTH,
    "small_upside": Scenario.MODEST_GROWTH,
    "high_growth": Scenario.HIGH_GROWTH,
    "big_upside": Scenario.HIGH_GROWTH,
}


def parse_scenario(value: Union[str, Scenario]) -> Scenario:
    """
    Parse a scenario name.

    Args:
        value: Scenario or name such as "stable", "modest-growth" or "big_upside"

    Returns:
        Scenario member

    Raises:
        ValueError: If the name is not recognised
    """
    if isinstance(value, Scenario):
        return value

    key = value.strip().lower().replace("-", "_").replace(" ", "_")
    if key not in SCENARIO_ALIASES:
        raise ValueError(
            f"Unknown scenario: '{value}'. Available: {[s.value for s in Scenario]}"
        )
    return SCENARIO_ALIASES[key]


def get_scenario_params(scenario: Scenario, config: Optional[EngineSettings] = None) -> ScenarioParams:
    config = config or settings.engine
    return config.scenarios[scenario.value]


def ramp_multiplier(month: float, params: ScenarioParams) -> float:
    """Linear ramp from 1.0 at month 0 to the peak multiplier."""
    return 1 + (params.peak_multiplier - 1) * (month / params.peak_month)


def decay_multiplier(month: float, params: ScenarioParams) -> float:
    """Exponential decay from the peak multiplier."""
    return params.peak_multiplier * float(np.exp(-params.decay_rate * (month - params.peak_month)))


def stream_multiplier(month: int, params: ScenarioParams) -> float:
    """Stream volume multiplier for a 1-based month."""
    if month <= params.peak_month:
        return ramp_multiplier(month, params)
    return decay_multiplier(month, params)


def build_scenario_curve(params: ScenarioParams, horizon_months: int) -> np.ndarray:
    """
    Build the multiplier curve for months 1..horizon_months.

    Returns:
        Array of length horizon_months; element i is the multiplier for month i + 1
    """
    months = np.arange(1, horizon_months + 1, dtype=float)
    ramp = 1 + (params.peak_multiplier - 1) * (months / params.peak_month)
    decay = params.peak_multiplier * np.exp(-params.decay_rate * (months - params.peak_month))
    return np.where(months <= params.peak_month, ramp, decay)
