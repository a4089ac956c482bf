"""Configuration management for the track projector."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)

SETTINGS_PATH_ENV_VAR = "TRACK_PROJECTOR_SETTINGS"


# Spotify revenue per stream by country (DKK)
COUNTRY_RATES: Dict[str, float] = {
    "AR": 0.004, "AT": 0.022, "AU": 0.019, "BE": 0.020, "BR": 0.007,
    "CA": 0.017, "CL": 0.005, "DE": 0.021, "DK": 0.027, "ES": 0.010,
    "FI": 0.026, "FR": 0.016, "GB": 0.029, "IT": 0.012, "MX": 0.007,
    "NL": 0.024, "NO": 0.027, "PT": 0.010, "SE": 0.025, "UY": 0.007, "US": 0.025,
}

COUNTRY_NAMES: Dict[str, str] = {
    "AR": "Argentina", "AT": "Austria", "AU": "Australia", "BE": "Belgium", "BR": "Brazil",
    "CA": "Canada", "CL": "Chile", "DE": "Germany", "DK": "Denmark", "ES": "Spain",
    "FI": "Finland", "FR": "France", "GB": "United Kingdom", "IT": "Italy", "MX": "Mexico",
    "NL": "Netherlands", "NO": "Norway", "PT": "Portugal", "SE": "Sweden", "UY": "Uruguay",
    "US": "United States",
}

GENRE_MULTIPLIERS: Dict[str, float] = {
    "Phonk": 1.15,
    "Pop": 1.10,
    "Hip-Hop": 1.08,
    "Drum & Bass": 1.05,
    "Techno": 1.02,
    "House": 1.02,
    "Electronic": 1.00,
    "Brazilian Funk": 0.95,
}

# Share of total revenue per platform - must sum to 1.0
PLATFORM_SHARES: Dict[str, float] = {
    "Spotify": 0.55,
    "YouTube": 0.20,
    "Apple Music": 0.12,
    "TikTok": 0.06,
    "Amazon Music": 0.04,
    "Other": 0.03,
}


@dataclass(frozen=True)
class ScenarioParams:
    """Ramp-then-decay parameters for a growth scenario."""
    peak_multiplier: float
    peak_month: int
    decay_rate: float


SCENARIO_PARAMS: Dict[str, ScenarioParams] = {
    "declining": ScenarioParams(peak_multiplier=0.60, peak_month=2, decay_rate=0.18),
    "stable": ScenarioParams(peak_multiplier=0.85, peak_month=3, decay_rate=0.10),
    "modest_growth": ScenarioParams(peak_multiplier=1.25, peak_month=2, decay_rate=0.12),
    "high_growth": ScenarioParams(peak_multiplier=2.50, peak_month=4, decay_rate=0.15),
}


@dataclass(frozen=True)
class EngineSettings:
    """Projection engine settings."""
    horizon_months: int = 36
    days_per_month: int = 30
    default_market_rate: float = 0.015
    default_genre_multiplier: float = 1.0
    reference_platform: str = "Spotify"
    price_target_month: int = 33
    price_safety_margin: float = 0.8
    country_rates: Dict[str, float] = field(default_factory=lambda: dict(COUNTRY_RATES))
    country_names: Dict[str, str] = field(default_factory=lambda: dict(COUNTRY_NAMES))
    genre_multipliers: Dict[str, float] = field(default_factory=lambda: dict(GENRE_MULTIPLIERS))
    platform_shares: Dict[str, float] = field(default_factory=lambda: dict(PLATFORM_SHARES))
    scenarios: Dict[str, ScenarioParams] = field(default_factory=lambda: dict(SCENARIO_PARAMS))

    @property
    def reference_share(self) -> float:
        """Share of total revenue earned on the reference platform."""
        return self.platform_shares[self.reference_platform]

    def validate(self) -> None:
        """Check table invariants. Raises ValueError on the first violation."""
        if self.horizon_months < 1:
            raise ValueError(f"horizon_months must be >= 1, got {self.horizon_months}")

        total_share = sum(self.platform_shares.values())
        if not math.isclose(total_share, 1.0, abs_tol=1e-9):
            raise ValueError(f"Platform shares sum to {total_share}, must be 1.0")

        if self.platform_shares.get(self.reference_platform, 0.0) <= 0:
            raise ValueError(
                f"Reference platform '{self.reference_platform}' needs a positive share"
            )

        for name, params in self.scenarios.items():
            if params.peak_month < 1:
                raise ValueError(f"Scenario '{name}': peak_month must be >= 1")
            if params.peak_multiplier <= 0:
                raise ValueError(f"Scenario '{name}': peak_multiplier must be > 0")
            if params.decay_rate < 0:
                raise ValueError(f"Scenario '{name}': decay_rate must be >= 0")


@dataclass
class Settings:
    """Application settings."""
    engine: EngineSettings = field(default_factory=EngineSettings)


def _build_engine_settings(data: dict) -> EngineSettings:
    known = {f.name for f in fields(EngineSettings)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown engine settings: {sorted(unknown)}")

    values = dict(data)
    if "scenarios" in values:
        values["scenarios"] = {
            name: ScenarioParams(**params) for name, params in values["scenarios"].items()
        }
    return EngineSettings(**values)


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Load settings from YAML configuration file."""
    if config_path is None:
        env_path = os.environ.get(SETTINGS_PATH_ENV_VAR)
        if env_path:
            config_path = Path(env_path)
        else:
            config_path = Path(__file__).parent.parent / "config" / "settings.yaml"

    if not config_path.exists():
        engine = EngineSettings()
        engine.validate()
        return Settings(engine=engine)

    with config_path.open() as f:
        data = yaml.safe_load(f) or {}

    engine = _build_engine_settings(data.get("engine", {}) or {})
    engine.validate()
    logger.info("Loaded engine settings from %s", config_path)

    return Settings(engine=engine)


# Global settings instance
settings = load_settings()
