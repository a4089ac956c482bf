"""Boundary validation of raw form input into an InvestmentRequest."""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Optional

from .config import EngineSettings, settings
from .models import InvestmentRequest
from .pricer import normalize_markets, parse_scenario

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when form input cannot be turned into a request."""


def _parse_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number, got {value!r}") from None
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"{field_name} must be a finite number, got {value!r}")
    if number < 0:
        raise ValidationError(f"{field_name} must be >= 0, got {number:g}")
    return number


def parse_investment(value: Any) -> float:
    return _parse_number(value, "Investment")


def parse_daily_streams(value: Any) -> int:
    number = _parse_number(value, "Daily streams")
    if not number.is_integer():
        raise ValidationError(f"Daily streams must be a whole number, got {number:g}")
    return int(number)


def build_request(
    investment: Any,
    genre: str,
    daily_streams: Any,
    markets: Iterable[str],
    scenario: str = "stable",
    song_title: str = "",
    config: Optional[EngineSettings] = None,
) -> InvestmentRequest:
    """
    Validate raw form values and build a request.

    Args:
        investment: Investment amount (number or numeric string)
        genre: Genre name; unknown genres are accepted and use the default multiplier
        daily_streams: Baseline daily streams on the reference platform
        markets: Market codes or country names
        scenario: Scenario name
        song_title: Optional display title

    Returns:
        InvestmentRequest

    Raises:
        ValidationError: On negative or non-numeric numbers, an empty market
            selection or an unknown scenario
    """
    config = config or settings.engine
    try:
        parsed_investment = parse_investment(investment)
        parsed_streams = parse_daily_streams(daily_streams)

        codes = normalize_markets((m for m in markets if m and str(m).strip()), config)
        if not codes:
            raise ValidationError("Select at least one market")

        try:
            parsed_scenario = parse_scenario(scenario)
        except ValueError as e:
            raise ValidationError(str(e)) from None
    except ValidationError as e:
        logger.warning("Rejected projection input: %s", e)
        raise

    return InvestmentRequest(
        investment=parsed_investment,
        genre=genre.strip(),
        daily_streams=parsed_streams,
        markets=tuple(codes),
        scenario=parsed_scenario,
        song_title=song_title.strip(),
    )
