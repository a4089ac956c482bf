"""Test 36-month track projections"""
import math

import pytest

from src.config import EngineSettings
from src.models import InvestmentRequest, PriceAssessment, Scenario
from src.track_projection import ProjectionEngine, compute


def base_request(**overrides):
    values = dict(
        investment=50000,
        genre="Pop",
        daily_streams=10000,
        markets=("US", "DE", "GB"),
        scenario=Scenario.STABLE,
    )
    values.update(overrides)
    return InvestmentRequest(**values)


def test_reference_example_month_one():
    """Pop / US,DE,GB / stable: month 1 is 285,000 streams and 14,250 revenue"""
    res = compute(base_request())

    assert res.rates.reference_rate == pytest.approx(0.025)
    assert res.rates.genre_multiplier == pytest.approx(1.10)
    assert res.rates.blended_rate == pytest.approx(0.05)

    m1 = res.months[0]
    assert m1.month == 1
    assert m1.multiplier == pytest.approx(0.95)
    assert m1.streams == 285000
    assert m1.revenue == 14250
    assert m1.cumulative_revenue == 14250
    assert m1.investment == 50000
    assert m1.profit == 14250 - 50000


def test_reference_example_summary():
    res = compute(base_request())

    # 14,250 + 13,500 + 12,750 = 40,500 after the ramp; month 4 crosses 50,000
    assert res.months[2].cumulative_revenue == 40500
    assert res.break_even_month == 4

    assert len(res.months) == 36
    assert res.final_revenue == res.months[-1].cumulative_revenue
    assert res.final_roi == pytest.approx((res.final_revenue / 50000 - 1) * 100, abs=0.01)
    assert res.final_roi == pytest.approx(214.5, abs=1.0)
    assert res.is_profitable

    assert res.total_streams == sum(m.streams for m in res.months)
    assert res.price_to_revenue_ratio == pytest.approx(0.318, abs=0.005)
    assert res.price_assessment == PriceAssessment.GOOD

    # 80% of cumulative revenue at month 33
    assert res.suggested_price == math.floor(res.months[32].cumulative_revenue * 0.8 + 0.5)


@pytest.mark.parametrize("scenario", list(Scenario))
def test_cumulative_revenue_non_decreasing(scenario):
    res = compute(base_request(scenario=scenario))
    cumulative = [m.cumulative_revenue for m in res.months]
    for i in range(len(cumulative) - 1):
        assert cumulative[i] <= cumulative[i + 1], f"Cumulative fell at month {i + 2}"


@pytest.mark.parametrize("investment", [1000, 20000, 50000, 120000, 150000, 10_000_000])
def test_break_even_is_first_crossing(investment):
    res = compute(base_request(investment=investment))
    crossed = [m.month for m in res.months if m.cumulative_revenue >= investment]

    if res.break_even_month is None:
        assert not crossed
    else:
        assert 1 <= res.break_even_month <= 36
        assert res.break_even_month == crossed[0]


def test_never_breaks_even():
    res = compute(base_request(investment=10_000_000))
    assert res.break_even_month is None
    assert res.final_roi < 0
    assert not res.is_profitable
    assert res.price_assessment == PriceAssessment.VERY_HIGH


def test_platform_shares_sum_to_100():
    res = compute(base_request())
    platforms = [p.platform for p in res.platform_breakdown]
    assert platforms == ["Spotify", "YouTube", "Apple Music", "TikTok", "Amazon Music", "Other"]
    assert sum(p.percentage for p in res.platform_breakdown) == pytest.approx(100.0)

    spotify = res.platform_breakdown[0]
    assert spotify.percentage == pytest.approx(55.0)
    # Parts are rounded individually, no renormalization
    assert abs(sum(p.revenue for p in res.platform_breakdown) - res.final_revenue) <= len(platforms)


def test_idempotent():
    request = base_request(scenario=Scenario.HIGH_GROWTH)
    assert compute(request) == compute(request)


def test_single_market_uses_rate_directly():
    res = compute(base_request(markets=("GB",)))
    assert res.rates.reference_rate == 0.029


def test_unknown_genre_and_market_use_defaults():
    res = compute(base_request(genre="Polka", markets=("ZZ",)))
    assert res.rates.genre_multiplier == 1.0
    assert res.rates.reference_rate == 0.015
    assert res.rates.blended_rate == pytest.approx(0.015 / 0.55)


def test_zero_investment_is_guarded():
    res = compute(base_request(investment=0))
    assert res.break_even_month == 1
    assert res.final_roi is None
    assert res.is_profitable
    assert res.price_to_revenue_ratio == 0.0
    assert res.price_assessment == PriceAssessment.EXCELLENT


def test_zero_streams_is_guarded():
    res = compute(base_request(daily_streams=0))
    assert res.total_streams == 0
    assert res.final_revenue == 0
    assert res.break_even_month is None
    assert res.final_roi == pytest.approx(-100.0)
    assert math.isinf(res.price_to_revenue_ratio)
    assert res.price_assessment == PriceAssessment.VERY_HIGH
    assert res.suggested_price == 0


def test_short_horizon_suggested_price_uses_final_revenue():
    engine = ProjectionEngine(EngineSettings(horizon_months=12))
    res = engine.compute(base_request())
    assert len(res.months) == 12
    assert res.suggested_price == math.floor(res.months[-1].cumulative_revenue * 0.8 + 0.5)


def test_dataframe_export():
    res = compute(base_request())
    df = res.to_dataframe()
    assert list(df.columns) == ["month", "streams", "revenue", "cumulative_revenue", "investment", "profit"]
    assert len(df) == 36
    assert df["month"].tolist() == list(range(1, 37))
    assert len(res.first_months()) == 12
    assert res.first_months(12) == res.months[:12]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
