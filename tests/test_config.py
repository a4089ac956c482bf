"""Test engine settings loading"""
import pytest

from src.config import EngineSettings, ScenarioParams, load_settings


def test_missing_file_returns_defaults(tmp_path):
    s = load_settings(tmp_path / "missing.yaml")
    assert s.engine.horizon_months == 36
    assert s.engine.reference_share == 0.55
    assert s.engine.price_target_month == 33


def test_yaml_overrides(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "engine:\n"
        "  horizon_months: 24\n"
        "  price_safety_margin: 0.75\n"
        "  scenarios:\n"
        "    stable: {peak_multiplier: 1.0, peak_month: 1, decay_rate: 0.05}\n"
    )
    s = load_settings(path)
    assert s.engine.horizon_months == 24
    assert s.engine.price_safety_margin == 0.75
    assert s.engine.scenarios == {"stable": ScenarioParams(1.0, 1, 0.05)}
    # untouched tables keep defaults
    assert s.engine.country_rates["GB"] == 0.029


def test_settings_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("engine:\n  days_per_month: 31\n")
    monkeypatch.setenv("TRACK_PROJECTOR_SETTINGS", str(path))
    assert load_settings().engine.days_per_month == 31


def test_empty_file_returns_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_settings(path).engine == EngineSettings()


def test_rejects_platform_shares_not_summing_to_one(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("engine:\n  platform_shares: {Spotify: 0.5, YouTube: 0.2}\n")
    with pytest.raises(ValueError, match="Platform shares"):
        load_settings(path)


def test_rejects_unknown_keys(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("engine:\n  horizon: 12\n")
    with pytest.raises(ValueError, match="Unknown engine settings"):
        load_settings(path)


@pytest.mark.parametrize("params", [
    ScenarioParams(peak_multiplier=1.0, peak_month=0, decay_rate=0.1),
    ScenarioParams(peak_multiplier=0.0, peak_month=2, decay_rate=0.1),
    ScenarioParams(peak_multiplier=1.0, peak_month=2, decay_rate=-0.1),
])
def test_rejects_invalid_scenarios(params):
    with pytest.raises(ValueError, match="Scenario"):
        EngineSettings(scenarios={"stable": params}).validate()


def test_default_platform_shares_sum_to_one():
    EngineSettings().validate()
    assert sum(EngineSettings().platform_shares.values()) == pytest.approx(1.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
