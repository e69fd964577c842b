"""Tests for config.settings validation."""

from datetime import date

import pytest

from config.constants import MATERIAL_PRESETS
from config.settings import (
    AnalysisConfig,
    ConfigurationError,
    ProviderSettings,
    SurfaceProperties,
)


@pytest.mark.parametrize("name, albedo, emissivity", [
    ("wood", 0.25, 0.90),
    ("concrete", 0.40, 0.95),
    ("asphalt", 0.05, 0.95),
    ("metal", 0.60, 0.20),
    ("plastic", 0.30, 0.85),
])
def test_material_presets(name, albedo, emissivity):
    props = SurfaceProperties.from_material(name)
    assert (props.material_type, props.albedo, props.emissivity) == (name, albedo, emissivity)


def test_five_presets_exist():
    assert set(MATERIAL_PRESETS) == {"wood", "concrete", "asphalt", "metal", "plastic"}


def test_unknown_material_rejected():
    with pytest.raises(ConfigurationError, match="Unknown material"):
        SurfaceProperties.from_material("glass")


def test_arbitrary_in_range_values_accepted():
    props = SurfaceProperties.build(material_type="painted steel", albedo=0.7, emissivity=0.5)
    assert props.albedo == 0.7


@pytest.mark.parametrize("values", [
    {"albedo": -0.1},
    {"albedo": 1.2},
    {"emissivity": 0.0},
    {"emissivity": 1.5},
])
def test_out_of_range_surface_properties_rejected(values):
    with pytest.raises(ConfigurationError):
        SurfaceProperties.build(**values)


@pytest.mark.parametrize("level", ["weekly", "monthly"])
def test_unimplemented_aggregation_levels_rejected(level):
    with pytest.raises(ConfigurationError, match="not implemented"):
        AnalysisConfig.build(aggregation_level=level)


def test_unknown_aggregation_level_rejected():
    with pytest.raises(ConfigurationError):
        AnalysisConfig.build(aggregation_level="hourly")


def test_date_order_enforced():
    with pytest.raises(ConfigurationError):
        AnalysisConfig.build(start_date=date(2024, 6, 2), end_date=date(2024, 6, 1))


def test_with_surface_replaces_only_properties():
    cfg = AnalysisConfig.build(start_date=date(2024, 6, 1), end_date=date(2024, 6, 30))
    metal = SurfaceProperties.from_material("metal")
    updated = cfg.with_surface(metal)
    assert updated.surface_properties == metal
    assert updated.start_date == cfg.start_date
    assert cfg.surface_properties.material_type == "wood"


def test_provider_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CLIMATELOAD_TIMEOUT", "5")
    monkeypatch.setenv("CLIMATELOAD_COMMUNITY", "AG")
    settings = ProviderSettings.load()
    assert settings.timeout == 5.0
    assert settings.community == "AG"
    assert settings.request_delay == pytest.approx(0.1)


def test_request_delay_cannot_drop_below_rate_limit(monkeypatch):
    monkeypatch.setenv("CLIMATELOAD_REQUEST_DELAY", "0.01")
    with pytest.raises(ConfigurationError):
        ProviderSettings.load()
