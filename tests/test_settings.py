import logging

import pytest

from geomatch.config.settings import AppSettings, Settings, get_settings
from geomatch.core.logging import configure_logging
from geomatch.regions.resolver import get_region_resolver


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    get_region_resolver.cache_clear()
    yield
    get_settings.cache_clear()
    get_region_resolver.cache_clear()


def test_default_settings_load_from_packaged_yaml(fresh_settings, monkeypatch):
    monkeypatch.delenv("GEOMATCH_CONFIG_PATH", raising=False)
    monkeypatch.delenv("GEOMATCH_REGIONS_PATH", raising=False)
    settings = get_settings()

    assert settings.matching.default_radius_km == 5.0
    assert settings.matching.location_key == "location"
    assert settings.country.name == "Guatemala"
    assert settings.country.north == 17.8193
    assert settings.regions.path is None


def test_env_overrides_log_level_and_regions_path(fresh_settings, monkeypatch, tmp_path):
    path = tmp_path / "regions.yaml"
    path.write_text("- {name: Everywhere, north: 90, south: -90, east: 180, west: -180}\n", encoding="utf-8")
    monkeypatch.setenv("GEOMATCH_LOG_LEVEL", "debug")
    monkeypatch.setenv("GEOMATCH_REGIONS_PATH", str(path))

    settings = get_settings()
    assert settings.app.log_level == "debug"
    assert settings.regions.path == str(path)
    assert get_region_resolver().resolve(0, 0) == "Everywhere"


def test_config_path_replaces_defaults(fresh_settings, monkeypatch, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("matching:\n  default_radius_km: 12.5\n", encoding="utf-8")
    monkeypatch.setenv("GEOMATCH_CONFIG_PATH", str(path))

    settings = get_settings()
    assert settings.matching.default_radius_km == 12.5
    assert settings.country.name == "Guatemala"


def test_config_path_must_be_a_mapping(fresh_settings, monkeypatch, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- not\n- a mapping\n", encoding="utf-8")
    monkeypatch.setenv("GEOMATCH_CONFIG_PATH", str(path))

    with pytest.raises(ValueError, match="expected a mapping"):
        get_settings()


def test_configure_logging_applies_level(fresh_settings, monkeypatch):
    monkeypatch.setenv("GEOMATCH_LOG_LEVEL", "WARNING")
    configure_logging()
    assert logging.getLogger().level == logging.WARNING
    configure_logging(Settings(app=AppSettings(log_level="info")))
    assert logging.getLogger().level == logging.INFO
