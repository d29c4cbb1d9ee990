"""Tests for the environment configuration adapter."""

from pathlib import Path

import pytest

from rejse_departures.adapters.config import AppConfig
from rejse_departures.domain.models import TransportMode


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in AppConfig.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig(_env_file=None)

    assert config.host == "0.0.0.0"
    assert config.port == 8000
    assert config.access_token is None
    assert config.timezone == "Europe/Copenhagen"
    assert config.refresh_interval_seconds == 10
    assert config.config_namespace == "rejseplanen-config"
    assert config.current_location_sentinel == "CURRENT_LOCATION"
    assert config.product_bits == {TransportMode.BUS: 32, TransportMode.TRAIN: 16}


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("ACCESS_TOKEN", "secret-token")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("BUS_PRODUCT_BIT", "4")
    monkeypatch.setenv("LATITUDE", "55.6761")

    config = AppConfig(_env_file=None)

    assert config.access_token is not None
    assert config.access_token.get_secret_value() == "secret-token"
    assert config.port == 9000
    assert config.product_bits[TransportMode.BUS] == 4
    assert config.latitude == 55.6761


def test_access_token_is_masked_in_repr(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an access token, when rendering the config, then the token is not shown."""
    monkeypatch.setenv("ACCESS_TOKEN", "secret-token")

    config = AppConfig(_env_file=None)

    assert "secret-token" not in repr(config)
    assert "secret-token" not in str(config.model_dump())


@pytest.mark.parametrize(
    ("variable", "value", "message"),
    [
        ("TIMEZONE", "Mars/Olympus", "timezone must be a valid IANA"),
        ("BUS_PRODUCT_BIT", "48", "powers of two"),
        ("REFRESH_INTERVAL_SECONDS", "0", "refresh_interval_seconds"),
        ("RATE_LIMIT_PER_MINUTE", "0", "rate_limit_per_minute"),
    ],
)
def test_config_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, variable: str, value: str, message: str
) -> None:
    """Given an invalid value, when loading config, then validation fails."""
    monkeypatch.setenv(variable, value)

    with pytest.raises(ValueError, match=message):
        AppConfig(_env_file=None)


def test_store_path_expands_user_directory() -> None:
    """Given a home-relative path, when resolving, then the home directory is expanded."""
    config = AppConfig(_env_file=None, config_store_path="~/store.json")

    assert config.resolved_config_store_path == Path.home() / "store.json"
