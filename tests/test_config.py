from __future__ import annotations

import pytest

from glasscast._constants import BASE_URL, REQUEST_TIMEOUT_S
from glasscast.config import GlasscastConfig
from glasscast.exceptions import GlasscastConfigError


def test_defaults() -> None:
    config = GlasscastConfig()

    assert config.base_url == BASE_URL
    assert config.request_timeout == REQUEST_TIMEOUT_S
    assert config.cache_path is None
    assert config.credential_path is None


def test_trailing_slash_is_stripped() -> None:
    assert GlasscastConfig(base_url="https://weather.example/v1/").base_url == "https://weather.example/v1"


@pytest.mark.parametrize("kwargs", [{"base_url": ""}, {"request_timeout": 0}, {"request_timeout": -1.0}])
def test_invalid_values_raise(kwargs: dict[str, object]) -> None:
    with pytest.raises(GlasscastConfigError):
        GlasscastConfig(**kwargs)  # type: ignore[arg-type]


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GLASSCAST_BASE_URL", "https://env.example/v1")
    monkeypatch.setenv("GLASSCAST_REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("GLASSCAST_CACHE_PATH", "/tmp/cities.json")
    monkeypatch.setenv("GLASSCAST_CREDENTIAL_PATH", "/tmp/token")

    config = GlasscastConfig.from_env()

    assert config.base_url == "https://env.example/v1"
    assert config.request_timeout == 12.5
    assert config.cache_path == "/tmp/cities.json"
    assert config.credential_path == "/tmp/token"


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GLASSCAST_BASE_URL", "https://env.example/v1")
    monkeypatch.setenv("GLASSCAST_REQUEST_TIMEOUT", "not-a-number")

    config = GlasscastConfig.from_env(base_url="https://explicit.example/v1", request_timeout=5.0)

    assert config.base_url == "https://explicit.example/v1"
    assert config.request_timeout == 5.0


def test_from_env_rejects_bad_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GLASSCAST_REQUEST_TIMEOUT", "soon")

    with pytest.raises(GlasscastConfigError, match="GLASSCAST_REQUEST_TIMEOUT"):
        GlasscastConfig.from_env()
