"""Settings loading and validation."""

import pytest
from pydantic import ValidationError

from taskhub.client.config import ClientSettings
from taskhub.core.config import Settings, get_settings


def test_defaults() -> None:
    """A bare environment runs on port 5000 against local SQLite."""
    settings = Settings(_env_file=None)
    assert settings.port == 5000
    assert settings.database_url.startswith("sqlite+aiosqlite://")
    assert settings.report_missing_tasks is False
    assert settings.origins == ["http://localhost:3000", "http://localhost:5173"]


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables override defaults (case-insensitive)."""
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("REPORT_MISSING_TASKS", "true")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, ,https://b.example")
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.report_missing_tasks is True
    assert settings.origins == ["https://a.example", "https://b.example"]


def test_get_settings_is_cached() -> None:
    """get_settings returns one instance until cache_clear()."""
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()


def test_blank_database_url_rejected() -> None:
    """A whitespace DATABASE_URL fails validation."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, database_url="  ")


def test_unknown_telemetry_exporter_rejected() -> None:
    """Only console, otlp and none are accepted exporters."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, telemetry_exporter="jaeger")


def test_sample_rate_out_of_range_rejected() -> None:
    """Sample rates above 1.0 fail validation."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, telemetry_sample_rate=1.5)


def test_client_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """TASKHUB_BACKEND_URL sets the backend; the channel URL follows its scheme."""
    monkeypatch.setenv("TASKHUB_BACKEND_URL", "https://tasks.example/")
    settings = ClientSettings(_env_file=None)
    assert settings.backend_url == "https://tasks.example/"
    assert settings.ws_url == "wss://tasks.example/ws"


def test_client_settings_default_ws_url() -> None:
    """The default backend maps to a plain ws:// channel URL."""
    assert ClientSettings(_env_file=None).ws_url == "ws://localhost:5000/ws"


@pytest.mark.parametrize(
    ("backend_url", "expected"),
    [
        ("HTTPS://tasks.example", "wss://tasks.example/ws"),
        ("Http://localhost:5000/", "ws://localhost:5000/ws"),
        ("https://tasks.example/api/", "wss://tasks.example/api/ws"),
    ],
)
def test_client_settings_ws_url_normalises_scheme(backend_url: str, expected: str) -> None:
    """Upper or mixed-case schemes still map to ws/wss and a path prefix is kept."""
    assert ClientSettings(_env_file=None, backend_url=backend_url).ws_url == expected
