"""Client configuration (backend location)."""

import httpx
from pydantic_settings import BaseSettings, SettingsConfigDict

_WS_SCHEMES = {"https": "wss", "http": "ws"}


class ClientSettings(BaseSettings):
    """Settings for the Python task client, read from TASKHUB_* env vars."""

    backend_url: str = "http://localhost:5000"
    request_timeout: float = 10.0

    model_config = SettingsConfigDict(
        env_prefix="TASKHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def ws_url(self) -> str:
        """Notification channel URL: backend_url with a ws/wss scheme and /ws appended.

        The scheme match is case-insensitive; any path prefix is kept.
        """
        url = httpx.URL(self.backend_url)
        scheme = _WS_SCHEMES.get(url.scheme, url.scheme)
        return str(url.copy_with(scheme=scheme, path=url.path.rstrip("/") + "/ws"))
