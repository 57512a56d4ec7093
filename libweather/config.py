"""Library configuration pulled from environment variables via pydantic."""
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for libweather and the wtrc CLI."""
    model_config = SettingsConfigDict(env_prefix="WTR_", extra="ignore")

    driver: str = "tiempo"  # only "tiempo" is available
    tiempo_api_host: str = "api.ilmeteo.net"
    tiempo_affiliate_id: str = "0123456789abcd"
    timezone: str = "Europe/Rome"
    cache_dir: Path | None = None  # None: <tempdir>/libweather
    cache_enabled: bool = True
    http_timeout_seconds: float | None = None
    log_level: str = "WARNING"

    @field_validator("tiempo_api_host", mode="after")
    @classmethod
    def strip_scheme_and_slash(cls, v: str) -> str:
        """Accept "http://host/" as well as "host" for the API host."""
        host = str(v).strip()
        for prefix in ("http://", "https://"):
            if host.lower().startswith(prefix):
                host = host[len(prefix):]
        return host.rstrip("/")

    @field_validator("timezone", mode="after")
    @classmethod
    def known_timezone(cls, v: str) -> str:
        """Reject IANA keys that zoneinfo cannot load."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}'") from e
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return str(v).upper()


settings = Settings()
