"""Fragment service settings.

ONLY configuration surface - every recognised option of the fragment
service, loaded from the environment with the ESI_ prefix.
"""

import re
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import CookieDefaults, FragmentDefaults, RenderModeKey, SeedDefaults


COOKIE_PREFIX_PATTERN = re.compile(r"^[A-Za-z0-9_-]*$")


class EsiSettings(BaseSettings):
    """Edge fragment service settings."""

    model_config = SettingsConfigDict(
        env_prefix="ESI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="neo-esi")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    # Rendering
    render_mode: str = Field(default=RenderModeKey.ESI.value, description="Default inclusion syntax")
    default_ttl: int = Field(default=FragmentDefaults.DEFAULT_TTL, ge=0, description="Seconds, 0 = no-cache")
    ajax_fallback: bool = Field(default=False)
    ajax_contextualize: bool = Field(default=False)
    use_absolute_urls: bool = Field(default=False)
    base_url: str = Field(default="")
    url_prefix: str = Field(default=FragmentDefaults.URL_PREFIX)

    # Context cookies
    harden_cookie_names: bool = Field(default=False)
    cookie_prefix: str = Field(default=CookieDefaults.PREFIX)
    cookie_path: str = Field(default="/")
    cookie_domain: Optional[str] = Field(default=None)
    cookie_secure: bool = Field(default=False)
    cookie_http_only: bool = Field(default=True)
    cookie_lifetime: int = Field(default=0, ge=0, description="Seconds, 0 = browser session cookie")

    # Seed
    seed_rotation_interval: int = Field(default=SeedDefaults.ROTATION_INTERVAL, gt=0)
    seed_redis_key: str = Field(default=SeedDefaults.REDIS_KEY)

    # Storage
    redis_url: Optional[str] = Field(default=None)
    fragment_cache_prefix: str = Field(default=FragmentDefaults.CACHE_PREFIX)
    settings_redis_prefix: str = Field(default="esi:settings:")

    # Administration
    admin_role: Optional[str] = Field(default="administrator", description="Role required by admin endpoints, None = open")

    @field_validator("cookie_prefix")
    @classmethod
    def validate_cookie_prefix(cls, value: str) -> str:
        if not COOKIE_PREFIX_PATTERN.match(value):
            raise ValueError("Cookie prefix may only contain letters, digits, '_' and '-'")
        return value

    @field_validator("url_prefix")
    @classmethod
    def validate_url_prefix(cls, value: str) -> str:
        value = value.strip("/")
        if not value or "/" in value:
            raise ValueError("URL prefix must be a single non-empty path segment")
        return value

    @field_validator("base_url")
    @classmethod
    def strip_base_url(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def uses_redis(self) -> bool:
        """Check if Redis storage is configured."""
        return bool(self.redis_url)


@lru_cache()
def get_settings() -> EsiSettings:
    """Get cached settings instance."""
    return EsiSettings()
