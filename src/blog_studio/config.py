"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _env(key: str, default: str = "") -> str:
    """Return an environment variable or a default."""
    return os.environ.get(key, default)


def _env_int(key: str, default: int) -> int:
    """Return an integer environment variable, falling back on bad input."""
    raw = _env(key)
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _env_bool(key: str, default: bool = False) -> bool:
    """Return a boolean environment variable (true/1/yes are truthy)."""
    raw = _env(key)
    return raw.strip().lower() in {"1", "true", "yes"} if raw else default


@dataclass(frozen=True)
class CosmosConfig:
    endpoint: str = field(default_factory=lambda: _env("COSMOS_ENDPOINT"))
    key: str = field(default_factory=lambda: _env("COSMOS_KEY"))
    database: str = field(default_factory=lambda: _env("COSMOS_DATABASE", "blog-studio"))


@dataclass(frozen=True)
class OpenAIConfig:
    endpoint: str = field(default_factory=lambda: _env("AZURE_OPENAI_ENDPOINT"))
    deployment: str = field(default_factory=lambda: _env("AZURE_OPENAI_DEPLOYMENT"))
    api_key: str = field(default_factory=lambda: _env("AZURE_OPENAI_API_KEY"))

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint and self.deployment)


@dataclass(frozen=True)
class PexelsConfig:
    api_key: str = field(default_factory=lambda: _env("PEXELS_API_KEY"))
    per_page: int = field(default_factory=lambda: _env_int("PEXELS_PER_PAGE", 6))
    endpoint: str = field(
        default_factory=lambda: _env("PEXELS_ENDPOINT", "https://api.pexels.com/v1/search")
    )


@dataclass(frozen=True)
class RateLimitConfig:
    max_requests: int = field(default_factory=lambda: _env_int("RATE_LIMIT_MAX_REQUESTS", 5))
    window_seconds: int = field(default_factory=lambda: _env_int("RATE_LIMIT_WINDOW_SECONDS", 60))
    trust_forwarded: bool = field(
        default_factory=lambda: _env_bool("RATE_LIMIT_TRUST_FORWARDED")
    )


@dataclass(frozen=True)
class MonitorConfig:
    connection_string: str = field(
        default_factory=lambda: _env("APPLICATIONINSIGHTS_CONNECTION_STRING")
    )


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    cosmos: CosmosConfig = field(default_factory=CosmosConfig)
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    pexels: PexelsConfig = field(default_factory=PexelsConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)
    monitor: MonitorConfig = field(default_factory=MonitorConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Load ``.env`` (if present) and build the settings tree."""
    load_dotenv()
    return Settings()
