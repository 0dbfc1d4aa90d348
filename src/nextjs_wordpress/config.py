"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _parse_route_prefixes(raw: str) -> dict[str, str]:
    """Parse ``type=prefix`` pairs separated by commas into a mapping."""
    prefixes: dict[str, str] = {}
    for pair in raw.split(","):
        post_type, sep, prefix = pair.partition("=")
        if not sep or not post_type.strip():
            continue
        prefixes[post_type.strip()] = prefix.strip()
    return prefixes


@dataclass(frozen=True)
class FrontendConfig:
    """Next.js frontend connection settings.

    Every value is optional. Without a URL and a revalidation secret the
    revalidation bridge stays disabled.
    """

    url: str = field(default_factory=lambda: _env("NEXTJS_FRONTEND_URL"))
    revalidation_secret: str = field(default_factory=lambda: _env("NEXTJS_REVALIDATION_SECRET"))
    preview_secret: str = field(default_factory=lambda: _env("NEXTJS_PREVIEW_SECRET"))
    route_prefixes: dict[str, str] = field(
        default_factory=lambda: _parse_route_prefixes(_env("NEXTJS_ROUTE_PREFIXES"))
    )

    @property
    def base_url(self) -> str | None:
        """Frontend URL without a trailing slash, or None when unset."""
        return self.url.rstrip("/") if self.url else None

    @property
    def revalidation_enabled(self) -> bool:
        return bool(self.url and self.revalidation_secret)


@dataclass(frozen=True)
class SiteConfig:
    url: str = field(default_factory=lambda: _env("WORDPRESS_URL"))


@dataclass(frozen=True)
class ServiceBusConfig:
    connection_string: str = field(default_factory=lambda: _env("AZURE_SERVICEBUS_CONNECTION_STRING"))
    topic_name: str = field(default_factory=lambda: _env("AZURE_SERVICEBUS_TOPIC", "wordpress-events"))
    subscription_name: str = field(
        default_factory=lambda: _env("AZURE_SERVICEBUS_SUBSCRIPTION", "nextjs-bridge")
    )


@dataclass(frozen=True)
class MonitorConfig:
    connection_string: str = field(default_factory=lambda: _env("APPLICATIONINSIGHTS_CONNECTION_STRING"))


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    frontend: FrontendConfig = field(default_factory=FrontendConfig)
    site: SiteConfig = field(default_factory=SiteConfig)
    servicebus: ServiceBusConfig = field(default_factory=ServiceBusConfig)
    monitor: MonitorConfig = field(default_factory=MonitorConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Build settings from the current process environment."""
    return Settings()
