"""Shared fixtures for bridge tests."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from nextjs_wordpress.app import create_app
from nextjs_wordpress.config import (
    AppConfig,
    FrontendConfig,
    MonitorConfig,
    ServiceBusConfig,
    Settings,
    SiteConfig,
)


def make_settings(
    *,
    frontend_url: str = "https://www.example.com/",
    revalidation_secret: str = "s3cret",
    preview_secret: str = "preview-secret",
    site_url: str = "https://cms.example.com",
    servicebus_connection_string: str = "",
    monitor_connection_string: str = "",
) -> Settings:
    """Build settings without reading the process environment."""
    return Settings(
        frontend=FrontendConfig(
            url=frontend_url,
            revalidation_secret=revalidation_secret,
            preview_secret=preview_secret,
            route_prefixes={},
        ),
        site=SiteConfig(url=site_url),
        servicebus=ServiceBusConfig(
            connection_string=servicebus_connection_string,
            topic_name="wordpress-events",
            subscription_name="nextjs-bridge",
        ),
        monitor=MonitorConfig(connection_string=monitor_connection_string),
        app=AppConfig(env="test", log_level="INFO"),
    )


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app_factory():
    """Return a factory building the app with the given settings."""

    def _create(settings: Settings):
        with (
            patch("nextjs_wordpress.app.load_settings", return_value=settings),
            patch("nextjs_wordpress.app.configure_logging"),
        ):
            return create_app()

    return _create


@pytest.fixture
def client(app_factory, settings):
    with TestClient(app_factory(settings)) as test_client:
        yield test_client
