"""FastAPI application factory and process entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx
from azure.monitor.opentelemetry import configure_azure_monitor
from fastapi import FastAPI
from opentelemetry.sdk.resources import Resource

from nextjs_wordpress import __version__
from nextjs_wordpress.config import load_settings
from nextjs_wordpress.events import ServiceBusTransitionConsumer
from nextjs_wordpress.logging import configure_logging
from nextjs_wordpress.revalidation import RevalidationNotifier, SlugResolver, TransitionListener
from nextjs_wordpress.routes import content_router, hooks_router, links_router, status_router

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)
SERVICE_NAME = "nextjs-wordpress"


def create_http_client() -> httpx.AsyncClient:
    """Create the outbound client shared by the revalidation notifier.

    Redirects are followed so a frontend that moves ``/api/revalidate`` (scheme
    upgrade, trailing slash) is judged on its final response.
    """
    return httpx.AsyncClient(follow_redirects=True)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire the revalidation listener and optional Service Bus consumer."""
    settings = app.state.settings
    http_client = create_http_client()
    notifier = RevalidationNotifier(settings.frontend, client=http_client)
    listener = TransitionListener(SlugResolver(settings.frontend.route_prefixes), notifier)
    app.state.http_client = http_client
    app.state.notifier = notifier
    app.state.listener = listener

    consumer: ServiceBusTransitionConsumer | None = None
    if settings.servicebus.connection_string:
        consumer = ServiceBusTransitionConsumer(
            settings.servicebus,
            on_transition=listener.on_post_transition,
        )
        await consumer.start()
    app.state.event_consumer = consumer

    logger.info("Bridge started (env=%s)", settings.app.env)
    try:
        yield
    finally:
        if consumer is not None:
            await consumer.stop()
        await http_client.aclose()
        logger.info("Bridge shutdown complete")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = load_settings()
    configure_logging(settings.app.log_level)

    if settings.monitor.connection_string:
        configure_azure_monitor(
            connection_string=settings.monitor.connection_string,
            resource=Resource.create({"service.name": SERVICE_NAME}),
        )
        logger.info("Azure Monitor OpenTelemetry configured")

    app = FastAPI(title="Next.js WordPress bridge", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.include_router(hooks_router)
    app.include_router(content_router)
    app.include_router(links_router)
    app.include_router(status_router)
    return app


def main() -> None:
    """Entry point for the bridge process."""
    import uvicorn  # noqa: PLC0415

    uvicorn.run(create_app(), host="0.0.0.0", port=8000)  # noqa: S104


if __name__ == "__main__":
    main()
