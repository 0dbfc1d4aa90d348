"""Status route reporting which bridge features are configured."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from nextjs_wordpress import __version__

router = APIRouter(tags=["status"])


@router.get("/status")
async def status(request: Request) -> dict[str, Any]:
    """Report the version and which integrations are enabled."""
    settings = request.app.state.settings
    consumer = request.app.state.event_consumer
    return {
        "version": __version__,
        "environment": settings.app.env,
        "revalidation_enabled": settings.frontend.revalidation_enabled,
        "preview_enabled": bool(settings.frontend.base_url and settings.frontend.preview_secret),
        "servicebus_enabled": consumer is not None,
    }
