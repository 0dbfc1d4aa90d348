"""On-demand revalidation of Next.js pages."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlencode

import httpx

from nextjs_wordpress.models.revalidation import (
    OutcomeStatus,
    RevalidationOutcome,
    RevalidationRequest,
)

if TYPE_CHECKING:
    from nextjs_wordpress.config import FrontendConfig

logger = logging.getLogger(__name__)

REVALIDATE_PATH = "/api/revalidate"
SECRET_HEADER = "x-vercel-revalidation-secret"


def build_request(config: FrontendConfig, slug: str) -> RevalidationRequest | None:
    """Build the revalidation call for a slug, or None when disabled."""
    if not config.revalidation_enabled or not slug:
        return None
    query = urlencode({"slug": slug})
    return RevalidationRequest(
        url=f"{config.base_url}{REVALIDATE_PATH}?{query}",
        headers={SECRET_HEADER: config.revalidation_secret},
        slug=slug,
    )


class RevalidationNotifier:
    """Ask the frontend to drop its cached copy of a path.

    Each call sends exactly one request: nothing is queued, retried or
    deduplicated. Failures are logged and returned as an outcome.
    """

    def __init__(
        self,
        config: FrontendConfig,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize with frontend configuration and an optional shared client."""
        self._config = config
        self._client = client
        self._owns_client = client is None
        if not config.revalidation_enabled:
            logger.info(
                "NEXTJS_FRONTEND_URL or NEXTJS_REVALIDATION_SECRET is not set, "
                "on-demand revalidation is disabled"
            )

    @property
    def enabled(self) -> bool:
        return self._config.revalidation_enabled

    def _ensure_client(self) -> httpx.AsyncClient:
        """Lazily create the HTTP client when none was injected."""
        if self._client is None:
            self._client = httpx.AsyncClient(follow_redirects=True)
        return self._client

    async def notify(self, slug: str) -> RevalidationOutcome:
        """Send a revalidation request for ``slug`` and classify the result."""
        request = build_request(self._config, slug)
        if request is None:
            return RevalidationOutcome.skip(slug)

        try:
            response = await self._ensure_client().request(
                request.method,
                request.url,
                headers=request.headers,
                follow_redirects=True,
            )
        except httpx.HTTPError as exc:
            message = str(exc) or type(exc).__name__
            logger.warning("Revalidation error: %s", message)
            return RevalidationOutcome(status=OutcomeStatus.FAILED, slug=slug, message=message)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Revalidation error: %s", exc, exc_info=True)
            return RevalidationOutcome(status=OutcomeStatus.FAILED, slug=slug, message=str(exc))

        if response.status_code != httpx.codes.OK:
            message = response.reason_phrase or str(response.status_code)
            logger.warning("Revalidation error: %s", message)
            return RevalidationOutcome(status=OutcomeStatus.FAILED, slug=slug, message=message)

        logger.debug("Revalidated slug=%s", slug)
        return RevalidationOutcome(status=OutcomeStatus.SUCCEEDED, slug=slug)

    async def close(self) -> None:
        """Close the HTTP client if this notifier created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
