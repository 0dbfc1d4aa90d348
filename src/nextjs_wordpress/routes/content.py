"""Content routes for rewriting post HTML."""

from __future__ import annotations

from fastapi import APIRouter, Request
from pydantic import BaseModel

from nextjs_wordpress.content.links import rewrite_links

router = APIRouter(prefix="/content", tags=["content"])


class RewriteLinksRequest(BaseModel):
    html: str


@router.post("/rewrite-links")
async def rewrite_content_links(request: Request, body: RewriteLinksRequest) -> dict[str, str]:
    """Return post HTML with internal links pointing at the frontend."""
    settings = request.app.state.settings
    html = rewrite_links(body.html, settings.site.url, settings.frontend.base_url)
    return {"html": html}
