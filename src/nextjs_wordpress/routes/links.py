"""Link routes for preview, home and REST permalink rewriting."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from nextjs_wordpress.content.preview import headless_home_url, preview_link, rest_preview_link
from nextjs_wordpress.models.post import Post

router = APIRouter(prefix="/links", tags=["links"])


class PreviewLinkRequest(BaseModel):
    link: str
    post_id: int


class HomeUrlRequest(BaseModel):
    url: str
    path: str = ""
    scheme: str | None = None
    is_admin: bool = False
    is_block_editor: bool = False


class RestLinkRequest(BaseModel):
    payload: dict[str, Any] = Field(default_factory=dict)
    post: Post


@router.post("/preview")
async def rewrite_preview_link(request: Request, body: PreviewLinkRequest) -> dict[str, str]:
    """Point the admin preview button at the frontend."""
    frontend = request.app.state.settings.frontend
    return {"link": preview_link(body.link, body.post_id, frontend)}


@router.post("/home")
async def rewrite_home_url(request: Request, body: HomeUrlRequest) -> dict[str, str]:
    frontend = request.app.state.settings.frontend
    url = headless_home_url(
        body.url,
        body.path,
        body.scheme,
        is_admin=body.is_admin,
        is_block_editor=body.is_block_editor,
        frontend=frontend,
    )
    return {"url": url}


@router.post("/rest")
async def rewrite_rest_link(request: Request, body: RestLinkRequest) -> dict[str, Any]:
    """Return the REST payload with its ``link`` pointing at the frontend."""
    settings = request.app.state.settings
    return rest_preview_link(body.payload, body.post, settings.site.url, settings.frontend)
