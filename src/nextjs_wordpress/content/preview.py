"""Preview, home and permalink URL rewriting for the headless frontend."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from nextjs_wordpress.content.links import replace_site_url
from nextjs_wordpress.models.post import PostStatus

if TYPE_CHECKING:
    from nextjs_wordpress.config import FrontendConfig
    from nextjs_wordpress.models.post import Post


def preview_link(link: str, post_id: int | None, frontend: FrontendConfig) -> str:
    """Send the admin "Preview" button to the frontend preview route."""
    if not frontend.base_url or not frontend.preview_secret or post_id is None:
        return link
    query = urlencode({"secret": frontend.preview_secret})
    return f"{frontend.base_url}/preview/{post_id}?{query}"


def headless_home_url(
    url: str,
    path: str,
    scheme: str | None = None,
    *,
    is_admin: bool,
    is_block_editor: bool,
    frontend: FrontendConfig,
) -> str:
    """Rewrite the home URL shown in the admin to the frontend's URL.

    REST URLs, the block editor and anything outside the admin keep the CMS
    URL so the editor keeps working.
    """
    if scheme == "rest" or is_block_editor or not is_admin:
        return url
    base_url = frontend.base_url
    if not base_url:
        return url
    return f"{base_url}/{path.lstrip('/')}" if path else base_url


def _cms_preview_link(payload: dict[str, Any], post: Post, site_url: str | None) -> str:
    """The CMS's own preview URL for a draft."""
    if post.preview_link:
        return post.preview_link
    if site_url and post.id is not None:
        query = urlencode({"p": post.id, "preview": "true"})
        return f"{site_url.rstrip('/')}/?{query}"
    return payload.get("link", "")


def rest_preview_link(
    payload: dict[str, Any],
    post: Post,
    site_url: str | None,
    frontend: FrontendConfig,
) -> dict[str, Any]:
    """Point the ``link`` field of a REST post payload at the frontend."""
    if post.post_status == PostStatus.DRAFT:
        payload["link"] = preview_link(_cms_preview_link(payload, post, site_url), post.id, frontend)
        return payload

    if post.post_status == PostStatus.PUBLISH and site_url and frontend.base_url:
        permalink = post.permalink or payload.get("link") or ""
        if site_url.lower() in permalink.lower():
            payload["link"] = replace_site_url(permalink, site_url, frontend.base_url)

    return payload
