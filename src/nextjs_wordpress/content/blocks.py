"""Expose parsed Gutenberg blocks on REST post payloads."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from nextjs_wordpress.models.post import Post

logger = logging.getLogger(__name__)

BLOCKS_FIELD = "gutenberg_blocks"


def _post_id(payload: Any) -> int | None:
    """Return the payload's post ID as a positive integer, if it has one."""
    if not isinstance(payload, dict) or "id" not in payload:
        return None
    try:
        post_id = abs(int(payload["id"]))
    except (TypeError, ValueError):
        return None
    return post_id or None


async def get_blocks(
    payload: dict[str, Any],
    fetch_post: Callable[[int], Awaitable[Post | None]],
) -> list[dict[str, Any]]:
    """Return the parsed blocks for the post a REST payload describes.

    Returns an empty list when the payload carries no usable ID or when the
    post cannot be found.
    """
    post_id = _post_id(payload)
    if post_id is None:
        return []

    post = await fetch_post(post_id)
    if post is None:
        logger.debug("No post found for id=%s, exposing no blocks", post_id)
        return []
    return list(post.blocks)


async def attach_blocks(
    payload: dict[str, Any],
    fetch_post: Callable[[int], Awaitable[Post | None]],
) -> dict[str, Any]:
    """Set the ``gutenberg_blocks`` field on a REST payload and return it."""
    payload[BLOCKS_FIELD] = await get_blocks(payload, fetch_post)
    return payload
