"""Post status transition handling for on-demand revalidation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nextjs_wordpress.models.post import PostStatus

if TYPE_CHECKING:
    from nextjs_wordpress.models.post import PostTransitionEvent
    from nextjs_wordpress.models.revalidation import RevalidationOutcome
    from nextjs_wordpress.revalidation.notifier import RevalidationNotifier
    from nextjs_wordpress.revalidation.slugs import SlugResolver

logger = logging.getLogger(__name__)


def should_revalidate(event: PostTransitionEvent) -> bool:
    """Return True when a transition changes what the frontend shows."""
    if event.is_autosave or event.is_cron:
        return False
    if event.new_status == PostStatus.DRAFT and event.old_status == PostStatus.DRAFT:
        return False
    return event.new_status != PostStatus.INHERIT


class TransitionListener:
    """Turn post status transitions into revalidation requests."""

    def __init__(self, resolver: SlugResolver, notifier: RevalidationNotifier) -> None:
        self._resolver = resolver
        self._notifier = notifier

    async def on_post_transition(self, event: PostTransitionEvent) -> RevalidationOutcome | None:
        """Revalidate the post's frontend path. Returns None for ignored events."""
        if not should_revalidate(event):
            logger.debug(
                "Ignoring transition %s -> %s for %s/%s",
                event.old_status,
                event.new_status,
                event.post.post_type,
                event.post.post_name,
            )
            return None

        slug = self._resolver.resolve(event.post.post_type, event.post.post_name)
        outcome = await self._notifier.notify(slug)
        logger.info(
            "Transition %s -> %s for slug=%s: revalidation %s",
            event.old_status,
            event.new_status,
            slug,
            outcome.status,
        )
        return outcome
