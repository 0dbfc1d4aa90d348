"""Data models shared across the bridge."""

from nextjs_wordpress.models.post import Post, PostStatus, PostTransitionEvent
from nextjs_wordpress.models.revalidation import (
    OutcomeStatus,
    RevalidationOutcome,
    RevalidationRequest,
)

__all__ = [
    "OutcomeStatus",
    "Post",
    "PostStatus",
    "PostTransitionEvent",
    "RevalidationOutcome",
    "RevalidationRequest",
]
