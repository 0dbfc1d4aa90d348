"""WordPress post models: the slice of a post the bridge needs."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class PostStatus(StrEnum):
    """Lifecycle states WordPress ships with. Plugins may register more."""

    AUTO_DRAFT = "auto-draft"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    FUTURE = "future"
    PUBLISH = "publish"
    INHERIT = "inherit"
    TRASH = "trash"


class Post(BaseModel):
    """A post as delivered by the CMS."""

    id: int | None = None
    post_type: str = "post"
    post_name: str = ""
    post_status: str = ""
    post_content: str = ""
    permalink: str | None = None
    preview_link: str | None = None
    blocks: list[dict[str, Any]] = Field(default_factory=list)


class PostTransitionEvent(BaseModel):
    """A single post status change fired by the CMS.

    ``is_autosave`` and ``is_cron`` describe the request that triggered the
    change, not the post itself.
    """

    new_status: str
    old_status: str
    post: Post
    is_autosave: bool = False
    is_cron: bool = False
