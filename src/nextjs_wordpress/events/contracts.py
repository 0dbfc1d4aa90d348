"""Message contract for CMS events delivered over Service Bus."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from nextjs_wordpress.models.post import PostTransitionEvent

POST_TRANSITION = "post-transition"


class EventEnvelope(BaseModel):
    """JSON body the CMS publishes for each content event.

    ``event`` names the hook that fired and ``data`` carries its arguments.
    Only ``post-transition`` is acted on; other events share the topic.
    """

    event: str
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_message_body(cls, body: str | bytes) -> EventEnvelope:
        """Parse a message body. Raises ValidationError on malformed JSON."""
        return cls.model_validate_json(body)

    def transition(self) -> PostTransitionEvent | None:
        """Return the carried post transition, or None for other events.

        Raises ValidationError when a post-transition payload is incomplete.
        """
        if self.event != POST_TRANSITION:
            return None
        return PostTransitionEvent.model_validate(self.data)
