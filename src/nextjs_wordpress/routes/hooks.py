"""Webhook route receiving post status transitions from the CMS."""

from __future__ import annotations

from fastapi import APIRouter, Request, status

from nextjs_wordpress.models.post import PostTransitionEvent

router = APIRouter(prefix="/hooks", tags=["hooks"])


@router.post("/transition", status_code=status.HTTP_202_ACCEPTED)
async def post_transition(request: Request, event: PostTransitionEvent) -> dict[str, str]:
    """Revalidate the frontend for a transition.

    The response never reflects the revalidation outcome so a failing
    frontend cannot fail the editor's save.
    """
    listener = request.app.state.listener
    outcome = await listener.on_post_transition(event)
    return {"status": "ignored" if outcome is None else "accepted"}
