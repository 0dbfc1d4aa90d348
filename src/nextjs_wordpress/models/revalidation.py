"""Revalidation request and outcome value objects."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class OutcomeStatus(StrEnum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class RevalidationRequest(BaseModel):
    """Outbound call to the frontend revalidation endpoint."""

    method: str = "GET"
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    slug: str


class RevalidationOutcome(BaseModel):
    """Result of one notification attempt. Logged, never raised."""

    status: OutcomeStatus
    slug: str = ""
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == OutcomeStatus.SUCCEEDED

    @property
    def failed(self) -> bool:
        return self.status == OutcomeStatus.FAILED

    @classmethod
    def skip(cls, slug: str = "") -> RevalidationOutcome:
        return cls(status=OutcomeStatus.SKIPPED, slug=slug)
