"""Typed payloads for WorkOS webhook and event deliveries.

Only decoding lives here; signature verification is left to the caller.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from .known_or_unknown import KnownOrUnknown
from .organization_domains import OrganizationDomain


class VerificationType(str, Enum):
    EMAIL_VERIFICATION = "email_verification"


class VerificationStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    PENDING = "pending"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class Verification(BaseModel):
    type: KnownOrUnknown[VerificationType]
    status: KnownOrUnknown[VerificationStatus]
    user_id: str
    email: Optional[str] = None
    ip_address: str
    user_agent: str


class OrganizationDomainCreatedEvent(OrganizationDomain):
    pass


class OrganizationDomainUpdatedEvent(OrganizationDomain):
    pass


class OrganizationDomainDeletedEvent(OrganizationDomain):
    pass


class VerificationFailedReason(str, Enum):
    DOMAIN_VERIFICATION_PERIOD_EXPIRED = "domain_verification_period_expired"
    DOMAIN_VERIFIED_BY_OTHER_ORGANIZATION = "domain_verified_by_other_organization"


class OrganizationDomainVerificationFailedEvent(BaseModel):
    reason: KnownOrUnknown[VerificationFailedReason]
    organization_domain: OrganizationDomain


EVENT_TYPES: dict[str, type[BaseModel]] = {
    "organization_domain.created": OrganizationDomainCreatedEvent,
    "organization_domain.updated": OrganizationDomainUpdatedEvent,
    "organization_domain.deleted": OrganizationDomainDeletedEvent,
    "organization_domain.verification_failed": OrganizationDomainVerificationFailedEvent,
}

EventData = Union[BaseModel, dict[str, Any]]

class EventEnvelope(BaseModel):
    event: str
    data: dict[str, Any] = Field(default_factory=dict)


def parse_event(payload: str | bytes | dict[str, Any]) -> tuple[str, EventData]:
    """Decode an ``{"event": ..., "data": ...}`` envelope.

    Returns the event name and its typed payload. Events this library does not
    model yet come back as the raw ``data`` dict. A malformed envelope raises
    ``pydantic.ValidationError``.
    """
    if isinstance(payload, dict):
        envelope = EventEnvelope.model_validate(payload)
    else:
        envelope = EventEnvelope.model_validate_json(payload)
    model = EVENT_TYPES.get(envelope.event)
    if model is None:
        return envelope.event, envelope.data
    return envelope.event, model.model_validate(envelope.data)
