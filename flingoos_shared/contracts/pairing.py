"""
Pairing & Presence Data Contracts
=================================
Schemas for magic-link device pairing, user presence approval and the
canonical error envelope returned by those flows.

Security constraints enforced here:
- Tokens are opaque (no embedded structure, minimum 16 characters)
- Timestamps are strict ISO-8601 with a timezone
- Deep links must target the ``flingoos-bridge://`` scheme
- Clients cannot be told to poll faster than 100ms or slower than 5s
"""

import re
from pydantic import AfterValidator, BaseModel, Field, model_validator
from typing import Annotated, Any, Dict, List, Literal, Optional


OPAQUE_TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]{16,256}$")
ISO_8601_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,9})?(Z|[+-]\d{2}:\d{2})$"
)
SHORT_CODE_PATTERN = re.compile(r"^\d{4}$")
DEEP_LINK_SCHEME = "flingoos-bridge://"

MIN_POLL_AFTER_MS = 100
MAX_POLL_AFTER_MS = 5000

ErrorCode = Literal[
    "invalid_token",
    "token_expired",
    "ticket_invalid",
    "ticket_expired",
    "ticket_consumed",
    "pairing_expired",
    "presence_required",
    "presence_denied",
    "device_not_found",
    "device_unavailable",
    "device_stale",
    "rate_limited",
    "unauthorized",
    "forbidden",
    "internal_error",
]


def check_opaque_token(value: str) -> str:
    if not OPAQUE_TOKEN_PATTERN.match(value):
        raise ValueError("Invalid opaque token format")
    return value


def check_iso_timestamp(value: str) -> str:
    if not ISO_8601_PATTERN.match(value):
        raise ValueError("Invalid ISO-8601 timestamp")
    return value


def check_deep_link(value: str) -> str:
    if not value.startswith(DEEP_LINK_SCHEME):
        raise ValueError("Must be flingoos-bridge:// deep link")
    return value


def check_short_code(value: str) -> str:
    if not SHORT_CODE_PATTERN.match(value):
        raise ValueError("Must be 4-digit code")
    return value


OpaqueToken = Annotated[str, AfterValidator(check_opaque_token)]
IsoTimestamp = Annotated[str, AfterValidator(check_iso_timestamp)]
DeepLink = Annotated[str, AfterValidator(check_deep_link)]
ShortCode = Annotated[str, AfterValidator(check_short_code)]


# =============================================================================
# PAIRING
# =============================================================================

class PairIntentResponseSchema(BaseModel):
    """Response when the admin panel starts a device pairing."""
    pairing_token: OpaqueToken = Field(..., description="Opaque pairing token")
    deep_link: DeepLink = Field(..., description="flingoos-bridge://pair?t=<token>")
    expires_at: IsoTimestamp = Field(..., description="ISO-8601 expiry")

    class Config:
        json_schema_extra = {
            "example": {
                "pairing_token": "pair_abcd1234567890ef",
                "deep_link": "flingoos-bridge://pair?t=pair_abcd1234567890ef",
                "expires_at": "2024-01-15T10:30:00.000Z"
            }
        }


class PairCompleteRequestSchema(BaseModel):
    """Request sent by the Bridge to finish pairing."""
    pairing_token: OpaqueToken
    device_proof: str = Field(..., min_length=32, description="Ed25519 signature over the pairing token")


class DeviceRecordSchema(BaseModel):
    """
    Paired device as stored by the Session Manager.

    Path: /organizations/{org_id}/devices/{fingerprint}
    """
    fingerprint: str
    device_id: str
    org_id: str
    label: Optional[str] = Field(None, description="User-facing device name")
    paired_by: str = Field(..., description="User ID that paired the device")
    paired_at: IsoTimestamp
    last_heartbeat_at: IsoTimestamp
    expires_at: IsoTimestamp
    available: bool = Field(..., description="Bridge currently reachable")
    stale: bool = Field(..., description="No heartbeat within the staleness window")


class UserDeviceLinkSchema(BaseModel):
    """Link between a user and the device they last used."""
    user_id: str
    org_id: str
    fingerprint: str
    last_used_at: IsoTimestamp
    expires_at: IsoTimestamp


class UserDevicesResponseSchema(BaseModel):
    devices: List[DeviceRecordSchema] = Field(default_factory=list)
    default_fingerprint: Optional[str] = None


# =============================================================================
# PRESENCE
# =============================================================================

class PresenceIntentResponseSchema(BaseModel):
    """Response when the admin panel asks the Bridge to confirm presence."""
    presence_nonce: OpaqueToken
    deep_link: DeepLink = Field(..., description="flingoos-bridge://approve?t=<nonce>")
    short_code: ShortCode = Field(..., description="4-digit code shown on both screens")
    expires_at: IsoTimestamp


class PresenceCompleteRequestSchema(BaseModel):
    presence_nonce: OpaqueToken
    device_proof: str = Field(..., min_length=32)


class PresenceStatusResponseSchema(BaseModel):
    """
    Polling response for a presence request.

    A ready status always carries the ticket needed to start a session.
    """
    ready: bool
    presence_ticket: Optional[OpaqueToken] = None
    expires_at: Optional[IsoTimestamp] = None
    poll_after_ms: int = Field(..., ge=MIN_POLL_AFTER_MS, le=MAX_POLL_AFTER_MS)
    now: IsoTimestamp

    @model_validator(mode="after")
    def _ticket_when_ready(self) -> "PresenceStatusResponseSchema":
        if self.ready and not self.presence_ticket:
            raise ValueError("presence_ticket is required when ready is true")
        return self


class SessionOptionsSchema(BaseModel):
    stages: Optional[List[str]] = None
    media_processing: Optional[bool] = None

    class Config:
        extra = "allow"


class SessionStartRequestSchema(BaseModel):
    """Session start request; requires a valid presence ticket."""
    presence_ticket: OpaqueToken
    session_options: Optional[SessionOptionsSchema] = None


# =============================================================================
# ERRORS
# =============================================================================

class ErrorEnvelopeSchema(BaseModel):
    """Canonical error envelope for pairing, presence and session APIs."""
    code: ErrorCode
    http: int = Field(..., ge=400, le=599, description="HTTP status code (4xx/5xx)")
    message: str
    details: Optional[Dict[str, Any]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "code": "ticket_expired",
                "http": 400,
                "message": "Presence ticket has expired"
            }
        }
