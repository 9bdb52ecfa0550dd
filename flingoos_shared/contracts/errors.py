"""
Service Error Data Contracts
============================
Error shapes returned by the Session Manager and forge APIs.

New endpoints should return ``ErrorEnvelopeSchema`` from ``pairing``; these
remain for the endpoints that already emit them.
"""

from pydantic import BaseModel, Field
from typing import Optional, Literal


class StandardErrorResponseSchema(BaseModel):
    """Minimal ``{success: false, error}`` response."""
    success: Literal[False]
    error: str


class ServiceErrorEnvelopeSchema(BaseModel):
    """Structured error raised between the Session Manager, Bridge and forge."""
    error_code: Literal["BRIDGE_DOWN", "FORGE_TIMEOUT", "INVALID_SESSION", "PROCESSING_FAILED"]
    error_message: str
    correlation_id: str
    timestamp: str
    retry_after: Optional[float] = Field(None, ge=0.0, description="Seconds before the client may retry")
