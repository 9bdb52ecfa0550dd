"""
Device Authentication Data Contracts
====================================
Schemas for Bridge device proofs and the JWTs the Session Manager issues
once a device is authenticated.
"""

from pydantic import BaseModel, Field
from typing import Optional, Literal


# =============================================================================
# DEVICE PROOF
# =============================================================================

class DeviceProofRequestSchema(BaseModel):
    """Challenge sent by the Session Manager to the Bridge."""
    challenge: str = Field(..., description="Base64 encoded challenge")
    timestamp: str = Field(..., description="ISO-8601 timestamp")


class DeviceProofResponseSchema(BaseModel):
    """Signed proof returned by the Bridge."""
    device_id: str
    nonce: str = Field(..., description="32-byte random nonce (hex)")
    proof: str = Field(..., description="Ed25519 signature (hex)")
    timestamp: str = Field(..., description="ISO-8601 timestamp")
    public_key: str = Field(..., description="Ed25519 public key (hex)")
    hostname: str
    bridge_version: Optional[str] = None


class DeviceProofPayloadSchema(BaseModel):
    """Payload that the Bridge signs to produce ``proof``."""
    device_id: str
    nonce: str
    timestamp: str
    bridge_version: Optional[str] = None
    hostname: str
    challenge: Optional[str] = Field(None, description="Original challenge for challenge-response")


# =============================================================================
# JWT
# =============================================================================

class AuthTokenResponseSchema(BaseModel):
    """Successful authentication response."""
    authenticated: Literal[True]
    token: str = Field(..., description="JWT (HS256)")
    expires_at: str = Field(..., description="ISO-8601 expiry")
    device_id: str
    fingerprint: str


class AuthClaimsSchema(BaseModel):
    """Claims carried in the Session Manager JWT."""
    sub: str = Field(..., description="Device fingerprint")
    aud: str = Field(..., description="Device ID")
    iat: int = Field(..., description="Issued at (Unix timestamp)")
    exp: int = Field(..., description="Expires at (Unix timestamp)")
    jti: str = Field(..., description="JWT ID for replay prevention")
    iss: Literal["flingoos-session-manager"]
    device_id: str
    fingerprint: str
