"""
Bridge Command Data Contract
============================
Schema for commands sent from the Session Manager to the desktop Bridge.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any, Literal


BridgeCommand = Literal["ping", "status", "audio_start", "audio_stop"]


class BridgeCommandRequestSchema(BaseModel):
    """Command request posted to the Bridge command API."""
    command: BridgeCommand = Field(..., description="Command: 'ping', 'status', 'audio_start', 'audio_stop'")
    timestamp: float = Field(..., description="Unix timestamp when the command was issued")

    class Config:
        json_schema_extra = {
            "example": {
                "command": "audio_start",
                "timestamp": 1705312200.0
            }
        }


class BridgeCommandResponseSchema(BaseModel):
    """Response returned by the Bridge command API."""
    success: bool = Field(..., description="Whether the command succeeded")
    message: str = Field(..., description="Human-readable result message")
    timestamp: Optional[float] = Field(None, description="Bridge-side Unix timestamp")
    session_id: Optional[str] = Field(None, description="Session affected by the command")
    collectors: Optional[List[str]] = Field(None, description="Active collectors on the device")
    timeout_seconds: Optional[float] = Field(None, description="Command timeout in seconds")
    data: Optional[Dict[str, Any]] = Field(None, description="Command-specific payload")
    error: Optional[str] = Field(None, description="Error message when success is false")
