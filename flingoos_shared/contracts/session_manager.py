"""
Session Manager Data Contracts
==============================
Schemas for the Session Manager API, its internal session state and the
WebSocket events it pushes to the UI.
"""

from pydantic import BaseModel, Field
from typing import Annotated, List, Optional, Dict, Any, Literal, Union

from ..constants import SessionStatus


# =============================================================================
# API RESPONSES
# =============================================================================

class SessionManagerHealthSchema(BaseModel):
    """Health check response."""
    status: Literal["healthy"] = Field(..., description="Always 'healthy' when the service responds")
    bridge_connected: bool = Field(..., description="Whether a Bridge is connected")
    active_sessions: int = Field(..., description="Number of active sessions")
    timestamp: str = Field(..., description="ISO-8601 server time")


class SessionStartResponseSchema(BaseModel):
    """Response when starting a recording session."""
    success: bool
    session_id: Optional[str] = None
    status: Optional[SessionStatus] = None
    message: Optional[str] = None
    error: Optional[str] = None


class SessionStopResponseSchema(BaseModel):
    """Response when stopping a recording session."""
    success: bool
    session_id: Optional[str] = None
    status: Optional[SessionStatus] = None
    message: Optional[str] = None
    error: Optional[str] = None


class SessionStatusResponseSchema(BaseModel):
    """Response from the status endpoint."""
    success: bool
    bridge_connected: Optional[bool] = None
    active_sessions: Optional[int] = None
    sessions: Optional[List[str]] = None
    workflow_results: Optional[int] = None


# =============================================================================
# INTERNAL STATE
# =============================================================================

class SessionInternalStateSchema(BaseModel):
    """
    Session Internal State - what the Session Manager keeps per session.

    Holds both Bridge responses and the downstream forge processing outcome.
    """
    session_id: str = Field(..., description="Unique session identifier")
    start_time: Optional[str] = Field(None, description="ISO-8601 start time")
    stop_time: Optional[str] = Field(None, description="ISO-8601 stop time")
    status: SessionStatus = Field(..., description="Current session status")
    bridge_response: Optional[Dict[str, Any]] = Field(None, description="Raw Bridge start response")
    bridge_stop_response: Optional[Dict[str, Any]] = Field(None, description="Raw Bridge stop response")
    workflow_ready: Optional[bool] = Field(None, description="Whether a workflow was produced")
    processing_id: Optional[str] = Field(None, description="Forge processing ID")
    firestore_path: Optional[str] = Field(None, description="Where results were written")
    workflow_id: Optional[str] = Field(None, description="Produced workflow ID")
    processing_time_seconds: Optional[float] = Field(None, ge=0.0, description="Forge processing time")
    error_message: Optional[str] = Field(None, description="Failure reason")


# Backward-compatible name used by older services
Session = SessionInternalStateSchema


# =============================================================================
# IDEMPOTENCY
# =============================================================================

class IdempotencyHeaderSchema(BaseModel):
    """
    Idempotency headers sent to the forge.

    Key format: ``session-{session_id}``.
    """
    idempotency_key: str = Field(..., alias="idempotency-key")
    x_force_rerun: Optional[Literal["true", "false"]] = Field(None, alias="x-force-rerun")

    class Config:
        populate_by_name = True


class IdempotentResponseSchema(BaseModel):
    idempotent_reuse: bool


# =============================================================================
# WEBSOCKET EVENTS
# =============================================================================

class SessionStartedEvent(BaseModel):
    type: Literal["session_started"] = "session_started"
    session_id: str
    message: str


class SessionStoppedEvent(BaseModel):
    type: Literal["session_stopped"] = "session_stopped"
    session_id: str
    message: str


class SessionErrorEvent(BaseModel):
    type: Literal["session_error"] = "session_error"
    error: str


class CompletedStepSchema(BaseModel):
    message: str
    status: str


class UploadStatusEvent(BaseModel):
    type: Literal["upload_status"] = "upload_status"
    current_step: str
    completed_steps: List[CompletedStepSchema] = Field(default_factory=list)
    total_steps: int


class WorkflowReadyEvent(BaseModel):
    type: Literal["workflow_ready"] = "workflow_ready"
    workflow_id: str
    title: str
    summary: str
    steps: List[Any] = Field(default_factory=list)
    guide_markdown: str


class UploadCompleteEvent(BaseModel):
    type: Literal["upload_complete"] = "upload_complete"
    message: str
    has_workflow: bool


SessionEventSchema = Annotated[
    Union[
        SessionStartedEvent,
        SessionStoppedEvent,
        SessionErrorEvent,
        UploadStatusEvent,
        WorkflowReadyEvent,
        UploadCompleteEvent,
    ],
    Field(discriminator="type"),
]
