"""
Usage Logging Types
===================
Event, request and option models for Flingoos usage logging.
Shared by the admin panel, MCP server and any other service that logs usage.

Event documents are stored with these fields (alphabetical in Firestore):
action, component, event_id, org_id, period_id, properties, service,
timestamp, user_email, user_id.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Literal, Optional, Union

from ..config import settings


# =============================================================================
# SERVICES & ACTIONS
# =============================================================================

UsageService = Literal[
    "admin-panel",          # Admin Panel (web)
    "flingoos-mcp",         # MCP server
    "flingoos-mcp-tools",   # MCP tools
    "flingoos-ambient",     # Ambient service
    "video-forge",          # Video forge service
]

AdminPanelAction = Literal[
    "session",              # Recording session started
    "session_complete",     # Recording session completed (with duration)
    "workflow_edit",
    "publish",
    "unpublish",
    "export",
    "chatbot_message",
    "enrich_click",
    "daily_active_user",    # First activity of the day per user
]

McpAction = Literal[
    "mcp_context_list",
    "mcp_context_get",
    "mcp_context_search",
    "mcp_context_modify",
    "mcp_context_generate",
]

VideoForgeAction = Literal[
    "video_forge_analysis",       # standard mode
    "video_forge_augmentation",   # additive mode
]

BillingAction = Literal[
    "billing_page_viewed",
    "billing_plan_selected",
    "billing_checkout_started",
    "billing_checkout_completed",
    "billing_free_extension",
    "subscription_created",
    "subscription_updated",
    "subscription_canceled",
    "payment_succeeded",
    "payment_failed",
]

UsageAction = Union[AdminPanelAction, McpAction, VideoForgeAction, BillingAction]

# HOW the session was captured
RecordingSource = Literal["screen", "camera"]

# WHAT the session is for
OutputType = Literal["workflow", "teach_ai"]

# Deprecated single-dimension session type
LegacySessionType = Literal["screen", "camera", "teach_ai"]

ExportType = Literal["uipath", "power_automate", "json", "pdf", "markdown", "n8n"]


# =============================================================================
# EVENT PROPERTIES
# =============================================================================

class BaseEventProperties(BaseModel):
    """Properties attached to any event; unknown keys are kept."""

    class Config:
        extra = "allow"


class SessionEventProperties(BaseEventProperties):
    recording_source: Optional[RecordingSource] = None
    output_type: Optional[OutputType] = None
    session_type: Optional[LegacySessionType] = Field(None, description="Deprecated; use recording_source + output_type")


class SessionCompleteProperties(BaseEventProperties):
    session_duration_ms: Optional[float] = None


class ExportEventProperties(BaseEventProperties):
    export_type: Optional[ExportType] = None


class ChatbotMessageProperties(BaseEventProperties):
    message_length: Optional[int] = None
    message_text: Optional[str] = None


class McpContextListProperties(BaseEventProperties):
    scope: Optional[str] = None
    results_count: Optional[int] = None


class McpContextGetProperties(BaseEventProperties):
    context_id: Optional[str] = None
    context_kind: Optional[Literal["project", "session"]] = None
    session_type: Optional[str] = None


class McpContextSearchProperties(BaseEventProperties):
    results_count: Optional[int] = None
    search_status: Optional[str] = None


class McpContextModifyProperties(BaseEventProperties):
    context_id: Optional[str] = None
    target_type: Optional[str] = None
    auto_confirm: Optional[bool] = None
    modification_success: Optional[bool] = None


class VideoForgeProperties(BaseEventProperties):
    session_id: Optional[str] = None
    model: Optional[str] = None
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None
    cost_usd: Optional[float] = None
    video_duration_seconds: Optional[float] = None
    video_mode: Optional[str] = Field(None, description='"inline" or "files_api"')
    video_fps: Optional[float] = None
    input_type: Optional[str] = Field(None, description='"workflow_recording" or "teaching_session"')
    is_augmentation: Optional[bool] = None


class BillingEventProperties(BaseEventProperties):
    plan_id: Optional[str] = None
    plan_type: Optional[Literal["individual", "business"]] = None
    amount_usd: Optional[float] = None
    currency: Optional[str] = None
    subscription_id: Optional[str] = None


# =============================================================================
# EVENTS
# =============================================================================

class UsageEvent(BaseModel):
    """Event document as written to /usage/events/data."""
    action: UsageAction
    component: Optional[str] = None
    event_id: str
    org_id: str
    period_id: str = Field(..., description="UTC day, YYYY-MM-DD")
    properties: Optional[Dict[str, Any]] = None
    service: UsageService
    timestamp: Any = Field(..., description="Server timestamp sentinel or ISO string")
    user_email: str
    user_id: str


class UsageEventRequest(BaseModel):
    """Body of the admin panel usage API."""
    action: UsageAction
    component: Optional[str] = None
    properties: Optional[Dict[str, Any]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "action": "session",
                "component": "recording-panel",
                "properties": {"recording_source": "screen", "output_type": "workflow"}
            }
        }


class UsageEventResponse(BaseModel):
    success: bool
    event_id: Optional[str] = None
    period_id: Optional[str] = None
    skipped: Optional[bool] = None
    error: Optional[str] = None


# =============================================================================
# LOGGER OPTIONS
# =============================================================================

class UsageLogOptions(BaseModel):
    action: UsageAction
    user_id: str
    user_email: Optional[str] = None
    org_id: str
    service: UsageService = Field(
        default_factory=lambda: settings.DEFAULT_USAGE_SERVICE,
        validate_default=True,
        description="Logging service; defaults to the USAGE_SERVICE environment setting",
    )
    component: Optional[str] = None
    properties: Optional[Dict[str, Any]] = None


class McpLogOptions(BaseModel):
    action: McpAction
    user_id: str
    user_email: Optional[str] = None
    org_id: str
    component: str
    properties: Optional[Dict[str, Any]] = None


# =============================================================================
# TIMESERIES
# =============================================================================

class UsageTimeseriesDataPoint(BaseModel):
    """One day of counters, as plotted by the admin panel charts."""
    period_id: str

    sessions_started: float = 0
    sessions_completed: float = 0
    sessions_screen: float = 0
    sessions_camera: float = 0
    sessions_workflow: float = 0
    sessions_teach_ai: float = 0

    publishes: float = 0
    unpublishes: float = 0
    exports: float = 0
    n8n_exports: float = 0

    workflow_edits: float = 0
    chatbot_messages: float = 0
    enrich_clicks: float = 0
    total_session_duration_ms: float = 0
    unique_users: float = 0

    mcp_context_list: float = 0
    mcp_context_get: float = 0
    mcp_context_search: float = 0
    mcp_context_modify: float = 0
    mcp_context_generate: float = 0
    mcp_total: float = 0


# Counter field -> increment directive
CounterUpdates = Dict[str, Any]
