"""
Usage Logging
=============
Usage event logging shared by all Flingoos services.

    from flingoos_shared.usage_logging import InMemoryUsageStore, log_usage_event
    from flingoos_shared.usage_logging import MAIN_METRICS, get_counter_updates
"""

from .types import (
    UsageService,
    AdminPanelAction,
    McpAction,
    VideoForgeAction,
    BillingAction,
    UsageAction,
    RecordingSource,
    OutputType,
    LegacySessionType,
    ExportType,
    BaseEventProperties,
    SessionEventProperties,
    SessionCompleteProperties,
    ExportEventProperties,
    ChatbotMessageProperties,
    McpContextListProperties,
    McpContextGetProperties,
    McpContextSearchProperties,
    McpContextModifyProperties,
    VideoForgeProperties,
    BillingEventProperties,
    UsageEvent,
    UsageEventRequest,
    UsageEventResponse,
    UsageLogOptions,
    McpLogOptions,
    UsageTimeseriesDataPoint,
    CounterUpdates,
)
from .constants import (
    ADMIN_PANEL_ACTIONS,
    MCP_ACTIONS,
    VIDEO_FORGE_ACTIONS,
    BILLING_ACTIONS,
    ALL_ACTIONS,
    is_valid_action,
    is_admin_panel_action,
    is_mcp_action,
    is_video_forge_action,
    is_billing_action,
    USAGE_SERVICES,
    USAGE_PATHS,
    get_daily_counter_path,
    get_org_counter_path,
    get_daily_user_doc_id,
    CHART_COLORS,
    MAIN_METRICS,
    SECONDARY_METRICS,
    MCP_METRICS,
    VIDEO_FORGE_METRICS,
    BILLING_METRICS,
    ALL_COUNTER_FIELDS,
)
from .server import (
    MCP_SERVICE,
    get_daily_period_id,
    generate_event_id,
    Increment,
    IncrementFn,
    get_counter_updates,
    UsageStore,
    InMemoryUsageStore,
    log_usage_event,
    log_mcp_usage,
    create_log_context_list,
    create_log_context_get,
    create_log_context_search,
    create_log_context_modify,
)

__all__ = [
    # Types
    "UsageService",
    "AdminPanelAction",
    "McpAction",
    "VideoForgeAction",
    "BillingAction",
    "UsageAction",
    "RecordingSource",
    "OutputType",
    "LegacySessionType",
    "ExportType",
    "BaseEventProperties",
    "SessionEventProperties",
    "SessionCompleteProperties",
    "ExportEventProperties",
    "ChatbotMessageProperties",
    "McpContextListProperties",
    "McpContextGetProperties",
    "McpContextSearchProperties",
    "McpContextModifyProperties",
    "VideoForgeProperties",
    "BillingEventProperties",
    "UsageEvent",
    "UsageEventRequest",
    "UsageEventResponse",
    "UsageLogOptions",
    "McpLogOptions",
    "UsageTimeseriesDataPoint",
    "CounterUpdates",
    # Constants
    "ADMIN_PANEL_ACTIONS",
    "MCP_ACTIONS",
    "VIDEO_FORGE_ACTIONS",
    "BILLING_ACTIONS",
    "ALL_ACTIONS",
    "is_valid_action",
    "is_admin_panel_action",
    "is_mcp_action",
    "is_video_forge_action",
    "is_billing_action",
    "USAGE_SERVICES",
    "USAGE_PATHS",
    "get_daily_counter_path",
    "get_org_counter_path",
    "get_daily_user_doc_id",
    "CHART_COLORS",
    "MAIN_METRICS",
    "SECONDARY_METRICS",
    "MCP_METRICS",
    "VIDEO_FORGE_METRICS",
    "BILLING_METRICS",
    "ALL_COUNTER_FIELDS",
    # Server
    "MCP_SERVICE",
    "get_daily_period_id",
    "generate_event_id",
    "Increment",
    "IncrementFn",
    "get_counter_updates",
    "UsageStore",
    "InMemoryUsageStore",
    "log_usage_event",
    "log_mcp_usage",
    "create_log_context_list",
    "create_log_context_get",
    "create_log_context_search",
    "create_log_context_modify",
]
