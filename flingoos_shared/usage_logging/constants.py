"""
Usage Logging Constants
=======================
Action lists, Firestore paths and chart metric configurations for usage
logging.
"""

from typing import Dict, get_args

from .types import AdminPanelAction, BillingAction, McpAction, UsageService, VideoForgeAction


# =============================================================================
# ACTIONS
# =============================================================================

ADMIN_PANEL_ACTIONS = get_args(AdminPanelAction)
MCP_ACTIONS = get_args(McpAction)
VIDEO_FORGE_ACTIONS = get_args(VideoForgeAction)
BILLING_ACTIONS = get_args(BillingAction)

ALL_ACTIONS = ADMIN_PANEL_ACTIONS + MCP_ACTIONS + VIDEO_FORGE_ACTIONS + BILLING_ACTIONS


def is_valid_action(action: str) -> bool:
    return action in ALL_ACTIONS


def is_admin_panel_action(action: str) -> bool:
    return action in ADMIN_PANEL_ACTIONS


def is_mcp_action(action: str) -> bool:
    return action in MCP_ACTIONS


def is_video_forge_action(action: str) -> bool:
    return action in VIDEO_FORGE_ACTIONS


def is_billing_action(action: str) -> bool:
    return action in BILLING_ACTIONS


USAGE_SERVICES = get_args(UsageService)


# =============================================================================
# FIRESTORE PATHS
# =============================================================================

USAGE_PATHS = {
    "BASE": "usage",
    "EVENTS": {
        "ROOT": "usage/events",
        "DATA": "usage/events/data",
    },
    "COUNTERS": {
        "ROOT": "usage/counters",
        "GLOBAL_TOTALS": "usage/counters/global/totals",
        "DAILY": "usage/counters/daily",
        "ORGS_SUBCOLLECTION": "orgs",
    },
    # Daily active user dedup: /usage/daily_users/records/{period_id}_{user_id}
    "DAILY_USERS": {
        "ROOT": "usage/daily_users",
        "RECORDS": "usage/daily_users/records",
    },
}


def get_daily_counter_path(period_id: str) -> str:
    """/usage/counters/daily/{period_id}"""
    return f"{USAGE_PATHS['COUNTERS']['DAILY']}/{period_id}"


def get_org_counter_path(period_id: str, org_id: str) -> str:
    """/usage/counters/daily/{period_id}/orgs/{org_id}"""
    return f"{get_daily_counter_path(period_id)}/{USAGE_PATHS['COUNTERS']['ORGS_SUBCOLLECTION']}/{org_id}"


def get_daily_user_doc_id(period_id: str, user_id: str) -> str:
    return f"{period_id}_{user_id}"


# =============================================================================
# METRIC CONFIGURATIONS
# =============================================================================

CHART_COLORS = {
    "blue": "#3B82F6",
    "cyan": "#06B6D4",
    "teal": "#14B8A6",
    "green": "#10B981",
    "yellow": "#F59E0B",
    "orange": "#F97316",
    "pink": "#EC4899",
    "purple": "#8B5CF6",
    "indigo": "#6366F1",
    "red": "#EF4444",
}


def _metric(label: str, color: str) -> Dict[str, str]:
    return {"label": label, "color": CHART_COLORS[color]}


# Shown together on the main chart
MAIN_METRICS = {
    "sessions_started": _metric("Sessions Started", "blue"),
    "sessions_completed": _metric("Sessions Completed", "teal"),   # logged by video-forge
    "sessions_failed": _metric("Sessions Failed", "orange"),       # logged by video-forge
    "publishes": _metric("Publishes", "green"),
    "unpublishes": _metric("Unpublishes", "orange"),
    "exports": _metric("Exports", "cyan"),
    "n8n_exports": _metric("n8n Exports", "red"),
    "sessions_screen": _metric("Screen Sessions", "purple"),
    "sessions_camera": _metric("Camera Sessions", "yellow"),
    "sessions_workflow": _metric("Workflow Sessions", "blue"),
    "sessions_teach_ai": _metric("Teach AI Sessions", "pink"),
}

# Dropdown selector on the secondary chart
SECONDARY_METRICS = {
    "chatbot_messages": _metric("Chatbot Messages", "purple"),
    "workflow_edits": _metric("Workflow Edits", "green"),
    "enrich_clicks": _metric("Enrich Clicks", "yellow"),
    "mean_session_length": _metric("Mean Session Length (sec)", "indigo"),
    "unique_users": _metric("Total Daily Log-ins", "teal"),
}

MCP_METRICS = {
    "mcp_context_list": _metric("MCP List", "cyan"),
    "mcp_context_get": _metric("MCP Get", "purple"),
    "mcp_context_search": _metric("MCP Search", "green"),
    "mcp_context_modify": _metric("MCP Modify", "yellow"),
    "mcp_context_generate": _metric("MCP Generate", "orange"),
    "mcp_total": _metric("MCP Total", "blue"),
}

VIDEO_FORGE_METRICS = {
    "video_forge_input_tokens": _metric("Input Tokens", "yellow"),
    "video_forge_output_tokens": _metric("Output Tokens", "green"),
    "video_forge_cost_usd": _metric("Cost ($)", "orange"),
}

BILLING_METRICS = {
    "active_subscriptions_individual": _metric("Individual Subscribers", "cyan"),
    "active_subscriptions_business": _metric("Business Subscribers", "purple"),
    "new_subscriptions": _metric("New Subscriptions", "green"),
    "canceled_subscriptions": _metric("Canceled Subscriptions", "red"),
    "billing_page_views": _metric("Billing Page Views", "blue"),
    "checkout_started": _metric("Checkouts Started", "yellow"),
    "checkout_completed": _metric("Checkouts Completed", "teal"),
    "free_extensions_claimed": _metric("Free Extensions", "orange"),
    "revenue_usd": _metric("Revenue ($)", "green"),
}

# Every counter field that can appear in a timeseries document
ALL_COUNTER_FIELDS = (
    # Session lifecycle
    "sessions_started",
    "sessions_completed",
    "sessions_failed",
    # Recording source
    "sessions_screen",
    "sessions_camera",
    # Output type
    "sessions_workflow",
    "sessions_teach_ai",
    # Outputs
    "publishes",
    "unpublishes",
    "exports",
    "n8n_exports",
    # Secondary
    "workflow_edits",
    "chatbot_messages",
    "enrich_clicks",
    "total_session_duration_ms",
    "unique_users",
    # MCP
    "mcp_context_list",
    "mcp_context_get",
    "mcp_context_search",
    "mcp_context_modify",
    "mcp_context_generate",
    "mcp_total",
    # Video forge
    "video_forge_input_tokens",
    "video_forge_output_tokens",
    "video_forge_cost_usd",
    # Billing
    "active_subscriptions_individual",
    "active_subscriptions_business",
    "new_subscriptions",
    "canceled_subscriptions",
    "billing_page_views",
    "checkout_started",
    "checkout_completed",
    "free_extensions_claimed",
    "revenue_usd",
)
