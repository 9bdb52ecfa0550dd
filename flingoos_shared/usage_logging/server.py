"""
Server-Side Usage Logging
=========================
Writes usage events and counter increments to the usage store.

Each logged event writes:
1. /usage/events/data/{auto-id}                     - the event document
2. /usage/counters/global/totals                    - all-time counters
3. /usage/counters/daily/{period_id}                - daily counters
4. /usage/counters/daily/{period_id}/orgs/{org_id}  - daily per-org counters

The store is passed in as a ``UsageStore`` so each service can plug in its
own Firestore client.
"""

import uuid
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel

from ..config import settings
from .constants import USAGE_PATHS, get_daily_counter_path, get_org_counter_path
from .types import CounterUpdates, McpLogOptions, UsageEventResponse, UsageLogOptions


MCP_SERVICE = "flingoos-mcp"


# =============================================================================
# PERIOD & EVENT IDS
# =============================================================================

def get_daily_period_id(date: Optional[datetime] = None) -> str:
    """
    Daily period ID in UTC, so every server agrees on the day.

    Returns:
        "YYYY-MM-DD"
    """
    date = date or datetime.now(timezone.utc)
    if date.tzinfo is not None:
        date = date.astimezone(timezone.utc)
    return date.strftime("%Y-%m-%d")


def generate_event_id() -> str:
    return f"evt_{uuid.uuid4()}"


# =============================================================================
# COUNTER UPDATES
# =============================================================================

@dataclass(frozen=True)
class Increment:
    """Atomic add directive, the in-process stand-in for FieldValue.increment."""
    amount: float


IncrementFn = Callable[[float], Any]

# Actions that bump fixed counters by one
ACTION_COUNTERS = {
    "workflow_edit": ("workflow_edits",),
    "publish": ("publishes",),
    "export": ("exports",),
    "chatbot_message": ("chatbot_messages",),
    "enrich_click": ("enrich_clicks",),
    "daily_active_user": ("unique_users",),
    "mcp_context_list": ("mcp_context_list", "mcp_total"),
    "mcp_context_get": ("mcp_context_get", "mcp_total"),
    "mcp_context_search": ("mcp_context_search", "mcp_total"),
    "mcp_context_modify": ("mcp_context_modify", "mcp_total"),
}

# Property -> counter accumulated for video-forge actions
VIDEO_FORGE_ACCUMULATORS = {
    "input_tokens": "video_forge_input_tokens",
    "output_tokens": "video_forge_output_tokens",
    "cost_usd": "video_forge_cost_usd",
}

# Legacy session_type -> (recording source counter, output type counter)
LEGACY_SESSION_COUNTERS = {
    "screen": ("sessions_screen", "sessions_workflow"),
    "camera": ("sessions_camera", "sessions_workflow"),
    "teach_ai": ("sessions_screen", "sessions_teach_ai"),
}


def _positive_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def _properties_dict(properties: Union[Mapping[str, Any], BaseModel, None]) -> Mapping[str, Any]:
    if properties is None:
        return {}
    if isinstance(properties, BaseModel):
        return properties.model_dump()
    return properties


def _session_counters(props: Mapping[str, Any], increment: IncrementFn) -> CounterUpdates:
    """
    Session starts are tracked on two independent dimensions:
    recording source (screen | camera) and output type (workflow | teach_ai).

    Each family sums to sessions_started.
    """
    updates: CounterUpdates = {"sessions_started": increment(1)}

    recording_source = props.get("recording_source")
    if recording_source == "screen":
        updates["sessions_screen"] = increment(1)
    elif recording_source == "camera":
        updates["sessions_camera"] = increment(1)

    output_type = props.get("output_type")
    if output_type == "workflow":
        updates["sessions_workflow"] = increment(1)
    elif output_type == "teach_ai":
        updates["sessions_teach_ai"] = increment(1)

    if not recording_source and not output_type:
        legacy = LEGACY_SESSION_COUNTERS.get(props.get("session_type"))
        if legacy:
            for field in legacy:
                updates[field] = increment(1)

    # Default the missing dimension to its primary member.
    # TODO: drop once every client sends both recording_source and output_type.
    if recording_source and not output_type:
        updates["sessions_workflow"] = increment(1)
    elif output_type and not recording_source:
        updates["sessions_screen"] = increment(1)

    return updates


def get_counter_updates(
    action: str,
    properties: Union[Mapping[str, Any], BaseModel, None] = None,
    increment: IncrementFn = Increment,
) -> CounterUpdates:
    """
    Map an action and its properties to counter increments.

    Args:
        action: Usage action (unknown actions map to no counters)
        properties: Event properties as a dict or a properties model
        increment: Builds the increment value, e.g. ``firestore.Increment``

    Returns:
        Dict of counter field -> increment value

    Example:
        >>> get_counter_updates("mcp_context_get")
        {'mcp_context_get': Increment(amount=1), 'mcp_total': Increment(amount=1)}
    """
    props = _properties_dict(properties)

    if action == "session":
        return _session_counters(props, increment)

    updates: CounterUpdates = {}
    for field in ACTION_COUNTERS.get(action, ()):
        updates[field] = increment(1)

    if action == "session_complete":
        updates["sessions_completed"] = increment(1)
        duration_ms = props.get("session_duration_ms")
        if _positive_number(duration_ms):
            updates["total_session_duration_ms"] = increment(duration_ms)

    elif action in ("video_forge_analysis", "video_forge_augmentation"):
        for prop, field in VIDEO_FORGE_ACCUMULATORS.items():
            value = props.get(prop)
            if _positive_number(value):
                updates[field] = increment(value)

    return updates


# =============================================================================
# STORE ADAPTERS
# =============================================================================

class UsageStore(ABC):
    """
    Abstract document store for usage logging.

    Implementations wrap a Firestore client (firebase-admin or similar).
    """

    @abstractmethod
    async def add_document(self, collection_path: str, data: Dict[str, Any]) -> Any:
        """Add a document with an auto-generated ID; returns the ID or reference."""
        pass

    @abstractmethod
    async def set_document_merge(self, document_path: str, data: Dict[str, Any]) -> None:
        """Merge ``data`` into the document, applying increment values atomically."""
        pass

    @abstractmethod
    def increment(self, amount: float) -> Any:
        """Increment directive understood by ``set_document_merge``."""
        pass

    @abstractmethod
    def server_timestamp(self) -> Any:
        """Timestamp value resolved by the store on write."""
        pass


class InMemoryUsageStore(UsageStore):
    """
    Dict-backed store, used in tests and local development.

    collections: collection path -> {doc_id: data}
    documents: document path -> data
    """

    def __init__(self):
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = defaultdict(dict)
        self.documents: Dict[str, Dict[str, Any]] = {}

    async def add_document(self, collection_path: str, data: Dict[str, Any]) -> str:
        doc_id = uuid.uuid4().hex
        self.collections[collection_path][doc_id] = dict(data)
        return doc_id

    async def set_document_merge(self, document_path: str, data: Dict[str, Any]) -> None:
        document = self.documents.setdefault(document_path, {})
        for key, value in data.items():
            if isinstance(value, Increment):
                document[key] = document.get(key, 0) + value.amount
            else:
                document[key] = value

    def increment(self, amount: float) -> Increment:
        return Increment(amount)

    def server_timestamp(self) -> str:
        return datetime.now(timezone.utc).isoformat()


# =============================================================================
# LOGGING
# =============================================================================

async def log_usage_event(
    options: Union[UsageLogOptions, Mapping[str, Any]],
    store: UsageStore,
) -> UsageEventResponse:
    """
    Log a usage event and update the global, daily and per-org counters.

    Store failures propagate to the caller. Nothing is written when usage
    logging is disabled in settings.

    Args:
        options: Who did what, from which service
        store: Usage store adapter

    Returns:
        UsageEventResponse with the event and period IDs
    """
    if not isinstance(options, UsageLogOptions):
        options = UsageLogOptions.model_validate(options)

    if not settings.USAGE_LOGGING_ENABLED:
        logger.debug(f"[UsageLog] Usage logging disabled, skipping {options.action}")
        return UsageEventResponse(success=True, skipped=True)

    period_id = get_daily_period_id()
    event_id = generate_event_id()
    timestamp = store.server_timestamp()

    # Firestore rejects undefined values
    clean_properties = {k: v for k, v in (options.properties or {}).items() if v is not None}

    event_data = {
        "action": options.action,
        "timestamp": timestamp,
        "user_email": options.user_email or options.user_id,
        "org_id": options.org_id,
        "service": options.service,
        "event_id": event_id,
        "user_id": options.user_id,
        "component": options.component or None,
        "properties": clean_properties or None,
        "period_id": period_id,
    }
    await store.add_document(USAGE_PATHS["EVENTS"]["DATA"], event_data)

    counter_updates = get_counter_updates(options.action, options.properties, store.increment)

    await store.set_document_merge(USAGE_PATHS["COUNTERS"]["GLOBAL_TOTALS"], {
        **counter_updates,
        "last_updated": timestamp,
    })
    await store.set_document_merge(get_daily_counter_path(period_id), {
        "period_id": period_id,
        **counter_updates,
        "last_updated": timestamp,
    })
    await store.set_document_merge(get_org_counter_path(period_id, options.org_id), {
        "period_id": period_id,
        "org_id": options.org_id,
        **counter_updates,
        "last_updated": timestamp,
    })

    logger.debug(f"[UsageLog] {options.action} -> {sorted(counter_updates)} ({event_id})")
    return UsageEventResponse(success=True, event_id=event_id, period_id=period_id)


async def log_mcp_usage(
    options: Union[McpLogOptions, Mapping[str, Any]],
    store: UsageStore,
) -> UsageEventResponse:
    """
    Log an MCP tool call under the flingoos-mcp service.

    Never raises: usage logging must not break tool execution, so failures
    are logged and reported in the response.
    """
    action = None
    try:
        if isinstance(options, Mapping):
            action = options.get("action")
        if not isinstance(options, McpLogOptions):
            options = McpLogOptions.model_validate(options)
        action = options.action
        result = await log_usage_event(
            UsageLogOptions(**options.model_dump(), service=MCP_SERVICE),
            store,
        )
        if not result.skipped:
            logger.info(
                f"[UsageLog] {options.action} logged for "
                f"{options.user_email or options.user_id} (org: {options.org_id})"
            )
        return result
    except Exception as e:
        logger.error(f"[UsageLog] Failed to log {action}: {e}")
        return UsageEventResponse(success=False, error=str(e))


# =============================================================================
# MCP TOOL LOGGERS
# =============================================================================

def create_log_context_list(store: UsageStore) -> Callable[..., Awaitable[UsageEventResponse]]:
    """Logger for the context-list tool."""
    async def log_context_list(
        user_id: str,
        org_id: str,
        scope: str,
        results_count: int,
        user_email: Optional[str] = None,
    ) -> UsageEventResponse:
        return await log_mcp_usage(McpLogOptions(
            action="mcp_context_list",
            user_id=user_id,
            user_email=user_email,
            org_id=org_id,
            component="context-list",
            properties={"scope": scope, "results_count": results_count},
        ), store)

    return log_context_list


def create_log_context_get(store: UsageStore) -> Callable[..., Awaitable[UsageEventResponse]]:
    """Logger for the context-get tool."""
    async def log_context_get(
        user_id: str,
        org_id: str,
        context_id: str,
        context_kind: str,
        session_type: Optional[str] = None,
        user_email: Optional[str] = None,
    ) -> UsageEventResponse:
        return await log_mcp_usage(McpLogOptions(
            action="mcp_context_get",
            user_id=user_id,
            user_email=user_email,
            org_id=org_id,
            component="context-get",
            properties={
                "context_id": context_id,
                "context_kind": context_kind,
                "session_type": session_type,
            },
        ), store)

    return log_context_get


def create_log_context_search(store: UsageStore) -> Callable[..., Awaitable[UsageEventResponse]]:
    """Logger for the context-search tool."""
    async def log_context_search(
        user_id: str,
        org_id: str,
        results_count: int,
        status: str,
        user_email: Optional[str] = None,
    ) -> UsageEventResponse:
        return await log_mcp_usage(McpLogOptions(
            action="mcp_context_search",
            user_id=user_id,
            user_email=user_email,
            org_id=org_id,
            component="context-search",
            properties={"results_count": results_count, "search_status": status},
        ), store)

    return log_context_search


def create_log_context_modify(store: UsageStore) -> Callable[..., Awaitable[UsageEventResponse]]:
    """Logger for the context-modify tool."""
    async def log_context_modify(
        user_id: str,
        org_id: str,
        context_id: str,
        target_type: str,
        auto_confirm: bool,
        was_successful: bool,
        user_email: Optional[str] = None,
    ) -> UsageEventResponse:
        return await log_mcp_usage(McpLogOptions(
            action="mcp_context_modify",
            user_id=user_id,
            user_email=user_email,
            org_id=org_id,
            component="context-modify",
            properties={
                "context_id": context_id,
                "target_type": target_type,
                "auto_confirm": auto_confirm,
                "modification_success": was_successful,
            },
        ), store)

    return log_context_modify
