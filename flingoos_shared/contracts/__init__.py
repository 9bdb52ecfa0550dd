"""
Flingoos Data Contracts
=======================
Stable schemas for every payload exchanged between the Session Manager,
Bridge, forge pipeline, admin panel and MCP tools, and for the documents
they store in Firestore.

All contracts are Pydantic models with built-in validation; the model
classes double as the types.
"""

from .bridge import BridgeCommand, BridgeCommandRequestSchema, BridgeCommandResponseSchema
from .session_manager import (
    SessionManagerHealthSchema,
    SessionStartResponseSchema,
    SessionStopResponseSchema,
    SessionStatusResponseSchema,
    SessionInternalStateSchema,
    Session,
    IdempotencyHeaderSchema,
    IdempotentResponseSchema,
    SessionStartedEvent,
    SessionStoppedEvent,
    SessionErrorEvent,
    CompletedStepSchema,
    UploadStatusEvent,
    WorkflowReadyEvent,
    UploadCompleteEvent,
    SessionEventSchema,
)
from .forge import (
    ForgeArtifactSchema,
    ForgeCountersSchema,
    StageExecutionSchema,
    ForgeManifestSchema,
    ForgeResponseSchema,
    ForgeJobResponseSchema,
    ForgeJob,
    TimeRangeSchema,
    TriggerSessionSchema,
    TriggerOptionsSchema,
    ForgeTriggerSchema,
    JobProgressSchema,
)
from .errors import StandardErrorResponseSchema, ServiceErrorEnvelopeSchema
from .workflow import WorkflowStepSchema, WorkflowDataSchema, Workflow, ProcessingMetadataSchema, FirestoreWorkflowSchema
from .auth import (
    DeviceProofRequestSchema,
    DeviceProofResponseSchema,
    DeviceProofPayloadSchema,
    AuthTokenResponseSchema,
    AuthClaimsSchema,
)
from .pairing import (
    ErrorCode,
    OpaqueToken,
    IsoTimestamp,
    DeepLink,
    ShortCode,
    MIN_POLL_AFTER_MS,
    MAX_POLL_AFTER_MS,
    PairIntentResponseSchema,
    PairCompleteRequestSchema,
    DeviceRecordSchema,
    UserDeviceLinkSchema,
    UserDevicesResponseSchema,
    PresenceIntentResponseSchema,
    PresenceCompleteRequestSchema,
    PresenceStatusResponseSchema,
    SessionOptionsSchema,
    SessionStartRequestSchema,
    ErrorEnvelopeSchema,
)
from .project import (
    ProjectVisibility,
    SessionType,
    ContextKind,
    CreateProjectSchema,
    UpdateProjectSchema,
    ProjectSchema,
    ProjectWithIdSchema,
    ProjectWithStatsSchema,
    SessionProjectFieldSchema,
    UpdateSessionProjectSchema,
    ProjectSessionSummarySchema,
    ListProjectsResponseSchema,
    GetProjectResponseSchema,
    ProjectSessionWithContentSchema,
    MCPProjectResponseSchema,
    KnowledgeMatchSchema,
    ContextBaseSchema,
    SessionContextSchema,
    ProjectContextSchema,
    ContextSchema,
    ContextSearchResultSchema,
    ContextListOutputSchema,
)
from .video_artifacts import (
    FlowchartMetadataSchema,
    FlowchartPhaseSchema,
    FlowchartNodeSchema,
    FlowchartEdgeSchema,
    FlowchartLayoutSchema,
    FlowchartProvenanceSchema,
    FlowchartSchema,
    VideoTaskSummarySchema,
    VideoTemporalPhaseSchema,
    VideoWorkflowStepSchema,
    VideoQuickReferenceSchema,
    VideoWorkflowGuideContentSchema,
    WorkflowGuideContentSchema,
    SessionSummarySchema,
    KnowledgeItemSchema,
    ConceptRelationshipSchema,
    KnowledgeBaseContentSchema,
    StageVMetadataSchema,
    VideoArtifactMetadataSchema,
    FirestoreVideoDocumentSchema,
    WorkflowGuideDocumentSchema,
    KnowledgeBaseDocumentSchema,
    FlowchartDocumentSchema,
)
from .edit_history import EDIT_HISTORY_CAP, EditHistorySource, EditHistoryVersionSchema
from .validator import (
    ContractValidationError,
    ValidationResult,
    redact_sensitive,
    safe_parse,
    validate_contract,
    validate_session_start_response,
    validate_forge_job_response,
    validate_bridge_command_request,
    validate_session_internal_state,
    validate_pair_intent_response,
    validate_presence_intent_response,
    validate_presence_status_response,
    validate_session_start_request,
    validate_error_envelope,
    validate_translation_entry,
    validate_session_translations,
    validate_flowchart,
    validate_workflow_guide_content,
    validate_knowledge_base_content,
    calculate_progress,
    is_processing_complete,
    get_failed_stages,
    run_smoke_tests,
    get_contract_schema,
)

__all__ = [
    # Bridge
    "BridgeCommand",
    "BridgeCommandRequestSchema",
    "BridgeCommandResponseSchema",
    # Session Manager
    "SessionManagerHealthSchema",
    "SessionStartResponseSchema",
    "SessionStopResponseSchema",
    "SessionStatusResponseSchema",
    "SessionInternalStateSchema",
    "Session",
    "IdempotencyHeaderSchema",
    "IdempotentResponseSchema",
    "SessionStartedEvent",
    "SessionStoppedEvent",
    "SessionErrorEvent",
    "CompletedStepSchema",
    "UploadStatusEvent",
    "WorkflowReadyEvent",
    "UploadCompleteEvent",
    "SessionEventSchema",
    # Forge
    "ForgeArtifactSchema",
    "ForgeCountersSchema",
    "StageExecutionSchema",
    "ForgeManifestSchema",
    "ForgeResponseSchema",
    "ForgeJobResponseSchema",
    "ForgeJob",
    "TimeRangeSchema",
    "TriggerSessionSchema",
    "TriggerOptionsSchema",
    "ForgeTriggerSchema",
    "JobProgressSchema",
    # Errors
    "StandardErrorResponseSchema",
    "ServiceErrorEnvelopeSchema",
    # Workflow documents
    "WorkflowStepSchema",
    "WorkflowDataSchema",
    "Workflow",
    "ProcessingMetadataSchema",
    "FirestoreWorkflowSchema",
    # Device auth
    "DeviceProofRequestSchema",
    "DeviceProofResponseSchema",
    "DeviceProofPayloadSchema",
    "AuthTokenResponseSchema",
    "AuthClaimsSchema",
    # Pairing & presence
    "ErrorCode",
    "OpaqueToken",
    "IsoTimestamp",
    "DeepLink",
    "ShortCode",
    "MIN_POLL_AFTER_MS",
    "MAX_POLL_AFTER_MS",
    "PairIntentResponseSchema",
    "PairCompleteRequestSchema",
    "DeviceRecordSchema",
    "UserDeviceLinkSchema",
    "UserDevicesResponseSchema",
    "PresenceIntentResponseSchema",
    "PresenceCompleteRequestSchema",
    "PresenceStatusResponseSchema",
    "SessionOptionsSchema",
    "SessionStartRequestSchema",
    "ErrorEnvelopeSchema",
    # Projects & contexts
    "ProjectVisibility",
    "SessionType",
    "ContextKind",
    "CreateProjectSchema",
    "UpdateProjectSchema",
    "ProjectSchema",
    "ProjectWithIdSchema",
    "ProjectWithStatsSchema",
    "SessionProjectFieldSchema",
    "UpdateSessionProjectSchema",
    "ProjectSessionSummarySchema",
    "ListProjectsResponseSchema",
    "GetProjectResponseSchema",
    "ProjectSessionWithContentSchema",
    "MCPProjectResponseSchema",
    "KnowledgeMatchSchema",
    "ContextBaseSchema",
    "SessionContextSchema",
    "ProjectContextSchema",
    "ContextSchema",
    "ContextSearchResultSchema",
    "ContextListOutputSchema",
    # Video artifacts
    "FlowchartMetadataSchema",
    "FlowchartPhaseSchema",
    "FlowchartNodeSchema",
    "FlowchartEdgeSchema",
    "FlowchartLayoutSchema",
    "FlowchartProvenanceSchema",
    "FlowchartSchema",
    "VideoTaskSummarySchema",
    "VideoTemporalPhaseSchema",
    "VideoWorkflowStepSchema",
    "VideoQuickReferenceSchema",
    "VideoWorkflowGuideContentSchema",
    "WorkflowGuideContentSchema",
    "SessionSummarySchema",
    "KnowledgeItemSchema",
    "ConceptRelationshipSchema",
    "KnowledgeBaseContentSchema",
    "StageVMetadataSchema",
    "VideoArtifactMetadataSchema",
    "FirestoreVideoDocumentSchema",
    "WorkflowGuideDocumentSchema",
    "KnowledgeBaseDocumentSchema",
    "FlowchartDocumentSchema",
    # Edit history
    "EDIT_HISTORY_CAP",
    "EditHistorySource",
    "EditHistoryVersionSchema",
    # Validators
    "ContractValidationError",
    "ValidationResult",
    "redact_sensitive",
    "safe_parse",
    "validate_contract",
    "validate_session_start_response",
    "validate_forge_job_response",
    "validate_bridge_command_request",
    "validate_session_internal_state",
    "validate_pair_intent_response",
    "validate_presence_intent_response",
    "validate_presence_status_response",
    "validate_session_start_request",
    "validate_error_envelope",
    "validate_translation_entry",
    "validate_session_translations",
    "validate_flowchart",
    "validate_workflow_guide_content",
    "validate_knowledge_base_content",
    "calculate_progress",
    "is_processing_complete",
    "get_failed_stages",
    "run_smoke_tests",
    "get_contract_schema",
]
