"""
Video Artifact Data Contracts
=============================
Schemas for video-forge output artifacts:
- Flowchart (workflow visualization)
- VideoWorkflowGuideContent (step-by-step workflow guides)
- KnowledgeBaseContent (teaching session knowledge bases)

Video-forge aims to produce these shapes; the admin panel validates
against them before rendering.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Any, Dict, List, Literal, Optional, Union


# =============================================================================
# SHARED ENUMS
# =============================================================================

ConfidenceLevel = Literal["High", "Medium", "Low"]
NodeType = Literal["step", "decision"]
Complexity = Literal["Simple", "Moderate", "Complex"]
KnowledgeLevel = Literal["beginner", "intermediate", "advanced"]
TeachingSessionType = Literal["conceptual_explanation", "procedural_demo", "troubleshooting", "overview"]
KnowledgeItemType = Literal["concept", "procedure", "best_practice", "constraint", "example"]
Importance = Literal["critical", "high", "medium", "low"]
RelationshipType = Literal["requires", "related", "contrasts", "extends", "example_of"]

# Models emit both capitalised and lowercase importance levels
KnowledgeImportance = Literal["High", "Medium", "Low", "critical", "high", "medium", "low"]


# =============================================================================
# FLOWCHART
# =============================================================================

class FlowchartMetadataSchema(BaseModel):
    id: str
    source_processing_id: str
    generated_at: str = Field(..., description="ISO-8601 generation time")
    llm_model: str
    llm_generated: bool = True
    prompt_version: str = "1.0"


class FlowchartPhaseSchema(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    confidence: Optional[ConfidenceLevel] = None
    segments: Optional[List[float]] = None
    reasoning: Optional[str] = None
    color: str = "blue"


class FlowchartNodeSchema(BaseModel):
    """A step or decision node in the flowchart."""
    id: str
    type: NodeType
    title: str
    label: Optional[str] = None
    instructions: Optional[Union[str, List[str]]] = None
    question: Optional[str] = Field(None, description="Question asked at a decision node")
    phase_id: Optional[str] = None
    expected_result: Optional[str] = None
    prerequisites: Optional[List[str]] = None
    tools: Optional[List[str]] = None
    notes: Optional[str] = None
    confidence: Optional[ConfidenceLevel] = None
    data: Optional[Dict[str, Any]] = None


class FlowchartEdgeSchema(BaseModel):
    id: str
    source: str
    target: str
    label: Optional[str] = None
    condition: Optional[str] = None


class NodePositionSchema(BaseModel):
    x: float
    y: float


class FlowchartLayoutSchema(BaseModel):
    persisted: bool = False
    positions: Dict[str, NodePositionSchema] = Field(default_factory=dict)
    hints: Optional[Dict[str, Any]] = None


class EntityPathMappingSchema(BaseModel):
    entity_id: str
    path: str


class FlowchartProvenanceSchema(BaseModel):
    entity_path_map: Optional[List[EntityPathMappingSchema]] = None
    warnings: Optional[List[str]] = None
    error: Optional[str] = None


class FlowchartSchema(BaseModel):
    """
    Flowchart - workflow visualization produced by video-forge.

    Nodes and edges are required; metadata, phases, layout and provenance
    are filled in as the flowchart moves through generation and editing.
    """
    schema_version: str = "1.0"
    title: str
    metadata: Optional[FlowchartMetadataSchema] = None
    phases: Optional[List[FlowchartPhaseSchema]] = None
    nodes: List[FlowchartNodeSchema]
    edges: List[FlowchartEdgeSchema]
    layout: Optional[FlowchartLayoutSchema] = None
    provenance: Optional[FlowchartProvenanceSchema] = None


# =============================================================================
# VIDEO WORKFLOW GUIDE (video_workflow_guide_content.json)
# =============================================================================

class VideoTaskSummarySchema(BaseModel):
    name: str
    goal: str
    tools_used: List[str] = Field(default_factory=list)
    complexity: Complexity
    estimated_duration_minutes: Optional[float] = Field(None, ge=0.0)


class TimestampRangeSchema(BaseModel):
    start: float = Field(..., ge=0.0)
    end: float = Field(..., ge=0.0)


class VideoTemporalPhaseSchema(BaseModel):
    phase_number: int = Field(..., ge=1)
    timestamp_range: TimestampRangeSchema
    name: str
    purpose: str
    key_actions: List[str] = Field(default_factory=list)
    confidence: ConfidenceLevel
    audio_summary: Optional[str] = None


class VideoWorkflowStepSchema(BaseModel):
    step_number: int = Field(..., ge=1)
    timestamp: float = Field(..., ge=0.0, description="Seconds into the recording")
    title: str
    action: str
    visual_cues: Optional[str] = None
    audio_context: Optional[str] = None
    expected_result: str
    confidence: ConfidenceLevel


class VideoQuickReferenceSchema(BaseModel):
    prerequisites: List[str] = Field(default_factory=list)
    key_commands: List[str] = Field(default_factory=list)
    common_issues: List[str] = Field(default_factory=list)
    verification_steps: List[str] = Field(default_factory=list)


class VideoWorkflowGuideContentSchema(BaseModel):
    """
    Video Workflow Guide - step-by-step guide for a workflow recording.

    This is the canonical ``content`` of a workflow session.
    """
    task_summary: VideoTaskSummarySchema
    temporal_phases: List[VideoTemporalPhaseSchema]
    step_by_step_guide: List[VideoWorkflowStepSchema]
    quick_reference: VideoQuickReferenceSchema
    guide_markdown: Optional[str] = None


# Backward-compatible name
WorkflowGuideContentSchema = VideoWorkflowGuideContentSchema


# =============================================================================
# KNOWLEDGE BASE (video_knowledge_base_content.json)
# =============================================================================

class SessionSummarySchema(BaseModel):
    topic: str
    subtopics: List[str] = Field(default_factory=list)
    knowledge_level: KnowledgeLevel
    session_type: TeachingSessionType
    estimated_duration_minutes: Optional[float] = Field(None, ge=0.0)


class KnowledgeItemSchema(BaseModel):
    item_id: str
    type: KnowledgeItemType
    timestamp: float = Field(..., ge=0.0)
    title: str
    content: str
    importance: KnowledgeImportance
    confidence: Optional[ConfidenceLevel] = None
    related_items: Optional[List[str]] = None
    visual_aids: Optional[str] = None
    audio_emphasis: Optional[str] = None
    code_snippet: Optional[str] = None


class ConceptRelationshipSchema(BaseModel):
    """
    Relationship between two knowledge items.

    Older knowledge bases use ``from``/``to``; those keys are migrated to
    ``from_item_id``/``to_item_id`` on validation and never written back.
    """
    from_item_id: str
    to_item_id: str
    relationship: RelationshipType
    description: str

    @model_validator(mode="before")
    @classmethod
    def _migrate_legacy_endpoints(cls, data: Any) -> Any:
        if isinstance(data, dict) and ("from" in data or "to" in data):
            data = dict(data)
            legacy_from = data.pop("from", None)
            legacy_to = data.pop("to", None)
            if data.get("from_item_id") is None:
                data["from_item_id"] = legacy_from
            if data.get("to_item_id") is None:
                data["to_item_id"] = legacy_to
        return data


class KnowledgeBaseContentSchema(BaseModel):
    """
    Knowledge Base - structured knowledge from a teaching session.

    This is the canonical ``content`` of a teaching session.
    """
    session_summary: SessionSummarySchema
    knowledge_items: List[KnowledgeItemSchema]
    concept_relationships: Optional[List[ConceptRelationshipSchema]] = None
    key_takeaways: List[str]
    suggested_context_usage: Optional[List[str]] = None


# =============================================================================
# STAGE V METADATA (video input)
# =============================================================================

class StageVMetadataSchema(BaseModel):
    """Metadata for the video that entered the pipeline."""
    duration_seconds: float = Field(..., ge=0.0)
    video_url: str
    video_path: Optional[str] = None
    estimated_cost_usd: Optional[float] = Field(None, ge=0.0)
    file_size_bytes: Optional[int] = Field(None, ge=0)
    validated_at: Optional[str] = None


# =============================================================================
# FIRESTORE DOCUMENT WRAPPERS
# =============================================================================

class VlmUsageSchema(BaseModel):
    provider: str
    model: str
    total_tokens: int = Field(..., ge=0)
    total_cost_usd: float = Field(..., ge=0.0)


class VideoArtifactMetadataSchema(BaseModel):
    processing_timestamp: str
    stage: str
    input_type: str
    output_format: str
    source_type: Optional[str] = None
    video_duration_seconds: Optional[float] = None
    estimated_cost_usd: Optional[float] = None
    vlm_usage: Optional[VlmUsageSchema] = None


class VideoDocumentMetadataSchema(BaseModel):
    file_size_bytes: int = Field(..., ge=0)
    sha256: str
    manifest_sha256: str
    upload_timestamp: str


class FirestoreVideoDocumentSchema(BaseModel):
    """
    Firestore Video Document - common envelope for video-forge outputs.

    Path: /organizations/{org_id}/video_workflows/{document_id}
    """
    filename: str
    org_id: str
    session_id: str
    user_id: str
    processing_id: str
    processing_type: Literal["video_vlm"]
    output_type: str
    status: str
    created_at: str
    created_by: str
    source: str
    visibility: Literal["private", "public"]
    metadata: VideoDocumentMetadataSchema


class WorkflowGuideWrapperSchema(BaseModel):
    metadata: VideoArtifactMetadataSchema
    content: VideoWorkflowGuideContentSchema


class KnowledgeBaseWrapperSchema(BaseModel):
    metadata: VideoArtifactMetadataSchema
    content: KnowledgeBaseContentSchema


class WorkflowGuideDocumentSchema(FirestoreVideoDocumentSchema):
    content: WorkflowGuideWrapperSchema


class KnowledgeBaseDocumentSchema(FirestoreVideoDocumentSchema):
    content: KnowledgeBaseWrapperSchema


class FlowchartDocumentSchema(FirestoreVideoDocumentSchema):
    content: FlowchartSchema
