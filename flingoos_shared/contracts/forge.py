"""
Forge Pipeline Data Contracts
=============================
Schemas for forge triggers, manifests, artifacts, stage executions, job
responses and progress reporting.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any, Literal

from ..constants import Stage, ProcessingStatus, StageExecutionStatus


# =============================================================================
# ARTIFACTS & COUNTERS
# =============================================================================

class ForgeArtifactSchema(BaseModel):
    """Output artifact produced by a forge stage."""
    name: str = Field(..., description="Artifact file name")
    type: Literal["workflow", "flowchart", "analysis"] = Field(..., description="Artifact type")
    stage: str = Field(..., description="Stage that produced the artifact")
    local_path: Optional[str] = Field(None, description="Path on the forge worker")
    gcs_uri: str = Field(..., description="Cloud Storage URI")
    sha256: str = Field(..., description="Content hash")
    size_bytes: int = Field(..., ge=0, description="Size in bytes")
    mime: str = Field(..., description="MIME type")
    created_at: str = Field(..., description="ISO-8601 creation time")


class ForgeCountersSchema(BaseModel):
    """Processing statistics for one forge run."""
    events_processed: int = Field(..., ge=0)
    media_files_processed: int = Field(..., ge=0)
    timeline_entries: int = Field(..., ge=0)
    llm_tokens_used: int = Field(..., ge=0)
    processing_time_seconds: float = Field(..., ge=0.0)


class StageExecutionSchema(BaseModel):
    """Execution record for a single pipeline stage."""
    stage: Stage = Field(..., description="Stage code (A-G)")
    status: StageExecutionStatus = Field(..., description="Stage execution status")
    started_at: str = Field(..., description="ISO-8601 start time")
    completed_at: Optional[str] = Field(None, description="ISO-8601 completion time")
    error_message: Optional[str] = Field(None, description="Failure reason")
    artifacts_produced: List[str] = Field(default_factory=list, description="Artifact names")


# =============================================================================
# MANIFEST & JOB RESPONSE
# =============================================================================

class ForgeManifestSchema(BaseModel):
    """
    Forge Manifest - complete record of one processing run.

    Written by the forge alongside the artifacts it describes.
    """
    version: str
    processing_id: str
    trigger_hash: str
    session: Dict[str, Any] = Field(default_factory=dict)
    options: Dict[str, Any] = Field(default_factory=dict)
    status: ProcessingStatus
    created_at: str
    completed_at: Optional[str] = None
    artifacts: List[ForgeArtifactSchema] = Field(default_factory=list)
    counters: ForgeCountersSchema
    stage_executions: List[StageExecutionSchema] = Field(default_factory=list)
    content_sha256: str
    error_message: Optional[str] = None
    errors: List[Any] = Field(default_factory=list)


class ForgeResponseSchema(BaseModel):
    """Raw forge response embedded in a job response."""
    manifest: ForgeManifestSchema
    processing_id: str
    status: ProcessingStatus
    processing_time_ms: float = Field(..., ge=0.0)
    idempotent_reuse: bool


class ForgeJobResponseSchema(BaseModel):
    """
    Forge Job Response - what the Session Manager gets back after a
    processing request.
    """
    status: Literal["completed", "failed", "timeout", "connection_error"]
    session_id: str
    processing_time_seconds: float = Field(..., ge=0.0)
    firestore_path: Optional[str] = None
    workflow_id: Optional[str] = None
    message: str
    timestamp: str
    error: Optional[str] = None
    forge_response: Optional[ForgeResponseSchema] = None


class ForgeJob(BaseModel):
    """
    Flattened view of a forge job, derived from a job response and its
    manifest for UI consumption.
    """
    processing_id: str
    session_id: Optional[str] = None
    trigger_hash: Optional[str] = None
    status: ProcessingStatus
    progress_percent: float = Field(..., ge=0.0, le=100.0)
    current_stage: Stage
    created_at: str
    completed_at: Optional[str] = None
    processing_time_seconds: Optional[float] = None
    firestore_path: Optional[str] = None
    artifacts: Optional[List[ForgeArtifactSchema]] = None
    counters: Optional[ForgeCountersSchema] = None
    stage_executions: Optional[List[StageExecutionSchema]] = None
    idempotent_reuse: bool = False


# =============================================================================
# TRIGGER
# =============================================================================

class TimeRangeSchema(BaseModel):
    start: str
    end: str


class TriggerSessionSchema(BaseModel):
    """Session the forge should process."""
    org_id: str
    device_id: str
    time_range: TimeRangeSchema
    timezone: str


class TriggerOptionsSchema(BaseModel):
    stages: List[Stage] = Field(..., description="Stages to run")
    media_processing: bool
    llm_enabled: bool
    include_flowchart: bool


class ForgeTriggerSchema(BaseModel):
    """Trigger payload for forge pipeline processing."""
    pipeline_version: str
    config_path: str
    session: TriggerSessionSchema
    options: TriggerOptionsSchema
    visibility: Literal["private", "public"]

    class Config:
        json_schema_extra = {
            "example": {
                "pipeline_version": "1.4.0",
                "config_path": "configs/default.yaml",
                "session": {
                    "org_id": "org_diligent4",
                    "device_id": "dev_org123_device456",
                    "time_range": {
                        "start": "2024-01-15T10:00:00.000Z",
                        "end": "2024-01-15T10:20:00.000Z"
                    },
                    "timezone": "UTC"
                },
                "options": {
                    "stages": ["A", "B", "C", "D", "E", "F", "G"],
                    "media_processing": True,
                    "llm_enabled": True,
                    "include_flowchart": True
                },
                "visibility": "private"
            }
        }


# =============================================================================
# PROGRESS
# =============================================================================

class JobProgressSchema(BaseModel):
    """Progress snapshot for a running forge job."""
    processing_id: str
    progress_percent: float = Field(..., ge=0.0, le=100.0, description="Percent complete (0-100)")
    current_stage: Stage
    stage_name: str
    stages_completed: List[Stage] = Field(default_factory=list)
    stages_total: int = Field(..., ge=0)
    estimated_completion: Optional[str] = None
    elapsed_seconds: float = Field(..., ge=0.0)
    stage_durations: Dict[str, float] = Field(default_factory=dict, description="Seconds spent per stage")
