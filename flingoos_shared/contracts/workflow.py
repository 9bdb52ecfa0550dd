"""
Workflow Document Data Contract
===============================
Schema for bridge workflow documents stored in Firestore.
"""

from pydantic import BaseModel, Field
from typing import List, Literal


class WorkflowStepSchema(BaseModel):
    step: int = Field(..., ge=1)
    action: str
    timestamp: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    context: str


class WorkflowDataSchema(BaseModel):
    """Extracted workflow with its generated guide."""
    title: str
    summary: str
    duration_seconds: float = Field(..., ge=0.0)
    steps: List[WorkflowStepSchema] = Field(default_factory=list)
    insights: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    productivity_score: float
    guide_markdown: str


# Backward-compatible name
Workflow = WorkflowDataSchema


class ProcessingMetadataSchema(BaseModel):
    random_selection: bool
    selected_from_count: int = Field(..., ge=0)
    retrieval_method: str


class FirestoreWorkflowSchema(BaseModel):
    """
    Firestore Workflow - complete workflow document.

    Path: /organizations/{org_id}/workflows/{workflow_id}
    """
    workflow_id: str
    session_id: str
    org_id: str
    processed_at: str
    status: str
    source: Literal["real_firestore", "mock"]
    firestore_document_id: str
    firestore_url: str
    firestore_path: str
    workflow_data: WorkflowDataSchema
    processing_metadata: ProcessingMetadataSchema
