"""
Project Data Contracts
======================
Schemas for project (domain grouping) documents and the APIs built on them.
Projects are containers for sessions (workflows and teaching sessions).

Path: /organizations/{org_id}/projects/{project_id}

Visibility:
- 'private': only the owner (plus explicit editors/viewers)
- 'org:view': all org members can view
- 'org:edit': all org members can view and edit
Sessions inherit visibility from their project.
"""

from pydantic import BaseModel, Field
from typing import Annotated, Any, List, Literal, Optional, Union


ProjectVisibility = Literal["private", "org:view", "org:edit"]
SessionType = Literal["workflow_recording", "teaching_session"]
ContextKind = Literal["project", "session"]


# =============================================================================
# PROJECT DOCUMENTS
# =============================================================================

class CreateProjectSchema(BaseModel):
    """Body of POST /api/projects."""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    visibility: ProjectVisibility = "private"
    editors: Optional[List[str]] = None
    viewers: Optional[List[str]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Customer Onboarding",
                "description": "Recordings for the onboarding flow",
                "visibility": "org:view"
            }
        }


class UpdateProjectSchema(BaseModel):
    """Partial update; only provided fields change."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    visibility: Optional[ProjectVisibility] = None
    editors: Optional[List[str]] = None
    viewers: Optional[List[str]] = None


class ProjectSchema(BaseModel):
    """Project document as stored in Firestore."""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    owner_id: str = Field(..., description="User ID of the creator")
    visibility: ProjectVisibility
    created_at: str
    updated_at: str

    editors: Optional[List[str]] = None
    viewers: Optional[List[str]] = None

    # Semantic search
    embedding: Optional[List[float]] = None
    embedding_model: Optional[str] = None
    embedding_updated_at: Optional[str] = None
    searchPartitions: Optional[List[str]] = Field(
        None, description='e.g. ["org:{org_id}:public"] or ["user:{org_id}:{user_id}"]'
    )
    search_name: Optional[str] = None
    search_description: Optional[str] = None


class ProjectWithIdSchema(ProjectSchema):
    id: str


class ProjectWithStatsSchema(ProjectWithIdSchema):
    session_count: int = 0
    workflow_count: int = 0
    teaching_count: int = 0


# =============================================================================
# SESSION ASSOCIATION
# =============================================================================

class SessionProjectFieldSchema(BaseModel):
    """``project_id`` on session documents; None means unassigned."""
    project_id: Optional[str] = None


class UpdateSessionProjectSchema(BaseModel):
    """Body of PATCH /api/sessions/{id}/project (null to unassign)."""
    project_id: Optional[str]


# =============================================================================
# API RESPONSES
# =============================================================================

class ProjectSessionSummarySchema(BaseModel):
    session_id: str
    name: str
    goal: Optional[str] = None
    recording_type: SessionType
    created_at: Optional[str] = None
    visibility: Optional[ProjectVisibility] = None


class ListProjectsResponseSchema(BaseModel):
    projects: List[ProjectWithStatsSchema]
    total: int


class GetProjectResponseSchema(ProjectWithStatsSchema):
    sessions: Optional[List[ProjectSessionSummarySchema]] = None


class ProjectSessionWithContentSchema(ProjectSessionSummarySchema):
    content: Any = Field(None, description="Full workflow guide or knowledge base content")


class MCPProjectResponseSchema(BaseModel):
    """Project with full session content, returned by the get-project tool."""
    id: str
    name: str
    description: Optional[str] = None
    visibility: ProjectVisibility
    owner_id: str
    created_at: str
    updated_at: str
    session_count: int
    workflow_count: int
    teaching_count: int
    sessions: List[ProjectSessionWithContentSchema]
    editors: Optional[List[str]] = None
    viewers: Optional[List[str]] = None


class KnowledgeMatchSchema(BaseModel):
    """Unified search hit. Superseded by ContextSearchResultSchema."""
    type: ContextKind
    id: str
    name: str
    description: Optional[str] = None
    goal: Optional[str] = None
    score: float
    visibility: ProjectVisibility
    recording_type: Optional[SessionType] = None
    contained_sessions: Optional[List[ProjectSessionSummarySchema]] = None


# =============================================================================
# CONTEXT API
# =============================================================================

class ContextBaseSchema(BaseModel):
    id: str
    kind: ContextKind
    name: str
    visibility: ProjectVisibility


class SessionContextSchema(ContextBaseSchema):
    kind: Literal["session"]
    session_type: SessionType
    goal: Optional[str] = None
    project_id: Optional[str]
    project_name: Optional[str]
    step_count: Optional[int] = None
    item_count: Optional[int] = None
    created_at: Optional[str] = None


class ProjectContextSchema(ContextBaseSchema):
    kind: Literal["project"]
    description: Optional[str]
    session_count: int
    workflow_count: int
    teaching_count: int
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


ContextSchema = Annotated[
    Union[SessionContextSchema, ProjectContextSchema],
    Field(discriminator="kind"),
]


class ContextSearchResultSchema(BaseModel):
    id: str
    kind: ContextKind
    session_type: Optional[SessionType] = None
    name: str
    goal: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[str] = None
    project_name: Optional[str] = None
    score: float
    rank: int
    contained_sessions: Optional[List[ProjectSessionSummarySchema]] = None


class ContextListOutputSchema(BaseModel):
    contexts: List[ContextSchema]
    total_count: int
    project_count: int
    session_count: int
