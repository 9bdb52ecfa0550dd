"""
Session Edit History Data Contract
==================================
One document per version, stored at:
/organizations/{org_id}/sessions/{session_id}/edit_history/{version_id}

At most ``EDIT_HISTORY_CAP`` versions are kept per session.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional


EDIT_HISTORY_CAP = 20

EditHistorySource = Literal["mcp", "admin_ui", "rename", "enrich", "restore", "initial"]
EditHistoryAction = Literal["modify", "add", "delete", "restore"]
EditHistoryTargetType = Literal["step", "phase", "knowledge_item", "metadata"]


class EditHistoryVersionSchema(BaseModel):
    timestamp: str
    modified_by: Optional[str] = None
    modified_by_email: Optional[str] = None
    source: EditHistorySource
    source_label: Optional[str] = None
    action: EditHistoryAction
    target_type: Optional[EditHistoryTargetType] = None
    target_number: Optional[int] = None
    target_id: Optional[str] = None
    change_prompt: Optional[str] = None
    change_summary: List[str] = Field(default_factory=list)
    content_snapshot: Dict[str, Any] = Field(..., description="Full session content after this edit")
