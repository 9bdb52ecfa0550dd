"""
Pipeline Constants
==================
Enumerations used to parametrize the contract schemas.

Forge pipeline stages run in order A -> G. Each stage has a short code,
a display name and a 1-based stage number (see stage_messages).
"""

from typing import Dict, Literal


STAGES = ("A", "B", "C", "D", "E", "F", "G")
TOTAL_STAGES = len(STAGES)

STAGE_NAMES: Dict[str, str] = {
    "A": "Data Collection",
    "B": "Event Processing",
    "C": "Media Processing",
    "D": "Timeline Assembly",
    "E": "Workflow Extraction",
    "F": "Flowchart Generation",
    "G": "Guide Generation",
}

SESSION_STATUSES = (
    "starting",
    "active",
    "stopping",
    "stopped",
    "processing",
    "completed",
    "failed",
)

PROCESSING_STATUSES = ("pending", "processing", "completed", "failed")

# A processing job in one of these states will not change again
PROCESSING_TERMINAL_STATUSES = ("completed", "failed")

STAGE_EXECUTION_STATUSES = ("pending", "running", "completed", "failed", "skipped")


Stage = Literal[STAGES]
SessionStatus = Literal[SESSION_STATUSES]
ProcessingStatus = Literal[PROCESSING_STATUSES]
StageExecutionStatus = Literal[STAGE_EXECUTION_STATUSES]


__all__ = [
    "STAGES",
    "TOTAL_STAGES",
    "STAGE_NAMES",
    "SESSION_STATUSES",
    "PROCESSING_STATUSES",
    "PROCESSING_TERMINAL_STATUSES",
    "STAGE_EXECUTION_STATUSES",
    "Stage",
    "SessionStatus",
    "ProcessingStatus",
    "StageExecutionStatus",
]
