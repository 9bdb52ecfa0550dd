"""
Stage Messages
==============
User-facing progress messages and labels for forge pipeline stages.

Used by the session manager WebSocket and the admin panel progress bar so
both show the same wording for a given stage code.
"""

from typing import Dict, List, Optional

from .constants import STAGES, STAGE_NAMES


StageCode = str
StageMessageMap = Dict[StageCode, str]


STAGE_MESSAGES: StageMessageMap = {
    "A": "Collecting recorded session data...",
    "B": "Processing captured events...",
    "C": "Analyzing screenshots and media...",
    "D": "Building the session timeline...",
    "E": "Extracting workflow steps...",
    "F": "Drawing the workflow flowchart...",
    "G": "Writing the step-by-step guide...",
}

STAGE_LABELS: StageMessageMap = dict(STAGE_NAMES)


def is_valid_stage_code(code: Optional[str]) -> bool:
    """Check if a stage code is one of the known pipeline stages."""
    return code in STAGE_MESSAGES


def get_stage_message(code: Optional[str], default: str = "Processing...") -> str:
    """
    Get the progress message for a stage code.

    Unknown or missing codes return ``default`` so callers can render
    something without checking the code first.
    """
    if not is_valid_stage_code(code):
        return default
    return STAGE_MESSAGES[code]


def get_all_stage_messages() -> StageMessageMap:
    """Return a copy of all stage messages, in pipeline order."""
    return {code: STAGE_MESSAGES[code] for code in STAGES}


def get_stage_label(code: Optional[str]) -> Optional[str]:
    """Get the short display label for a stage code."""
    return STAGE_LABELS.get(code) if code else None


def get_stage_number(code: Optional[str]) -> Optional[int]:
    """Get the 1-based position of a stage in the pipeline."""
    if not is_valid_stage_code(code):
        return None
    return STAGES.index(code) + 1


def get_all_stage_codes() -> List[StageCode]:
    return list(STAGES)


__all__ = [
    "StageCode",
    "StageMessageMap",
    "STAGE_MESSAGES",
    "STAGE_LABELS",
    "is_valid_stage_code",
    "get_stage_message",
    "get_all_stage_messages",
    "get_stage_label",
    "get_stage_number",
    "get_all_stage_codes",
]
