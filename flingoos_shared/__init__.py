"""
flingoos-shared
===============
Shared contracts, validation, content resolution and usage logging for
Flingoos services.

    from flingoos_shared import get_resolved_content, validate_forge_job_response
    from flingoos_shared.usage_logging import log_usage_event
"""

from .config.settings import PACKAGE_VERSION as __version__
from .constants import (
    STAGES,
    TOTAL_STAGES,
    STAGE_NAMES,
    SESSION_STATUSES,
    PROCESSING_STATUSES,
    PROCESSING_TERMINAL_STATUSES,
    STAGE_EXECUTION_STATUSES,
    Stage,
    SessionStatus,
    ProcessingStatus,
    StageExecutionStatus,
)
from .stage_messages import (
    STAGE_MESSAGES,
    STAGE_LABELS,
    is_valid_stage_code,
    get_stage_message,
    get_all_stage_messages,
    get_stage_label,
    get_stage_number,
    get_all_stage_codes,
)
from .contracts import *  # noqa: F401,F403
from .contracts import __all__ as _contracts_all
from .translations import *  # noqa: F401,F403
from .translations import __all__ as _translations_all
from .examples import VALID_EXAMPLES, INVALID_EXAMPLES

__all__ = [
    "__version__",
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
    "STAGE_MESSAGES",
    "STAGE_LABELS",
    "is_valid_stage_code",
    "get_stage_message",
    "get_all_stage_messages",
    "get_stage_label",
    "get_stage_number",
    "get_all_stage_codes",
    "VALID_EXAMPLES",
    "INVALID_EXAMPLES",
    *_contracts_all,
    *_translations_all,
]
