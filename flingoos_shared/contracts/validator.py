"""
Contract Validator
==================
Validation helpers for the Flingoos shared contracts.

``safe_parse`` never raises and returns a ``ValidationResult``;
``validate_contract`` raises ``ContractValidationError`` in strict mode.
Both accept a dict or a JSON string, and any type Pydantic can validate
(models, discriminated unions, ``Dict[str, Model]``).

Failures are logged with the error location, message and type only. Raw
input is never logged, since it may carry tokens or tickets.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..config import settings
from ..constants import PROCESSING_TERMINAL_STATUSES
from ..examples import INVALID_EXAMPLES, VALID_EXAMPLES
from ..translations.schemas import SessionContentDoc, SessionTranslations, TranslationEntrySchema
from .bridge import BridgeCommandRequestSchema
from .forge import ForgeJobResponseSchema, StageExecutionSchema
from .pairing import (
    DeviceRecordSchema,
    ErrorEnvelopeSchema,
    PairCompleteRequestSchema,
    PairIntentResponseSchema,
    PresenceCompleteRequestSchema,
    PresenceIntentResponseSchema,
    PresenceStatusResponseSchema,
    SessionStartRequestSchema,
    UserDeviceLinkSchema,
)
from .session_manager import SessionInternalStateSchema, SessionStartResponseSchema
from .video_artifacts import (
    FlowchartSchema,
    KnowledgeBaseContentSchema,
    VideoWorkflowGuideContentSchema,
)


SENSITIVE_KEYS = frozenset({
    "pairing_token",
    "presence_nonce",
    "presence_ticket",
    "device_proof",
    "fingerprint",
    "token",
})
REDACTED = "[REDACTED]"


class ContractValidationError(Exception):
    """Raised when contract validation fails."""

    def __init__(self, contract_name: str, errors: list):
        self.contract_name = contract_name
        self.errors = errors
        super().__init__(f"Validation failed for {contract_name}: {errors}")


@dataclass
class ValidationResult:
    """Outcome of ``safe_parse``."""
    success: bool
    data: Any = None
    errors: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None


def _contract_name(contract_type: Any) -> str:
    return getattr(contract_type, "__name__", None) or repr(contract_type)


def _summarize_errors(errors: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Keep loc/msg/type; drop ``input`` and ``ctx``, which can echo secrets."""
    return [
        {"loc": tuple(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in errors
    ]


def _format_errors(errors: List[Dict[str, Any]]) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in errors
    )


def redact_sensitive(data: Any) -> Any:
    """
    Copy of ``data`` with token, ticket, proof and fingerprint values masked.

    Walks nested dicts and lists; other values are returned unchanged.
    """
    if isinstance(data, BaseModel):
        data = data.model_dump()
    if isinstance(data, Mapping):
        return {
            key: REDACTED if key in SENSITIVE_KEYS and value is not None else redact_sensitive(value)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [redact_sensitive(item) for item in data]
    return data


def safe_parse(contract_type: Any, data: Union[Dict[str, Any], str, Any]) -> ValidationResult:
    """
    Validate ``data`` against ``contract_type`` without raising.

    Args:
        contract_type: Pydantic model class or any Pydantic-validatable type
        data: Dictionary, JSON string or other value to validate

    Returns:
        ValidationResult with the validated value, or the errors

    Example:
        >>> result = safe_parse(PairIntentResponseSchema, payload)
        >>> if not result.success:
        ...     print(result.error)
    """
    name = _contract_name(contract_type)

    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            errors = [{"loc": (), "msg": f"Invalid JSON: {e.msg}", "type": "json_invalid"}]
            logger.error(f"✗ Contract validation failed: {name}")
            logger.error(f"Errors: {errors}")
            return ValidationResult(success=False, errors=errors, error=_format_errors(errors))

    try:
        validated = TypeAdapter(contract_type).validate_python(data)
    except ValidationError as e:
        errors = _summarize_errors(e.errors())
        logger.error(f"✗ Contract validation failed: {name}")
        logger.error(f"Errors: {errors}")
        return ValidationResult(success=False, errors=errors, error=_format_errors(errors))

    logger.debug(f"✓ Contract validation passed: {name}")
    return ValidationResult(success=True, data=validated)


def validate_contract(
    data: Union[Dict[str, Any], str],
    contract_type: Any,
    strict: bool = True
) -> Any:
    """
    Validate data against a contract.

    Args:
        data: Dictionary or JSON string to validate
        contract_type: Pydantic model class (e.g., ForgeJobResponseSchema)
        strict: If True, raise exception on validation error

    Returns:
        Validated value, or None when validation fails and strict=False

    Raises:
        ContractValidationError: If validation fails and strict=True
    """
    result = safe_parse(contract_type, data)
    if result.success:
        return result.data
    if strict:
        raise ContractValidationError(
            contract_name=_contract_name(contract_type),
            errors=result.errors
        )
    return None


# =============================================================================
# NAMED VALIDATORS
# =============================================================================

def validate_session_start_response(data: Union[Dict, str], strict: bool = True) -> SessionStartResponseSchema:
    """Validate SessionStartResponse contract."""
    return validate_contract(data, SessionStartResponseSchema, strict)


def validate_forge_job_response(data: Union[Dict, str], strict: bool = True) -> ForgeJobResponseSchema:
    """Validate ForgeJobResponse contract."""
    return validate_contract(data, ForgeJobResponseSchema, strict)


def validate_bridge_command_request(data: Union[Dict, str], strict: bool = True) -> BridgeCommandRequestSchema:
    """Validate BridgeCommandRequest contract."""
    return validate_contract(data, BridgeCommandRequestSchema, strict)


def validate_session_internal_state(data: Union[Dict, str], strict: bool = True) -> SessionInternalStateSchema:
    """Validate SessionInternalState contract."""
    return validate_contract(data, SessionInternalStateSchema, strict)


def validate_pair_intent_response(data: Union[Dict, str], strict: bool = True) -> PairIntentResponseSchema:
    return validate_contract(data, PairIntentResponseSchema, strict)


def validate_presence_intent_response(data: Union[Dict, str], strict: bool = True) -> PresenceIntentResponseSchema:
    return validate_contract(data, PresenceIntentResponseSchema, strict)


def validate_presence_status_response(data: Union[Dict, str], strict: bool = True) -> PresenceStatusResponseSchema:
    return validate_contract(data, PresenceStatusResponseSchema, strict)


def validate_session_start_request(data: Union[Dict, str], strict: bool = True) -> SessionStartRequestSchema:
    return validate_contract(data, SessionStartRequestSchema, strict)


def validate_error_envelope(data: Union[Dict, str], strict: bool = True) -> ErrorEnvelopeSchema:
    return validate_contract(data, ErrorEnvelopeSchema, strict)


def validate_translation_entry(data: Union[Dict, str], strict: bool = True) -> TranslationEntrySchema:
    """Validate a single translation cache entry."""
    return validate_contract(data, TranslationEntrySchema, strict)


def validate_session_translations(data: Union[Dict, str], strict: bool = True) -> Dict[str, TranslationEntrySchema]:
    """Validate a session's whole translation cache (language -> entry)."""
    return validate_contract(data, SessionTranslations, strict)


def validate_flowchart(data: Union[Dict, str], strict: bool = True) -> FlowchartSchema:
    return validate_contract(data, FlowchartSchema, strict)


def validate_workflow_guide_content(data: Union[Dict, str], strict: bool = True) -> VideoWorkflowGuideContentSchema:
    return validate_contract(data, VideoWorkflowGuideContentSchema, strict)


def validate_knowledge_base_content(data: Union[Dict, str], strict: bool = True) -> KnowledgeBaseContentSchema:
    return validate_contract(data, KnowledgeBaseContentSchema, strict)


# =============================================================================
# PROCESSING HELPERS
# =============================================================================

def _execution_status(execution: Union[StageExecutionSchema, Mapping[str, Any]]) -> Optional[str]:
    if isinstance(execution, StageExecutionSchema):
        return execution.status
    return execution.get("status")


def _execution_stage(execution: Union[StageExecutionSchema, Mapping[str, Any]]) -> Optional[str]:
    if isinstance(execution, StageExecutionSchema):
        return execution.stage
    return execution.get("stage")


def calculate_progress(stage_executions: Optional[List[Union[StageExecutionSchema, Mapping[str, Any]]]]) -> int:
    """
    Percent of stage executions that have finished (completed or skipped).

    Returns:
        Integer 0-100; 0 when there are no executions
    """
    if not stage_executions:
        return 0
    finished = sum(
        1 for execution in stage_executions
        if _execution_status(execution) in ("completed", "skipped")
    )
    return round(finished * 100 / len(stage_executions))


def is_processing_complete(status: Optional[str]) -> bool:
    """True for terminal processing statuses (completed or failed)."""
    return status in PROCESSING_TERMINAL_STATUSES


def get_failed_stages(stage_executions: Optional[List[Union[StageExecutionSchema, Mapping[str, Any]]]]) -> List[str]:
    """Stage codes whose execution failed, in execution order."""
    return [
        _execution_stage(execution)
        for execution in stage_executions or []
        if _execution_status(execution) == "failed"
    ]


# =============================================================================
# SMOKE TESTS & SCHEMAS
# =============================================================================

# Example name -> contract it must satisfy
SMOKE_TEST_CONTRACTS = {
    "pair_intent_response": PairIntentResponseSchema,
    "pair_complete_request": PairCompleteRequestSchema,
    "device_record": DeviceRecordSchema,
    "user_device_link": UserDeviceLinkSchema,
    "presence_intent_response": PresenceIntentResponseSchema,
    "presence_complete_request": PresenceCompleteRequestSchema,
    "presence_status_not_ready": PresenceStatusResponseSchema,
    "presence_status_ready": PresenceStatusResponseSchema,
    "session_start_request": SessionStartRequestSchema,
    "error_envelope": ErrorEnvelopeSchema,
    "session_start_response": SessionStartResponseSchema,
    "bridge_command_request": BridgeCommandRequestSchema,
    "session_internal_state": SessionInternalStateSchema,
    "forge_job_response": ForgeJobResponseSchema,
    "session_content_doc": SessionContentDoc,
}


def _rejects(contract_type: Any, data: Dict[str, Any]) -> bool:
    return not safe_parse(contract_type, data).success


def run_smoke_tests() -> Dict[str, bool]:
    """
    Validate the bundled example payloads.

    Every valid example must pass its contract and every invalid value must
    be rejected when substituted into a valid payload.

    Returns:
        Dictionary of check name -> passed
    """
    results = {}

    for name, contract_type in SMOKE_TEST_CONTRACTS.items():
        results[name] = safe_parse(contract_type, VALID_EXAMPLES[name]).success

    pair_intent = VALID_EXAMPLES["pair_intent_response"]
    presence_intent = VALID_EXAMPLES["presence_intent_response"]
    results["rejects_invalid_token"] = _rejects(
        PairIntentResponseSchema, {**pair_intent, "pairing_token": INVALID_EXAMPLES["invalid_token"]}
    )
    results["rejects_invalid_deep_link"] = _rejects(
        PairIntentResponseSchema, {**pair_intent, "deep_link": INVALID_EXAMPLES["invalid_deep_link"]}
    )
    results["rejects_invalid_timestamp"] = _rejects(
        PresenceIntentResponseSchema, {**presence_intent, "expires_at": INVALID_EXAMPLES["invalid_timestamp"]}
    )
    results["rejects_invalid_short_code"] = _rejects(
        PresenceIntentResponseSchema, {**presence_intent, "short_code": INVALID_EXAMPLES["invalid_short_code"]}
    )
    results["rejects_invalid_http_status"] = _rejects(
        ErrorEnvelopeSchema, {**VALID_EXAMPLES["error_envelope"], "http": INVALID_EXAMPLES["invalid_http_status"]}
    )

    failed = [name for name, passed in results.items() if not passed]
    if failed:
        logger.error(f"Smoke tests failed: {failed}")
    else:
        logger.info(f"✓ All {len(results)} smoke tests passed")
    return results


def get_contract_schema(contract_type: Any, name: Optional[str] = None) -> Dict[str, Any]:
    """
    Get JSON schema for a contract type.

    Args:
        contract_type: Pydantic model class or any Pydantic-validatable type
        name: Schema name; defaults to the class name

    Returns:
        JSON schema dictionary with ``$id``, ``title`` and ``version`` set

    Example:
        >>> schema = get_contract_schema(ForgeJobResponseSchema)
        >>> schema["$id"]
        'https://schemas.flingoos.com/shared/v0.1.0/ForgeJobResponseSchema.json'
    """
    name = name or _contract_name(contract_type)
    if isinstance(contract_type, type) and issubclass(contract_type, BaseModel):
        schema = contract_type.model_json_schema()
    else:
        schema = TypeAdapter(contract_type).json_schema()

    schema["$id"] = f"{settings.SCHEMA_BASE_URI}{name}.json"
    schema.setdefault("title", name)
    schema["version"] = settings.PACKAGE_VERSION
    return schema


__all__ = [
    "SENSITIVE_KEYS",
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
    "SMOKE_TEST_CONTRACTS",
    "run_smoke_tests",
    "get_contract_schema",
]
