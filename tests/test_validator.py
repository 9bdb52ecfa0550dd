"""
Tests for the contract validation layer.
"""
import json

import pytest

from flingoos_shared.config import settings
from flingoos_shared.contracts import (
    ContractValidationError,
    ErrorEnvelopeSchema,
    ForgeJobResponseSchema,
    PairIntentResponseSchema,
    SessionEventSchema,
    StageExecutionSchema,
    calculate_progress,
    get_contract_schema,
    get_failed_stages,
    is_processing_complete,
    redact_sensitive,
    run_smoke_tests,
    safe_parse,
    validate_bridge_command_request,
    validate_contract,
    validate_forge_job_response,
    validate_session_internal_state,
    validate_session_start_response,
    validate_session_translations,
    validate_translation_entry,
)
from flingoos_shared.examples import INVALID_EXAMPLES, VALID_EXAMPLES


def stage(code, status):
    return {"stage": code, "status": status, "started_at": "2024-01-15T10:00:00Z"}


class TestSafeParse:
    """Test safe_parse."""

    def test_success(self):
        result = safe_parse(PairIntentResponseSchema, VALID_EXAMPLES["pair_intent_response"])
        assert result.success is True
        assert isinstance(result.data, PairIntentResponseSchema)
        assert result.errors == []

    def test_accepts_json_string(self):
        result = safe_parse(ErrorEnvelopeSchema, json.dumps(VALID_EXAMPLES["error_envelope"]))
        assert result.success is True
        assert result.data.http == 400

    def test_invalid_json(self):
        result = safe_parse(ErrorEnvelopeSchema, "{not json")
        assert result.success is False
        assert result.errors[0]["type"] == "json_invalid"

    def test_failure_reports_location_and_message(self):
        result = safe_parse(PairIntentResponseSchema, {
            **VALID_EXAMPLES["pair_intent_response"],
            "pairing_token": INVALID_EXAMPLES["invalid_token"],
        })
        assert result.success is False
        assert result.errors[0]["loc"] == ("pairing_token",)
        assert "Invalid opaque token format" in result.error

    def test_errors_never_echo_input(self):
        ticket = INVALID_EXAMPLES["presence_ticket_in_logs"]
        result = safe_parse(ErrorEnvelopeSchema, {"code": ticket, "http": 400, "message": "m"})
        assert result.success is False
        assert ticket not in json.dumps(result.errors, default=str)
        assert ticket not in result.error

    def test_union_types(self):
        result = safe_parse(SessionEventSchema, {"type": "session_error", "error": "Bridge offline"})
        assert result.success is True
        assert result.data.error == "Bridge offline"


class TestValidateContract:
    """Test validate_contract and the named validators."""

    def test_strict_raises(self):
        with pytest.raises(ContractValidationError) as exc_info:
            validate_contract({"http": 200}, ErrorEnvelopeSchema)
        assert exc_info.value.contract_name == "ErrorEnvelopeSchema"
        assert exc_info.value.errors

    def test_non_strict_returns_none(self):
        assert validate_contract({"http": 200}, ErrorEnvelopeSchema, strict=False) is None

    def test_named_validators(self):
        assert validate_session_start_response(VALID_EXAMPLES["session_start_response"]).success is True
        assert validate_bridge_command_request(VALID_EXAMPLES["bridge_command_request"]).command == "audio_start"
        assert validate_session_internal_state(VALID_EXAMPLES["session_internal_state"]).status == "completed"
        job = validate_forge_job_response(VALID_EXAMPLES["forge_job_response"])
        assert isinstance(job, ForgeJobResponseSchema)

    def test_forge_job_response_rejects_unknown_status(self):
        with pytest.raises(ContractValidationError):
            validate_forge_job_response({**VALID_EXAMPLES["forge_job_response"], "status": "exploded"})

    def test_translation_cache(self):
        translations = VALID_EXAMPLES["session_content_doc"]["translations"]
        assert validate_translation_entry(translations["he"]).source_revision == 3
        assert set(validate_session_translations(translations)) == {"he"}

    def test_translation_cache_rejects_unknown_status(self):
        entry = {**VALID_EXAMPLES["session_content_doc"]["translations"]["he"], "status": "queued"}
        with pytest.raises(ContractValidationError):
            validate_session_translations({"he": entry})


class TestProcessingHelpers:
    """Test progress, completion and failed-stage helpers."""

    def test_progress(self):
        executions = [stage("A", "completed"), stage("B", "skipped"), stage("C", "running"), stage("D", "pending")]
        assert calculate_progress(executions) == 50

    def test_progress_accepts_models(self):
        executions = [StageExecutionSchema(**stage("A", "completed")), StageExecutionSchema(**stage("B", "failed"))]
        assert calculate_progress(executions) == 50

    def test_progress_empty(self):
        assert calculate_progress([]) == 0
        assert calculate_progress(None) == 0

    def test_progress_complete(self):
        assert calculate_progress([stage(code, "completed") for code in "ABCDEFG"]) == 100

    @pytest.mark.parametrize("status, expected", [
        ("completed", True),
        ("failed", True),
        ("processing", False),
        ("pending", False),
        (None, False),
    ])
    def test_is_processing_complete(self, status, expected):
        assert is_processing_complete(status) is expected

    def test_failed_stages(self):
        executions = [stage("A", "completed"), stage("C", "failed"), stage("E", "failed")]
        assert get_failed_stages(executions) == ["C", "E"]
        assert get_failed_stages(None) == []


class TestRedaction:
    """Test redact_sensitive."""

    def test_nested_values_masked(self):
        payload = {
            "presence_ticket": INVALID_EXAMPLES["presence_ticket_in_logs"],
            "session_options": {"stages": ["A"]},
            "devices": [{"fingerprint": "fp_1", "label": "Mac"}],
        }
        redacted = redact_sensitive(payload)
        assert redacted["presence_ticket"] == "[REDACTED]"
        assert redacted["devices"][0] == {"fingerprint": "[REDACTED]", "label": "Mac"}
        assert redacted["session_options"] == {"stages": ["A"]}
        assert payload["presence_ticket"] == INVALID_EXAMPLES["presence_ticket_in_logs"]

    def test_models_are_redacted(self):
        model = PairIntentResponseSchema(**VALID_EXAMPLES["pair_intent_response"])
        assert redact_sensitive(model)["pairing_token"] == "[REDACTED]"

    def test_none_kept(self):
        assert redact_sensitive({"presence_ticket": None}) == {"presence_ticket": None}


class TestSmokeTestsAndSchemas:
    """Test run_smoke_tests and get_contract_schema."""

    def test_smoke_tests_pass(self):
        results = run_smoke_tests()
        assert results
        assert all(results.values()), [name for name, ok in results.items() if not ok]

    def test_contract_schema_metadata(self):
        schema = get_contract_schema(ErrorEnvelopeSchema)
        assert schema["$id"] == f"{settings.SCHEMA_BASE_URI}ErrorEnvelopeSchema.json"
        assert schema["title"] == "ErrorEnvelopeSchema"
        assert schema["version"] == settings.PACKAGE_VERSION
        assert "code" in schema["properties"]

    def test_contract_schema_for_union(self):
        schema = get_contract_schema(SessionEventSchema, name="SessionEvent")
        assert schema["$id"].endswith("SessionEvent.json")
        assert schema["title"] == "SessionEvent"
