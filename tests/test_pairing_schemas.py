"""
Tests for pairing, presence and error envelope contracts.
"""
import pytest
from pydantic import ValidationError

from flingoos_shared.contracts import (
    DeviceRecordSchema,
    ErrorEnvelopeSchema,
    PairCompleteRequestSchema,
    PairIntentResponseSchema,
    PresenceIntentResponseSchema,
    PresenceStatusResponseSchema,
    SessionStartRequestSchema,
    UserDeviceLinkSchema,
)
from flingoos_shared.examples import INVALID_EXAMPLES, VALID_EXAMPLES


def error_messages(exc_info):
    return " ".join(err["msg"] for err in exc_info.value.errors())


class TestPairing:
    """Test device pairing schemas."""

    def test_pair_intent_valid(self):
        result = PairIntentResponseSchema(**VALID_EXAMPLES["pair_intent_response"])
        assert result.pairing_token == "pair_abcd1234567890ef"

    def test_pair_intent_rejects_short_token(self):
        with pytest.raises(ValidationError) as exc_info:
            PairIntentResponseSchema(**{
                **VALID_EXAMPLES["pair_intent_response"],
                "pairing_token": INVALID_EXAMPLES["invalid_token"],
            })
        assert "Invalid opaque token format" in error_messages(exc_info)

    @pytest.mark.parametrize("token", ["pair abcd1234567890ef", "pair.abcd1234567890", "x" * 257])
    def test_pair_intent_rejects_structured_tokens(self, token):
        with pytest.raises(ValidationError):
            PairIntentResponseSchema(**{**VALID_EXAMPLES["pair_intent_response"], "pairing_token": token})

    def test_pair_intent_rejects_web_link(self):
        with pytest.raises(ValidationError) as exc_info:
            PairIntentResponseSchema(**{
                **VALID_EXAMPLES["pair_intent_response"],
                "deep_link": INVALID_EXAMPLES["invalid_deep_link"],
            })
        assert "Must be flingoos-bridge:// deep link" in error_messages(exc_info)

    def test_pair_complete_requires_long_proof(self):
        PairCompleteRequestSchema(**VALID_EXAMPLES["pair_complete_request"])
        with pytest.raises(ValidationError):
            PairCompleteRequestSchema(pairing_token="pair_abcd1234567890ef", device_proof="too-short")

    def test_device_record(self):
        device = DeviceRecordSchema(**VALID_EXAMPLES["device_record"])
        assert device.available is True
        assert device.stale is False

    def test_device_record_label_optional(self):
        data = dict(VALID_EXAMPLES["device_record"])
        data.pop("label")
        assert DeviceRecordSchema(**data).label is None

    def test_user_device_link(self):
        link = UserDeviceLinkSchema(**VALID_EXAMPLES["user_device_link"])
        assert link.fingerprint == "fp_device_abc123456789"


class TestPresence:
    """Test presence approval schemas."""

    def test_presence_intent_valid(self):
        result = PresenceIntentResponseSchema(**VALID_EXAMPLES["presence_intent_response"])
        assert result.short_code == "1234"

    def test_presence_intent_rejects_bad_timestamp(self):
        with pytest.raises(ValidationError) as exc_info:
            PresenceIntentResponseSchema(**{
                **VALID_EXAMPLES["presence_intent_response"],
                "expires_at": INVALID_EXAMPLES["invalid_timestamp"],
            })
        assert "Invalid ISO-8601 timestamp" in error_messages(exc_info)

    @pytest.mark.parametrize("timestamp", ["2024-01-15T10:30:00+02:00", "2024-01-15T10:30:00Z"])
    def test_presence_intent_accepts_timezones(self, timestamp):
        PresenceIntentResponseSchema(**{**VALID_EXAMPLES["presence_intent_response"], "expires_at": timestamp})

    def test_presence_intent_rejects_timestamp_without_zone(self):
        with pytest.raises(ValidationError):
            PresenceIntentResponseSchema(**{
                **VALID_EXAMPLES["presence_intent_response"],
                "expires_at": "2024-01-15T10:30:00",
            })

    @pytest.mark.parametrize("code", [INVALID_EXAMPLES["invalid_short_code"], "12a4", "123"])
    def test_presence_intent_rejects_bad_short_code(self, code):
        with pytest.raises(ValidationError) as exc_info:
            PresenceIntentResponseSchema(**{**VALID_EXAMPLES["presence_intent_response"], "short_code": code})
        assert "Must be 4-digit code" in error_messages(exc_info)

    def test_status_ready_with_ticket(self):
        status = PresenceStatusResponseSchema(**VALID_EXAMPLES["presence_status_ready"])
        assert status.presence_ticket == "ticket_ready_abc123456789"

    def test_status_not_ready(self):
        status = PresenceStatusResponseSchema(**VALID_EXAMPLES["presence_status_not_ready"])
        assert status.presence_ticket is None

    def test_status_ready_requires_ticket(self):
        data = dict(VALID_EXAMPLES["presence_status_ready"])
        data.pop("presence_ticket")
        with pytest.raises(ValidationError):
            PresenceStatusResponseSchema(**data)

    @pytest.mark.parametrize("poll_after_ms", [99, 5001])
    def test_status_poll_bounds(self, poll_after_ms):
        with pytest.raises(ValidationError):
            PresenceStatusResponseSchema(**{**VALID_EXAMPLES["presence_status_not_ready"], "poll_after_ms": poll_after_ms})

    @pytest.mark.parametrize("poll_after_ms", [100, 5000])
    def test_status_poll_bounds_inclusive(self, poll_after_ms):
        PresenceStatusResponseSchema(**{**VALID_EXAMPLES["presence_status_not_ready"], "poll_after_ms": poll_after_ms})

    def test_session_start_request(self):
        request = SessionStartRequestSchema(**VALID_EXAMPLES["session_start_request"])
        assert request.session_options.stages == ["A", "B", "C"]

    def test_session_start_requires_ticket(self):
        with pytest.raises(ValidationError):
            SessionStartRequestSchema(session_options={"stages": ["A"]})

    def test_session_options_allow_extra_keys(self):
        request = SessionStartRequestSchema(
            presence_ticket="ticket_ready_abc123456789",
            session_options={"stages": ["A"], "debug": True},
        )
        assert request.session_options.model_dump()["debug"] is True


class TestErrorEnvelope:
    """Test the canonical error envelope."""

    def test_valid(self):
        envelope = ErrorEnvelopeSchema(**VALID_EXAMPLES["error_envelope"])
        assert envelope.code == "ticket_expired"
        assert 400 <= envelope.http <= 599

    @pytest.mark.parametrize("http", [INVALID_EXAMPLES["invalid_http_status"], 399, 600])
    def test_http_range(self, http):
        with pytest.raises(ValidationError):
            ErrorEnvelopeSchema(**{**VALID_EXAMPLES["error_envelope"], "http": http})

    def test_unknown_code(self):
        with pytest.raises(ValidationError):
            ErrorEnvelopeSchema(code="teapot", http=418, message="nope")

    def test_round_trip(self):
        original = VALID_EXAMPLES["presence_intent_response"]
        parsed = PresenceIntentResponseSchema(**original)
        assert PresenceIntentResponseSchema.model_validate_json(parsed.model_dump_json()).model_dump() == original
