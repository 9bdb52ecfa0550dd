"""
Tests for pipeline constants and stage messages.
"""
import pytest

from flingoos_shared.constants import PROCESSING_STATUSES, PROCESSING_TERMINAL_STATUSES, STAGES, TOTAL_STAGES
from flingoos_shared.stage_messages import (
    STAGE_LABELS,
    STAGE_MESSAGES,
    get_all_stage_codes,
    get_all_stage_messages,
    get_stage_label,
    get_stage_message,
    get_stage_number,
    is_valid_stage_code,
)


class TestConstants:
    """Test pipeline constants."""

    def test_stages(self):
        assert STAGES == ("A", "B", "C", "D", "E", "F", "G")
        assert TOTAL_STAGES == 7

    def test_terminal_statuses_are_processing_statuses(self):
        assert set(PROCESSING_TERMINAL_STATUSES) <= set(PROCESSING_STATUSES)


class TestStageMessages:
    """Test stage message lookups."""

    def test_every_stage_has_message_and_label(self):
        assert set(STAGE_MESSAGES) == set(STAGES)
        assert set(STAGE_LABELS) == set(STAGES)

    @pytest.mark.parametrize("code", ["A", "G"])
    def test_valid_codes(self, code):
        assert is_valid_stage_code(code)
        assert get_stage_message(code) == STAGE_MESSAGES[code]

    @pytest.mark.parametrize("code", [None, "", "Z", "a"])
    def test_unknown_codes(self, code):
        assert not is_valid_stage_code(code)
        assert get_stage_message(code) == "Processing..."
        assert get_stage_message(code, default="Working") == "Working"
        assert get_stage_number(code) is None

    def test_labels(self):
        assert get_stage_label("F") == "Flowchart Generation"
        assert get_stage_label(None) is None

    def test_numbers(self):
        assert get_stage_number("A") == 1
        assert get_stage_number("G") == 7

    def test_all_messages_in_order(self):
        messages = get_all_stage_messages()
        assert list(messages) == list(STAGES)
        messages["A"] = "changed"
        assert STAGE_MESSAGES["A"] != "changed"

    def test_all_codes(self):
        assert get_all_stage_codes() == list(STAGES)
