"""
Unit tests for re-enrollment step validation.
"""

import pytest

from academy_api.modules.renroll.validation import (
    STEP_RULES,
    is_missing,
    validate_finalized,
    validate_step,
)


class TestIsMissing:
    """Tests for the presence check."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank_values_are_missing(self, value):
        assert is_missing(value) is True

    @pytest.mark.parametrize("value", ["x", " Amina ", 0, False])
    def test_present_values(self, value):
        assert is_missing(value) is False


class TestValidateStep:
    """Tests for validate_step."""

    def test_empty_step_zero_lists_every_field_in_order(self):
        errors = validate_step(0, {})

        assert len(errors) == len(STEP_RULES[0])
        assert errors[0] == "Child first name is required"
        assert errors[-1] == "Mother email is required"

    def test_complete_step_passes(self, step0_data):
        assert validate_step(0, step0_data) == []

    def test_whitespace_only_field_is_missing(self, step0_data):
        step0_data["city"] = "   "
        assert validate_step(0, step0_data) == ["City is required"]

    def test_step_one_messages(self, step1_data):
        del step1_data["parentSignature"]
        step1_data["emergency2Phone"] = None

        assert validate_step(1, step1_data) == [
            "Emergency contact 2 phone is required",
            "Parent signature is required",
        ]

    def test_acknowledgments_must_be_yes(self, step2_data):
        step2_data["acknowledgeTuition"] = "no"
        step2_data["acknowledgeTextbookFee"] = ""

        assert validate_step(2, step2_data) == [
            "Tuition acknowledgment is required",
            "Textbook fee acknowledgment is required",
        ]

    @pytest.mark.parametrize("value", ["Yes", "YES", "true", " yes", True, None])
    def test_tuition_acknowledgment_is_exact_match(self, step2_data, value):
        step2_data["acknowledgeTuition"] = value
        assert validate_step(2, step2_data) == ["Tuition acknowledgment is required"]

    def test_result_is_repeatable(self, step1_data):
        del step1_data["hospitalPreference"]
        assert validate_step(1, step1_data) == validate_step(1, step1_data)

    def test_fields_from_other_steps_are_ignored(self, step1_data):
        assert validate_step(1, step1_data) == []
        assert "Child first name is required" in validate_step(0, step1_data)

    @pytest.mark.parametrize("step", [-1, 3])
    def test_unknown_step_raises(self, step):
        with pytest.raises(ValueError):
            validate_step(step, {})


class TestValidateFinalized:
    """Tests for validate_finalized."""

    def test_complete_form_passes(self, complete_form_data):
        assert validate_finalized(complete_form_data) == []

    def test_reports_missing_fields_from_every_step(self, step2_data):
        errors = validate_finalized(step2_data)

        assert "Child first name is required" in errors
        assert "Parent signature is required" in errors
        assert "Guardian name is required" not in errors
