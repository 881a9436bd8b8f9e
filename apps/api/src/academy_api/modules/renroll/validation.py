"""
Re-enrollment Step Validation

Required fields for each of the three steps, checked against the wire
(camelCase) form data. Validation is presence-only: a field is missing when
it is absent, null, or a string that is blank after trimming. Formats are
not checked.

The draft shape (every field optional) lives in schemas.RenrollFormFields.
The finalized shape is "all three step rule sets pass", which is what
validate_finalized checks before a form may be marked completed.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

FINAL_STEP = 2


@dataclass(frozen=True)
class FieldRule:
    field: str
    message: str
    # When set, the value must equal this exactly
    expected: str | None = None


STEP_RULES: dict[int, tuple[FieldRule, ...]] = {
    0: (
        FieldRule("childFirstName", "Child first name is required"),
        FieldRule("childLastName", "Child last name is required"),
        FieldRule("gender", "Gender is required"),
        FieldRule("dateOfBirth", "Date of birth is required"),
        FieldRule("ethnicity", "Ethnicity is required"),
        FieldRule("gradeLevel", "Grade level is required"),
        FieldRule("address1", "Address is required"),
        FieldRule("city", "City is required"),
        FieldRule("state", "State is required"),
        FieldRule("zipCode", "Zip code is required"),
        FieldRule("schoolDistrict", "School district is required"),
        FieldRule("fatherFirstName", "Father first name is required"),
        FieldRule("fatherLastName", "Father last name is required"),
        FieldRule("fatherPhone", "Father phone is required"),
        FieldRule("fatherEmail", "Father email is required"),
        FieldRule("motherFirstName", "Mother first name is required"),
        FieldRule("motherLastName", "Mother last name is required"),
        FieldRule("motherPhone", "Mother phone is required"),
        FieldRule("motherEmail", "Mother email is required"),
    ),
    1: (
        FieldRule("emergency1Name", "Emergency contact 1 name is required"),
        FieldRule("emergency1Phone", "Emergency contact 1 phone is required"),
        FieldRule("emergency1Relationship", "Emergency contact 1 relationship is required"),
        FieldRule("emergency2Name", "Emergency contact 2 name is required"),
        FieldRule("emergency2Phone", "Emergency contact 2 phone is required"),
        FieldRule("emergency2Relationship", "Emergency contact 2 relationship is required"),
        FieldRule("authorizedPerson1", "Authorized person 1 name is required"),
        FieldRule("authorizedPerson1Phone", "Authorized person 1 phone is required"),
        FieldRule("authorizedPerson1Relationship", "Authorized person 1 relationship is required"),
        FieldRule("hospitalPreference", "Hospital preference is required"),
        FieldRule("parentSignature", "Parent signature is required"),
    ),
    2: (
        FieldRule("guardianName", "Guardian name is required"),
        FieldRule("homePhone", "Home phone is required"),
        FieldRule("guardianEmail", "Guardian email is required"),
        FieldRule("acknowledgeTuition", "Tuition acknowledgment is required", expected="yes"),
        FieldRule("acknowledgeTextbookFee", "Textbook fee acknowledgment is required", expected="yes"),
        FieldRule("paymentOption", "Payment option is required"),
        FieldRule("tuitionSignature", "Tuition signature is required"),
    ),
}


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _check(rule: FieldRule, form_data: Mapping[str, Any]) -> bool:
    value = form_data.get(rule.field)
    if rule.expected is not None:
        return value == rule.expected
    return not is_missing(value)


def validate_step(step: int, form_data: Mapping[str, Any]) -> list[str]:
    """
    Check one step's required fields.

    Returns:
        One message per missing field, in rule order; empty when the step passes

    Raises:
        ValueError: step is not 0, 1 or 2
    """
    if step not in STEP_RULES:
        raise ValueError(f"Unknown re-enrollment step: {step}")
    return [rule.message for rule in STEP_RULES[step] if not _check(rule, form_data)]


def validate_finalized(form_data: Mapping[str, Any]) -> list[str]:
    """Check every step in order; a form is complete only when this is empty."""
    errors: list[str] = []
    for step in sorted(STEP_RULES):
        errors.extend(validate_step(step, form_data))
    return errors
