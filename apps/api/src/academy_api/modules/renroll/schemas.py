"""
Re-enrollment Schemas

RenrollFormFields is the draft shape: every field optional, because a draft
only has to satisfy the steps submitted so far. Required-ness per step is
enforced by validation.py, not here.
"""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from academy_api.modules.renroll.models import Gender, YesNoAnswer
from academy_api.modules.renroll.validation import FINAL_STEP
from academy_api.modules.shared import CamelModel

# Accepted besides ISO 8601 (YYYY-MM-DD or a full timestamp)
DATE_OF_BIRTH_FORMATS = ("%m/%d/%Y", "%m-%d-%Y", "%Y/%m/%d")


def parse_date_of_birth(value: str) -> date:
    """Parse a date of birth sent as ISO 8601 or one of DATE_OF_BIRTH_FORMATS."""
    text = value.strip()
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in DATE_OF_BIRTH_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized date: {value!r}")


class RenrollFormFields(CamelModel):
    """Every re-enrollment field, all optional."""

    model_config = ConfigDict(from_attributes=True)

    # Step 0: child
    child_first_name: str | None = Field(None, max_length=100)
    child_last_name: str | None = Field(None, max_length=100)
    gender: Gender | None = None
    date_of_birth: date | None = None
    ethnicity: str | None = Field(None, max_length=100)
    grade_level: str | None = Field(None, max_length=50)
    has_additional_children: YesNoAnswer | None = None
    number_of_children: int | None = Field(None, ge=0)

    # Step 0: address
    address1: str | None = Field(None, max_length=255)
    address2: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip_code: str | None = Field(None, max_length=20)
    school_district: str | None = Field(None, max_length=200)

    # Step 0: father
    father_first_name: str | None = Field(None, max_length=100)
    father_last_name: str | None = Field(None, max_length=100)
    father_phone: str | None = Field(None, max_length=30)
    father_email: str | None = Field(None, max_length=255)
    father_address1: str | None = Field(None, max_length=255)
    father_address2: str | None = Field(None, max_length=255)
    father_city: str | None = Field(None, max_length=100)
    father_state: str | None = Field(None, max_length=100)
    father_zip_code: str | None = Field(None, max_length=20)
    father_occupation: str | None = Field(None, max_length=100)
    father_employment: str | None = Field(None, max_length=200)

    # Step 0: mother
    mother_first_name: str | None = Field(None, max_length=100)
    mother_last_name: str | None = Field(None, max_length=100)
    mother_phone: str | None = Field(None, max_length=30)
    mother_email: str | None = Field(None, max_length=255)
    is_mother_address_same: YesNoAnswer | None = None
    mother_address1: str | None = Field(None, max_length=255)
    mother_address2: str | None = Field(None, max_length=255)
    mother_city: str | None = Field(None, max_length=100)
    mother_state: str | None = Field(None, max_length=100)
    mother_zip_code: str | None = Field(None, max_length=20)
    mother_occupation: str | None = Field(None, max_length=100)
    mother_employment: str | None = Field(None, max_length=200)

    # Step 1
    child1_health_changes: YesNoAnswer | None = None
    child2_health_changes: YesNoAnswer | None = None
    child3_health_changes: YesNoAnswer | None = None
    child4_health_changes: YesNoAnswer | None = None
    child5_health_changes: YesNoAnswer | None = None

    emergency1_name: str | None = Field(None, max_length=200)
    emergency1_phone: str | None = Field(None, max_length=30)
    emergency1_relationship: str | None = Field(None, max_length=100)
    emergency2_name: str | None = Field(None, max_length=200)
    emergency2_phone: str | None = Field(None, max_length=30)
    emergency2_relationship: str | None = Field(None, max_length=100)
    emergency3_name: str | None = Field(None, max_length=200)
    emergency3_phone: str | None = Field(None, max_length=30)
    emergency3_relationship: str | None = Field(None, max_length=100)

    authorized_person1: str | None = Field(None, max_length=200)
    authorized_person1_phone: str | None = Field(None, max_length=30)
    authorized_person1_relationship: str | None = Field(None, max_length=100)
    authorized_person2: str | None = Field(None, max_length=200)
    authorized_person2_phone: str | None = Field(None, max_length=30)
    authorized_person2_relationship: str | None = Field(None, max_length=100)
    authorized_person3: str | None = Field(None, max_length=200)
    authorized_person3_phone: str | None = Field(None, max_length=30)
    authorized_person3_relationship: str | None = Field(None, max_length=100)

    hospital_preference: str | None = Field(None, max_length=200)
    parent_signature: str | None = Field(None, max_length=200)

    # Step 2
    guardian_name: str | None = Field(None, max_length=200)
    guardian_name2: str | None = Field(None, max_length=200)
    home_phone: str | None = Field(None, max_length=30)
    guardian_email: str | None = Field(None, max_length=255)
    acknowledge_tuition: str | None = Field(None, max_length=20)
    acknowledge_textbook_fee: str | None = Field(None, max_length=20)
    payment_option: str | None = Field(None, max_length=100)
    tuition_signature: str | None = None

    @field_validator(
        "gender",
        "number_of_children",
        "has_additional_children",
        "is_mother_address_same",
        "child1_health_changes",
        "child2_health_changes",
        "child3_health_changes",
        "child4_health_changes",
        "child5_health_changes",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        # Unselected radios and empty number inputs arrive as ""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def coerce_date_of_birth(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_date_of_birth(value) if value.strip() else None
        return value


class RenrollStepSelector(CamelModel):
    """The step a submission is for; read before the rest of the body."""

    current_step: int = Field(0, ge=0, le=FINAL_STEP)

    @field_validator("current_step", mode="before")
    @classmethod
    def default_step(cls, value: Any) -> Any:
        return 0 if value is None or value == "" else value


class RenrollFormSubmit(RenrollFormFields, RenrollStepSelector):
    """
    Request body for POST /renroll/renroll-form.

    Clients send the full accumulated form on every step, plus the step being
    submitted and, after the first step, the draftId returned by the server.
    """

    draft_id: UUID | None = None


class RenrollFormResponse(RenrollFormFields):
    id: UUID
    current_step: int
    is_completed: bool
    submitted_at: datetime


class RenrollStepResponse(CamelModel):
    success: bool = True
    message: str
    form: RenrollFormResponse
    can_proceed: bool


class RenrollFormListResponse(CamelModel):
    success: bool = True
    count: int
    forms: list[RenrollFormResponse]


class RenrollFormDetailResponse(CamelModel):
    success: bool = True
    form: RenrollFormResponse


class RenrollFormDeleteResponse(CamelModel):
    success: bool = True
    message: str


class StepValidationRequest(CamelModel):
    """Request body for POST /renroll/renroll-form/validate-step."""

    step: int = Field(..., ge=0, le=FINAL_STEP)
    form_data: dict[str, Any] = Field(default_factory=dict)


class StepValidationResponse(CamelModel):
    success: bool
    errors: list[str]
    can_proceed: bool
