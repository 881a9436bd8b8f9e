"""
Enrollment Schemas

Pydantic schemas for the aggregated enrollment view, the combined
enrollment submission and the single-document NewEnrollment.
"""

import enum
from datetime import date, datetime
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from academy_api.modules.enrollments.models import NewEnrollmentStatus
from academy_api.modules.forms.schemas import (
    EmergencyContactResponse,
    HealthFormResponse,
    PictureAuthorizationResponse,
    StudentRegistrationResponse,
    TransferRecordsResponse,
    TuitionContractResponse,
)
from academy_api.modules.shared import CamelModel, YesNo


class EnrollmentStatus(str, enum.Enum):
    """Completion status derived from how many forms are present."""

    PENDING = "Pending"
    UNDER_REVIEW = "Under Review"
    APPROVED = "Approved"


# ============================================
# Aggregated enrollment
# ============================================


class EnrollmentView(CamelModel):
    """
    One enrollment: the student registration plus whichever of the other
    five forms share its enrollmentId (null when not submitted yet).
    """

    id: UUID
    enrollment_id: str
    status: EnrollmentStatus
    submitted_at: datetime
    student_registration: StudentRegistrationResponse
    health_form: HealthFormResponse | None = None
    emergency_contact: EmergencyContactResponse | None = None
    picture_authorization: PictureAuthorizationResponse | None = None
    transfer_records: TransferRecordsResponse | None = None
    tuition_contract: TuitionContractResponse | None = None


class EnrollmentListResponse(CamelModel):
    success: bool = True
    count: int
    enrollments: list[EnrollmentView]


class EnrollmentDetailResponse(CamelModel):
    success: bool = True
    enrollment: EnrollmentView


# ============================================
# Combined submission
# ============================================


class EnrollmentSubmission(CamelModel):
    """
    Multipart fields of POST /forms/enrollment.

    Uses the single-page enrollment form's vocabulary; the service maps it
    onto a student registration.
    """

    enrollment_id: str | None = Field(None, max_length=100)

    parent_full_name: str = Field(..., min_length=1, max_length=200)
    relationship_to_student: str | None = Field(None, max_length=50)
    primary_phone: str | None = Field(None, max_length=30)
    email: str | None = Field(None, max_length=255)
    street_address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zip_code: str = Field(..., min_length=1, max_length=20)

    student_full_name: str = Field(..., min_length=1, max_length=200)
    gender: str = Field(..., min_length=1, max_length=20)
    date_of_birth: date
    class_grade: str = Field(..., min_length=1, max_length=50)
    previous_school_name: str | None = Field(None, max_length=200)

    agreement_signature: str | None = Field(None, max_length=200)

    @field_validator("enrollment_id", "relationship_to_student", "primary_phone", "email", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class EnrollmentSubmitResponse(CamelModel):
    success: bool = True
    message: str
    enrollment_id: str
    registration: StudentRegistrationResponse


# ============================================
# NewEnrollment
# ============================================


class NewEnrollmentCreate(CamelModel):
    """Multipart fields of POST /forms/new-enrollment."""

    enrollment_id: str = Field(..., min_length=1, max_length=100)

    parent_full_name: str = Field(..., min_length=1, max_length=200)
    relationship_to_student: str = Field(..., min_length=1, max_length=50)
    marital_status: str = Field(..., min_length=1, max_length=50)
    primary_phone: str = Field(..., min_length=1, max_length=30)
    alternate_phone: str | None = Field(None, max_length=30)
    email: str = Field(..., min_length=1, max_length=255)
    alternate_email: str | None = Field(None, max_length=255)
    street_address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zip_code: str = Field(..., min_length=1, max_length=20)

    student_full_name: str = Field(..., min_length=1, max_length=200)
    gender: str = Field(..., min_length=1, max_length=20)
    date_of_birth: date
    birth_certificate_nic: str | None = Field(None, max_length=100, alias="birthCertificateNIC")
    total_siblings: int = Field(0, ge=0)
    orphan_status: YesNo = YesNo.NO
    osc_status: YesNo = YesNo.NO
    identification_mark: str | None = Field(None, max_length=255)
    registration_number: str | None = Field(None, max_length=100)
    admission_date: date | None = None
    class_grade: str | None = Field(None, max_length=50)
    section: str | None = Field(None, max_length=50)
    previous_school_name: str | None = Field(None, max_length=200)
    previous_school_id: str | None = Field(None, max_length=100, alias="previousSchoolID")
    board_roll_number: str | None = Field(None, max_length=100)
    student_email: str | None = Field(None, max_length=255)
    student_phone: str | None = Field(None, max_length=30)
    residential_address: str | None = None

    agreement_signature: str = Field(..., min_length=1, max_length=200)

    @field_validator("total_siblings", mode="before")
    @classmethod
    def blank_siblings_to_zero(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value

    @field_validator("admission_date", mode="before")
    @classmethod
    def blank_date_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("orphan_status", "osc_status", mode="before")
    @classmethod
    def blank_to_no(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return YesNo.NO
        return value

    @field_validator("email", "student_email", mode="after")
    @classmethod
    def lowercase_email(cls, value: str | None) -> str | None:
        return value.strip().lower() if value else value


class NewEnrollmentResponse(NewEnrollmentCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    student_photo: str | None = None
    submitted_at: datetime
    status: NewEnrollmentStatus


class NewEnrollmentSubmitResponse(CamelModel):
    success: bool = True
    message: str
    enrollment: NewEnrollmentResponse


class NewEnrollmentListResponse(CamelModel):
    success: bool = True
    count: int
    enrollments: list[NewEnrollmentResponse]


class NewEnrollmentDetailResponse(CamelModel):
    success: bool = True
    enrollment: NewEnrollmentResponse


class NewEnrollmentStatusUpdate(CamelModel):
    """Request body for PATCH /forms/new-enrollment/{id}/status."""

    status: NewEnrollmentStatus
