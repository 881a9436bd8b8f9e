"""
Enrollment Form Models

One table per enrollment form. Every form carries the client-chosen
`enrollment_id` that ties the six documents of one student's enrollment
together; each table holds at most one document per enrollment_id.
Documents are never updated after they are submitted.
"""

import enum
from datetime import date, datetime

from sqlalchemy import Boolean, Date, Enum, String, Text, func
from sqlalchemy.dialects.postgresql import JSON
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from academy_api.modules.shared import BaseModel, YesNo, yes_no_type


class SignerRole(str, enum.Enum):
    """Who signed the picture authorization."""

    PARENT = "Parent"
    GUARDIAN = "Guardian"


class FormDocumentMixin:
    """Columns shared by every enrollment form."""

    @declared_attr
    def enrollment_id(cls) -> Mapped[str]:
        return mapped_column(String(100), nullable=False, unique=True, index=True)

    @declared_attr
    def submitted_at(cls) -> Mapped[datetime]:
        return mapped_column(server_default=func.now(), nullable=False, index=True)


class StudentRegistration(FormDocumentMixin, BaseModel):
    """
    Student registration form.

    The root document of an enrollment: the aggregated enrollment view is
    built around it, and its id is the enrollment's id.
    """

    __tablename__ = "student_registrations"

    # Student
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    grade_level: Mapped[str] = mapped_column(String(50), nullable=False)

    # Address
    house_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address_line1: Mapped[str] = mapped_column(String(255), nullable=False)
    address_line2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    citizenship: Mapped[str | None] = mapped_column(String(100), nullable=True)
    ethnicity: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Father
    father_first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    father_last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    father_address1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    father_address2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    father_city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    father_state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    father_zip: Mapped[str | None] = mapped_column(String(20), nullable=True)
    father_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    father_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    father_occupation: Mapped[str | None] = mapped_column(String(100), nullable=True)
    father_employment: Mapped[str | None] = mapped_column(String(200), nullable=True)
    father_work_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)

    # Mother
    mother_first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mother_last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mother_address1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mother_address2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mother_city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mother_state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mother_zip: Mapped[str | None] = mapped_column(String(20), nullable=True)
    mother_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    mother_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mother_occupation: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mother_employment: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # School history
    public_school_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    public_district: Mapped[str | None] = mapped_column(String(200), nullable=True)
    previous_school_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    previous_school_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    previous_school_address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    reason_for_leaving: Mapped[str | None] = mapped_column(Text, nullable=True)
    repeated_grade: Mapped[str | None] = mapped_column(String(100), nullable=True)
    disciplinary_action: Mapped[str | None] = mapped_column(Text, nullable=True)
    subjects_excel: Mapped[str | None] = mapped_column(Text, nullable=True)
    subjects_struggle: Mapped[str | None] = mapped_column(Text, nullable=True)
    extracurricular_activities: Mapped[str | None] = mapped_column(Text, nullable=True)

    # [{"name": ..., "grade": ...}]
    siblings: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    student_photo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    print_name: Mapped[str | None] = mapped_column(String(200), nullable=True)


class HealthForm(FormDocumentMixin, BaseModel):
    """Health history form."""

    __tablename__ = "health_forms"

    insurance_company: Mapped[str] = mapped_column(String(200), nullable=False)
    physician_name: Mapped[str] = mapped_column(String(200), nullable=False)
    physician_number: Mapped[str] = mapped_column(String(50), nullable=False)

    has_disabilities: Mapped[YesNo] = mapped_column(
        yes_no_type(),
        nullable=False,
        default=YesNo.NO,
    )
    disability_explanation: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Checkbox groups, stored as {"asthma": false, ...}
    medical_conditions: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    past_diseases: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    past_conditions: Mapped[str | None] = mapped_column(Text, nullable=True)

    takes_regular_medication: Mapped[YesNo] = mapped_column(
        yes_no_type(),
        nullable=False,
        default=YesNo.NO,
    )
    medication_explanation: Mapped[str | None] = mapped_column(Text, nullable=True)
    has_allergies: Mapped[YesNo] = mapped_column(
        yes_no_type(),
        nullable=False,
        default=YesNo.NO,
    )
    allergies_list: Mapped[str | None] = mapped_column(Text, nullable=True)

    health_form_signature: Mapped[str] = mapped_column(String(200), nullable=False)


class EmergencyContact(FormDocumentMixin, BaseModel):
    """Emergency contacts and pickup authorization form."""

    __tablename__ = "emergency_contacts"

    emergency_contact1_name: Mapped[str] = mapped_column(String(200), nullable=False)
    emergency_contact1_phone: Mapped[str] = mapped_column(String(30), nullable=False)
    emergency_contact1_relationship: Mapped[str] = mapped_column(String(100), nullable=False)
    emergency_contact2_name: Mapped[str] = mapped_column(String(200), nullable=False)
    emergency_contact2_phone: Mapped[str] = mapped_column(String(30), nullable=False)
    emergency_contact2_relationship: Mapped[str] = mapped_column(String(100), nullable=False)
    emergency_contact3_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    emergency_contact3_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    emergency_contact3_relationship: Mapped[str | None] = mapped_column(String(100), nullable=True)

    pediatrician_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    pediatrician_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    hospital_choice: Mapped[str | None] = mapped_column(String(200), nullable=True)
    authorized_pickup: Mapped[str | None] = mapped_column(Text, nullable=True)

    emergency_form_signature: Mapped[str] = mapped_column(String(200), nullable=False)


class PictureAuthorization(FormDocumentMixin, BaseModel):
    """Picture release and discipline policy acknowledgment."""

    __tablename__ = "picture_authorizations"

    picture_auth_signature: Mapped[str] = mapped_column(String(200), nullable=False)
    discipline_acknowledgment: Mapped[str] = mapped_column(String(200), nullable=False)
    signer_role: Mapped[SignerRole] = mapped_column(
        Enum(SignerRole, name="signer_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    discipline_form_signature: Mapped[str] = mapped_column(String(200), nullable=False)


class TransferRecords(FormDocumentMixin, BaseModel):
    """Request to transfer records from the previous school."""

    __tablename__ = "transfer_records"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    grade: Mapped[str] = mapped_column(String(50), nullable=False)

    previous_school_name: Mapped[str] = mapped_column(String(200), nullable=False)
    previous_school_address: Mapped[str] = mapped_column(String(500), nullable=False)
    previous_school_city: Mapped[str] = mapped_column(String(100), nullable=False)
    previous_school_state: Mapped[str] = mapped_column(String(100), nullable=False)
    previous_school_zip: Mapped[str] = mapped_column(String(20), nullable=False)
    previous_school_phone: Mapped[str] = mapped_column(String(30), nullable=False)

    parent_guardian_name: Mapped[str] = mapped_column(String(200), nullable=False)
    parent_guardian_phone: Mapped[str] = mapped_column(String(30), nullable=False)
    parent_guardian_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    records_needed: Mapped[str | None] = mapped_column(Text, nullable=True)
    urgency_level: Mapped[str | None] = mapped_column(String(50), nullable=True)

    transfer_form_signature: Mapped[str] = mapped_column(String(200), nullable=False)


class TuitionContract(FormDocumentMixin, BaseModel):
    """Tuition contract signed by the paying guardian."""

    __tablename__ = "tuition_contracts"

    guardian_first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    guardian_last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    guardian_phone: Mapped[str] = mapped_column(String(30), nullable=False)
    guardian_email: Mapped[str] = mapped_column(String(255), nullable=False)
    guardian_address_line1: Mapped[str] = mapped_column(String(255), nullable=False)
    guardian_address_line2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    guardian_city: Mapped[str] = mapped_column(String(100), nullable=False)
    guardian_state: Mapped[str] = mapped_column(String(100), nullable=False)
    guardian_zip_code: Mapped[str] = mapped_column(String(20), nullable=False)

    tuition_acknowledgment: Mapped[str] = mapped_column(String(200), nullable=False)
    textbook_fee_acknowledgment: Mapped[str] = mapped_column(String(200), nullable=False)
    application_fee_acknowledgment: Mapped[str] = mapped_column(String(200), nullable=False)

    # Pay in full / monthly / per semester
    payment_option1: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    payment_option2: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    payment_option3: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    tuition_contract_signature: Mapped[str] = mapped_column(String(200), nullable=False)
