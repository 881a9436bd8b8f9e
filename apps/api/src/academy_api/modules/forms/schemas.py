"""
Enrollment Form Schemas

Pydantic schemas for the six enrollment forms. Request bodies are accepted
verbatim (camelCase on the wire); required fields must be present and
non-empty.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from academy_api.modules.forms.models import SignerRole
from academy_api.modules.shared import CamelModel, YesNo


class FormDocumentBase(CamelModel):
    enrollment_id: str = Field(..., min_length=1, max_length=100)


class FormDocumentRead(CamelModel):
    """Fields the store adds to every form."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    submitted_at: datetime


# ============================================
# Student Registration
# ============================================


class Sibling(CamelModel):
    name: str | None = Field(None, max_length=200)
    grade: str | None = Field(None, max_length=50)


class StudentRegistrationCreate(FormDocumentBase):
    """Request body for POST /forms/student-registration."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    gender: str = Field(..., min_length=1, max_length=20)
    date_of_birth: date
    grade_level: str = Field(..., min_length=1, max_length=50)

    house_number: str | None = Field(None, max_length=50)
    address_line1: str = Field(..., min_length=1, max_length=255)
    address_line2: str | None = Field(None, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zip_code: str = Field(..., min_length=1, max_length=20)
    citizenship: str | None = Field(None, max_length=100)
    ethnicity: str | None = Field(None, max_length=100)

    father_first_name: str | None = Field(None, max_length=100)
    father_last_name: str | None = Field(None, max_length=100)
    father_address1: str | None = Field(None, max_length=255)
    father_address2: str | None = Field(None, max_length=255)
    father_city: str | None = Field(None, max_length=100)
    father_state: str | None = Field(None, max_length=100)
    father_zip: str | None = Field(None, max_length=20)
    father_phone: str | None = Field(None, max_length=30)
    father_email: str | None = Field(None, max_length=255)
    father_occupation: str | None = Field(None, max_length=100)
    father_employment: str | None = Field(None, max_length=200)
    father_work_phone: str | None = Field(None, max_length=30)

    mother_first_name: str | None = Field(None, max_length=100)
    mother_last_name: str | None = Field(None, max_length=100)
    mother_address1: str | None = Field(None, max_length=255)
    mother_address2: str | None = Field(None, max_length=255)
    mother_city: str | None = Field(None, max_length=100)
    mother_state: str | None = Field(None, max_length=100)
    mother_zip: str | None = Field(None, max_length=20)
    mother_phone: str | None = Field(None, max_length=30)
    mother_email: str | None = Field(None, max_length=255)
    mother_occupation: str | None = Field(None, max_length=100)
    mother_employment: str | None = Field(None, max_length=200)

    public_school_name: str | None = Field(None, max_length=200)
    public_district: str | None = Field(None, max_length=200)
    previous_school_name: str | None = Field(None, max_length=200)
    previous_school_phone: str | None = Field(None, max_length=30)
    previous_school_address: str | None = Field(None, max_length=500)
    reason_for_leaving: str | None = None
    repeated_grade: str | None = Field(None, max_length=100)
    disciplinary_action: str | None = None
    subjects_excel: str | None = None
    subjects_struggle: str | None = None
    extracurricular_activities: str | None = None

    siblings: list[Sibling] = Field(default_factory=list)

    student_photo: str | None = Field(None, max_length=500)
    print_name: str | None = Field(None, max_length=200)


class StudentRegistrationResponse(FormDocumentRead, StudentRegistrationCreate):
    # Registrations created from a single-token full name have no last name
    last_name: str = ""


# ============================================
# Health Form
# ============================================


class MedicalConditions(CamelModel):
    asthma: bool = False
    diabetes: bool = False
    convulsion: bool = False
    heart_trouble: bool = False
    frequent_cold: bool = False
    stomach_upsets: bool = False
    fainting_spells: bool = False
    urinary_problems: bool = False
    skin_rash: bool = False
    soiling: bool = False
    sore_throats: bool = False
    ear_infection: bool = False
    none_of_above: bool = False


class PastDiseases(CamelModel):
    mumps: bool = False
    chickenpox: bool = False
    hepatitis: bool = False
    scarlet_fever: bool = False
    tuberculosis: bool = False
    measles: bool = False
    none_of_above: bool = False


class HealthFormCreate(FormDocumentBase):
    """Request body for POST /forms/health-form."""

    insurance_company: str = Field(..., min_length=1, max_length=200)
    physician_name: str = Field(..., min_length=1, max_length=200)
    physician_number: str = Field(..., min_length=1, max_length=50)

    has_disabilities: YesNo = YesNo.NO
    disability_explanation: str | None = None
    medical_conditions: MedicalConditions = Field(default_factory=MedicalConditions)
    past_diseases: PastDiseases = Field(default_factory=PastDiseases)
    past_conditions: str | None = None
    takes_regular_medication: YesNo = YesNo.NO
    medication_explanation: str | None = None
    has_allergies: YesNo = YesNo.NO
    allergies_list: str | None = None

    health_form_signature: str = Field(..., min_length=1, max_length=200)


class HealthFormResponse(FormDocumentRead, HealthFormCreate):
    pass


# ============================================
# Emergency Contact
# ============================================


class EmergencyContactCreate(FormDocumentBase):
    """Request body for POST /forms/emergency-contact."""

    emergency_contact1_name: str = Field(..., min_length=1, max_length=200)
    emergency_contact1_phone: str = Field(..., min_length=1, max_length=30)
    emergency_contact1_relationship: str = Field(..., min_length=1, max_length=100)
    emergency_contact2_name: str = Field(..., min_length=1, max_length=200)
    emergency_contact2_phone: str = Field(..., min_length=1, max_length=30)
    emergency_contact2_relationship: str = Field(..., min_length=1, max_length=100)
    emergency_contact3_name: str | None = Field(None, max_length=200)
    emergency_contact3_phone: str | None = Field(None, max_length=30)
    emergency_contact3_relationship: str | None = Field(None, max_length=100)

    pediatrician_name: str | None = Field(None, max_length=200)
    pediatrician_phone: str | None = Field(None, max_length=30)
    hospital_choice: str | None = Field(None, max_length=200)
    authorized_pickup: str | None = None

    emergency_form_signature: str = Field(..., min_length=1, max_length=200)


class EmergencyContactResponse(FormDocumentRead, EmergencyContactCreate):
    pass


# ============================================
# Picture Authorization
# ============================================


class PictureAuthorizationCreate(FormDocumentBase):
    """Request body for POST /forms/picture-authorization."""

    picture_auth_signature: str = Field(..., min_length=1, max_length=200)
    discipline_acknowledgment: str = Field(..., min_length=1, max_length=200)
    signer_role: SignerRole
    discipline_form_signature: str = Field(..., min_length=1, max_length=200)


class PictureAuthorizationResponse(FormDocumentRead, PictureAuthorizationCreate):
    pass


# ============================================
# Transfer Records
# ============================================


class TransferRecordsCreate(FormDocumentBase):
    """Request body for POST /forms/transfer-records."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date
    grade: str = Field(..., min_length=1, max_length=50)

    previous_school_name: str = Field(..., min_length=1, max_length=200)
    previous_school_address: str = Field(..., min_length=1, max_length=500)
    previous_school_city: str = Field(..., min_length=1, max_length=100)
    previous_school_state: str = Field(..., min_length=1, max_length=100)
    previous_school_zip: str = Field(..., min_length=1, max_length=20)
    previous_school_phone: str = Field(..., min_length=1, max_length=30)

    parent_guardian_name: str = Field(..., min_length=1, max_length=200)
    parent_guardian_phone: str = Field(..., min_length=1, max_length=30)
    parent_guardian_email: str | None = Field(None, max_length=255)
    records_needed: str | None = None
    urgency_level: str | None = Field(None, max_length=50)

    transfer_form_signature: str = Field(..., min_length=1, max_length=200)


class TransferRecordsResponse(FormDocumentRead, TransferRecordsCreate):
    pass


# ============================================
# Tuition Contract
# ============================================


class TuitionContractCreate(FormDocumentBase):
    """Request body for POST /forms/tuition-contract."""

    guardian_first_name: str = Field(..., min_length=1, max_length=100)
    guardian_last_name: str = Field(..., min_length=1, max_length=100)
    guardian_phone: str = Field(..., min_length=1, max_length=30)
    guardian_email: str = Field(..., min_length=1, max_length=255)
    guardian_address_line1: str = Field(..., min_length=1, max_length=255)
    guardian_address_line2: str | None = Field(None, max_length=255)
    guardian_city: str = Field(..., min_length=1, max_length=100)
    guardian_state: str = Field(..., min_length=1, max_length=100)
    guardian_zip_code: str = Field(..., min_length=1, max_length=20)

    tuition_acknowledgment: str = Field(..., min_length=1, max_length=200)
    textbook_fee_acknowledgment: str = Field(..., min_length=1, max_length=200)
    application_fee_acknowledgment: str = Field(..., min_length=1, max_length=200)

    payment_option1: bool = False
    payment_option2: bool = False
    payment_option3: bool = False

    tuition_contract_signature: str = Field(..., min_length=1, max_length=200)


class TuitionContractResponse(FormDocumentRead, TuitionContractCreate):
    pass


# ============================================
# Shared envelopes
# ============================================


class FormDeleteResponse(CamelModel):
    success: bool = True
    message: str
