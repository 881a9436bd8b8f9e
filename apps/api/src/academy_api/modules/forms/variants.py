"""
Form Variant Registry

Each enrollment form is described once here. The generic service and the
route factory read everything they need (model, schemas, response keys,
user-facing messages) from these descriptors.
"""

from dataclasses import dataclass

from pydantic import create_model

from academy_api.modules.forms.models import (
    EmergencyContact,
    HealthForm,
    PictureAuthorization,
    StudentRegistration,
    TransferRecords,
    TuitionContract,
)
from academy_api.modules.forms.schemas import (
    EmergencyContactCreate,
    EmergencyContactResponse,
    HealthFormCreate,
    HealthFormResponse,
    PictureAuthorizationCreate,
    PictureAuthorizationResponse,
    StudentRegistrationCreate,
    StudentRegistrationResponse,
    TransferRecordsCreate,
    TransferRecordsResponse,
    TuitionContractCreate,
    TuitionContractResponse,
)
from academy_api.modules.shared import BaseModel, CamelModel


@dataclass(frozen=True)
class FormVariant:
    """Descriptor for one enrollment form."""

    slug: str  # URL segment under /forms
    slot: str  # key of this form in the aggregated enrollment
    model: type[BaseModel]
    create_schema: type[CamelModel]
    response_schema: type[CamelModel]
    item_key: str
    collection_key: str
    label: str  # singular, used in log lines and failure messages
    plural_label: str
    submitted_message: str
    not_found_message: str
    deleted_message: str

    @property
    def name(self) -> str:
        return self.model.__name__

    def submit_envelope(self) -> type[CamelModel]:
        return _envelopes[(self.slug, "submit")]

    def list_envelope(self) -> type[CamelModel]:
        return _envelopes[(self.slug, "list")]

    def detail_envelope(self) -> type[CamelModel]:
        return _envelopes[(self.slug, "detail")]


STUDENT_REGISTRATION = FormVariant(
    slug="student-registration",
    slot="studentRegistration",
    model=StudentRegistration,
    create_schema=StudentRegistrationCreate,
    response_schema=StudentRegistrationResponse,
    item_key="registration",
    collection_key="registrations",
    label="registration",
    plural_label="registrations",
    submitted_message="Student registration submitted successfully",
    not_found_message="Registration not found",
    deleted_message="Registration deleted successfully",
)

HEALTH_FORM = FormVariant(
    slug="health-form",
    slot="healthForm",
    model=HealthForm,
    create_schema=HealthFormCreate,
    response_schema=HealthFormResponse,
    item_key="healthForm",
    collection_key="healthForms",
    label="health form",
    plural_label="health forms",
    submitted_message="Health form submitted successfully",
    not_found_message="Health form not found",
    deleted_message="Health form deleted successfully",
)

EMERGENCY_CONTACT = FormVariant(
    slug="emergency-contact",
    slot="emergencyContact",
    model=EmergencyContact,
    create_schema=EmergencyContactCreate,
    response_schema=EmergencyContactResponse,
    item_key="contact",
    collection_key="contacts",
    label="emergency contact",
    plural_label="emergency contacts",
    submitted_message="Emergency contact submitted successfully",
    not_found_message="Emergency contact not found",
    deleted_message="Emergency contact deleted successfully",
)

PICTURE_AUTHORIZATION = FormVariant(
    slug="picture-authorization",
    slot="pictureAuthorization",
    model=PictureAuthorization,
    create_schema=PictureAuthorizationCreate,
    response_schema=PictureAuthorizationResponse,
    item_key="authorization",
    collection_key="authorizations",
    label="picture authorization",
    plural_label="picture authorizations",
    submitted_message="Picture authorization submitted successfully",
    not_found_message="Picture authorization not found",
    deleted_message="Picture authorization deleted successfully",
)

TRANSFER_RECORDS = FormVariant(
    slug="transfer-records",
    slot="transferRecords",
    model=TransferRecords,
    create_schema=TransferRecordsCreate,
    response_schema=TransferRecordsResponse,
    item_key="transfer",
    collection_key="transfers",
    label="transfer records",
    plural_label="transfer records",
    submitted_message="Transfer records request submitted successfully",
    not_found_message="Transfer records not found",
    deleted_message="Transfer records deleted successfully",
)

TUITION_CONTRACT = FormVariant(
    slug="tuition-contract",
    slot="tuitionContract",
    model=TuitionContract,
    create_schema=TuitionContractCreate,
    response_schema=TuitionContractResponse,
    item_key="contract",
    collection_key="contracts",
    label="tuition contract",
    plural_label="tuition contracts",
    submitted_message="Tuition contract submitted successfully",
    not_found_message="Tuition contract not found",
    deleted_message="Tuition contract deleted successfully",
)

# Route registration order
FORM_VARIANTS: tuple[FormVariant, ...] = (
    STUDENT_REGISTRATION,
    EMERGENCY_CONTACT,
    HEALTH_FORM,
    PICTURE_AUTHORIZATION,
    TRANSFER_RECORDS,
    TUITION_CONTRACT,
)

# The five forms joined onto a registration, in enrollment slot order
RELATED_VARIANTS: tuple[FormVariant, ...] = (
    HEALTH_FORM,
    EMERGENCY_CONTACT,
    PICTURE_AUTHORIZATION,
    TRANSFER_RECORDS,
    TUITION_CONTRACT,
)


def _build_envelopes() -> dict[tuple[str, str], type[CamelModel]]:
    envelopes: dict[tuple[str, str], type[CamelModel]] = {}
    for variant in FORM_VARIANTS:
        envelopes[(variant.slug, "submit")] = create_model(
            f"{variant.name}SubmitResponse",
            __base__=CamelModel,
            success=(bool, True),
            message=(str, ...),
            **{variant.item_key: (variant.response_schema, ...)},
        )
        envelopes[(variant.slug, "list")] = create_model(
            f"{variant.name}ListResponse",
            __base__=CamelModel,
            success=(bool, True),
            count=(int, ...),
            **{variant.collection_key: (list[variant.response_schema], ...)},
        )
        envelopes[(variant.slug, "detail")] = create_model(
            f"{variant.name}DetailResponse",
            __base__=CamelModel,
            success=(bool, True),
            **{variant.item_key: (variant.response_schema, ...)},
        )
    return envelopes


_envelopes = _build_envelopes()
