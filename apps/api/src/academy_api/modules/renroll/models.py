"""
Re-enrollment Models

A re-enrollment application is one row that is filled in over three steps.
Every field may be empty while the form is a draft; step-by-step validation
happens in the service before anything is written.
"""

import enum
from datetime import date, datetime

from sqlalchemy import Boolean, Date, Enum, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from academy_api.modules.shared import BaseModel


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"


class YesNoAnswer(str, enum.Enum):
    """Lower-case yes/no radio answer used throughout the re-enrollment form."""

    YES = "yes"
    NO = "no"


def _yes_no() -> Enum:
    return Enum(YesNoAnswer, name="yes_no_answer", values_callable=lambda e: [m.value for m in e])


class RenrollForm(BaseModel):
    """
    Re-enrollment application draft.

    Steps:
    0 - Child, address and parent details
    1 - Emergency contacts, authorized pickups, hospital and signature
    2 - Tuition contract; passing it completes the form
    """

    __tablename__ = "renroll_forms"

    # Step 0: child
    child_first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    child_last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    gender: Mapped[Gender | None] = mapped_column(
        Enum(Gender, name="renroll_gender", values_callable=lambda e: [m.value for m in e]),
        nullable=True,
    )
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    ethnicity: Mapped[str | None] = mapped_column(String(100), nullable=True)
    grade_level: Mapped[str | None] = mapped_column(String(50), nullable=True)
    has_additional_children: Mapped[YesNoAnswer | None] = mapped_column(_yes_no(), nullable=True)
    number_of_children: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Step 0: address
    address1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    school_district: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Step 0: father
    father_first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    father_last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    father_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    father_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    father_address1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    father_address2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    father_city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    father_state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    father_zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    father_occupation: Mapped[str | None] = mapped_column(String(100), nullable=True)
    father_employment: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Step 0: mother
    mother_first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mother_last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mother_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    mother_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_mother_address_same: Mapped[YesNoAnswer | None] = mapped_column(_yes_no(), nullable=True)
    mother_address1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mother_address2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    mother_city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mother_state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mother_zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    mother_occupation: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mother_employment: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Step 1: health changes per child since last year
    child1_health_changes: Mapped[YesNoAnswer | None] = mapped_column(_yes_no(), nullable=True)
    child2_health_changes: Mapped[YesNoAnswer | None] = mapped_column(_yes_no(), nullable=True)
    child3_health_changes: Mapped[YesNoAnswer | None] = mapped_column(_yes_no(), nullable=True)
    child4_health_changes: Mapped[YesNoAnswer | None] = mapped_column(_yes_no(), nullable=True)
    child5_health_changes: Mapped[YesNoAnswer | None] = mapped_column(_yes_no(), nullable=True)

    # Step 1: emergency contacts
    emergency1_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    emergency1_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    emergency1_relationship: Mapped[str | None] = mapped_column(String(100), nullable=True)
    emergency2_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    emergency2_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    emergency2_relationship: Mapped[str | None] = mapped_column(String(100), nullable=True)
    emergency3_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    emergency3_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    emergency3_relationship: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Step 1: people allowed to pick the child up
    authorized_person1: Mapped[str | None] = mapped_column(String(200), nullable=True)
    authorized_person1_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    authorized_person1_relationship: Mapped[str | None] = mapped_column(String(100), nullable=True)
    authorized_person2: Mapped[str | None] = mapped_column(String(200), nullable=True)
    authorized_person2_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    authorized_person2_relationship: Mapped[str | None] = mapped_column(String(100), nullable=True)
    authorized_person3: Mapped[str | None] = mapped_column(String(200), nullable=True)
    authorized_person3_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    authorized_person3_relationship: Mapped[str | None] = mapped_column(String(100), nullable=True)

    hospital_preference: Mapped[str | None] = mapped_column(String(200), nullable=True)
    parent_signature: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Step 2: tuition contract
    guardian_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    guardian_name2: Mapped[str | None] = mapped_column(String(200), nullable=True)
    home_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    guardian_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Only "yes" counts as acknowledged
    acknowledge_tuition: Mapped[str | None] = mapped_column(String(20), nullable=True)
    acknowledge_textbook_fee: Mapped[str | None] = mapped_column(String(20), nullable=True)
    payment_option: Mapped[str | None] = mapped_column(String(100), nullable=True)
    tuition_signature: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Progress
    current_step: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    submitted_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False, index=True)

    __table_args__ = (
        # Draft lookup when the client does not send draftId
        Index(
            "ix_renroll_forms_applicant",
            "father_email",
            "child_first_name",
            "child_last_name",
        ),
    )
