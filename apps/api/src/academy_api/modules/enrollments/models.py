"""
New Enrollment Models

Single-document enrollment submitted in one go (parent, student, agreement),
reviewed by staff through its status.
"""

import enum
from datetime import date, datetime

from sqlalchemy import Date, Enum, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from academy_api.modules.shared import BaseModel, YesNo, yes_no_type


class NewEnrollmentStatus(str, enum.Enum):
    """Review status set by staff."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NewEnrollment(BaseModel):
    """
    New student enrollment.

    Unlike the six-form enrollment, everything lives in this one row and the
    status is set directly by staff.
    """

    __tablename__ = "new_enrollments"

    enrollment_id: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)

    # Parent
    parent_full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    relationship_to_student: Mapped[str] = mapped_column(String(50), nullable=False)
    marital_status: Mapped[str] = mapped_column(String(50), nullable=False)
    primary_phone: Mapped[str] = mapped_column(String(30), nullable=False)
    alternate_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    alternate_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    street_address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)

    # Student
    student_full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    birth_certificate_nic: Mapped[str | None] = mapped_column(String(100), nullable=True)
    total_siblings: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    orphan_status: Mapped[YesNo] = mapped_column(yes_no_type(), nullable=False, default=YesNo.NO)
    osc_status: Mapped[YesNo] = mapped_column(yes_no_type(), nullable=False, default=YesNo.NO)
    identification_mark: Mapped[str | None] = mapped_column(String(255), nullable=True)
    registration_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    admission_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    class_grade: Mapped[str | None] = mapped_column(String(50), nullable=True)
    section: Mapped[str | None] = mapped_column(String(50), nullable=True)
    previous_school_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    previous_school_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    board_roll_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    student_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    student_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    residential_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    student_photo: Mapped[str | None] = mapped_column(String(500), nullable=True)

    agreement_signature: Mapped[str] = mapped_column(String(200), nullable=False)

    submitted_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False, index=True)
    status: Mapped[NewEnrollmentStatus] = mapped_column(
        Enum(
            NewEnrollmentStatus,
            name="new_enrollment_status",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=NewEnrollmentStatus.PENDING,
    )
