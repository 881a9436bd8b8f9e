"""create enrollment tables

Revision ID: a7c1e2d3f4b5
Revises:
Create Date: 2026-10-19 12:00:00.000000

This migration:
1. Creates the enum types shared by the form tables
2. Creates the six enrollment form tables, each with a unique enrollment_id
3. Creates new_enrollments and renroll_forms
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "a7c1e2d3f4b5"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

FORM_TABLES = (
    "student_registrations",
    "health_forms",
    "emergency_contacts",
    "picture_authorizations",
    "transfer_records",
    "tuition_contracts",
)

yes_no = postgresql.ENUM("Yes", "No", name="yes_no", create_type=False)
signer_role = postgresql.ENUM("Parent", "Guardian", name="signer_role", create_type=False)
new_enrollment_status = postgresql.ENUM(
    "pending", "approved", "rejected", name="new_enrollment_status", create_type=False
)
renroll_gender = postgresql.ENUM("male", "female", name="renroll_gender", create_type=False)
yes_no_answer = postgresql.ENUM("yes", "no", name="yes_no_answer", create_type=False)

ENUMS = (yes_no, signer_role, new_enrollment_status, renroll_gender, yes_no_answer)


def _base_columns() -> list[sa.Column]:
    """Primary key and timestamps (from BaseModel)."""
    return [
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _form_columns() -> list[sa.Column]:
    """Columns every enrollment form has (FormDocumentMixin)."""
    return [
        *_base_columns(),
        sa.Column("enrollment_id", sa.String(length=100), nullable=False),
        sa.Column(
            "submitted_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _strings(names: list[str], length: int, nullable: bool) -> list[sa.Column]:
    return [sa.Column(name, sa.String(length=length), nullable=nullable) for name in names]


def upgrade() -> None:
    """Create all enrollment tables."""
    bind = op.get_bind()
    for enum_type in ENUMS:
        enum_type.create(bind, checkfirst=True)

    # ============================================
    # Enrollment forms
    # ============================================

    op.create_table(
        "student_registrations",
        *_form_columns(),
        *_strings(["first_name", "last_name"], 100, nullable=False),
        sa.Column("gender", sa.String(length=20), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("grade_level", sa.String(length=50), nullable=False),
        sa.Column("house_number", sa.String(length=50), nullable=True),
        sa.Column("address_line1", sa.String(length=255), nullable=False),
        sa.Column("address_line2", sa.String(length=255), nullable=True),
        *_strings(["city", "state"], 100, nullable=False),
        sa.Column("zip_code", sa.String(length=20), nullable=False),
        *_strings(["citizenship", "ethnicity"], 100, nullable=True),
        *_strings(
            [
                "father_first_name",
                "father_last_name",
                "father_city",
                "father_state",
                "father_occupation",
                "mother_first_name",
                "mother_last_name",
                "mother_city",
                "mother_state",
                "mother_occupation",
            ],
            100,
            nullable=True,
        ),
        *_strings(
            [
                "father_address1",
                "father_address2",
                "father_email",
                "mother_address1",
                "mother_address2",
                "mother_email",
            ],
            255,
            nullable=True,
        ),
        *_strings(["father_zip", "mother_zip"], 20, nullable=True),
        *_strings(
            ["father_phone", "father_work_phone", "mother_phone", "previous_school_phone"],
            30,
            nullable=True,
        ),
        *_strings(
            [
                "father_employment",
                "mother_employment",
                "public_school_name",
                "public_district",
                "previous_school_name",
                "print_name",
            ],
            200,
            nullable=True,
        ),
        *_strings(["previous_school_address", "student_photo"], 500, nullable=True),
        sa.Column("repeated_grade", sa.String(length=100), nullable=True),
        *[
            sa.Column(name, sa.Text(), nullable=True)
            for name in (
                "reason_for_leaving",
                "disciplinary_action",
                "subjects_excel",
                "subjects_struggle",
                "extracurricular_activities",
            )
        ],
        sa.Column("siblings", postgresql.JSON(), nullable=False),
    )

    op.create_table(
        "health_forms",
        *_form_columns(),
        *_strings(["insurance_company", "physician_name", "health_form_signature"], 200, False),
        sa.Column("physician_number", sa.String(length=50), nullable=False),
        sa.Column("has_disabilities", yes_no, nullable=False),
        sa.Column("disability_explanation", sa.Text(), nullable=True),
        sa.Column("medical_conditions", postgresql.JSON(), nullable=False),
        sa.Column("past_diseases", postgresql.JSON(), nullable=False),
        sa.Column("past_conditions", sa.Text(), nullable=True),
        sa.Column("takes_regular_medication", yes_no, nullable=False),
        sa.Column("medication_explanation", sa.Text(), nullable=True),
        sa.Column("has_allergies", yes_no, nullable=False),
        sa.Column("allergies_list", sa.Text(), nullable=True),
    )

    op.create_table(
        "emergency_contacts",
        *_form_columns(),
        *_strings(
            ["emergency_contact1_name", "emergency_contact2_name", "emergency_form_signature"],
            200,
            nullable=False,
        ),
        *_strings(["emergency_contact1_phone", "emergency_contact2_phone"], 30, nullable=False),
        *_strings(
            ["emergency_contact1_relationship", "emergency_contact2_relationship"],
            100,
            nullable=False,
        ),
        *_strings(["emergency_contact3_name", "pediatrician_name", "hospital_choice"], 200, True),
        *_strings(["emergency_contact3_phone", "pediatrician_phone"], 30, nullable=True),
        sa.Column("emergency_contact3_relationship", sa.String(length=100), nullable=True),
        sa.Column("authorized_pickup", sa.Text(), nullable=True),
    )

    op.create_table(
        "picture_authorizations",
        *_form_columns(),
        *_strings(
            ["picture_auth_signature", "discipline_acknowledgment", "discipline_form_signature"],
            200,
            nullable=False,
        ),
        sa.Column("signer_role", signer_role, nullable=False),
    )

    op.create_table(
        "transfer_records",
        *_form_columns(),
        *_strings(
            ["first_name", "last_name", "previous_school_city", "previous_school_state"],
            100,
            nullable=False,
        ),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("grade", sa.String(length=50), nullable=False),
        *_strings(
            ["previous_school_name", "parent_guardian_name", "transfer_form_signature"],
            200,
            nullable=False,
        ),
        sa.Column("previous_school_address", sa.String(length=500), nullable=False),
        sa.Column("previous_school_zip", sa.String(length=20), nullable=False),
        *_strings(["previous_school_phone", "parent_guardian_phone"], 30, nullable=False),
        sa.Column("parent_guardian_email", sa.String(length=255), nullable=True),
        sa.Column("records_needed", sa.Text(), nullable=True),
        sa.Column("urgency_level", sa.String(length=50), nullable=True),
    )

    op.create_table(
        "tuition_contracts",
        *_form_columns(),
        *_strings(
            ["guardian_first_name", "guardian_last_name", "guardian_city", "guardian_state"],
            100,
            nullable=False,
        ),
        sa.Column("guardian_phone", sa.String(length=30), nullable=False),
        *_strings(["guardian_email", "guardian_address_line1"], 255, nullable=False),
        sa.Column("guardian_address_line2", sa.String(length=255), nullable=True),
        sa.Column("guardian_zip_code", sa.String(length=20), nullable=False),
        *_strings(
            [
                "tuition_acknowledgment",
                "textbook_fee_acknowledgment",
                "application_fee_acknowledgment",
                "tuition_contract_signature",
            ],
            200,
            nullable=False,
        ),
        *[
            sa.Column(name, sa.Boolean(), nullable=False)
            for name in ("payment_option1", "payment_option2", "payment_option3")
        ],
    )

    # One document per form per enrollment
    for table in FORM_TABLES:
        op.create_index(f"ix_{table}_enrollment_id", table, ["enrollment_id"], unique=True)
        op.create_index(f"ix_{table}_submitted_at", table, ["submitted_at"])

    # ============================================
    # New enrollments
    # ============================================

    op.create_table(
        "new_enrollments",
        *_base_columns(),
        sa.Column("enrollment_id", sa.String(length=100), nullable=False),
        *_strings(["parent_full_name", "student_full_name", "agreement_signature"], 200, False),
        *_strings(["relationship_to_student", "marital_status"], 50, nullable=False),
        sa.Column("primary_phone", sa.String(length=30), nullable=False),
        sa.Column("alternate_phone", sa.String(length=30), nullable=True),
        *_strings(["email", "street_address"], 255, nullable=False),
        sa.Column("alternate_email", sa.String(length=255), nullable=True),
        *_strings(["city", "state"], 100, nullable=False),
        sa.Column("zip_code", sa.String(length=20), nullable=False),
        sa.Column("gender", sa.String(length=20), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        *_strings(
            ["birth_certificate_nic", "registration_number", "previous_school_id", "board_roll_number"],
            100,
            nullable=True,
        ),
        sa.Column("total_siblings", sa.Integer(), nullable=False),
        sa.Column("orphan_status", yes_no, nullable=False),
        sa.Column("osc_status", yes_no, nullable=False),
        *_strings(["identification_mark", "student_email"], 255, nullable=True),
        sa.Column("admission_date", sa.Date(), nullable=True),
        *_strings(["class_grade", "section"], 50, nullable=True),
        sa.Column("previous_school_name", sa.String(length=200), nullable=True),
        sa.Column("student_phone", sa.String(length=30), nullable=True),
        sa.Column("residential_address", sa.Text(), nullable=True),
        sa.Column("student_photo", sa.String(length=500), nullable=True),
        sa.Column(
            "submitted_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("status", new_enrollment_status, nullable=False),
    )
    op.create_index(
        "ix_new_enrollments_enrollment_id", "new_enrollments", ["enrollment_id"], unique=True
    )
    op.create_index("ix_new_enrollments_submitted_at", "new_enrollments", ["submitted_at"])

    # ============================================
    # Re-enrollment drafts
    # ============================================

    op.create_table(
        "renroll_forms",
        *_base_columns(),
        sa.Column("gender", renroll_gender, nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("number_of_children", sa.Integer(), nullable=True),
        *[
            sa.Column(name, yes_no_answer, nullable=True)
            for name in (
                "has_additional_children",
                "is_mother_address_same",
                "child1_health_changes",
                "child2_health_changes",
                "child3_health_changes",
                "child4_health_changes",
                "child5_health_changes",
            )
        ],
        *_strings(
            [
                "child_first_name",
                "child_last_name",
                "ethnicity",
                "city",
                "state",
                "father_first_name",
                "father_last_name",
                "father_city",
                "father_state",
                "father_occupation",
                "mother_first_name",
                "mother_last_name",
                "mother_city",
                "mother_state",
                "mother_occupation",
                "emergency1_relationship",
                "emergency2_relationship",
                "emergency3_relationship",
                "authorized_person1_relationship",
                "authorized_person2_relationship",
                "authorized_person3_relationship",
                "payment_option",
            ],
            100,
            nullable=True,
        ),
        *_strings(["grade_level"], 50, nullable=True),
        *_strings(
            [
                "address1",
                "address2",
                "father_email",
                "father_address1",
                "father_address2",
                "mother_email",
                "mother_address1",
                "mother_address2",
                "guardian_email",
            ],
            255,
            nullable=True,
        ),
        *_strings(["zip_code", "father_zip_code", "mother_zip_code"], 20, nullable=True),
        *_strings(
            [
                "school_district",
                "father_employment",
                "mother_employment",
                "emergency1_name",
                "emergency2_name",
                "emergency3_name",
                "authorized_person1",
                "authorized_person2",
                "authorized_person3",
                "hospital_preference",
                "parent_signature",
                "guardian_name",
                "guardian_name2",
            ],
            200,
            nullable=True,
        ),
        *_strings(
            [
                "father_phone",
                "mother_phone",
                "emergency1_phone",
                "emergency2_phone",
                "emergency3_phone",
                "authorized_person1_phone",
                "authorized_person2_phone",
                "authorized_person3_phone",
                "home_phone",
            ],
            30,
            nullable=True,
        ),
        *_strings(["acknowledge_tuition", "acknowledge_textbook_fee"], 20, nullable=True),
        sa.Column("tuition_signature", sa.Text(), nullable=True),
        sa.Column("current_step", sa.Integer(), nullable=False),
        sa.Column("is_completed", sa.Boolean(), nullable=False),
        sa.Column(
            "submitted_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    )
    op.create_index("ix_renroll_forms_submitted_at", "renroll_forms", ["submitted_at"])
    op.create_index(
        "ix_renroll_forms_applicant",
        "renroll_forms",
        ["father_email", "child_first_name", "child_last_name"],
    )


def downgrade() -> None:
    """Drop all enrollment tables and enum types."""
    op.drop_table("renroll_forms")
    op.drop_table("new_enrollments")
    for table in reversed(FORM_TABLES):
        op.drop_table(table)

    bind = op.get_bind()
    for enum_type in reversed(ENUMS):
        enum_type.drop(bind, checkfirst=True)
