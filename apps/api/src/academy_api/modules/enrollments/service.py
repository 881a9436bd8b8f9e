"""
Enrollment Service Layer

Builds the aggregated enrollment view and handles the two enrollment
submissions that are not plain form posts.

This module implements:
1. Enrollment aggregation:
   - A student registration is the root of an enrollment
   - The other five forms are joined on its enrollmentId at read time
   - Status is derived from how many of the six forms exist

2. Combined submission:
   - Maps the single-page enrollment form onto a student registration
   - Splits full names into first/last at the first space

3. New enrollments:
   - Single-document enrollment with photo, reviewed via its status

Related lookups run one after another on the request's session; an
AsyncSession cannot run statements concurrently. Any failed lookup fails
the whole request.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from academy_api.core.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    StorageFailureError,
)
from academy_api.modules.enrollments import repository
from academy_api.modules.enrollments.helpers import (
    derive_enrollment_status,
    generate_enrollment_id,
    split_full_name,
)
from academy_api.modules.enrollments.models import NewEnrollment, NewEnrollmentStatus
from academy_api.modules.enrollments.schemas import (
    EnrollmentDetailResponse,
    EnrollmentListResponse,
    EnrollmentSubmission,
    EnrollmentSubmitResponse,
    EnrollmentView,
    NewEnrollmentCreate,
    NewEnrollmentDetailResponse,
    NewEnrollmentListResponse,
    NewEnrollmentResponse,
    NewEnrollmentSubmitResponse,
)
from academy_api.modules.forms import repository as forms_repository
from academy_api.modules.forms import service as forms_service
from academy_api.modules.forms.models import StudentRegistration
from academy_api.modules.forms.variants import RELATED_VARIANTS, STUDENT_REGISTRATION

logger = logging.getLogger(__name__)


# ============================================
# Aggregation
# ============================================


def _build_enrollment_view(registration: StudentRegistration, related: dict) -> EnrollmentView:
    """Assemble one enrollment from its registration and related forms by slot."""
    forms = {
        variant.slot: (
            forms_service.serialize(variant, related[variant.slot])
            if related.get(variant.slot) is not None
            else None
        )
        for variant in RELATED_VARIANTS
    }
    forms_present = 1 + sum(1 for form in forms.values() if form is not None)

    return EnrollmentView(
        id=registration.id,
        enrollment_id=registration.enrollment_id,
        status=derive_enrollment_status(forms_present),
        submitted_at=registration.submitted_at,
        student_registration=forms_service.serialize(STUDENT_REGISTRATION, registration),
        **forms,
    )


async def _fetch_related(db: AsyncSession, enrollment_id: str) -> dict:
    related = {}
    for variant in RELATED_VARIANTS:
        related[variant.slot] = await forms_repository.get_by_enrollment_id(
            db, variant.model, enrollment_id
        )
    return related


async def _assemble(db: AsyncSession, registration: StudentRegistration) -> EnrollmentDetailResponse:
    try:
        related = await _fetch_related(db, registration.enrollment_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch forms for enrollment {registration.enrollment_id}: {e}")
        raise StorageFailureError("Failed to fetch enrollment", reason=str(e)) from e

    return EnrollmentDetailResponse(
        success=True,
        enrollment=_build_enrollment_view(registration, related),
    )


async def get_enrollment(db: AsyncSession, registration_id: UUID) -> EnrollmentDetailResponse:
    """
    Get one enrollment by its registration's ID.

    Raises:
        RecordNotFoundError: no registration with this ID
        StorageFailureError: any lookup failed
    """
    try:
        registration = await forms_repository.get_by_id(db, StudentRegistration, registration_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch registration {registration_id}: {e}")
        raise StorageFailureError("Failed to fetch enrollment", reason=str(e)) from e

    if registration is None:
        raise RecordNotFoundError("Enrollment not found")

    return await _assemble(db, registration)


async def get_enrollment_by_key(db: AsyncSession, enrollment_id: str) -> EnrollmentDetailResponse:
    """
    Get one enrollment by its enrollmentId.

    Raises:
        RecordNotFoundError: no registration carries this enrollmentId
        StorageFailureError: any lookup failed
    """
    try:
        registration = await forms_repository.get_by_enrollment_id(
            db, StudentRegistration, enrollment_id
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch registration for enrollment {enrollment_id}: {e}")
        raise StorageFailureError("Failed to fetch enrollment", reason=str(e)) from e

    if registration is None:
        raise RecordNotFoundError("Enrollment not found")

    return await _assemble(db, registration)


async def list_enrollments(db: AsyncSession) -> EnrollmentListResponse:
    """
    All enrollments, newest registration first.

    Related forms are loaded with one query per form for all enrollment
    keys at once.
    """
    try:
        registrations = await forms_repository.list_all(db, StudentRegistration)
        enrollment_ids = [registration.enrollment_id for registration in registrations]

        related_by_slot = {}
        for variant in RELATED_VARIANTS:
            related_by_slot[variant.slot] = await forms_repository.get_by_enrollment_ids(
                db, variant.model, enrollment_ids
            )
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch enrollments: {e}")
        raise StorageFailureError("Failed to fetch enrollments", reason=str(e)) from e

    enrollments = [
        _build_enrollment_view(
            registration,
            {
                slot: documents.get(registration.enrollment_id)
                for slot, documents in related_by_slot.items()
            },
        )
        for registration in registrations
    ]

    return EnrollmentListResponse(success=True, count=len(enrollments), enrollments=enrollments)


# ============================================
# Combined submission
# ============================================


def build_registration(
    submission: EnrollmentSubmission, enrollment_id: str, photo_path: str | None
) -> dict:
    """
    Map the single-page enrollment form onto student registration columns.

    The parent is stored as the mother when relationshipToStudent is
    "mother", otherwise as the father.
    """
    first_name, last_name = split_full_name(submission.student_full_name)
    parent_first_name, parent_last_name = split_full_name(submission.parent_full_name)

    relationship = (submission.relationship_to_student or "").strip().lower()
    parent = "mother" if relationship == "mother" else "father"

    return {
        "enrollment_id": enrollment_id,
        "first_name": first_name,
        "last_name": last_name,
        "gender": submission.gender,
        "date_of_birth": submission.date_of_birth,
        "grade_level": submission.class_grade,
        "address_line1": submission.street_address,
        "city": submission.city,
        "state": submission.state,
        "zip_code": submission.zip_code,
        "previous_school_name": submission.previous_school_name,
        "student_photo": photo_path,
        "print_name": submission.agreement_signature,
        "siblings": [],
        f"{parent}_first_name": parent_first_name,
        f"{parent}_last_name": parent_last_name,
        f"{parent}_phone": submission.primary_phone,
        f"{parent}_email": submission.email.lower() if submission.email else None,
    }


async def submit_enrollment(
    db: AsyncSession, submission: EnrollmentSubmission, photo_path: str | None = None
) -> EnrollmentSubmitResponse:
    """
    Store a combined enrollment submission as a student registration.

    A new enrollmentId is generated when the client did not send one.

    Raises:
        DuplicateRecordError: a registration already exists for the enrollmentId
        StorageFailureError: the insert failed
    """
    enrollment_id = submission.enrollment_id or generate_enrollment_id()
    values = build_registration(submission, enrollment_id, photo_path)

    registration = await forms_service.store_form(db, STUDENT_REGISTRATION, values)

    return EnrollmentSubmitResponse(
        success=True,
        message="Enrollment submitted successfully",
        enrollment_id=registration.enrollment_id,
        registration=forms_service.serialize(STUDENT_REGISTRATION, registration),
    )


# ============================================
# New enrollments
# ============================================


def _serialize_new_enrollment(enrollment: NewEnrollment) -> NewEnrollmentResponse:
    return NewEnrollmentResponse.model_validate(enrollment)


async def create_new_enrollment(
    db: AsyncSession, data: NewEnrollmentCreate, photo_path: str | None = None
) -> NewEnrollmentSubmitResponse:
    """
    Store a single-document enrollment.

    Raises:
        DuplicateRecordError: the enrollmentId is already taken
        StorageFailureError: the insert failed
    """
    values = data.model_dump()
    values["student_photo"] = photo_path

    try:
        enrollment = await repository.create(db, values)
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Duplicate new enrollment rejected: enrollment_id={data.enrollment_id}")
        raise DuplicateRecordError(
            f"An enrollment with ID {data.enrollment_id} already exists"
        ) from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to store new enrollment: {e}")
        raise StorageFailureError("Failed to submit enrollment", reason=str(e)) from e

    logger.info(f"New enrollment stored: id={enrollment.id}, enrollment_id={enrollment.enrollment_id}")

    return NewEnrollmentSubmitResponse(
        success=True,
        message="Enrollment submitted successfully",
        enrollment=_serialize_new_enrollment(enrollment),
    )


async def list_new_enrollments(db: AsyncSession) -> NewEnrollmentListResponse:
    """All new enrollments, newest first."""
    try:
        enrollments = await repository.list_all(db)
    except SQLAlchemyError as e:
        logger.error(f"Failed to list new enrollments: {e}")
        raise StorageFailureError("Failed to fetch enrollments", reason=str(e)) from e

    return NewEnrollmentListResponse(
        success=True,
        count=len(enrollments),
        enrollments=[_serialize_new_enrollment(enrollment) for enrollment in enrollments],
    )


async def _get_new_enrollment_or_raise(db: AsyncSession, id: UUID) -> NewEnrollment:
    try:
        enrollment = await repository.get_by_id(db, id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch new enrollment {id}: {e}")
        raise StorageFailureError("Failed to fetch enrollment", reason=str(e)) from e

    if enrollment is None:
        raise RecordNotFoundError("Enrollment not found")
    return enrollment


async def get_new_enrollment(db: AsyncSession, id: UUID) -> NewEnrollmentDetailResponse:
    """
    Get one new enrollment.

    Raises:
        RecordNotFoundError: no enrollment with this ID
    """
    enrollment = await _get_new_enrollment_or_raise(db, id)
    return NewEnrollmentDetailResponse(success=True, enrollment=_serialize_new_enrollment(enrollment))


async def update_new_enrollment_status(
    db: AsyncSession, id: UUID, status: NewEnrollmentStatus
) -> NewEnrollmentSubmitResponse:
    """
    Set a new enrollment's review status. Any status may follow any other.

    Raises:
        RecordNotFoundError: no enrollment with this ID
    """
    enrollment = await _get_new_enrollment_or_raise(db, id)

    try:
        enrollment = await repository.update_status(db, enrollment, NewEnrollmentStatus(status))
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to update new enrollment {id}: {e}")
        raise StorageFailureError("Failed to update enrollment status", reason=str(e)) from e

    logger.info(f"New enrollment status updated: id={id}, status={enrollment.status.value}")

    return NewEnrollmentSubmitResponse(
        success=True,
        message="Enrollment status updated successfully",
        enrollment=_serialize_new_enrollment(enrollment),
    )
