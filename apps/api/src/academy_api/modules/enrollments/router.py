"""
Enrollments Router

Aggregated enrollment views plus the two multipart enrollment submissions.

Endpoints:
- GET /forms/enrollments - All enrollments with derived status
- GET /forms/enrollments/{id} - One enrollment by registration ID
- POST /forms/enrollment - Combined enrollment submission (multipart)
- GET /forms/enrollment/{enrollment_id} - One enrollment by enrollmentId
- POST /forms/new-enrollment - New enrollment (multipart)
- GET /forms/new-enrollment - List new enrollments
- GET /forms/new-enrollment/{id} - Get a new enrollment
- PATCH /forms/new-enrollment/{id}/status - Set review status

Multipart bodies may carry an optional `studentPhoto` image. The photo is
checked before any other field is looked at.
"""

import logging
from collections.abc import Awaitable, Callable
from functools import partial
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from academy_api.core.database import get_db
from academy_api.core.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    ServiceError,
    UploadRejectedError,
    ValidationFailedError,
    internal_error,
    to_http_exception,
)
from academy_api.core.uploads import (
    get_upload,
    parse_form_fields,
    read_image_upload,
    remove_upload,
    store_upload,
)
from academy_api.modules.enrollments import service
from academy_api.modules.enrollments.schemas import (
    EnrollmentDetailResponse,
    EnrollmentListResponse,
    EnrollmentSubmission,
    EnrollmentSubmitResponse,
    NewEnrollmentCreate,
    NewEnrollmentDetailResponse,
    NewEnrollmentListResponse,
    NewEnrollmentStatusUpdate,
    NewEnrollmentSubmitResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

PHOTO_FIELD = "studentPhoto"
PHOTO_SUBDIR = "enrollments"

MULTIPART_BODY = {
    "requestBody": {
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {PHOTO_FIELD: {"type": "string", "format": "binary"}},
                }
            }
        }
    }
}


async def _submit_multipart(
    request: Request, schema, submit: Callable[..., Awaitable]
):
    """
    Photo first, then fields. The photo is written once both pass, and
    removed again when `submit(data, photo_path)` fails.
    """
    async with request.form() as form:
        upload = get_upload(form, PHOTO_FIELD)
        pending = await read_image_upload(upload, PHOTO_FIELD) if upload else None
        data = parse_form_fields(schema, form)

    photo_path = await store_upload(pending, PHOTO_SUBDIR) if pending else None
    try:
        return await submit(data, photo_path)
    except Exception:
        if photo_path:
            await remove_upload(photo_path)
        raise


# ============================================
# Aggregated enrollments
# ============================================


@router.get(
    "/enrollments",
    response_model=EnrollmentListResponse,
    summary="List Enrollments",
    description="""
All enrollments, newest registration first.

Each enrollment is a student registration plus the health form, emergency
contact, picture authorization, transfer records and tuition contract that
share its `enrollmentId` (null when not submitted yet).

**Status:** 6 forms: `Approved`; 4-5 forms: `Under Review`; otherwise `Pending`.
""",
)
async def list_enrollments(db: AsyncSession = Depends(get_db)) -> EnrollmentListResponse:
    try:
        return await service.list_enrollments(db)
    except ServiceError as e:
        logger.error(f"Enrollment service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error listing enrollments: {e}")
        raise internal_error() from e


@router.get(
    "/enrollments/{id}",
    response_model=EnrollmentDetailResponse,
    summary="Get Enrollment",
    description="One enrollment, addressed by its student registration's ID.",
)
async def get_enrollment(id: UUID, db: AsyncSession = Depends(get_db)) -> EnrollmentDetailResponse:
    try:
        return await service.get_enrollment(db, id)
    except RecordNotFoundError as e:
        logger.warning(f"Enrollment not found: id={id}")
        raise to_http_exception(e) from e
    except ServiceError as e:
        logger.error(f"Enrollment service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error fetching enrollment: {e}")
        raise internal_error() from e


@router.post(
    "/enrollment",
    response_model=EnrollmentSubmitResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Enrollment",
    description="""
Submit the single-page enrollment form (multipart/form-data).

The fields are stored as a student registration:
- `studentFullName` is split at the first space into first and last name
- `parentFullName` becomes the mother's name when `relationshipToStudent` is
  "mother", the father's otherwise
- An `enrollmentId` is generated when none is sent

An optional `studentPhoto` (jpeg, png or gif, at most 5MB) is stored with it.
""",
    openapi_extra=MULTIPART_BODY,
)
async def submit_enrollment(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> EnrollmentSubmitResponse:
    try:
        return await _submit_multipart(
            request, EnrollmentSubmission, partial(service.submit_enrollment, db)
        )
    except UploadRejectedError as e:
        logger.warning(f"Enrollment photo rejected: {e.message}")
        raise to_http_exception(e) from e
    except (ValidationFailedError, DuplicateRecordError) as e:
        logger.warning(f"Enrollment rejected: {e.message}")
        raise to_http_exception(e) from e
    except ServiceError as e:
        logger.error(f"Enrollment service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error submitting enrollment: {e}")
        raise internal_error() from e


@router.get(
    "/enrollment/{enrollment_id}",
    response_model=EnrollmentDetailResponse,
    summary="Get Enrollment by Enrollment ID",
    description="One enrollment, addressed by the `enrollmentId` its forms share.",
)
async def get_enrollment_by_key(
    enrollment_id: str, db: AsyncSession = Depends(get_db)
) -> EnrollmentDetailResponse:
    try:
        return await service.get_enrollment_by_key(db, enrollment_id)
    except RecordNotFoundError as e:
        logger.warning(f"Enrollment not found: enrollment_id={enrollment_id}")
        raise to_http_exception(e) from e
    except ServiceError as e:
        logger.error(f"Enrollment service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error fetching enrollment: {e}")
        raise internal_error() from e


# ============================================
# New enrollments
# ============================================


@router.post(
    "/new-enrollment",
    response_model=NewEnrollmentSubmitResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit New Enrollment",
    description="""
Submit a new enrollment (multipart/form-data).

`dateOfBirth` and `admissionDate` are parsed as dates, `totalSiblings` as an
integer (blank means 0) and email addresses are lower-cased. An optional
`studentPhoto` image may be attached.
""",
    openapi_extra=MULTIPART_BODY,
)
async def create_new_enrollment(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> NewEnrollmentSubmitResponse:
    try:
        return await _submit_multipart(
            request, NewEnrollmentCreate, partial(service.create_new_enrollment, db)
        )
    except UploadRejectedError as e:
        logger.warning(f"New enrollment photo rejected: {e.message}")
        raise to_http_exception(e) from e
    except (ValidationFailedError, DuplicateRecordError) as e:
        logger.warning(f"New enrollment rejected: {e.message}")
        raise to_http_exception(e) from e
    except ServiceError as e:
        logger.error(f"New enrollment service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error submitting new enrollment: {e}")
        raise internal_error() from e


@router.get(
    "/new-enrollment",
    response_model=NewEnrollmentListResponse,
    summary="List New Enrollments",
)
async def list_new_enrollments(db: AsyncSession = Depends(get_db)) -> NewEnrollmentListResponse:
    try:
        return await service.list_new_enrollments(db)
    except ServiceError as e:
        logger.error(f"New enrollment service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error listing new enrollments: {e}")
        raise internal_error() from e


@router.get(
    "/new-enrollment/{id}",
    response_model=NewEnrollmentDetailResponse,
    summary="Get New Enrollment",
)
async def get_new_enrollment(
    id: UUID, db: AsyncSession = Depends(get_db)
) -> NewEnrollmentDetailResponse:
    try:
        return await service.get_new_enrollment(db, id)
    except RecordNotFoundError as e:
        logger.warning(f"New enrollment not found: id={id}")
        raise to_http_exception(e) from e
    except ServiceError as e:
        logger.error(f"New enrollment service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error fetching new enrollment: {e}")
        raise internal_error() from e


@router.patch(
    "/new-enrollment/{id}/status",
    response_model=NewEnrollmentSubmitResponse,
    summary="Set New Enrollment Status",
    description="Set the review status (pending, approved or rejected). Any transition is allowed.",
)
async def update_new_enrollment_status(
    id: UUID,
    data: NewEnrollmentStatusUpdate,
    db: AsyncSession = Depends(get_db),
) -> NewEnrollmentSubmitResponse:
    try:
        return await service.update_new_enrollment_status(db, id, data.status)
    except RecordNotFoundError as e:
        logger.warning(f"New enrollment not found for status update: id={id}")
        raise to_http_exception(e) from e
    except ServiceError as e:
        logger.error(f"New enrollment service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error updating new enrollment status: {e}")
        raise internal_error() from e
