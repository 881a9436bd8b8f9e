"""
Re-enrollment Router

Endpoints:
- POST /renroll/renroll-form - Submit one step (201 new draft, 200 update)
- POST /renroll/renroll-form/validate-step - Dry-run a step's validation
- GET /renroll/renroll-form - List forms
- GET /renroll/renroll-form/{id} - Get a form
- DELETE /renroll/renroll-form/{id} - Delete a form
"""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from academy_api.core.database import get_db
from academy_api.core.exceptions import (
    RecordNotFoundError,
    ServiceError,
    ValidationFailedError,
    internal_error,
    to_http_exception,
)
from academy_api.modules.renroll import service
from academy_api.modules.renroll.schemas import (
    RenrollFormDeleteResponse,
    RenrollFormDetailResponse,
    RenrollFormListResponse,
    RenrollStepResponse,
    StepValidationRequest,
    StepValidationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/renroll-form",
    response_model=RenrollStepResponse,
    status_code=status.HTTP_200_OK,
    summary="Submit Re-enrollment Step",
    description="""
Save one step of the re-enrollment form.

Send the full form collected so far, `currentStep` (0, 1 or 2) and, after
the first step, the `draftId` (the `form.id` returned by the first call).

**Steps:**
0. Student, address and parent information
1. Emergency contacts, authorized pickups, hospital and parent signature
2. Tuition contract; the whole form must be complete to pass this step

Fields that are sent overwrite the saved draft; fields that are left out
keep their saved value.

Returns 201 when a new draft was created, 200 when an existing draft was
updated. `canProceed` is false after the last step.
""",
    responses={
        201: {"description": "Draft created", "model": RenrollStepResponse},
        400: {
            "description": "Required fields missing",
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "error": "VALIDATION_FAILED",
                        "message": "Validation failed",
                        "errors": ["Child first name is required"],
                    }
                }
            },
        },
        404: {"description": "Unknown draftId"},
    },
)
async def submit_step(
    response: Response,
    body: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
) -> RenrollStepResponse:
    try:
        result, created = await service.submit_step(db, body)
        if created:
            response.status_code = status.HTTP_201_CREATED
        return result
    except ValidationFailedError as e:
        raise to_http_exception(e) from e
    except RecordNotFoundError as e:
        logger.warning(f"Renroll draft not found: draft_id={body.get('draftId')}")
        raise to_http_exception(e) from e
    except ServiceError as e:
        logger.error(f"Renroll service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error saving renroll form: {e}")
        raise internal_error() from e


@router.post(
    "/renroll-form/validate-step",
    response_model=StepValidationResponse,
    summary="Validate Re-enrollment Step",
    description="Check one step's required fields without saving anything.",
)
async def validate_step(data: StepValidationRequest) -> StepValidationResponse:
    return service.validate_step_request(data.step, data.form_data)


@router.get(
    "/renroll-form",
    response_model=RenrollFormListResponse,
    summary="List Re-enrollment Forms",
)
async def list_forms(db: AsyncSession = Depends(get_db)) -> RenrollFormListResponse:
    try:
        return await service.list_forms(db)
    except ServiceError as e:
        logger.error(f"Renroll service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error listing renroll forms: {e}")
        raise internal_error() from e


@router.get(
    "/renroll-form/{id}",
    response_model=RenrollFormDetailResponse,
    summary="Get Re-enrollment Form",
)
async def get_form(id: UUID, db: AsyncSession = Depends(get_db)) -> RenrollFormDetailResponse:
    try:
        return await service.get_form(db, id)
    except RecordNotFoundError as e:
        logger.warning(f"Renroll form not found: id={id}")
        raise to_http_exception(e) from e
    except ServiceError as e:
        logger.error(f"Renroll service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error fetching renroll form: {e}")
        raise internal_error() from e


@router.delete(
    "/renroll-form/{id}",
    response_model=RenrollFormDeleteResponse,
    summary="Delete Re-enrollment Form",
)
async def delete_form(id: UUID, db: AsyncSession = Depends(get_db)) -> RenrollFormDeleteResponse:
    try:
        return await service.delete_form(db, id)
    except RecordNotFoundError as e:
        logger.warning(f"Renroll form not found for delete: id={id}")
        raise to_http_exception(e) from e
    except ServiceError as e:
        logger.error(f"Renroll service error: {e.message}")
        raise to_http_exception(e) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error deleting renroll form: {e}")
        raise internal_error() from e
