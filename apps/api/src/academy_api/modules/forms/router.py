"""
Enrollment Forms Router

Four endpoints per enrollment form, generated from the variant registry:

- POST   /forms/{slug}       - Submit a form (201)
- GET    /forms/{slug}       - List submitted forms, newest first
- GET    /forms/{slug}/{id}  - Get one form
- DELETE /forms/{slug}/{id}  - Delete one form

Slugs: student-registration, emergency-contact, health-form,
picture-authorization, transfer-records, tuition-contract.

These endpoints are public; parents fill the forms in without an account.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from academy_api.core.database import get_db
from academy_api.core.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    ServiceError,
    internal_error,
    to_http_exception,
)
from academy_api.modules.forms import service
from academy_api.modules.forms.schemas import FormDeleteResponse
from academy_api.modules.forms.variants import FORM_VARIANTS, FormVariant

logger = logging.getLogger(__name__)

router = APIRouter()


def _error_responses(variant: FormVariant, *codes: int) -> dict:
    examples = {
        400: ("Validation error", "VALIDATION_FAILED", "Validation failed"),
        404: ("Form not found", "NOT_FOUND", variant.not_found_message),
        409: (
            "Form already submitted for this enrollment",
            "DUPLICATE_RECORD",
            f"A {variant.label} has already been submitted for enrollment ENR-001",
        ),
        500: ("Storage failure", "STORAGE_FAILURE", f"Failed to fetch {variant.plural_label}"),
    }
    responses = {}
    for code in codes:
        description, error, message = examples[code]
        responses[code] = {
            "description": description,
            "content": {
                "application/json": {
                    "example": {"success": False, "error": error, "message": message}
                }
            },
        }
    return responses


def register_form_routes(router: APIRouter, variant: FormVariant) -> None:
    """Add the submit/list/get/delete endpoints for one form."""

    create_schema = variant.create_schema
    tag_label = variant.label.capitalize()

    @router.post(
        f"/{variant.slug}",
        response_model=variant.submit_envelope(),
        status_code=status.HTTP_201_CREATED,
        summary=f"Submit {tag_label}",
        description=f"""
Submit a {variant.label} for an enrollment.

The body is stored as submitted. Only one {variant.label} may exist per
`enrollmentId`; a second submission returns 409.
""",
        responses=_error_responses(variant, 400, 409, 500),
        name=f"submit_{variant.slug.replace('-', '_')}",
    )
    async def submit(
        data: create_schema,  # type: ignore[valid-type]
        db: AsyncSession = Depends(get_db),
    ):
        try:
            return await service.submit_form(db, variant, data)
        except DuplicateRecordError as e:
            logger.warning(f"{variant.name} rejected: {e.message}")
            raise to_http_exception(e) from e
        except ServiceError as e:
            logger.error(f"{variant.name} service error: {e.message}")
            raise to_http_exception(e) from e
        except HTTPException:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error submitting {variant.label}: {e}")
            raise internal_error() from e

    @router.get(
        f"/{variant.slug}",
        response_model=variant.list_envelope(),
        summary=f"List {variant.plural_label.capitalize()}",
        description=f"All submitted {variant.plural_label}, newest first.",
        responses=_error_responses(variant, 500),
        name=f"list_{variant.slug.replace('-', '_')}",
    )
    async def list_documents(db: AsyncSession = Depends(get_db)):
        try:
            return await service.list_forms(db, variant)
        except ServiceError as e:
            logger.error(f"{variant.name} service error: {e.message}")
            raise to_http_exception(e) from e
        except HTTPException:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error listing {variant.plural_label}: {e}")
            raise internal_error() from e

    @router.get(
        f"/{variant.slug}/{{id}}",
        response_model=variant.detail_envelope(),
        summary=f"Get {tag_label}",
        responses=_error_responses(variant, 404, 500),
        name=f"get_{variant.slug.replace('-', '_')}",
    )
    async def get_document(id: UUID, db: AsyncSession = Depends(get_db)):
        try:
            return await service.get_form(db, variant, id)
        except RecordNotFoundError as e:
            logger.warning(f"{variant.name} not found: id={id}")
            raise to_http_exception(e) from e
        except ServiceError as e:
            logger.error(f"{variant.name} service error: {e.message}")
            raise to_http_exception(e) from e
        except HTTPException:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error fetching {variant.label}: {e}")
            raise internal_error() from e

    @router.delete(
        f"/{variant.slug}/{{id}}",
        response_model=FormDeleteResponse,
        summary=f"Delete {tag_label}",
        responses=_error_responses(variant, 404, 500),
        name=f"delete_{variant.slug.replace('-', '_')}",
    )
    async def delete_document(id: UUID, db: AsyncSession = Depends(get_db)):
        try:
            return await service.delete_form(db, variant, id)
        except RecordNotFoundError as e:
            logger.warning(f"{variant.name} not found for delete: id={id}")
            raise to_http_exception(e) from e
        except ServiceError as e:
            logger.error(f"{variant.name} service error: {e.message}")
            raise to_http_exception(e) from e
        except HTTPException:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error deleting {variant.label}: {e}")
            raise internal_error() from e


for _variant in FORM_VARIANTS:
    register_form_routes(router, _variant)
