"""
Enrollment Form Service Layer

Create, list, fetch and delete for any of the six enrollment forms. The
form is selected by a FormVariant descriptor; behaviour is identical across
forms apart from names and messages.

Rules:
- A body is stored as submitted once it passes schema validation
- One document per form per enrollment key; a second submission is a conflict
- Documents cannot be edited after submission
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
from academy_api.modules.forms import repository
from academy_api.modules.forms.schemas import FormDeleteResponse
from academy_api.modules.forms.variants import FormVariant
from academy_api.modules.shared import CamelModel

logger = logging.getLogger(__name__)


def serialize(variant: FormVariant, document) -> CamelModel:
    """ORM document -> response schema."""
    return variant.response_schema.model_validate(document)


async def store_form(db: AsyncSession, variant: FormVariant, values: dict):
    """
    Insert a form document from already-validated column values.

    Raises:
        DuplicateRecordError: the enrollment key already has this form
        StorageFailureError: the insert failed for any other reason
    """
    try:
        document = await repository.create(db, variant.model, values)
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Duplicate {variant.label} rejected: enrollment_id={values['enrollment_id']}")
        raise DuplicateRecordError(
            f"A {variant.label} has already been submitted for enrollment "
            f"{values['enrollment_id']}"
        ) from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to store {variant.label}: {e}")
        raise StorageFailureError(f"Failed to submit {variant.label}", reason=str(e)) from e

    logger.info(f"{variant.name} stored: id={document.id}, enrollment_id={document.enrollment_id}")
    return document


async def submit_form(db: AsyncSession, variant: FormVariant, data: CamelModel) -> CamelModel:
    """Store a submitted form and wrap it in the form's response envelope."""
    document = await store_form(db, variant, data.model_dump())
    return variant.submit_envelope()(
        success=True,
        message=variant.submitted_message,
        **{variant.item_key: serialize(variant, document)},
    )


async def list_forms(db: AsyncSession, variant: FormVariant) -> CamelModel:
    """All documents of a form, newest first."""
    try:
        documents = await repository.list_all(db, variant.model)
    except SQLAlchemyError as e:
        logger.error(f"Failed to list {variant.plural_label}: {e}")
        raise StorageFailureError(f"Failed to fetch {variant.plural_label}", reason=str(e)) from e

    return variant.list_envelope()(
        success=True,
        count=len(documents),
        **{variant.collection_key: [serialize(variant, doc) for doc in documents]},
    )


async def _get_or_raise(db: AsyncSession, variant: FormVariant, id: UUID):
    try:
        document = await repository.get_by_id(db, variant.model, id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch {variant.label} {id}: {e}")
        raise StorageFailureError(f"Failed to fetch {variant.label}", reason=str(e)) from e

    if document is None:
        raise RecordNotFoundError(variant.not_found_message)
    return document


async def get_form(db: AsyncSession, variant: FormVariant, id: UUID) -> CamelModel:
    """
    Get one document by ID.

    Raises:
        RecordNotFoundError: no document with this ID
    """
    document = await _get_or_raise(db, variant, id)
    return variant.detail_envelope()(
        success=True,
        **{variant.item_key: serialize(variant, document)},
    )


async def delete_form(db: AsyncSession, variant: FormVariant, id: UUID) -> FormDeleteResponse:
    """
    Delete one document by ID.

    Raises:
        RecordNotFoundError: no document with this ID
    """
    document = await _get_or_raise(db, variant, id)

    try:
        await repository.delete(db, document)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to delete {variant.label} {id}: {e}")
        raise StorageFailureError(f"Failed to delete {variant.label}", reason=str(e)) from e

    logger.info(f"{variant.name} deleted: id={id}")
    return FormDeleteResponse(success=True, message=variant.deleted_message)
