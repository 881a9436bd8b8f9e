"""
Re-enrollment Service Layer

Drives a re-enrollment draft through its three steps.

Step submission:
1. The submitted step's required fields are checked on the raw body, before
   it is coerced into RenrollFormSubmit; failures store nothing
2. The draft is found by draftId, or else by father email + child name
3. Every field sent in the payload overwrites the draft; fields not sent
   keep their stored value (clients resend the whole form each step)
4. At the last step the merged draft must pass every step's rules before it
   is marked completed
5. The draft is updated in place, or created when none was found

Once completed, a draft stays completed even if an earlier step is
resubmitted.
"""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from academy_api.core.error_handlers import format_validation_errors
from academy_api.core.exceptions import (
    RecordNotFoundError,
    StorageFailureError,
    ValidationFailedError,
)
from academy_api.modules.renroll import repository
from academy_api.modules.renroll.models import RenrollForm
from academy_api.modules.renroll.schemas import (
    RenrollFormDeleteResponse,
    RenrollFormDetailResponse,
    RenrollFormFields,
    RenrollFormListResponse,
    RenrollFormResponse,
    RenrollFormSubmit,
    RenrollStepResponse,
    RenrollStepSelector,
    StepValidationResponse,
)
from academy_api.modules.renroll.validation import FINAL_STEP, validate_finalized, validate_step

logger = logging.getLogger(__name__)

CONTROL_FIELDS = {"current_step", "draft_id"}


def _step_message(step: int) -> str:
    if step == FINAL_STEP:
        return "Renroll form completed successfully!"
    return f"Step {step + 1} saved successfully"


async def _locate_draft(db: AsyncSession, payload: RenrollFormSubmit) -> RenrollForm | None:
    """
    Find the draft a submission belongs to.

    Raises:
        RecordNotFoundError: a draftId was sent but does not exist
    """
    if payload.draft_id is not None:
        draft = await repository.get_by_id(db, payload.draft_id)
        if draft is None:
            raise RecordNotFoundError("Renroll form not found")
        return draft

    if payload.father_email and payload.child_first_name and payload.child_last_name:
        return await repository.find_draft(
            db, payload.father_email, payload.child_first_name, payload.child_last_name
        )
    return None


def merged_form_data(draft: RenrollForm | None, payload: RenrollFormSubmit) -> dict:
    """Wire-format view of the draft after this submission is applied."""
    merged = {}
    if draft is not None:
        merged.update(RenrollFormFields.model_validate(draft).model_dump(by_alias=True))
    merged.update(payload.model_dump(by_alias=True, exclude_unset=True, exclude=CONTROL_FIELDS))
    return merged


def _parse(schema, body: Mapping[str, Any]):
    try:
        return schema.model_validate(body)
    except ValidationError as e:
        raise ValidationFailedError("Validation failed", format_validation_errors(e.errors())) from e


async def submit_step(
    db: AsyncSession, body: Mapping[str, Any]
) -> tuple[RenrollStepResponse, bool]:
    """
    Validate and persist one step of a re-enrollment form.

    `body` is the JSON request body as sent.

    Returns:
        (response, created) where created is True when a new draft was made

    Raises:
        ValidationFailedError: the step (or, at the last step, the whole form) is incomplete
        RecordNotFoundError: unknown draftId
        StorageFailureError: the draft could not be read or written
    """
    step = _parse(RenrollStepSelector, body).current_step

    errors = validate_step(step, body)
    if errors:
        logger.warning(f"Renroll step {step} rejected: {len(errors)} missing fields")
        raise ValidationFailedError("Validation failed", errors)

    payload = _parse(RenrollFormSubmit, body)

    try:
        draft = await _locate_draft(db, payload)
    except SQLAlchemyError as e:
        logger.error(f"Failed to look up renroll draft: {e}")
        raise StorageFailureError("Failed to save renroll form", reason=str(e)) from e

    if step == FINAL_STEP:
        missing = validate_finalized(merged_form_data(draft, payload))
        if missing:
            logger.warning(f"Renroll completion rejected: {len(missing)} missing fields")
            raise ValidationFailedError("Re-enrollment form is incomplete", missing)

    values = payload.model_dump(exclude_unset=True, exclude=CONTROL_FIELDS)

    try:
        if draft is not None:
            form = await repository.update(
                db,
                draft,
                values,
                current_step=step,
                is_completed=draft.is_completed or step == FINAL_STEP,
            )
            created = False
        else:
            form = await repository.create(
                db, values, current_step=step, is_completed=step == FINAL_STEP
            )
            created = True
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to save renroll form: {e}")
        raise StorageFailureError("Failed to save renroll form", reason=str(e)) from e

    logger.info(
        f"Renroll step saved: id={form.id}, step={step}, created={created}, "
        f"completed={form.is_completed}"
    )

    response = RenrollStepResponse(
        success=True,
        message=_step_message(step),
        form=RenrollFormResponse.model_validate(form),
        can_proceed=step < FINAL_STEP,
    )
    return response, created


def validate_step_request(step: int, form_data: dict) -> StepValidationResponse:
    """Dry-run a step's validation without touching storage."""
    errors = validate_step(step, form_data)
    return StepValidationResponse(success=not errors, errors=errors, can_proceed=not errors)


async def list_forms(db: AsyncSession) -> RenrollFormListResponse:
    """All re-enrollment forms, newest first."""
    try:
        forms = await repository.list_all(db)
    except SQLAlchemyError as e:
        logger.error(f"Failed to list renroll forms: {e}")
        raise StorageFailureError("Failed to fetch renroll forms", reason=str(e)) from e

    return RenrollFormListResponse(
        success=True,
        count=len(forms),
        forms=[RenrollFormResponse.model_validate(form) for form in forms],
    )


async def _get_or_raise(db: AsyncSession, id: UUID) -> RenrollForm:
    try:
        form = await repository.get_by_id(db, id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch renroll form {id}: {e}")
        raise StorageFailureError("Failed to fetch renroll form", reason=str(e)) from e

    if form is None:
        raise RecordNotFoundError("Renroll form not found")
    return form


async def get_form(db: AsyncSession, id: UUID) -> RenrollFormDetailResponse:
    """
    Get one re-enrollment form.

    Raises:
        RecordNotFoundError: no form with this ID
    """
    form = await _get_or_raise(db, id)
    return RenrollFormDetailResponse(success=True, form=RenrollFormResponse.model_validate(form))


async def delete_form(db: AsyncSession, id: UUID) -> RenrollFormDeleteResponse:
    """
    Delete one re-enrollment form.

    Raises:
        RecordNotFoundError: no form with this ID
    """
    form = await _get_or_raise(db, id)

    try:
        await repository.delete(db, form)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to delete renroll form {id}: {e}")
        raise StorageFailureError("Failed to delete renroll form", reason=str(e)) from e

    logger.info(f"Renroll form deleted: id={id}")
    return RenrollFormDeleteResponse(success=True, message="Renroll form deleted successfully")
