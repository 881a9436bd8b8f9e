"""
Enrollment Form Repository

Database operations shared by all six form tables. Every function takes the
ORM model of the form it works on, so one set of queries serves every form.
"""

from collections.abc import Iterable
from typing import Any, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from academy_api.modules.forms.models import FormDocumentMixin

FormT = TypeVar("FormT", bound=FormDocumentMixin)


async def create(db: AsyncSession, model: type[FormT], values: dict[str, Any]) -> FormT:
    """Insert a new form document."""
    document = model(**values)

    db.add(document)
    await db.commit()
    await db.refresh(document)

    return document


async def get_by_id(db: AsyncSession, model: type[FormT], id: UUID) -> FormT | None:
    """Get a form document by ID."""
    return await db.get(model, id)


async def list_all(db: AsyncSession, model: type[FormT]) -> list[FormT]:
    """All documents of one form, newest submission first."""
    result = await db.execute(select(model).order_by(model.submitted_at.desc()))
    return list(result.scalars().all())


async def delete(db: AsyncSession, document: FormDocumentMixin) -> None:
    """Delete a form document."""
    await db.delete(document)
    await db.commit()


async def get_by_enrollment_id(
    db: AsyncSession, model: type[FormT], enrollment_id: str
) -> FormT | None:
    """
    Get the form document carrying an enrollment key.

    If more than one exists (legacy data), the first submitted wins.
    """
    result = await db.execute(
        select(model)
        .where(model.enrollment_id == enrollment_id)
        .order_by(model.submitted_at.asc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def get_by_enrollment_ids(
    db: AsyncSession, model: type[FormT], enrollment_ids: Iterable[str]
) -> dict[str, FormT]:
    """
    Batched lookup of one form for many enrollment keys.

    Returns:
        {enrollment_id: document} for the keys that have a document;
        the first submitted document wins for a repeated key.
    """
    ids = list(dict.fromkeys(enrollment_ids))
    if not ids:
        return {}

    result = await db.execute(
        select(model)
        .where(model.enrollment_id.in_(ids))
        .order_by(model.submitted_at.asc())
    )

    documents: dict[str, FormT] = {}
    for document in result.scalars().all():
        documents.setdefault(document.enrollment_id, document)
    return documents
