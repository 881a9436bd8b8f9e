"""
Re-enrollment Repository

Database operations for re-enrollment drafts.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import RenrollForm


async def create(
    db: AsyncSession,
    values: dict[str, Any],
    *,
    current_step: int,
    is_completed: bool,
) -> RenrollForm:
    """Create a new draft."""
    form = RenrollForm(**values, current_step=current_step, is_completed=is_completed)

    db.add(form)
    await db.commit()
    await db.refresh(form)

    return form


async def get_by_id(db: AsyncSession, id: UUID) -> RenrollForm | None:
    """Get draft by ID."""
    return await db.get(RenrollForm, id)


async def find_draft(
    db: AsyncSession, father_email: str, child_first_name: str, child_last_name: str
) -> RenrollForm | None:
    """
    Find a draft by applicant (father email + child name).

    The first-created match wins if several exist.
    """
    result = await db.execute(
        select(RenrollForm)
        .where(
            RenrollForm.father_email == father_email,
            RenrollForm.child_first_name == child_first_name,
            RenrollForm.child_last_name == child_last_name,
        )
        .order_by(RenrollForm.submitted_at.asc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def update(
    db: AsyncSession,
    form: RenrollForm,
    values: dict[str, Any],
    *,
    current_step: int,
    is_completed: bool,
) -> RenrollForm:
    """Overwrite the given fields and progress markers of a draft."""
    for field, value in values.items():
        setattr(form, field, value)
    form.current_step = current_step
    form.is_completed = is_completed

    await db.commit()
    await db.refresh(form)

    return form


async def list_all(db: AsyncSession) -> list[RenrollForm]:
    """All drafts, newest first."""
    result = await db.execute(select(RenrollForm).order_by(RenrollForm.submitted_at.desc()))
    return list(result.scalars().all())


async def delete(db: AsyncSession, form: RenrollForm) -> None:
    """Delete a draft."""
    await db.delete(form)
    await db.commit()
