"""
New Enrollment Repository

Database operations for single-document enrollments.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import NewEnrollment, NewEnrollmentStatus


async def create(db: AsyncSession, values: dict[str, Any]) -> NewEnrollment:
    """Create a new enrollment."""
    enrollment = NewEnrollment(**values)

    db.add(enrollment)
    await db.commit()
    await db.refresh(enrollment)

    return enrollment


async def get_by_id(db: AsyncSession, id: UUID) -> NewEnrollment | None:
    """Get enrollment by ID."""
    return await db.get(NewEnrollment, id)


async def list_all(db: AsyncSession) -> list[NewEnrollment]:
    """All enrollments, newest submission first."""
    result = await db.execute(select(NewEnrollment).order_by(NewEnrollment.submitted_at.desc()))
    return list(result.scalars().all())


async def update_status(
    db: AsyncSession, enrollment: NewEnrollment, status: NewEnrollmentStatus
) -> NewEnrollment:
    """Set the review status."""
    enrollment.status = status

    await db.commit()
    await db.refresh(enrollment)

    return enrollment
