"""Enrollment queries."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.enrollment import Enrollment


class EnrollmentRepository:
    """Read access to enrollments."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        """Return the user's enrollment with its address loaded, or None."""
        stmt = (
            select(Enrollment)
            .options(selectinload(Enrollment.address))
            .where(Enrollment.user_id == user_id)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
