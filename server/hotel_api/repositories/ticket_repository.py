"""Ticket queries."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.ticket import Ticket


class TicketRepository:
    """Read access to tickets."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_ticket_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        """
        Return the first ticket of an enrollment with its ticket type loaded.

        Args:
            enrollment_id: Enrollment that owns the ticket

        Returns:
            Ticket if found, None otherwise
        """
        stmt = (
            select(Ticket)
            .options(selectinload(Ticket.ticket_type))
            .where(Ticket.enrollment_id == enrollment_id)
            .order_by(Ticket.id)
            .limit(1)
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()
