"""Hotel queries."""

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.hotel import Hotel


class HotelRepository:
    """Read access to hotels and their rooms."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_hotels(self) -> Sequence[Hotel]:
        """Return every hotel ordered by id. Rooms are not loaded."""
        result = await self.db.execute(select(Hotel).order_by(Hotel.id))
        return result.scalars().all()

    async def find_hotel_by_id(self, hotel_id: int) -> Optional[Hotel]:
        """Return the hotel with its rooms loaded, or None."""
        stmt = (
            select(Hotel)
            .options(selectinload(Hotel.rooms))
            .where(Hotel.id == hotel_id)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
