"""Login session queries."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user import Session


class SessionRepository:
    """Read access to login sessions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_token(self, token: str) -> Optional[Session]:
        stmt = select(Session).where(Session.token == token).limit(1)
        result = await self.db.execute(stmt)
        return result.scalars().first()
