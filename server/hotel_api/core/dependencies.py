"""FastAPI dependencies for database access and bearer authentication."""

import logging
from typing import Optional

import jwt
from fastapi import Depends, Header
from jwt import PyJWTError
from sqlalchemy.ext.asyncio import AsyncSession

from ..repositories.session_repository import SessionRepository
from .config import settings
from .database import get_db
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def _extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise AuthenticationError(detail="Authorization header missing")

    try:
        scheme, token = authorization.split()
    except ValueError:
        raise AuthenticationError(detail="Invalid authorization header format")

    if scheme.lower() != "bearer":
        raise AuthenticationError(detail="Invalid authentication scheme")
    return token


async def get_current_user_id(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    db: AsyncSession = Depends(get_db),
) -> int:
    """
    Authentication dependency that validates Bearer tokens.

    The token must be an HS256 JWT signed with the configured secret,
    carry an integer ``userId`` claim, and belong to a stored session.

    Returns:
        int: ID of the authenticated user

    Raises:
        AuthenticationError: If the token is missing or invalid
    """
    token = _extract_bearer_token(authorization)

    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=["HS256"])
    except PyJWTError as e:
        logger.info("Bearer token rejected", extra={"error": str(e)})
        raise AuthenticationError(detail="Token validation failed")

    user_id = payload.get("userId")
    if not isinstance(user_id, int):
        raise AuthenticationError(detail="Invalid token payload")

    session = await SessionRepository(db).find_by_token(token)
    if not session or session.user_id != user_id:
        raise AuthenticationError(detail="Session not found for token")

    return user_id

