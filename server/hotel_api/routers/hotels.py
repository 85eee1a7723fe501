"""Hotel router for hotel listing and hotel detail lookups."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import get_current_user_id
from ..schemas.hotel import Hotel, HotelWithRooms
from ..services.hotel_service import HotelService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hotels", tags=["hotels"])

_ERROR_RESPONSES = {
    status.HTTP_401_UNAUTHORIZED: {"description": "Missing or invalid bearer token"},
    status.HTTP_402_PAYMENT_REQUIRED: {"description": "Ticket unpaid or without hotel"},
    status.HTTP_404_NOT_FOUND: {"description": "Enrollment, ticket or hotel not found"},
}


# Upper bound of the Integer primary key column
_MAX_HOTEL_ID = 2**31 - 1


def _parse_hotel_id(raw: str) -> Optional[int]:
    """Return the hotel id as a positive int, or None when it is not one."""
    if not (raw.isascii() and raw.isdigit()):
        return None
    hotel_id = int(raw)
    return hotel_id if 0 < hotel_id <= _MAX_HOTEL_ID else None


@router.get("", response_model=list[Hotel], responses=_ERROR_RESPONSES)
async def get_hotels(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    """
    List all hotels.

    Requires an enrollment with a paid ticket that includes hotel accommodation.
    """
    hotels = await HotelService(db).get_hotels(user_id)

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=[
            Hotel.model_validate(hotel).model_dump(mode="json", by_alias=True)
            for hotel in hotels
        ],
    )


@router.get("/{hotel_id}", response_model=HotelWithRooms, responses=_ERROR_RESPONSES)
async def get_hotel_by_id(
    hotel_id: str,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    """
    Get one hotel with its rooms.

    A non-numeric ``hotel_id`` is answered like an unknown hotel.
    """
    hotel = await HotelService(db).get_hotel_by_id(user_id, _parse_hotel_id(hotel_id))

    logger.info(
        "Hotel detail served",
        extra={"user_id": user_id, "hotel_id": hotel.id, "rooms": len(hotel.rooms)}
    )

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=HotelWithRooms.model_validate(hotel).model_dump(mode="json", by_alias=True),
    )
