"""Service layer package."""

from .hotel_service import HotelService, ensure_ticket_grants_hotel

__all__ = [
    "HotelService",
    "ensure_ticket_grants_hotel",
]
