"""Repository layer package: thin query wrappers over the database."""

from .enrollment_repository import EnrollmentRepository
from .hotel_repository import HotelRepository
from .session_repository import SessionRepository
from .ticket_repository import TicketRepository

__all__ = [
    "EnrollmentRepository",
    "HotelRepository",
    "SessionRepository",
    "TicketRepository",
]
