"""Models module exporting all database models."""

from .enrollment import Address, Enrollment
from .hotel import Hotel, Room
from .ticket import Ticket, TicketStatus, TicketType
from .user import Session, User

__all__ = [
    # Accounts
    "User",
    "Session",

    # Enrollment entities
    "Enrollment",
    "Address",

    # Ticket entities
    "TicketType",
    "Ticket",
    "TicketStatus",

    # Accommodation entities
    "Hotel",
    "Room",
]
