"""Hotel service: eligibility rules and hotel lookups."""

import logging
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import NotFoundError, PaymentRequiredError
from ..core.observability import metrics_collector
from ..models.hotel import Hotel
from ..models.ticket import Ticket, TicketStatus
from ..repositories.enrollment_repository import EnrollmentRepository
from ..repositories.hotel_repository import HotelRepository
from ..repositories.ticket_repository import TicketRepository

logger = logging.getLogger(__name__)


def ensure_ticket_grants_hotel(ticket: Ticket) -> None:
    """
    Check that a ticket entitles its holder to hotel accommodation.

    Args:
        ticket: Ticket with its ticket type loaded

    Raises:
        PaymentRequiredError: If the ticket is not paid or its type has no hotel
    """
    if ticket.status != TicketStatus.PAID or not ticket.ticket_type.includes_hotel:
        raise PaymentRequiredError()


class HotelService:
    """Service for hotel listing operations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.enrollments = EnrollmentRepository(db)
        self.tickets = TicketRepository(db)
        self.hotels = HotelRepository(db)

    async def rules_for_listing_hotels(self, user_id: int) -> None:
        """
        Verify the user may see hotels.

        The user needs an enrollment holding a paid ticket whose type
        includes hotel accommodation. Nothing is written.

        Raises:
            NotFoundError: If the user has no enrollment or no ticket
            PaymentRequiredError: If the ticket does not grant accommodation
        """
        enrollment = await self.enrollments.find_with_address_by_user_id(user_id)
        if not enrollment:
            logger.warning("Hotel listing refused - no enrollment", extra={"user_id": user_id})
            metrics_collector.record_eligibility_denied("no_enrollment")
            raise NotFoundError("Enrollment not found!!")

        ticket = await self.tickets.find_ticket_by_enrollment_id(enrollment.id)
        if not ticket:
            logger.warning(
                "Hotel listing refused - no ticket",
                extra={"user_id": user_id, "enrollment_id": enrollment.id}
            )
            metrics_collector.record_eligibility_denied("no_ticket")
            raise NotFoundError("Ticket not found!!")

        try:
            ensure_ticket_grants_hotel(ticket)
        except PaymentRequiredError:
            logger.warning(
                "Hotel listing refused - ticket does not grant accommodation",
                extra={
                    "user_id": user_id,
                    "ticket_id": ticket.id,
                    "status": ticket.status,
                    "includes_hotel": ticket.ticket_type.includes_hotel,
                }
            )
            metrics_collector.record_eligibility_denied("payment_required")
            raise

    async def get_hotels(self, user_id: int) -> Sequence[Hotel]:
        """Return all hotels once the user passes the eligibility rules."""
        await self.rules_for_listing_hotels(user_id)
        hotels = await self.hotels.find_hotels()

        metrics_collector.record_listing_served("list")
        logger.info("Hotels listed", extra={"user_id": user_id, "count": len(hotels)})
        return hotels

    async def get_hotel_by_id(self, user_id: int, hotel_id: Optional[int]) -> Hotel:
        """
        Return a hotel with its rooms once the user passes the eligibility rules.

        Args:
            user_id: Requesting user
            hotel_id: Hotel to fetch; None stands for an unparseable id

        Raises:
            NotFoundError: If the hotel does not exist
        """
        await self.rules_for_listing_hotels(user_id)

        hotel = await self.hotels.find_hotel_by_id(hotel_id) if hotel_id is not None else None
        if not hotel:
            logger.warning("Hotel not found", extra={"user_id": user_id, "hotel_id": hotel_id})
            raise NotFoundError()

        metrics_collector.record_listing_served("detail")
        return hotel
