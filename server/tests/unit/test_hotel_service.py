"""Unit tests for hotel service."""

import pytest

from factories import (
    create_eligible_user,
    create_enrollment_with_address,
    create_hotel,
    create_room,
    create_ticket,
    create_ticket_type,
    create_user,
)
from hotel_api.core.exceptions import NotFoundError, PaymentRequiredError
from hotel_api.core.observability import REGISTRY
from hotel_api.models import TicketStatus
from hotel_api.services.hotel_service import HotelService


def _denials(reason: str) -> float:
    return REGISTRY.get_sample_value(
        "hotel_eligibility_denials_total", {"reason": reason}
    ) or 0.0


@pytest.mark.asyncio
async def test_rules_pass_for_paid_ticket_with_hotel(test_session):
    """Test that a paid ticket including a hotel passes the rules."""
    user, _ = await create_eligible_user(test_session)
    service = HotelService(test_session)

    assert await service.rules_for_listing_hotels(user.id) is None


@pytest.mark.asyncio
async def test_rules_without_enrollment(test_session):
    user = await create_user(test_session)
    service = HotelService(test_session)
    before = _denials("no_enrollment")

    with pytest.raises(NotFoundError) as exc_info:
        await service.rules_for_listing_hotels(user.id)

    assert exc_info.value.message == "Enrollment not found!!"
    assert _denials("no_enrollment") == before + 1


@pytest.mark.asyncio
async def test_rules_without_ticket(test_session):
    user = await create_user(test_session)
    await create_enrollment_with_address(test_session, user)
    service = HotelService(test_session)

    with pytest.raises(NotFoundError) as exc_info:
        await service.rules_for_listing_hotels(user.id)

    assert exc_info.value.message == "Ticket not found!!"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status, includes_hotel",
    [
        (TicketStatus.RESERVED, True),
        (TicketStatus.RESERVED, False),
        (TicketStatus.PAID, False),
    ],
)
async def test_rules_require_paid_ticket_with_hotel(test_session, status, includes_hotel):
    user = await create_user(test_session)
    enrollment = await create_enrollment_with_address(test_session, user)
    ticket_type = await create_ticket_type(test_session, includes_hotel=includes_hotel)
    await create_ticket(test_session, enrollment.id, ticket_type.id, status)
    service = HotelService(test_session)
    before = _denials("payment_required")

    with pytest.raises(PaymentRequiredError):
        await service.rules_for_listing_hotels(user.id)

    assert _denials("payment_required") == before + 1


@pytest.mark.asyncio
async def test_get_hotels_ordered_by_id(test_session):
    user, _ = await create_eligible_user(test_session)
    created = [await create_hotel(test_session) for _ in range(3)]
    service = HotelService(test_session)

    hotels = await service.get_hotels(user.id)

    assert [h.id for h in hotels] == [h.id for h in created]


@pytest.mark.asyncio
async def test_get_hotels_checks_rules_first(test_session):
    """Hotels stay hidden from users without an enrollment."""
    user = await create_user(test_session)
    await create_hotel(test_session)
    service = HotelService(test_session)

    with pytest.raises(NotFoundError):
        await service.get_hotels(user.id)


@pytest.mark.asyncio
async def test_get_hotel_by_id_loads_rooms(test_session, session_factory):
    user, _ = await create_eligible_user(test_session)
    hotel = await create_hotel(test_session)
    room1 = await create_room(test_session, hotel, capacity=1)
    room2 = await create_room(test_session, hotel, capacity=4)

    # Fresh session so rooms are loaded by the query, not the identity map
    async with session_factory() as db:
        found = await HotelService(db).get_hotel_by_id(user.id, hotel.id)

    assert found.id == hotel.id
    assert [(r.id, r.capacity) for r in found.rooms] == [(room1.id, 1), (room2.id, 4)]


@pytest.mark.asyncio
async def test_get_hotel_by_id_not_found(test_session):
    user, _ = await create_eligible_user(test_session)
    service = HotelService(test_session)

    with pytest.raises(NotFoundError) as exc_info:
        await service.get_hotel_by_id(user.id, 12345)

    assert exc_info.value.message == "No result for this search!"


@pytest.mark.asyncio
async def test_get_hotel_by_id_unparseable_id(test_session):
    user, _ = await create_eligible_user(test_session)
    await create_hotel(test_session)
    service = HotelService(test_session)

    with pytest.raises(NotFoundError):
        await service.get_hotel_by_id(user.id, None)


@pytest.mark.asyncio
async def test_get_hotel_by_id_payment_checked_before_lookup(test_session):
    """An unpaid ticket yields 402 even when the hotel does not exist."""
    user = await create_user(test_session)
    enrollment = await create_enrollment_with_address(test_session, user)
    ticket_type = await create_ticket_type(test_session, includes_hotel=True)
    await create_ticket(test_session, enrollment.id, ticket_type.id, TicketStatus.RESERVED)
    service = HotelService(test_session)

    with pytest.raises(PaymentRequiredError):
        await service.get_hotel_by_id(user.id, 999)
