"""Integration tests for the hotel endpoints."""

import re

import pytest

from factories import (
    create_eligible_user,
    create_enrollment_with_address,
    create_hotel,
    create_room,
    create_ticket,
    create_ticket_type,
    create_user,
    generate_valid_token,
)
from hotel_api.models import TicketStatus
from hotel_api.schemas.hotel import Hotel


def _auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


ISO_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


# GET /hotels

@pytest.mark.asyncio
async def test_get_hotels_without_token(test_client):
    response = await test_client.get("/hotels")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_hotels_with_invalid_token(test_client):
    response = await test_client.get("/hotels", headers={"Authorization": "Bearer XXXX"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_hotels_empty_list(test_client, test_session):
    """An eligible user sees an empty list when no hotel exists."""
    _, token = await create_eligible_user(test_session)

    # Trailing whitespace in the header is tolerated
    response = await test_client.get("/hotels", headers={"Authorization": f"Bearer {token} "})

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_get_hotels_lists_all_hotels(test_client, test_session):
    _, token = await create_eligible_user(test_session)
    hotel1 = await create_hotel(test_session)
    hotel2 = await create_hotel(test_session)

    response = await test_client.get("/hotels", headers=_auth(token))

    assert response.status_code == 200
    body = response.json()
    assert [h["id"] for h in body] == [hotel1.id, hotel2.id]
    assert body[0]["name"] == hotel1.name
    assert body[0]["image"] == hotel1.image
    assert set(body[0]) == {"id", "name", "image", "createdAt", "updatedAt"}
    for hotel in body:
        assert ISO_UTC.match(hotel["createdAt"])
        assert ISO_UTC.match(hotel["updatedAt"])
    assert body == [
        Hotel.model_validate(h).model_dump(mode="json", by_alias=True)
        for h in (hotel1, hotel2)
    ]


@pytest.mark.asyncio
async def test_get_hotels_without_enrollment(test_client, test_session):
    token = await generate_valid_token(test_session)

    response = await test_client.get("/hotels", headers=_auth(token))

    assert response.status_code == 404
    assert response.text == "Enrollment not found!!"


@pytest.mark.asyncio
async def test_get_hotels_without_ticket(test_client, test_session):
    user = await create_user(test_session)
    token = await generate_valid_token(test_session, user)
    await create_enrollment_with_address(test_session, user)
    await create_ticket_type(test_session, includes_hotel=True)

    response = await test_client.get("/hotels", headers=_auth(token))

    assert response.status_code == 404
    assert response.text == "Ticket not found!!"


@pytest.mark.asyncio
async def test_get_hotels_with_reserved_ticket(test_client, test_session):
    user = await create_user(test_session)
    token = await generate_valid_token(test_session, user)
    enrollment = await create_enrollment_with_address(test_session, user)
    ticket_type = await create_ticket_type(test_session, includes_hotel=True)
    await create_ticket(test_session, enrollment.id, ticket_type.id, TicketStatus.RESERVED)

    response = await test_client.get("/hotels", headers=_auth(token))

    assert response.status_code == 402
    assert response.content == b""


@pytest.mark.asyncio
async def test_get_hotels_with_ticket_type_without_hotel(test_client, test_session):
    user = await create_user(test_session)
    token = await generate_valid_token(test_session, user)
    enrollment = await create_enrollment_with_address(test_session, user)
    ticket_type = await create_ticket_type(test_session, includes_hotel=False)
    await create_ticket(test_session, enrollment.id, ticket_type.id, TicketStatus.PAID)

    response = await test_client.get("/hotels", headers=_auth(token))

    assert response.status_code == 402


# GET /hotels/{hotelId}

@pytest.mark.asyncio
async def test_get_hotel_without_token(test_client):
    response = await test_client.get("/hotels/1")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_hotel_with_invalid_token(test_client):
    response = await test_client.get("/hotels/1", headers={"Authorization": "Bearer XXXX"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_hotel_unknown_id(test_client, test_session):
    _, token = await create_eligible_user(test_session)

    response = await test_client.get("/hotels/9999", headers=_auth(token))

    assert response.status_code == 404
    assert response.text == "No result for this search!"


@pytest.mark.asyncio
async def test_get_hotel_non_numeric_id(test_client, test_session):
    """A literal route placeholder is answered like an unknown hotel."""
    _, token = await create_eligible_user(test_session)

    response = await test_client.get("/hotels/:hotelId", headers=_auth(token))

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_hotel_id_beyond_integer_range(test_client, test_session):
    _, token = await create_eligible_user(test_session)

    response = await test_client.get("/hotels/99999999999999999999", headers=_auth(token))

    assert response.status_code == 404
    assert response.text == "No result for this search!"


@pytest.mark.asyncio
async def test_get_hotel_with_rooms(test_client, test_session):
    _, token = await create_eligible_user(test_session)
    hotel = await create_hotel(test_session)
    room = await create_room(test_session, hotel, capacity=2)

    response = await test_client.get(f"/hotels/{hotel.id}", headers=_auth(token))

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == hotel.id
    assert body["name"] == hotel.name
    assert body["image"] == hotel.image
    assert body["Rooms"] == [
        {
            "id": room.id,
            "name": room.name,
            "capacity": 2,
            "hotelId": hotel.id,
            "createdAt": body["Rooms"][0]["createdAt"],
            "updatedAt": body["Rooms"][0]["updatedAt"],
        }
    ]
    assert ISO_UTC.match(body["createdAt"])
    assert ISO_UTC.match(body["Rooms"][0]["createdAt"])
    assert ISO_UTC.match(body["Rooms"][0]["updatedAt"])
    hotel_fields = {key: value for key, value in body.items() if key != "Rooms"}
    assert hotel_fields == Hotel.model_validate(hotel).model_dump(mode="json", by_alias=True)


@pytest.mark.asyncio
async def test_get_hotel_without_enrollment(test_client, test_session):
    token = await generate_valid_token(test_session)
    hotel = await create_hotel(test_session)
    await create_room(test_session, hotel)

    response = await test_client.get(f"/hotels/{hotel.id}", headers=_auth(token))

    assert response.status_code == 404
    assert response.text == "Enrollment not found!!"


@pytest.mark.asyncio
async def test_get_hotel_without_ticket(test_client, test_session):
    user = await create_user(test_session)
    token = await generate_valid_token(test_session, user)
    await create_enrollment_with_address(test_session, user)
    await create_ticket_type(test_session, includes_hotel=True)
    hotel = await create_hotel(test_session)
    await create_room(test_session, hotel)

    response = await test_client.get(f"/hotels/{hotel.id}", headers=_auth(token))

    assert response.status_code == 404
    assert response.text == "Ticket not found!!"


@pytest.mark.asyncio
async def test_get_hotel_with_reserved_ticket(test_client, test_session):
    user = await create_user(test_session)
    token = await generate_valid_token(test_session, user)
    enrollment = await create_enrollment_with_address(test_session, user)
    ticket_type = await create_ticket_type(test_session, includes_hotel=True)
    await create_ticket(test_session, enrollment.id, ticket_type.id, TicketStatus.RESERVED)
    hotel = await create_hotel(test_session)
    await create_room(test_session, hotel)

    response = await test_client.get(f"/hotels/{hotel.id}", headers=_auth(token))

    assert response.status_code == 402


@pytest.mark.asyncio
async def test_get_hotel_with_ticket_type_without_hotel(test_client, test_session):
    user = await create_user(test_session)
    token = await generate_valid_token(test_session, user)
    enrollment = await create_enrollment_with_address(test_session, user)
    ticket_type = await create_ticket_type(test_session, includes_hotel=False)
    await create_ticket(test_session, enrollment.id, ticket_type.id, TicketStatus.PAID)
    hotel = await create_hotel(test_session)
    await create_room(test_session, hotel)

    response = await test_client.get(f"/hotels/{hotel.id}", headers=_auth(token))

    assert response.status_code == 402
