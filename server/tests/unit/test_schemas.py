"""Unit tests for hotel response schemas."""

from datetime import datetime, timedelta, timezone

from hotel_api.models import Hotel as HotelModel
from hotel_api.models import Room as RoomModel
from hotel_api.schemas.hotel import Hotel, HotelWithRooms

CREATED = datetime(2024, 3, 1, 12, 30, 0)
UPDATED = datetime(2024, 3, 2, 8, 0, 0)


def _hotel_model() -> HotelModel:
    hotel = HotelModel(id=7, name="Driven Resort", image="https://img.example/7.jpg",
                       created_at=CREATED, updated_at=UPDATED)
    hotel.rooms = [
        RoomModel(id=70, name="101", capacity=2, hotel_id=7, created_at=CREATED, updated_at=UPDATED),
    ]
    return hotel


def test_hotel_serializes_camel_case():
    data = Hotel.model_validate(_hotel_model()).model_dump(mode="json", by_alias=True)

    assert data == {
        "id": 7,
        "name": "Driven Resort",
        "image": "https://img.example/7.jpg",
        "createdAt": "2024-03-01T12:30:00.000Z",
        "updatedAt": "2024-03-02T08:00:00.000Z",
    }


def test_hotel_with_rooms_uses_capitalised_rooms_key():
    data = HotelWithRooms.model_validate(_hotel_model()).model_dump(mode="json", by_alias=True)

    assert data["Rooms"] == [
        {
            "id": 70,
            "name": "101",
            "capacity": 2,
            "hotelId": 7,
            "createdAt": "2024-03-01T12:30:00.000Z",
            "updatedAt": "2024-03-02T08:00:00.000Z",
        }
    ]
    assert "rooms" not in data


def test_timestamps_are_converted_to_utc():
    hotel = _hotel_model()
    hotel.created_at = datetime(2024, 3, 1, 9, 30, 0, 123456, tzinfo=timezone(timedelta(hours=-3)))

    data = Hotel.model_validate(hotel).model_dump(mode="json", by_alias=True)

    assert data["createdAt"] == "2024-03-01T12:30:00.123Z"
