"""Pydantic schemas for response serialization."""

from .hotel import Hotel, HotelWithRooms, Room

__all__ = ["Hotel", "HotelWithRooms", "Room"]
