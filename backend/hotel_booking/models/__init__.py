"""ORM models package export."""

from hotel_booking.models.property import Property
from hotel_booking.models.reservation import (
    Reservation,
    ReservationRoom,
    ReservationStatus,
)
from hotel_booking.models.room import Room, RoomStatus
from hotel_booking.models.room_type import RoomType

__all__ = [
    "Property",
    "Reservation",
    "ReservationRoom",
    "ReservationStatus",
    "Room",
    "RoomStatus",
    "RoomType",
]
