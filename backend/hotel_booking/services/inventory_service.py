"""Property, room type and room inventory lookups."""
from __future__ import annotations

import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.models.property import Property
from hotel_booking.models.room import Room, RoomStatus
from hotel_booking.models.room_type import RoomType

# Rooms that physically exist and are in rotation; retired or blocked rooms
# do not count towards sellable inventory.
COUNTABLE_ROOM_STATUSES: frozenset[RoomStatus] = frozenset(
    {RoomStatus.AVAILABLE, RoomStatus.OCCUPIED, RoomStatus.CLEANING}
)


async def get_active_property(
    session: AsyncSession, property_id: uuid.UUID
) -> Property | None:
    """Fetch a property only when it is active."""
    result = await session.execute(
        select(Property).where(Property.id == property_id, Property.is_active.is_(True))
    )
    return result.scalar_one_or_none()


async def get_active_room_type(
    session: AsyncSession,
    *,
    property_id: uuid.UUID,
    room_type_id: uuid.UUID,
) -> RoomType | None:
    """Fetch an active room type that belongs to the given property."""
    result = await session.execute(
        select(RoomType).where(
            RoomType.id == room_type_id,
            RoomType.property_id == property_id,
            RoomType.is_active.is_(True),
        )
    )
    return result.scalar_one_or_none()


async def count_bookable_rooms(
    session: AsyncSession,
    *,
    property_id: uuid.UUID,
    room_type_id: uuid.UUID,
) -> int:
    """Return how many rooms of a type are in rotation at a property."""
    result = await session.execute(
        select(func.count())
        .select_from(Room)
        .where(
            Room.property_id == property_id,
            Room.room_type_id == room_type_id,
            Room.is_active.is_(True),
            Room.status.in_(list(COUNTABLE_ROOM_STATUSES)),
        )
    )
    return int(result.scalar_one())
