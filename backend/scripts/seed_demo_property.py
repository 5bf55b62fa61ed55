"""Seed a demo property with room types and rooms."""
from __future__ import annotations

import argparse
import asyncio
from decimal import Decimal

from sqlalchemy import select

from hotel_booking.db.base import Base
from hotel_booking.db.session import get_engine, get_sessionmaker
from hotel_booking.models import Property, Room, RoomStatus, RoomType

DEMO_SLUG = "harbor-view"
DEMO_ROOM_TYPES: dict[str, tuple[Decimal, int]] = {
    "Deluxe King": (Decimal("189.00"), 6),
    "Twin Garden": (Decimal("149.00"), 4),
    "Harbor Suite": (Decimal("329.00"), 2),
}


async def seed_demo_property(create_schema: bool = False) -> None:
    if create_schema:
        async with get_engine().begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

    sessionmaker = get_sessionmaker()
    async with sessionmaker() as session:
        existing = await session.execute(select(Property).where(Property.slug == DEMO_SLUG))
        if existing.scalar_one_or_none() is not None:
            print("Demo property already present.")
            return

        hotel = Property(name="Harbor View Hotel", slug=DEMO_SLUG, timezone="UTC")
        session.add(hotel)
        await session.flush()

        created = 0
        floor = 1
        for name, (rate, count) in DEMO_ROOM_TYPES.items():
            room_type = RoomType(property_id=hotel.id, name=name, base_rate=rate)
            session.add(room_type)
            await session.flush()
            for index in range(count):
                session.add(
                    Room(
                        property_id=hotel.id,
                        room_type_id=room_type.id,
                        room_number=f"{floor}{index + 1:02d}",
                        status=RoomStatus.AVAILABLE,
                    )
                )
                created += 1
            floor += 1
        await session.commit()
        print(f"Seeded property {hotel.id} with {created} room(s).")


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed a demo property")
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create tables directly instead of relying on alembic migrations",
    )
    args = parser.parse_args()
    asyncio.run(seed_demo_property(create_schema=args.create_schema))


if __name__ == "__main__":
    main()
