"""Test fixtures for the hotel booking backend."""
from __future__ import annotations

import os
import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import UTC, date, datetime, time
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from hotel_booking.core.config import get_settings
from hotel_booking.db.base import Base
from hotel_booking.db.session import dispose_engine, get_sessionmaker
from hotel_booking.main import app
from hotel_booking.models import (
    Property,
    Reservation,
    ReservationRoom,
    ReservationStatus,
    Room,
    RoomStatus,
    RoomType,
)

ReservationFactory = Callable[..., Awaitable[uuid.UUID]]


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url, future=True)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)


@pytest_asyncio.fixture()
async def inventory(reset_database: None, db_url: str) -> dict[str, uuid.UUID]:
    """Seed a property with one sellable room type and several edge-case ones.

    ``deluxe`` has two countable rooms plus one in maintenance and one retired;
    ``suite`` exists with no rooms at all.
    """
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        hotel = Property(name="Harbor View", slug=f"harbor-{uuid.uuid4().hex[:8]}", timezone="UTC")
        closed = Property(
            name="Old Mill Inn",
            slug=f"mill-{uuid.uuid4().hex[:8]}",
            timezone="UTC",
            is_active=False,
        )
        session.add_all([hotel, closed])
        await session.flush()

        deluxe = RoomType(property_id=hotel.id, name="Deluxe King", base_rate=Decimal("189.00"))
        suite = RoomType(property_id=hotel.id, name="Harbor Suite", base_rate=Decimal("329.00"))
        retired = RoomType(
            property_id=hotel.id,
            name="Attic Single",
            base_rate=Decimal("79.00"),
            is_active=False,
        )
        closed_type = RoomType(property_id=closed.id, name="Mill Double", base_rate=Decimal("99.00"))
        session.add_all([deluxe, suite, retired, closed_type])
        await session.flush()

        session.add_all(
            [
                Room(
                    property_id=hotel.id,
                    room_type_id=deluxe.id,
                    room_number="101",
                    status=RoomStatus.AVAILABLE,
                ),
                Room(
                    property_id=hotel.id,
                    room_type_id=deluxe.id,
                    room_number="102",
                    status=RoomStatus.CLEANING,
                ),
                Room(
                    property_id=hotel.id,
                    room_type_id=deluxe.id,
                    room_number="103",
                    status=RoomStatus.MAINTENANCE,
                ),
                Room(
                    property_id=hotel.id,
                    room_type_id=deluxe.id,
                    room_number="104",
                    status=RoomStatus.AVAILABLE,
                    is_active=False,
                ),
                Room(
                    property_id=closed.id,
                    room_type_id=closed_type.id,
                    room_number="1",
                    status=RoomStatus.AVAILABLE,
                ),
            ]
        )
        await session.commit()

        return {
            "property_id": hotel.id,
            "closed_property_id": closed.id,
            "deluxe_id": deluxe.id,
            "suite_id": suite.id,
            "retired_id": retired.id,
            "closed_room_type_id": closed_type.id,
        }


@pytest_asyncio.fixture()
async def make_reservation(inventory: dict[str, uuid.UUID], db_url: str) -> ReservationFactory:
    """Return a coroutine that books rooms of a type for a date range."""
    sessionmaker = get_sessionmaker(db_url)

    async def _create(
        check_in: date,
        check_out: date,
        *,
        status: ReservationStatus = ReservationStatus.CONFIRMED,
        room_type_id: uuid.UUID | None = None,
        property_id: uuid.UUID | None = None,
        rooms: int = 1,
    ) -> uuid.UUID:
        room_type = room_type_id or inventory["deluxe_id"]
        async with sessionmaker() as session:
            reservation = Reservation(
                property_id=property_id or inventory["property_id"],
                status=status,
                check_in_date=datetime.combine(check_in, time(15, 0), tzinfo=UTC),
                check_out_date=datetime.combine(check_out, time(11, 0), tzinfo=UTC),
                guest_name="Jordan Guest",
                guest_email="jordan.guest@example.com",
            )
            reservation.rooms = [
                ReservationRoom(room_type_id=room_type) for _ in range(rooms)
            ]
            session.add(reservation)
            await session.commit()
            return reservation.id

    return _create


@pytest_asyncio.fixture()
async def app_context(inventory: dict[str, uuid.UUID]) -> AsyncIterator[dict[str, object]]:
    """Yield an async client alongside the seeded inventory ids."""
    context: dict[str, object] = dict(inventory)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        context["client"] = client
        yield context
