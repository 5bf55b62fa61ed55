"""Hotel property (business unit) model."""

from __future__ import annotations

import uuid
from datetime import time
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.db.base import Base
from hotel_booking.models.mixins import TimestampMixin


if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from hotel_booking.models.reservation import Reservation
    from hotel_booking.models.room import Room
    from hotel_booking.models.room_type import RoomType


class Property(TimestampMixin, Base):
    """A bookable hotel property."""

    __tablename__ = "properties"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    timezone: Mapped[str] = mapped_column(String(64), nullable=False, default="UTC")
    check_in_time: Mapped[time | None] = mapped_column(Time())
    check_out_time: Mapped[time | None] = mapped_column(Time())
    is_active: Mapped[bool] = mapped_column(Boolean(), nullable=False, default=True)

    room_types: Mapped[list["RoomType"]] = relationship(
        "RoomType", back_populates="property", cascade="all, delete-orphan"
    )
    rooms: Mapped[list["Room"]] = relationship(
        "Room", back_populates="property", cascade="all, delete-orphan"
    )
    reservations: Mapped[list["Reservation"]] = relationship(
        "Reservation", back_populates="property", cascade="all, delete-orphan"
    )
