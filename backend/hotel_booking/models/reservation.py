"""Reservation models."""
from __future__ import annotations

import enum
import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.db.base import Base
from hotel_booking.models.mixins import TimestampMixin


if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from hotel_booking.models.property import Property
    from hotel_booking.models.room import Room
    from hotel_booking.models.room_type import RoomType


class ReservationStatus(str, enum.Enum):
    """Lifecycle states for reservations."""

    PENDING = "pending"
    PROVISIONAL = "provisional"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


class Reservation(TimestampMixin, Base):
    """A guest stay at a property."""

    __tablename__ = "reservations"
    __table_args__ = (
        Index("ix_reservations_property_dates", "property_id", "check_in_date", "check_out_date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    property_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"), nullable=False
    )
    status: Mapped[ReservationStatus] = mapped_column(
        Enum(ReservationStatus), default=ReservationStatus.PENDING, nullable=False
    )
    check_in_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    check_out_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    guest_name: Mapped[str | None] = mapped_column(String(255))
    guest_email: Mapped[str | None] = mapped_column(String(255))

    property: Mapped["Property"] = relationship("Property", back_populates="reservations")
    rooms: Mapped[list["ReservationRoom"]] = relationship(
        "ReservationRoom", back_populates="reservation", cascade="all, delete-orphan"
    )


class ReservationRoom(TimestampMixin, Base):
    """One booked room of a given type within a reservation."""

    __tablename__ = "reservation_rooms"
    __table_args__ = (Index("ix_reservation_rooms_room_type", "room_type_id"),)

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    reservation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False
    )
    room_type_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("room_types.id", ondelete="CASCADE"), nullable=False
    )
    room_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("rooms.id", ondelete="SET NULL"), nullable=True
    )

    reservation: Mapped["Reservation"] = relationship("Reservation", back_populates="rooms")
    room_type: Mapped["RoomType"] = relationship("RoomType")
    room: Mapped["Room | None"] = relationship("Room")
