"""Room type models for property inventory."""

from __future__ import annotations

import uuid
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.db.base import Base
from hotel_booking.models.mixins import TimestampMixin


if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from hotel_booking.models.property import Property
    from hotel_booking.models.room import Room


class RoomType(TimestampMixin, Base):
    """A sellable category of rooms within a property."""

    __tablename__ = "room_types"
    __table_args__ = (Index("ix_room_types_property", "property_id"),)

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    property_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1024))
    base_rate: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    max_occupancy: Mapped[int] = mapped_column(Integer(), nullable=False, default=2)
    is_active: Mapped[bool] = mapped_column(Boolean(), nullable=False, default=True)

    property: Mapped["Property"] = relationship("Property", back_populates="room_types")
    rooms: Mapped[list["Room"]] = relationship("Room", back_populates="room_type")
