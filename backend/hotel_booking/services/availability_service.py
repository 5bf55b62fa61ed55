"""Room availability checks for the public booking flow."""
from __future__ import annotations

import enum
import logging
import uuid
from dataclasses import dataclass
from datetime import date, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.core.calendar import (
    day_span,
    first_of_month,
    month_window,
    to_calendar_day,
    today_utc,
)
from hotel_booking.services import inventory_service, reservation_overlap_service
from hotel_booking.services.availability_engine import (
    AvailabilityResult,
    NightAvailability,
    StayWindow,
    compute_availability,
)

logger = logging.getLogger(__name__)

NO_INVENTORY_MESSAGE = "No rooms of this type are currently available for booking"
FULLY_BOOKED_MESSAGE = "No rooms available for the selected dates"


class InvalidAvailabilityRequest(ValueError):
    """Raised when request parameters fail a booking rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class AvailabilityTargetNotFound(LookupError):
    """Raised when the property or room type is missing or inactive."""


class AvailabilityStatus(str, enum.Enum):
    AVAILABLE = "available"
    FULLY_BOOKED = "fully_booked"
    NO_INVENTORY = "no_inventory"


@dataclass(slots=True, frozen=True)
class AvailabilityCheck:
    """Outcome of an availability check, with normalized request dates."""

    property_id: uuid.UUID
    room_type_id: uuid.UUID
    check_in: date
    check_out: date
    total_rooms: int
    status: AvailabilityStatus
    result: AvailabilityResult | None

    @property
    def nights(self) -> int:
        return day_span(self.check_in, self.check_out)

    @property
    def is_available(self) -> bool:
        return self.status == AvailabilityStatus.AVAILABLE

    @property
    def available_rooms(self) -> int:
        return self.result.min_available_rooms if self.result is not None else 0

    @property
    def per_night(self) -> tuple[NightAvailability, ...]:
        return self.result.per_night if self.result is not None else ()

    @property
    def message(self) -> str:
        if self.status == AvailabilityStatus.NO_INVENTORY:
            return NO_INVENTORY_MESSAGE
        if self.status == AvailabilityStatus.FULLY_BOOKED:
            return FULLY_BOOKED_MESSAGE
        count = self.available_rooms
        return f"{count} room{'s' if count > 1 else ''} available for your selected dates"


@dataclass(slots=True, frozen=True)
class MonthlyAvailability:
    """Per-day availability across the bookable part of a month."""

    property_id: uuid.UUID
    room_type_id: uuid.UUID
    start_date: date
    end_date: date
    days: dict[date, NightAvailability]


def _validate_window(check_in: date, check_out: date, *, today: date) -> StayWindow:
    if check_out <= check_in:
        raise InvalidAvailabilityRequest(
            "check_out", "Check-out date must be after check-in date"
        )
    # Cutoff is the UTC day, not the property's local day.
    if check_in < today:
        raise InvalidAvailabilityRequest(
            "check_in", "Check-in date cannot be in the past"
        )
    return StayWindow(check_in, check_out)


async def _ensure_bookable_target(
    session: AsyncSession,
    *,
    property_id: uuid.UUID,
    room_type_id: uuid.UUID,
) -> None:
    hotel = await inventory_service.get_active_property(session, property_id)
    if hotel is None:
        raise AvailabilityTargetNotFound("Property not found or inactive")
    room_type = await inventory_service.get_active_room_type(
        session, property_id=property_id, room_type_id=room_type_id
    )
    if room_type is None:
        raise AvailabilityTargetNotFound("Room type not found or inactive")


async def check_room_availability(
    session: AsyncSession,
    *,
    property_id: uuid.UUID,
    room_type_id: uuid.UUID,
    check_in: date | datetime,
    check_out: date | datetime,
    today: date | None = None,
) -> AvailabilityCheck:
    """Validate a stay request and compute availability for it.

    Raises ``InvalidAvailabilityRequest`` for bad dates and
    ``AvailabilityTargetNotFound`` for unknown or inactive targets. Database
    errors from the reservation read propagate before any computation.
    """
    window = _validate_window(
        to_calendar_day(check_in),
        to_calendar_day(check_out),
        today=today or today_utc(),
    )
    await _ensure_bookable_target(
        session, property_id=property_id, room_type_id=room_type_id
    )

    total_rooms = await inventory_service.count_bookable_rooms(
        session, property_id=property_id, room_type_id=room_type_id
    )
    if total_rooms == 0:
        logger.info("Room type %s has no countable rooms", room_type_id)
        return AvailabilityCheck(
            property_id=property_id,
            room_type_id=room_type_id,
            check_in=window.check_in,
            check_out=window.check_out,
            total_rooms=0,
            status=AvailabilityStatus.NO_INVENTORY,
            result=None,
        )

    reservations = await reservation_overlap_service.select_overlapping(
        session,
        property_id=property_id,
        room_type_id=room_type_id,
        window=window,
    )
    result = compute_availability(window, total_rooms, reservations)
    logger.debug(
        "Availability for room type %s %s-%s: min %s of %s",
        room_type_id,
        window.check_in,
        window.check_out,
        result.min_available_rooms,
        total_rooms,
    )
    return AvailabilityCheck(
        property_id=property_id,
        room_type_id=room_type_id,
        check_in=window.check_in,
        check_out=window.check_out,
        total_rooms=total_rooms,
        status=(
            AvailabilityStatus.AVAILABLE
            if result.is_available
            else AvailabilityStatus.FULLY_BOOKED
        ),
        result=result,
    )


async def get_monthly_availability(
    session: AsyncSession,
    *,
    property_id: uuid.UUID,
    room_type_id: uuid.UUID,
    month: date,
    today: date | None = None,
) -> MonthlyAvailability:
    """Return day-by-day availability for a calendar month view."""
    today = today or today_utc()
    if first_of_month(month) < first_of_month(today):
        raise InvalidAvailabilityRequest("month", "Month cannot be in the past")

    start, end = month_window(month, today)
    check = await check_room_availability(
        session,
        property_id=property_id,
        room_type_id=room_type_id,
        check_in=start,
        check_out=end,
        today=today,
    )
    return MonthlyAvailability(
        property_id=property_id,
        room_type_id=room_type_id,
        start_date=start,
        end_date=end,
        days={night.date: night for night in check.per_night},
    )
