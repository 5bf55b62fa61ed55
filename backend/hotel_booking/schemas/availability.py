"""Room availability schemas."""

from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from hotel_booking.services.availability_service import AvailabilityStatus


class AvailabilityRequest(BaseModel):
    """Availability query parameters."""

    property_id: uuid.UUID
    room_type_id: uuid.UUID
    check_in: datetime
    check_out: datetime


class MonthlyAvailabilityRequest(BaseModel):
    """Calendar month query parameters; any day within the month is accepted."""

    property_id: uuid.UUID
    room_type_id: uuid.UUID
    month: date


class DailyAvailability(BaseModel):
    """Availability summary for a single night."""

    date: date
    available_rooms: int
    total_rooms: int
    booked_rooms: int

    model_config = ConfigDict(from_attributes=True)


class RequestedDates(BaseModel):
    """Normalized stay dates echoed back to the caller."""

    check_in: date
    check_out: date
    nights: int


class AvailabilityResponse(BaseModel):
    """Availability response payload."""

    property_id: uuid.UUID
    room_type_id: uuid.UUID
    status: AvailabilityStatus
    is_available: bool
    available_rooms: int
    total_rooms: int
    requested_dates: RequestedDates
    daily_availability: list[DailyAvailability]
    message: str


class CalendarDay(BaseModel):
    available_rooms: int
    total_rooms: int

    model_config = ConfigDict(from_attributes=True)


class MonthlyAvailabilityResponse(BaseModel):
    """Day-keyed availability for a calendar month."""

    property_id: uuid.UUID
    room_type_id: uuid.UUID
    start_date: date
    end_date: date
    days: dict[date, CalendarDay]
