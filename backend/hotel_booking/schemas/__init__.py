"""Schema exports."""

from hotel_booking.schemas.availability import (
    AvailabilityRequest,
    AvailabilityResponse,
    CalendarDay,
    DailyAvailability,
    MonthlyAvailabilityRequest,
    MonthlyAvailabilityResponse,
    RequestedDates,
)

__all__ = [
    "AvailabilityRequest",
    "AvailabilityResponse",
    "CalendarDay",
    "DailyAvailability",
    "MonthlyAvailabilityRequest",
    "MonthlyAvailabilityResponse",
    "RequestedDates",
]
