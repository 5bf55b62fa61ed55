"""Service layer exports."""
from hotel_booking.services import (
    availability_engine,
    availability_service,
    inventory_service,
    reservation_overlap_service,
)

__all__ = [
    "availability_engine",
    "availability_service",
    "inventory_service",
    "reservation_overlap_service",
]
