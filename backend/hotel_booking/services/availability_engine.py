"""Per-night room availability computation.

Pure functions only: callers hand in a stay window, the countable room
inventory and the reservations already known to overlap the window, and get
back a per-night histogram with an aggregate verdict. Nothing here performs
I/O or filters reservations by window membership; that is the selector's job.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime

from hotel_booking.core.calendar import day_span, iter_days, to_calendar_day


@dataclass(slots=True, frozen=True)
class StayWindow:
    """Candidate ``[check_in, check_out)`` stay expressed in UTC calendar days."""

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_in >= self.check_out:
            raise ValueError("Stay window check_out must be after check_in")

    @classmethod
    def from_instants(cls, check_in: date | datetime, check_out: date | datetime) -> StayWindow:
        return cls(to_calendar_day(check_in), to_calendar_day(check_out))

    @property
    def nights(self) -> int:
        return day_span(self.check_in, self.check_out)


@dataclass(slots=True, frozen=True)
class ReservationWindow:
    """Stay dates of one booked room already known to overlap a window."""

    check_in: date
    check_out: date

    @classmethod
    def from_instants(
        cls, check_in: date | datetime, check_out: date | datetime
    ) -> ReservationWindow:
        return cls(to_calendar_day(check_in), to_calendar_day(check_out))

    def occupies(self, day: date) -> bool:
        # The departure day is free for the next guest.
        return self.check_in <= day < self.check_out


@dataclass(slots=True, frozen=True)
class NightBucket:
    date: date
    booked_count: int


@dataclass(slots=True, frozen=True)
class NightAvailability:
    """Capacity left on a single night of the stay."""

    date: date
    available_rooms: int
    total_rooms: int
    booked_rooms: int


@dataclass(slots=True, frozen=True)
class AvailabilityResult:
    """Aggregate availability for a stay window."""

    per_night: tuple[NightAvailability, ...]
    min_available_rooms: int
    is_available: bool
    nights: int
    total_rooms: int


def build_night_histogram(
    window: StayWindow, reservations: Sequence[ReservationWindow]
) -> list[NightBucket]:
    """Count occupying reservations for every night of ``window``."""
    return [
        NightBucket(
            date=night,
            booked_count=sum(1 for reservation in reservations if reservation.occupies(night)),
        )
        for night in iter_days(window.check_in, window.check_out)
    ]


def compute_availability(
    window: StayWindow,
    total_rooms: int,
    reservations: Sequence[ReservationWindow],
) -> AvailabilityResult:
    """Return per-night availability and the binding minimum for a stay.

    A stay is sellable only if every night has capacity, so the verdict is
    driven by the worst night. Overbooked nights clamp to zero rather than
    going negative.
    """
    if total_rooms < 0:
        raise ValueError("total_rooms must be non-negative")

    per_night = tuple(
        NightAvailability(
            date=bucket.date,
            available_rooms=max(0, total_rooms - bucket.booked_count),
            total_rooms=total_rooms,
            booked_rooms=bucket.booked_count,
        )
        for bucket in build_night_histogram(window, reservations)
    )
    min_available = min(night.available_rooms for night in per_night)
    return AvailabilityResult(
        per_night=per_night,
        min_available_rooms=min_available,
        is_available=min_available > 0,
        nights=len(per_night),
        total_rooms=total_rooms,
    )
