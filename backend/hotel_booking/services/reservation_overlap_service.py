"""Selection of reservations that overlap a candidate stay."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Collection
from datetime import timedelta

from sqlalchemy import Select, and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.core.calendar import utc_midnight
from hotel_booking.models.reservation import (
    Reservation,
    ReservationRoom,
    ReservationStatus,
)
from hotel_booking.services.availability_engine import ReservationWindow, StayWindow

logger = logging.getLogger(__name__)

ACTIVE_RESERVATION_STATUSES: frozenset[ReservationStatus] = frozenset(
    {
        ReservationStatus.CONFIRMED,
        ReservationStatus.CHECKED_IN,
        ReservationStatus.PROVISIONAL,
    }
)


def overlapping_reservations_query(
    *,
    property_id: uuid.UUID,
    room_type_id: uuid.UUID,
    window: StayWindow,
    active_statuses: Collection[ReservationStatus],
) -> Select[tuple]:
    """Build the single query returning stay dates of overlapping booked rooms.

    Stored instants may carry arrival and departure times, so each day-level
    bound is expressed as a UTC midnight: ``day(x) > d`` becomes
    ``x >= midnight(d + 1)`` and ``day(x) <= d`` becomes ``x < midnight(d + 1)``.
    """
    start = utc_midnight(window.check_in)
    end = utc_midnight(window.check_out)
    after_start = utc_midnight(window.check_in + timedelta(days=1))
    after_end = utc_midnight(window.check_out + timedelta(days=1))
    return (
        select(Reservation.check_in_date, Reservation.check_out_date)
        .join(ReservationRoom, ReservationRoom.reservation_id == Reservation.id)
        .where(
            ReservationRoom.room_type_id == room_type_id,
            Reservation.property_id == property_id,
            Reservation.status.in_(list(active_statuses)),
            or_(
                # starts inside: check_in in [window.check_in, window.check_out)
                and_(Reservation.check_in_date >= start, Reservation.check_in_date < end),
                # ends inside: check_out in (window.check_in, window.check_out]
                and_(
                    Reservation.check_out_date >= after_start,
                    Reservation.check_out_date < after_end,
                ),
                # spans: check_in before and check_out after the whole window
                and_(Reservation.check_in_date < start, Reservation.check_out_date >= after_end),
            ),
        )
        .order_by(Reservation.check_in_date)
    )


async def select_overlapping(
    session: AsyncSession,
    *,
    property_id: uuid.UUID,
    room_type_id: uuid.UUID,
    window: StayWindow,
    active_statuses: Collection[ReservationStatus] = ACTIVE_RESERVATION_STATUSES,
) -> list[ReservationWindow]:
    """Return one window per booked room intersecting ``window``.

    Database errors propagate untouched so callers never compute availability
    from a partial reservation set.
    """
    if not active_statuses:
        return []
    stmt = overlapping_reservations_query(
        property_id=property_id,
        room_type_id=room_type_id,
        window=window,
        active_statuses=active_statuses,
    )
    result = await session.execute(stmt)
    windows = [
        ReservationWindow.from_instants(check_in, check_out)
        for check_in, check_out in result.all()
    ]
    logger.debug(
        "Found %s overlapping reservation rooms for room type %s between %s and %s",
        len(windows),
        room_type_id,
        window.check_in,
        window.check_out,
    )
    return windows
