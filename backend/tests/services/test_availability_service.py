"""Tests for the availability check orchestration."""

from __future__ import annotations

import uuid
from datetime import UTC, date, datetime

import pytest
from sqlalchemy.exc import OperationalError

from hotel_booking.db.session import get_sessionmaker
from hotel_booking.services import availability_service, inventory_service
from hotel_booking.services.availability_service import (
    AvailabilityStatus,
    AvailabilityTargetNotFound,
    InvalidAvailabilityRequest,
    check_room_availability,
    get_monthly_availability,
)

pytestmark = pytest.mark.asyncio

TODAY = date(2027, 1, 1)


async def _check(db_url: str, **kwargs: object):
    kwargs.setdefault("today", TODAY)
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        return await check_room_availability(session, **kwargs)


async def test_counts_only_rooms_in_rotation(
    inventory: dict[str, uuid.UUID], db_url: str
) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        total = await inventory_service.count_bookable_rooms(
            session,
            property_id=inventory["property_id"],
            room_type_id=inventory["deluxe_id"],
        )
    assert total == 2


async def test_available_stay_reports_minimum_and_nights(
    inventory: dict[str, uuid.UUID], make_reservation, db_url: str
) -> None:
    await make_reservation(date(2027, 1, 11), date(2027, 1, 12))

    check = await _check(
        db_url,
        property_id=inventory["property_id"],
        room_type_id=inventory["deluxe_id"],
        check_in=datetime(2027, 1, 10, 14, 30, tzinfo=UTC),
        check_out=datetime(2027, 1, 13, 9, 0, tzinfo=UTC),
    )

    assert check.status == AvailabilityStatus.AVAILABLE
    assert (check.check_in, check.check_out, check.nights) == (
        date(2027, 1, 10),
        date(2027, 1, 13),
        3,
    )
    assert check.total_rooms == 2
    assert [night.available_rooms for night in check.per_night] == [2, 1, 2]
    assert check.available_rooms == 1
    assert check.message == "1 room available for your selected dates"


async def test_plural_message_for_several_rooms(
    inventory: dict[str, uuid.UUID], db_url: str
) -> None:
    check = await _check(
        db_url,
        property_id=inventory["property_id"],
        room_type_id=inventory["deluxe_id"],
        check_in=date(2027, 1, 10),
        check_out=date(2027, 1, 11),
    )

    assert check.message == "2 rooms available for your selected dates"


async def test_sold_out_middle_night_makes_stay_unavailable(
    inventory: dict[str, uuid.UUID], make_reservation, db_url: str
) -> None:
    await make_reservation(date(2027, 1, 11), date(2027, 1, 12))
    await make_reservation(date(2027, 1, 11), date(2027, 1, 12))

    check = await _check(
        db_url,
        property_id=inventory["property_id"],
        room_type_id=inventory["deluxe_id"],
        check_in=date(2027, 1, 10),
        check_out=date(2027, 1, 13),
    )

    assert check.status == AvailabilityStatus.FULLY_BOOKED
    assert check.is_available is False
    assert [night.available_rooms for night in check.per_night] == [2, 0, 2]
    assert check.message == "No rooms available for the selected dates"


async def test_no_inventory_short_circuits_before_reading_reservations(
    inventory: dict[str, uuid.UUID], db_url: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def _unexpected(*args: object, **kwargs: object) -> None:
        raise AssertionError("reservations should not be read")

    monkeypatch.setattr(
        availability_service.reservation_overlap_service, "select_overlapping", _unexpected
    )

    check = await _check(
        db_url,
        property_id=inventory["property_id"],
        room_type_id=inventory["suite_id"],
        check_in=date(2027, 1, 10),
        check_out=date(2027, 1, 13),
    )

    assert check.status == AvailabilityStatus.NO_INVENTORY
    assert check.result is None
    assert check.per_night == ()
    assert check.nights == 3
    assert check.message == "No rooms of this type are currently available for booking"


async def test_failed_reservation_read_aborts_before_computing(
    inventory: dict[str, uuid.UUID], db_url: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def _broken(*args: object, **kwargs: object) -> None:
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    def _unexpected(*args: object, **kwargs: object) -> None:
        raise AssertionError("engine should not run")

    monkeypatch.setattr(
        availability_service.reservation_overlap_service, "select_overlapping", _broken
    )
    monkeypatch.setattr(availability_service, "compute_availability", _unexpected)

    with pytest.raises(OperationalError):
        await _check(
            db_url,
            property_id=inventory["property_id"],
            room_type_id=inventory["deluxe_id"],
            check_in=date(2027, 1, 10),
            check_out=date(2027, 1, 13),
        )


@pytest.mark.parametrize(
    ("check_in", "check_out", "field"),
    [
        (date(2027, 1, 10), date(2027, 1, 10), "check_out"),
        (date(2027, 1, 12), date(2027, 1, 10), "check_out"),
        (date(2026, 12, 31), date(2027, 1, 3), "check_in"),
    ],
)
async def test_invalid_dates_are_rejected(
    inventory: dict[str, uuid.UUID],
    db_url: str,
    check_in: date,
    check_out: date,
    field: str,
) -> None:
    with pytest.raises(InvalidAvailabilityRequest) as excinfo:
        await _check(
            db_url,
            property_id=inventory["property_id"],
            room_type_id=inventory["deluxe_id"],
            check_in=check_in,
            check_out=check_out,
        )
    assert excinfo.value.field == field


async def test_same_day_times_do_not_make_a_stay(
    inventory: dict[str, uuid.UUID], db_url: str
) -> None:
    with pytest.raises(InvalidAvailabilityRequest):
        await _check(
            db_url,
            property_id=inventory["property_id"],
            room_type_id=inventory["deluxe_id"],
            check_in=datetime(2027, 1, 10, 8, 0, tzinfo=UTC),
            check_out=datetime(2027, 1, 10, 20, 0, tzinfo=UTC),
        )


async def test_check_in_today_is_allowed(
    inventory: dict[str, uuid.UUID], db_url: str
) -> None:
    check = await _check(
        db_url,
        property_id=inventory["property_id"],
        room_type_id=inventory["deluxe_id"],
        check_in=TODAY,
        check_out=date(2027, 1, 2),
    )
    assert check.is_available is True


@pytest.mark.parametrize(
    ("property_key", "room_type_key", "message"),
    [
        ("closed_property_id", "closed_room_type_id", "Property not found or inactive"),
        ("property_id", "retired_id", "Room type not found or inactive"),
        ("property_id", "closed_room_type_id", "Room type not found or inactive"),
    ],
)
async def test_missing_or_inactive_targets(
    inventory: dict[str, uuid.UUID],
    db_url: str,
    property_key: str,
    room_type_key: str,
    message: str,
) -> None:
    with pytest.raises(AvailabilityTargetNotFound, match=message):
        await _check(
            db_url,
            property_id=inventory[property_key],
            room_type_id=inventory[room_type_key],
            check_in=date(2027, 1, 10),
            check_out=date(2027, 1, 12),
        )


async def test_unknown_property_is_not_found(
    inventory: dict[str, uuid.UUID], db_url: str
) -> None:
    with pytest.raises(AvailabilityTargetNotFound):
        await _check(
            db_url,
            property_id=uuid.uuid4(),
            room_type_id=inventory["deluxe_id"],
            check_in=date(2027, 1, 10),
            check_out=date(2027, 1, 12),
        )


async def test_monthly_calendar_starts_today_in_current_month(
    inventory: dict[str, uuid.UUID], make_reservation, db_url: str
) -> None:
    await make_reservation(date(2027, 3, 20), date(2027, 3, 22), rooms=2)
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        monthly = await get_monthly_availability(
            session,
            property_id=inventory["property_id"],
            room_type_id=inventory["deluxe_id"],
            month=date(2027, 3, 9),
            today=date(2027, 3, 15),
        )

    assert monthly.start_date == date(2027, 3, 15)
    assert monthly.end_date == date(2027, 4, 1)
    assert len(monthly.days) == 17
    assert monthly.days[date(2027, 3, 20)].available_rooms == 0
    assert monthly.days[date(2027, 3, 22)].available_rooms == 2


async def test_monthly_calendar_covers_future_month(
    inventory: dict[str, uuid.UUID], db_url: str
) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        monthly = await get_monthly_availability(
            session,
            property_id=inventory["property_id"],
            room_type_id=inventory["deluxe_id"],
            month=date(2027, 12, 25),
            today=date(2027, 3, 15),
        )

    assert monthly.start_date == date(2027, 12, 1)
    assert monthly.end_date == date(2028, 1, 1)
    assert len(monthly.days) == 31


async def test_monthly_calendar_rejects_past_month(
    inventory: dict[str, uuid.UUID], db_url: str
) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        with pytest.raises(InvalidAvailabilityRequest) as excinfo:
            await get_monthly_availability(
                session,
                property_id=inventory["property_id"],
                room_type_id=inventory["deluxe_id"],
                month=date(2027, 2, 1),
                today=date(2027, 3, 15),
            )
    assert excinfo.value.field == "month"
