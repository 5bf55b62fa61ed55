"""Public room availability API."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.api import deps
from hotel_booking.core.config import get_settings
from hotel_booking.schemas.availability import (
    AvailabilityRequest,
    AvailabilityResponse,
    CalendarDay,
    DailyAvailability,
    MonthlyAvailabilityRequest,
    MonthlyAvailabilityResponse,
    RequestedDates,
)
from hotel_booking.services import availability_service
from hotel_booking.services.availability_service import (
    AvailabilityTargetNotFound,
    InvalidAvailabilityRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

settings = get_settings()

_AVAILABILITY_RATE_DEP = deps.rate_limit(settings.rate_limit_availability)


def _invalid(exc: InvalidAvailabilityRequest) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=[{"field": exc.field, "message": str(exc)}],
    )


def _storage_failure(exc: SQLAlchemyError) -> HTTPException:
    logger.exception("Room availability check failed: %s", exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


@router.get(
    "",
    response_model=AvailabilityResponse,
    summary="Room availability for a stay",
    dependencies=[_AVAILABILITY_RATE_DEP],
)
async def get_room_availability(
    params: Annotated[AvailabilityRequest, Depends()],
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> AvailabilityResponse:
    try:
        check = await availability_service.check_room_availability(
            session,
            property_id=params.property_id,
            room_type_id=params.room_type_id,
            check_in=params.check_in,
            check_out=params.check_out,
        )
    except InvalidAvailabilityRequest as exc:
        raise _invalid(exc) from exc
    except AvailabilityTargetNotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except SQLAlchemyError as exc:
        raise _storage_failure(exc) from exc

    return AvailabilityResponse(
        property_id=check.property_id,
        room_type_id=check.room_type_id,
        status=check.status,
        is_available=check.is_available,
        available_rooms=check.available_rooms,
        total_rooms=check.total_rooms,
        requested_dates=RequestedDates(
            check_in=check.check_in,
            check_out=check.check_out,
            nights=check.nights,
        ),
        daily_availability=[
            DailyAvailability.model_validate(night) for night in check.per_night
        ],
        message=check.message,
    )


@router.get(
    "/calendar",
    response_model=MonthlyAvailabilityResponse,
    summary="Day-by-day availability for a calendar month",
    dependencies=[_AVAILABILITY_RATE_DEP],
)
async def get_monthly_availability(
    params: Annotated[MonthlyAvailabilityRequest, Depends()],
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> MonthlyAvailabilityResponse:
    try:
        monthly = await availability_service.get_monthly_availability(
            session,
            property_id=params.property_id,
            room_type_id=params.room_type_id,
            month=params.month,
        )
    except InvalidAvailabilityRequest as exc:
        raise _invalid(exc) from exc
    except AvailabilityTargetNotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except SQLAlchemyError as exc:
        raise _storage_failure(exc) from exc

    return MonthlyAvailabilityResponse(
        property_id=monthly.property_id,
        room_type_id=monthly.room_type_id,
        start_date=monthly.start_date,
        end_date=monthly.end_date,
        days={
            day: CalendarDay.model_validate(night)
            for day, night in monthly.days.items()
        },
    )
