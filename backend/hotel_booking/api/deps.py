"""Common API dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Request, Response
from fastapi_limiter import FastAPILimiter
from fastapi_limiter.depends import RateLimiter
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.core.config import get_settings
from hotel_booking.db.session import get_session

_SECONDS_PER_WINDOW = {
    "second": 1,
    "seconds": 1,
    "minute": 60,
    "minutes": 60,
    "hour": 3600,
    "hours": 3600,
    "day": 86400,
    "days": 86400,
}


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session."""
    async for session in get_session():
        yield session


def parse_rate(value: str, *, fallback: tuple[int, int]) -> tuple[int, int]:
    """Parse a ``"<count>/<window>"`` limit such as ``"60/minute"``."""
    try:
        count_str, window_str = value.split("/", 1)
        count = int(count_str.strip())
    except (AttributeError, ValueError):
        return fallback
    seconds = _SECONDS_PER_WINDOW.get(window_str.strip().lower(), fallback[1])
    return count, seconds


def resolve_limit(value: str) -> tuple[int, int]:
    """Parse a route limit, falling back to ``RATE_LIMIT_DEFAULT`` when malformed."""
    default = parse_rate(get_settings().rate_limit_default, fallback=(100, 60))
    return parse_rate(value, fallback=default)


def rate_limit(value: str):
    """Return a dependency applying a redis-backed limit when one is configured."""
    times, seconds = resolve_limit(value)

    async def _dependency(request: Request, response: Response) -> None:
        if FastAPILimiter.redis is None:
            return None
        limiter = RateLimiter(times=times, seconds=seconds)
        await limiter(request, response)

    return Depends(_dependency)
