"""Resolve the market-assumption snapshot and schedules for a request."""
import dataclasses
import logging

from fastapi import HTTPException, status

from app.config import settings
from app.schemas.analysis import MarketOverrides
from engine.economics.financing import FinancingSchedule, get_financing_schedule
from engine.economics.presets import MarketAssumptions
from engine.errors import UnknownRateScheduleError
from engine.grid.rate_schedule import RateSchedule, get_rate_schedule

logger = logging.getLogger(__name__)


def resolve_assumptions(body: MarketOverrides) -> MarketAssumptions:
    """Configured snapshot with any non-null request values laid over it."""
    overrides = {
        name: value
        for name, value in body.model_dump(include=set(MarketOverrides.model_fields)).items()
        if value is not None
    }
    return dataclasses.replace(settings.market_assumptions(), **overrides)


def financing_schedule() -> FinancingSchedule:
    return get_financing_schedule(settings.financing_schedule_version)


def rate_schedule(version: str | None = None) -> RateSchedule:
    """Requested rate schedule, or the configured default; 400 if unknown."""
    try:
        return get_rate_schedule(version or settings.rate_schedule_version)
    except UnknownRateScheduleError as exc:
        logger.info("Rejected rate schedule lookup: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
