"""Utility interconnection charge endpoints."""
from fastapi import APIRouter, HTTPException, status

from app.schemas.kepco_charge import KepcoChargeRequest, KepcoChargeResponse, RateScheduleSummary
from app.services.assumptions import rate_schedule
from engine.errors import InvalidInputError
from engine.grid.interconnection import KepcoChargeInput, calculate_interconnection_charge
from engine.grid.rate_schedule import list_rate_schedules

router = APIRouter()


@router.post(
    "",
    response_model=KepcoChargeResponse,
    summary="Interconnection charge",
    description="Tiered basic charge plus distance charge, with an optional 12-month installment plan.",
)
async def calculate_charge(body: KepcoChargeRequest):
    schedule = rate_schedule(body.schedule_version)
    try:
        inp = KepcoChargeInput(
            capacity_kw=body.capacity_kw,
            voltage=body.voltage,
            supply=body.supply,
            distance_charge=body.distance_charge,
            payment_type=body.payment_type,
        )
        result = calculate_interconnection_charge(inp, schedule)
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return result.to_dict()


@router.get(
    "/rate-schedules",
    response_model=list[RateScheduleSummary],
    summary="List rate schedules",
)
async def get_rate_schedules():
    return list_rate_schedules()


@router.get(
    "/rate-schedules/{version}",
    summary="Rate schedule detail",
    description="Full band table and installment terms of one rate schedule.",
)
async def get_rate_schedule_detail(version: str):
    return rate_schedule(version).to_dict()
