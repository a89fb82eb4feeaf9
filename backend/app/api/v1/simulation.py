"""Public financing comparison endpoint (no login required)."""
import logging

from fastapi import APIRouter, HTTPException, Request, status

from app.core.rate_limit import simulation_limiter
from app.schemas.analysis import SimulationRequest, SimulationResponse
from app.services.assumptions import financing_schedule, resolve_assumptions
from engine.economics.cashflow import compare_financing
from engine.economics.financing import FinancingType
from engine.errors import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/simulation",
    response_model=SimulationResponse,
    summary="Compare financing options",
    description="Simulate 20-year cash flows for self-funding, bank loan, government loan and factoring.",
)
async def simulate(body: SimulationRequest, request: Request):
    simulation_limiter.check(request)

    try:
        results = compare_financing(
            capacity_kw=body.capacity_kw,
            total_investment=body.total_investment,
            assumptions=resolve_assumptions(body),
            bank_interest_rate=body.bank_interest_rate,
            factoring_fee_rate=body.factoring_fee_rate,
            schedule=financing_schedule(),
        )
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info(
        "Financing comparison for %.1f kW",
        body.capacity_kw,
        extra={"capacity_kw": body.capacity_kw},
    )

    return {
        "self_funding": results[FinancingType.SELF_FUNDING].to_dict(),
        "bank_loan": results[FinancingType.BANK_LOAN].to_dict(),
        "government_loan": results[FinancingType.GOVERNMENT_LOAN].to_dict(),
        "factoring": results[FinancingType.FACTORING].to_dict(),
    }
