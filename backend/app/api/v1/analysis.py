"""Single-variant profit analysis and financing defaults."""
import logging

from fastapi import APIRouter, HTTPException, Query, status

from app.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    FinancingDefaultsOut,
    FinancingTypeInfo,
)
from app.services.assumptions import financing_schedule, resolve_assumptions
from engine.economics.cashflow import AnalysisInput, simulate_investment
from engine.economics.financing import FinancingType, financing_defaults
from engine.errors import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter()

_FINANCING_FIELDS = (
    "self_funding_rate",
    "loan_amount",
    "interest_rate",
    "loan_period",
    "grace_period",
    "guarantee_fee_rate",
    "factoring_fee_rate",
)


@router.post(
    "",
    response_model=AnalysisResponse,
    summary="Profit analysis",
    description="Run the 20-year cash-flow projection for one financing variant with optional overrides.",
)
async def run_analysis(body: AnalysisRequest):
    try:
        inp = AnalysisInput.from_assumptions(
            resolve_assumptions(body),
            capacity_kw=body.capacity_kw,
            total_investment=body.total_investment,
            financing_type=body.financing_type,
            **{name: getattr(body, name) for name in _FINANCING_FIELDS},
        )
        result = simulate_investment(inp, financing_schedule())
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info(
        "Profit analysis: payback %s, ROI %.1f%%",
        result.payback_period,
        result.roi,
        extra={"financing_type": body.financing_type.value, "capacity_kw": body.capacity_kw},
    )
    return result.to_dict()


@router.get(
    "/financing-defaults",
    response_model=FinancingDefaultsOut,
    summary="Financing defaults",
    description="Canonical terms, label and summary for a financing variant on a given investment.",
)
async def get_financing_defaults(
    financing_type: FinancingType,
    total_investment: float = Query(gt=0),
):
    schedule = financing_schedule()
    preset = schedule.preset(financing_type)
    return {
        **financing_defaults(financing_type, total_investment, schedule).to_dict(),
        "label": preset.label or financing_type.value,
        "description": preset.description,
    }


@router.get(
    "/financing-types",
    response_model=list[FinancingTypeInfo],
    summary="Financing variants",
    description="Display label and summary of every financing variant.",
)
async def list_financing_types():
    return financing_schedule().catalog()
