"""Year-by-year investment cash-flow simulation for a PV plant.

The simulation is a fold over an explicit :class:`SimulationState`:
:func:`step_year` turns the state at the end of year ``y - 1`` into the
ledger row for year ``y`` and the next state, and
:func:`simulate_investment` threads that step through the horizon.  Each
step depends only on its inputs, so individual years can be checked in
isolation.

Ledger identities that hold for every row::

    total_revenue = smp_revenue + rec_revenue
    total_expense = loan_repayment + interest_payment + maintenance + monitoring
    net_profit    = total_revenue - total_expense
    cumulative[y] = cumulative[y - 1] + net_profit[y],  cumulative[0] = -initial_cost
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from engine.errors import InvalidInputError, require_non_negative, require_positive
from engine.economics.financing import (
    FinancingSchedule,
    FinancingTerms,
    FinancingType,
    initial_cost,
    loan_service,
    resolve_financing,
)
from engine.economics.generation import annual_generation, annual_revenue, generation_profile
from engine.economics.metrics import compute_roi, payback_period
from engine.economics.presets import DEFAULT_ASSUMPTIONS, MarketAssumptions
from engine.rounding import round_half_up

logger = logging.getLogger(__name__)

HORIZON_YEARS: int = 20


# ======================================================================
# Input
# ======================================================================

@dataclass(frozen=True)
class AnalysisInput:
    """Caller-supplied simulation input.

    Rates are fractions (``0.055`` for 5.5 %).  Financing overrides left as
    ``None`` fall back to the variant's defaults.
    """
    capacity_kw: float
    total_investment: float
    financing_type: FinancingType
    peak_hours: float = DEFAULT_ASSUMPTIONS.peak_hours
    degradation_rate: float = DEFAULT_ASSUMPTIONS.degradation_rate
    smp_price: float = DEFAULT_ASSUMPTIONS.smp_price
    rec_price: float = DEFAULT_ASSUMPTIONS.rec_price
    rec_weight: float = DEFAULT_ASSUMPTIONS.rec_weight
    maintenance_cost: float = DEFAULT_ASSUMPTIONS.maintenance_cost
    monitoring_cost: float = DEFAULT_ASSUMPTIONS.monitoring_cost
    # Financing overrides
    self_funding_rate: float | None = None
    loan_amount: float | None = None
    interest_rate: float | None = None
    loan_period: int | None = None
    grace_period: int | None = None
    guarantee_fee_rate: float | None = None
    factoring_fee_rate: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "financing_type", FinancingType.parse(self.financing_type))

        require_positive("capacity_kw", self.capacity_kw)
        require_positive("total_investment", self.total_investment)
        require_positive("peak_hours", self.peak_hours)
        if not 0.0 <= self.degradation_rate < 1.0:
            raise InvalidInputError(
                f"degradation_rate must be within [0, 1), got {self.degradation_rate}"
            )
        for name in ("smp_price", "rec_price", "rec_weight", "maintenance_cost", "monitoring_cost"):
            require_non_negative(name, getattr(self, name))

    @classmethod
    def from_assumptions(
        cls,
        assumptions: MarketAssumptions,
        *,
        capacity_kw: float,
        total_investment: float,
        financing_type: FinancingType | str,
        **overrides: Any,
    ) -> "AnalysisInput":
        """Combine a market-assumption snapshot with project inputs."""
        return cls(
            capacity_kw=capacity_kw,
            total_investment=total_investment,
            financing_type=financing_type,
            peak_hours=assumptions.peak_hours,
            degradation_rate=assumptions.degradation_rate,
            smp_price=assumptions.smp_price,
            rec_price=assumptions.rec_price,
            rec_weight=assumptions.rec_weight,
            maintenance_cost=assumptions.maintenance_cost,
            monitoring_cost=assumptions.monitoring_cost,
            **overrides,
        )

    def resolve_terms(self, schedule: FinancingSchedule | None = None) -> FinancingTerms:
        return resolve_financing(
            self.financing_type,
            self.total_investment,
            self_funding_rate=self.self_funding_rate,
            loan_amount=self.loan_amount,
            interest_rate=self.interest_rate,
            loan_period=self.loan_period,
            grace_period=self.grace_period,
            guarantee_fee_rate=self.guarantee_fee_rate,
            factoring_fee_rate=self.factoring_fee_rate,
            schedule=schedule,
        )


# ======================================================================
# Ledger and state
# ======================================================================

@dataclass(frozen=True)
class YearlyRecord:
    """One ledger row.  Values are unrounded; :meth:`to_dict` rounds."""
    year: int
    generation: float
    smp_revenue: float
    rec_revenue: float
    total_revenue: float
    loan_repayment: float
    interest_payment: float
    maintenance_cost: float
    monitoring_cost: float
    total_expense: float
    net_profit: float
    cumulative: float

    def to_dict(self) -> dict[str, float]:
        return {
            "year": self.year,
            "generation": round_half_up(self.generation),
            "smp_revenue": round_half_up(self.smp_revenue),
            "rec_revenue": round_half_up(self.rec_revenue),
            "total_revenue": round_half_up(self.total_revenue),
            "loan_repayment": round_half_up(self.loan_repayment),
            "interest_payment": round_half_up(self.interest_payment),
            "maintenance_cost": round_half_up(self.maintenance_cost),
            "monitoring_cost": round_half_up(self.monitoring_cost),
            "total_expense": round_half_up(self.total_expense),
            "net_profit": round_half_up(self.net_profit),
            "cumulative": round_half_up(self.cumulative),
        }


@dataclass(frozen=True)
class SimulationState:
    """Carry between years: last completed year and running balances."""
    year: int
    cumulative: float
    remaining_principal: float

    @classmethod
    def initial(cls, inp: AnalysisInput, terms: FinancingTerms) -> "SimulationState":
        return cls(
            year=0,
            cumulative=-initial_cost(inp.total_investment, terms),
            remaining_principal=terms.loan_amount if terms.has_loan else 0.0,
        )


@dataclass(frozen=True)
class AnalysisResult:
    yearly_data: tuple[YearlyRecord, ...]
    payback_period: float | None
    total_profit_20y: float
    roi: float
    initial_cost: float
    total_revenue_20y: float
    total_expense_20y: float
    terms: FinancingTerms = field(repr=False)

    @property
    def recovered(self) -> bool:
        """Whether the investment pays back within the horizon."""
        return self.payback_period is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "financing_type": self.terms.financing_type.value,
            "yearly_data": [r.to_dict() for r in self.yearly_data],
            "payback_period": self.payback_period,
            "total_profit_20y": round_half_up(self.total_profit_20y),
            "roi": self.roi,
            "initial_cost": round_half_up(self.initial_cost),
            "total_revenue_20y": round_half_up(self.total_revenue_20y),
            "total_expense_20y": round_half_up(self.total_expense_20y),
            "terms": self.terms.to_dict(),
        }


# ======================================================================
# Simulation
# ======================================================================

def step_year(
    state: SimulationState,
    inp: AnalysisInput,
    terms: FinancingTerms,
    generation: float | None = None,
) -> tuple[YearlyRecord, SimulationState]:
    """Advance the simulation by one year.

    Returns the ledger row for year ``state.year + 1`` and the new state.
    *generation* is the year's output in kWh; computed from the input
    when omitted.
    """
    year = state.year + 1

    if generation is None:
        generation = annual_generation(
            inp.capacity_kw, inp.peak_hours, inp.degradation_rate, year
        )
    smp_revenue, rec_revenue, total_revenue = annual_revenue(
        generation, inp.smp_price, inp.rec_price, inp.rec_weight
    )

    principal_pmt, interest_pmt = loan_service(terms, year)

    total_expense = principal_pmt + interest_pmt + inp.maintenance_cost + inp.monitoring_cost
    net_profit = total_revenue - total_expense
    cumulative = state.cumulative + net_profit

    record = YearlyRecord(
        year=year,
        generation=generation,
        smp_revenue=smp_revenue,
        rec_revenue=rec_revenue,
        total_revenue=total_revenue,
        loan_repayment=principal_pmt,
        interest_payment=interest_pmt,
        maintenance_cost=inp.maintenance_cost,
        monitoring_cost=inp.monitoring_cost,
        total_expense=total_expense,
        net_profit=net_profit,
        cumulative=cumulative,
    )
    next_state = SimulationState(
        year=year,
        cumulative=cumulative,
        remaining_principal=max(state.remaining_principal - principal_pmt, 0.0),
    )
    return record, next_state


def simulate_investment(
    inp: AnalysisInput,
    schedule: FinancingSchedule | None = None,
    horizon_years: int = HORIZON_YEARS,
) -> AnalysisResult:
    """Run the full cash-flow projection for one financing choice.

    Parameters
    ----------
    inp : AnalysisInput
        Validated simulation input.
    schedule : FinancingSchedule, optional
        Source of variant defaults; the built-in schedule when omitted.
    horizon_years : int
        Number of simulated years.

    Returns
    -------
    AnalysisResult
        Ledger, payback period, ROI and horizon totals.
    """
    terms = inp.resolve_terms(schedule)
    state = SimulationState.initial(inp, terms)
    start_cost = -state.cumulative

    generation = generation_profile(
        inp.capacity_kw, inp.peak_hours, inp.degradation_rate, horizon_years
    )

    records: list[YearlyRecord] = []
    balances = [state.cumulative]
    for year_output in generation:
        record, state = step_year(state, inp, terms, float(year_output))
        records.append(record)
        balances.append(state.cumulative)

    total_profit = state.cumulative
    result = AnalysisResult(
        yearly_data=tuple(records),
        payback_period=payback_period(balances),
        total_profit_20y=total_profit,
        roi=compute_roi(total_profit, start_cost),
        initial_cost=start_cost,
        total_revenue_20y=sum(r.total_revenue for r in records),
        total_expense_20y=sum(r.total_expense for r in records),
        terms=terms,
    )

    logger.debug(
        "Simulated %s: %.0f kW, initial cost %.0f, payback %s, ROI %.1f%%",
        terms.financing_type.value,
        inp.capacity_kw,
        start_cost,
        result.payback_period,
        result.roi,
    )
    return result


def compare_financing(
    capacity_kw: float,
    total_investment: float,
    assumptions: MarketAssumptions | None = None,
    bank_interest_rate: float | None = None,
    factoring_fee_rate: float | None = None,
    schedule: FinancingSchedule | None = None,
) -> dict[FinancingType, AnalysisResult]:
    """Simulate every financing variant against the same assumptions.

    *bank_interest_rate* replaces the market rate used by both the bank
    loan and factoring variants; *factoring_fee_rate* replaces the
    factoring fee.
    """
    assumptions = assumptions or DEFAULT_ASSUMPTIONS
    results: dict[FinancingType, AnalysisResult] = {}

    for ftype in FinancingType:
        overrides: dict[str, Any] = {}
        if ftype in (FinancingType.BANK_LOAN, FinancingType.FACTORING):
            overrides["interest_rate"] = bank_interest_rate
        if ftype is FinancingType.FACTORING:
            overrides["factoring_fee_rate"] = factoring_fee_rate

        inp = AnalysisInput.from_assumptions(
            assumptions,
            capacity_kw=capacity_kw,
            total_investment=total_investment,
            financing_type=ftype,
            **overrides,
        )
        results[ftype] = simulate_investment(inp, schedule)

    return results
