"""Pydantic schemas for investment analysis and financing comparison."""
from pydantic import BaseModel, Field

from engine.economics.financing import FinancingType


class MarketOverrides(BaseModel):
    """Per-request market assumptions; omitted values use the configured snapshot."""
    smp_price: float | None = Field(default=None, description="SMP price per kWh")
    rec_price: float | None = Field(default=None, description="Price per REC (1 MWh)")
    rec_weight: float | None = Field(default=None, description="REC weight multiplier")
    peak_hours: float | None = Field(default=None, description="Peak sun hours per day")
    degradation_rate: float | None = Field(default=None, description="Annual degradation (fraction)")
    maintenance_cost: float | None = Field(default=None, description="Annual safety management cost")
    monitoring_cost: float | None = Field(default=None, description="Annual monitoring cost")


class SimulationRequest(MarketOverrides):
    capacity_kw: float = Field(gt=0, description="Installed capacity (kW)")
    total_investment: float = Field(gt=0, description="Total investment amount")
    bank_interest_rate: float | None = Field(
        default=None, ge=0.0, le=1.0, description="Market rate for bank loan and factoring"
    )
    factoring_fee_rate: float | None = Field(
        default=None, ge=0.0, le=1.0, description="Factoring fee as a fraction of investment"
    )


class AnalysisRequest(MarketOverrides):
    capacity_kw: float = Field(gt=0, description="Installed capacity (kW)")
    total_investment: float = Field(gt=0, description="Total investment amount")
    financing_type: FinancingType
    self_funding_rate: float | None = Field(default=None, description="Equity share (0-1)")
    loan_amount: float | None = None
    interest_rate: float | None = Field(default=None, description="Annual loan rate (fraction)")
    loan_period: int | None = Field(default=None, description="Loan term in years, including grace")
    grace_period: int | None = Field(default=None, description="Interest-only years")
    guarantee_fee_rate: float | None = None
    factoring_fee_rate: float | None = None


class YearlyData(BaseModel):
    year: int
    generation: int
    smp_revenue: int
    rec_revenue: int
    total_revenue: int
    loan_repayment: int
    interest_payment: int
    maintenance_cost: int
    monitoring_cost: int
    total_expense: int
    net_profit: int
    cumulative: int


class FinancingTermsOut(BaseModel):
    financing_type: FinancingType
    self_funding_rate: float
    loan_amount: float
    interest_rate: float
    loan_period: int
    grace_period: int
    guarantee_fee_rate: float
    factoring_fee_rate: float


class FinancingDefaultsOut(FinancingTermsOut):
    label: str
    description: str


class FinancingTypeInfo(BaseModel):
    financing_type: FinancingType
    label: str
    description: str


class AnalysisResponse(BaseModel):
    financing_type: FinancingType
    yearly_data: list[YearlyData]
    payback_period: float | None = Field(
        description="Years to recover the initial cost; null if not recovered within 20 years"
    )
    total_profit_20y: int
    roi: float
    initial_cost: int
    total_revenue_20y: int
    total_expense_20y: int
    terms: FinancingTermsOut


class SimulationResponse(BaseModel):
    self_funding: AnalysisResponse
    bank_loan: AnalysisResponse
    government_loan: AnalysisResponse
    factoring: AnalysisResponse
