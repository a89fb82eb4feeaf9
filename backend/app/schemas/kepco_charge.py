"""Pydantic schemas for the utility interconnection charge."""
from pydantic import BaseModel, Field

from engine.grid.interconnection import PaymentType
from engine.grid.rate_schedule import SupplyMethod, VoltageClass


class KepcoChargeRequest(BaseModel):
    capacity_kw: float = Field(gt=0, description="Contract capacity (kW)")
    voltage: VoltageClass
    supply: SupplyMethod
    distance_charge: float = Field(default=0.0, ge=0.0, description="Manually quoted distance charge")
    payment_type: PaymentType = PaymentType.LUMP_SUM
    schedule_version: str | None = Field(default=None, description="Rate schedule; configured default if omitted")


class ChargeLineItemOut(BaseModel):
    description: str
    amount: float


class InstallmentScheduleItemOut(BaseModel):
    month: int
    principal: int
    interest: int
    total: int
    remaining_balance: int


class InstallmentPlanOut(BaseModel):
    down_payment: int
    remaining_principal: int
    monthly_principal: int
    schedule: list[InstallmentScheduleItemOut]
    total_interest: int
    total_with_interest: int


class KepcoChargeResponse(BaseModel):
    capacity_kw: float
    voltage: VoltageClass
    supply: SupplyMethod
    basic_charge_details: list[ChargeLineItemOut]
    basic_charge: float
    distance_charge: float
    total_charge: float
    payment_type: PaymentType
    installment: InstallmentPlanOut | None = None
    schedule_version: str


class RateScheduleSummary(BaseModel):
    version: str
    description: str
    down_payment_ratio: float
    installment_months: int
    installment_rate: float
