"""Utility interconnection charge for a generator connecting to the grid.

Pipeline: tiered basic-charge lookup against a :class:`RateSchedule`,
then the manually quoted distance charge is added unchanged, and when the
operator chooses installments the total is handed to
:func:`amortize_installments`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from engine.errors import parse_enum, require_non_negative, require_positive
from engine.grid.installment import InstallmentPlan, amortize_installments
from engine.rounding import round_half_up
from engine.grid.rate_schedule import (
    DEFAULT_RATE_SCHEDULE,
    RateSchedule,
    SupplyMethod,
    VoltageClass,
)

logger = logging.getLogger(__name__)


class PaymentType(str, Enum):
    LUMP_SUM = "LUMP_SUM"
    INSTALLMENT = "INSTALLMENT"


@dataclass(frozen=True)
class ChargeLineItem:
    description: str
    amount: float


@dataclass(frozen=True)
class KepcoChargeInput:
    capacity_kw: float
    voltage: VoltageClass
    supply: SupplyMethod
    distance_charge: float = 0.0
    payment_type: PaymentType = PaymentType.LUMP_SUM

    def __post_init__(self) -> None:
        object.__setattr__(self, "voltage", parse_enum(VoltageClass, self.voltage, "voltage"))
        object.__setattr__(self, "supply", parse_enum(SupplyMethod, self.supply, "supply"))
        object.__setattr__(
            self, "payment_type", parse_enum(PaymentType, self.payment_type, "payment_type")
        )
        require_positive("capacity_kw", self.capacity_kw)
        require_non_negative("distance_charge", self.distance_charge)
        # Billed in whole currency units
        object.__setattr__(self, "distance_charge", round_half_up(self.distance_charge))


@dataclass(frozen=True)
class KepcoChargeResult:
    capacity_kw: float
    voltage: VoltageClass
    supply: SupplyMethod
    basic_charge_details: tuple[ChargeLineItem, ...]
    basic_charge: float
    distance_charge: float
    total_charge: float
    payment_type: PaymentType
    installment: InstallmentPlan | None = None
    schedule_version: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "capacity_kw": self.capacity_kw,
            "voltage": self.voltage.value,
            "supply": self.supply.value,
            "basic_charge_details": [
                {"description": d.description, "amount": d.amount}
                for d in self.basic_charge_details
            ],
            "basic_charge": self.basic_charge,
            "distance_charge": self.distance_charge,
            "total_charge": self.total_charge,
            "payment_type": self.payment_type.value,
            "installment": self.installment.to_dict() if self.installment else None,
            "schedule_version": self.schedule_version,
        }


# ======================================================================
# Tiered basic charge
# ======================================================================

def basic_charge_breakdown(
    capacity_kw: float,
    voltage: VoltageClass,
    supply: SupplyMethod,
    schedule: RateSchedule | None = None,
) -> list[ChargeLineItem]:
    """One line item per band component the capacity reaches.

    A band applies once capacity exceeds its lower bound.  Per-kW bands
    bill every started kW between the lower bound and
    ``min(capacity, upper_kw)``.
    """
    schedule = schedule or DEFAULT_RATE_SCHEDULE
    items: list[ChargeLineItem] = []

    for band in schedule.bands_for(voltage, supply):
        if capacity_kw <= band.lower_kw:
            break
        if band.flat_amount:
            items.append(
                ChargeLineItem(description=band.label, amount=round_half_up(band.flat_amount))
            )
        if band.per_kw_amount:
            top = capacity_kw if band.upper_kw is None else min(capacity_kw, band.upper_kw)
            billed_kw = math.ceil(top - band.lower_kw)
            items.append(
                ChargeLineItem(
                    description=f"{band.label}: {billed_kw} kW x {band.per_kw_amount:,.0f}",
                    amount=round_half_up(billed_kw * band.per_kw_amount),
                )
            )
    return items


def basic_charge(
    capacity_kw: float,
    voltage: VoltageClass,
    supply: SupplyMethod,
    schedule: RateSchedule | None = None,
) -> float:
    """Subtotal of :func:`basic_charge_breakdown`."""
    return sum(item.amount for item in basic_charge_breakdown(capacity_kw, voltage, supply, schedule))


# ======================================================================
# Entry point
# ======================================================================

def calculate_interconnection_charge(
    inp: KepcoChargeInput,
    schedule: RateSchedule | None = None,
) -> KepcoChargeResult:
    """Compute the interconnection charge and, if requested, its installments."""
    schedule = schedule or DEFAULT_RATE_SCHEDULE

    details = basic_charge_breakdown(inp.capacity_kw, inp.voltage, inp.supply, schedule)
    subtotal = sum(item.amount for item in details)
    total = subtotal + inp.distance_charge

    installment = None
    if inp.payment_type is PaymentType.INSTALLMENT:
        installment = amortize_installments(total, schedule.installment)

    logger.debug(
        "Interconnection charge %s/%s %.1f kW: basic %.0f + distance %.0f = %.0f (%s)",
        inp.voltage.value,
        inp.supply.value,
        inp.capacity_kw,
        subtotal,
        inp.distance_charge,
        total,
        inp.payment_type.value,
    )

    return KepcoChargeResult(
        capacity_kw=inp.capacity_kw,
        voltage=inp.voltage,
        supply=inp.supply,
        basic_charge_details=tuple(details),
        basic_charge=subtotal,
        distance_charge=inp.distance_charge,
        total_charge=total,
        payment_type=inp.payment_type,
        installment=installment,
        schedule_version=schedule.version,
    )
