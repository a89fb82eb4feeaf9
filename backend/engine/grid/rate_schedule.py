"""Utility interconnection rate schedules.

A :class:`RateSchedule` holds, for every (voltage class, supply method)
pair, an ordered tuple of :class:`ChargeBand` objects.  The basic
facility charge is accumulated band by band, like a progressive tax
table: each band the contract capacity reaches contributes either a flat
amount or a per-kW amount for the part of the capacity inside it.

Schedules are registered by version so a newly published tariff can be
added alongside the old one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from engine.errors import InvalidInputError, UnknownRateScheduleError, parse_enum


class VoltageClass(str, Enum):
    LOW = "LOW"
    HIGH = "HIGH"
    EXTRA_HIGH = "EXTRA_HIGH"


class SupplyMethod(str, Enum):
    OVERHEAD = "OVERHEAD"
    UNDERGROUND = "UNDERGROUND"


# ======================================================================
# Bands and installment terms
# ======================================================================

@dataclass(frozen=True)
class ChargeBand:
    """A capacity band of the basic facility charge.

    Parameters
    ----------
    lower_kw : float
        Capacity above which the band applies.
    upper_kw : float or None
        Inclusive upper bound of the band; ``None`` for an open band.
    flat_amount : float
        Fixed charge once the band is reached.
    per_kw_amount : float
        Charge per started kW of capacity inside the band.
    label : str
        Line-item description prefix.
    """
    lower_kw: float
    upper_kw: float | None = None
    flat_amount: float = 0.0
    per_kw_amount: float = 0.0
    label: str = ""

    def __post_init__(self) -> None:
        if self.lower_kw < 0:
            raise InvalidInputError(f"lower_kw must be >= 0, got {self.lower_kw}")
        if self.upper_kw is not None and self.upper_kw <= self.lower_kw:
            raise InvalidInputError(
                f"upper_kw ({self.upper_kw}) must exceed lower_kw ({self.lower_kw})"
            )
        if self.flat_amount < 0 or self.per_kw_amount < 0:
            raise InvalidInputError("Band charges must be >= 0")


@dataclass(frozen=True)
class InstallmentTerms:
    """Conditions for paying the interconnection charge in installments."""
    down_payment_ratio: float = 0.3
    months: int = 12
    annual_interest_rate: float = 0.0321

    def __post_init__(self) -> None:
        if not 0.0 <= self.down_payment_ratio < 1.0:
            raise InvalidInputError(
                f"down_payment_ratio must be within [0, 1), got {self.down_payment_ratio}"
            )
        if self.months < 1:
            raise InvalidInputError(f"months must be >= 1, got {self.months}")
        if self.annual_interest_rate < 0:
            raise InvalidInputError(
                f"annual_interest_rate must be >= 0, got {self.annual_interest_rate}"
            )


@dataclass(frozen=True)
class RateSchedule:
    """A complete published interconnection tariff."""
    version: str
    bands: dict[tuple[VoltageClass, SupplyMethod], tuple[ChargeBand, ...]]
    installment: InstallmentTerms = field(default_factory=InstallmentTerms)
    description: str = ""

    def __post_init__(self) -> None:
        for voltage in VoltageClass:
            for supply in SupplyMethod:
                table = self.bands.get((voltage, supply))
                if not table:
                    raise InvalidInputError(
                        f"Rate schedule '{self.version}' has no bands for "
                        f"{voltage.value}/{supply.value}"
                    )
                for prev, band in zip(table, table[1:]):
                    if prev.upper_kw is None or band.lower_kw != prev.upper_kw:
                        raise InvalidInputError(
                            f"Bands for {voltage.value}/{supply.value} in "
                            f"'{self.version}' must be contiguous"
                        )

    def bands_for(self, voltage: VoltageClass, supply: SupplyMethod) -> tuple[ChargeBand, ...]:
        return self.bands[
            (parse_enum(VoltageClass, voltage, "voltage"), parse_enum(SupplyMethod, supply, "supply"))
        ]

    def to_dict(self) -> dict[str, Any]:
        """Serialize schedule to a JSON-compatible dict."""
        return {
            "version": self.version,
            "description": self.description,
            "bands": {
                f"{voltage.value}/{supply.value}": [
                    {
                        "lower_kw": b.lower_kw,
                        "upper_kw": b.upper_kw,
                        "flat_amount": b.flat_amount,
                        "per_kw_amount": b.per_kw_amount,
                        "label": b.label,
                    }
                    for b in table
                ]
                for (voltage, supply), table in self.bands.items()
            },
            "installment": {
                "down_payment_ratio": self.installment.down_payment_ratio,
                "months": self.installment.months,
                "annual_interest_rate": self.installment.annual_interest_rate,
            },
        }


# ======================================================================
# Built-in schedules
# ======================================================================

def _low_voltage(base: float, extra: float) -> tuple[ChargeBand, ...]:
    return (
        ChargeBand(lower_kw=0.0, upper_kw=5.0, flat_amount=base, label="Base charge up to 5 kW"),
        ChargeBand(lower_kw=5.0, per_kw_amount=extra, label="Above 5 kW"),
    )


def _per_kw(rate: float) -> tuple[ChargeBand, ...]:
    return (ChargeBand(lower_kw=0.0, per_kw_amount=rate, label="Contract capacity"),)


KEPCO_2024 = RateSchedule(
    version="2024",
    description="KEPCO basic facility charge for generator interconnection",
    bands={
        (VoltageClass.LOW, SupplyMethod.OVERHEAD): _low_voltage(306_000, 121_000),
        (VoltageClass.LOW, SupplyMethod.UNDERGROUND): _low_voltage(588_000, 141_000),
        (VoltageClass.HIGH, SupplyMethod.OVERHEAD): _per_kw(24_000),
        (VoltageClass.HIGH, SupplyMethod.UNDERGROUND): _per_kw(50_000),
        (VoltageClass.EXTRA_HIGH, SupplyMethod.OVERHEAD): _per_kw(24_000),
        (VoltageClass.EXTRA_HIGH, SupplyMethod.UNDERGROUND): _per_kw(50_000),
    },
    installment=InstallmentTerms(down_payment_ratio=0.3, months=12, annual_interest_rate=0.0321),
)

# Schedule registry
RATE_SCHEDULES: dict[str, RateSchedule] = {
    KEPCO_2024.version: KEPCO_2024,
}

DEFAULT_RATE_SCHEDULE = KEPCO_2024


def get_rate_schedule(version: str) -> RateSchedule:
    """Get a registered rate schedule by version.

    Raises
    ------
    UnknownRateScheduleError
        If *version* is not registered.
    """
    if version not in RATE_SCHEDULES:
        available = ", ".join(sorted(RATE_SCHEDULES))
        raise UnknownRateScheduleError(
            f"Unknown rate schedule '{version}'. Available: {available}"
        )
    return RATE_SCHEDULES[version]


def list_rate_schedules() -> list[dict[str, Any]]:
    """List registered schedules with summary info."""
    return [
        {
            "version": key,
            "description": schedule.description,
            "down_payment_ratio": schedule.installment.down_payment_ratio,
            "installment_months": schedule.installment.months,
            "installment_rate": schedule.installment.annual_interest_rate,
        }
        for key, schedule in RATE_SCHEDULES.items()
    ]
