"""Market assumption presets and configuration-store parsing.

The surrounding application keeps operator-maintained assumptions (SMP and
REC prices, sun hours, fixed running costs) in a key-value store with
string values.  :class:`MarketAssumptions` is the immutable snapshot the
simulator consumes; :meth:`MarketAssumptions.from_config_map` converts the
store's representation into it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

from engine.errors import InvalidInputError

# ======================================================================
# Configuration keys
# ======================================================================

CONFIG_DESCRIPTIONS: dict[str, str] = {
    "SMP_PRICE": "SMP price (KRW/kWh)",
    "REC_PRICE": "REC price (KRW/REC)",
    "REC_WEIGHT": "REC weight multiplier",
    "PEAK_HOURS": "Peak sun hours (h/day)",
    "DEGRADATION_RATE": "Annual degradation rate (fraction)",
    "MAINTENANCE_COST": "Safety management cost (KRW/year)",
    "MONITORING_COST": "Monitoring cost (KRW/year)",
    "QUOTATION_VALID_DAYS": "Quotation validity window (days)",
}

_KEY_TO_FIELD: dict[str, str] = {
    "SMP_PRICE": "smp_price",
    "REC_PRICE": "rec_price",
    "REC_WEIGHT": "rec_weight",
    "PEAK_HOURS": "peak_hours",
    "DEGRADATION_RATE": "degradation_rate",
    "MAINTENANCE_COST": "maintenance_cost",
    "MONITORING_COST": "monitoring_cost",
    "QUOTATION_VALID_DAYS": "quotation_valid_days",
}


# ======================================================================
# Snapshot
# ======================================================================

@dataclass(frozen=True)
class MarketAssumptions:
    """Flat-rate assumptions shared by every simulation in a quotation."""

    smp_price: float = 120.0
    rec_price: float = 40_000.0
    rec_weight: float = 1.0
    peak_hours: float = 3.7
    degradation_rate: float = 0.008
    maintenance_cost: float = 500_000.0
    monitoring_cost: float = 300_000.0
    quotation_valid_days: int = 30

    @classmethod
    def from_config_map(cls, config: Mapping[str, Any]) -> "MarketAssumptions":
        """Build a snapshot from store keys such as ``SMP_PRICE``.

        Unknown keys are ignored and missing keys keep their defaults.

        Raises
        ------
        InvalidInputError
            If a recognised key holds a value that is not a number.
        """
        values: dict[str, Any] = {}
        types = {f.name: f.type for f in fields(cls)}
        for key, raw in config.items():
            field_name = _KEY_TO_FIELD.get(key.upper())
            if field_name is None or raw is None or raw == "":
                continue
            try:
                number = float(raw)
            except (TypeError, ValueError):
                raise InvalidInputError(
                    f"Configuration value for {key} is not numeric: {raw!r}"
                ) from None
            values[field_name] = int(number) if types[field_name] in (int, "int") else number
        return cls(**values)

    def to_config_map(self) -> dict[str, str]:
        """Inverse of :meth:`from_config_map`, in the store's string form."""
        data = asdict(self)
        return {key: str(data[name]) for key, name in _KEY_TO_FIELD.items()}

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


DEFAULT_ASSUMPTIONS = MarketAssumptions()
