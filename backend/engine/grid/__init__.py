"""Grid interconnection charge module."""

from .interconnection import KepcoChargeInput, PaymentType, calculate_interconnection_charge
from .rate_schedule import RateSchedule, SupplyMethod, VoltageClass

__all__ = [
    "KepcoChargeInput",
    "PaymentType",
    "calculate_interconnection_charge",
    "RateSchedule",
    "SupplyMethod",
    "VoltageClass",
]
