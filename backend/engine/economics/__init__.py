"""Investment economics: generation, financing and cash-flow simulation."""

from .cashflow import (
    AnalysisInput,
    AnalysisResult,
    YearlyRecord,
    compare_financing,
    simulate_investment,
)
from .financing import FinancingType, financing_defaults
from .presets import MarketAssumptions

__all__ = [
    "AnalysisInput",
    "AnalysisResult",
    "YearlyRecord",
    "compare_financing",
    "simulate_investment",
    "FinancingType",
    "financing_defaults",
    "MarketAssumptions",
]
