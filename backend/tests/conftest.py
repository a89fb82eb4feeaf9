"""Shared test fixtures for engine and API tests."""

from __future__ import annotations

import pytest

from engine.economics.cashflow import AnalysisInput
from engine.economics.financing import FinancingType


# ======================================================================
# Simulation inputs
# ======================================================================

BASE_INPUT = {
    "capacity_kw": 100.0,
    "total_investment": 150_000_000.0,
    "peak_hours": 3.7,
    "degradation_rate": 0.008,
    "smp_price": 120.0,
    "rec_price": 40_000.0,
    "rec_weight": 1.0,
    "maintenance_cost": 500_000.0,
    "monitoring_cost": 300_000.0,
}


def _make_input(financing_type: FinancingType | str, **overrides) -> AnalysisInput:
    params = {**BASE_INPUT, **overrides}
    return AnalysisInput(financing_type=financing_type, **params)


@pytest.fixture
def make_input():
    """Factory for AnalysisInput on the 100 kW / 150M reference plant."""
    return _make_input


@pytest.fixture
def self_funding_input() -> AnalysisInput:
    """Reference plant, fully equity funded."""
    return _make_input(FinancingType.SELF_FUNDING)


@pytest.fixture
def bank_loan_input() -> AnalysisInput:
    """Reference plant, 20/80 bank loan with default terms."""
    return _make_input(FinancingType.BANK_LOAN)


@pytest.fixture
def government_loan_input() -> AnalysisInput:
    """Reference plant, government loan with 1-year grace period."""
    return _make_input(FinancingType.GOVERNMENT_LOAN, grace_period=1)


@pytest.fixture
def factoring_input() -> AnalysisInput:
    """Reference plant, factoring with default fees."""
    return _make_input(FinancingType.FACTORING)
