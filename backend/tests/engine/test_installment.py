"""Tests for engine.grid.installment: equal-principal installment schedule."""

from __future__ import annotations

import pytest

from engine.errors import InvalidInputError
from engine.grid.installment import amortize_installments
from engine.grid.rate_schedule import InstallmentTerms

TERMS = InstallmentTerms(down_payment_ratio=0.3, months=12, annual_interest_rate=0.0321)


class TestAmortizeInstallments:
    def test_down_payment_and_remaining(self):
        plan = amortize_installments(306_000, TERMS)
        assert plan.down_payment == 91_800
        assert plan.remaining_principal == 214_200
        assert plan.monthly_principal == 17_850

    def test_schedule_length(self):
        plan = amortize_installments(306_000, TERMS)
        assert [s.month for s in plan.schedule] == list(range(1, 13))

    def test_interest_on_declining_balance(self):
        plan = amortize_installments(306_000, TERMS)
        # 214,200 * 3.21% / 12 = 572.985
        assert plan.schedule[0].interest == 573
        interest = [s.interest for s in plan.schedule]
        assert all(b <= a for a, b in zip(interest, interest[1:]))

    def test_principal_sums_exactly(self):
        plan = amortize_installments(1_000_001, TERMS)
        assert sum(s.principal for s in plan.schedule) == plan.remaining_principal
        # Rounding remainder lands in the final month
        assert plan.schedule[-1].principal == plan.remaining_principal - 11 * plan.monthly_principal

    def test_row_totals(self):
        plan = amortize_installments(2_345_678, TERMS)
        for s in plan.schedule:
            assert s.total == s.principal + s.interest
        assert plan.schedule[-1].remaining_balance == 0

    def test_grand_total(self):
        plan = amortize_installments(2_400_000, TERMS)
        assert plan.total_interest == sum(s.interest for s in plan.schedule)
        assert plan.total_with_interest == 2_400_000 + plan.total_interest

    def test_tiny_amount_never_overpays(self):
        """18 over 12 months: monthly rounds to 2, balance runs out early."""
        plan = amortize_installments(26, TERMS)
        assert plan.remaining_principal == 18
        assert all(s.principal >= 0 for s in plan.schedule)
        assert sum(s.principal for s in plan.schedule) == 18

    def test_zero_interest(self):
        plan = amortize_installments(1_200_000, InstallmentTerms(annual_interest_rate=0.0))
        assert plan.total_interest == 0
        assert plan.total_with_interest == 1_200_000

    def test_single_month(self):
        plan = amortize_installments(100_000, InstallmentTerms(months=1))
        assert len(plan.schedule) == 1
        assert plan.schedule[0].principal == plan.remaining_principal


class TestInstallmentTerms:
    def test_invalid_months(self):
        with pytest.raises(InvalidInputError):
            InstallmentTerms(months=0)

    def test_invalid_ratio(self):
        with pytest.raises(InvalidInputError):
            InstallmentTerms(down_payment_ratio=1.0)
