"""Equal-principal installment schedule for the interconnection charge.

A fixed share of the charge is paid up front; the remainder is repaid in
equal monthly principal portions, with interest charged each month on the
balance outstanding before that month's payment.  Amounts are whole
currency units; the final month absorbs any rounding remainder so the
principal portions always add up to the financed amount.
"""

from __future__ import annotations

from dataclasses import dataclass

from engine.grid.rate_schedule import InstallmentTerms
from engine.rounding import round_half_up


@dataclass(frozen=True)
class InstallmentScheduleItem:
    month: int
    principal: int
    interest: int
    total: int
    remaining_balance: int


@dataclass(frozen=True)
class InstallmentPlan:
    down_payment: int
    remaining_principal: int
    monthly_principal: int
    schedule: tuple[InstallmentScheduleItem, ...]
    total_interest: int
    total_with_interest: int

    def to_dict(self) -> dict:
        return {
            "down_payment": self.down_payment,
            "remaining_principal": self.remaining_principal,
            "monthly_principal": self.monthly_principal,
            "schedule": [
                {
                    "month": s.month,
                    "principal": s.principal,
                    "interest": s.interest,
                    "total": s.total,
                    "remaining_balance": s.remaining_balance,
                }
                for s in self.schedule
            ],
            "total_interest": self.total_interest,
            "total_with_interest": self.total_with_interest,
        }


def amortize_installments(total_charge: float, terms: InstallmentTerms) -> InstallmentPlan:
    """Build the down payment and month-by-month repayment schedule.

    Parameters
    ----------
    total_charge : float
        Charge to be financed, including the down payment, in whole
        currency units.  A fractional value is rounded first.
    terms : InstallmentTerms
        Down-payment ratio, number of months and annual interest rate.

    Returns
    -------
    InstallmentPlan
    """
    total = round_half_up(total_charge)
    down_payment = round_half_up(total * terms.down_payment_ratio)
    remaining = total - down_payment
    monthly_principal = round_half_up(remaining / terms.months)
    monthly_rate = terms.annual_interest_rate / 12.0

    schedule: list[InstallmentScheduleItem] = []
    balance = remaining
    for month in range(1, terms.months + 1):
        if month == terms.months:
            principal = balance
        else:
            principal = min(monthly_principal, balance)
        interest = round_half_up(balance * monthly_rate)
        schedule.append(
            InstallmentScheduleItem(
                month=month,
                principal=principal,
                interest=interest,
                total=principal + interest,
                remaining_balance=balance - principal,
            )
        )
        balance -= principal

    total_interest = sum(s.interest for s in schedule)
    return InstallmentPlan(
        down_payment=down_payment,
        remaining_principal=remaining,
        monthly_principal=monthly_principal,
        schedule=tuple(schedule),
        total_interest=total_interest,
        total_with_interest=total + total_interest,
    )
