"""Financing structures: defaults, override resolution, and loan servicing.

Four financing variants are supported.  Each has a canonical preset
(equity share, loan rate, term, grace period, one-off fees) held in a
versioned :class:`FinancingSchedule`, so a change to published loan terms
is a data update rather than a code change.

Loan servicing uses equal-principal repayment after an optional
interest-only grace period.  Interest in a repayment year is charged on
the principal still outstanding at the start of that year, expressed as
``loan_amount * remaining_years / repayment_period``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from engine.errors import (
    InvalidInputError,
    UnknownFinancingTypeError,
    UnknownRateScheduleError,
    require_non_negative,
)


class FinancingType(str, Enum):
    SELF_FUNDING = "SELF_FUNDING"
    BANK_LOAN = "BANK_LOAN"
    GOVERNMENT_LOAN = "GOVERNMENT_LOAN"
    FACTORING = "FACTORING"

    @classmethod
    def parse(cls, value: "FinancingType | str") -> "FinancingType":
        """Coerce *value* to a member, rejecting anything outside the enum."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            available = ", ".join(m.value for m in cls)
            raise UnknownFinancingTypeError(
                f"Unknown financing type '{value}'. Available: {available}"
            ) from None


# ======================================================================
# Presets and schedules
# ======================================================================

@dataclass(frozen=True)
class FinancingPreset:
    """Canonical terms for one financing variant.

    The loan share is implied: ``1 - self_funding_rate`` of the investment.
    """
    self_funding_rate: float
    interest_rate: float = 0.0
    loan_period: int = 0
    grace_period: int = 0
    guarantee_fee_rate: float = 0.0
    factoring_fee_rate: float = 0.0
    label: str = ""
    description: str = ""


@dataclass(frozen=True)
class FinancingSchedule:
    """A versioned set of presets covering every :class:`FinancingType`."""
    version: str
    presets: dict[FinancingType, FinancingPreset]
    description: str = ""

    def __post_init__(self) -> None:
        missing = [t.value for t in FinancingType if t not in self.presets]
        if missing:
            raise InvalidInputError(
                f"Financing schedule '{self.version}' has no preset for: {', '.join(missing)}"
            )

    def preset(self, financing_type: FinancingType | str) -> FinancingPreset:
        return self.presets[FinancingType.parse(financing_type)]

    def catalog(self) -> list[dict[str, str]]:
        """Display label and summary of every variant, in enum order."""
        return [
            {
                "financing_type": ftype.value,
                "label": self.presets[ftype].label or ftype.value,
                "description": self.presets[ftype].description,
            }
            for ftype in FinancingType
        ]


FINANCING_2024 = FinancingSchedule(
    version="2024",
    description="Commercial bank, government support programme and factoring terms",
    presets={
        FinancingType.SELF_FUNDING: FinancingPreset(
            self_funding_rate=1.0,
            label="Self-funded 100%",
            description="Entire investment paid from own funds, no loan",
        ),
        FinancingType.BANK_LOAN: FinancingPreset(
            self_funding_rate=0.2,
            interest_rate=0.055,  # market rate
            loan_period=10,
            label="Bank loan 80%",
            description="20% own funds, 80% bank loan at the market rate",
        ),
        # 1-year grace + 10-year repayment at a fixed preferential rate
        FinancingType.GOVERNMENT_LOAN: FinancingPreset(
            self_funding_rate=0.2,
            interest_rate=0.0175,
            loan_period=11,
            grace_period=1,
            label="Government support loan",
            description="20% own funds, 80% government loan at a fixed 1.75%",
        ),
        FinancingType.FACTORING: FinancingPreset(
            self_funding_rate=0.0,
            interest_rate=0.055,
            loan_period=5,
            guarantee_fee_rate=0.05,
            factoring_fee_rate=0.08,
            label="Factoring",
            description=(
                "No own funds; guarantee fee 5% and factoring fee 8% up front, "
                "bank loan for the rest"
            ),
        ),
    },
)

FINANCING_SCHEDULES: dict[str, FinancingSchedule] = {
    FINANCING_2024.version: FINANCING_2024,
}

DEFAULT_FINANCING_SCHEDULE = FINANCING_2024


def get_financing_schedule(version: str) -> FinancingSchedule:
    """Look up a registered financing schedule.

    Raises
    ------
    UnknownRateScheduleError
        If *version* is not registered.
    """
    if version not in FINANCING_SCHEDULES:
        available = ", ".join(sorted(FINANCING_SCHEDULES))
        raise UnknownRateScheduleError(
            f"Unknown financing schedule '{version}'. Available: {available}"
        )
    return FINANCING_SCHEDULES[version]


# ======================================================================
# Resolved terms
# ======================================================================

@dataclass(frozen=True)
class FinancingTerms:
    """Fully resolved financing terms for one simulation."""
    financing_type: FinancingType
    self_funding_rate: float
    loan_amount: float
    interest_rate: float
    loan_period: int
    grace_period: int
    guarantee_fee_rate: float = 0.0
    factoring_fee_rate: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.self_funding_rate <= 1.0:
            raise InvalidInputError(
                f"self_funding_rate must be within [0, 1], got {self.self_funding_rate}"
            )
        require_non_negative("loan_amount", self.loan_amount)
        require_non_negative("interest_rate", self.interest_rate)
        require_non_negative("loan_period", self.loan_period)
        require_non_negative("grace_period", self.grace_period)
        require_non_negative("guarantee_fee_rate", self.guarantee_fee_rate)
        require_non_negative("factoring_fee_rate", self.factoring_fee_rate)
        if self.has_loan and self.grace_period >= self.loan_period:
            raise InvalidInputError(
                f"grace_period ({self.grace_period}) must be shorter than "
                f"loan_period ({self.loan_period})"
            )

    @property
    def has_loan(self) -> bool:
        """Whether the loan participates in yearly servicing."""
        return (
            self.financing_type is not FinancingType.SELF_FUNDING
            and self.loan_amount > 0
            and self.loan_period > 0
        )

    @property
    def repayment_period(self) -> int:
        return self.loan_period - self.grace_period

    def initial_fees(self, total_investment: float) -> float:
        """One-off guarantee and factoring fees charged up front."""
        if self.financing_type is not FinancingType.FACTORING:
            return 0.0
        return total_investment * (self.guarantee_fee_rate + self.factoring_fee_rate)

    def to_dict(self) -> dict:
        return {
            "financing_type": self.financing_type.value,
            "self_funding_rate": self.self_funding_rate,
            "loan_amount": round(self.loan_amount, 2),
            "interest_rate": self.interest_rate,
            "loan_period": self.loan_period,
            "grace_period": self.grace_period,
            "guarantee_fee_rate": self.guarantee_fee_rate,
            "factoring_fee_rate": self.factoring_fee_rate,
        }


def financing_defaults(
    financing_type: FinancingType | str,
    total_investment: float,
    schedule: FinancingSchedule | None = None,
) -> FinancingTerms:
    """Canonical terms for *financing_type* on a given investment."""
    schedule = schedule or DEFAULT_FINANCING_SCHEDULE
    ftype = FinancingType.parse(financing_type)
    preset = schedule.preset(ftype)
    return FinancingTerms(
        financing_type=ftype,
        self_funding_rate=preset.self_funding_rate,
        loan_amount=total_investment * (1.0 - preset.self_funding_rate),
        interest_rate=preset.interest_rate,
        loan_period=preset.loan_period,
        grace_period=preset.grace_period,
        guarantee_fee_rate=preset.guarantee_fee_rate,
        factoring_fee_rate=preset.factoring_fee_rate,
    )


def resolve_financing(
    financing_type: FinancingType | str,
    total_investment: float,
    *,
    self_funding_rate: float | None = None,
    loan_amount: float | None = None,
    interest_rate: float | None = None,
    loan_period: int | None = None,
    grace_period: int | None = None,
    guarantee_fee_rate: float | None = None,
    factoring_fee_rate: float | None = None,
    schedule: FinancingSchedule | None = None,
) -> FinancingTerms:
    """Apply caller overrides on top of the variant defaults.

    ``None`` means "use the default".  An overridden equity share with no
    explicit loan amount finances the rest of the investment.
    """
    defaults = financing_defaults(financing_type, total_investment, schedule)

    if self_funding_rate is None:
        self_funding_rate = defaults.self_funding_rate
    if loan_amount is None:
        loan_amount = total_investment * (1.0 - self_funding_rate)

    return FinancingTerms(
        financing_type=defaults.financing_type,
        self_funding_rate=self_funding_rate,
        loan_amount=loan_amount,
        interest_rate=defaults.interest_rate if interest_rate is None else interest_rate,
        loan_period=defaults.loan_period if loan_period is None else loan_period,
        grace_period=defaults.grace_period if grace_period is None else grace_period,
        guarantee_fee_rate=(
            defaults.guarantee_fee_rate if guarantee_fee_rate is None else guarantee_fee_rate
        ),
        factoring_fee_rate=(
            defaults.factoring_fee_rate if factoring_fee_rate is None else factoring_fee_rate
        ),
    )


def initial_cost(total_investment: float, terms: FinancingTerms) -> float:
    """Equity outlay plus any one-off fees: the cash needed at year 0."""
    return total_investment * terms.self_funding_rate + terms.initial_fees(total_investment)


# ======================================================================
# Loan servicing
# ======================================================================

def loan_service(terms: FinancingTerms, year: int) -> tuple[float, float]:
    """Principal repayment and interest due in *year* (1-indexed).

    Returns
    -------
    tuple of float
        ``(principal_payment, interest_payment)``; both zero outside the
        loan term or when there is no serviced loan.
    """
    if not terms.has_loan or year > terms.loan_period:
        return 0.0, 0.0

    if year <= terms.grace_period:
        return 0.0, terms.loan_amount * terms.interest_rate

    repayment_period = terms.repayment_period
    years_into_repayment = year - terms.grace_period
    remaining_years = repayment_period - years_into_repayment + 1
    outstanding = terms.loan_amount * remaining_years / repayment_period

    principal_pmt = terms.loan_amount / repayment_period
    interest_pmt = outstanding * terms.interest_rate
    return principal_pmt, interest_pmt
