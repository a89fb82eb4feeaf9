"""Summary metrics for the investment simulator: payback period and ROI.

Both metrics guard their denominators and return sentinels for
degenerate inputs rather than raising, since a zero-cost or
never-recovered project is a legitimate result.
"""

from __future__ import annotations

from collections.abc import Sequence

from engine.rounding import round_half_up


def payback_period(cumulative: Sequence[float]) -> float | None:
    """Fractional year at which cumulative net cash flow turns non-negative.

    Parameters
    ----------
    cumulative : sequence of float
        Cumulative balance at the end of each year, with the year-0
        balance (``-initial_cost``) at index 0.

    Returns
    -------
    float or None
        Linearly interpolated crossing year rounded half up to one decimal,
        ``0.0`` when the starting balance is already non-negative, or
        ``None`` if the balance never recovers within the horizon.
    """
    if not cumulative:
        return None
    if cumulative[0] >= 0:
        return 0.0

    for year in range(1, len(cumulative)):
        prev, cur = cumulative[year - 1], cumulative[year]
        if prev < 0 <= cur:
            return round_half_up((year - 1) + abs(prev) / (cur - prev), 1)
    return None


def compute_roi(total_profit: float, initial_cost: float) -> float:
    """Return on investment in percent, rounded half up to one decimal.

    ``0.0`` when there was no initial outlay.
    """
    if initial_cost <= 0:
        return 0.0
    return round_half_up(total_profit / initial_cost * 100.0, 1)
