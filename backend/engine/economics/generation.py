"""Annual PV generation and revenue for the investment simulator.

Generation follows a constant compound degradation curve; revenue is the
sum of two streams, wholesale energy sales at the System Marginal Price
(SMP) and Renewable Energy Certificates (REC), where one certificate is
issued per MWh and scaled by a technology weight.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

# ======================================================================
# Constants
# ======================================================================

DAYS_PER_YEAR: int = 365
KWH_PER_REC: float = 1000.0  # 1 REC = 1 MWh


# ======================================================================
# Degradation model
# ======================================================================

def annual_generation(
    capacity_kw: float,
    peak_hours: float,
    degradation_rate: float,
    year: int,
) -> float:
    """Expected generation in *year* (1-indexed), in kWh.

    ``capacity * peak_hours * 365 * (1 - degradation_rate) ** (year - 1)``
    """
    return capacity_kw * peak_hours * DAYS_PER_YEAR * (1.0 - degradation_rate) ** (year - 1)


def generation_profile(
    capacity_kw: float,
    peak_hours: float,
    degradation_rate: float,
    years: int,
) -> NDArray[np.float64]:
    """Vector of annual generation for years ``1..years`` (kWh)."""
    exponents = np.arange(years, dtype=np.float64)
    first_year = capacity_kw * peak_hours * DAYS_PER_YEAR
    return first_year * np.power(1.0 - degradation_rate, exponents)


# ======================================================================
# Revenue model
# ======================================================================

def annual_revenue(
    generation_kwh: float,
    smp_price: float,
    rec_price: float,
    rec_weight: float,
) -> tuple[float, float, float]:
    """Split annual revenue into its SMP and REC streams.

    Parameters
    ----------
    generation_kwh : float
        Energy generated in the year.
    smp_price : float
        Wholesale price per kWh.
    rec_price : float
        Price per certificate (one certificate per MWh).
    rec_weight : float
        Technology multiplier applied to the certificate count.

    Returns
    -------
    tuple of float
        ``(smp_revenue, rec_revenue, total_revenue)``.
    """
    smp_revenue = generation_kwh * smp_price
    rec_count = generation_kwh / KWH_PER_REC
    rec_revenue = rec_count * rec_price * rec_weight
    return smp_revenue, rec_revenue, smp_revenue + rec_revenue
