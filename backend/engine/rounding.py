"""Half-up rounding shared by the simulator and the charge calculator.

Python's built-in :func:`round` rounds exact halves to the even digit
(``round(62.5) == 62``).  Displayed amounts and one-decimal metrics round
halves towards positive infinity instead, so ``62.5`` becomes ``63`` and
``-62.5`` becomes ``-62``.
"""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float | int:
    """Round *value* to *ndigits* decimals, halves towards positive infinity.

    Returns an ``int`` when *ndigits* is 0.
    """
    if ndigits == 0:
        return int(math.floor(value + 0.5))
    scale = 10.0 ** ndigits
    return math.floor(value * scale + 0.5) / scale
