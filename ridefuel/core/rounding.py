"""Half-up rounding for displayed amounts.

Python's :func:`round` rounds halves to even (``round(52.5) == 52``).
Printed recipes round halves up, so 52.5 mg of caffeine reads as 53 mg.
"""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round *value* to *ndigits* decimals with halves rounded up."""
    scale = 10.0**ndigits
    return math.floor(value * scale + 0.5) / scale
