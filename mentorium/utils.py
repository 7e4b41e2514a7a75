# mentorium/utils.py
"""Utility functions"""
import math
import os
from decimal import Decimal, ROUND_HALF_UP

from mentorium.config import CWA_MIN, CWA_MAX, CWA_DECIMALS


def ensure_directory(path: str) -> None:
    """Create directory if it doesn't exist"""
    os.makedirs(path, exist_ok=True)


def is_finite_number(value) -> bool:
    """Check that value is a real, finite number"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def round_score(value: float, decimals: int = CWA_DECIMALS) -> float:
    """Round half-up on the exact binary value; NaN and infinities pass through"""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp_cwa(value) -> float:
    """Clamp an edited score into the allowed range, rounded to two decimals"""
    if not is_finite_number(value):
        return 0.0
    clamped = min(CWA_MAX, max(CWA_MIN, value))
    return round_score(float(clamped))


def clamp_mentor_count(value: int, roster_size: int) -> int:
    """Keep the mentor count within [1, roster_size]; only the lower bound applies to an empty roster"""
    bounded = max(1, int(value))
    if roster_size > 0:
        bounded = min(roster_size, bounded)
    return bounded
