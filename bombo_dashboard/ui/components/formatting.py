"""
Utility helpers for turning raw metric values into display strings.

Every helper is total: missing, non-finite, or non-numeric input degrades to
the zero rendering instead of raising, so a bad data point never breaks the
dashboard. Rounding uses fixed decimals with ties away from zero, evaluated
on the exact binary value of the float (``9.352983`` -> ``9.4``).
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, getcontext, localcontext
from typing import Optional, Tuple

import numpy as np

MILLION = 1_000_000
THOUSAND = 1_000


def _coerce(value) -> Optional[float]:
    if value is None or isinstance(value, (bool, np.bool_)):
        return None
    try:
        numeric = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(numeric):
        return None
    return numeric


def _to_fixed(value: float, decimals: int) -> Decimal:
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-decimals)
    # quantize needs every integer digit plus the requested fraction digits.
    digits = max(exact.adjusted(), 0) + decimals + 2
    with localcontext() as ctx:
        ctx.prec = max(getcontext().prec, digits)
        return exact.quantize(quantum, rounding=ROUND_HALF_UP)


def _split_sign(value: float, decimals: int) -> Tuple[str, Decimal]:
    rounded = _to_fixed(abs(value), decimals)
    sign = "-" if value < 0 and rounded != 0 else ""
    return sign, rounded


def _abbreviate(value: float) -> Tuple[str, Decimal, str]:
    magnitude = abs(value)
    if magnitude >= MILLION:
        sign, rounded = _split_sign(value / MILLION, 1)
        return sign, rounded, "M"
    if magnitude >= THOUSAND:
        sign, rounded = _split_sign(value / THOUSAND, 0)
        return sign, rounded, "K"
    return "", Decimal(0), ""


def format_currency(value) -> str:
    """Dollar amount abbreviated to M / K (``70045672`` -> ``"$70.0M"``)."""
    numeric = _coerce(value)
    if numeric is None:
        return "$0.00"
    sign, rounded, suffix = _abbreviate(numeric)
    if suffix:
        return f"{sign}${rounded:f}{suffix}"
    sign, rounded = _split_sign(numeric, 2)
    return f"{sign}${rounded:f}"


def format_number(value) -> str:
    """Plain count abbreviated to M / K; missing input renders as ``"0"``."""
    numeric = _coerce(value)
    if numeric is None:
        return "0"
    sign, rounded, suffix = _abbreviate(numeric)
    if suffix:
        return f"{sign}{rounded:f}{suffix}"
    sign, rounded = _split_sign(numeric, 3)
    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{sign}{text}"


def format_percentage(value) -> str:
    numeric = _coerce(value)
    if numeric is None:
        numeric = 0.0
    sign, rounded = _split_sign(numeric, 1)
    return f"{sign}{rounded:f}%"


def format_ratio(value) -> str:
    numeric = _coerce(value)
    if numeric is None:
        numeric = 0.0
    return f"{numeric:g}x"


def format_currency_exact(value, decimals: int = 0) -> str:
    numeric = _coerce(value)
    if numeric is None:
        numeric = 0.0
    sign, rounded = _split_sign(numeric, decimals)
    return f"{sign}${rounded:,f}"


def format_compact(value, decimals: int = 1) -> str:
    """Like ``format_number`` but keeps ``decimals`` places on K values too.

    Trailing zeros are dropped, so ``1500`` -> ``"1.5K"`` and ``113000`` ->
    ``"113K"``.
    """
    numeric = _coerce(value)
    if numeric is None:
        return "0"
    magnitude = abs(numeric)
    for factor, suffix in ((MILLION, "M"), (THOUSAND, "K")):
        if magnitude >= factor:
            sign, rounded = _split_sign(numeric / factor, decimals)
            text = f"{rounded:f}"
            if "." in text:
                text = text.rstrip("0").rstrip(".")
            return f"{sign}{text}{suffix}"
    return format_number(numeric)


def format_minutes(value) -> str:
    numeric = _coerce(value)
    if numeric is None:
        numeric = 0.0
    sign, rounded = _split_sign(numeric, 1)
    return f"{sign}{rounded:f}m"
