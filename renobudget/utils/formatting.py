# renobudget/utils/formatting.py

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional


def q2(x: float) -> float:
    """Round to cents using HALF_UP. Uses str(x) to avoid binary float artifacts."""
    return float(Decimal(str(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def round_months(x: float) -> int:
    """Nearest whole month, halves rounded up (11.5 -> 12)."""
    return int(Decimal(str(x)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def fmt_usd(x: Optional[float]) -> str:
    try:
        return f"${q2(float(x)):,.2f}"
    except Exception:
        return "$0.00"


def fmt_pct(x: Optional[float], places: int = 2) -> str:
    """
    x is already a percentage number (e.g., 90.0), not a fraction.
    """
    try:
        return f"{float(x):.{places}f}%"
    except Exception:
        return "—"


def fmt_months(x: Optional[float]) -> str:
    try:
        n = round_months(float(x))
    except Exception:
        return "—"
    return f"{n} month" if n == 1 else f"{n} months"
