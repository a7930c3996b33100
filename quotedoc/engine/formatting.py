# quotedoc/engine/formatting.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from .context import coerce_number


# -------------------------
# Money formatting
# -------------------------


def fmt_currency(amount: Any) -> str:
    """
    "$X.XX", no thousands grouping (the quote sheet is narrow).
    Non-numeric input is treated as 0.
    Examples: 55 -> "$55.00", 1234.5 -> "$1234.50"
    """
    d = Decimal(str(coerce_number(amount)))
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the cents
        ctx.prec = max(28, d.adjusted() + 3)
        d = d.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if d == 0:
        d = Decimal("0.00")  # no "$-0.00"
    return f"${d:.2f}"


def fmt_optional_currency(amount: Any) -> str:
    """Like fmt_currency, but zero / missing / non-numeric -> "" instead of "$0.00"."""
    if not coerce_number(amount):
        return ""
    return fmt_currency(amount)


def fmt_optional_qty(qty: Any) -> str:
    n = coerce_number(qty)
    if not n:
        return ""
    return str(int(n)) if float(n).is_integer() else str(n)


# -------------------------
# Text
# -------------------------


def nl2br(text: Any) -> str:
    if not text:
        return ""
    return str(text).replace("\r\n", "\n").replace("\n", "<br>")


def join_present(*parts: Any, sep: str = " ") -> str:
    return sep.join(str(p).strip() for p in parts if p is not None and str(p).strip())
