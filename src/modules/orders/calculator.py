"""Order totals.

Subtotal and total are never stored: they are derived from the order
lines, tax and shipping every time an order is read.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Iterable, NamedTuple, Protocol

from modules.orders.constants import TOTAL_MAX_DIGITS

CENTS = Decimal("0.01")

# Wide enough that no storable order overflows (or gets rounded) while summing.
TOTALS_CONTEXT = Context(prec=TOTAL_MAX_DIGITS, rounding=ROUND_HALF_UP)


class PricedLine(Protocol):
    cost: Decimal
    quantity: int


class OrderTotals(NamedTuple):
    subtotal: Decimal
    total: Decimal


def round_money(value: Decimal) -> Decimal:
    """Round to two decimal places, half-up."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP, context=TOTALS_CONTEXT)


def line_total(line: PricedLine) -> Decimal:
    return round_money(Decimal(line.cost) * line.quantity)


def calculate_totals(
    lines: Iterable[PricedLine], tax: Decimal, shipping: Decimal
) -> OrderTotals:
    """Compute ``(subtotal, total)`` for a set of order lines.

    Each line total and the running subtotal are rounded half-up to two
    places; ``total = subtotal + tax + shipping``.
    """
    with localcontext(TOTALS_CONTEXT):
        subtotal = round_money(Decimal("0"))
        for line in lines:
            subtotal = round_money(subtotal + line_total(line))
        total = subtotal + Decimal(tax) + Decimal(shipping)
    return OrderTotals(subtotal=subtotal, total=total)
