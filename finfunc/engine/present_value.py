"""Present value of a normalized cash-flow series and its rate derivative.

Pure functions: Decimal in, Decimal out. No I/O.

Both functions discount on a 365-day year:

    PV(r)  = seed + sum(a / (1 + r) ** (d / 365))
    PV'(r) = sum(-a * b / (1 + r) ** (b + 1)),  b = d / 365

A rate with 1 + r <= 0 has no real fractional power; the result is then
NaN or Infinity rather than an exception, as is an overflowing power on a
long horizon. Callers check is_finite().
"""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Context, Decimal, DivisionByZero, InvalidOperation, Overflow, localcontext

from finfunc.models.cashflow import NormalizedSeries

DAYS_IN_YEAR = Decimal("365")
ZERO = Decimal("0")


def year_fraction(day_offset: int) -> Decimal:
    return Decimal(day_offset) / DAYS_IN_YEAR


@contextmanager
def unchecked_context() -> Iterator[Context]:
    """Local decimal context where invalid, divide-by-zero and overflowing
    results become NaN or Infinity instead of raising."""
    with localcontext() as ctx:
        for signal in (InvalidOperation, DivisionByZero, Overflow):
            ctx.traps[signal] = False
        yield ctx


def present_value(normalized: NormalizedSeries, rate: Decimal) -> Decimal:
    """Discounted sum of the series at the given annual rate."""
    with unchecked_context():
        base = 1 + rate
        total = normalized.seed_amount
        for flow in normalized.remainder:
            if flow.day_offset == 0:
                # Same day as the anchor: undiscounted
                total += flow.amount
                continue
            total += flow.amount / base ** year_fraction(flow.day_offset)
    return total


def present_value_derivative(normalized: NormalizedSeries, rate: Decimal) -> Decimal:
    """d(PV)/d(rate). The seed amount is constant and contributes nothing."""
    with unchecked_context():
        base = 1 + rate
        total = ZERO
        for flow in normalized.remainder:
            b = year_fraction(flow.day_offset)
            if b == 0:
                continue
            total -= flow.amount * b / base ** (b + 1)
    return total
