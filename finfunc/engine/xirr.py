"""XNPV and XIRR for irregular (dated) cash flows.

Pure functions. No I/O. XIRR is found with bounded Newton-Raphson
iteration on the present-value function.
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from typing import Protocol

from finfunc.config import settings
from finfunc.engine.normalize import normalize, to_decimal
from finfunc.engine.present_value import (
    present_value,
    present_value_derivative,
    unchecked_context,
)
from finfunc.models.cashflow import CashFlow, NormalizedSeries
from finfunc.models.errors import ComputationCancelledError, TooLongComputationError

logger = logging.getLogger(__name__)


class CancelToken(Protocol):
    def is_set(self) -> bool: ...


def solve(
    normalized: NormalizedSeries,
    initial_rate: Decimal,
    *,
    max_iterations: int | None = None,
    tolerance: Decimal | None = None,
    cancel: CancelToken | None = None,
) -> Decimal:
    """Newton-Raphson search for the rate where present value is zero.

    Converged when both |NPV| and the rate step are within tolerance; the
    updated rate is returned. The iteration budget is checked before each
    step, so exactly max_iterations steps are attempted.

    Raises:
        TooLongComputationError: budget exhausted, or the rate became
            NaN/Infinity (it cannot recover from there).
        ComputationCancelledError: ``cancel.is_set()`` returned True.
    """
    max_iterations = settings.max_iterations if max_iterations is None else max_iterations
    tolerance = settings.tolerance if tolerance is None else tolerance

    rate = initial_rate
    iteration = 0
    while True:
        if iteration == max_iterations:
            logger.warning("XIRR did not converge in %d iterations (last rate %s)", iteration, rate)
            raise TooLongComputationError(iteration)
        if cancel is not None and cancel.is_set():
            logger.warning("XIRR cancelled after %d iterations", iteration)
            raise ComputationCancelledError(iteration)

        npv = present_value(normalized, rate)
        deriv = present_value_derivative(normalized, rate)
        with unchecked_context():
            next_rate = rate - npv / deriv
            delta = abs(next_rate - rate)

        if not next_rate.is_finite():
            logger.warning("XIRR rate became non-finite at iteration %d (from rate %s)", iteration, rate)
            raise TooLongComputationError(iteration)

        if npv.is_finite() and abs(npv) <= tolerance and delta <= tolerance:
            logger.debug("XIRR converged to %s after %d iterations", next_rate, iteration + 1)
            return next_rate

        rate = next_rate
        iteration += 1


def xnpv(series: Sequence[CashFlow], rate: Decimal | int | float | str) -> Decimal:
    """Net present value of dated cash flows at an annual rate.

    series[0] is the anchor; later flows are discounted by
    (1 + rate) ** (days since anchor / 365).
    """
    return present_value(normalize(series), to_decimal(rate))


def xirr(
    series: Sequence[CashFlow],
    guess: Decimal | int | float | str | None = None,
    *,
    cancel: CancelToken | None = None,
) -> Decimal:
    """Internal rate of return of dated cash flows.

    Args:
        series: (date, amount) pairs; negative = investment, positive = withdrawal
        guess: Starting rate (default settings.default_guess, i.e. 0.1)
        cancel: Optional token checked between iterations
    """
    normalized = normalize(series)
    initial_rate = settings.default_guess if guess is None else to_decimal(guess)
    return solve(normalized, initial_rate, cancel=cancel)


def xirr_many(
    series_list: Sequence[Sequence[CashFlow]],
    guess: Decimal | int | float | str | None = None,
    max_workers: int | None = None,
    *,
    cancel: CancelToken | None = None,
) -> list[Decimal]:
    """XIRR for several independent series on a thread pool, in input order.

    The first failing series raises its error. A set ``cancel`` token stops
    every series still iterating.
    """
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda s: xirr(s, guess, cancel=cancel), series_list))
