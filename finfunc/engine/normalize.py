"""Validation and normalization of dated cash-flow series.

Pure functions. No I/O.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal

from finfunc.models.cashflow import CashFlow, DatedAmount, NormalizedSeries, Polarity
from finfunc.models.dates import day_number
from finfunc.models.errors import (
    EmptyValuesError,
    InvalidDataError,
    ValuePrecedesStartDateError,
)

logger = logging.getLogger(__name__)


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce an amount or rate to Decimal; floats go through str()."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def normalize(series: Sequence[CashFlow]) -> NormalizedSeries:
    """Split a series into anchor + remainder and validate it.

    The first entry is the anchor (start date, seed amount). Every later
    date must be on or after the anchor date, and the whole series must
    contain at least one negative and one positive amount. A missing
    negative is reported before a missing positive.
    """
    if not series:
        raise EmptyValuesError()

    anchor_date, anchor_amount = series[0]
    start_day = day_number(anchor_date)
    seed_amount = to_decimal(anchor_amount)

    has_negative = seed_amount < 0
    has_positive = seed_amount > 0
    remainder: list[DatedAmount] = []

    for entry_date, entry_amount in series[1:]:
        day = day_number(entry_date)
        if day < start_day:
            raise ValuePrecedesStartDateError()
        amount = to_decimal(entry_amount)
        has_negative = has_negative or amount < 0
        has_positive = has_positive or amount > 0
        remainder.append(DatedAmount(day_offset=day - start_day, amount=amount))

    if not has_negative:
        raise InvalidDataError(Polarity.NEGATIVE)
    if not has_positive:
        raise InvalidDataError(Polarity.POSITIVE)

    logger.debug("Normalized %d cash flows from day %d", len(series), start_day)
    return NormalizedSeries(
        start_day=start_day,
        seed_amount=seed_amount,
        remainder=tuple(remainder),
    )
