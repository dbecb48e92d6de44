"""Canonical cash-flow fixtures used across engine tests.

Day numbers are DayNumber values; calendar fixtures use datetime.date.
"""

import pytest
from datetime import date
from decimal import Decimal

from finfunc.models.dates import DayNumber


@pytest.fixture
def one_year_ten_percent():
    """Invest 1000 on day 0, receive 1100 one year later: 10% exactly."""
    return [
        (DayNumber(0), Decimal("-1000")),
        (DayNumber(365), Decimal("1100")),
    ]


@pytest.fixture
def irregular_series():
    """Five dated flows with a well-known XIRR of ~37.34%."""
    return [
        (date(2008, 1, 1), Decimal("-10000")),
        (date(2008, 3, 1), Decimal("2750")),
        (date(2008, 10, 30), Decimal("4250")),
        (date(2009, 2, 15), Decimal("3250")),
        (date(2009, 4, 1), Decimal("2750")),
    ]


@pytest.fixture
def monthly_contributions():
    """Twelve monthly buys followed by a sale: SIP-style series."""
    flows = [(date(2023, m, 5), Decimal("-500")) for m in range(1, 13)]
    flows.append((date(2024, 6, 30), Decimal("6800")))
    return flows
