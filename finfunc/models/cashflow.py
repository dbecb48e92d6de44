from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from finfunc.models.dates import DateRep

# (date, amount); negative = investment, positive = withdrawal
CashFlow = tuple[DateRep | date, Decimal]


class Polarity(Enum):
    NEGATIVE = "negative"
    POSITIVE = "positive"


@dataclass(frozen=True)
class DatedAmount:
    day_offset: int  # Days after the anchor, >= 0
    amount: Decimal


@dataclass(frozen=True)
class NormalizedSeries:
    """Cash flows relative to the anchor (first) entry.

    Built fresh per call by engine.normalize; remainder keeps input order.
    """
    start_day: int
    seed_amount: Decimal
    remainder: tuple[DatedAmount, ...]

    def __len__(self) -> int:
        return len(self.remainder) + 1
