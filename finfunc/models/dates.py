"""Date capability consumed by the cash-flow engine.

The engine only needs an integer day number per date; anything exposing
``as_number`` qualifies, and plain ``datetime.date`` values are converted.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol, runtime_checkable

EPOCH = date(1970, 1, 1)


@runtime_checkable
class DateRep(Protocol):
    @property
    def as_number(self) -> int: ...


@dataclass(frozen=True, order=True)
class DayNumber:
    """Days since 1970-01-01."""
    as_number: int

    @classmethod
    def from_date(cls, value: date) -> "DayNumber":
        if isinstance(value, datetime):
            value = value.date()
        return cls((value - EPOCH).days)


def day_number(value: DateRep | date) -> int:
    """Integer day for a DateRep or a datetime.date."""
    if isinstance(value, date):
        return DayNumber.from_date(value).as_number
    if isinstance(value, DateRep):
        return int(value.as_number)
    raise TypeError(f"Unsupported date value: {value!r}")
