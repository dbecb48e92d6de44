"""Failures raised by the XNPV/XIRR engine.

All are validation or convergence failures; none are retried internally.
"""

from finfunc.models.cashflow import Polarity


class FinanceError(ValueError):
    pass


class EmptyValuesError(FinanceError):
    def __init__(self) -> None:
        super().__init__("Empty values")


class ValuePrecedesStartDateError(FinanceError):
    def __init__(self) -> None:
        super().__init__("Few date values precede the starting date")


class InvalidDataError(FinanceError):
    """The series lacks any amount of the given polarity."""

    def __init__(self, polarity: Polarity) -> None:
        self.polarity = polarity
        super().__init__(f"No {polarity.value} values in the data")


class TooLongComputationError(FinanceError):
    """Newton-Raphson did not converge; retrying with another guess may help."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        super().__init__("Computation exceeded maximum allowed iterations")


class ComputationCancelledError(FinanceError):
    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        super().__init__(f"Computation cancelled after {iterations} iterations")
