"""Exceptions raised by the arithmetic primitives and the expression parser."""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kind of failure reported by a calculation."""

    INSUFFICIENT_OPERANDS = "insufficient_operands"
    DIVISION_BY_ZERO = "division_by_zero"
    NEGATIVE_RADICAND = "negative_radicand"
    UNRECOGNIZED_OPERATION = "unrecognized_operation"
    INVALID_OPERAND = "invalid_operand"


class CalculatorError(ValueError):
    """
    Base class for every calculation failure.

    Subclasses ``ValueError`` so callers treating malformed input as a value
    error keep working.
    """

    kind: ErrorKind


class InsufficientOperands(CalculatorError):
    """A variadic operation received fewer than two operands."""

    kind = ErrorKind.INSUFFICIENT_OPERANDS

    def __init__(self, value: Optional[float]) -> None:
        self.value = value
        super().__init__(f"bad input: {value} (only one operand)")


class DivisionByZero(CalculatorError):
    """
    A zero divisor was met while folding a division.

    :param float running: Quotient accumulated before the zero divisor
    :param float divisor: The offending operand
    """

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, running: float, divisor: float) -> None:
        self.running = running
        self.divisor = divisor
        super().__init__(
            f"bad input: {running}, {divisor} (division by zero is not allowed)"
        )


class NegativeRadicand(CalculatorError):
    """Square root requested for a negative number."""

    kind = ErrorKind.NEGATIVE_RADICAND

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(
            f"bad input: {value} (square root of a negative number is not allowed)"
        )


class UnrecognizedOperation(CalculatorError):
    """No supported operator symbol was found in an expression."""

    kind = ErrorKind.UNRECOGNIZED_OPERATION

    def __init__(self, expression: str) -> None:
        self.expression = expression
        super().__init__(f"bad input: {expression!r} (unrecognized operation)")


class InvalidOperand(CalculatorError):
    """An expression fragment could not be parsed as a number."""

    kind = ErrorKind.INVALID_OPERAND

    def __init__(self, operand: str) -> None:
        self.operand = operand
        super().__init__(f"bad input: {operand!r} (not a number)")
