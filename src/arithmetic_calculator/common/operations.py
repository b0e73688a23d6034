"""Variadic arithmetic primitives over floating-point operands."""
import math
import operator
from typing import Callable, Optional

from arithmetic_calculator.common.errors import (
    DivisionByZero,
    InsufficientOperands,
    NegativeRadicand,
)


def _fold(operands: tuple, step: Callable[[float, float], float]) -> float:
    """
    Fold ``step`` over the operands from left to right.

    :param tuple operands: Operands as received by the public function
    :param Callable step: Binary operation applied to (running, next)

    :return: Folded value
    :rtype: float
    :raises InsufficientOperands: If fewer than two operands are given
    """
    values = [float(value) for value in operands]
    if len(values) < 2:
        lone: Optional[float] = values[0] if values else None
        raise InsufficientOperands(lone)

    result = values[0]
    for value in values[1:]:
        result = step(result, value)
    return result


def add(*operands: float) -> float:
    """Return the running sum of the operands."""
    return _fold(operands, operator.add)


def subtract(*operands: float) -> float:
    """Return the first operand minus each following operand."""
    return _fold(operands, operator.sub)


def multiply(*operands: float) -> float:
    """Return the running product of the operands."""
    return _fold(operands, operator.mul)


def _checked_div(running: float, divisor: float) -> float:
    # Stops the fold at the first zero divisor
    if divisor == 0:
        raise DivisionByZero(running, divisor)
    return running / divisor


def divide(*operands: float) -> float:
    """
    Divide the first operand successively by each following operand.

    :return: Running quotient
    :rtype: float
    :raises InsufficientOperands: If fewer than two operands are given
    :raises DivisionByZero: As soon as a divisor equals zero
    """
    return _fold(operands, _checked_div)


def square_root(value: float) -> float:
    """
    Return the non-negative square root of ``value``.

    :param float value: Radicand

    :return: Square root
    :rtype: float
    :raises NegativeRadicand: If ``value`` is negative
    """
    value = float(value)
    if value < 0:
        raise NegativeRadicand(value)
    return math.sqrt(value)
