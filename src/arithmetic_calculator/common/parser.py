"""Parse and evaluate single-operator arithmetic expressions."""
from collections.abc import Callable as ABCCallable
from typing import Callable, Tuple, Union

from arithmetic_calculator.common.errors import (
    CalculatorError,
    InvalidOperand,
    UnrecognizedOperation,
)
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.models import OperationFailure, OperationResult
from arithmetic_calculator.common.operations import add, divide, multiply, subtract


# Type alias for the primitives dispatched to (two floats in, one float out)
OperatorFn: ABCCallable[..., float] = Callable[..., float]

# Mapping of operator symbols to the primitive they dispatch to
OPERATORS: dict[str, OperatorFn] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}


class ExpressionParser:
    """
    Parse and evaluate an expression made of two operands and one operator.

    Design constraints:
        - No eval(), no dynamic code execution
        - Exactly one binary operator out of ``+ - * /``

    Algorithm:
        1. Remove every whitespace character
        2. Split on the first operator character found, scanning left to right
        3. Parse both fragments as floats, left first
        4. Dispatch to the arithmetic primitive matching the operator

    A leading sign on the first operand is read as the operator, so
    ``-10 - 5`` leaves an empty left fragment and is an unrecognized
    operation.
    """

    @staticmethod
    def strip_whitespace(expr: str) -> str:
        """
        Remove all whitespace from an expression, not only at its ends.

        :param str expr: Raw expression

        :return: Expression without whitespace
        :rtype: str
        """
        return "".join(expr.split())

    @staticmethod
    def tokenize(expr: str) -> Tuple[str, str, str]:
        """
        Split an expression into left operand, operator symbol and right operand.

        :param str expr: Arithmetic expression, whitespace allowed anywhere

        :return: Tuple of (left, symbol, right) fragments
        :rtype: Tuple[str, str, str]
        :raises UnrecognizedOperation: If no operator symbol is present, or if
            it does not sit between two non-empty fragments
        """
        compact: str = ExpressionParser.strip_whitespace(expr)
        for index, char in enumerate(compact):
            if char in OPERATORS:
                left, right = compact[:index], compact[index + 1:]
                if not left or not right:
                    break
                return left, char, right
        raise UnrecognizedOperation(expr)

    @staticmethod
    def _is_number(token: str) -> bool:
        """
        Determine if a token represents a numeric value.

        Digit-grouping underscores and non-ASCII digits, both accepted by
        ``float()``, are refused.

        :param str token: Token string

        :return: True if token can be converted to float, else False
        :rtype: bool
        """
        if "_" in token or not token.isascii():
            return False
        try:
            float(token)
            return True
        except ValueError:
            return False

    @staticmethod
    def parse_operand(token: str) -> float:
        """
        Convert an operand fragment to a float.

        :param str token: Operand fragment

        :return: Parsed value
        :rtype: float
        :raises InvalidOperand: If the fragment is not a number
        """
        if not ExpressionParser._is_number(token):
            raise InvalidOperand(token)
        return float(token)

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate a two-operand arithmetic expression.

        :param str expr: Arithmetic expression string, e.g. ``"1 + 1.5"``

        :return: Computed result as float
        :rtype: float
        :raises CalculatorError: If the expression is malformed or the
            operation itself fails (e.g. division by zero)
        """
        left, symbol, right = ExpressionParser.tokenize(expr)

        # Left operand is reported before the right one
        a: float = ExpressionParser.parse_operand(left)
        b: float = ExpressionParser.parse_operand(right)

        return OPERATORS[symbol](a, b)


def evaluate_expression(expression: str) -> float:
    """Evaluate ``expression``; see :meth:`ExpressionParser.evaluate`."""
    return ExpressionParser.evaluate(expression)


def safe_evaluate(expression: str) -> Union[OperationResult, OperationFailure]:
    """
    Evaluate ``expression`` and return the outcome as a value instead of raising.

    :param str expression: Arithmetic expression string

    :return: The result, or the failure with its kind and message
    :rtype: Union[OperationResult, OperationFailure]
    """
    try:
        result: float = ExpressionParser.evaluate(expression)
    except CalculatorError as exc:
        logger.error(f"🧮❌ Could not evaluate {expression!r}: {exc}")
        return OperationFailure(expression=expression, kind=exc.kind, error=str(exc))

    logger.info(f"🧮✅ {expression!r} = {result}")
    return OperationResult(expression=expression, result=result)
