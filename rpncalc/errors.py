"""
Exception hierarchy for rpncalc.

Every failure raised by the evaluation pipeline derives from CalculatorError,
so callers that only want a message can catch the base class and print it.
"""

from typing import Optional


class CalculatorError(Exception):
    """Base class for all expression evaluation failures."""
    pass


class ExpressionSyntaxError(CalculatorError):
    """Raised when the input text or token sequence is malformed.

    Produced by the tokenizer, the validator and the postfix converter.
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class EvaluationError(CalculatorError):
    """Raised while folding a postfix sequence into a single value."""
    pass


class DivisionByZeroError(EvaluationError):
    """Raised by the division operator when the divisor is exactly zero."""
    pass


class UnknownOperatorError(CalculatorError, LookupError):
    """Raised when a symbol has no registered operator descriptor."""

    def __init__(self, symbol: str):
        super().__init__(f"unknown operator: {symbol}")
        self.symbol = symbol
