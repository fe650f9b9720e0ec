"""
rpncalc: arithmetic expression evaluator.

Text is tokenized, validated, reordered into postfix (reverse Polish) form
and folded on an operand stack. Operators come from an immutable registry
that can be extended with custom descriptors.

    >>> from rpncalc import evaluate_expression
    >>> evaluate_expression("(1+2)*sqrt(4)")
    6.0
"""

from .errors import (
    CalculatorError,
    DivisionByZeroError,
    EvaluationError,
    ExpressionSyntaxError,
    UnknownOperatorError,
)
from .operators import (
    DEFAULT_REGISTRY,
    Fixity,
    OperatorDescriptor,
    OperatorRegistry,
    Precedence,
    default_registry,
    operator,
)
from .tokens import Token, TokenKind
from .tokenizer import segment_symbols, tokenize
from .validator import validate
from .postfix import to_postfix
from .evaluator import Calculator, evaluate_expression, evaluate_postfix, parse_number
from .formatting import format_result

__version__ = "0.1.0"

__all__ = [
    "CalculatorError",
    "DivisionByZeroError",
    "EvaluationError",
    "ExpressionSyntaxError",
    "UnknownOperatorError",
    "DEFAULT_REGISTRY",
    "Fixity",
    "OperatorDescriptor",
    "OperatorRegistry",
    "Precedence",
    "default_registry",
    "operator",
    "Token",
    "TokenKind",
    "segment_symbols",
    "tokenize",
    "validate",
    "to_postfix",
    "Calculator",
    "evaluate_expression",
    "evaluate_postfix",
    "parse_number",
    "format_result",
]
