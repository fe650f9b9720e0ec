"""
Postfix evaluation and the end-to-end entry point.

``Calculator`` bundles an operator registry with the four pipeline stages:

    tokenize -> validate -> to_postfix -> evaluate_postfix

It holds no mutable state, so one instance can serve concurrent callers and
repeated calls with the same text always give the same result.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .errors import CalculatorError, EvaluationError
from .operators import DEFAULT_REGISTRY, Fixity, OperatorRegistry, default_registry
from .postfix import to_postfix
from .tokenizer import tokenize
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)


def parse_number(text: str) -> float:
    """
    Parse a number literal into a double.

    Integer and decimal literals both round to the nearest double; integers
    too large for a double become +Inf.

    Raises:
        EvaluationError: if ``text`` is not a valid literal (e.g. ``1.2.3``).
    """
    try:
        return float(text)
    except ValueError:
        raise EvaluationError(f"invalid number: {text}") from None


def evaluate_postfix(tokens: Sequence[Token], registry: Optional[OperatorRegistry] = None) -> float:
    """
    Fold a postfix token sequence into a single value.

    Infix operators pop two operands (``a b -`` means ``a - b``); function and
    suffix operators pop one, which is passed as ``left`` with ``right`` = 0.

    Raises:
        EvaluationError: when an operator lacks operands, when operands are
            left over, or when an operator itself fails (division by zero).
    """
    if registry is None:
        registry = DEFAULT_REGISTRY

    stack: List[float] = []
    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            stack.append(parse_number(token.text))
            continue
        if token.kind is not TokenKind.OPERATOR:
            raise EvaluationError("invalid expression")

        descriptor = registry.create(token.text)
        if len(stack) < descriptor.fixity.arity:
            raise EvaluationError("invalid expression")

        if descriptor.fixity is Fixity.INFIX:
            right = stack.pop()
            left = stack.pop()
        else:
            left, right = stack.pop(), 0.0
        stack.append(descriptor.evaluate(left, right))

    if len(stack) != 1:
        raise EvaluationError("invalid expression")
    return stack[0]


@dataclass(frozen=True)
class Calculator:
    """Expression evaluator bound to one operator registry."""
    registry: OperatorRegistry = field(default_factory=default_registry)

    def tokenize(self, expression: str) -> List[Token]:
        return tokenize(expression, self.registry)

    def to_postfix(self, tokens: Sequence[Token]) -> List[Token]:
        return to_postfix(tokens, self.registry)

    def evaluate(self, expression: str) -> float:
        """
        Evaluate ``expression`` and return its value.

        Raises:
            ExpressionSyntaxError: malformed input.
            EvaluationError: the expression is well formed but cannot be
                computed.
        """
        try:
            tokens = self.tokenize(expression)
            postfix = self.to_postfix(tokens)
            return evaluate_postfix(postfix, self.registry)
        except CalculatorError as e:
            logger.debug(f"Evaluation of {expression!r} failed: {e}")
            raise


def evaluate_expression(expression: str, registry: Optional[OperatorRegistry] = None) -> float:
    """Evaluate ``expression`` with ``registry`` (built-in operators by default)."""
    return Calculator(DEFAULT_REGISTRY if registry is None else registry).evaluate(expression)
