"""Structural checks on a token sequence before conversion."""

from typing import Optional, Sequence

from .errors import ExpressionSyntaxError
from .operators import DEFAULT_REGISTRY, Fixity, OperatorRegistry
from .tokens import Token, TokenKind


def validate(tokens: Sequence[Token], registry: Optional[OperatorRegistry] = None) -> None:
    """
    Reject token sequences that can never evaluate.

    Checks, in order:
        - the sequence is not empty
        - it does not start with an operator, except a function (``sqrt(4)``)
        - it does not end with an operator, except a suffix (``5!``)
        - no two number tokens are adjacent

    Parenthesis balance is left to the postfix converter and operand counts
    to the evaluator.

    Raises:
        ExpressionSyntaxError: describing the first rule that fails.
    """
    if registry is None:
        registry = DEFAULT_REGISTRY

    if not tokens:
        raise ExpressionSyntaxError("no tokens found")

    first, last = tokens[0], tokens[-1]
    if first.kind is TokenKind.OPERATOR and registry.create(first.text).fixity is not Fixity.FUNCTION:
        raise ExpressionSyntaxError("expression cannot start with an operator", position=first.start)
    if last.kind is TokenKind.OPERATOR and registry.create(last.text).fixity is not Fixity.SUFFIX:
        raise ExpressionSyntaxError("expression cannot end with an operator", position=last.start)

    for current, following in zip(tokens, tokens[1:]):
        if current.kind is TokenKind.NUMBER and following.kind is TokenKind.NUMBER:
            raise ExpressionSyntaxError(
                "too many numbers without an operator between them", position=following.start
            )
