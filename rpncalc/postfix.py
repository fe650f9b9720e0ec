"""
Infix -> postfix (reverse Polish) conversion.

Stack-based reordering: numbers go straight to the output, operators wait on
a stack until an operator of lower precedence arrives, parentheses fence off
groups. Equal precedence pops, which makes every infix operator
left-associative (``2^3^2`` is ``(2^3)^2``).
"""

import logging
from typing import List, Optional, Sequence

from .errors import ExpressionSyntaxError
from .operators import DEFAULT_REGISTRY, Fixity, OperatorRegistry
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)


def to_postfix(tokens: Sequence[Token], registry: Optional[OperatorRegistry] = None) -> List[Token]:
    """
    Reorder infix ``tokens`` into postfix order.

    Raises:
        ExpressionSyntaxError: on unbalanced parentheses.
    """
    if registry is None:
        registry = DEFAULT_REGISTRY

    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            output.append(token)

        elif token.kind is TokenKind.OPERATOR:
            incoming = registry.create(token.text)
            # A function has no left operand, so nothing on the stack can be
            # waiting for it.
            if incoming.fixity is not Fixity.FUNCTION:
                while stack and stack[-1].kind is TokenKind.OPERATOR:
                    if registry.create(stack[-1].text).precedence < incoming.precedence:
                        break
                    output.append(stack.pop())
            stack.append(token)

        elif token.kind is TokenKind.LEFT_PAREN:
            stack.append(token)

        elif token.kind is TokenKind.RIGHT_PAREN:
            while stack:
                top = stack.pop()
                if top.kind is TokenKind.LEFT_PAREN:
                    break
                output.append(top)
            else:
                raise ExpressionSyntaxError("mismatched parentheses", position=token.start)

    while stack:
        top = stack.pop()
        if top.is_paren:
            raise ExpressionSyntaxError("mismatched parentheses", position=top.start)
        output.append(top)

    logger.debug(f"Postfix: {' '.join(t.text for t in output)}")
    return output
