"""
Tokenizer: raw expression text -> validated list of tokens.

Characters fall into four classes:
    digits and '.'   accumulate into a number literal
    '(' and ')'      emitted immediately as parenthesis tokens
    whitespace       ends the current number or symbol run
    anything else    accumulates into a symbol run

A symbol run such as ``*sqrt`` is split into registered operators by
``segment_symbols``. Splitting takes the shortest registered prefix at each
position, so when one operator is a prefix of another the shorter one wins
unless the whole run is itself a registered operator.
"""

import logging
from typing import List, Optional

from .errors import ExpressionSyntaxError
from .operators import DEFAULT_REGISTRY, OperatorRegistry
from .tokens import Token, TokenKind
from .validator import validate

logger = logging.getLogger(__name__)

_NUMBER_CHARS = frozenset("0123456789.")
_PARENS = {"(": TokenKind.LEFT_PAREN, ")": TokenKind.RIGHT_PAREN}


def tokenize(expression: str, registry: Optional[OperatorRegistry] = None) -> List[Token]:
    """
    Split ``expression`` into tokens and validate the result.

    Raises:
        ExpressionSyntaxError: on an unknown operator, a space inside an
            operator, or a structurally invalid token sequence.
    """
    if registry is None:
        registry = DEFAULT_REGISTRY

    tokens = _Scanner(expression, registry).scan()
    logger.debug(f"Tokens for {expression!r}: {[str(t) for t in tokens]}")

    validate(tokens, registry)
    return tokens


def segment_symbols(run: str, registry: OperatorRegistry, start: int = 0) -> List[Token]:
    """
    Decompose a run of symbol characters into operator tokens.

    Args:
        run: accumulated symbol characters, e.g. ``"*sqrt"``
        registry: operators that may appear in the run
        start: offset of ``run`` in the original expression

    Returns:
        Operator tokens in input order.

    Raises:
        ExpressionSyntaxError: if a space interrupts a partial operator or
            characters remain that never form a registered operator.
    """
    if registry.is_valid(run):
        return [Token(TokenKind.OPERATOR, run, start, start + len(run))]

    tokens: List[Token] = []
    pending: List[str] = []
    pending_start = start
    for offset, ch in enumerate(run):
        if not pending:
            pending_start = start + offset
        if not ch.isspace():
            pending.append(ch)

        candidate = "".join(pending)
        if registry.is_valid(candidate):
            tokens.append(Token(TokenKind.OPERATOR, candidate, pending_start, start + offset + 1))
            pending.clear()
        elif ch.isspace():
            raise ExpressionSyntaxError(
                "invalid space(s) in number or operator", position=start + offset
            )

    if pending:
        raise ExpressionSyntaxError(f"invalid operator: {''.join(pending)}", position=pending_start)

    return tokens


class _Scanner:
    """Single left-to-right pass with a number buffer and a symbol buffer."""

    def __init__(self, text: str, registry: OperatorRegistry):
        self.text = text
        self.registry = registry
        self.tokens: List[Token] = []
        self._number: List[str] = []
        self._number_start = 0
        self._symbol: List[str] = []
        self._symbol_start = 0

    def scan(self) -> List[Token]:
        for index, ch in enumerate(self.text):
            if ch in _NUMBER_CHARS:
                # digits cannot continue a symbol run
                self._flush_symbol()
                if not self._number:
                    self._number_start = index
                self._number.append(ch)
            elif ch in _PARENS:
                self._flush_number(index)
                self._flush_symbol()
                self.tokens.append(Token(_PARENS[ch], ch, index, index + 1))
            elif ch.isspace():
                if self._number:
                    self._flush_number(index)
                else:
                    self._flush_symbol()
            else:
                self._flush_number(index)
                if not self._symbol:
                    self._symbol_start = index
                self._symbol.append(ch)

        self._flush_number(len(self.text))
        self._flush_symbol()
        return self.tokens

    def _flush_number(self, index: int) -> None:
        if not self._number:
            return
        self.tokens.append(Token(TokenKind.NUMBER, "".join(self._number), self._number_start, index))
        self._number.clear()

    def _flush_symbol(self) -> None:
        if not self._symbol:
            return
        run = "".join(self._symbol)
        self._symbol.clear()
        self.tokens.extend(segment_symbols(run, self.registry, self._symbol_start))
