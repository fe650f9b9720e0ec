"""Token types produced by the tokenizer."""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"


@dataclass(frozen=True)
class Token:
    """One lexeme of the input.

    ``start``/``end`` are character offsets into the original text (end is
    exclusive). They only feed diagnostics.
    """
    kind: TokenKind
    text: str
    start: int = 0
    end: int = 0

    @property
    def is_paren(self) -> bool:
        return self.kind in (TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN)

    def __str__(self) -> str:
        return f"{self.kind.value}('{self.text}')[{self.start}-{self.end}]"
