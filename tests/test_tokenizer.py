"""
Tests for the tokenizer and symbol-run segmentation.
"""

import pytest

from rpncalc import (
    DEFAULT_REGISTRY,
    ExpressionSyntaxError,
    Fixity,
    OperatorDescriptor,
    OperatorRegistry,
    Precedence,
    Token,
    TokenKind,
    segment_symbols,
    tokenize,
)


def _texts(tokens):
    return [t.text for t in tokens]


def _kinds(tokens):
    return [t.kind for t in tokens]


class TestTokenizeBasic:
    """Numbers, operators and parentheses."""

    def test_simple_infix(self):
        tokens = tokenize("2+2")
        assert _texts(tokens) == ["2", "+", "2"]
        assert _kinds(tokens) == [TokenKind.NUMBER, TokenKind.OPERATOR, TokenKind.NUMBER]

    def test_decimal_literal(self):
        assert _texts(tokenize("12.5*3")) == ["12.5", "*", "3"]

    def test_parentheses(self):
        tokens = tokenize("(1+2)")
        assert _kinds(tokens) == [
            TokenKind.LEFT_PAREN,
            TokenKind.NUMBER,
            TokenKind.OPERATOR,
            TokenKind.NUMBER,
            TokenKind.RIGHT_PAREN,
        ]

    def test_function_after_operator(self):
        assert _texts(tokenize("(1+2)*sqrt(4)")) == [
            "(", "1", "+", "2", ")", "*", "sqrt", "(", "4", ")",
        ]

    def test_suffix_followed_by_infix(self):
        assert _texts(tokenize("3!*2")) == ["3", "!", "*", "2"]

    def test_function_without_parentheses(self):
        assert _texts(tokenize("sqrt4")) == ["sqrt", "4"]

    def test_adjacent_infix_operators_split(self):
        assert _texts(tokenize("2+-3")) == ["2", "+", "-", "3"]


class TestTokenizeWhitespace:
    """Whitespace separates tokens but never appears inside one."""

    @pytest.mark.parametrize("expression", ["2+2", "2 + 2", "2  +  2", " 2+2 ", "2\t+\t2"])
    def test_whitespace_insensitive(self, expression):
        assert _texts(tokenize(expression)) == ["2", "+", "2"]

    def test_space_inside_function_name(self):
        with pytest.raises(ExpressionSyntaxError, match="invalid operator: sq"):
            tokenize("sq rt(4)")

    def test_space_inside_number(self):
        with pytest.raises(ExpressionSyntaxError, match="too many numbers"):
            tokenize("1 2")

    def test_whitespace_only(self):
        with pytest.raises(ExpressionSyntaxError, match="no tokens found"):
            tokenize("   ")


class TestTokenOffsets:
    """Diagnostic offsets are half-open character ranges."""

    def test_offsets(self):
        tokens = tokenize("12 + 3")
        assert [(t.start, t.end) for t in tokens] == [(0, 2), (3, 4), (5, 6)]

    def test_segmented_offsets(self):
        tokens = tokenize("3!*2")
        assert [(t.start, t.end) for t in tokens] == [(0, 1), (1, 2), (2, 3), (3, 4)]

    def test_paren_offsets(self):
        tokens = tokenize("(7)")
        assert tokens[0] == Token(TokenKind.LEFT_PAREN, "(", 0, 1)
        assert tokens[2] == Token(TokenKind.RIGHT_PAREN, ")", 2, 3)

    def test_str(self):
        assert str(Token(TokenKind.NUMBER, "42", 0, 2)) == "NUMBER('42')[0-2]"


class TestTokenizeErrors:
    """Unknown symbols and structural failures."""

    def test_empty(self):
        with pytest.raises(ExpressionSyntaxError, match="no tokens found"):
            tokenize("")

    def test_unknown_symbol(self):
        with pytest.raises(ExpressionSyntaxError, match="invalid operator: \\$") as exc_info:
            tokenize("2 $ 3")
        assert exc_info.value.position == 2

    def test_unknown_word(self):
        with pytest.raises(ExpressionSyntaxError, match="invalid operator: abc"):
            tokenize("abc")

    def test_trailing_partial_operator(self):
        with pytest.raises(ExpressionSyntaxError, match="invalid operator: q"):
            tokenize("2+q")

    def test_leading_infix(self):
        # No unary minus: negative literals are not supported.
        with pytest.raises(ExpressionSyntaxError, match="cannot start with an operator"):
            tokenize("-1")

    def test_trailing_infix(self):
        with pytest.raises(ExpressionSyntaxError, match="cannot end with an operator"):
            tokenize("1+")


class TestSegmentSymbols:
    """Shortest-prefix decomposition of symbol runs."""

    def test_whole_run_is_operator(self, registry):
        tokens = segment_symbols("sqrt", registry, start=4)
        assert tokens == [Token(TokenKind.OPERATOR, "sqrt", 4, 8)]

    def test_split_run(self, registry):
        assert _texts(segment_symbols("*sqrt", registry)) == ["*", "sqrt"]
        assert _texts(segment_symbols("!*", registry)) == ["!", "*"]
        assert _texts(segment_symbols("-log", registry)) == ["-", "log"]

    def test_leftover_characters(self, registry):
        with pytest.raises(ExpressionSyntaxError, match="invalid operator: x"):
            segment_symbols("+x", registry)

    def test_space_inside_run(self, registry):
        with pytest.raises(ExpressionSyntaxError, match="invalid space"):
            segment_symbols("+ s", registry)

    def test_shortest_prefix_wins(self):
        star = OperatorDescriptor("*", Fixity.INFIX, Precedence.MIDDLE, lambda left, right: left * right)
        double_star = OperatorDescriptor("**", Fixity.INFIX, Precedence.HIGH, lambda left, right: left ** right)
        registry = OperatorRegistry([star, double_star])

        assert _texts(segment_symbols("**", registry)) == ["**"]
        assert _texts(segment_symbols("***", registry)) == ["*", "*", "*"]

    def test_custom_registry_in_tokenize(self, extended_registry):
        assert _texts(tokenize("1<<3", extended_registry)) == ["1", "<<", "3"]
        with pytest.raises(ExpressionSyntaxError):
            tokenize("1<<3", DEFAULT_REGISTRY)
