"""
Tests for token classification and tokenization.
"""

import pytest

from shunt_calc.models import TokenKind
from shunt_calc.tokens import (
    classify,
    is_integer,
    is_operator,
    is_parenthesis,
    precedence,
    tokenize,
)


class TestPredicates:
    """Test the classification predicates."""

    @pytest.mark.parametrize("token", ["+", "-", "*", "/"])
    def test_operators(self, token):
        assert is_operator(token) is True

    @pytest.mark.parametrize("token", ["", "++", "%", "^", "x", "(", "1"])
    def test_non_operators(self, token):
        assert is_operator(token) is False

    def test_parentheses(self):
        assert is_parenthesis("(") is True
        assert is_parenthesis(")") is True
        assert is_parenthesis("()") is False
        assert is_parenthesis("[") is False

    @pytest.mark.parametrize("token", ["0", "7", "42", "007", "123456789012345678901234567890"])
    def test_integers(self, token):
        assert is_integer(token) is True

    @pytest.mark.parametrize("token", ["", "-5", "+5", "3.5", "1e3", "12a", " 1", "١٢"])
    def test_non_integers(self, token):
        assert is_integer(token) is False


class TestClassify:
    """Test that each token falls into exactly one kind."""

    def test_integer(self):
        assert classify("12") == TokenKind.INTEGER

    def test_operator(self):
        assert classify("*") == TokenKind.OPERATOR

    def test_left_paren(self):
        assert classify("(") == TokenKind.LEFT_PAREN

    def test_right_paren(self):
        assert classify(")") == TokenKind.RIGHT_PAREN

    def test_empty_is_invalid(self):
        assert classify("") == TokenKind.INVALID

    def test_unknown_is_invalid(self):
        assert classify("@") == TokenKind.INVALID


class TestTokenize:
    """Test whitespace tokenization."""

    def test_simple(self):
        assert tokenize("1 + 3") == ["1", "+", "3"]

    def test_collapses_whitespace(self):
        assert tokenize("  ( 1 \t+  3 )\n") == ["(", "1", "+", "3", ")"]

    def test_unspaced_parentheses_stay_glued(self):
        assert tokenize("(1 + 3)") == ["(1", "+", "3)"]

    def test_sentinel(self):
        assert tokenize("1 + 3", sentinel=True) == ["1", "+", "3", ""]

    def test_empty(self):
        assert tokenize("") == []


class TestPrecedence:
    """Test operator binding strength."""

    def test_multiplicative_binds_tighter(self):
        assert precedence("*") > precedence("+")
        assert precedence("/") > precedence("-")

    def test_same_level(self):
        assert precedence("+") == precedence("-")
        assert precedence("*") == precedence("/")
