"""
Token classification and whitespace tokenization.

Tokens are plain strings; their kind is derived on demand and never
stored alongside them.
"""

from shunt_calc.models import TokenKind

OPERATORS = ("+", "-", "*", "/")
LEFT_PAREN = "("
RIGHT_PAREN = ")"

# Sentinel emitted after the last token by a stream tokenizer; ignored by the converter
SENTINEL = ""

_PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}

_DIGITS = frozenset("0123456789")


def is_operator(token: str) -> bool:
    """Check whether token is one of the four arithmetic operators."""
    return token in OPERATORS


def is_parenthesis(token: str) -> bool:
    """Check whether token is a left or right parenthesis."""
    return token == LEFT_PAREN or token == RIGHT_PAREN


def is_integer(token: str) -> bool:
    """
    Check whether token is a non-negative decimal integer literal.

    Only ASCII digits are accepted, so signs, decimal points, exponents
    and the empty string are all rejected.
    """
    return bool(token) and all(c in _DIGITS for c in token)


def classify(token: str) -> TokenKind:
    """Return the single kind a token belongs to."""
    if is_integer(token):
        return TokenKind.INTEGER
    if is_operator(token):
        return TokenKind.OPERATOR
    if token == LEFT_PAREN:
        return TokenKind.LEFT_PAREN
    if token == RIGHT_PAREN:
        return TokenKind.RIGHT_PAREN
    return TokenKind.INVALID


def precedence(operator: str) -> int:
    """Binding strength of an operator; higher binds tighter."""
    return _PRECEDENCE[operator]


def tokenize(raw: str, *, sentinel: bool = False) -> list[str]:
    """
    Split an expression on whitespace.

    Every token, parentheses included, must be separated from its
    neighbours by whitespace: "( 1 + 3 )" yields five tokens while
    "(1+3)" yields one invalid token.
    """
    tokens = raw.split()
    if sentinel:
        tokens.append(SENTINEL)
    return tokens
