import pytest

from letcalc.letcalc_errors import (
    InvalidExpression,
    InvalidNumberLiteral,
    InvalidStatement,
    ParseError,
    format_tokens,
)
from letcalc.letcalc_tokens import Token, TokenType


def test_hierarchy() -> None:
    assert issubclass(ParseError, SyntaxError)
    assert issubclass(InvalidStatement, ParseError)
    assert issubclass(InvalidExpression, ParseError)
    assert issubclass(InvalidNumberLiteral, InvalidExpression)
    assert not issubclass(InvalidStatement, InvalidExpression)


def test_error_carries_tokens() -> None:
    tokens = [Token(TokenType.NUMBER, "1"), Token(TokenType.PLUS, "+")]
    err = InvalidExpression("Invalid expression", tokens)
    assert err.tokens == tuple(tokens)
    assert err.reason == "Invalid expression"
    assert str(err) == "Invalid expression: [1 +]"


def test_error_without_tokens() -> None:
    err = InvalidStatement("Empty statement")
    assert err.tokens == ()
    assert str(err) == "Empty statement: []"


def test_error_is_raisable_as_syntax_error() -> None:
    with pytest.raises(SyntaxError, match="bad"):
        raise InvalidStatement("bad", [Token(TokenType.NUMBER, "1")])


def test_format_tokens() -> None:
    tokens = [
        Token(TokenType.LPAREN, "("),
        Token(TokenType.IDENT, "a"),
        Token(TokenType.RPAREN, ")"),
    ]
    assert format_tokens(tokens) == "( a )"
    assert format_tokens([]) == ""
