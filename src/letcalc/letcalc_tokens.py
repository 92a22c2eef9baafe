"""
Token model consumed by the letcalc parser.

Tokens are produced by an external tokenizer and handed to the parser as a
finished, already-classified sequence. This module only defines their shape:

Classes:
    TokenType: Closed enumeration of token discriminators.
    Token: A single token with a discriminator and its raw source text.

Constants:
    ADDITIVE_OPERATORS: Operator types of the lower precedence tier (`+`, `-`).
    MULTIPLICATIVE_OPERATORS: Operator types of the higher precedence tier (`*`, `/`).
    ARITHMETIC_OPERATORS: Union of both tiers.
    OPERATOR_SYMBOLS: Source symbol for each arithmetic operator type.

Example:
    >>> Token(TokenType.NUMBER, "42")
    Token(NUMBER, 42)
    >>> Token("IDENT", "x").type is TokenType.IDENT
    True
"""

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Discriminator of a token; fully determines its role in the grammar."""

    NUMBER = "NUMBER"
    IDENT = "IDENT"
    PLUS = "PLUS"
    MINUS = "MINUS"
    MUL = "MUL"
    DIV = "DIV"
    EQUAL = "EQUAL"
    SEMICOLON = "SEMICOLON"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LET = "LET"
    PRINT = "PRINT"

    def __str__(self) -> str:
        return self.value


ADDITIVE_OPERATORS: frozenset[TokenType] = frozenset({TokenType.PLUS, TokenType.MINUS})
MULTIPLICATIVE_OPERATORS: frozenset[TokenType] = frozenset(
    {TokenType.MUL, TokenType.DIV}
)
ARITHMETIC_OPERATORS: frozenset[TokenType] = (
    ADDITIVE_OPERATORS | MULTIPLICATIVE_OPERATORS
)

OPERATOR_SYMBOLS: dict[TokenType, str] = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.MUL: "*",
    TokenType.DIV: "/",
}


@dataclass(frozen=True)
class Token:
    """Represents a single lexical token.

    Tokens are immutable once built and compare by value, so two tokens with
    the same type and text are interchangeable.

    Args:
        type (TokenType | str): The token's type, or its canonical name.
        value (str): The literal text of the token.

    Raises:
        ValueError: If `type` is a string naming no known token type.
    """

    type: TokenType
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.type, TokenType):
            object.__setattr__(self, "type", TokenType(self.type))

    def __repr__(self) -> str:
        """Returns a string representation of the token.

        Returns:
            str: A concise summary of the token's type and value.
        """
        return f"Token({self.type}, {self.value})"


__all__ = [
    "ADDITIVE_OPERATORS",
    "ARITHMETIC_OPERATORS",
    "MULTIPLICATIVE_OPERATORS",
    "OPERATOR_SYMBOLS",
    "Token",
    "TokenType",
]
