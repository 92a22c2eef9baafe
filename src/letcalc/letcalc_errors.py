"""
Parse errors raised by the letcalc parser.

Every error aborts the whole parse; no partial tree is returned and nothing is
recovered. Each error carries the offending token range for diagnostics.

Hierarchy:
    ParseError (SyntaxError)
        InvalidStatement
        InvalidExpression
            InvalidNumberLiteral
"""

from collections.abc import Iterable

from letcalc.letcalc_tokens import Token


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render a token range as its space-joined source text."""
    return " ".join(tok.value for tok in tokens)


class ParseError(SyntaxError):
    """Base class for all letcalc parse failures.

    Attributes:
        tokens (tuple[Token, ...]): The token range that failed to parse.
        reason (str): Short description without the token range.
    """

    def __init__(self, reason: str, tokens: Iterable[Token] = ()) -> None:
        self.tokens: tuple[Token, ...] = tuple(tokens)
        self.reason = reason
        super().__init__(f"{reason}: [{format_tokens(self.tokens)}]")


class InvalidStatement(ParseError):
    """A statement chunk is empty, starts with the wrong token, or is malformed."""


class InvalidExpression(ParseError):
    """No expression rule matched the token range."""


class InvalidNumberLiteral(InvalidExpression):
    """A NUMBER token whose text is not a finite numeric literal."""


__all__ = [
    "InvalidExpression",
    "InvalidNumberLiteral",
    "InvalidStatement",
    "ParseError",
    "format_tokens",
]
