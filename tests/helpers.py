"""Shared test helpers for the letcalc test suite."""

from __future__ import annotations

import re

from letcalc.letcalc_tokens import Token, TokenType

_TOKEN_RE = re.compile(r"\s*(?:(\d+(?:\.\d+)?)|([A-Za-z_]\w*)|(.))")

_SYMBOLS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MUL,
    "/": TokenType.DIV,
    "=": TokenType.EQUAL,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

_KEYWORDS = {"let": TokenType.LET, "print": TokenType.PRINT}


def lex(source: str) -> list[Token]:
    """Tokenize test source text; a stand-in for the external tokenizer."""
    tokens: list[Token] = []
    for number, word, symbol in _TOKEN_RE.findall(source.strip()):
        if number:
            tokens.append(Token(TokenType.NUMBER, number))
        elif word:
            tokens.append(Token(_KEYWORDS.get(word, TokenType.IDENT), word))
        else:
            tokens.append(Token(_SYMBOLS[symbol], symbol))
    return tokens


def types_of(tokens: list[Token]) -> list[TokenType]:
    return [tok.type for tok in tokens]
