"""
letcalc Parser

Parses a finished token sequence into a letcalc abstract syntax tree (AST).

The parser does not walk a cursor over the input. Instead it segments token
ranges and recurses on the pieces:

- A program is split on SEMICOLON; every chunk must be a statement.
- A statement starts with LET or PRINT.
    * `let <ident> = <expression>`: the range is split once on EQUAL, so an
      EQUAL inside the value expression is left alone.
    * `print <expression>`
- An expression is resolved by the first rule that applies:
    1. a single NUMBER or IDENT token;
    2. a parenthesized group spanning the whole range (parens are stripped);
    3. a binary expression, split at the rightmost top-level operator, trying
       `+ -` before `* /` so that multiplication binds tighter.

Parser Behavior
---------------
- Fail-fast: the first malformed construct raises and the whole parse aborts.
- Stateless across calls; one `Parser` may be reused or shared freely.
- Nesting deeper than `max_depth` raises `InvalidExpression` instead of
  exhausting the interpreter stack. Depth grows with parentheses and operand
  sub-expressions; a flat same-tier chain like `1 + 1 + ... + 1` adds one level.

Entry Points
------------
- `parse()`: Parse a full program with a default `Parser`.
- `Parser.parse_program()`: Parse a full program.
- `Parser.parse_statement()`: Parse one statement chunk (no SEMICOLON).
- `Parser.parse_expression()`: Parse one expression range.

Raises
------
InvalidStatement
    A statement chunk is empty, starts with the wrong token, or is malformed.
InvalidExpression
    No expression rule matches a token range.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence

from letcalc.letcalc_ast import (
    BinaryExpression,
    Expression,
    Identifier,
    LetStatement,
    NumberLiteral,
    PrintStatement,
    Program,
    Statement,
)
from letcalc.letcalc_errors import (
    InvalidExpression,
    InvalidNumberLiteral,
    InvalidStatement,
)
from letcalc.letcalc_splitter import (
    is_fully_parenthesized,
    split_by_top_level_operator,
    split_tokens,
)
from letcalc.letcalc_tokens import (
    ADDITIVE_OPERATORS,
    ARITHMETIC_OPERATORS,
    MULTIPLICATIVE_OPERATORS,
    Token,
    TokenType,
)

log = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256

NUMERAL_RE = re.compile(r"[0-9]+(?P<frac>\.[0-9]+)?(?P<exp>[eE][+-]?[0-9]+)?")

# Lowest binding first: the first tier with a top-level operator becomes the root.
PRECEDENCE_TIERS: tuple[frozenset[TokenType], ...] = (
    ADDITIVE_OPERATORS,
    MULTIPLICATIVE_OPERATORS,
)


class Parser:
    """
    letcalc Parser Class

    Transforms token ranges into AST nodes. Holds only immutable configuration,
    so every method is a pure function of its arguments.

    Attributes
    ----------
    max_depth : int
        Maximum expression nesting depth before parsing gives up.

    Methods
    -------
    parse_program(tokens) -> Program
        Parse a SEMICOLON-separated sequence of statements.
    parse_statement(tokens) -> Statement
        Parse a single `let` or `print` statement.
    parse_expression(tokens) -> Expression
        Parse a literal, identifier, parenthesized group, or binary expression.
    parse_binary_expression(tokens) -> BinaryExpression
        Split at the top-level operator of the lowest binding tier and recurse.
    parse_identifier(token) -> Identifier
    parse_number_literal(token) -> NumberLiteral
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if isinstance(max_depth, bool) or not isinstance(max_depth, int):
            raise TypeError(f"max_depth must be an int, got {type(max_depth).__name__}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        self.max_depth: int = max_depth

    def parse_program(self, tokens: Sequence[Token]) -> Program:
        """Parse a full program into a `Program` node.

        Args:
            tokens: The complete token sequence.

        Returns:
            Program: Statements in source order.

        Raises:
            InvalidStatement: If the input is empty or any chunk is not a statement.
            InvalidExpression: If any statement holds a malformed expression.
        """
        if not tokens:
            raise InvalidStatement("Empty program")

        chunks = split_tokens(tokens, TokenType.SEMICOLON)
        log.debug("Parsing program of %d statement(s)", len(chunks))
        return Program(tuple(self.parse_statement(chunk) for chunk in chunks))

    def parse_statement(self, tokens: Sequence[Token]) -> Statement:
        """Parse one statement chunk (without its SEMICOLON)."""
        if not tokens:
            raise InvalidStatement("Empty statement")

        head = tokens[0].type
        if head == TokenType.LET:
            return self.parse_let(tokens)
        if head == TokenType.PRINT:
            log.debug("Parsing print statement")
            return PrintStatement(self.parse_expression(tokens[1:]))

        raise InvalidStatement(f"Statement cannot start with {head}", tokens)

    def parse_let(self, tokens: Sequence[Token]) -> LetStatement:
        """Parse `let <ident> = <expression>`.

        The chunk is split on EQUAL at most once, so `let x = a = b` keeps
        `a = b` whole as the value range (which then fails as an expression).
        """
        if len(tokens) < 2:
            raise InvalidStatement("Expected identifier after 'let'", tokens)
        if tokens[1].type != TokenType.IDENT:
            raise InvalidStatement(
                f"Expected identifier after 'let', got {tokens[1].type}", tokens
            )

        parts = split_tokens(tokens, TokenType.EQUAL, max_chunks=2)
        if len(parts) != 2:
            raise InvalidStatement("Expected '=' followed by a value", tokens)

        name = self.parse_identifier(tokens[1])
        log.debug("Parsing let statement for %r", name.name)
        return LetStatement(name, self.parse_expression(parts[1]))

    def parse_identifier(self, token: Token) -> Identifier:
        """Build an `Identifier` node from an IDENT (or `let` name) token.

        Args:
            token: The token whose raw text is the identifier name.

        Returns:
            Identifier: The identifier node.
        """
        return Identifier(token.value)

    def parse_number_literal(self, token: Token) -> NumberLiteral:
        """Convert a NUMBER token to a literal node.

        Only plain ASCII numerals are accepted: digits with an optional
        fraction and exponent. Integer text yields an `int`, anything else a
        `float`.

        Args:
            token: The NUMBER token.

        Returns:
            NumberLiteral: The literal node.

        Raises:
            InvalidNumberLiteral: If the text is not a finite numeral.
        """
        text = token.value
        match = NUMERAL_RE.fullmatch(text)
        if match is None:
            raise InvalidNumberLiteral(f"Invalid numeric literal {text!r}", [token])

        if match.group("frac") is None and match.group("exp") is None:
            try:
                return NumberLiteral(int(text))
            except ValueError:
                # beyond sys.get_int_max_str_digits()
                raise InvalidNumberLiteral(
                    f"Numeric literal too long ({len(text)} digits)", [token]
                ) from None

        value = float(text)
        if not math.isfinite(value):
            raise InvalidNumberLiteral(f"Non-finite numeric literal {text!r}", [token])
        return NumberLiteral(value)

    def parse_expression(self, tokens: Sequence[Token], depth: int = 0) -> Expression:
        """Parse an expression range; the first matching rule wins.

        Args:
            tokens: The token range holding exactly one expression.
            depth: Current nesting depth; callers normally leave this at 0.

        Returns:
            Expression: The parsed expression node.

        Raises:
            InvalidExpression: If no rule matches or nesting exceeds `max_depth`.
        """
        if depth > self.max_depth:
            raise InvalidExpression("Expression nested too deeply", tokens)

        if len(tokens) == 1:
            tok = tokens[0]
            if tok.type == TokenType.NUMBER:
                return self.parse_number_literal(tok)
            if tok.type == TokenType.IDENT:
                return self.parse_identifier(tok)

        if is_fully_parenthesized(tokens):
            return self.parse_expression(tokens[1:-1], depth + 1)

        if any(tok.type in ARITHMETIC_OPERATORS for tok in tokens):
            return self.parse_binary_expression(tokens, depth)

        raise InvalidExpression("Invalid expression", tokens)

    def parse_binary_expression(
        self, tokens: Sequence[Token], depth: int = 0
    ) -> BinaryExpression:
        """Split `tokens` at a top-level operator and parse both operands.

        Tiers are tried lowest binding first; within a tier the rightmost
        operator wins, which makes same-tier chains left-associative.

        A same-tier chain such as `a - b - c - d` is peeled from the right in a
        loop and folded left to right afterwards, so a long flat chain costs
        one level of `depth` rather than one per operator.

        Args:
            tokens: The token range holding one binary expression.
            depth: Current nesting depth.

        Returns:
            BinaryExpression: The outermost operation of the range.

        Raises:
            InvalidExpression: If no tier has an operator at paren depth 0, or an
                operand is malformed.
        """
        for operators in PRECEDENCE_TIERS:
            split = split_by_top_level_operator(tokens, operators)
            if split is None:
                continue

            # (operator, right operand) pairs, rightmost first
            tail: list[tuple[Token, Sequence[Token]]] = [
                (split.operator, split.right)
            ]
            head: Sequence[Token] = split.left
            while (inner := split_by_top_level_operator(head, operators)) is not None:
                tail.append((inner.operator, inner.right))
                head = inner.left

            result: Expression = self.parse_expression(head, depth + 1)
            for operator, right in reversed(tail):
                result = BinaryExpression(
                    operator.type, result, self.parse_expression(right, depth + 1)
                )
            assert isinstance(result, BinaryExpression)  # for mypy
            return result

        raise InvalidExpression("Invalid binary expression", tokens)


def parse(tokens: Sequence[Token]) -> Program:
    """Parse a full program with a default `Parser`."""
    return Parser().parse_program(tokens)


__all__ = ["DEFAULT_MAX_DEPTH", "NUMERAL_RE", "PRECEDENCE_TIERS", "Parser", "parse"]
