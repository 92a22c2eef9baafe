"""
Defines the abstract syntax tree (AST) node structure for letcalc programs.

The tree is a closed set of frozen dataclasses grouped into two tagged unions:

    Statement:  LetStatement | PrintStatement
    Expression: NumberLiteral | Identifier | BinaryExpression

Program is the root and owns its statements in source order. Nodes are built
once, bottom-up, by the parser and never mutated afterwards; every child is
owned by exactly one parent.

Each node exposes:
    type (NodeType): The node discriminator.
    to_dict(): A plain nested dictionary suitable for JSON output or debugging.

Example:
    >>> node = BinaryExpression(TokenType.PLUS, NumberLiteral(1), Identifier("x"))
    >>> node.to_dict()["operator"]
    '+'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from letcalc.letcalc_tokens import ARITHMETIC_OPERATORS, OPERATOR_SYMBOLS, TokenType


class NodeType(Enum):
    """Discriminator of an AST node."""

    PROGRAM = "Program"
    LET_STATEMENT = "LetStatement"
    PRINT_STATEMENT = "PrintStatement"
    IDENTIFIER = "Identifier"
    NUMBER_LITERAL = "NumberLiteral"
    BINARY_EXPRESSION = "BinaryExpression"


# ── Expressions ──────────────────────────────────────────────────


@dataclass(frozen=True)
class Identifier:
    """A variable name, taken verbatim from an IDENT token."""

    name: str

    @property
    def type(self) -> NodeType:
        return NodeType.IDENTIFIER

    def to_dict(self) -> dict[str, Any]:
        """Serialize to `{"type": "Identifier", "name": ...}`."""
        return {"type": self.type.value, "name": self.name}


@dataclass(frozen=True)
class NumberLiteral:
    """A numeric constant; `int` for integer text, `float` otherwise."""

    value: int | float

    @property
    def type(self) -> NodeType:
        return NodeType.NUMBER_LITERAL

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "value": self.value}


@dataclass(frozen=True)
class BinaryExpression:
    """An arithmetic operation over two exclusively owned operands.

    Attributes:
        operator (TokenType): One of PLUS, MINUS, MUL, DIV.
        left (Expression): Left operand.
        right (Expression): Right operand.
    """

    operator: TokenType
    left: Expression
    right: Expression

    def __post_init__(self) -> None:
        if self.operator not in ARITHMETIC_OPERATORS:
            raise ValueError(f"Not an arithmetic operator: {self.operator}")

    @property
    def type(self) -> NodeType:
        return NodeType.BINARY_EXPRESSION

    @property
    def symbol(self) -> str:
        """Source symbol of the operator (`+ - * /`)."""
        return OPERATOR_SYMBOLS[self.operator]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "operator": self.symbol,
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
        }


Expression = Union[NumberLiteral, Identifier, BinaryExpression]


# ── Statements ───────────────────────────────────────────────────


@dataclass(frozen=True)
class LetStatement:
    """`let <name> = <value>`: binds the value of an expression to a name."""

    name: Identifier
    value: Expression

    @property
    def type(self) -> NodeType:
        return NodeType.LET_STATEMENT

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "name": self.name.to_dict(),
            "value": self.value.to_dict(),
        }


@dataclass(frozen=True)
class PrintStatement:
    """`print <value>`: outputs the value of an expression."""

    value: Expression

    @property
    def type(self) -> NodeType:
        return NodeType.PRINT_STATEMENT

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "value": self.value.to_dict()}


Statement = Union[LetStatement, PrintStatement]


# ── Root ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Program:
    """Root node; statements are kept in source (and execution) order."""

    body: tuple[Statement, ...]

    @property
    def type(self) -> NodeType:
        return NodeType.PROGRAM

    def to_dict(self) -> dict[str, Any]:
        """Serialize the whole tree to nested plain dictionaries."""
        return {
            "type": self.type.value,
            "body": [stmt.to_dict() for stmt in self.body],
        }


Node = Union[Program, LetStatement, PrintStatement, Expression]


__all__ = [
    "BinaryExpression",
    "Expression",
    "Identifier",
    "LetStatement",
    "Node",
    "NodeType",
    "NumberLiteral",
    "PrintStatement",
    "Program",
    "Statement",
]
