import json
from dataclasses import FrozenInstanceError

import hypothesis.strategies as st
import pytest
from hypothesis import given

from letcalc.letcalc_ast import (
    BinaryExpression,
    Identifier,
    LetStatement,
    NodeType,
    NumberLiteral,
    PrintStatement,
    Program,
)
from letcalc.letcalc_tokens import TokenType


def test_node_types() -> None:
    assert Identifier("x").type is NodeType.IDENTIFIER
    assert NumberLiteral(1).type is NodeType.NUMBER_LITERAL
    expr = BinaryExpression(TokenType.PLUS, NumberLiteral(1), NumberLiteral(2))
    assert expr.type is NodeType.BINARY_EXPRESSION
    assert LetStatement(Identifier("x"), expr).type is NodeType.LET_STATEMENT
    assert PrintStatement(expr).type is NodeType.PRINT_STATEMENT
    assert Program(()).type is NodeType.PROGRAM


def test_node_eq_structural() -> None:
    a = BinaryExpression(TokenType.MUL, Identifier("a"), NumberLiteral(2))
    b = BinaryExpression(TokenType.MUL, Identifier("a"), NumberLiteral(2))
    assert a == b
    assert a != BinaryExpression(TokenType.MUL, Identifier("b"), NumberLiteral(2))


def test_node_eq_different_kind() -> None:
    assert PrintStatement(Identifier("x")) != LetStatement(
        Identifier("x"), Identifier("x")
    )


def test_nodes_are_frozen() -> None:
    node = Identifier("x")
    with pytest.raises(FrozenInstanceError):
        node.name = "y"  # type: ignore[misc]


def test_binary_expression_rejects_non_operator() -> None:
    with pytest.raises(ValueError, match="Not an arithmetic operator"):
        BinaryExpression(TokenType.EQUAL, NumberLiteral(1), NumberLiteral(2))


def test_binary_expression_symbol() -> None:
    expr = BinaryExpression(TokenType.MINUS, Identifier("a"), Identifier("b"))
    assert expr.symbol == "-"


def test_program_to_dict() -> None:
    program = Program(
        (
            LetStatement(
                Identifier("x"),
                BinaryExpression(TokenType.PLUS, NumberLiteral(1), NumberLiteral(2)),
            ),
            PrintStatement(Identifier("x")),
        )
    )
    assert program.to_dict() == {
        "type": "Program",
        "body": [
            {
                "type": "LetStatement",
                "name": {"type": "Identifier", "name": "x"},
                "value": {
                    "type": "BinaryExpression",
                    "operator": "+",
                    "left": {"type": "NumberLiteral", "value": 1},
                    "right": {"type": "NumberLiteral", "value": 2},
                },
            },
            {"type": "PrintStatement", "value": {"type": "Identifier", "name": "x"}},
        ],
    }


def test_to_dict_is_json_serializable() -> None:
    program = Program((PrintStatement(NumberLiteral(2.5)),))
    assert json.loads(json.dumps(program.to_dict())) == program.to_dict()


@given(st.text(min_size=1))  # type: ignore[misc]
def test_identifier_eq_same_name(name: str) -> None:
    assert Identifier(name) == Identifier(name)
    assert Identifier(name) != Identifier(name + "x")


@given(st.one_of(st.integers(), st.floats(allow_nan=False)))  # type: ignore[misc]
def test_number_literal_to_dict(value: float) -> None:
    assert NumberLiteral(value).to_dict() == {"type": "NumberLiteral", "value": value}
