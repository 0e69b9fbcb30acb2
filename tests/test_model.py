"""Tests for the AST models."""

import pytest
from pydantic import ValidationError

from conftest import binop, if_, let

from minilang.model import (
    ARITHMETIC_OPS,
    EQUALITY_OPS,
    LOGICAL_OPS,
    BinaryExpr,
    BinaryOp,
    BooleanLiteral,
    IfStatement,
    LetStatement,
    NumberLiteral,
    Program,
    VariableRef,
    WhileStatement,
)


class TestExpressions:
    def test_operator_symbols(self):
        assert [op.value for op in BinaryOp] == [
            "+", "-", "*", "/", ">", "<", "&&", "||", "===",
        ]

    def test_operator_groups_partition(self):
        groups = [ARITHMETIC_OPS, LOGICAL_OPS, EQUALITY_OPS]
        assert set().union(*groups) == set(BinaryOp)
        assert sum(len(g) for g in groups) == len(BinaryOp)

    def test_binary_from_dict(self):
        expr = BinaryExpr.model_validate({
            "operator": "&&",
            "left": {"kind": "boolean", "value": True},
            "right": {"kind": "variable", "name": "b"},
        })
        assert expr.operator == BinaryOp.AND
        assert isinstance(expr.left, BooleanLiteral)
        assert isinstance(expr.right, VariableRef)

    def test_unknown_operator(self):
        with pytest.raises(ValidationError):
            BinaryExpr.model_validate({
                "operator": "%",
                "left": {"kind": "number", "value": 1},
                "right": {"kind": "number", "value": 2},
            })

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            BinaryExpr.model_validate({
                "operator": "+",
                "left": {"kind": "string", "value": "a"},
                "right": {"kind": "number", "value": 2},
            })

    def test_number_value_is_float(self):
        assert NumberLiteral(value=3).value == 3.0
        assert isinstance(NumberLiteral(value=3).value, float)

    def test_number_rejects_boolean(self):
        with pytest.raises(ValidationError):
            NumberLiteral(value=True)

    def test_boolean_rejects_number(self):
        with pytest.raises(ValidationError):
            BooleanLiteral(value=1)

    def test_nodes_are_frozen(self):
        node = VariableRef(name="x")
        with pytest.raises(ValidationError):
            node.name = "y"


class TestStatements:
    def test_if_camel_case_aliases(self):
        stmt = IfStatement.model_validate({
            "test": {"kind": "boolean", "value": True},
            "truePart": [{"kind": "let", "name": "a", "expression": {"kind": "number", "value": 1}}],
            "falsePart": [],
        })
        assert isinstance(stmt.true_part[0], LetStatement)
        assert stmt.false_part == []

    def test_if_false_part_defaults_empty(self):
        stmt = IfStatement(test=BooleanLiteral(value=True), true_part=[])
        assert stmt.false_part == []

    def test_while_requires_body(self):
        with pytest.raises(ValidationError):
            WhileStatement.model_validate({"test": {"kind": "boolean", "value": True}})

    def test_let_requires_expression(self):
        with pytest.raises(ValidationError):
            LetStatement.model_validate({"name": "x"})


class TestProgram:
    def test_from_nodes_accepts_models(self):
        program = Program.from_nodes([let("x", 1), if_(True, [])])
        assert [s.kind for s in program.statements] == ["let", "if"]

    def test_from_json(self):
        program = Program.from_json(
            '[{"kind": "print", "expression": {"kind": "variable", "name": "x"}}]'
        )
        assert program.statements[0].kind == "print"
        assert program.statements[0].expression == VariableRef(name="x")

    def test_from_json_bytes(self):
        program = Program.from_json(b"[]")
        assert program.statements == []

    def test_json_round_trip(self):
        program = Program(statements=[let("x", binop("+", 1, 2))])
        assert Program.model_validate_json(program.model_dump_json()) == program
