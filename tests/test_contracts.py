from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from contracts import (
    I64_MAX,
    I64_MIN,
    ArithCmpExpr,
    ArithCmpOp,
    BinArithExpr,
    BinArithOp,
    BoolLit,
    BoolRoot,
    Expr,
    IntLit,
    IntValue,
)


def test_int_lit_accepts_full_i64_range():
    assert IntLit(value=I64_MIN).value == I64_MIN
    assert IntLit(value=I64_MAX).value == I64_MAX


@pytest.mark.parametrize("bad", [I64_MAX + 1, I64_MIN - 1, True, 1.0, "1"])
def test_int_lit_rejects_out_of_range_or_non_int(bad):
    with pytest.raises(ValidationError):
        IntLit(value=bad)


def test_bool_lit_rejects_int():
    with pytest.raises(ValidationError):
        BoolLit(value=1)


def test_arith_operator_cannot_hold_logic_operator():
    with pytest.raises(ValidationError):
        BinArithExpr(left=IntLit(value=1), right=IntLit(value=2), op="and")


def test_bool_node_cannot_be_arith_operand():
    with pytest.raises(ValidationError):
        ArithCmpExpr(left=BoolLit(value=True), right=IntLit(value=2), op=ArithCmpOp.LT)


def test_nodes_are_immutable():
    lit = IntLit(value=1)
    with pytest.raises(ValidationError):
        lit.value = 2


def test_expr_is_decoded_from_tagged_json():
    payload = """
    {
      "node_type": "bool",
      "expr": {
        "node_type": "arith_cmp",
        "left": {
          "node_type": "bin_arith",
          "left": {"node_type": "int_lit", "value": 12},
          "right": {"node_type": "int_lit", "value": 155},
          "op": "add"
        },
        "right": {"node_type": "int_lit", "value": 167},
        "op": "lte"
      }
    }
    """

    expr = TypeAdapter(Expr).validate_json(payload)

    assert isinstance(expr, BoolRoot)
    assert isinstance(expr.expr, ArithCmpExpr)
    assert expr.expr.op is ArithCmpOp.LTE
    assert expr.expr.left.op is BinArithOp.ADD


def test_unknown_node_type_is_rejected():
    with pytest.raises(ValidationError):
        TypeAdapter(Expr).validate_python({"node_type": "string", "expr": "x"})


def test_int_value_rejects_bool():
    with pytest.raises(ValidationError):
        IntValue(value=False)
