"""
contracts.py - Jedyne źródło prawdy dla typów danych BoolArith.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.

Drzewa wyrażeń są niemutowalne (frozen) - ewaluacja nigdy ich nie zmienia,
więc to samo drzewo można liczyć wielokrotnie, także z wielu wątków.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


# ─────────────────────────── Helpers ─────────────────────────────────────

class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# ─────────────────────────── Operatory ───────────────────────────────────

class BinArithOp(str, Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    INT_DIV = "int_div"   # dzielenie całkowite, obcinanie w stronę zera


class ArithCmpOp(str, Enum):
    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"
    EQ = "eq"
    NEQ = "neq"


class BinLogicOp(str, Enum):
    AND = "and"
    OR = "or"
    EQ = "eq"     # równość wartości logicznych
    NEQ = "neq"


# ─────────────────────────── AST: arytmetyka ─────────────────────────────

class IntLit(_Node):
    node_type: Literal["int_lit"] = "int_lit"
    value: int = Field(strict=True, ge=I64_MIN, le=I64_MAX)


class BinArithExpr(_Node):
    node_type: Literal["bin_arith"] = "bin_arith"
    left: "ArithExpr"
    right: "ArithExpr"
    op: BinArithOp


ArithExpr = Annotated[
    Union[BinArithExpr, IntLit],
    Field(discriminator="node_type"),
]


# ─────────────────────────── AST: logika ─────────────────────────────────

class BoolLit(_Node):
    node_type: Literal["bool_lit"] = "bool_lit"
    value: bool = Field(strict=True)


class NotExpr(_Node):
    node_type: Literal["not"] = "not"
    operand: "BoolExpr"


class ArithCmpExpr(_Node):
    """Most między podjęzykami: porównanie dwóch wyrażeń arytmetycznych."""
    node_type: Literal["arith_cmp"] = "arith_cmp"
    left: ArithExpr
    right: ArithExpr
    op: ArithCmpOp


class BinBoolExpr(_Node):
    node_type: Literal["bin_bool"] = "bin_bool"
    left: "BoolExpr"
    right: "BoolExpr"
    op: BinLogicOp


BoolExpr = Annotated[
    Union[ArithCmpExpr, BinBoolExpr, NotExpr, BoolLit],
    Field(discriminator="node_type"),
]


# ─────────────────────────── AST: korzeń ─────────────────────────────────

class ArithRoot(_Node):
    node_type: Literal["arith"] = "arith"
    expr: ArithExpr


class BoolRoot(_Node):
    node_type: Literal["bool"] = "bool"
    expr: BoolExpr


Expr = Annotated[
    Union[ArithRoot, BoolRoot],
    Field(discriminator="node_type"),
]

for _model in (BinArithExpr, ArithCmpExpr, NotExpr, BinBoolExpr, ArithRoot, BoolRoot):
    _model.model_rebuild()


# ─────────────────────────── Evaluator ───────────────────────────────────

class IntValue(_Node):
    value_type: Literal["int"] = "int"
    value: int = Field(strict=True, ge=I64_MIN, le=I64_MAX)


class BoolValue(_Node):
    value_type: Literal["bool"] = "bool"
    value: bool = Field(strict=True)


Value = Annotated[
    Union[IntValue, BoolValue],
    Field(discriminator="value_type"),
]


class EvalResult(BaseModel):
    value: Value
    steps: list[str] = Field(default_factory=list)  # kroki redukcji, post-order


# ─────────────────────────── Błędy ewaluacji ─────────────────────────────

class EvaluationError(ArithmeticError):
    """Bazowy błąd ewaluacji - przerywa całe obliczenie."""

    code = "evaluation_error"


class DivisionByZero(EvaluationError, ZeroDivisionError):
    code = "division_by_zero"

    def __init__(self, dividend: int):
        super().__init__(f"Dzielenie przez zero: {dividend} / 0")
        self.dividend = dividend


class IntegerOverflow(EvaluationError, OverflowError):
    code = "integer_overflow"

    def __init__(self, op: BinArithOp, left: int, right: int):
        super().__init__(
            f"Przekroczenie zakresu i64: {op.value}({left}, {right})"
        )
        self.op = op
        self.left = left
        self.right = right
