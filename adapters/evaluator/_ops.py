"""
Wspólne tablice operatorów dla adapterów Evaluator.

Oba ewaluatory (rekurencyjny i stosowy) liczą przez te same funkcje,
więc semantyka operatorów jest zdefiniowana dokładnie w jednym miejscu.

Polityka przepełnienia: pułapka - wynik spoza i64 → IntegerOverflow.
"""
from __future__ import annotations

import operator
from typing import Callable

from contracts import (
    I64_MAX,
    I64_MIN,
    ArithCmpOp,
    BinArithOp,
    BinLogicOp,
    DivisionByZero,
    IntegerOverflow,
)


def _int_div(a: int, b: int) -> int:
    """Dzielenie całkowite obcinane w stronę zera (-7 / 2 = -3)."""
    if b == 0:
        raise DivisionByZero(a)
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


_ARITH_FUNCS: dict[BinArithOp, Callable[[int, int], int]] = {
    BinArithOp.ADD:     operator.add,
    BinArithOp.SUB:     operator.sub,
    BinArithOp.MUL:     operator.mul,
    BinArithOp.INT_DIV: _int_div,
}

_CMP_FUNCS: dict[ArithCmpOp, Callable[[int, int], bool]] = {
    ArithCmpOp.LT:  operator.lt,
    ArithCmpOp.LTE: operator.le,
    ArithCmpOp.GT:  operator.gt,
    ArithCmpOp.GTE: operator.ge,
    ArithCmpOp.EQ:  operator.eq,
    ArithCmpOp.NEQ: operator.ne,
}

# Bez short-circuit: oba argumenty są już policzone, zanim trafią tutaj.
_LOGIC_FUNCS: dict[BinLogicOp, Callable[[bool, bool], bool]] = {
    BinLogicOp.AND: operator.and_,
    BinLogicOp.OR:  operator.or_,
    BinLogicOp.EQ:  operator.eq,
    BinLogicOp.NEQ: operator.ne,
}

ARITH_SYMBOLS = {
    BinArithOp.ADD: "+",
    BinArithOp.SUB: "-",
    BinArithOp.MUL: "*",
    BinArithOp.INT_DIV: "/",
}

CMP_SYMBOLS = {
    ArithCmpOp.LT: "<",
    ArithCmpOp.LTE: "<=",
    ArithCmpOp.GT: ">",
    ArithCmpOp.GTE: ">=",
    ArithCmpOp.EQ: "==",
    ArithCmpOp.NEQ: "!=",
}

LOGIC_SYMBOLS = {
    BinLogicOp.AND: "and",
    BinLogicOp.OR: "or",
    BinLogicOp.EQ: "==",
    BinLogicOp.NEQ: "!=",
}


def apply_arith(op: BinArithOp, left: int, right: int) -> int:
    result = _ARITH_FUNCS[op](left, right)
    if not I64_MIN <= result <= I64_MAX:
        raise IntegerOverflow(op, left, right)
    return result


def apply_cmp(op: ArithCmpOp, left: int, right: int) -> bool:
    return _CMP_FUNCS[op](left, right)


def apply_logic(op: BinLogicOp, left: bool, right: bool) -> bool:
    return _LOGIC_FUNCS[op](left, right)


def fmt(v: int | bool) -> str:
    """Czytelna reprezentacja wartości w krokach redukcji."""
    if isinstance(v, bool):
        return "true" if v else "false"
    return str(v)
