"""
Adapter: ASTEvaluator
Implementuje port Evaluator - rekurencyjne przejście drzewa Expr.

Głębokość rekursji = wysokość drzewa. Dla bardzo głębokich drzew
(generowanych maszynowo) używaj StackEvaluator.

evaluate()  - oblicza wartość korzenia (IntValue / BoolValue)
explain()   - to samo + kroki redukcji
"""
from __future__ import annotations

import logging
from typing import Optional

from adapters.evaluator._ops import (
    ARITH_SYMBOLS,
    CMP_SYMBOLS,
    LOGIC_SYMBOLS,
    apply_arith,
    apply_cmp,
    apply_logic,
    fmt,
)
from contracts import (
    ArithCmpExpr,
    ArithExpr,
    ArithRoot,
    BinArithExpr,
    BinBoolExpr,
    BoolExpr,
    BoolLit,
    BoolRoot,
    BoolValue,
    EvalResult,
    Expr,
    IntLit,
    IntValue,
    NotExpr,
    Value,
)

logger = logging.getLogger("boolarith.evaluator")


class ASTEvaluator:
    """Rekurencyjny ewaluator wyrażeń arytmetyczno-logicznych."""

    name = "recursive"

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, expr: Expr) -> Value:
        value = self._eval_root(expr, None)
        logger.debug("evaluate %s -> %r", expr.node_type, value.value)
        return value

    def evaluate_arith(self, expr: ArithExpr) -> int:
        return self._arith(expr, None)

    def evaluate_bool(self, expr: BoolExpr) -> bool:
        return self._bool(expr, None)

    def explain(self, expr: Expr) -> EvalResult:
        steps: list[str] = []
        value = self._eval_root(expr, steps)
        logger.debug("explain %s -> %r (%d steps)", expr.node_type, value.value, len(steps))
        return EvalResult(value=value, steps=steps)

    # -- Prywatne ----------------------------------------------------------

    def _eval_root(self, expr: Expr, steps: Optional[list[str]]) -> Value:
        if isinstance(expr, ArithRoot):
            return IntValue(value=self._arith(expr.expr, steps))
        if isinstance(expr, BoolRoot):
            return BoolValue(value=self._bool(expr.expr, steps))
        raise TypeError(f"Nieznany typ korzenia: {type(expr)}")

    def _arith(self, node: ArithExpr, steps: Optional[list[str]]) -> int:
        if isinstance(node, IntLit):
            return node.value

        if isinstance(node, BinArithExpr):
            left = self._arith(node.left, steps)
            right = self._arith(node.right, steps)
            result = apply_arith(node.op, left, right)
            if steps is not None:
                steps.append(f"{left} {ARITH_SYMBOLS[node.op]} {right} = {result}")
            return result

        raise TypeError(f"Nieznany typ węzła arytmetycznego: {type(node)}")

    def _bool(self, node: BoolExpr, steps: Optional[list[str]]) -> bool:
        if isinstance(node, BoolLit):
            return node.value

        if isinstance(node, NotExpr):
            val = self._bool(node.operand, steps)
            result = not val
            if steps is not None:
                steps.append(f"not {fmt(val)} = {fmt(result)}")
            return result

        if isinstance(node, ArithCmpExpr):
            left = self._arith(node.left, steps)
            right = self._arith(node.right, steps)
            result = apply_cmp(node.op, left, right)
            if steps is not None:
                steps.append(f"{left} {CMP_SYMBOLS[node.op]} {right} = {fmt(result)}")
            return result

        if isinstance(node, BinBoolExpr):
            # oba argumenty zawsze liczone (bez short-circuit)
            left = self._bool(node.left, steps)
            right = self._bool(node.right, steps)
            result = apply_logic(node.op, left, right)
            if steps is not None:
                steps.append(
                    f"{fmt(left)} {LOGIC_SYMBOLS[node.op]} {fmt(right)} = {fmt(result)}"
                )
            return result

        raise TypeError(f"Nieznany typ węzła logicznego: {type(node)}")
