"""
Adapter: StackEvaluator
Implementuje port Evaluator - iteracyjny post-order z jawnym stosem roboczym.

Semantyka i kolejność kroków identyczne jak w ASTEvaluator, ale wysokość
drzewa nie jest ograniczona limitem rekursji Pythona (pamięć ∝ wysokość).
"""
from __future__ import annotations

import logging
from typing import Optional, Union

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

_Node = Union[ArithExpr, BoolExpr]


class StackEvaluator:
    """Ewaluator bez rekursji - dla głębokich, generowanych maszynowo drzew."""

    name = "stack"

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, expr: Expr) -> Value:
        value = self._eval_root(expr, None)
        logger.debug("evaluate %s -> %r", expr.node_type, value.value)
        return value

    def evaluate_arith(self, expr: ArithExpr) -> int:
        return self._run(expr, None)

    def evaluate_bool(self, expr: BoolExpr) -> bool:
        return self._run(expr, None)

    def explain(self, expr: Expr) -> EvalResult:
        steps: list[str] = []
        value = self._eval_root(expr, steps)
        logger.debug("explain %s -> %r (%d steps)", expr.node_type, value.value, len(steps))
        return EvalResult(value=value, steps=steps)

    # -- Prywatne ----------------------------------------------------------

    def _eval_root(self, expr: Expr, steps: Optional[list[str]]) -> Value:
        if isinstance(expr, ArithRoot):
            return IntValue(value=self._run(expr.expr, steps))
        if isinstance(expr, BoolRoot):
            return BoolValue(value=self._run(expr.expr, steps))
        raise TypeError(f"Nieznany typ korzenia: {type(expr)}")

    def _run(self, root: _Node, steps: Optional[list[str]]) -> int | bool:
        # (węzeł, czy dzieci już policzone)
        work: list[tuple[_Node, bool]] = [(root, False)]
        values: list[int | bool] = []

        while work:
            node, expanded = work.pop()

            if isinstance(node, (IntLit, BoolLit)):
                values.append(node.value)
                continue

            if not expanded:
                work.append((node, True))
                if isinstance(node, NotExpr):
                    work.append((node.operand, False))
                elif isinstance(node, (BinArithExpr, ArithCmpExpr, BinBoolExpr)):
                    # prawy na spód, żeby lewy policzył się pierwszy
                    work.append((node.right, False))
                    work.append((node.left, False))
                else:
                    raise TypeError(f"Nieznany typ węzła AST: {type(node)}")
                continue

            if isinstance(node, NotExpr):
                val = values.pop()
                result = not val
                if steps is not None:
                    steps.append(f"not {fmt(val)} = {fmt(result)}")
                values.append(result)
                continue

            right = values.pop()
            left = values.pop()

            if isinstance(node, BinArithExpr):
                result = apply_arith(node.op, left, right)
                step = f"{left} {ARITH_SYMBOLS[node.op]} {right} = {result}"
            elif isinstance(node, ArithCmpExpr):
                result = apply_cmp(node.op, left, right)
                step = f"{left} {CMP_SYMBOLS[node.op]} {right} = {fmt(result)}"
            elif isinstance(node, BinBoolExpr):
                result = apply_logic(node.op, left, right)
                step = f"{fmt(left)} {LOGIC_SYMBOLS[node.op]} {fmt(right)} = {fmt(result)}"
            else:
                raise TypeError(f"Nieznany typ węzła AST: {type(node)}")

            if steps is not None:
                steps.append(step)
            values.append(result)

        return values.pop()
