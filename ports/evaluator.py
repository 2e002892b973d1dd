"""
Port: Evaluator
Odpowiedzialność: deterministyczne, czyste liczenie drzew Expr (arytmetyka + logika).
"""
from typing import Protocol, runtime_checkable

from contracts import ArithExpr, BoolExpr, EvalResult, Expr, Value


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, expr: Expr) -> Value:
        """
        Reduces a whole tree to a tagged value.
        ArithRoot → IntValue, BoolRoot → BoolValue.
        Raises DivisionByZero on integer division by zero.
        Raises IntegerOverflow when a result leaves the i64 range.
        """
        ...

    def evaluate_arith(self, expr: ArithExpr) -> int:
        """
        Reduces an arithmetic subtree to an int.
        Both operands are always evaluated before combining.
        Integer division truncates toward zero.
        """
        ...

    def evaluate_bool(self, expr: BoolExpr) -> bool:
        """
        Reduces a boolean subtree to a bool.
        AND / OR never short-circuit: both operands are evaluated.
        """
        ...

    def explain(self, expr: Expr) -> EvalResult:
        """
        Same as evaluate(), plus human-readable reduction steps in post-order,
        e.g. ["12 + 155 = 167", "167 <= 167 = true"]. Leaves produce no step.
        """
        ...
