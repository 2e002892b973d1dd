"""
Evaluator adapter package.

Public import:
    from adapters.evaluator import ASTEvaluator, StackEvaluator, make_evaluator
"""

from __future__ import annotations

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.evaluator.stack_evaluator import StackEvaluator

_EVALUATORS = {
    ASTEvaluator.name: ASTEvaluator,
    StackEvaluator.name: StackEvaluator,
}


def make_evaluator(kind: str = "recursive") -> ASTEvaluator | StackEvaluator:
    """Zwraca adapter Evaluator po nazwie ("recursive" | "stack")."""
    try:
        cls = _EVALUATORS[kind]
    except KeyError:
        raise ValueError(
            f"Nieznany evaluator: {kind!r} (dostępne: {', '.join(sorted(_EVALUATORS))})"
        ) from None
    return cls()


__all__ = ["ASTEvaluator", "StackEvaluator", "make_evaluator"]
