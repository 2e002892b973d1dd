"""
Router: POST /evaluate
Liczy drzewo Expr przesłane jako JSON. Błędy ewaluacji (DivisionByZero,
IntegerOverflow) obsługuje globalny handler w api/main.py.
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_evaluator
from api.schemas import EvaluateRequest, EvaluateResponse, EvaluationErrorResponse
from ports.evaluator import Evaluator

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post(
    "",
    response_model=EvaluateResponse,
    responses={422: {"model": EvaluationErrorResponse}},
)
async def evaluate(
    body: EvaluateRequest,
    evaluator: Evaluator = Depends(get_evaluator),
):
    if body.explain:
        result = evaluator.explain(body.expr)
        return EvaluateResponse(value=result.value, steps=result.steps)
    return EvaluateResponse(value=evaluator.evaluate(body.expr))
