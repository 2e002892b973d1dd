"""
schemas.py - Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from contracts import Expr, Value


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expr: Expr
    explain: bool = False   # dołącz kroki redukcji do odpowiedzi


class EvaluateResponse(BaseModel):
    value: Value
    steps: list[str] = Field(default_factory=list)


class EvaluationErrorResponse(BaseModel):
    error: str    # "division_by_zero" | "integer_overflow"
    detail: str


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    evaluator: str
    version: str
