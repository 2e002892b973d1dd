"""
dependencies.py - FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from ports.evaluator import Evaluator


def get_evaluator(request: Request) -> Evaluator:
    return request.app.state.evaluator
