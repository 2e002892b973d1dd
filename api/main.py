"""
api/main.py - punkt wejścia FastAPI.

Lifespan:
  - Tworzy adapter Evaluator wybrany w Settings.evaluator
  - Evaluator jest bezstanowy - jedna instancja na całą aplikację

Błędy ewaluacji (EvaluationError) → 422 z kodem błędu w polu "error".
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator import make_evaluator
from api.routers import evaluate
from api.schemas import EvaluationErrorResponse, HealthResponse
from config import Settings
from contracts import EvaluationError

logger = logging.getLogger("boolarith")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    app.state.evaluator = make_evaluator(settings.evaluator)

    logger.info("BoolArith API ready (evaluator=%s).", settings.evaluator)
    yield

    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request):
        return HealthResponse(
            status="ok",
            evaluator=request.app.state.evaluator.name,
            version=settings.app_version,
        )

    # Globalny handler błędów ewaluacji
    @app.exception_handler(EvaluationError)
    async def evaluation_error_handler(request: Request, exc: EvaluationError):
        logger.warning("Evaluation failed (%s): %s", exc.code, exc)
        body = EvaluationErrorResponse(error=exc.code, detail=str(exc))
        return JSONResponse(status_code=422, content=body.model_dump())

    return app


app = create_app()
