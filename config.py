"""
config.py - Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks BOOLARITH_.
"""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Evaluator: "recursive" (ASTEvaluator) albo "stack" (StackEvaluator)
    evaluator: Literal["recursive", "stack"] = "recursive"

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "BoolArith"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="BOOLARITH_", env_file=".env", extra="ignore")
