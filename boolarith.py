#!/usr/bin/env python3
"""
boolarith.py - CLI narzędzie BoolArith.

Działa całkowicie lokalnie - nie wymaga uruchomionego serwera API.
Wejściem jest drzewo Expr w postaci JSON (ta sama struktura co POST /evaluate).

Konfiguracja: zmienne środowiskowe z prefiksem BOOLARITH_
lub plik .env (np. BOOLARITH_EVALUATOR=stack).

Podkomendy:
    eval  - policz drzewo Expr z pliku, --text lub stdin
    demo  - policz zestaw przykładowych drzew i pokaż tabelę wyników

Użycie:
    python boolarith.py eval --file expr.json --explain
    echo '{"node_type": "bool", "expr": {"node_type": "bool_lit", "value": true}}' | python boolarith.py eval
    python boolarith.py demo --evaluator stack
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from pydantic import TypeAdapter, ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluator import make_evaluator
from config import Settings
from contracts import (
    ArithCmpExpr,
    ArithCmpOp,
    ArithRoot,
    BinArithExpr,
    BinArithOp,
    BinBoolExpr,
    BinLogicOp,
    BoolLit,
    BoolRoot,
    EvaluationError,
    Expr,
    IntLit,
    NotExpr,
)

logger = logging.getLogger("boolarith.cli")

_EXPR_ADAPTER: TypeAdapter[Expr] = TypeAdapter(Expr)

EXIT_EVAL_ERROR = 1
EXIT_BAD_INPUT = 2


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _fmt_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    _console().print(table)


def _print_steps_table(steps: list[str]) -> None:
    table = Table(title=f"Steps [{len(steps)}]", box=box.ASCII)
    table.add_column("#", justify="right", no_wrap=True, style="cyan")
    table.add_column("Step")
    for i, step in enumerate(steps, 1):
        table.add_row(str(i), step)
    _console().print(table)


def _read_text(args: argparse.Namespace) -> str:
    if getattr(args, "file", None):
        try:
            with open(args.file, encoding="utf-8") as fh:
                return fh.read()
        except OSError as e:
            print(f"Błąd odczytu pliku: {e}", file=sys.stderr)
            sys.exit(EXIT_BAD_INPUT)
    text = getattr(args, "text", None) or sys.stdin.read().strip()
    if not text:
        print("Błąd: podaj drzewo JSON przez --text, --file lub stdin", file=sys.stderr)
        sys.exit(EXIT_BAD_INPUT)
    return text


def _demo_cases() -> list[tuple[str, Expr]]:
    return [
        ("51 / 17", ArithRoot(expr=BinArithExpr(
            left=IntLit(value=51), right=IntLit(value=17), op=BinArithOp.INT_DIV))),
        ("51 - 17", ArithRoot(expr=BinArithExpr(
            left=IntLit(value=51), right=IntLit(value=17), op=BinArithOp.SUB))),
        ("-7 / 2", ArithRoot(expr=BinArithExpr(
            left=IntLit(value=-7), right=IntLit(value=2), op=BinArithOp.INT_DIV))),
        ("false == false", BoolRoot(expr=BinBoolExpr(
            left=BoolLit(value=False), right=BoolLit(value=False), op=BinLogicOp.EQ))),
        ("12 + 155 <= 167", BoolRoot(expr=ArithCmpExpr(
            left=BinArithExpr(left=IntLit(value=12), right=IntLit(value=155), op=BinArithOp.ADD),
            right=IntLit(value=167),
            op=ArithCmpOp.LTE))),
        ("10 >= 60", BoolRoot(expr=ArithCmpExpr(
            left=IntLit(value=10), right=IntLit(value=60), op=ArithCmpOp.GTE))),
        ("!true && true", BoolRoot(expr=BinBoolExpr(
            left=NotExpr(operand=BoolLit(value=True)), right=BoolLit(value=True), op=BinLogicOp.AND))),
        ("1 / 0", ArithRoot(expr=BinArithExpr(
            left=IntLit(value=1), right=IntLit(value=0), op=BinArithOp.INT_DIV))),
    ]


# -- podkomendy ------------------------------------------------------------

def _eval(args: argparse.Namespace, settings: Settings) -> int:
    text = _read_text(args)
    try:
        expr = _EXPR_ADAPTER.validate_json(text)
    except ValidationError as e:
        print(f"Błąd: niepoprawne drzewo Expr:\n{e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    evaluator = make_evaluator(args.evaluator or settings.evaluator)
    try:
        result = evaluator.explain(expr)
    except EvaluationError as e:
        logger.warning("Evaluation failed (%s): %s", e.code, e)
        print(f"Błąd ewaluacji [{e.code}]: {e}", file=sys.stderr)
        return EXIT_EVAL_ERROR

    _print_kv_table("Result", [
        ("evaluator", evaluator.name),
        ("kind", result.value.value_type),
        ("value", _fmt_value(result.value.value)),
    ])
    if args.explain:
        _print_steps_table(result.steps)
    return 0


def _demo(args: argparse.Namespace, settings: Settings) -> int:
    evaluator = make_evaluator(args.evaluator or settings.evaluator)

    table = Table(title=f"Demo ({evaluator.name})", box=box.ASCII)
    table.add_column("Expression", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Result")
    for label, expr in _demo_cases():
        try:
            value = evaluator.evaluate(expr)
            table.add_row(label, value.value_type, _fmt_value(value.value))
        except EvaluationError as e:
            table.add_row(label, "error", e.code)
    _console().print(table)
    return 0


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="boolarith",
        description="BoolArith - CLI (lokalny, bez serwera API)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Policz drzewo Expr (JSON)")
    p.add_argument("--file", "-f", help="Ścieżka do pliku JSON z drzewem")
    p.add_argument("--text", "-t", help="Drzewo JSON (lub stdin)")
    p.add_argument("--explain", "-x", action="store_true",
                   help="Pokaż kroki redukcji")
    p.add_argument("--evaluator", choices=["recursive", "stack"],
                   help="Nadpisz BOOLARITH_EVALUATOR")

    # demo
    p = sub.add_parser("demo", help="Policz przykładowe drzewa")
    p.add_argument("--evaluator", choices=["recursive", "stack"],
                   help="Nadpisz BOOLARITH_EVALUATOR")

    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    cmds = {
        "eval": _eval,
        "demo": _demo,
    }
    return cmds[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
