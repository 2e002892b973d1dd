from __future__ import annotations

from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings


def _int(n: int) -> dict:
    return {"node_type": "int_lit", "value": n}


def _bin(left: dict, right: dict, op: str) -> dict:
    return {"node_type": "bin_arith", "left": left, "right": right, "op": op}


def _client(evaluator: str = "recursive") -> TestClient:
    return TestClient(create_app(Settings(evaluator=evaluator)))


def test_evaluate_arith_root():
    body = {"expr": {"node_type": "arith", "expr": _bin(_int(51), _int(17), "int_div")}}

    with _client() as client:
        resp = client.post("/evaluate", json=body)

    assert resp.status_code == 200
    assert resp.json() == {"value": {"value_type": "int", "value": 3}, "steps": []}


def test_evaluate_bool_root_with_explain_on_stack_evaluator():
    body = {
        "expr": {
            "node_type": "bool",
            "expr": {
                "node_type": "arith_cmp",
                "left": _bin(_int(12), _int(155), "add"),
                "right": _int(167),
                "op": "lte",
            },
        },
        "explain": True,
    }

    with _client("stack") as client:
        resp = client.post("/evaluate", json=body)

    assert resp.status_code == 200
    assert resp.json() == {
        "value": {"value_type": "bool", "value": True},
        "steps": ["12 + 155 = 167", "167 <= 167 = true"],
    }


def test_division_by_zero_is_reported_as_422():
    body = {"expr": {"node_type": "arith", "expr": _bin(_int(7), _int(0), "int_div")}}

    with _client() as client:
        resp = client.post("/evaluate", json=body)

    assert resp.status_code == 422
    assert resp.json()["error"] == "division_by_zero"


def test_overflow_is_reported_separately():
    body = {"expr": {"node_type": "arith", "expr": _bin(_int(2**63 - 1), _int(1), "add")}}

    with _client() as client:
        resp = client.post("/evaluate", json=body)

    assert resp.status_code == 422
    assert resp.json()["error"] == "integer_overflow"


def test_malformed_tree_fails_validation():
    body = {"expr": {"node_type": "arith", "expr": {"node_type": "int_lit", "value": True}}}

    with _client() as client:
        resp = client.post("/evaluate", json=body)

    assert resp.status_code == 422
    assert "error" not in resp.json()
    assert resp.json()["detail"]


def test_health_reports_configured_evaluator():
    settings = Settings(evaluator="stack")

    with TestClient(create_app(settings)) as client:
        resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {
        "status": "ok",
        "evaluator": "stack",
        "version": settings.app_version,
    }
