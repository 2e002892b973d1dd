from __future__ import annotations

import io
import json

import pytest

from boolarith import EXIT_BAD_INPUT, EXIT_EVAL_ERROR, main


def _sub_tree(left: int, right: int) -> str:
    return json.dumps({
        "node_type": "arith",
        "expr": {
            "node_type": "bin_arith",
            "left": {"node_type": "int_lit", "value": left},
            "right": {"node_type": "int_lit", "value": right},
            "op": "sub",
        },
    })


def test_eval_prints_result_table(capsys):
    code = main(["eval", "--text", _sub_tree(51, 17)])

    out = capsys.readouterr().out
    assert code == 0
    assert "34" in out
    assert "int" in out


def test_eval_explain_prints_steps(capsys):
    code = main(["eval", "--text", _sub_tree(51, 17), "--explain", "--evaluator", "stack"])

    out = capsys.readouterr().out
    assert code == 0
    assert "51 - 17 = 34" in out
    assert "stack" in out


def test_eval_reads_tree_from_file(tmp_path, capsys):
    path = tmp_path / "expr.json"
    path.write_text(_sub_tree(10, 3), encoding="utf-8")

    code = main(["eval", "--file", str(path)])

    assert code == 0
    assert "7" in capsys.readouterr().out


def test_eval_reads_tree_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(_sub_tree(3, 5)))

    code = main(["eval"])

    assert code == 0
    assert "-2" in capsys.readouterr().out


def test_eval_division_by_zero_exits_with_error_code(capsys):
    tree = json.loads(_sub_tree(1, 0))
    tree["expr"]["op"] = "int_div"

    code = main(["eval", "--text", json.dumps(tree)])

    assert code == EXIT_EVAL_ERROR
    assert "division_by_zero" in capsys.readouterr().err


def test_eval_rejects_malformed_tree(capsys):
    code = main(["eval", "--text", '{"node_type": "arith", "expr": {"node_type": "bool_lit", "value": true}}'])

    assert code == EXIT_BAD_INPUT
    assert "Expr" in capsys.readouterr().err


def test_eval_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["eval", "--file", str(tmp_path / "missing.json")])

    assert exc_info.value.code == EXIT_BAD_INPUT


def test_demo_lists_sample_results(capsys):
    code = main(["demo"])

    out = capsys.readouterr().out
    assert code == 0
    assert "51 / 17" in out
    assert "division_by_zero" in out
