from __future__ import annotations

import json

import pytest

from linebalance import config as config_module
from linebalance.main import main

TASKS_CSV = "id,time,preds\nA,30,\nB,20,A\nC,40,A\nD,15,B;C\n"


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    monkeypatch.delenv("LINEBALANCE_CYCLE_TIME", raising=False)
    monkeypatch.setattr(config_module, "_global_config", None)


def test_solve_from_csv(tmp_path, capsys) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text(TASKS_CSV)

    assert main(["--mode", "solve", "--input", str(path), "--cycle-time", "50"]) == 0

    result = json.loads(capsys.readouterr().out)
    assert result["n_stations"] == 3
    assert [s["tasks"] for s in result["stations"]] == [["A", "B"], ["C"], ["D"]]


def test_solve_from_json_request_uses_file_cycle_time(tmp_path, capsys) -> None:
    path = tmp_path / "request.json"
    path.write_text(json.dumps({"tasks": [{"id": "X", "time": 80}], "cycle_time": 50}))

    assert main(["--mode", "solve", "--input", str(path)]) == 0

    result = json.loads(capsys.readouterr().out)
    assert result["stations"][0]["idle"] == 0
    assert result["cycle_time"] == 50


def test_solve_writes_output_file(tmp_path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps([{"id": "A", "time": 5}]))
    out = tmp_path / "out" / "result.json"

    assert main(["--mode", "solve", "--input", str(path), "--cycle-time", "10", "--output", str(out)]) == 0

    assert json.loads(out.read_text())["efficiency_percent"] == 50.0


def test_summarize_and_chart(tmp_path, capsys) -> None:
    path = tmp_path / "sales.csv"
    path.write_text("a,b\n1,2\n3,4")

    assert main(["--mode", "summarize", "--input", str(path)]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["rowCount"] == 2

    assert main(["--mode", "chart", "--input", str(path), "--x-key", "a", "--y-key", "b"]) == 0
    chart = json.loads(capsys.readouterr().out)
    assert chart["data"] == [{"a": 1.0, "b": 2.0}, {"a": 3.0, "b": 4.0}]


def test_summarize_dir(tmp_path, capsys) -> None:
    data_dir = tmp_path / "raw"
    data_dir.mkdir()
    (data_dir / "one.csv").write_text("a\n1")

    code = main(["--mode", "summarize-dir", "--data-dir", str(data_dir), "--output-dir", str(tmp_path / "s")])

    assert code == 0
    assert json.loads(capsys.readouterr().out)["files"] == ["one.csv"]
    assert (tmp_path / "s" / "one.summary.json").exists()


def test_missing_input_file_returns_error_code(tmp_path) -> None:
    assert main(["--mode", "summarize", "--input", str(tmp_path / "nope.csv")]) == 1


def test_chart_requires_keys() -> None:
    with pytest.raises(SystemExit):
        main(["--mode", "chart", "--input", "x.csv"])


def test_invalid_environment_cycle_time_returns_error_code(tmp_path, monkeypatch) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text(TASKS_CSV)
    monkeypatch.setenv("LINEBALANCE_CYCLE_TIME", "fifty")

    assert main(["--mode", "solve", "--input", str(path)]) == 1


def test_config_option_is_honored_on_every_call(tmp_path, capsys) -> None:
    path = tmp_path / "tasks.csv"
    path.write_text(TASKS_CSV)
    first = tmp_path / "first.yaml"
    first.write_text("solver:\n  cycle_time: 50\n")
    second = tmp_path / "second.yaml"
    second.write_text("solver:\n  cycle_time: 105\n")

    assert main(["--mode", "solve", "--input", str(path), "--config", str(first)]) == 0
    assert json.loads(capsys.readouterr().out)["n_stations"] == 3

    assert main(["--mode", "solve", "--input", str(path), "--config", str(second)]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["cycle_time"] == 105
    assert result["n_stations"] == 1
