from __future__ import annotations

import json
from pathlib import Path

from logger.logger import JSONLogger, run_record
from simulator.errors import StuckState
from simulator.turing_machine import RunResult

PATHS = {"alphabet_path": "a", "tape_path": "t", "program_path": "p"}


def read_jsonl(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_log_appends_to_daily_file(tmp_path: Path) -> None:
    json_logger = JSONLogger(str(tmp_path), "run_")
    json_logger.log({"n": 1})
    json_logger.log_batch([{"n": 2}, {"n": 3}])

    log_path = Path(json_logger.current_log)
    assert log_path.name == f"run_{json_logger.today}.jsonl"
    assert [e["n"] for e in read_jsonl(log_path)] == [1, 2, 3]


def test_outcome_files(tmp_path: Path) -> None:
    json_logger = JSONLogger(str(tmp_path))
    json_logger.log_halting([{"status": "halted"}])
    json_logger.log_failures([{"status": "stuck"}, {"status": "step_limit"}])

    assert len(read_jsonl(tmp_path / f"halting_{json_logger.today}.jsonl")) == 1
    assert len(read_jsonl(tmp_path / f"failed_{json_logger.today}.jsonl")) == 2


def test_run_record_for_halted_run() -> None:
    result = RunResult(tape="001", head=0, state=0, steps=1, halted=True)
    record = run_record(PATHS, "halted", result)
    assert record["status"] == "halted"
    assert record["final_tape"] == "001"
    assert record["steps"] == 1
    assert record["error"] is None
    assert record["program_path"] == "p"
    json.dumps(record)


def test_run_record_for_load_failure_and_stuck_run() -> None:
    record = run_record(PATHS, "error", error=ValueError("boom"))
    assert record["steps"] is None
    assert record["error"] == "boom"

    result = RunResult(tape="a", head=0, state=0, steps=0, halted=False)
    record = run_record(PATHS, "stuck", result, StuckState(0, "a"))
    assert record["steps"] == 0
    assert record["error"] == "No applicable rule for state 0, symbol [a]"
