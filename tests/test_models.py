"""Tests for SuiteResult / CheckResult tallies and persistence."""

import json

from calcsuite.models import CheckResult, MathOp, SuiteResult, TextOp


def _result(*outcomes: bool) -> SuiteResult:
    return SuiteResult(
        suite="demo",
        timestamp="20260101T000000Z",
        checks=[CheckResult(section="s", label=f"c{i}", passed=p) for i, p in enumerate(outcomes)],
    )


# --- Verdicts ---

def test_verdict_no_tests():
    r = _result()
    assert r.verdict == "no-tests"
    assert r.exit_code == 0


def test_verdict_pass():
    r = _result(True, True)
    assert (r.total, r.passed, r.failed) == (2, 2, 0)
    assert r.verdict == "pass"
    assert r.exit_code == 0


def test_verdict_partial():
    r = _result(True, False, True)
    assert (r.total, r.passed, r.failed) == (3, 2, 1)
    assert r.verdict == "partial"
    assert r.exit_code == 1


def test_verdict_fail():
    r = _result(False)
    assert r.verdict == "fail"
    assert r.exit_code == 1


# --- Serialization ---

def test_to_dict_includes_tallies():
    d = _result(True, False).to_dict()
    assert d["total"] == 2
    assert d["passed"] == 1
    assert d["failed"] == 1
    assert d["verdict"] == "partial"
    assert d["exit_code"] == 1
    assert d["checks"][1]["label"] == "c1"


def test_save_and_load(tmp_path):
    r = SuiteResult(
        suite="demo",
        timestamp="20260101T000000Z",
        checks=[CheckResult(section="mathops", label="add", passed=True, expected=8, actual=8)],
    )
    path = tmp_path / "out" / "results.json"
    r.save(path)
    assert json.loads(path.read_text(encoding="utf-8"))["verdict"] == "pass"
    loaded = SuiteResult.load(path)
    assert loaded == r


def test_load_missing(tmp_path):
    assert SuiteResult.load(tmp_path / "nope.json") is None


def test_load_corrupt(tmp_path):
    p = tmp_path / "bad.json"
    p.write_text("{not json", encoding="utf-8")
    assert SuiteResult.load(p) is None


# --- Operation enums ---

def test_operation_values():
    assert MathOp("divide") is MathOp.DIVIDE
    assert TextOp("upper") is TextOp.UPPER
