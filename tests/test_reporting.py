from __future__ import annotations

import json
from pathlib import Path

import click

from cptest.core import CaseResult, ExecutionResult, Verdict, compare_text
from cptest.reporting import JsonReporter, ReportManager, TerminalReporter


def test_verdict_tags_are_fixed_width() -> None:
    reporter = TerminalReporter(use_color=False)
    assert reporter.verdict_tag(Verdict.AC) == " A C "
    assert reporter.verdict_tag(Verdict.WA) == " W A "
    assert reporter.verdict_tag(Verdict.TLE) == " T L E "
    assert reporter.verdict_tag(Verdict.RTE) == " R T E "


def test_colored_tag_keeps_text() -> None:
    tag = TerminalReporter(use_color=True).verdict_tag(Verdict.TLE)
    assert click.unstyle(tag) == " T L E "
    assert tag != " T L E "


def test_diff_table_layout() -> None:
    comparison = compare_text("1\n2\n", "1\n3\n4\n")
    lines = TerminalReporter(use_color=False, terminal_width=80).render_diff(comparison)
    width = 16
    assert lines[0] == "Your Output".center(width) + "|" + "Correct Answer".center(width)
    assert lines[1] == " " * width + "|" + " " * width
    rows = lines[2:]
    assert len(rows) == 4
    assert rows[0] == "1".ljust(width) + "|" + "1".ljust(width) + " =="
    assert rows[1] == "2".ljust(width) + "|" + "3".ljust(width) + " !="
    assert rows[2] == " " * width + "|" + "4".ljust(width) + " !="
    assert rows[3] == " " * width + "|" + " " * width + " !="


def test_diff_column_follows_longest_output_line() -> None:
    comparison = compare_text("x" * 20 + "\n", "y\n")
    lines = TerminalReporter(use_color=False, terminal_width=200).render_diff(comparison)
    assert lines[2].startswith("x" * 20 + "|y" + " " * 19)


def test_summary_banner() -> None:
    reporter = TerminalReporter(use_color=False)
    lines = reporter.render_summary(3, 4)
    assert lines[2] == "Summary: | 3 / 4 AC |"
    assert lines[1] == " " * len("Summary: ") + "+" * len("| 3 / 4 AC |")
    assert reporter.render_summary(4, 4)[2].endswith("| 4 / 4 AC | \U0001F389\U0001F389\U0001F389")


def test_accepted_output_is_echoed(capsys) -> None:
    result = CaseResult(
        test_id=2,
        verdict=Verdict.AC,
        execution=ExecutionResult(exit_code=0, stdout="hello\n"),
        comparison=compare_text("hello\n", "hello\n"),
    )
    TerminalReporter(use_color=False).on_case_result(result)
    out = capsys.readouterr().out
    assert "Test Case 2:  A C " in out
    assert "hello" in out


def test_json_reporter_writes_after_each_case(tmp_path: Path) -> None:
    path = tmp_path / "reports" / "report.json"
    reporter = JsonReporter(path=str(path))
    reporter.on_start(tmp_path / "sol.py", 2)
    wrong = CaseResult(
        test_id=1,
        verdict=Verdict.WA,
        execution=ExecutionResult(exit_code=0, stdout="5\n", elapsed_ms=4),
        comparison=compare_text("5\n", "6\n"),
    )
    reporter.on_case_result(wrong)
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["summary"] == {"total": 1, "accepted": 0}
    assert payload["cases"][0]["mismatched_rows"] == [0]

    slow = CaseResult(test_id=2, verdict=Verdict.TLE, execution=ExecutionResult(exit_code=-1, timed_out=True))
    reporter.on_case_result(slow)
    reporter.on_complete([wrong, slow])
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["solution"].endswith("sol.py")
    assert [case["verdict"] for case in payload["cases"]] == ["WA", "TLE"]
    assert payload["cases"][1]["timed_out"] is True


def test_report_manager_fans_out(tmp_path: Path, capsys) -> None:
    path = tmp_path / "report.json"
    manager = ReportManager([TerminalReporter(use_color=False), JsonReporter(path=str(path))])
    result = CaseResult(test_id=1, verdict=Verdict.RTE, execution=ExecutionResult(exit_code=1, stderr="oops\n"))
    manager.on_case_result(result)
    manager.on_complete([result])
    assert "oops" in capsys.readouterr().out
    assert json.loads(path.read_text(encoding="utf-8"))["cases"][0]["stderr"] == "oops\n"


def test_terminal_summary_comes_from_score_hook(capsys) -> None:
    reporter = TerminalReporter(use_color=False)
    result = CaseResult(test_id=1, verdict=Verdict.AC, comparison=compare_text("1\n", "1\n"))
    reporter.on_complete([result])
    assert "Summary" not in capsys.readouterr().out
    reporter.on_summary(1, 1)
    assert "| 1 / 1 AC |" in capsys.readouterr().out
