from pathlib import Path

from cptest.core import TestCaseRecorder, list_ids


def _reader(*blocks: str):
    pending = list(blocks)
    return lambda: pending.pop(0)


def test_first_recorded_case_gets_id_one(tmp_path: Path, capsys) -> None:
    solution = tmp_path / "sol.cpp"
    solution.write_text("", encoding="utf-8")
    recorder = TestCaseRecorder(read_block=_reader("1 2\n", "3\n"))
    assert recorder.record(solution) == 1
    assert (tmp_path / "sol.in1").read_text(encoding="utf-8") == "1 2\n"
    assert (tmp_path / "sol.ans1").read_text(encoding="utf-8") == "3\n"
    assert "Test case 1 written." in capsys.readouterr().out


def test_recorded_id_follows_the_maximum(tmp_path: Path) -> None:
    solution = tmp_path / "sol.cpp"
    for test_id in (1, 4):
        (tmp_path / f"sol.in{test_id}").write_text("x\n", encoding="utf-8")
    recorder = TestCaseRecorder(read_block=_reader("in", "ans"))
    assert recorder.record(solution) == 5
    assert (tmp_path / "sol.in5").read_text(encoding="utf-8") == "in"
    assert (tmp_path / "sol.ans5").read_text(encoding="utf-8") == "ans"
    assert list_ids(solution) == [1, 4, 5]
