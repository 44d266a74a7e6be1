import sys
import textwrap
from pathlib import Path

import pytest

from cptest.config import CptestConfig, LanguageCommands


@pytest.fixture
def py_config() -> CptestConfig:
    """Configuration that runs Python solutions with the current interpreter."""

    return CptestConfig(
        languages={"py": LanguageCommands(command=sys.executable, debug_command=sys.executable)}
    )


@pytest.fixture
def make_solution(tmp_path: Path):
    """Write a Python solution plus ``(input, answer)`` pairs numbered from 1."""

    def _make(source: str, cases=(), name: str = "sol.py") -> Path:
        solution = tmp_path / name
        solution.write_text(textwrap.dedent(source), encoding="utf-8")
        stem = solution.with_suffix("")
        for index, (input_text, answer_text) in enumerate(cases, start=1):
            Path(f"{stem}.in{index}").write_text(input_text, encoding="utf-8")
            Path(f"{stem}.ans{index}").write_text(answer_text, encoding="utf-8")
        return solution

    return _make
