"""Core dataclasses shared across cptest subsystems."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


DEFAULT_TIME_LIMIT_MS = 3000
TIMEOUT_GRACE_MS = 500


class Verdict(str, Enum):
    """Terminal classification of one test-case run."""

    AC = "AC"
    WA = "WA"
    TLE = "TLE"
    RTE = "RTE"

    @property
    def tag(self) -> str:
        # " A C ", " T L E ", ...
        return " " + " ".join(self.value) + " "


@dataclass(frozen=True)
class CasePaths:
    """The three sibling artifacts of one test case."""

    test_id: int
    input: Path
    answer: Path
    output: Path


@dataclass
class ExecutionResult:
    """Captured outcome of one spawned solution process."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False
    elapsed_ms: int = 0

    @property
    def succeeded(self) -> bool:
        return not self.timed_out and self.exit_code == 0


@dataclass(frozen=True)
class DiffRow:
    index: int
    actual: Optional[str]
    expected: Optional[str]

    @property
    def matches(self) -> bool:
        return self.actual is not None and self.expected is not None and self.actual == self.expected


@dataclass
class ComparisonResult:
    """Outcome of comparing an output artifact with its answer."""

    verdict: Verdict
    output: str = ""
    whitespace_advisory: bool = False
    rows: List[DiffRow] = field(default_factory=list)
    message: Optional[str] = None


@dataclass
class CaseResult:
    """Outcome of executing a single test case."""

    test_id: int
    verdict: Verdict
    execution: Optional[ExecutionResult] = None
    comparison: Optional[ComparisonResult] = None

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.AC
