"""Reporter interface definitions."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from cptest.core.models import CaseResult


class Reporter:
    """Receives session lifecycle callbacks; every hook defaults to a no-op."""

    def on_start(self, solution: Path, total: int) -> None:
        pass

    def on_evaluating(self, test_id: int) -> None:
        pass

    def on_case_result(self, result: CaseResult) -> None:
        pass

    def on_summary(self, accepted: int, total: int) -> None:
        pass

    def on_complete(self, results: Sequence[CaseResult]) -> None:
        pass

    def on_compile_error(self, stderr: str) -> None:
        pass

    def on_debug_start(self, test_id: Optional[int]) -> None:
        pass

    def on_notice(self, message: str) -> None:
        pass


class ReportManager(Reporter):
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def on_start(self, solution: Path, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_start(solution, total)

    def on_evaluating(self, test_id: int) -> None:
        for reporter in self._reporters:
            reporter.on_evaluating(test_id)

    def on_case_result(self, result: CaseResult) -> None:
        for reporter in self._reporters:
            reporter.on_case_result(result)

    def on_summary(self, accepted: int, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_summary(accepted, total)

    def on_complete(self, results: Sequence[CaseResult]) -> None:
        for reporter in self._reporters:
            reporter.on_complete(results)

    def on_compile_error(self, stderr: str) -> None:
        for reporter in self._reporters:
            reporter.on_compile_error(stderr)

    def on_debug_start(self, test_id: Optional[int]) -> None:
        for reporter in self._reporters:
            reporter.on_debug_start(test_id)

    def on_notice(self, message: str) -> None:
        for reporter in self._reporters:
            reporter.on_notice(message)
