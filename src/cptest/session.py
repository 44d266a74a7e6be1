"""Drives the build, run and evaluation of test cases for one solution file."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from cptest.config import CptestConfig
from cptest.core import comparator, executor, paths
from cptest.core.directives import read_time_limit
from cptest.core.models import CaseResult, Verdict
from cptest.errors import (
    CompilationError,
    NoTestCasesError,
    SolutionNotFoundError,
    TestCaseNotFoundError,
    UnsupportedLanguageError,
)
from cptest.languages import LanguageSpec, Toolchain, detect_language
from cptest.reporting import Reporter, TerminalReporter

logger = logging.getLogger(__name__)


@dataclass
class SessionSummary:
    accepted: int
    total: int
    results: List[CaseResult] = field(default_factory=list)

    @property
    def all_accepted(self) -> bool:
        return self.accepted == self.total


class TestSession:
    """Runs the stored test cases of a solution one after another."""

    __test__ = False

    def __init__(
        self,
        config: CptestConfig,
        solution: Path,
        *,
        reporter: Optional[Reporter] = None,
    ) -> None:
        solution = Path(solution)
        if not solution.is_file():
            raise SolutionNotFoundError(solution)
        spec = detect_language(solution)
        if spec is None:
            raise UnsupportedLanguageError(solution)
        self.solution = solution
        self.language: LanguageSpec = spec
        self.toolchain = Toolchain(config, spec, solution)
        self.time_limit_ms = read_time_limit(solution, spec.comment_marker)
        self.reporter = reporter or TerminalReporter()

    def run_one(self, test_id: int, compile: bool) -> Verdict:
        self.reporter.on_start(self.solution, 1)
        result = self._execute(test_id, compile)
        self.reporter.on_complete([result])
        return result.verdict

    def run_all(self, compile: bool) -> SessionSummary:
        """Run every stored case in ascending id order; never stops early."""

        ids = paths.list_ids(self.solution)
        if not ids:
            raise NoTestCasesError(self.solution)
        self.reporter.on_start(self.solution, len(ids))
        results: List[CaseResult] = []
        for index, test_id in enumerate(ids):
            results.append(self._execute(test_id, compile and index == 0))
        accepted = sum(1 for result in results if result.passed)
        self.reporter.on_summary(accepted, len(results))
        self.reporter.on_complete(results)
        return SessionSummary(accepted=accepted, total=len(ids), results=results)

    def debug_one(self, test_id: int, compile: bool) -> int:
        case = paths.case_paths(self.solution, test_id)
        if not case.input.is_file():
            raise TestCaseNotFoundError(case.input)
        if compile:
            self.compile(debug=True)
        command, args = self.toolchain.execution_command(debug=True)
        self.reporter.on_debug_start(test_id)
        return executor.passthrough(command, args, case.input)

    def debug_with_user_input(self, compile: bool) -> int:
        if compile:
            self.compile(debug=True)
        command, args = self.toolchain.execution_command(debug=True)
        self.reporter.on_debug_start(None)
        return executor.passthrough(command, args)

    def compile(self, *, debug: bool) -> None:
        if not self.language.needs_compile:
            return
        outcome = self.toolchain.compile(debug=debug)
        if not outcome.ok:
            self.reporter.on_compile_error(outcome.stderr)
            raise CompilationError(self.solution, outcome.stderr)

    def _execute(self, test_id: int, compile: bool) -> CaseResult:
        case = paths.case_paths(self.solution, test_id)
        if not case.input.is_file():
            raise TestCaseNotFoundError(case.input)
        if compile:
            self.compile(debug=False)
        command, args = self.toolchain.execution_command(debug=False)
        self.reporter.on_evaluating(test_id)
        execution = executor.run(command, args, case.input, self.time_limit_ms, case.output)
        if execution.timed_out:
            result = CaseResult(test_id=test_id, verdict=Verdict.TLE, execution=execution)
        elif execution.exit_code != 0:
            result = CaseResult(test_id=test_id, verdict=Verdict.RTE, execution=execution)
        else:
            comparison = comparator.evaluate(case.output, case.answer)
            result = CaseResult(
                test_id=test_id,
                verdict=comparison.verdict,
                execution=execution,
                comparison=comparison,
            )
        logger.debug("test %d of %s: %s", test_id, self.solution, result.verdict.value)
        self.reporter.on_case_result(result)
        return result
