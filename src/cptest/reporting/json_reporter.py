"""JSON reporter writing machine-readable session results."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import click
from jsonschema import Draft7Validator

from cptest.core.models import CaseResult

from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION
from .base import Reporter

_validator = Draft7Validator(JSON_SCHEMA_V1)


class JsonReporter(Reporter):
    """Collects case results and writes them as a JSON document.

    The document is rewritten after every case so a single-case run still
    leaves a complete report behind.
    """

    def __init__(self, *, path: Optional[str] = None) -> None:
        self._path = Path(path) if path else None
        self._solution: Optional[Path] = None
        self._cases: List[Dict[str, Any]] = []

    def on_start(self, solution: Path, total: int) -> None:
        self._solution = Path(solution)
        self._cases.clear()

    def on_case_result(self, result: CaseResult) -> None:
        self._cases.append(_case_payload(result))
        if self._path is not None:
            self._write()

    def on_complete(self, results: Sequence[CaseResult]) -> None:
        self._write()

    def payload(self) -> Dict[str, Any]:
        accepted = sum(1 for case in self._cases if case["verdict"] == "AC")
        return {
            "schema_version": SCHEMA_VERSION,
            "solution": str(self._solution) if self._solution else None,
            "summary": {"total": len(self._cases), "accepted": accepted},
            "cases": list(self._cases),
        }

    def _write(self) -> None:
        payload = self.payload()
        _validator.validate(payload)
        text = json.dumps(payload, indent=2)
        if self._path is None:
            click.echo(text)
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(text + "\n", encoding="utf-8")


def _case_payload(result: CaseResult) -> Dict[str, Any]:
    execution = result.execution
    comparison = result.comparison
    payload: Dict[str, Any] = {
        "id": result.test_id,
        "verdict": result.verdict.value,
        "exit_code": execution.exit_code if execution else None,
        "timed_out": execution.timed_out if execution else False,
        "elapsed_ms": execution.elapsed_ms if execution else 0,
        "whitespace_advisory": comparison.whitespace_advisory if comparison else False,
    }
    if execution and execution.stderr:
        payload["stderr"] = execution.stderr
    if comparison and comparison.message:
        payload["message"] = comparison.message
    if comparison and comparison.rows:
        payload["mismatched_rows"] = [row.index for row in comparison.rows if not row.matches]
    return payload
