"""Utilities for comparing solution output with the expected answer."""
from __future__ import annotations

from itertools import zip_longest
from pathlib import Path
from typing import List, Sequence

from .models import ComparisonResult, DiffRow, Verdict

MIN_COLUMN_WIDTH = 16
TERMINAL_MARGIN = 8


def evaluate(output_path: Path, answer_path: Path) -> ComparisonResult:
    """Compare the output artifact of a successful run with its answer."""

    output_path = Path(output_path)
    answer_path = Path(answer_path)
    if not output_path.exists():
        return ComparisonResult(verdict=Verdict.RTE, message=f"output file not found in {output_path}")
    if not answer_path.exists():
        return ComparisonResult(verdict=Verdict.RTE, message=f"answer file not found in {answer_path}")
    return compare_text(_decode(output_path.read_bytes()), _decode(answer_path.read_bytes()))


def _decode(data: bytes) -> str:
    # surrogateescape keeps undecodable bytes distinct; no newline translation
    return data.decode("utf-8", errors="surrogateescape")


def display_text(text: str) -> str:
    """Make text produced by ``evaluate`` safe to print."""

    return text.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


def compare_text(output: str, answer: str) -> ComparisonResult:
    if output == answer:
        return ComparisonResult(verdict=Verdict.AC, output=output)

    output_lines = trimmed_lines(output)
    answer_lines = trimmed_lines(answer)
    if output_lines == answer_lines:
        return ComparisonResult(verdict=Verdict.AC, output=output, whitespace_advisory=True)

    return ComparisonResult(
        verdict=Verdict.WA,
        output=output,
        rows=diff_rows(output_lines, answer_lines),
    )


def trimmed_lines(text: str) -> List[str]:
    return [line.strip() for line in text.split("\n")]


def diff_rows(output_lines: Sequence[str], answer_lines: Sequence[str]) -> List[DiffRow]:
    """Pair lines by position; row ``i`` holds line ``i`` of each side."""

    return [
        DiffRow(index=index, actual=actual, expected=expected)
        for index, (actual, expected) in enumerate(zip_longest(output_lines, answer_lines))
    ]


def column_width(output_lines: Sequence[str], terminal_width: int) -> int:
    longest = max((len(line) for line in output_lines), default=0)
    return min(max(longest, MIN_COLUMN_WIDTH), terminal_width - TERMINAL_MARGIN)
