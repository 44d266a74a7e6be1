"""Terminal reporter rendering verdicts, diffs and the score banner."""
from __future__ import annotations

import shutil
from typing import List, Optional

import click

from cptest.core.comparator import column_width, display_text, trimmed_lines
from cptest.core.models import CaseResult, ComparisonResult, DiffRow, Verdict

from .base import Reporter


VERDICT_COLORS = {
    Verdict.AC: "green",
    Verdict.WA: "red",
    Verdict.TLE: "magenta",
    Verdict.RTE: "blue",
}

MATCH_MARK = " =="
DIFF_MARK = " !="


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True, terminal_width: Optional[int] = None) -> None:
        self._use_color = use_color
        self._terminal_width = terminal_width

    def on_evaluating(self, test_id: int) -> None:
        click.echo("\nEvaluating...\n")

    def on_case_result(self, result: CaseResult) -> None:
        click.echo(f"Test Case {result.test_id}: {self.verdict_tag(result.verdict)}\n")
        comparison = result.comparison
        execution = result.execution
        if result.verdict is Verdict.RTE:
            if comparison is not None and comparison.message:
                click.echo(comparison.message)
            elif execution is not None:
                if execution.stdout:
                    click.echo(execution.stdout)
                if execution.stderr:
                    click.echo(execution.stderr)
        elif comparison is not None and result.verdict is Verdict.AC:
            self._print_accepted(comparison)
        elif comparison is not None and result.verdict is Verdict.WA:
            for line in self.render_diff(comparison):
                click.echo(line)
            click.echo()

    def on_summary(self, accepted: int, total: int) -> None:
        for line in self.render_summary(accepted, total):
            click.echo(line)

    def on_compile_error(self, stderr: str) -> None:
        click.echo(self._tag(" Compilation Error ", "yellow") + "\n")
        if stderr:
            click.echo(stderr)

    def on_debug_start(self, test_id: Optional[int]) -> None:
        if test_id is None:
            click.echo("Running with debugging flags\n\nEnter your input manually\n")
        else:
            click.echo(f"Running Test Case {test_id} with debugging flags\n")

    def on_notice(self, message: str) -> None:
        click.echo(message)

    def verdict_tag(self, verdict: Verdict) -> str:
        return self._tag(verdict.tag, VERDICT_COLORS[verdict])

    def render_diff(self, comparison: ComparisonResult) -> List[str]:
        """Two-column table; one row per line index of the longer side."""

        output_lines = trimmed_lines(comparison.output)
        width = column_width(output_lines, self._width())
        lines = [
            self._tag("Your Output".center(width), "red") + "|" + self._tag("Correct Answer".center(width), "green"),
            "".ljust(width) + "|" + "".ljust(width),
        ]
        lines.extend(self._render_row(row, width) for row in comparison.rows)
        return lines

    def render_summary(self, accepted: int, total: int) -> List[str]:
        summary = "Summary: "
        plain = f"| {accepted} / {total} AC |"
        message = f"| {accepted} / {total} {self._styled('AC', fg='bright_green')} |"
        if accepted == total:
            message += " \U0001F389\U0001F389\U0001F389"
        border = " " * len(summary) + "+" * len(plain)
        return ["", border, summary + message, border, ""]

    def _render_row(self, row: DiffRow, width: int) -> str:
        left = display_text(row.actual if row.actual is not None else "").ljust(width)
        right = display_text(row.expected if row.expected is not None else "").ljust(width)
        if self._use_color:
            marker = click.style("  ", bg="green" if row.matches else "red")
        else:
            marker = MATCH_MARK if row.matches else DIFF_MARK
        return left + "|" + right + marker

    def _print_accepted(self, comparison: ComparisonResult) -> None:
        if comparison.whitespace_advisory:
            click.echo(self._styled("Check leading and trailing blank spaces", fg="yellow") + "\n")
        click.echo(self._tag("Your Output", "green") + "\n")
        click.echo(display_text(comparison.output))

    def _width(self) -> int:
        if self._terminal_width is not None:
            return self._terminal_width
        return shutil.get_terminal_size().columns

    def _tag(self, text: str, bg: str) -> str:
        if not self._use_color:
            return text
        return click.style(text, fg="bright_white", bg=bg)

    def _styled(self, text: str, *, fg: str) -> str:
        if not self._use_color:
            return text
        return click.style(text, fg=fg)
