"""Interactive capture of new (input, answer) pairs."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import click

from . import paths

logger = logging.getLogger(__name__)

BlockReader = Callable[[], str]


def read_until_eof() -> str:
    return sys.stdin.read()


class TestCaseRecorder:
    """Reads an input block and an answer block, each ended by Ctrl+D."""

    __test__ = False

    def __init__(self, *, read_block: Optional[BlockReader] = None) -> None:
        self._read_block = read_block or read_until_eof

    def next_id(self, solution: Path) -> int:
        ids = paths.list_ids(solution)
        return max(ids) + 1 if ids else 1

    def record(self, solution: Path) -> int:
        test_id = self.next_id(solution)
        click.echo("\nPress ctrl+D to finish your input\n")
        click.echo("Test Case Input:\n")
        input_text = self._read_block()
        click.echo("\nTest Case Correct Output:\n")
        answer_text = self._read_block()
        input_file = paths.input_path(solution, test_id)
        answer_file = paths.answer_path(solution, test_id)
        input_file.write_text(input_text, encoding="utf-8")
        answer_file.write_text(answer_text, encoding="utf-8")
        logger.debug("recorded test %d into %s and %s", test_id, input_file, answer_file)
        click.echo(f"\nTest case {test_id} written.")
        return test_id
