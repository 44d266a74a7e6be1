"""Builds argv lists from configured command strings and runs the compiler."""
from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from cptest.config import CptestConfig
from cptest.errors import CommandNotConfiguredError

from .catalog import LanguageSpec

logger = logging.getLogger(__name__)


def split_command(command: str) -> List[str]:
    """Naive whitespace tokenization; quoting is not supported."""

    return command.split()


@dataclass
class CompileOutcome:
    ok: bool
    exit_code: int
    stdout: str
    stderr: str


class Toolchain:
    """Resolves run/debug/compile commands for one solution file."""

    def __init__(self, config: CptestConfig, spec: LanguageSpec, solution: Path) -> None:
        self._config = config
        self.spec = spec
        self.solution = Path(solution)

    def segmented_command(self, *, debug: bool) -> List[str]:
        lang = self._config.languages.get(self.spec.language.value)
        raw = ""
        if lang is not None:
            raw = lang.debug_command if debug else lang.command
        argv = split_command(raw or "")
        if not argv:
            raise CommandNotConfiguredError(self.spec.language.value, debug=debug)
        return argv

    def binary_path(self, *, debug: bool) -> Path:
        suffix = ".debug.exe" if debug else ".exe"
        return self.solution.with_name(self.solution.stem + suffix)

    def execution_command(self, *, debug: bool) -> Tuple[str, List[str]]:
        """Executable and arguments that run the solution."""

        if self.spec.needs_compile:
            return str(self.binary_path(debug=debug)), []
        argv = self.segmented_command(debug=debug)
        return argv[0], argv[1:] + [str(self.solution)]

    def compile(self, *, debug: bool) -> CompileOutcome:
        argv = self.segmented_command(debug=debug)
        argv = argv + [str(self.solution), "-o", str(self.binary_path(debug=debug))]
        logger.debug("compiling: %s", argv)
        try:
            proc = subprocess.run(argv, capture_output=True, text=True)
        except OSError as exc:
            return CompileOutcome(ok=False, exit_code=127, stdout="", stderr=f"{argv[0]}: {exc.strerror or exc}\n")
        logger.debug("compiler exited with %d", proc.returncode)
        return CompileOutcome(
            ok=proc.returncode == 0,
            exit_code=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )
