"""Exceptions raised by cptest for conditions that stop a whole run."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence


class CptestError(Exception):
    """Base class for structural failures (per-test outcomes are verdicts)."""


class SolutionNotFoundError(CptestError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class UnsupportedLanguageError(CptestError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Unsupported language for file: {path}")
        self.path = path


class CommandNotConfiguredError(CptestError):
    def __init__(self, language: str, *, debug: bool) -> None:
        kind = "debug_command" if debug else "command"
        super().__init__(f"{kind} not specified for '{language}' in the cptest configuration")
        self.language = language
        self.debug = debug


class ConfigError(CptestError):
    """Configuration file exists but cannot be used."""


class ConfigNotFoundError(CptestError):
    def __init__(self, searched: Sequence[Path]) -> None:
        locations = "\n".join(f"-> {path}" for path in searched)
        super().__init__(
            "configuration file not found in any of the following locations:\n"
            f"{locations}\n"
            "You can create one in your home directory by running 'cptest init'"
        )
        self.searched = tuple(searched)


class CompilationError(CptestError):
    def __init__(self, path: Path, stderr: str = "") -> None:
        super().__init__(f"Compilation failed for {path}")
        self.path = path
        self.stderr = stderr


class NoTestCasesError(CptestError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"No testcases available for this file: {path}")
        self.path = path


class TestCaseNotFoundError(CptestError):
    __test__ = False

    def __init__(self, path: Path) -> None:
        super().__init__(f"Test case input not found: {path}")
        self.path = path
