"""Spawns solution processes with a hard wall-clock deadline."""
from __future__ import annotations

import errno
import logging
import subprocess
import time
from pathlib import Path
from typing import Optional, Sequence

from .models import TIMEOUT_GRACE_MS, ExecutionResult

logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


def _display(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def run(
    command: str,
    args: Sequence[str],
    input_path: Path,
    time_limit_ms: int,
    output_path: Optional[Path] = None,
) -> ExecutionResult:
    """Run ``command`` with ``input_path`` on stdin and capture both streams.

    The process is killed once ``time_limit_ms`` plus the fixed grace period
    has elapsed. stdout is persisted to ``output_path`` only when the run
    exits with status zero before the deadline.
    """

    argv = [command, *args]
    input_bytes = Path(input_path).read_bytes()
    deadline_s = (time_limit_ms + TIMEOUT_GRACE_MS) / 1000.0
    logger.debug("spawning %s (deadline %.3fs) < %s", argv, deadline_s, input_path)

    start = time.monotonic()
    try:
        proc = subprocess.run(
            argv,
            input=input_bytes,
            capture_output=True,
            timeout=deadline_s,
        )
    except subprocess.TimeoutExpired:
        elapsed = int((time.monotonic() - start) * 1000)
        logger.debug("%s killed after %d ms", argv[0], elapsed)
        return ExecutionResult(exit_code=-1, timed_out=True, elapsed_ms=elapsed)
    except OSError as exc:
        logger.debug("failed to spawn %s: %s", argv[0], exc)
        code = EXIT_NOT_FOUND if exc.errno == errno.ENOENT else EXIT_NOT_EXECUTABLE
        return ExecutionResult(exit_code=code, stderr=f"{argv[0]}: {exc.strerror or exc}\n")
    elapsed = int((time.monotonic() - start) * 1000)

    result = ExecutionResult(
        exit_code=proc.returncode,
        stdout=_display(proc.stdout),
        stderr=_display(proc.stderr),
        elapsed_ms=elapsed,
    )
    logger.debug("%s exited with %d after %d ms", argv[0], proc.returncode, elapsed)
    if result.succeeded and output_path is not None:
        Path(output_path).write_bytes(proc.stdout)
        logger.debug("wrote %d bytes to %s", len(proc.stdout), output_path)
    return result


def passthrough(command: str, args: Sequence[str], input_path: Optional[Path] = None) -> int:
    """Run with stdout/stderr attached to the terminal; returns the exit status.

    stdin comes from ``input_path`` when given, otherwise from the terminal.
    No deadline applies and nothing is captured.
    """

    argv = [command, *args]
    logger.debug("spawning %s in passthrough mode", argv)
    if input_path is None:
        return subprocess.run(argv).returncode
    with Path(input_path).open("rb") as stdin:
        return subprocess.run(argv, stdin=stdin).returncode
