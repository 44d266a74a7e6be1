"""Sibling artifact paths for a solution file and its numbered test cases."""
from __future__ import annotations

import re
from pathlib import Path
from typing import List, Union

from .models import CasePaths

PathLike = Union[str, Path]


def _stem(path: PathLike) -> Path:
    path = Path(path)
    return path.with_name(path.stem) if path.suffix else path


def input_path(path: PathLike, test_id: int) -> Path:
    stem = _stem(path)
    return stem.with_name(f"{stem.name}.in{test_id}")


def answer_path(path: PathLike, test_id: int) -> Path:
    stem = _stem(path)
    return stem.with_name(f"{stem.name}.ans{test_id}")


def output_path(path: PathLike, test_id: int) -> Path:
    stem = _stem(path)
    return stem.with_name(f"{stem.name}.out{test_id}")


def case_paths(path: PathLike, test_id: int) -> CasePaths:
    return CasePaths(
        test_id=test_id,
        input=input_path(path, test_id),
        answer=answer_path(path, test_id),
        output=output_path(path, test_id),
    )


def list_ids(path: PathLike) -> List[int]:
    """Return the ids of every ``<stem>.in<digits>`` file next to ``path``, ascending."""

    stem = _stem(path)
    directory = stem.parent
    pattern = re.compile(re.escape(stem.name) + r"\.in([0-9]+)")
    ids: List[int] = []
    if not directory.is_dir():
        return ids
    for entry in directory.iterdir():
        match = pattern.fullmatch(entry.name)
        if match and entry.is_file():
            ids.append(int(match.group(1)))
    return sorted(ids)
