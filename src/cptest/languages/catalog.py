"""Language catalog keyed by source file extension."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple


class Language(str, Enum):
    CPP = "cpp"
    PY = "py"


@dataclass(frozen=True)
class LanguageSpec:
    """Static facts about a language; commands come from the configuration."""

    language: Language
    extensions: Tuple[str, ...]
    comment_marker: str
    needs_compile: bool


LANGUAGES: Dict[Language, LanguageSpec] = {
    Language.CPP: LanguageSpec(
        language=Language.CPP,
        extensions=(".cpp", ".cc", ".cxx"),
        comment_marker="//",
        needs_compile=True,
    ),
    Language.PY: LanguageSpec(
        language=Language.PY,
        extensions=(".py",),
        comment_marker="#",
        needs_compile=False,
    ),
}


def detect_language(path: Path) -> Optional[LanguageSpec]:
    suffix = Path(path).suffix.lower()
    for spec in LANGUAGES.values():
        if suffix in spec.extensions:
            return spec
    return None
