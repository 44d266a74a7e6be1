"""Data models for the configuration file."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class LanguageCommands:
    """Run and debug command strings for one language."""

    command: str
    debug_command: str = ""


@dataclass(frozen=True)
class CptestConfig:
    languages: Mapping[str, LanguageCommands] = field(default_factory=dict)
    source: Optional[Path] = None

    def to_mapping(self) -> Dict[str, Any]:
        return {
            "languages": {
                name: {"command": cmds.command, "debug_command": cmds.debug_command}
                for name, cmds in self.languages.items()
            }
        }


def default_config() -> CptestConfig:
    return CptestConfig(
        languages={
            "cpp": LanguageCommands(
                command="g++ -std=gnu++17 -O2",
                debug_command="g++ -std=gnu++17 -DDEBUG -Wshadow -Wall",
            ),
            "py": LanguageCommands(command="python3", debug_command="python3 -O"),
        }
    )
