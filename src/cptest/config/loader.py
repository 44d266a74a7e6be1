"""YAML loader and validation for the cptest configuration file."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from jsonschema import Draft7Validator

from cptest.errors import ConfigError, ConfigNotFoundError

from .models import CptestConfig, LanguageCommands, default_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "cptest-config.yaml"
CONFIG_ENV_VAR = "CPTEST_CONFIG"


def default_config_paths() -> List[Path]:
    home = Path.home()
    return [
        home / DEFAULT_CONFIG_FILENAME,
        home / ".cptest" / DEFAULT_CONFIG_FILENAME,
        home / ".config" / "cptest" / DEFAULT_CONFIG_FILENAME,
    ]


def load_config(path: Optional[str] = None) -> CptestConfig:
    """Load the first configuration file found and validate it."""

    candidates: List[Path] = []
    if path:
        candidates.append(Path(path).expanduser())
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidates.append(Path(env_path).expanduser())
    candidates.extend(default_config_paths())
    for candidate in candidates:
        if candidate.is_file():
            logger.debug("using configuration %s", candidate)
            return _parse_config(candidate)
    raise ConfigNotFoundError(candidates)


def write_default_config(path: Optional[str] = None) -> Optional[Path]:
    """Write the default configuration; returns ``None`` if the file exists."""

    target = Path(path).expanduser() if path else default_config_paths()[0]
    if target.exists():
        return None
    target.parent.mkdir(parents=True, exist_ok=True)
    text = yaml.safe_dump(default_config().to_mapping(), sort_keys=False)
    target.write_text(text, encoding="utf-8")
    return target


def _parse_config(path: Path) -> CptestConfig:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Configuration file {path} must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ConfigError(f"Configuration schema validation failed: {messages}")
    return CptestConfig(languages=_parse_languages(raw.get("languages") or {}), source=path)


def _parse_languages(raw: Mapping[str, Any]) -> Dict[str, LanguageCommands]:
    languages: Dict[str, LanguageCommands] = {}
    for name, entry in raw.items():
        languages[str(name)] = LanguageCommands(
            command=str(entry.get("command", "")).strip(),
            debug_command=str(entry.get("debug_command", "")).strip(),
        )
    return languages


CONFIG_SCHEMA = {
    "type": "object",
    "required": ["languages"],
    "properties": {
        "languages": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "properties": {
                    "command": {"type": "string"},
                    "debug_command": {"type": "string"},
                },
                "additionalProperties": False,
            },
        },
    },
}
_validator = Draft7Validator(CONFIG_SCHEMA)
