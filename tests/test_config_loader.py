from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
import yaml

from cptest.config import default_config, load_config, write_default_config
from cptest.errors import ConfigError, ConfigNotFoundError


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "cptest-config.yaml"
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("CPTEST_CONFIG", raising=False)
    return home


def test_load_explicit_config(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        languages:
          cpp:
            command: clang++ -O2
            debug_command: clang++ -g
          py:
            command: pypy3
        """,
    )
    config = load_config(str(path))
    assert config.source == path
    assert config.languages["cpp"].command == "clang++ -O2"
    assert config.languages["cpp"].debug_command == "clang++ -g"
    assert config.languages["py"].debug_command == ""


def test_env_variable_is_consulted(tmp_path: Path, monkeypatch) -> None:
    path = _write(tmp_path, "languages:\n  py:\n    command: python3\n")
    monkeypatch.setenv("CPTEST_CONFIG", str(path))
    assert load_config().languages["py"].command == "python3"


def test_home_config_is_found(isolated_home: Path) -> None:
    target = isolated_home / ".config" / "cptest" / "cptest-config.yaml"
    target.parent.mkdir(parents=True)
    target.write_text("languages: {}\n", encoding="utf-8")
    assert load_config().source == target


def test_missing_config_lists_locations(tmp_path: Path) -> None:
    with pytest.raises(ConfigNotFoundError) as exc:
        load_config(str(tmp_path / "nope.yaml"))
    assert "nope.yaml" in str(exc.value)
    assert "cptest init" in str(exc.value)


def test_schema_errors_are_reported(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        languages:
          cpp:
            command: 3
            flags: -O2
        """,
    )
    with pytest.raises(ConfigError) as exc:
        load_config(str(path))
    assert "languages/cpp" in str(exc.value)


def test_missing_languages_section_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, "port: 1327\n")
    with pytest.raises(ConfigError) as exc:
        load_config(str(path))
    assert "languages" in str(exc.value)


def test_write_default_config_round_trips(tmp_path: Path) -> None:
    target = tmp_path / "out" / "cptest-config.yaml"
    assert write_default_config(str(target)) == target
    assert load_config(str(target)).languages == dict(default_config().languages)
    assert yaml.safe_load(target.read_text(encoding="utf-8"))["languages"]["py"]["command"] == "python3"


def test_write_default_config_keeps_existing_file(tmp_path: Path) -> None:
    target = _write(tmp_path, "languages: {}\n")
    assert write_default_config(str(target)) is None
    assert target.read_text(encoding="utf-8") == "languages: {}\n"
