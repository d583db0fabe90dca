# pyright: reportAny=false, reportUnknownArgumentType=false
from __future__ import annotations

import copy
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from precommit_run.config import (
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from precommit_run.exceptions import ConfigLoadError

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem


class TestReadTomlFile:
    def test_parses_valid_toml(self, fs: FakeFilesystem) -> None:
        content = """
[tool.pre-commit-run]
hooks = ["check-json"]
timeout = 30
"""
        path = Path("/project/pyproject.toml")
        fs.create_file(path, contents=content)

        result = read_toml_file(path)

        assert result == {
            "tool": {"pre-commit-run": {"hooks": ["check-json"], "timeout": 30}}
        }

    def test_raises_file_not_found_for_missing_file(self, fs: FakeFilesystem) -> None:
        with pytest.raises(FileNotFoundError):
            read_toml_file(Path("/project/missing.toml"))

    def test_raises_config_load_error_for_invalid_toml(
        self, fs: FakeFilesystem
    ) -> None:
        content = """
[tool
hooks = "unclosed bracket"
"""
        path = Path("/project/pyproject.toml")
        fs.create_file(path, contents=content)

        with pytest.raises(ConfigLoadError) as exc_info:
            read_toml_file(path)

        error = exc_info.value
        assert error.path == path
        assert error.line is not None
        assert error.column is not None
        assert "Failed to parse TOML file" in str(error)


class TestDeepMerge:
    def test_recursively_merges_dicts(self) -> None:
        base = {"logging": {"level": "info", "format": "text"}, "skip": False}
        override = {"logging": {"level": "debug"}}

        result = deep_merge(base, override)

        assert result == {"logging": {"level": "debug", "format": "text"}, "skip": False}

    def test_replaces_lists(self) -> None:
        result = deep_merge({"hooks": ["a", "b"]}, {"hooks": ["c"]})

        assert result == {"hooks": ["c"]}

    def test_scalar_replaces_dict(self) -> None:
        assert deep_merge({"logging": {"level": "info"}}, {"logging": "off"}) == {
            "logging": "off"
        }

    def test_does_not_modify_inputs(self) -> None:
        base = {"logging": {"level": "info"}, "files": ["a"]}
        override = {"logging": {"file": "run.log"}, "files": ["b"]}
        base_before = copy.deepcopy(base)
        override_before = copy.deepcopy(override)

        result = deep_merge(base, override)
        result["logging"]["level"] = "error"
        result["files"].append("c")

        assert base == base_before
        assert override == override_before


class TestSetNestedKey:
    def test_sets_top_level_key(self) -> None:
        d: dict[str, object] = {}
        set_nested_key(d, "skip", True)
        assert d == {"skip": True}

    def test_creates_intermediate_dicts(self) -> None:
        d: dict[str, object] = {}
        set_nested_key(d, "logging.level", "debug")
        assert d == {"logging": {"level": "debug"}}

    def test_replaces_non_dict_intermediate(self) -> None:
        d: dict[str, object] = {"logging": "text"}
        set_nested_key(d, "logging.format", "json")
        assert d == {"logging": {"format": "json"}}


class TestParseStringValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("true", True),
            ("FALSE", False),
            ("1", True),
            ("0", False),
            ("42", 42),
            ("-7", -7),
            ("2.5", 2.5),
            ('["a", "b"]', ["a", "b"]),
            ('{"KEY": "value"}', {"KEY": "value"}),
            ("[not json", "[not json"),
            ("check-json,check-yaml", "check-json,check-yaml"),
            ("pre-commit", "pre-commit"),
            ("", ""),
        ],
    )
    def test_infers_type(self, value: str, expected: object) -> None:
        assert parse_string_value(value) == expected


class TestParseEnvVars:
    def test_reads_prefixed_variables(self) -> None:
        environ = {
            "PRECOMMIT_RUN_SKIP": "true",
            "PRECOMMIT_RUN_TIMEOUT": "30",
            "PRECOMMIT_RUN_HOOKS": "check-json,check-yaml",
            "PATH": "/usr/bin",
        }

        assert parse_env_vars(environ=environ) == {
            "skip": True,
            "timeout": 30,
            "hooks": "check-json,check-yaml",
        }

    def test_double_underscore_nests(self) -> None:
        environ = {"PRECOMMIT_RUN_LOGGING__LEVEL": "debug"}

        assert parse_env_vars(environ=environ) == {"logging": {"level": "debug"}}

    def test_ignores_bare_prefix(self) -> None:
        assert parse_env_vars(environ={"PRECOMMIT_RUN_": "x"}) == {}

    def test_custom_prefix(self) -> None:
        environ = {"MY_APP_SKIP": "1", "PRECOMMIT_RUN_SKIP": "0"}

        assert parse_env_vars("MY_APP_", environ) == {"skip": True}

    def test_defaults_to_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRECOMMIT_RUN_EXECUTABLE", "/opt/pre-commit")

        assert parse_env_vars()["executable"] == "/opt/pre-commit"
