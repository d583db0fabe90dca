# pyright: reportAny=false
"""Unit tests for the run configuration model.

These tests focus on our design decisions (defaults, comma-separated names,
rejected values) rather than Pydantic built-in behaviors.
"""

import pytest
from pydantic import ValidationError

from precommit_run.config import LogFormat, LoggingConfig, LogLevel, RunConfig


class TestRunConfigDefaults:
    def test_defaults(self) -> None:
        config = RunConfig(hooks=("check-json",))

        assert config.files == ()
        assert config.skip is False
        assert config.skip_if_not_installed is True
        assert config.skip_if_config_not_found is True
        assert config.skip_if_hook_not_found is True
        assert config.fail_on_modification is False
        assert config.executable == "pre-commit"
        assert config.environment == {}
        assert config.config_file == ".pre-commit-config.yaml"
        assert config.timeout == 300.0
        assert config.install_check_timeout == 10.0
        assert config.logging.level is LogLevel.INFO
        assert config.logging.format is LogFormat.TEXT
        assert config.logging.file == ""

    def test_ignores_unknown_keys(self) -> None:
        config = RunConfig.model_validate({"hooks": ["a"], "debug": True})

        assert not hasattr(config, "debug")


class TestLoggingConfig:
    def test_nested_section_from_mapping(self) -> None:
        config = RunConfig.model_validate(
            {"hooks": ["a"], "logging": {"level": "warning", "format": "json"}}
        )

        assert config.logging == LoggingConfig(
            level=LogLevel.WARNING, format=LogFormat.JSON
        )

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig.model_validate({"level": "verbose"})


class TestRunConfigNames:
    def test_splits_comma_separated_hooks(self) -> None:
        config = RunConfig.model_validate({"hooks": "check-json, check-yaml ,"})

        assert config.hooks == ("check-json", "check-yaml")

    def test_splits_comma_separated_files(self) -> None:
        config = RunConfig.model_validate(
            {"hooks": ["a"], "files": "docs/openapi.json,src/**/*.java"}
        )

        assert config.files == ("docs/openapi.json", "src/**/*.java")

    def test_keeps_hook_order(self) -> None:
        config = RunConfig.model_validate({"hooks": ["z", "a", "m"]})

        assert config.hooks == ("z", "a", "m")

    def test_requires_hooks(self) -> None:
        with pytest.raises(ValidationError):
            RunConfig.model_validate({})

    def test_rejects_empty_hook_list(self) -> None:
        with pytest.raises(ValidationError):
            RunConfig.model_validate({"hooks": []})

    def test_rejects_blank_hook_id(self) -> None:
        with pytest.raises(ValidationError, match="hook IDs must not be empty"):
            RunConfig.model_validate({"hooks": ["check-json", "  "]})


class TestRunConfigLimits:
    @pytest.mark.parametrize("field", ["timeout", "install_check_timeout"])
    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_non_positive_timeouts(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            RunConfig.model_validate({"hooks": ["a"], field: value})

    def test_rejects_empty_executable(self) -> None:
        with pytest.raises(ValidationError):
            RunConfig.model_validate({"hooks": ["a"], "executable": ""})

    def test_is_frozen(self) -> None:
        config = RunConfig(hooks=("a",))

        with pytest.raises(ValidationError):
            config.skip = True  # pyright: ignore[reportAttributeAccessIssue]
