"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence and error reporting
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from gocov2lcov.config.loader import _deep_merge, _load_yaml, load_config
from gocov2lcov.config.models import Gocov2LcovConfig, LoggingConfig
from gocov2lcov.core.errors import ConfigError, ErrorCode


@pytest.fixture
def no_global_config(tmp_path: Path) -> Any:
    with patch("gocov2lcov.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml") as p:
        yield p


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        """Returns empty dict when file doesn't exist."""
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads valid YAML content."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: DEBUG\n")

        assert _load_yaml(yaml_file) == {"logging": {"level": "DEBUG"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        """Returns empty dict for empty file."""
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid YAML syntax."""
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)

        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        """A top-level list is not a config."""
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        """Override values replace base values."""
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self) -> None:
        """Nested dicts are merged recursively."""
        base = {"resolver": {"go_binary": "go", "timeout_sec": 10}}
        override = {"resolver": {"go_binary": "go1.22"}}

        assert _deep_merge(base, override) == {
            "resolver": {"go_binary": "go1.22", "timeout_sec": 10}
        }

    def test_does_not_mutate_base(self) -> None:
        """Base dict is not mutated."""
        base = {"a": 1}
        _deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_defaults_when_no_files(self, no_global_config: Path) -> None:
        """Returns default config when no config files exist."""
        config = load_config()

        assert isinstance(config, Gocov2LcovConfig)
        assert config.logging.level == "WARNING"
        assert config.resolver.go_binary == "go"
        assert config.resolver.vcs_markers == [".git", ".hg", ".bzr", ".svn"]
        assert config.profile.max_line_bytes == 65536

    def test_loads_global_config(self, tmp_path: Path) -> None:
        """Global YAML is applied when present."""
        global_file = tmp_path / "global.yaml"
        global_file.write_text("resolver:\n  go_binary: /opt/go/bin/go\n")

        with patch("gocov2lcov.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config()

        assert config.resolver.go_binary == "/opt/go/bin/go"

    def test_explicit_file_overrides_global(self, tmp_path: Path) -> None:
        """Explicit config file wins over the global file, key by key."""
        global_file = tmp_path / "global.yaml"
        global_file.write_text("resolver:\n  go_binary: /opt/go/bin/go\n  timeout_sec: 5\n")
        explicit = tmp_path / "gocov2lcov.yaml"
        explicit.write_text("resolver:\n  timeout_sec: 9\n")

        with patch("gocov2lcov.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config(explicit)

        assert config.resolver.go_binary == "/opt/go/bin/go"
        assert config.resolver.timeout_sec == 9

    def test_env_vars_override_yaml(self, tmp_path: Path, no_global_config: Path) -> None:
        """Environment variables override YAML config."""
        explicit = tmp_path / "gocov2lcov.yaml"
        explicit.write_text("logging:\n  level: INFO\n")

        with patch.dict(os.environ, {"GOCOV2LCOV__LOGGING__LEVEL": "DEBUG"}):
            config = load_config(explicit)

        assert config.logging.level == "DEBUG"

    def test_kwargs_override_all(self, no_global_config: Path) -> None:
        """Keyword arguments override everything."""
        with patch.dict(os.environ, {"GOCOV2LCOV__LOGGING__LEVEL": "DEBUG"}):
            config = load_config(logging=LoggingConfig(level="ERROR"))

        assert config.logging.level == "ERROR"

    def test_missing_explicit_file_raises(self, tmp_path: Path, no_global_config: Path) -> None:
        """An explicit config path must exist."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.yaml")

        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_raises_config_error_for_invalid_value(
        self, tmp_path: Path, no_global_config: Path
    ) -> None:
        """Raises ConfigError for invalid config values."""
        explicit = tmp_path / "gocov2lcov.yaml"
        explicit.write_text("profile:\n  max_line_bytes: 0\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(explicit)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "profile" in exc_info.value.details["field"]
