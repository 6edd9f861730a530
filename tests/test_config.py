"""Tests for osproj.config — osproj.yaml loading, validation, and defaults."""

import logging
import textwrap

import pytest

import osproj.config
from osproj.config import (
    DEFAULT_PROJECT_FLAG,
    DEFAULT_TOOL,
    Settings,
    load_settings,
)
from osproj.errors import ConfigError
from osproj.paths import settings_path


class TestLoadSettings:
    def test_missing_file_returns_defaults(self, tmp_path):
        s = load_settings(tmp_path)
        assert s == Settings()
        assert s.tool == DEFAULT_TOOL == "openstack"
        assert s.state_file == "config"
        assert s.project_flag == DEFAULT_PROJECT_FLAG == "--os-project-id"
        assert s.level == logging.WARNING

    def test_empty_file_returns_defaults(self, tmp_path):
        settings_path(tmp_path).write_text("")
        assert load_settings(tmp_path) == Settings()

    def test_overrides(self, tmp_path):
        settings_path(tmp_path).write_text(
            "tool: /opt/os/bin/openstack\n"
            "state_file: .active-project\n"
            "project_flag: --os-project-name\n"
            "log_level: debug\n"
        )
        s = load_settings(tmp_path)
        assert s.tool == "/opt/os/bin/openstack"
        assert s.state_file == ".active-project"
        assert s.project_flag == "--os-project-name"
        assert s.log_level == "DEBUG"
        assert s.level == logging.DEBUG

    def test_null_value_uses_default(self, tmp_path):
        settings_path(tmp_path).write_text("tool:\n")
        assert load_settings(tmp_path).tool == "openstack"

    def test_unknown_keys_ignored(self, tmp_path):
        settings_path(tmp_path).write_text("colour: blue\n")
        assert load_settings(tmp_path) == Settings()

    def test_invalid_yaml_raises(self, tmp_path):
        settings_path(tmp_path).write_text("tool: [unclosed\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_settings(tmp_path)

    def test_non_mapping_raises(self, tmp_path):
        settings_path(tmp_path).write_text("- openstack\n")
        with pytest.raises(ConfigError, match="expected a YAML mapping"):
            load_settings(tmp_path)

    def test_empty_string_raises(self, tmp_path):
        settings_path(tmp_path).write_text("tool: '  '\n")
        with pytest.raises(ConfigError, match="'tool' must not be empty"):
            load_settings(tmp_path)

    def test_unknown_log_level_raises(self, tmp_path):
        settings_path(tmp_path).write_text("log_level: chatty\n")
        with pytest.raises(ConfigError, match="unknown log_level"):
            load_settings(tmp_path)

    def test_absolute_state_file(self, tmp_path):
        elsewhere = tmp_path / "shared" / "active-project"
        settings_path(tmp_path).write_text(f"state_file: {elsewhere}\n")
        assert load_settings(tmp_path).state_file == str(elsewhere)


def test_documented_example_matches_defaults(tmp_path):
    example = osproj.config.__doc__.split("defaults::", 1)[1]
    settings_path(tmp_path).write_text(textwrap.dedent(example), encoding="utf-8")
    assert load_settings(tmp_path) == Settings()
