# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for config file resolution and AlgoliaConfig."""

import pytest

from typed_algolia.exceptions import ConfigurationError
from typed_algolia.utils.config import (
    AlgoliaConfig,
    load_algolia_config,
    load_json_config,
    resolve_config_path,
)


class TestResolveConfigPath:
    """Tests for resolve_config_path."""

    def test_explicit_path(self, tmp_path):
        conf = tmp_path / "explicit.conf"
        conf.write_text("{}")
        assert resolve_config_path(str(conf)) == conf

    def test_explicit_path_missing(self, tmp_path):
        assert resolve_config_path(str(tmp_path / "missing.conf")) is None

    def test_env_var(self, tmp_path, monkeypatch):
        conf = tmp_path / "env.conf"
        conf.write_text("{}")
        monkeypatch.setenv("ALGOLIA_CONFIG_FILE", str(conf))
        assert resolve_config_path() == conf

    def test_default_location(self, isolated_config):
        conf = isolated_config / "algolia.conf"
        conf.write_text("{}")
        assert resolve_config_path() == conf

    def test_nothing_found(self):
        assert resolve_config_path() is None

    def test_explicit_beats_env(self, tmp_path, monkeypatch):
        explicit = tmp_path / "explicit.conf"
        explicit.write_text("{}")
        env_conf = tmp_path / "env.conf"
        env_conf.write_text("{}")
        monkeypatch.setenv("ALGOLIA_CONFIG_FILE", str(env_conf))
        assert resolve_config_path(str(explicit)) == explicit

    def test_named_level_wins_even_if_missing(self, isolated_config, monkeypatch):
        (isolated_config / "algolia.conf").write_text("{}")
        monkeypatch.setenv("ALGOLIA_CONFIG_FILE", "/nonexistent/algolia.conf")
        assert resolve_config_path() is None

    def test_custom_env_and_filename(self, isolated_config, monkeypatch):
        (isolated_config / "other.conf").write_text("{}")
        monkeypatch.delenv("OTHER_CONFIG_ENV", raising=False)
        assert resolve_config_path(None, "OTHER_CONFIG_ENV", "other.conf") == (
            isolated_config / "other.conf"
        )


class TestLoadJsonConfig:
    """Tests for load_json_config."""

    def test_valid_json(self, tmp_path):
        conf = tmp_path / "test.conf"
        conf.write_text('{"application_id": "APP", "timeout": 5}')
        assert load_json_config(conf) == {"application_id": "APP", "timeout": 5}

    def test_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json_config(tmp_path / "missing.conf")

    def test_invalid_json(self, tmp_path):
        conf = tmp_path / "bad.conf"
        conf.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_json_config(conf)

    def test_not_an_object(self, tmp_path):
        conf = tmp_path / "list.conf"
        conf.write_text("[1, 2]")
        with pytest.raises(ValueError, match="must contain a JSON object"):
            load_json_config(conf)


class TestAlgoliaConfig:
    """Tests for AlgoliaConfig and load_algolia_config."""

    def test_defaults(self):
        config = AlgoliaConfig()
        assert config.application_id is None
        assert config.timeout == 30.0
        assert config.log_level == "WARNING"
        assert config.missing_credentials() == ["application_id", "api_key"]

    def test_log_level_is_normalized(self):
        assert AlgoliaConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError, match="Invalid log_level"):
            AlgoliaConfig.from_dict({"log_level": "chatty"})

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigurationError, match="Invalid Algolia configuration"):
            AlgoliaConfig.from_dict({"app_id": "APP"})

    def test_load_without_file(self):
        assert load_algolia_config() == AlgoliaConfig()

    def test_load_explicit_missing(self, tmp_path):
        with pytest.raises(ConfigurationError, match="does not exist"):
            load_algolia_config(str(tmp_path / "missing.conf"))

    def test_load_invalid_file(self, tmp_path):
        conf = tmp_path / "bad.conf"
        conf.write_text("{")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_algolia_config(str(conf))

    def test_load_file_with_env_override(self, tmp_path, monkeypatch):
        conf = tmp_path / "algolia.conf"
        conf.write_text('{"application_id": "FILE_APP", "api_key": "FILE_KEY", "timeout": 2}')
        monkeypatch.setenv("ALGOLIA_APPLICATION_ID", "ENV_APP")
        config = load_algolia_config(str(conf))
        assert config.application_id == "ENV_APP"
        assert config.api_key == "FILE_KEY"
        assert config.timeout == 2.0
        assert config.missing_credentials() == []
