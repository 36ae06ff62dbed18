"""Tests for the config loader module."""

import os
import tempfile
from pathlib import Path

import pytest
import yaml

from agenthost.config_loader import (
    DEFAULT_CONFIG_PATH,
    _substitute_env_vars,
    get_responses_settings,
    get_server_address,
    load_config,
    resolve_config_path,
    resolve_env_path,
)


class TestLoadConfig:
    """Tests for loading configuration from YAML files."""

    def test_loads_simple_config(self):
        """Test loading a simple configuration."""
        config_data = {"server": {"host": "0.0.0.0", "port": 9000}}

        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.safe_dump(config_data, f)
            f.flush()

            try:
                result = load_config(f.name)
                assert result["server"]["port"] == 9000
            finally:
                os.unlink(f.name)

    def test_raises_error_for_missing_config(self):
        """Test that error is raised for missing config file."""
        with pytest.raises(RuntimeError, match="Config file not found"):
            load_config("/nonexistent/path/config.yaml")

    def test_loads_empty_config(self, tmp_path):
        """Test that an empty file loads as an empty dict."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert load_config(str(config_file)) == {}

    def test_substitutes_environment_variables(self, tmp_path, monkeypatch):
        """Test that environment variables are substituted."""
        monkeypatch.setenv("AGENT_MODULE", "agenthost.testing.agents")
        config_file = tmp_path / "config.yaml"
        config_file.write_text("entities:\n  - factory: ${AGENT_MODULE}:EchoAgent\n")

        result = load_config(str(config_file))
        assert result["entities"][0]["factory"] == "agenthost.testing.agents:EchoAgent"

    def test_env_file_wins_over_process_env(self, tmp_path, monkeypatch):
        """Test that values from the sibling .env file take priority."""
        monkeypatch.setenv("AGENT_NAME", "from-process")
        config_file = tmp_path / "config_local.yaml"
        config_file.write_text("responses:\n  agent_endpoints:\n    - name: $AGENT_NAME\n")
        (tmp_path / ".env_local").write_text("AGENT_NAME=from-file\n")

        result = load_config(str(config_file))
        assert result["responses"]["agent_endpoints"][0]["name"] == "from-file"
        assert os.environ["AGENT_NAME"] == "from-process"

    def test_can_skip_substitution(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SKIPPED", "value")
        config_file = tmp_path / "config.yaml"
        config_file.write_text("key: ${SKIPPED}\n")

        assert load_config(str(config_file), substitute_env=False) == {"key": "${SKIPPED}"}

    def test_config_path_from_environment(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  port: 1234\n")
        monkeypatch.setenv("AGENTHOST_CONFIG", str(config_file))

        assert load_config()["server"]["port"] == 1234

    def test_default_config_registers_echo(self, monkeypatch):
        """Test that the shipped default config loads."""
        monkeypatch.delenv("AGENTHOST_CONFIG", raising=False)
        result = load_config()
        assert result["entities"][0]["name"] == "echo"


class TestResolvePaths:
    """Tests for config and env path resolution."""

    def test_relative_path_resolves_against_project_root(self):
        path = resolve_config_path(DEFAULT_CONFIG_PATH)
        assert path.is_absolute()
        assert path.exists()

    def test_absolute_path_is_kept(self, tmp_path):
        assert resolve_config_path(str(tmp_path)) == tmp_path

    def test_env_path_follows_config_suffix(self):
        assert resolve_env_path(Path("/cfg/config_prod.yaml")) == Path("/cfg/.env_prod")
        assert resolve_env_path(Path("/cfg/settings.yaml")) == Path("/cfg/.env")


class TestSubstituteEnvVars:
    """Tests for the _substitute_env_vars helper function."""

    def test_substitutes_multiple_vars(self, monkeypatch):
        monkeypatch.setenv("VAR_A", "a")
        monkeypatch.setenv("VAR_B", "b")
        assert _substitute_env_vars("${VAR_A}-$VAR_B") == "a-b"

    def test_preserves_undefined_env_vars(self, monkeypatch):
        monkeypatch.delenv("UNDEFINED_VAR_XYZ", raising=False)
        assert _substitute_env_vars("${UNDEFINED_VAR_XYZ}") == "${UNDEFINED_VAR_XYZ}"

    def test_handles_nested_structures(self, monkeypatch):
        monkeypatch.setenv("NESTED", "n")
        result = _substitute_env_vars({"a": [{"b": "$NESTED"}]})
        assert result == {"a": [{"b": "n"}]}

    def test_passes_through_non_string_values(self):
        assert _substitute_env_vars(42) == 42
        assert _substitute_env_vars(None) is None
        assert _substitute_env_vars(True) is True


class TestServerAddress:
    """Tests for get_server_address."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("AGENTHOST_HOST", raising=False)
        monkeypatch.delenv("AGENTHOST_PORT", raising=False)
        assert get_server_address({}) == ("127.0.0.1", 8000)

    def test_environment_overrides_config(self, monkeypatch):
        monkeypatch.setenv("AGENTHOST_HOST", "0.0.0.0")
        monkeypatch.setenv("AGENTHOST_PORT", "9999")
        assert get_server_address({"server": {"host": "h", "port": 1}}) == ("0.0.0.0", 9999)

    def test_invalid_port_falls_back(self, monkeypatch):
        monkeypatch.delenv("AGENTHOST_HOST", raising=False)
        monkeypatch.delenv("AGENTHOST_PORT", raising=False)
        assert get_server_address({"server": {"port": "abc"}})[1] == 8000


class TestResponsesSettings:
    """Tests for get_responses_settings."""

    def test_defaults(self):
        assert get_responses_settings({}) == {
            "base_path": "/v1/responses",
            "enable_dynamic_endpoint": True,
            "agent_endpoints": [],
            "enable_entities_endpoint": True,
        }

    def test_string_endpoints_are_normalized(self):
        settings = get_responses_settings({"responses": {"agent_endpoints": ["writer", {"name": "critic", "path": "/c"}]}})
        assert settings["agent_endpoints"] == [{"name": "writer"}, {"name": "critic", "path": "/c"}]
