"""Tests for configuration management."""

from pathlib import Path

import pytest
import yaml

from claudeauth.auth.refresh import TOKEN_URL
from claudeauth.config import ClaudeAuthConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CLAUDEAUTH_TOKEN_URL", "CLAUDEAUTH_CREDENTIALS_PATH", "CLAUDEAUTH_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class TestConfig:
    def test_default_config(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("USERPROFILE", str(tmp_path))
        config = ClaudeAuthConfig()
        assert config.token_url == TOKEN_URL
        assert config.credentials_path == tmp_path / ".claude" / ".credentials.json"
        assert config.timeout == 30.0

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_content = {
            "token_url": "https://auth.example.com/token",
            "credentials_path": str(tmp_path / "creds.json"),
            "timeout": 5,
        }
        config_file = tmp_path / "claudeauth.yaml"
        config_file.write_text(yaml.dump(yaml_content))

        config = ClaudeAuthConfig.load(str(config_file))
        assert config.token_url == "https://auth.example.com/token"
        assert config.credentials_path == tmp_path / "creds.json"
        assert config.timeout == 5.0

    def test_load_with_overrides(self, tmp_path: Path) -> None:
        config = ClaudeAuthConfig.load(None, credentials_path=str(tmp_path / "x.json"), timeout=None)
        assert config.credentials_path == tmp_path / "x.json"
        assert config.timeout == 30.0

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("CLAUDEAUTH_TOKEN_URL", "https://env.example.com/token")
        monkeypatch.setenv("CLAUDEAUTH_CREDENTIALS_PATH", str(tmp_path / "env.json"))
        monkeypatch.setenv("CLAUDEAUTH_TIMEOUT", "12.5")

        config = ClaudeAuthConfig.load()
        assert config.token_url == "https://env.example.com/token"
        assert config.credentials_path == tmp_path / "env.json"
        assert config.timeout == 12.5

    def test_override_beats_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("CLAUDEAUTH_CREDENTIALS_PATH", str(tmp_path / "env.json"))
        config = ClaudeAuthConfig.load(None, credentials_path=str(tmp_path / "cli.json"))
        assert config.credentials_path == tmp_path / "cli.json"

    def test_tilde_expanded(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("USERPROFILE", str(tmp_path))
        config = ClaudeAuthConfig.load(None, credentials_path="~/creds.json")
        assert config.credentials_path == tmp_path / "creds.json"

    def test_missing_config_file(self) -> None:
        config = ClaudeAuthConfig.load("/nonexistent/config.yaml")
        # Should use defaults without error
        assert config.token_url == TOKEN_URL
