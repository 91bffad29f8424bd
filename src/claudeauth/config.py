"""
claudeauth configuration management.

Supports loading from YAML files, environment variables, and keyword overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from claudeauth.auth.refresh import TOKEN_URL
from claudeauth.auth.store import default_credentials_path


class ClaudeAuthConfig(BaseModel):
    """Settings for the token endpoint and the credentials file."""

    token_url: str = Field(default=TOKEN_URL, description="OAuth token endpoint")
    credentials_path: Path = Field(
        default_factory=default_credentials_path,
        description="Where the credentials file is written",
    )
    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")

    @classmethod
    def load(cls, config_path: str | None = None, **overrides: Any) -> ClaudeAuthConfig:
        """Load configuration from file, env vars, and overrides.

        Priority: overrides > env vars > config file > defaults.
        """
        data: dict[str, Any] = {}

        if config_path:
            path = Path(config_path)
            if path.exists():
                with open(path) as f:
                    data = yaml.safe_load(f) or {}

        env_url = os.environ.get("CLAUDEAUTH_TOKEN_URL")
        env_path = os.environ.get("CLAUDEAUTH_CREDENTIALS_PATH")
        env_timeout = os.environ.get("CLAUDEAUTH_TIMEOUT")

        if env_url:
            data["token_url"] = env_url
        if env_path:
            data["credentials_path"] = env_path
        if env_timeout:
            data["timeout"] = env_timeout

        data.update({k: v for k, v in overrides.items() if v is not None})

        config = cls.model_validate(data)
        config.credentials_path = config.credentials_path.expanduser()
        return config
