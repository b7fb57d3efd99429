"""Client configuration."""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from grok_client.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.x.ai/v1"
DEFAULT_TIMEOUT = 3600.0

API_KEY_ENV_VARS = ("XAI_API_KEY", "GROK_API_KEY")


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT  # seconds

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Read configuration from environment variables.

        The API key comes from ``XAI_API_KEY`` or, failing that,
        ``GROK_API_KEY``. ``XAI_BASE_URL`` and ``XAI_TIMEOUT`` override the
        defaults.
        """
        env = os.environ if environ is None else environ
        api_key = next((env[name] for name in API_KEY_ENV_VARS if env.get(name)), None)
        if not api_key:
            raise ConfigurationError(
                f"No API key found; set one of {', '.join(API_KEY_ENV_VARS)}"
            )

        timeout = DEFAULT_TIMEOUT
        if env.get("XAI_TIMEOUT"):
            try:
                timeout = float(env["XAI_TIMEOUT"])
            except ValueError as exc:
                raise ConfigurationError(
                    f"XAI_TIMEOUT must be a number of seconds, got {env['XAI_TIMEOUT']!r}",
                    cause=exc,
                ) from exc

        return cls(
            api_key=api_key,
            base_url=env.get("XAI_BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
        )
