"""Environment-driven configuration."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .core.types import RegistryConfig
from .exceptions import ConfigurationError

DEFAULT_REGISTRY_HOST = "registry.cloudflare.com"
DEFAULT_API_BASE_URL = "https://api.cloudflare.com/client/v4"


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigurationError(f"{name} must be at least 1, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Settings for one command invocation."""

    registry_host: str = DEFAULT_REGISTRY_HOST
    api_base_url: str = DEFAULT_API_BASE_URL
    api_token: str | None = None
    account_id: str | None = None
    timeout: int = 30
    concurrency: int = 4

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Read settings from environment variables.

        Args:
            env: Mapping to read instead of os.environ

        Raises:
            ConfigurationError: If a numeric setting is invalid
        """
        if env is None:
            env = os.environ

        return cls(
            registry_host=env.get("CLOUDFLARE_CONTAINER_REGISTRY") or DEFAULT_REGISTRY_HOST,
            api_base_url=env.get("CLOUDFLARE_API_BASE_URL") or DEFAULT_API_BASE_URL,
            api_token=env.get("CLOUDFLARE_API_TOKEN") or None,
            account_id=env.get("CLOUDFLARE_ACCOUNT_ID") or None,
            timeout=_int_setting(env, "REGISTRY_IMAGES_TIMEOUT", 30),
            concurrency=_int_setting(env, "REGISTRY_IMAGES_CONCURRENCY", 4),
        )

    def registry_config(self) -> RegistryConfig:
        return RegistryConfig.from_host(self.registry_host, timeout=self.timeout)
