"""Core data types shared by the registry operations."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

OCI_MANIFEST_MEDIA_TYPE = "application/vnd.oci.image.manifest.v1+json"
DOCKER_MANIFEST_MEDIA_TYPE = "application/vnd.docker.distribution.manifest.v2+json"
MANIFEST_ACCEPT_HEADER = f"{OCI_MANIFEST_MEDIA_TYPE}, {DOCKER_MANIFEST_MEDIA_TYPE}"


@dataclass(frozen=True)
class RegistryConfig:
    """Registry connection settings.

    Args:
        url: Registry base URL (e.g., https://registry.example.com)
        timeout: Total request timeout in seconds
    """

    url: str
    timeout: int = 30

    @property
    def base_url(self) -> str:
        return self.url.rstrip("/")

    @classmethod
    def from_host(cls, host: str, timeout: int = 30) -> "RegistryConfig":
        """Build a config for an HTTPS registry host name."""
        return cls(url=f"https://{host}", timeout=timeout)


@dataclass(frozen=True)
class CredentialRequest:
    """Parameters sent to the credential issuance service."""

    expiration_minutes: int = 5
    permissions: tuple[str, ...] = ("pull", "push")

    def to_payload(self) -> dict[str, Any]:
        return {
            "expiration_minutes": self.expiration_minutes,
            "permissions": list(self.permissions),
        }


@dataclass
class RequestResult:
    """Outcome of a single HTTP exchange with the registry."""

    status_code: int
    headers: Mapping[str, str]
    reason: str = ""
    data: bytes | None = None
    json_data: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass
class TagRecord:
    """Tags found for one repository, keyed by its display name."""

    name: str
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "tags": list(self.tags)}
