"""Registry Images - list and delete tags in a managed Registry V2 registry."""

__version__ = "0.1.0"

from .commands import run_delete, run_list
from .core.auth import acquire_credential, encode_credential
from .core.types import CredentialRequest, RegistryConfig, TagRecord
from .deletion import delete_tag, parse_image_reference
from .exceptions import (
    AuthError,
    ConfigurationError,
    DigestNotFoundError,
    GarbageCollectionError,
    PatternError,
    RegistryConnectionError,
    RegistryError,
    RegistryImagesError,
    ValidationError,
)
from .listing import compute_column_widths, list_images, render_records
from .settings import Settings

__all__ = [
    # Commands
    "run_list",
    "run_delete",
    # Engines
    "list_images",
    "delete_tag",
    "parse_image_reference",
    "render_records",
    "compute_column_widths",
    # Credentials
    "acquire_credential",
    "encode_credential",
    # Types
    "CredentialRequest",
    "RegistryConfig",
    "Settings",
    "TagRecord",
    # Exceptions
    "RegistryImagesError",
    "ValidationError",
    "ConfigurationError",
    "AuthError",
    "PatternError",
    "RegistryError",
    "RegistryConnectionError",
    "DigestNotFoundError",
    "GarbageCollectionError",
]
