"""Utility functions for the registry images client."""

from .digest import is_digest_tag, validate_digest
from .logger import setup_logging

__all__ = ["is_digest_tag", "setup_logging", "validate_digest"]
