"""Digest format helpers."""

import re

# Regex pattern for valid digest format (algorithm:hex)
DIGEST_PATTERN = re.compile(r"^[a-z0-9]+:[a-f0-9]+$")

DIGEST_TAG_PREFIX = "sha256"


def validate_digest(digest: str) -> bool:
    """Validate digest format.

    Args:
        digest: Digest string to validate

    Returns:
        True if valid digest format
    """
    if not isinstance(digest, str):
        return False

    if not DIGEST_PATTERN.match(digest):
        return False

    # Check if algorithm is valid
    algorithm, _ = digest.split(":", 1)
    return algorithm in ["sha256", "sha512"]


def is_digest_tag(tag: str) -> bool:
    """Return True for tags that name a digest rather than a human tag."""
    return tag.startswith(DIGEST_TAG_PREFIX)
