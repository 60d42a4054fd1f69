"""Tag deletion followed by layer garbage collection."""

import logging

from .core.session import create_session
from .core.types import RegistryConfig
from .exceptions import (
    GarbageCollectionError,
    RegistryConnectionError,
    ValidationError,
)
from .operations.gc import trigger_layer_gc
from .operations.manifests import delete_manifest, resolve_digest

logger = logging.getLogger(__name__)


def parse_image_reference(image_ref: str) -> tuple[str, str]:
    """Split "repository:tag" on the first colon.

    Raises:
        ValidationError: If the reference has no tag
    """
    if ":" not in image_ref:
        raise ValidationError("Must provide a tag to delete")

    repository, tag = image_ref.split(":", 1)
    if not repository:
        raise ValidationError(f"Missing repository in image reference {image_ref!r}")
    if not tag:
        raise ValidationError(f"Missing tag in image reference {image_ref!r}")
    return repository, tag


async def delete_tag(config: RegistryConfig, credential: str, image_ref: str) -> str:
    """Delete one tag and trigger registry-wide layer garbage collection.

    The digest lookup proves the tag exists before anything is removed.
    Each step aborts the remaining ones on failure, so garbage collection
    only runs after a successful delete.

    Args:
        config: Registry configuration
        credential: Encoded Basic credential
        image_ref: Reference in "repository:tag" form

    Returns:
        The deleted reference

    Raises:
        ValidationError: If image_ref has no tag
        RegistryError: If the lookup or the delete fails
        DigestNotFoundError: If the registry reports no digest for the tag
        GarbageCollectionError: If garbage collection fails after the delete
    """
    repository, tag = parse_image_reference(image_ref)

    session = await create_session(config.timeout)
    try:
        digest = await resolve_digest(session, config, credential, repository, tag)
        logger.debug(f"{image_ref} resolves to {digest}")

        await delete_manifest(session, config, credential, repository, tag)
        logger.debug(f"Deleted manifest {digest} for {image_ref}")

        try:
            result = await trigger_layer_gc(session, config, credential)
        except RegistryConnectionError as e:
            raise GarbageCollectionError(image_ref, None, e.reason) from e
        if not result.ok:
            raise GarbageCollectionError(image_ref, result.status_code, result.reason)
    finally:
        await session.close()

    return image_ref
