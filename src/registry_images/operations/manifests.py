"""Manifest lookup and deletion operations."""

import logging

import aiohttp

from ..core.session import ensure_success, make_request
from ..core.types import MANIFEST_ACCEPT_HEADER, RegistryConfig
from ..exceptions import DigestNotFoundError
from ..utils.digest import validate_digest

logger = logging.getLogger(__name__)


async def resolve_digest(
    session: aiohttp.ClientSession,
    config: RegistryConfig,
    credential: str,
    repository: str,
    tag: str,
) -> str:
    """Resolve the manifest digest currently bound to repository:tag.

    Args:
        session: Open client session
        config: Registry configuration
        credential: Encoded Basic credential
        repository: Repository name
        tag: Tag name

    Returns:
        Value of the Docker-Content-Digest header

    Raises:
        RegistryError: If the HEAD request is not successful
        DigestNotFoundError: If the response carries no digest header
    """
    result = await make_request(
        session,
        config,
        "HEAD",
        f"/v2/{repository}/manifests/{tag}",
        credential,
        op="head-manifest",
        headers={"Accept": MANIFEST_ACCEPT_HEADER},
    )
    ensure_success(result, "head-manifest")

    digest = result.headers.get("Docker-Content-Digest")
    if not digest:
        raise DigestNotFoundError(tag)
    if not validate_digest(digest):
        logger.warning(f"Registry returned an unexpected digest format: {digest}")
    return digest


async def delete_manifest(
    session: aiohttp.ClientSession,
    config: RegistryConfig,
    credential: str,
    repository: str,
    tag: str,
) -> None:
    """Delete the manifest addressed by tag.

    Raises:
        RegistryError: If the DELETE request is not successful
    """
    result = await make_request(
        session,
        config,
        "DELETE",
        f"/v2/{repository}/manifests/{tag}",
        credential,
        op="delete-manifest",
        headers={"Accept": MANIFEST_ACCEPT_HEADER},
    )
    ensure_success(result, "delete-manifest")
