"""Catalog and tag listing operations."""

import logging

import aiohttp

from ..core.session import ensure_success, make_request
from ..core.types import RegistryConfig

logger = logging.getLogger(__name__)


async def fetch_catalog(
    session: aiohttp.ClientSession, config: RegistryConfig, credential: str
) -> list[str]:
    """Fetch every repository path the registry hosts.

    Args:
        session: Open client session
        config: Registry configuration
        credential: Encoded Basic credential

    Returns:
        Raw repository paths in registry order

    Raises:
        RegistryError: If the catalog request is not successful
    """
    result = await make_request(
        session, config, "GET", "/v2/_catalog", credential, op="catalog"
    )
    ensure_success(result, "catalog")

    data = result.json_data if isinstance(result.json_data, dict) else {}
    repositories = data.get("repositories") or []
    logger.debug(f"Catalog returned {len(repositories)} repositories")
    return list(repositories)


async def fetch_tags(
    session: aiohttp.ClientSession,
    config: RegistryConfig,
    credential: str,
    repository: str,
) -> list[str]:
    """Fetch the tags of one repository.

    A response without a "tags" field yields an empty list.

    Raises:
        RegistryError: If the tag list request is not successful
    """
    result = await make_request(
        session,
        config,
        "GET",
        f"/v2/{repository}/tags/list",
        credential,
        op="tags",
    )
    ensure_success(result, "tags")

    data = result.json_data if isinstance(result.json_data, dict) else {}
    return list(data.get("tags") or [])
