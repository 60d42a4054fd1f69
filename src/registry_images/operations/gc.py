"""Registry-wide layer garbage collection."""

import aiohttp

from ..core.session import make_request
from ..core.types import RegistryConfig, RequestResult


async def trigger_layer_gc(
    session: aiohttp.ClientSession, config: RegistryConfig, credential: str
) -> RequestResult:
    """Ask the registry to sweep layers no longer referenced by any manifest.

    The sweep is not scoped to a repository. The raw result is returned so
    the caller can decide how to report a failure.
    """
    return await make_request(
        session,
        config,
        "PUT",
        "/v2/gc/layers",
        credential,
        op="gc",
        headers={"Content-Type": "application/json"},
    )
