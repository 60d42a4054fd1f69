"""HTTP session handling for registry requests."""

import asyncio
import json
import logging
from typing import Any

import aiohttp

from ..exceptions import RegistryConnectionError, RegistryError
from .types import RegistryConfig, RequestResult

logger = logging.getLogger(__name__)


async def create_session(timeout: int = 30) -> aiohttp.ClientSession:
    """Create an aiohttp session for one registry operation.

    Args:
        timeout: Total request timeout in seconds

    Returns:
        A new client session; the caller is responsible for closing it
    """
    return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout))


def parse_json_response(text: str) -> Any:
    """Parse a JSON response body, returning None when it is not JSON."""
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None


def auth_headers(credential: str, extra: dict[str, str] | None = None) -> dict[str, str]:
    """Build request headers carrying the Basic authorization value."""
    headers = {"Authorization": f"Basic {credential}"}
    if extra:
        headers.update(extra)
    return headers


async def make_request(
    session: aiohttp.ClientSession,
    config: RegistryConfig,
    method: str,
    path: str,
    credential: str,
    op: str,
    headers: dict[str, str] | None = None,
) -> RequestResult:
    """Send a single request to the registry.

    Args:
        session: Open client session
        config: Registry configuration
        method: HTTP method
        path: Path below the registry base URL, starting with /v2/
        credential: Encoded Basic credential
        op: Operation name used in error messages
        headers: Additional request headers

    Returns:
        RequestResult with status, headers and decoded body

    Raises:
        RegistryConnectionError: If the registry cannot be reached
    """
    url = f"{config.base_url}{path}"
    logger.debug(f"{method} {url}")

    try:
        async with session.request(
            method, url, headers=auth_headers(credential, headers)
        ) as resp:
            data = await resp.read()
            text = data.decode("utf-8", errors="replace") if data else ""
            return RequestResult(
                status_code=resp.status,
                headers=resp.headers,
                reason=resp.reason or "",
                data=data,
                json_data=parse_json_response(text),
            )
    except aiohttp.ClientError as e:
        raise RegistryConnectionError(op, str(e)) from e
    except asyncio.TimeoutError as e:
        raise RegistryConnectionError(
            op, f"request timed out after {config.timeout}s"
        ) from e


def ensure_success(result: RequestResult, op: str) -> None:
    """Raise RegistryError unless the response status is 2xx."""
    if not result.ok:
        logger.debug(f"{op} failed with {result.status_code} {result.reason}")
        raise RegistryError(op, result.status_code, result.reason)
