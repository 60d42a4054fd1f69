"""Account management API: credential issuance and account lookup."""

import asyncio
import logging
from typing import Any

import aiohttp

from ..exceptions import AuthError, ConfigurationError
from ..settings import Settings
from .auth import CredentialIssuer
from .session import create_session, parse_json_response
from .types import CredentialRequest

logger = logging.getLogger(__name__)


def _api_errors(payload: Any) -> str:
    if isinstance(payload, dict):
        messages = [
            str(err.get("message", err))
            for err in payload.get("errors") or []
            if isinstance(err, dict)
        ]
        if messages:
            return "; ".join(messages)
    return "unknown error"


async def _api_request(
    settings: Settings, method: str, path: str, json_body: dict | None = None
) -> Any:
    """Call the account API and return the envelope's "result" field."""
    if not settings.api_token:
        raise ConfigurationError(
            "CLOUDFLARE_API_TOKEN must be set to request registry credentials"
        )

    url = f"{settings.api_base_url.rstrip('/')}{path}"
    headers = {"Authorization": f"Bearer {settings.api_token}"}
    logger.debug(f"{method} {url}")

    session = await create_session(settings.timeout)
    try:
        async with session.request(method, url, headers=headers, json=json_body) as resp:
            payload = parse_json_response(await resp.text())
            if resp.status >= 300 or not isinstance(payload, dict):
                raise AuthError(
                    f"{method} {path} failed: {resp.status} {resp.reason}: "
                    f"{_api_errors(payload)}"
                )
            if not payload.get("success", True):
                raise AuthError(f"{method} {path} failed: {_api_errors(payload)}")
            return payload.get("result")
    except aiohttp.ClientError as e:
        raise AuthError(f"Unable to reach account API: {e}") from e
    except asyncio.TimeoutError as e:
        raise AuthError(
            f"Account API request timed out after {settings.timeout}s"
        ) from e
    finally:
        await session.close()


async def fetch_account_id(settings: Settings) -> str:
    """Return the configured account id, looking it up if unset.

    Raises:
        AuthError: If the token does not see exactly one account
    """
    if settings.account_id:
        return settings.account_id

    accounts = await _api_request(settings, "GET", "/accounts")
    if not isinstance(accounts, list) or len(accounts) != 1:
        count = len(accounts) if isinstance(accounts, list) else 0
        raise AuthError(
            f"Found {count} accounts for this API token; "
            "set CLOUDFLARE_ACCOUNT_ID to choose one"
        )
    account = accounts[0]
    if not isinstance(account, dict) or not account.get("id"):
        raise AuthError("Account lookup returned an entry without an id")
    return str(account["id"])


def account_credential_issuer(
    settings: Settings, account_id: str | None = None
) -> CredentialIssuer:
    """Build an issuer that mints registry credentials via the account API.

    Args:
        settings: Invocation settings
        account_id: Already resolved account id; looked up per call if None
    """

    async def issue(host: str, request: CredentialRequest) -> str:
        owner = account_id or await fetch_account_id(settings)
        result = await _api_request(
            settings,
            "POST",
            f"/accounts/{owner}/containers/registries/{host}/credentials",
            json_body=request.to_payload(),
        )
        password = result.get("password") if isinstance(result, dict) else None
        if not password:
            raise AuthError(f"Credential response for {host} did not include a password")
        return password

    return issue
