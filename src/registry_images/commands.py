"""Command workflows: credential acquisition plus the list/delete engines."""

import logging
from functools import partial

from .core.account import account_credential_issuer, fetch_account_id
from .core.auth import CredentialIssuer, acquire_credential
from .core.types import RegistryConfig
from .deletion import delete_tag, parse_image_reference
from .listing import AccountResolver, list_images
from .settings import Settings

logger = logging.getLogger(__name__)


async def _known_account(account_id: str) -> str:
    return account_id


async def run_list(
    settings: Settings,
    filter_pattern: str | None = None,
    as_json: bool = False,
    issuer: CredentialIssuer | None = None,
    resolve_account_id: AccountResolver | None = None,
    config: RegistryConfig | None = None,
) -> str:
    """List non-digest tags across the repositories matching the filter.

    Args:
        settings: Invocation settings
        filter_pattern: Regular expression for repository names
        as_json: Render JSON instead of a table
        issuer: Credential issuer (defaults to the account API)
        resolve_account_id: Account id lookup (defaults to the account API)
        config: Registry configuration (defaults to the settings' host)

    Returns:
        Rendered listing
    """
    config = config or settings.registry_config()

    # One account lookup serves both credential issuance and name display
    if issuer is None or resolve_account_id is None:
        account_id = await fetch_account_id(settings)
        issuer = issuer or account_credential_issuer(settings, account_id)
        resolve_account_id = resolve_account_id or partial(_known_account, account_id)

    credential = await acquire_credential(settings.registry_host, issuer)
    return await list_images(
        config,
        credential,
        resolve_account_id,
        filter_pattern=filter_pattern,
        as_json=as_json,
        concurrency=settings.concurrency,
    )


async def run_delete(
    settings: Settings,
    image_ref: str,
    issuer: CredentialIssuer | None = None,
    config: RegistryConfig | None = None,
) -> str:
    """Delete a repository:tag reference and trigger garbage collection.

    The reference is validated before any credential is requested.

    Returns:
        The deleted reference
    """
    parse_image_reference(image_ref)

    issuer = issuer or account_credential_issuer(settings)
    config = config or settings.registry_config()

    credential = await acquire_credential(settings.registry_host, issuer)
    deleted = await delete_tag(config, credential, image_ref)
    logger.debug(f"Garbage collection triggered after deleting {deleted}")
    return deleted
