"""Short-lived registry credentials."""

import base64
import logging
from collections.abc import Awaitable, Callable

from .types import CredentialRequest

logger = logging.getLogger(__name__)

# Issuer collaborator: (registry host, request) -> password
CredentialIssuer = Callable[[str, CredentialRequest], Awaitable[str]]

CREDENTIAL_TTL_MINUTES = 5
CREDENTIAL_PERMISSIONS = ("pull", "push")


def encode_credential(password: str) -> str:
    """Encode an issued password as a Basic authorization value.

    Args:
        password: Password returned by the issuance service

    Returns:
        base64 of "v1:<password>"
    """
    return base64.b64encode(f"v1:{password}".encode("utf-8")).decode("ascii")


async def acquire_credential(host: str, issuer: CredentialIssuer) -> str:
    """Request a fresh pull/push credential for the registry host.

    The credential is valid for five minutes and is never cached; callers
    acquire one per command invocation. Errors raised by the issuer are
    propagated unchanged.

    Args:
        host: Registry host name
        issuer: Credential issuance collaborator

    Returns:
        Encoded credential ready for the Authorization header
    """
    request = CredentialRequest(
        expiration_minutes=CREDENTIAL_TTL_MINUTES,
        permissions=CREDENTIAL_PERMISSIONS,
    )
    logger.debug(
        f"Requesting {'/'.join(request.permissions)} credential for {host} "
        f"({request.expiration_minutes}m)"
    )
    password = await issuer(host, request)
    return encode_credential(password)
