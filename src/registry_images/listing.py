"""Repository and tag listing."""

import asyncio
import json
import logging
import re
from collections.abc import Awaitable, Callable, Iterable, Sequence

from .core.session import create_session
from .core.types import RegistryConfig, TagRecord
from .exceptions import PatternError
from .operations.repositories import fetch_catalog, fetch_tags
from .utils.digest import is_digest_tag

logger = logging.getLogger(__name__)

TABLE_HEADERS = ("REPOSITORY", "TAG")
COLUMN_SEPARATOR = "  "

_LEADING_SLASHES = re.compile(r"^/+")

AccountResolver = Callable[[], Awaitable[str]]


def compile_filter(pattern: str | None) -> re.Pattern[str]:
    """Compile a repository filter; no pattern matches every repository.

    Raises:
        PatternError: If the pattern is not a valid regular expression
    """
    try:
        return re.compile(pattern or "")
    except re.error as e:
        raise PatternError(pattern or "", str(e)) from e


def strip_leading_slashes(repository: str) -> str:
    return _LEADING_SLASHES.sub("", repository)


def account_prefix_pattern(account_id: str) -> re.Pattern[str]:
    return re.compile(f"^{re.escape(account_id)}/")


def display_name(repository: str, account_prefix: re.Pattern[str]) -> str:
    """Turn a catalog path into the name shown to the operator.

    Leading slashes are removed, then the account id prefix, once.
    """
    return account_prefix.sub("", strip_leading_slashes(repository), count=1)


def filter_records(
    records: Iterable[TagRecord], digests: bool = False
) -> list[TagRecord]:
    """Drop digest-form tags (unless requested) and records left without tags."""
    filtered = []
    for record in records:
        tags = record.tags if digests else [t for t in record.tags if not is_digest_tag(t)]
        if tags:
            filtered.append(TagRecord(name=record.name, tags=list(tags)))
    return filtered


def compute_column_widths(
    rows: Sequence[Sequence[str]], headers: Sequence[str]
) -> list[int]:
    """Width of every column but the last: longest header or cell.

    The last column is left unpadded and reported as 0.
    """
    widths = [0] * len(headers)
    for i in range(len(headers) - 1):
        widths[i] = max([len(headers[i])] + [len(row[i]) for row in rows])
    return widths


def _format_row(values: Sequence[str], widths: Sequence[int]) -> str:
    return COLUMN_SEPARATOR.join(v.ljust(w) for v, w in zip(values, widths))


def render_table(records: Sequence[TagRecord]) -> str:
    rows = [(r.name, tag) for r in records for tag in r.tags]
    widths = compute_column_widths(rows, TABLE_HEADERS)
    lines = [_format_row(TABLE_HEADERS, widths)]
    lines.extend(_format_row(row, widths) for row in rows)
    return "\n".join(lines)


def render_json(records: Sequence[TagRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], indent=2)


def render_records(
    records: Iterable[TagRecord], digests: bool = False, as_json: bool = False
) -> str:
    """Filter records and render them as JSON or an aligned table."""
    pruned = filter_records(records, digests=digests)
    if as_json:
        return render_json(pruned)
    return render_table(pruned)


async def collect_tag_records(
    config: RegistryConfig,
    credential: str,
    resolve_account_id: AccountResolver,
    filter_pattern: str | None = None,
    concurrency: int = 4,
) -> list[TagRecord]:
    """Fetch tags for every catalog repository matching the filter.

    Records come back in catalog order. Repositories that do not match the
    filter are never queried.

    Args:
        config: Registry configuration
        credential: Encoded Basic credential
        resolve_account_id: Returns the account whose path prefix is hidden
            from display names
        filter_pattern: Regular expression searched in repository names
        concurrency: Maximum number of tag requests in flight

    Raises:
        RegistryError: If the catalog or a tag list request fails
        PatternError: If the filter is invalid
    """
    session = await create_session(config.timeout)
    try:
        catalog = await fetch_catalog(session, config, credential)
        account_prefix = account_prefix_pattern(await resolve_account_id())
        repo_filter = compile_filter(filter_pattern)

        selected = [
            name
            for name in (strip_leading_slashes(repo) for repo in catalog)
            if repo_filter.search(name)
        ]
        logger.debug(f"{len(selected)} of {len(catalog)} repositories match filter")

        semaphore = asyncio.Semaphore(concurrency)

        async def load(repository: str) -> TagRecord:
            async with semaphore:
                tags = await fetch_tags(session, config, credential, repository)
            return TagRecord(name=display_name(repository, account_prefix), tags=tags)

        results = await asyncio.gather(
            *(load(repo) for repo in selected), return_exceptions=True
        )
    finally:
        await session.close()

    # First failure in catalog order wins
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)


async def list_images(
    config: RegistryConfig,
    credential: str,
    resolve_account_id: AccountResolver,
    filter_pattern: str | None = None,
    as_json: bool = False,
    digests: bool = False,
    concurrency: int = 4,
) -> str:
    """List repositories and their tags, rendered for the operator.

    Digest-form tags are only shown when ``digests`` is set; the command
    line never sets it.

    Returns:
        Pretty JSON or a REPOSITORY/TAG table
    """
    records = await collect_tag_records(
        config,
        credential,
        resolve_account_id,
        filter_pattern=filter_pattern,
        concurrency=concurrency,
    )
    return render_records(records, digests=digests, as_json=as_json)
