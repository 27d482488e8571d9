"""BitBucket tags: GET /2.0/repositories/{repo}/refs/tags, cursor-paginated.

BitBucket lists tags oldest first, so the newest tag is usually on the last
page and every ``next`` link has to be followed before selecting.
"""

from __future__ import annotations

import structlog

from versionsync.core.http import RegistryClient
from versionsync.exceptions import FetchError
from versionsync.fetchers.payload import UNEXPECTED_SHAPE, tag_names
from versionsync.registry.models import BitBucketTags
from versionsync.versions.selector import select_latest_stable_tag

log = structlog.get_logger("versionsync.fetchers")

BITBUCKET_API = "https://api.bitbucket.org/2.0"
TAGS_PAGE_SIZE = 100


async def list_bitbucket_tags(
    client: RegistryClient,
    repo: str,
    *,
    page_size: int = TAGS_PAGE_SIZE,
) -> list[str]:
    tags: list[str] = []
    next_url: str | None = f"{BITBUCKET_API}/repositories/{repo}/refs/tags?pagelen={page_size}"
    seen: set[str] = set()

    while next_url:
        if next_url in seen:
            log.warning("bitbucket.pagination_loop", repo=repo, url=next_url)
            break
        seen.add(next_url)

        data = await client.get_json(next_url)
        if not isinstance(data, dict) or not isinstance(data.get("next"), str | None):
            raise FetchError(next_url, UNEXPECTED_SHAPE)
        tags.extend(tag_names(next_url, data.get("values", [])))
        next_url = data.get("next")

    log.debug("bitbucket.tags_listed", repo=repo, pages=len(seen), tags=len(tags))
    return tags


async def fetch_bitbucket_latest(client: RegistryClient, source: BitBucketTags) -> str:
    tags = await list_bitbucket_tags(client, source.repo)
    return select_latest_stable_tag(tags, source.tag_pattern)
