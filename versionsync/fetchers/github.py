"""GitHub tags: GET /repos/{owner}/{repo}/tags, paginated by ``page``."""

from __future__ import annotations

from versionsync.core.http import RegistryClient
from versionsync.fetchers.payload import tag_names
from versionsync.registry.models import GitHubTags
from versionsync.versions.selector import select_latest_stable_tag

GITHUB_API = "https://api.github.com"
TAGS_PAGE_SIZE = 100
MAX_TAG_PAGES = 2


async def list_github_tags(
    client: RegistryClient,
    repo: str,
    *,
    page_size: int = TAGS_PAGE_SIZE,
    max_pages: int = MAX_TAG_PAGES,
) -> list[str]:
    """Collect tag names from the first *max_pages* pages (newest first).

    Stops early on an empty or short page.
    """
    tags: list[str] = []
    url = f"{GITHUB_API}/repos/{repo}/tags"
    for page in range(1, max_pages + 1):
        items = await client.get_json(
            url,
            params={"per_page": page_size, "page": page},
            headers=client.github_headers(),
        )
        names = tag_names(url, items)
        if not names:
            break
        tags.extend(names)
        if len(names) < page_size:
            break
    return tags


async def fetch_github_latest(client: RegistryClient, source: GitHubTags) -> str:
    tags = await list_github_tags(client, source.repo)
    return select_latest_stable_tag(tags, source.tag_pattern)
