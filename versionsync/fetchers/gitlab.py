"""GitLab tags: GET /api/v4/projects/{id}/repository/tags, single page."""

from __future__ import annotations

from urllib.parse import quote

from versionsync.core.http import RegistryClient
from versionsync.fetchers.payload import tag_names
from versionsync.registry.models import GitLabTags
from versionsync.versions.selector import select_latest_stable_tag

TAGS_PAGE_SIZE = 100


async def list_gitlab_tags(
    client: RegistryClient,
    host: str,
    project: str,
    *,
    page_size: int = TAGS_PAGE_SIZE,
) -> list[str]:
    project_id = quote(project, safe="")
    url = f"https://{host}/api/v4/projects/{project_id}/repository/tags"
    items = await client.get_json(url, params={"per_page": page_size})
    return tag_names(url, items)


async def fetch_gitlab_latest(client: RegistryClient, source: GitLabTags) -> str:
    tags = await list_gitlab_tags(client, source.host, source.project)
    return select_latest_stable_tag(tags, source.tag_pattern)
