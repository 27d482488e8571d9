"""Registry fetchers, one per fetch-source kind."""

from __future__ import annotations

from typing import assert_never

from versionsync.core.http import RegistryClient
from versionsync.fetchers.bitbucket import fetch_bitbucket_latest, list_bitbucket_tags
from versionsync.fetchers.github import fetch_github_latest, list_github_tags
from versionsync.fetchers.gitlab import fetch_gitlab_latest, list_gitlab_tags
from versionsync.registry.models import (
    BitBucketTags,
    FetchSource,
    GitHubTags,
    GitLabTags,
    StaticSource,
)

__all__ = [
    "fetch_bitbucket_latest",
    "fetch_github_latest",
    "fetch_gitlab_latest",
    "fetch_latest",
    "list_bitbucket_tags",
    "list_github_tags",
    "list_gitlab_tags",
]


async def fetch_latest(client: RegistryClient, source: FetchSource) -> str:
    """Return the raw candidate version for *source* (before normalisation)."""
    match source:
        case StaticSource(version=version):
            return version
        case GitHubTags():
            return await fetch_github_latest(client, source)
        case GitLabTags():
            return await fetch_gitlab_latest(client, source)
        case BitBucketTags():
            return await fetch_bitbucket_latest(client, source)
        case _:
            assert_never(source)
