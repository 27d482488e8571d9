"""Data models for the dependency registry."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class StaticSource:
    """A fixed pin, e.g. a maintained branch name instead of a tag."""

    version: str


@dataclass(frozen=True)
class GitHubTags:
    repo: str  # owner/name
    tag_pattern: re.Pattern[str]


@dataclass(frozen=True)
class GitLabTags:
    host: str
    project: str  # namespace/name, URL-encoded at request time
    tag_pattern: re.Pattern[str]


@dataclass(frozen=True)
class BitBucketTags:
    repo: str  # workspace/slug
    tag_pattern: re.Pattern[str]


FetchSource = StaticSource | GitHubTags | GitLabTags | BitBucketTags


@dataclass(frozen=True)
class DependencyDescriptor:
    """One tracked dependency and the versions-file keys it owns.

    *download_url_template* is formatted with ``version=`` and is required
    whenever *sha256_key* is set. *strip_prefix* is removed from fetched tags
    before they are compared or stored. *fallback_version* is used when the
    remote source cannot be reached.
    """

    name: str
    version_key: str
    fetch_source: FetchSource
    url_key: str | None = None
    sha256_key: str | None = None
    download_url_template: str | None = None
    strip_prefix: str | None = None
    fallback_version: str | None = None

    def __post_init__(self) -> None:
        if self.sha256_key and not self.download_url_template:
            raise ValueError(f"{self.name}: sha256_key requires download_url_template")

    @property
    def verifies_checksum(self) -> bool:
        return self.sha256_key is not None and self.download_url_template is not None

    def download_url(self, version: str) -> str | None:
        if self.download_url_template is None:
            return None
        return self.download_url_template.format(version=version)

    def normalize(self, raw_tag: str) -> str:
        """Map a fetched tag to the form stored in the versions file."""
        if self.strip_prefix and raw_tag.startswith(self.strip_prefix):
            return raw_tag[len(self.strip_prefix) :]
        return raw_tag
