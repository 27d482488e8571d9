"""Static registry of tracked third-party dependencies."""

from versionsync.registry.dependencies import (
    DEPENDENCIES,
    get_dependency,
    get_dependency_by_version_key,
)
from versionsync.registry.models import (
    BitBucketTags,
    DependencyDescriptor,
    FetchSource,
    GitHubTags,
    GitLabTags,
    StaticSource,
)

__all__ = [
    "DEPENDENCIES",
    "BitBucketTags",
    "DependencyDescriptor",
    "FetchSource",
    "GitHubTags",
    "GitLabTags",
    "StaticSource",
    "get_dependency",
    "get_dependency_by_version_key",
]
