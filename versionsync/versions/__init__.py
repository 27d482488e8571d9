"""Version comparison and stable-tag selection."""

from versionsync.versions.compare import compare_versions, strip_version_prefix, version_key
from versionsync.versions.prerelease import is_prerelease_tag
from versionsync.versions.selector import select_latest_stable_tag

__all__ = [
    "compare_versions",
    "is_prerelease_tag",
    "select_latest_stable_tag",
    "strip_version_prefix",
    "version_key",
]
