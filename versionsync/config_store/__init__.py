"""Structure-preserving reader/writer for versions.properties."""

from versionsync.config_store.models import ConfigLine, LineKind, VersionsDocument, VersionsMetadata
from versionsync.config_store.store import (
    load_versions_file,
    parse_versions_file,
    read_metadata,
    update_versions_file,
)

__all__ = [
    "ConfigLine",
    "LineKind",
    "VersionsDocument",
    "VersionsMetadata",
    "load_versions_file",
    "parse_versions_file",
    "read_metadata",
    "update_versions_file",
]
