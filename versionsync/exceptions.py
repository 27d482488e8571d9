"""Custom exceptions for the version synchronizer."""

from __future__ import annotations

from pathlib import Path


class VersionSyncError(Exception):
    """Base exception for all version synchronizer errors."""


class FetchError(VersionSyncError):
    """Raised when a registry request fails after exhausting retries."""

    def __init__(self, url: str, reason: str, status: int | None = None):
        self.url = url
        self.status = status
        super().__init__(f"{reason}: {url}")


class NoStableTagsFound(VersionSyncError):
    """Raised when a tag listing has no stable tag matching the pattern."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"No stable tags found matching {pattern}")


class ChecksumDownloadError(VersionSyncError):
    """Raised when an artifact cannot be downloaded for checksum verification."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"Failed to download {url}: {reason}")


class ConfigFileNotFound(VersionSyncError):
    """Raised when the versions file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"versions file not found: {path}")


class ConfigFileUnreadable(VersionSyncError):
    """Raised when the versions file exists but cannot be read or decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"cannot read versions file {path}: {reason}")
