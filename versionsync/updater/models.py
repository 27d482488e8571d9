"""Data models for an update run."""

from __future__ import annotations

from dataclasses import dataclass, field

from versionsync.config_store.models import VersionsMetadata


@dataclass
class UpdateResult:
    """Outcome of checking one dependency. Never persisted."""

    name: str
    current_version: str
    latest_version: str
    updated: bool
    sha256: str | None = None
    error: str | None = None
    checksum_error: str | None = None  # updated, but the artifact could not be hashed
    used_fallback: bool = False


@dataclass
class RunSummary:
    """Everything one run produced, in registry order."""

    results: list[UpdateResult]
    metadata: VersionsMetadata
    write_mode: bool = False
    written: dict[str, str] = field(default_factory=dict)

    @property
    def updates(self) -> list[UpdateResult]:
        return [r for r in self.results if r.updated]

    @property
    def errors(self) -> list[UpdateResult]:
        return [r for r in self.results if r.error]

    @property
    def checksum_failures(self) -> list[UpdateResult]:
        return [r for r in self.results if r.checksum_error]

    @property
    def unchanged(self) -> list[UpdateResult]:
        return [r for r in self.results if not r.updated and not r.error]

    @property
    def exit_code(self) -> int:
        """0 unless something failed and no update was written in this run."""
        failed = bool(self.errors or self.checksum_failures)
        if failed and not self.written:
            return 1
        return 0
