"""Update orchestrator: one task per dependency, one write for the whole batch."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence

import httpx
import structlog

from versionsync.config_store.store import load_versions_file, read_metadata, update_versions_file
from versionsync.core.config import Settings
from versionsync.core.http import RegistryClient
from versionsync.exceptions import ChecksumDownloadError, FetchError, NoStableTagsFound
from versionsync.fetchers import fetch_latest
from versionsync.registry.dependencies import DEPENDENCIES
from versionsync.registry.models import DependencyDescriptor
from versionsync.updater.models import RunSummary, UpdateResult
from versionsync.versions.compare import compare_versions

log = structlog.get_logger("versionsync.updater")

UNKNOWN_VERSION = "unknown"


def is_newer(latest: str, current: str | None) -> bool:
    """True if *latest* should replace *current*.

    A missing pin always counts as outdated. A different string that compares
    equal (``stable`` vs ``master``) is a change; one that compares lower is a
    downgrade and is refused.
    """
    if current is None:
        return True
    if latest == current:
        return False
    return compare_versions(latest, current) >= 0


async def _fetch_raw(client: RegistryClient, dep: DependencyDescriptor) -> tuple[str, bool]:
    try:
        return await fetch_latest(client, dep.fetch_source), False
    except (FetchError, NoStableTagsFound) as exc:
        if dep.fallback_version is None:
            raise
        log.warning(
            "dependency.fallback",
            dependency=dep.name,
            fallback=dep.fallback_version,
            error=str(exc),
        )
        return dep.fallback_version, True


async def check_dependency(
    client: RegistryClient,
    dep: DependencyDescriptor,
    current_versions: Mapping[str, str],
) -> UpdateResult:
    """Fetch -> normalise -> compare -> (checksum) for a single dependency.

    Never raises: any failure becomes :attr:`UpdateResult.error`.
    """
    current = current_versions.get(dep.version_key)
    current_display = current or UNKNOWN_VERSION
    log.info("dependency.checking", dependency=dep.name, current=current_display)

    try:
        raw, used_fallback = await _fetch_raw(client, dep)
        latest = dep.normalize(raw)
        updated = is_newer(latest, current)
        if not updated and latest != current:
            log.warning("dependency.downgrade_skipped", dependency=dep.name, current=current, latest=latest)

        result = UpdateResult(
            name=dep.name,
            current_version=current_display,
            latest_version=latest,
            updated=updated,
            used_fallback=used_fallback,
        )
        if updated and dep.verifies_checksum:
            url = dep.download_url(latest)
            log.info("checksum.downloading", dependency=dep.name, url=url)
            try:
                result.sha256 = await client.sha256(url)  # type: ignore[arg-type]
            except ChecksumDownloadError as exc:
                log.warning("checksum.failed", dependency=dep.name, url=url, error=str(exc))
                result.checksum_error = str(exc)

        log.info("dependency.checked", dependency=dep.name, latest=latest, updated=updated)
        return result
    except Exception as exc:
        log.error("dependency.failed", dependency=dep.name, error=str(exc))
        return UpdateResult(
            name=dep.name,
            current_version=current_display,
            latest_version="error",
            updated=False,
            error=f"{type(exc).__name__}: {exc}",
        )


async def check_for_updates(
    client: RegistryClient,
    dependencies: Sequence[DependencyDescriptor],
    current_versions: Mapping[str, str],
) -> list[UpdateResult]:
    """Check every dependency concurrently; results come back in registry order."""
    return list(
        await asyncio.gather(
            *(check_dependency(client, dep, current_versions) for dep in dependencies)
        )
    )


def build_updates(
    dependencies: Sequence[DependencyDescriptor],
    results: Sequence[UpdateResult],
) -> dict[str, str]:
    """Collect the KEY -> value pairs to write for every updated dependency.

    A dependency whose checksum could not be computed is withheld entirely so
    its URL and version never drift away from a stale SHA256.
    """
    updates: dict[str, str] = {}
    for dep, result in zip(dependencies, results, strict=True):
        if not result.updated or result.checksum_error:
            continue
        updates[dep.version_key] = result.latest_version
        if result.sha256 and dep.sha256_key:
            updates[dep.sha256_key] = result.sha256
        if dep.url_key and dep.download_url_template:
            updates[dep.url_key] = dep.download_url(result.latest_version)  # type: ignore[assignment]
    return updates


async def run_update(
    settings: Settings,
    *,
    write: bool = False,
    dependencies: Sequence[DependencyDescriptor] = DEPENDENCIES,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RunSummary:
    """Run one full check against ``settings.versions_file``.

    Raises :class:`~versionsync.exceptions.ConfigFileNotFound` before any
    network access if the versions file is missing.
    """
    document = load_versions_file(settings.versions_file)
    current_versions = document.values()
    metadata = read_metadata(document.render())

    async with RegistryClient(
        user_agent=settings.user_agent,
        timeout=settings.http_timeout,
        github_token=settings.github_token,
        transport=transport,
    ) as client:
        results = await check_for_updates(client, dependencies, current_versions)

    summary = RunSummary(results=results, metadata=metadata, write_mode=write)
    log.info(
        "run.checked",
        total=len(results),
        updates=len(summary.updates),
        errors=len(summary.errors),
    )

    if write:
        updates = build_updates(dependencies, results)
        if updates:
            summary.written = update_versions_file(settings.versions_file, updates)
    return summary
