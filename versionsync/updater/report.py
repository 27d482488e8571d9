"""Human-readable console report and CI (GITHUB_OUTPUT) reporting."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import click
import structlog

from versionsync.updater.models import RunSummary, UpdateResult

log = structlog.get_logger("versionsync.report")

NO_UPDATES_SENTINEL = "No updates available"
_RULE = "=" * 40


def _section(title: str) -> None:
    click.echo(f"\n{_RULE}\n{title}\n{_RULE}\n")


def _result_line(result: UpdateResult) -> str:
    if result.error:
        return f"  ✗ {result.name}: {result.error}"
    suffix = " (fallback)" if result.used_fallback else ""
    if result.updated:
        return (
            f"  ⚠ {result.name}: {result.current_version} → "
            f"{result.latest_version}{suffix}"
        )
    return f"  ✓ {result.name}: {result.current_version} (up to date){suffix}"


def print_report(summary: RunSummary, versions_file: Path) -> None:
    """Print per-dependency lines, then the update/error tally."""
    meta = summary.metadata
    click.echo(
        f"{versions_file.name}: last updated {meta.last_updated}, FFmpeg {meta.ffmpeg_version}\n"
    )
    for result in summary.results:
        click.echo(_result_line(result))

    _section("Summary")
    updates = summary.updates
    if updates:
        click.echo(f"⚠ {len(updates)} update(s) available:\n")
        for u in updates:
            click.echo(f"  - {u.name}: {u.current_version} → {u.latest_version}")
        click.echo(f"\n✓ {len(summary.unchanged)} up to date")
    elif summary.errors:
        click.echo(f"✓ {len(summary.unchanged)} up to date")
    else:
        click.echo("✓ All dependencies up to date")

    if summary.checksum_failures:
        click.echo(f"\n✗ {len(summary.checksum_failures)} checksum download(s) failed:\n")
        for r in summary.checksum_failures:
            click.echo(f"  - {r.name}: {r.checksum_error} (not written)")

    if summary.errors:
        click.echo(f"\n✗ {len(summary.errors)} error(s) occurred:\n")
        for r in summary.errors:
            click.echo(f"  - {r.name}: {r.error}")

    if summary.write_mode:
        if summary.written:
            click.echo(f"\n✓ Updated {versions_file.name} ({len(summary.written)} key(s))")
        else:
            click.echo("\n✓ No updates to write")
    elif updates:
        click.echo(f"\nℹ Run with --write to update {versions_file.name}")


def format_github_output(results: Sequence[UpdateResult]) -> str:
    updates = [r for r in results if r.updated]
    summary = "\n".join(
        f"- **{u.name}**: {u.current_version} → {u.latest_version}"
        + (" (checksum failed, not written)" if u.checksum_error else "")
        for u in updates
    )
    lines = [
        f"updates_available={'true' if updates else 'false'}",
        "update_summary<<EOF",
        summary or NO_UPDATES_SENTINEL,
        "EOF",
    ]
    return "\n".join(lines) + "\n"


def write_github_output(path: Path, results: Sequence[UpdateResult]) -> None:
    """Append ``updates_available`` and the ``update_summary`` block to *path*."""
    try:
        with path.open("a", encoding="utf-8") as f:
            f.write(format_github_output(results))
    except OSError as exc:
        log.error("github_output.write_failed", path=str(path), error=str(exc))
