"""Tests for the console report and the GITHUB_OUTPUT block."""

from __future__ import annotations

from pathlib import Path

from versionsync.config_store.models import VersionsMetadata
from versionsync.updater.models import RunSummary, UpdateResult
from versionsync.updater.report import (
    NO_UPDATES_SENTINEL,
    format_github_output,
    print_report,
    write_github_output,
)

META = VersionsMetadata(last_updated="2026-01-04", ffmpeg_version="8.0")

UPDATED = UpdateResult("Opus", "1.5.2", "1.5.3", True, sha256="ab" * 32)
UNCHANGED = UpdateResult("x264", "stable", "stable", False)
FAILED = UpdateResult("x265", "4.0", "error", False, error="FetchError: HTTP 503: https://x")


class TestFormatGithubOutput:
    def test_with_updates(self):
        out = format_github_output([UPDATED, UNCHANGED, FAILED])
        assert out == (
            "updates_available=true\n"
            "update_summary<<EOF\n"
            "- **Opus**: 1.5.2 → 1.5.3\n"
            "EOF\n"
        )

    def test_without_updates(self):
        out = format_github_output([UNCHANGED, FAILED])
        assert out == (
            "updates_available=false\n"
            "update_summary<<EOF\n"
            f"{NO_UPDATES_SENTINEL}\n"
            "EOF\n"
        )

    def test_multiple_updates_keep_order(self):
        second = UpdateResult("FFmpeg", "n8.0", "n8.0.1", True)
        lines = format_github_output([UPDATED, second]).splitlines()
        assert lines[2:4] == ["- **Opus**: 1.5.2 → 1.5.3", "- **FFmpeg**: n8.0 → n8.0.1"]

    def test_withheld_update_marked(self):
        withheld = UpdateResult(
            "dav1d", "1.4.3", "1.5.0", True, checksum_error="Failed to download x: HTTP 404"
        )
        lines = format_github_output([UPDATED, withheld]).splitlines()
        assert lines[2] == "- **Opus**: 1.5.2 → 1.5.3"
        assert lines[3] == "- **dav1d**: 1.4.3 → 1.5.0 (checksum failed, not written)"


class TestWriteGithubOutput:
    def test_appends(self, tmp_path):
        path = tmp_path / "github_output"
        path.write_text("previous=1\n", encoding="utf-8")

        write_github_output(path, [UNCHANGED])

        text = path.read_text(encoding="utf-8")
        assert text.startswith("previous=1\nupdates_available=false\n")

    def test_unwritable_path_is_logged_not_raised(self, tmp_path):
        write_github_output(tmp_path / "missing-dir" / "out", [UPDATED])


class TestPrintReport:
    def test_dry_run(self, capsys):
        summary = RunSummary(results=[UPDATED, UNCHANGED, FAILED], metadata=META)
        print_report(summary, Path("versions.properties"))
        out = capsys.readouterr().out

        assert "last updated 2026-01-04, FFmpeg 8.0" in out
        assert "⚠ Opus: 1.5.2 → 1.5.3" in out
        assert "✓ x264: stable (up to date)" in out
        assert "✗ x265: FetchError: HTTP 503" in out
        assert "1 update(s) available" in out
        assert "✓ 1 up to date" in out
        assert "1 error(s) occurred" in out
        assert "Run with --write to update versions.properties" in out

    def test_write_mode(self, capsys):
        summary = RunSummary(
            results=[UPDATED],
            metadata=META,
            write_mode=True,
            written={"OPUS_VERSION": "1.5.3", "OPUS_URL": "u", "OPUS_SHA256": "s"},
        )
        print_report(summary, Path("versions.properties"))
        out = capsys.readouterr().out

        assert "✓ Updated versions.properties (3 key(s))" in out
        assert "Run with --write" not in out

    def test_all_up_to_date(self, capsys):
        summary = RunSummary(results=[UNCHANGED], metadata=META, write_mode=True)
        print_report(summary, Path("versions.properties"))
        out = capsys.readouterr().out

        assert "✓ All dependencies up to date" in out
        assert "✓ No updates to write" in out

    def test_checksum_failure_and_fallback(self, capsys):
        pending = UpdateResult(
            "dav1d", "1.4.3", "1.5.0", True, checksum_error="Failed to download x: HTTP 404",
            used_fallback=True,
        )
        summary = RunSummary(results=[pending], metadata=META)
        print_report(summary, Path("versions.properties"))
        out = capsys.readouterr().out

        assert "dav1d: 1.4.3 → 1.5.0 (fallback)" in out
        assert "1 checksum download(s) failed" in out
        assert "(not written)" in out

    def test_errors_without_updates_show_up_to_date_count(self, capsys):
        summary = RunSummary(results=[UNCHANGED, FAILED], metadata=META)
        print_report(summary, Path("versions.properties"))
        out = capsys.readouterr().out

        assert "✓ 1 up to date" in out
        assert "All dependencies up to date" not in out
