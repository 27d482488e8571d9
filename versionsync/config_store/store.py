"""File-level operations on versions.properties."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date
from pathlib import Path

import structlog

from versionsync.config_store.models import VersionsDocument, VersionsMetadata
from versionsync.exceptions import ConfigFileNotFound, ConfigFileUnreadable

log = structlog.get_logger("versionsync.config_store")

_UPDATED_DATE_RE = re.compile(r"# Updated: (\d{4}-\d{2}-\d{2})")
_FFMPEG_VERSION_RE = re.compile(r"FFMPEG_VERSION=n(\S+)")


def _read_text(path: Path) -> str:
    # newline="" keeps \r\n intact so untouched lines are written back byte for byte
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as exc:
        raise ConfigFileNotFound(path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigFileUnreadable(path, str(exc)) from exc


def load_versions_file(path: Path) -> VersionsDocument:
    return VersionsDocument.parse(_read_text(path))


def parse_versions_file(path: Path) -> dict[str, str]:
    """Read *path* and return its KEY=VALUE pairs.

    Comments, blank lines and lines without ``=`` are skipped.
    Raises :class:`ConfigFileNotFound` if the file does not exist.
    """
    return load_versions_file(path).values()


def update_versions_file(
    path: Path,
    updates: Mapping[str, str],
    *,
    today: date | None = None,
) -> dict[str, str]:
    """Rewrite the values of *updates* in place, leaving every other line untouched.

    The ``# Updated:`` comment is restamped with *today* (default: the current
    date). Keys missing from the file are not appended. Returns the subset of
    *updates* that was actually applied.
    """
    document = load_versions_file(path)
    present = document.values()
    applied = {key: value for key, value in updates.items() if key in present}
    missing = sorted(set(updates) - set(applied))
    if missing:
        log.warning("versions_file.keys_missing", path=str(path), keys=missing)

    rendered = document.apply(applied, today or date.today()).render()
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(rendered)
    log.info("versions_file.written", path=str(path), updated=len(applied))
    return applied


def read_metadata(text: str) -> VersionsMetadata:
    """Extract the last-updated date and the FFmpeg pin (without its ``n``)."""
    date_match = _UPDATED_DATE_RE.search(text)
    ffmpeg_match = _FFMPEG_VERSION_RE.search(text)
    return VersionsMetadata(
        last_updated=date_match.group(1) if date_match else date.today().isoformat(),
        ffmpeg_version=ffmpeg_match.group(1) if ffmpeg_match else "unknown",
    )
