"""Total ordering over heterogeneous upstream version strings."""

from __future__ import annotations

import functools
import re

# Longest first so "nasm-" is not eaten by the bare "n" of FFmpeg tags.
VERSION_PREFIX_PATTERN = re.compile(r"^(?:openssl-|nasm-|v|n)")

_SEPARATOR_RE = re.compile(r"[.-]")
_LEADING_DIGITS_RE = re.compile(r"^\d+")


def strip_version_prefix(value: str) -> str:
    """Drop a known tag prefix: ``v1.2`` / ``n8.0`` / ``nasm-2.16`` / ``openssl-3.4``."""
    return VERSION_PREFIX_PATTERN.sub("", value, count=1)


def _segments(version: str) -> list[int]:
    """Split into numeric segments; a segment without leading digits counts as 0."""
    parts: list[int] = []
    for segment in _SEPARATOR_RE.split(strip_version_prefix(version)):
        match = _LEADING_DIGITS_RE.match(segment)
        parts.append(int(match.group()) if match else 0)
    return parts


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings, returning -1, 0 or 1.

    Missing trailing segments count as 0, so ``1.0`` == ``1.0.0``.
    The empty string sorts below every non-empty version.
    """
    if not a or not b:
        return (a > b) - (a < b)

    parts_a = _segments(a)
    parts_b = _segments(b)
    width = max(len(parts_a), len(parts_b))
    parts_a += [0] * (width - len(parts_a))
    parts_b += [0] * (width - len(parts_b))
    return (parts_a > parts_b) - (parts_a < parts_b)


version_key = functools.cmp_to_key(compare_versions)
