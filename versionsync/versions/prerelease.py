"""Heuristic prerelease detection for upstream tags."""

from __future__ import annotations

import re

from versionsync.versions.compare import strip_version_prefix

_NUMERIC_HEAD_RE = re.compile(r"^\d+(?:[.-]\d+)*")

# rc1, -beta, .alpha2, -dev, -pre, -SNAPSHOT, beta.2
_PRERELEASE_SUFFIX_RE = re.compile(
    r"^[-._]?(?:rc|alpha|beta|dev|pre|snapshot)\.?\d*(?:$|[-._+])",
    re.IGNORECASE,
)


def is_prerelease_tag(tag: str) -> bool:
    """Return True if *tag* carries a prerelease suffix or build metadata.

    Only the text after the numeric version is inspected, so
    ``openssl-3.4.0-alpha1`` and ``n8.1-dev`` are prereleases while
    ``nasm-2.16.03`` is stable.
    """
    stripped = strip_version_prefix(tag)
    head = _NUMERIC_HEAD_RE.match(stripped)
    rest = stripped[head.end() :] if head else stripped
    if not rest:
        return False
    if rest.startswith("+"):
        return True
    return _PRERELEASE_SUFFIX_RE.match(rest) is not None
