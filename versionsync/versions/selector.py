"""Pick the newest stable tag out of a raw tag listing."""

from __future__ import annotations

import re
from collections.abc import Iterable

from versionsync.exceptions import NoStableTagsFound
from versionsync.versions.compare import version_key
from versionsync.versions.prerelease import is_prerelease_tag


def select_latest_stable_tag(tags: Iterable[str], pattern: re.Pattern[str]) -> str:
    """Return the highest tag that matches *pattern* and is not a prerelease.

    Ties between equal-comparing tags go to the one seen first in *tags*
    (``sorted`` is stable, and stays stable with ``reverse=True``).

    Raises :class:`NoStableTagsFound` when nothing qualifies.
    """
    matching = [tag for tag in tags if pattern.search(tag) and not is_prerelease_tag(tag)]
    if not matching:
        raise NoStableTagsFound(pattern.pattern)
    return sorted(matching, key=version_key, reverse=True)[0]
