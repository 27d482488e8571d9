"""Shape checks for decoded tag listings."""

from __future__ import annotations

from typing import Any

from versionsync.exceptions import FetchError

UNEXPECTED_SHAPE = "unexpected response shape"


def tag_names(url: str, items: Any) -> list[str]:
    """Return the ``name`` of every tag object in *items*.

    Raises :class:`FetchError` unless *items* is a list of objects that each
    carry a string ``name``.
    """
    if not isinstance(items, list):
        raise FetchError(url, UNEXPECTED_SHAPE)
    names: list[str] = []
    for item in items:
        name = item.get("name") if isinstance(item, dict) else None
        if not isinstance(name, str):
            raise FetchError(url, UNEXPECTED_SHAPE)
        names.append(name)
    return names
