"""Line records for a parsed versions file.

A :class:`VersionsDocument` keeps every line of the file, including comments,
blank lines and lines it cannot parse, so that rendering it back only changes
the values that were explicitly updated (and the ``# Updated:`` stamp).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum

TIMESTAMP_PATTERN = re.compile(r"^#\s*Updated:")


class LineKind(str, Enum):
    BLANK = "blank"
    COMMENT = "comment"
    KEY_VALUE = "key_value"
    MALFORMED = "malformed"  # no "=" or empty key; kept verbatim, never parsed


@dataclass(frozen=True)
class ConfigLine:
    kind: LineKind
    raw: str  # line text without its line ending
    eol: str = ""
    key: str | None = None
    value: str | None = None
    head: str = ""  # indentation, key, "=" and any spaces before the value
    tail: str = ""  # trailing whitespace after the value

    @property
    def is_timestamp(self) -> bool:
        return self.kind is LineKind.COMMENT and TIMESTAMP_PATTERN.match(self.raw) is not None

    @classmethod
    def parse(cls, raw: str, eol: str = "") -> ConfigLine:
        stripped = raw.strip()
        if not stripped:
            return cls(LineKind.BLANK, raw, eol)
        if stripped.startswith("#"):
            return cls(LineKind.COMMENT, raw, eol)

        eq = raw.find("=")
        key = raw[:eq].strip() if eq != -1 else ""
        if not key:
            return cls(LineKind.MALFORMED, raw, eol)

        rest = raw[eq + 1 :]
        value = rest.strip()
        lead = len(rest) - len(rest.lstrip())
        tail = rest[len(rest.rstrip()) :] if value else ""
        return cls(
            LineKind.KEY_VALUE,
            raw,
            eol,
            key=key,
            value=value,
            head=raw[: eq + 1] + rest[:lead],
            tail=tail,
        )

    def with_value(self, value: str) -> ConfigLine:
        return replace(self, raw=f"{self.head}{value}{self.tail}", value=value)

    def render(self) -> str:
        return self.raw + self.eol


@dataclass
class VersionsDocument:
    lines: list[ConfigLine]

    @classmethod
    def parse(cls, text: str) -> VersionsDocument:
        chunks = text.split("\n")
        lines: list[ConfigLine] = []
        for index, chunk in enumerate(chunks):
            last = index == len(chunks) - 1
            if last and chunk == "":
                break
            eol = "" if last else "\n"
            if chunk.endswith("\r") and not last:
                chunk, eol = chunk[:-1], "\r\n"
            lines.append(ConfigLine.parse(chunk, eol))
        return cls(lines)

    def values(self) -> dict[str, str]:
        """Key/value pairs in file order; a repeated key keeps its last value."""
        return {
            line.key: line.value
            for line in self.lines
            if line.kind is LineKind.KEY_VALUE and line.key is not None and line.value is not None
        }

    def apply(self, updates: Mapping[str, str], today: date) -> VersionsDocument:
        """Return a copy with *updates* applied and the timestamp set to *today*.

        Keys in *updates* that the file does not contain are ignored.
        """
        stamp = f"# Updated: {today:%Y-%m-%d}"
        new_lines: list[ConfigLine] = []
        for line in self.lines:
            if line.is_timestamp:
                line = replace(line, raw=stamp)
            elif line.kind is LineKind.KEY_VALUE and line.key in updates:
                line = line.with_value(updates[line.key])
            new_lines.append(line)
        return VersionsDocument(new_lines)

    def render(self) -> str:
        return "".join(line.render() for line in self.lines)


@dataclass(frozen=True)
class VersionsMetadata:
    last_updated: str
    ffmpeg_version: str
