"""Runtime settings, resolved from the environment."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

import structlog

log = structlog.get_logger("versionsync.config")

DEFAULT_VERSIONS_FILE = "versions.properties"
DEFAULT_USER_AGENT = "ffmpeg-prebuilds-version-fetcher/1.0"
DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    versions_file: Path
    github_token: str | None = None
    user_agent: str = DEFAULT_USER_AGENT
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    github_output: Path | None = None

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables.

        VERSIONSYNC_VERSIONS_FILE — path to versions.properties (default: ./versions.properties)
        VERSIONSYNC_USER_AGENT    — User-Agent sent to every registry
        VERSIONSYNC_HTTP_TIMEOUT  — per-attempt HTTP timeout in seconds
        GITHUB_OUTPUT             — CI output file to append results to
        """
        versions_file = os.environ.get("VERSIONSYNC_VERSIONS_FILE") or DEFAULT_VERSIONS_FILE
        github_output = os.environ.get("GITHUB_OUTPUT")
        return cls(
            versions_file=Path(versions_file),
            github_token=get_github_token(),
            user_agent=os.environ.get("VERSIONSYNC_USER_AGENT") or DEFAULT_USER_AGENT,
            http_timeout=float(os.environ.get("VERSIONSYNC_HTTP_TIMEOUT") or DEFAULT_HTTP_TIMEOUT),
            github_output=Path(github_output) if github_output else None,
        )


def get_github_token() -> str | None:
    """GitHub token for api.github.com, or None to run unauthenticated.

    ``GITHUB_TOKEN`` (set by Actions) wins over ``GH_TOKEN``; a local ``gh``
    login is the last resort.
    """
    for name in ("GITHUB_TOKEN", "GH_TOKEN"):
        token = os.environ.get(name, "").strip()
        if token:
            return token
    return _gh_cli_token()


def _gh_cli_token() -> str | None:
    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        log.debug("github_token.gh_unavailable", error=str(exc))
        return None
    token = result.stdout.strip()
    if result.returncode != 0 or not token:
        log.debug("github_token.gh_not_logged_in", returncode=result.returncode)
        return None
    return token
