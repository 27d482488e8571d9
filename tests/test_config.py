"""Tests for environment-driven settings, token discovery and log levels."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from versionsync.core.config import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_USER_AGENT,
    Settings,
    get_github_token,
)
from versionsync.core.logging import _resolve_level


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "GITHUB_TOKEN",
        "GH_TOKEN",
        "GITHUB_OUTPUT",
        "VERSIONSYNC_VERSIONS_FILE",
        "VERSIONSYNC_USER_AGENT",
        "VERSIONSYNC_HTTP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def _gh_result(returncode: int, stdout: str) -> MagicMock:
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    return result


class TestGetGithubToken:
    def test_github_token_wins(self, clean_env):
        clean_env.setenv("GITHUB_TOKEN", "actions-token")
        clean_env.setenv("GH_TOKEN", "cli-token")
        with patch("versionsync.core.config.subprocess.run") as run:
            assert get_github_token() == "actions-token"
        run.assert_not_called()

    def test_blank_github_token_skipped(self, clean_env):
        clean_env.setenv("GITHUB_TOKEN", "  ")
        clean_env.setenv("GH_TOKEN", "cli-token")
        assert get_github_token() == "cli-token"

    def test_gh_cli_fallback(self, clean_env):
        with patch(
            "versionsync.core.config.subprocess.run",
            return_value=_gh_result(0, "gho_abc\n"),
        ):
            assert get_github_token() == "gho_abc"

    def test_gh_not_logged_in(self, clean_env):
        with patch(
            "versionsync.core.config.subprocess.run",
            return_value=_gh_result(1, ""),
        ):
            assert get_github_token() is None

    @pytest.mark.parametrize(
        "error",
        [FileNotFoundError("gh"), PermissionError("gh"), subprocess.TimeoutExpired("gh", 5)],
    )
    def test_gh_unavailable(self, clean_env, error):
        with patch("versionsync.core.config.subprocess.run", side_effect=error):
            assert get_github_token() is None


class TestSettingsFromEnv:
    def test_defaults(self, clean_env):
        with patch("versionsync.core.config.subprocess.run", side_effect=FileNotFoundError):
            settings = Settings.from_env()

        assert settings.versions_file == Path("versions.properties")
        assert settings.github_token is None
        assert settings.user_agent == DEFAULT_USER_AGENT
        assert settings.http_timeout == DEFAULT_HTTP_TIMEOUT
        assert settings.github_output is None

    def test_overrides(self, clean_env, tmp_path):
        clean_env.setenv("GITHUB_TOKEN", "tok")
        clean_env.setenv("VERSIONSYNC_VERSIONS_FILE", str(tmp_path / "v.properties"))
        clean_env.setenv("VERSIONSYNC_USER_AGENT", "custom/2.0")
        clean_env.setenv("VERSIONSYNC_HTTP_TIMEOUT", "12.5")
        clean_env.setenv("GITHUB_OUTPUT", str(tmp_path / "out"))

        settings = Settings.from_env()

        assert settings.versions_file == tmp_path / "v.properties"
        assert settings.github_token == "tok"
        assert settings.user_agent == "custom/2.0"
        assert settings.http_timeout == 12.5
        assert settings.github_output == tmp_path / "out"


class TestResolveLevel:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("debug", "DEBUG"),
            (" Info ", "INFO"),
            ("", "WARNING"),
            ("verbose", "WARNING"),
        ],
    )
    def test_levels(self, value, expected):
        assert _resolve_level(value) == expected
