"""Shared pytest fixtures for version synchronizer tests.

No test touches the network: registries are faked with httpx.MockTransport.
"""

from collections.abc import Callable

import httpx
import pytest

from versionsync.core.http import RegistryClient

SAMPLE_VERSIONS = """\
# FFmpeg Prebuilds Dependency Versions
# Updated: 2026-01-04

# Core FFmpeg
FFMPEG_VERSION=n8.0
FFMPEG_GIT_URL=https://git.ffmpeg.org/ffmpeg.git

# Video Codecs
X264_VERSION=stable
  X265_VERSION=4.0

# Audio Codecs
OPUS_VERSION=1.5.2
OPUS_URL=https://downloads.xiph.org/releases/opus/opus-1.5.2.tar.gz
OPUS_SHA256=0000000000000000000000000000000000000000000000000000000000000000
"""


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def make_client() -> Callable[..., RegistryClient]:
    """Build a RegistryClient whose requests are answered by *handler*."""

    def _make(handler, *, github_token: str | None = None) -> RegistryClient:
        return RegistryClient(
            user_agent="versionsync-tests/1.0",
            timeout=5.0,
            github_token=github_token,
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
def versions_file(tmp_path):
    path = tmp_path / "versions.properties"
    path.write_text(SAMPLE_VERSIONS, encoding="utf-8")
    return path


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_VERSIONS
