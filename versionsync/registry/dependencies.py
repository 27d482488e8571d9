"""The tracked dependencies, in report order."""

from __future__ import annotations

import re

from versionsync.registry.models import (
    BitBucketTags,
    DependencyDescriptor,
    GitHubTags,
    GitLabTags,
    StaticSource,
)

SEMVER_TAG = re.compile(r"^v[0-9]+(?:\.[0-9]+)*$")
SEMVER_NO_PREFIX_TAG = re.compile(r"^[0-9]+(?:\.[0-9]+)*$")
FFMPEG_TAG = re.compile(r"^n[0-9]+(?:\.[0-9]+){1,2}$")
NASM_TAG = re.compile(r"^nasm-[0-9]+(?:\.[0-9]+)*$")
OPENSSL_TAG = re.compile(r"^openssl-3\.[0-9]+(?:\.[0-9]+)?$")

_XIPH_MIRROR = "https://ftp.osuosl.org/pub/xiph/releases"

DEPENDENCIES: tuple[DependencyDescriptor, ...] = (
    # ── Core ──────────────────────────────────────────────────────────────
    DependencyDescriptor(
        name="FFmpeg",
        version_key="FFMPEG_VERSION",
        fetch_source=GitHubTags(repo="FFmpeg/FFmpeg", tag_pattern=FFMPEG_TAG),
    ),
    # ── Video codecs ──────────────────────────────────────────────────────
    DependencyDescriptor(
        name="x264",
        version_key="X264_VERSION",
        fetch_source=StaticSource(version="stable"),  # tracks the stable branch
    ),
    DependencyDescriptor(
        name="x265",
        version_key="X265_VERSION",
        fetch_source=BitBucketTags(repo="multicoreware/x265_git", tag_pattern=SEMVER_NO_PREFIX_TAG),
    ),
    DependencyDescriptor(
        name="libvpx",
        version_key="LIBVPX_VERSION",
        fetch_source=GitHubTags(repo="webmproject/libvpx", tag_pattern=SEMVER_TAG),
    ),
    DependencyDescriptor(
        name="libaom",
        version_key="LIBAOM_VERSION",
        # Hosted on googlesource, which has no tag listing API.
        fetch_source=StaticSource(version="v3.12.1"),
    ),
    DependencyDescriptor(
        name="SVT-AV1",
        version_key="SVTAV1_VERSION",
        fetch_source=GitLabTags(host="gitlab.com", project="AOMediaCodec/SVT-AV1", tag_pattern=SEMVER_TAG),
        fallback_version="v2.3.0",
    ),
    DependencyDescriptor(
        name="dav1d",
        version_key="DAV1D_VERSION",
        url_key="DAV1D_URL",
        sha256_key="DAV1D_SHA256",
        fetch_source=GitLabTags(
            host="code.videolan.org", project="videolan/dav1d", tag_pattern=SEMVER_NO_PREFIX_TAG
        ),
        download_url_template=(
            "https://downloads.videolan.org/pub/videolan/dav1d/{version}/dav1d-{version}.tar.xz"
        ),
        fallback_version="1.5.0",
    ),
    DependencyDescriptor(
        name="rav1e",
        version_key="RAV1E_VERSION",
        fetch_source=GitHubTags(repo="xiph/rav1e", tag_pattern=SEMVER_TAG),
    ),
    DependencyDescriptor(
        name="Theora",
        version_key="THEORA_VERSION",
        url_key="THEORA_URL",
        sha256_key="THEORA_SHA256",
        fetch_source=StaticSource(version="1.1.1"),
        download_url_template=f"{_XIPH_MIRROR}/theora/libtheora-{{version}}.tar.gz",
    ),
    DependencyDescriptor(
        name="Xvid",
        version_key="XVID_VERSION",
        url_key="XVID_URL",
        sha256_key="XVID_SHA256",
        fetch_source=StaticSource(version="1.3.7"),
        download_url_template="https://downloads.xvid.com/downloads/xvidcore-{version}.tar.gz",
    ),
    # ── Audio codecs ──────────────────────────────────────────────────────
    DependencyDescriptor(
        name="Opus",
        version_key="OPUS_VERSION",
        url_key="OPUS_URL",
        sha256_key="OPUS_SHA256",
        fetch_source=GitHubTags(repo="xiph/opus", tag_pattern=SEMVER_TAG),
        download_url_template="https://downloads.xiph.org/releases/opus/opus-{version}.tar.gz",
        strip_prefix="v",
    ),
    DependencyDescriptor(
        name="LAME",
        version_key="LAME_VERSION",
        url_key="LAME_URL",
        sha256_key="LAME_SHA256",
        fetch_source=StaticSource(version="3.100"),
        download_url_template=(
            "https://downloads.sourceforge.net/project/lame/lame/{version}/lame-{version}.tar.gz"
        ),
    ),
    DependencyDescriptor(
        name="Vorbis",
        version_key="VORBIS_VERSION",
        url_key="VORBIS_URL",
        sha256_key="VORBIS_SHA256",
        fetch_source=StaticSource(version="1.3.7"),
        download_url_template=f"{_XIPH_MIRROR}/vorbis/libvorbis-{{version}}.tar.gz",
    ),
    DependencyDescriptor(
        name="Ogg",
        version_key="OGG_VERSION",
        url_key="OGG_URL",
        sha256_key="OGG_SHA256",
        fetch_source=StaticSource(version="1.3.5"),
        download_url_template=f"{_XIPH_MIRROR}/ogg/libogg-{{version}}.tar.gz",
    ),
    DependencyDescriptor(
        name="fdk-aac",
        version_key="FDKAAC_VERSION",
        fetch_source=GitHubTags(repo="mstorsjo/fdk-aac", tag_pattern=SEMVER_TAG),
    ),
    DependencyDescriptor(
        name="FLAC",
        version_key="FLAC_VERSION",
        url_key="FLAC_URL",
        sha256_key="FLAC_SHA256",
        fetch_source=StaticSource(version="1.4.3"),
        download_url_template=f"{_XIPH_MIRROR}/flac/flac-{{version}}.tar.xz",
    ),
    DependencyDescriptor(
        name="Speex",
        version_key="SPEEX_VERSION",
        url_key="SPEEX_URL",
        sha256_key="SPEEX_SHA256",
        fetch_source=StaticSource(version="1.2.1"),
        download_url_template=f"{_XIPH_MIRROR}/speex/speex-{{version}}.tar.gz",
    ),
    # ── Subtitles / rendering ─────────────────────────────────────────────
    DependencyDescriptor(
        name="libass",
        version_key="LIBASS_VERSION",
        url_key="LIBASS_URL",
        sha256_key="LIBASS_SHA256",
        fetch_source=GitHubTags(repo="libass/libass", tag_pattern=SEMVER_NO_PREFIX_TAG),
        download_url_template=(
            "https://github.com/libass/libass/releases/download/{version}/libass-{version}.tar.gz"
        ),
    ),
    DependencyDescriptor(
        name="FreeType",
        version_key="FREETYPE_VERSION",
        url_key="FREETYPE_URL",
        sha256_key="FREETYPE_SHA256",
        fetch_source=StaticSource(version="2.13.3"),  # irregular tag scheme, bumped by hand
        download_url_template=(
            "https://download.savannah.gnu.org/releases/freetype/freetype-{version}.tar.xz"
        ),
    ),
    # ── Build tools ───────────────────────────────────────────────────────
    DependencyDescriptor(
        name="NASM",
        version_key="NASM_VERSION",
        url_key="NASM_URL",
        sha256_key="NASM_SHA256",
        fetch_source=GitHubTags(repo="netwide-assembler/nasm", tag_pattern=NASM_TAG),
        download_url_template=(
            "https://github.com/netwide-assembler/nasm/archive/refs/tags/nasm-{version}.tar.gz"
        ),
        strip_prefix="nasm-",
    ),
    # ── Network ───────────────────────────────────────────────────────────
    DependencyDescriptor(
        name="OpenSSL",
        version_key="OPENSSL_VERSION",
        url_key="OPENSSL_URL",
        sha256_key="OPENSSL_SHA256",
        fetch_source=GitHubTags(repo="openssl/openssl", tag_pattern=OPENSSL_TAG),
        download_url_template="https://www.openssl.org/source/openssl-{version}.tar.gz",
        strip_prefix="openssl-",
    ),
)


def get_dependency(name: str) -> DependencyDescriptor | None:
    """Look up a dependency by display name, case-insensitively."""
    if not name:
        return None
    wanted = name.lower()
    return next((dep for dep in DEPENDENCIES if dep.name.lower() == wanted), None)


def get_dependency_by_version_key(version_key: str) -> DependencyDescriptor | None:
    if not version_key:
        return None
    return next((dep for dep in DEPENDENCIES if dep.version_key == version_key), None)
