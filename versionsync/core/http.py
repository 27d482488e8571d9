"""Async HTTP client for tag registries, with retries and streaming checksums."""

from __future__ import annotations

import asyncio
import hashlib
import time
from typing import Any

import httpx
import structlog

from versionsync.exceptions import ChecksumDownloadError, FetchError

log = structlog.get_logger("versionsync.http")

_MAX_RETRIES = 3
_RETRY_BASE_DELAY = 1.0  # seconds
_RETRY_MAX_DELAY = 8.0
_RATE_LIMIT_MAX_WAIT = 60


def backoff_delay(attempt: int) -> float:
    """Delay before retry number *attempt* + 1 (0-based): 1s, 2s, 4s, ... capped."""
    return min(_RETRY_BASE_DELAY * (2**attempt), _RETRY_MAX_DELAY)


class RegistryClient:
    """Thin async wrapper around httpx shared by every fetcher of a run."""

    def __init__(
        self,
        *,
        user_agent: str,
        timeout: float,
        github_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._github_token = github_token
        self._client = httpx.AsyncClient(
            headers={"User-Agent": user_agent},
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> RegistryClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    def github_headers(self) -> dict[str, str]:
        """Headers for api.github.com; adds the token when one is configured."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self._github_token:
            headers["Authorization"] = f"Bearer {self._github_token}"
        return headers

    async def get_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET *url* with retries and return the decoded JSON body."""
        response = await self._request_with_retry(url, params, headers)
        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(url, "invalid JSON response", status=response.status_code) from exc

    async def sha256(self, url: str) -> str:
        """Stream *url* and return the hex SHA-256 of its body.

        The body is hashed chunk by chunk and never held in memory as a whole.
        Transport failures and 5xx responses are retried; any other failure
        raises :class:`ChecksumDownloadError`.
        """
        last_exc: Exception | None = None
        last_reason = "no attempt made"
        for attempt in range(_MAX_RETRIES):
            try:
                async with self._client.stream("GET", url) as response:
                    if response.status_code < 500:
                        if response.is_error:
                            raise ChecksumDownloadError(url, f"HTTP {response.status_code}")
                        digest = hashlib.sha256()
                        async for chunk in response.aiter_bytes():
                            digest.update(chunk)
                        return digest.hexdigest()

                    last_reason = f"HTTP {response.status_code}"
                    log.warning(
                        "download.server_error",
                        url=url,
                        status=response.status_code,
                        attempt=attempt + 1,
                        max_retries=_MAX_RETRIES,
                    )
            except httpx.TransportError as exc:
                last_exc = exc
                last_reason = f"{type(exc).__name__}: {exc}"
                log.warning(
                    "download.transport_error",
                    url=url,
                    error=last_reason,
                    attempt=attempt + 1,
                    max_retries=_MAX_RETRIES,
                )

            if attempt < _MAX_RETRIES - 1:
                await asyncio.sleep(backoff_delay(attempt))

        raise ChecksumDownloadError(url, last_reason) from last_exc

    # ── internal ───────────────────────────────────────────────────────────

    async def _request_with_retry(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """GET with exponential backoff on transport errors, 5xx and 403 rate-limit.

        Other 4xx responses (404 included) fail immediately.
        """
        last_exc: Exception | None = None
        last_reason = "no attempt made"
        last_status: int | None = None
        for attempt in range(_MAX_RETRIES):
            try:
                resp = await self._client.get(url, params=params, headers=headers)
            except httpx.TransportError as exc:
                last_exc = exc
                last_reason = f"{type(exc).__name__}: {exc}"
                last_status = None
                log.warning(
                    "http.transport_error",
                    url=url,
                    error=last_reason,
                    attempt=attempt + 1,
                    max_retries=_MAX_RETRIES,
                )
            else:
                if resp.status_code == 403 and self._is_rate_limited(resp):
                    wait = self._get_rate_limit_wait(resp)
                    log.warning(
                        "http.rate_limit",
                        url=url,
                        wait_seconds=wait,
                        attempt=attempt + 1,
                        max_retries=_MAX_RETRIES,
                    )
                    last_reason = "rate limit exceeded"
                    last_status = resp.status_code
                    if attempt < _MAX_RETRIES - 1:
                        await asyncio.sleep(wait)
                    continue

                if resp.status_code < 400:
                    return resp

                if resp.status_code < 500:
                    raise FetchError(url, f"HTTP {resp.status_code}", status=resp.status_code)

                last_reason = f"HTTP {resp.status_code}"
                last_status = resp.status_code
                log.warning(
                    "http.server_error",
                    url=url,
                    status=resp.status_code,
                    attempt=attempt + 1,
                    max_retries=_MAX_RETRIES,
                )

            if attempt < _MAX_RETRIES - 1:
                await asyncio.sleep(backoff_delay(attempt))

        raise FetchError(url, last_reason, status=last_status) from last_exc

    @staticmethod
    def _is_rate_limited(response: httpx.Response) -> bool:
        """Check if a 403 response is due to rate limiting."""
        remaining = response.headers.get("X-RateLimit-Remaining")
        if remaining is not None:
            try:
                return int(remaining) == 0
            except (ValueError, TypeError):
                pass
        # GitHub also uses Retry-After header for abuse rate limits
        return "Retry-After" in response.headers

    @staticmethod
    def _get_rate_limit_wait(response: httpx.Response) -> int:
        """Seconds to wait based on rate-limit headers, capped for a CLI run."""
        retry_after = response.headers.get("Retry-After")
        if retry_after is not None:
            try:
                return min(max(int(retry_after), 1), _RATE_LIMIT_MAX_WAIT)
            except (ValueError, TypeError):
                pass
        reset_ts = response.headers.get("X-RateLimit-Reset")
        if reset_ts is not None:
            try:
                return min(max(int(reset_ts) - int(time.time()), 1), _RATE_LIMIT_MAX_WAIT)
            except (ValueError, TypeError):
                pass
        return _RATE_LIMIT_MAX_WAIT
