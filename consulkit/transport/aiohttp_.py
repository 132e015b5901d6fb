# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import asyncio
import logging

import aiohttp
import backoff

from consulkit.config import settings
from consulkit.endpoints.compiler import ResolvedRequest

from .base import TransportResponse

__all__ = ("AiohttpTransport",)

logger = logging.getLogger(__name__)


class RetryableStatus(Exception):
    """Carries a 429 or 5xx response through backoff."""

    def __init__(self, response: TransportResponse):
        super().__init__(f"HTTP {response.status}")
        self.response = response


def should_retry(request: ResolvedRequest, status: int) -> bool:
    if status in request.ok_statuses:
        return False
    return status == 429 or status >= 500


class AiohttpTransport:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        max_retries: int | None = None,
        client_kwargs: dict | None = None,
    ):
        """
        Transport sending compiled requests to an agent over aiohttp.

        Each request opens its own client session, so one transport can be
        shared by concurrent callers without coordination.

        Args:
            base_url: API root, e.g. ``http://127.0.0.1:8500/v1``.
            timeout: Total timeout per attempt, in seconds.
            max_retries: Attempts for connection errors and 429/5xx
                statuses. A failing status is returned after the last
                attempt, a connection error is raised.
            client_kwargs: Extra keyword arguments for ``ClientSession``.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or settings.CONSULKIT_TIMEOUT
        self.max_retries = max_retries or settings.CONSULKIT_MAX_RETRIES
        self.client_kwargs = client_kwargs or {}

    def _create_http_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            **self.client_kwargs,
        )

    def full_url(self, request: ResolvedRequest) -> str:
        return f"{self.base_url}/{request.url.lstrip('/')}"

    async def send(self, request: ResolvedRequest) -> TransportResponse:
        url = self.full_url(request)

        async def _make_request_with_backoff():
            async with self._create_http_session() as session:
                async with session.request(
                    method=request.method,
                    url=url,
                    headers=request.headers,
                    data=request.body,
                ) as response:
                    result = TransportResponse(
                        status=response.status,
                        body=await response.read(),
                        headers=dict(response.headers),
                    )
                    if should_retry(request, result.status):
                        raise RetryableStatus(result)
                    return result

        def _on_backoff(details):
            logger.debug(
                f"Retrying {request.method} {request.url} after "
                f"{details['tries']} attempt(s): {details.get('exception')}"
            )

        backoff_handler = backoff.on_exception(
            backoff.expo,
            (aiohttp.ClientError, asyncio.TimeoutError, RetryableStatus),
            max_tries=self.max_retries,
            jitter=backoff.full_jitter,
            on_backoff=_on_backoff,
        )

        logger.debug(f"Sending {request.method} {url}")
        try:
            return await backoff_handler(_make_request_with_backoff)()
        except RetryableStatus as e:
            logger.debug(
                f"Giving up on {request.method} {request.url} after "
                f"{self.max_retries} attempt(s) with status "
                f"{e.response.status}"
            )
            return e.response
