# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any

from pydantic import SecretStr

from consulkit._errors import ConsulResponseError
from consulkit.config import settings
from consulkit.endpoints.codec import decode_response
from consulkit.endpoints.compiler import RequestCompiler, ResolvedRequest
from consulkit.endpoints.header_factory import AUTH_TYPES
from consulkit.endpoints.registry import describe
from consulkit.transport.aiohttp_ import AiohttpTransport
from consulkit.transport.base import Transport

__all__ = ("ConsulClient",)

logger = logging.getLogger(__name__)


class ConsulClient:
    def __init__(
        self,
        address: str | None = None,
        token: str | SecretStr | None = None,
        *,
        transport: Transport | None = None,
        auth_type: AUTH_TYPES = "consul-token",
        encode_path_segments: bool | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
    ):
        """
        Execute typed agent requests against a Consul agent.

        Args:
            address: Agent address, defaults to ``CONSUL_HTTP_ADDR``.
            token: ACL token, defaults to ``CONSUL_HTTP_TOKEN``.
            transport: Anything with ``async send(ResolvedRequest)``.
                Defaults to an ``AiohttpTransport`` on ``{address}/v1``.
            auth_type: ``consul-token`` (X-Consul-Token) or ``bearer``.
            encode_path_segments: Percent-encode path values.
            timeout: Per-attempt timeout for the default transport.
            max_retries: Attempts for the default transport.
        """
        self.address = (address or settings.CONSUL_HTTP_ADDR).rstrip("/")
        if token is None:
            token = settings.get_token()
        self.compiler = RequestCompiler(
            token=token,
            auth_type=auth_type,
            encode_path_segments=encode_path_segments,
        )
        self.transport = transport or AiohttpTransport(
            f"{self.address}/v1",
            timeout=timeout,
            max_retries=max_retries,
        )
        logger.debug(f"Initialized ConsulClient for {self.address}")

    def compile(self, request: Any) -> ResolvedRequest:
        return self.compiler.compile(request)

    async def execute(self, request: Any) -> Any:
        """Compile, send and decode one request.

        Returns:
            The decoded response in the endpoint's declared shape, or None
            for endpoints that return no body.

        Raises:
            MissingPathField: Before any I/O, if a path field is unset.
            ConsulResponseError: If the agent answers with a non-2xx status.
        """
        descriptor = describe(request)
        resolved = self.compiler.compile(request, descriptor)
        response = await self.transport.send(resolved)

        if not (
            response.ok or response.status in descriptor.ok_statuses
        ):
            body = response.body.decode("utf-8", errors="replace")
            logger.error(
                f"{resolved.method} {resolved.path} failed with status "
                f"{response.status}: {body[:200]}"
            )
            raise ConsulResponseError(
                f"{resolved.method} {resolved.path} "
                f"returned {response.status}",
                status_code=response.status,
                body=body,
            )

        return decode_response(descriptor.response, response.body)
