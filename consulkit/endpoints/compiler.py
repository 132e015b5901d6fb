# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import SecretStr

from consulkit._sentinel import is_sentinel
from consulkit.config import settings

from .descriptor import EndpointDescriptor
from .header_factory import AUTH_TYPES, HeaderFactory
from .path import PathResolver
from .query import QueryBuilder
from .registry import describe

__all__ = ("ResolvedRequest", "RequestCompiler")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedRequest:
    """A fully materialized HTTP request, ready for a transport."""

    method: str
    path: str
    query: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    # non-2xx statuses the endpoint answers with a regular body
    ok_statuses: frozenset[int] = frozenset()

    @property
    def url(self) -> str:
        """Path relative to the API root, with the query string if any."""
        if self.query:
            return f"{self.path}?{self.query}"
        return self.path


class RequestCompiler:
    """Turn request models into ``ResolvedRequest`` values.

    Compilation is pure. It reads the request and its descriptor, performs
    no I/O and never mutates either, so one compiler can be shared by any
    number of concurrent callers.

    Args:
        token: ACL token attached to every request.
        auth_type: How the token is sent, ``X-Consul-Token`` by default.
        encode_path_segments: Percent-encode substituted path values.
            Defaults to ``settings.CONSULKIT_ENCODE_PATH_SEGMENTS``.
        default_headers: Extra headers added to every request.
    """

    def __init__(
        self,
        token: str | SecretStr | None = None,
        *,
        auth_type: AUTH_TYPES = "consul-token",
        encode_path_segments: bool | None = None,
        default_headers: dict[str, str] | None = None,
    ):
        self._token = token
        self.auth_type = auth_type
        self.encode_path_segments = (
            settings.CONSULKIT_ENCODE_PATH_SEGMENTS
            if encode_path_segments is None
            else encode_path_segments
        )
        self.default_headers = default_headers or {}

    def compile(
        self, request: Any, descriptor: EndpointDescriptor | None = None
    ) -> ResolvedRequest:
        descriptor = descriptor or describe(request)

        path = PathResolver(
            descriptor.path_template, encode=self.encode_path_segments
        ).resolve(request)
        query = QueryBuilder(descriptor.query_fields).build(
            request, extra=self._feature_params(request)
        )

        body = None
        if descriptor.has_body:
            body = descriptor.body_encoder(
                request, exclude=descriptor.body_exclude
            )

        headers = HeaderFactory.get_header(
            auth_type=self.auth_type,
            content_type="application/json" if body is not None else None,
            token=self._token,
            default_headers=self.default_headers,
        )

        resolved = ResolvedRequest(
            method=descriptor.method,
            path=path,
            query=query,
            headers=headers,
            body=body,
            ok_statuses=descriptor.ok_statuses,
        )
        logger.debug(
            f"Compiled {type(request).__name__} to "
            f"{resolved.method} {resolved.url}"
        )
        return resolved

    @staticmethod
    def _feature_params(request: Any) -> list[tuple[str, Any]]:
        features = getattr(request, "features", None)
        if features is None or is_sentinel(features):
            return []
        return features.query_params()
