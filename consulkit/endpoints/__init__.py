# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .codec import decode_body, decode_response, encode_body
from .compiler import RequestCompiler, ResolvedRequest
from .descriptor import (
    EndpointDescriptor,
    HttpMethod,
    QueryField,
    ResponseKind,
    ResponseShape,
)
from .fields import PathParam, QueryParam, Skip
from .header_factory import HeaderFactory
from .path import PathResolver, placeholders
from .query import QueryBuilder
from .registry import (
    build_descriptor,
    describe,
    endpoint,
    get_descriptor,
    registered_endpoints,
)

__all__ = (
    "EndpointDescriptor",
    "HeaderFactory",
    "HttpMethod",
    "PathParam",
    "PathResolver",
    "QueryBuilder",
    "QueryField",
    "QueryParam",
    "RequestCompiler",
    "ResolvedRequest",
    "ResponseKind",
    "ResponseShape",
    "Skip",
    "build_descriptor",
    "decode_body",
    "decode_response",
    "describe",
    "encode_body",
    "endpoint",
    "get_descriptor",
    "placeholders",
    "registered_endpoints",
)
