# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Static table mapping request types to their endpoint descriptors.

Request models register themselves with the ``endpoint`` class decorator::

    @endpoint(
        "agent/service/{name}",
        response=ResponseShape.record(ServiceResponse),
    )
    class ReadServiceRequest(Request):
        name: Annotated[MaybeUnset[str], PathParam()] = Unset

The decorator reads the field role markers in declaration order, builds the
descriptor once and stores it. Lookups never mutate the table.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from consulkit._errors import MalformedDescriptor

from .codec import encode_body
from .descriptor import (
    EndpointDescriptor,
    HttpMethod,
    QueryField,
    ResponseShape,
)
from .fields import PathParam, QueryParam, Skip, field_role

__all__ = (
    "endpoint",
    "build_descriptor",
    "get_descriptor",
    "describe",
    "registered_endpoints",
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=type)

_ENDPOINTS: dict[type, EndpointDescriptor] = {}


def build_descriptor(
    model: type,
    path: str,
    *,
    method: HttpMethod = "GET",
    response: ResponseShape | None = None,
    body: bool = False,
    body_encoder: Callable[..., bytes] | None = None,
    ok_statuses: Iterable[int] = (),
) -> EndpointDescriptor:
    path_fields: list[str] = []
    query_fields: list[QueryField] = []
    excluded: set[str] = set()

    for attr, info in model.model_fields.items():
        role = field_role(info)
        if isinstance(role, PathParam):
            path_fields.append(attr)
        elif isinstance(role, QueryParam):
            query_fields.append(QueryField(attr=attr, name=role.name or attr))
        elif isinstance(role, Skip):
            pass
        elif not body:
            raise MalformedDescriptor(
                f"{model.__name__}.{attr} is a body field but "
                f"{method} {path} declares no body"
            )
        else:
            continue
        excluded.add(attr)

    if body and len(excluded) == len(model.model_fields):
        raise MalformedDescriptor(
            f"{model.__name__} declares a body but has no body fields"
        )

    return EndpointDescriptor(
        method=method,
        path_template=path,
        query_fields=tuple(query_fields),
        path_fields=tuple(path_fields),
        body_exclude=frozenset(excluded),
        has_body=body,
        response=response or ResponseShape.none(),
        body_encoder=(body_encoder or encode_body) if body else None,
        ok_statuses=frozenset(ok_statuses),
    )


def endpoint(
    path: str,
    *,
    method: HttpMethod = "GET",
    response: ResponseShape | None = None,
    body: bool = False,
    ok_statuses: Iterable[int] = (),
) -> Callable[[M], M]:
    """Class decorator registering a request model as an endpoint."""

    def decorator(model: M) -> M:
        descriptor = build_descriptor(
            model,
            path,
            method=method,
            response=response,
            body=body,
            ok_statuses=ok_statuses,
        )
        _ENDPOINTS[model] = descriptor
        logger.debug(f"Registered endpoint {model.__name__}: {method} {path}")
        return model

    return decorator


def get_descriptor(model: type) -> EndpointDescriptor:
    try:
        return _ENDPOINTS[model]
    except KeyError:
        raise MalformedDescriptor(
            f"No endpoint registered for {model.__name__}"
        ) from None


def describe(request: Any) -> EndpointDescriptor:
    return get_descriptor(type(request))


def registered_endpoints() -> Mapping[type, EndpointDescriptor]:
    return MappingProxyType(_ENDPOINTS)
