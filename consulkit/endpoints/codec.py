# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import functools
import logging
from collections.abc import Mapping
from typing import Any

import orjson
from pydantic import BaseModel, TypeAdapter, ValidationError

from consulkit._errors import EncodingFailure, ResponseDecodeError
from consulkit._sentinel import not_sentinel

from .descriptor import ResponseShape

__all__ = ("encode_body", "decode_body", "decode_response")

logger = logging.getLogger(__name__)


def _to_wire(request: Any, exclude: frozenset[str]) -> dict[str, Any]:
    if isinstance(request, BaseModel):
        return request.model_dump(by_alias=True, exclude=set(exclude))
    if isinstance(request, Mapping):
        return {
            k: v
            for k, v in request.items()
            if k not in exclude and not_sentinel(v)
        }
    raise EncodingFailure(
        f"Cannot encode body of type {type(request).__name__}",
        details={"type": type(request).__name__},
    )


def encode_body(
    request: Any, *, exclude: frozenset[str] = frozenset()
) -> bytes:
    """Serialize the body fields of ``request`` to JSON bytes.

    Unset fields are dropped by the model serializer, fields named in
    ``exclude`` (path, query and skipped fields) never reach the body.
    """
    payload = _to_wire(request, exclude)
    try:
        return orjson.dumps(payload)
    except orjson.JSONEncodeError as e:
        raise EncodingFailure(
            f"Request body is not representable as JSON: {e}", cause=e
        )


def decode_body(raw: bytes) -> Any:
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise ResponseDecodeError(f"Invalid JSON: {e}", cause=e)


@functools.lru_cache(maxsize=None)
def _adapter(annotation: Any) -> TypeAdapter:
    return TypeAdapter(annotation)


def decode_response(shape: ResponseShape, raw: bytes) -> Any:
    """Decode a response body into the endpoint's declared shape.

    Endpoints without a declared shape ignore whatever body the agent sent
    and return None.
    """
    if not shape.expects_body:
        return None
    if not raw:
        raise ResponseDecodeError(
            f"Expected a {shape.kind.value} response but the body was empty"
        )
    try:
        return _adapter(shape.annotation).validate_json(raw)
    except ValidationError as e:
        logger.error(f"Failed to decode {shape.kind.value} response: {e}")
        raise ResponseDecodeError(
            f"Response does not match the {shape.kind.value} shape",
            details={"errors": e.errors(include_url=False)},
            cause=e,
        )
