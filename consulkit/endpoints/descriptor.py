# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Static per-endpoint metadata.

An ``EndpointDescriptor`` says how a request type becomes an HTTP request:
method, path template, which fields go to the query string, whether a body
is sent and what the response decodes into. Descriptors validate themselves
on construction, so an inconsistent one fails at import time rather than on
the first call.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from consulkit._errors import MalformedDescriptor

from .path import placeholders

__all__ = (
    "HttpMethod",
    "ResponseKind",
    "ResponseShape",
    "QueryField",
    "EndpointDescriptor",
)

HttpMethod = Literal["GET", "PUT", "POST", "DELETE"]


class ResponseKind(str, Enum):
    NONE = "none"
    SCALAR = "scalar"
    RECORD = "record"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


@dataclass(frozen=True, slots=True)
class ResponseShape:
    """Decode target of an endpoint's response body."""

    kind: ResponseKind = ResponseKind.NONE
    target: Any = None

    @classmethod
    def none(cls) -> ResponseShape:
        return cls(ResponseKind.NONE)

    @classmethod
    def scalar(cls, target: type) -> ResponseShape:
        return cls(ResponseKind.SCALAR, target)

    @classmethod
    def record(cls, target: type) -> ResponseShape:
        return cls(ResponseKind.RECORD, target)

    @classmethod
    def mapping(cls, target: type) -> ResponseShape:
        """Mapping keyed by identifier, e.g. service ID to service record."""
        return cls(ResponseKind.MAPPING, target)

    @classmethod
    def sequence(cls, target: type) -> ResponseShape:
        return cls(ResponseKind.SEQUENCE, target)

    @property
    def expects_body(self) -> bool:
        return self.kind is not ResponseKind.NONE

    @property
    def annotation(self) -> Any:
        match self.kind:
            case ResponseKind.NONE:
                return None
            case ResponseKind.MAPPING:
                return dict[str, self.target]
            case ResponseKind.SEQUENCE:
                return list[self.target]
            case _:
                return self.target


@dataclass(frozen=True, slots=True)
class QueryField:
    attr: str
    name: str


@dataclass(frozen=True, slots=True)
class EndpointDescriptor:
    method: HttpMethod
    path_template: str
    query_fields: tuple[QueryField, ...] = ()
    path_fields: tuple[str, ...] = ()
    body_exclude: frozenset[str] = frozenset()
    has_body: bool = False
    response: ResponseShape = field(default_factory=ResponseShape.none)
    body_encoder: Callable[..., bytes] | None = None
    # non-2xx statuses whose body still decodes into the response shape
    ok_statuses: frozenset[int] = frozenset()

    def __post_init__(self):
        self.validate()

    @property
    def query_field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.query_fields)

    def validate(self) -> None:
        if self.has_body and self.body_encoder is None:
            raise MalformedDescriptor(
                f"{self.method} {self.path_template} declares a body "
                "but has no body encoder"
            )
        if not self.has_body and self.body_encoder is not None:
            raise MalformedDescriptor(
                f"{self.method} {self.path_template} has a body encoder "
                "but declares no body"
            )

        bad = sorted(s for s in self.ok_statuses if not 300 <= s < 600)
        if bad:
            raise MalformedDescriptor(
                f"{self.method} {self.path_template} lists invalid ok "
                f"statuses {bad}, only 3xx-5xx codes may be added"
            )

        names = placeholders(self.path_template)
        if len(set(names)) != len(names):
            raise MalformedDescriptor(
                f"Duplicate placeholder in '{self.path_template}'"
            )
        if set(names) != set(self.path_fields):
            raise MalformedDescriptor(
                f"Placeholders {sorted(names)} in '{self.path_template}' "
                f"do not match path fields {sorted(self.path_fields)}",
                details={
                    "placeholders": list(names),
                    "path_fields": list(self.path_fields),
                },
            )
