# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Field role markers used inside ``typing.Annotated`` request fields.

    class ReadServiceRequest(Request):
        name: Annotated[MaybeUnset[str], PathParam()] = Unset
        ns: Annotated[MaybeUnset[str], QueryParam()] = Unset

Fields without a marker belong to the request body.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic.fields import FieldInfo

__all__ = ("PathParam", "QueryParam", "Skip", "FieldRole", "field_role")


@dataclass(frozen=True, slots=True)
class PathParam:
    """Value is substituted into the ``{name}`` placeholder of the path."""


@dataclass(frozen=True, slots=True)
class QueryParam:
    """Value is sent as a query parameter, under ``name`` when given."""

    name: str | None = None


@dataclass(frozen=True, slots=True)
class Skip:
    """Field is neither path, query nor body."""


FieldRole = PathParam | QueryParam | Skip


def field_role(info: FieldInfo) -> FieldRole | None:
    for meta in info.metadata:
        if isinstance(meta, (PathParam, QueryParam, Skip)):
            return meta
    return None
