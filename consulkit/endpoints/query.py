# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

from consulkit._errors import EncodingFailure
from consulkit._sentinel import Undefined, is_sentinel

from .descriptor import QueryField

__all__ = ("QueryBuilder", "render_query_value")


def render_query_value(name: str, value: Any) -> str:
    """Render a scalar query value in its wire form."""
    if isinstance(value, Enum):
        value = value.value
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    raise EncodingFailure(
        f"Query field '{name}' has unsupported type {type(value).__name__}",
        details={"field": name, "type": type(value).__name__},
    )


class QueryBuilder:
    """Serialize the present query fields of a request in declaration order."""

    def __init__(self, fields: Sequence[QueryField | str]):
        self.fields = tuple(
            f if isinstance(f, QueryField) else QueryField(attr=f, name=f)
            for f in fields
        )

    def pairs(
        self, request: Any, extra: Iterable[tuple[str, Any]] = ()
    ) -> list[tuple[str, str]]:
        out = []
        for field in self.fields:
            if isinstance(request, Mapping):
                value = request.get(field.attr, Undefined)
            else:
                value = getattr(request, field.attr, Undefined)
            if value is None or is_sentinel(value):
                continue
            out.append((field.name, render_query_value(field.name, value)))
        for name, value in extra:
            out.append((name, render_query_value(name, value)))
        return out

    def build(
        self, request: Any, extra: Iterable[tuple[str, Any]] = ()
    ) -> str:
        """Return the encoded query string without a leading ``?``."""
        pairs = self.pairs(request, extra)
        if not pairs:
            return ""
        try:
            return urlencode(pairs, safe="", quote_via=quote)
        except UnicodeEncodeError as e:
            raise EncodingFailure(
                "Query string is not representable as UTF-8", cause=e
            )
