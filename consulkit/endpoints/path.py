# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import quote

from consulkit._errors import EncodingFailure, MissingPathField
from consulkit._sentinel import Undefined, is_sentinel

__all__ = ("PathResolver", "placeholders")

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def placeholders(template: str) -> tuple[str, ...]:
    """Return placeholder names in the order they appear in ``template``."""
    return tuple(m.group(1) for m in _PLACEHOLDER.finditer(template))


def _lookup(request: Any, name: str) -> Any:
    if isinstance(request, Mapping):
        return request.get(name, Undefined)
    return getattr(request, name, Undefined)


class PathResolver:
    """Substitute ``{field}`` placeholders with values taken from a request.

    With ``encode=True`` every value is percent-encoded as a single path
    segment, so ``a/b`` becomes ``a%2Fb``. With ``encode=False`` values are
    inserted verbatim and separators pass through.
    """

    def __init__(self, template: str, *, encode: bool = True):
        self.template = template
        self.encode = encode
        self.fields = placeholders(template)

    def resolve(self, request: Any) -> str:
        def _substitute(match: re.Match) -> str:
            name = match.group(1)
            value = _lookup(request, name)
            if value is None or is_sentinel(value) or value == "":
                raise MissingPathField.for_field(name, self.template)
            return self._render(name, value)

        return _PLACEHOLDER.sub(_substitute, self.template)

    def _render(self, name: str, value: Any) -> str:
        text = value.value if isinstance(value, Enum) else value
        text = str(text)
        if not self.encode:
            return text
        try:
            return quote(text, safe="")
        except UnicodeEncodeError as e:
            raise EncodingFailure(
                f"Path field '{name}' is not representable as UTF-8",
                details={"field": name},
                cause=e,
            )
