# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from enum import Enum
from typing import Any

from consulkit._sentinel import MaybeUnset, Unset, not_sentinel

from .base import ConsulModel

__all__ = ("Blocking", "Consistency", "Features")


class Consistency(str, Enum):
    DEFAULT = "default"
    CONSISTENT = "consistent"
    STALE = "stale"


class Blocking(ConsulModel):
    """Blocking query parameters: wait for ``index`` to change."""

    index: int
    wait: MaybeUnset[str] = Unset


class Features(ConsulModel):
    """Options every endpoint accepts.

    Rendered as query parameters after the declared query fields.
    """

    blocking: MaybeUnset[Blocking] = Unset
    consistency: MaybeUnset[Consistency] = Unset
    filter: MaybeUnset[str] = Unset

    def query_params(self) -> list[tuple[str, Any]]:
        params: list[tuple[str, Any]] = []
        if not_sentinel(self.blocking):
            params.append(("index", self.blocking.index))
            if not_sentinel(self.blocking.wait):
                params.append(("wait", self.blocking.wait))
        # use_enum_values stores the plain string
        if self.consistency in ("consistent", "stale"):
            params.append((self.consistency, True))
        if not_sentinel(self.filter):
            params.append(("filter", self.filter))
        return params
