# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from consulkit.endpoints.compiler import ResolvedRequest

__all__ = ("Transport", "TransportResponse")


@dataclass(frozen=True, slots=True)
class TransportResponse:
    status: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@runtime_checkable
class Transport(Protocol):
    """Executes a compiled request and returns the raw response.

    Transport failures (connection errors, timeouts) are raised as-is;
    a non-success status is returned, not raised.
    """

    async def send(self, request: ResolvedRequest) -> TransportResponse: ...
