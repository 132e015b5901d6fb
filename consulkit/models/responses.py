# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from enum import Enum
from typing import Any

from pydantic import Field

from .base import ConsulResponse

__all__ = (
    "HealthStatus",
    "AgentCheck",
    "ServiceWeights",
    "ServiceResponse",
    "ServiceCheckResponse",
)


class HealthStatus(str, Enum):
    PASSING = "passing"
    WARNING = "warning"
    CRITICAL = "critical"
    MAINTENANCE = "maintenance"


class ServiceWeights(ConsulResponse):
    passing: int | None = None
    warning: int | None = None


class ServiceResponse(ConsulResponse):
    id: str = Field(alias="ID")
    service: str
    kind: str | None = None
    tags: list[str] | None = None
    meta: dict[str, str] | None = None
    port: int | None = None
    address: str | None = None
    socket_path: str | None = None
    tagged_addresses: dict[str, Any] | None = None
    weights: ServiceWeights | None = None
    enable_tag_override: bool | None = None
    datacenter: str | None = None
    namespace: str | None = None
    partition: str | None = None
    content_hash: str | None = None
    proxy: dict[str, Any] | None = None
    connect: dict[str, Any] | None = None


class AgentCheck(ConsulResponse):
    check_id: str = Field(alias="CheckID")
    name: str
    status: HealthStatus
    node: str | None = None
    notes: str | None = None
    output: str | None = None
    service_id: str | None = Field(default=None, alias="ServiceID")
    service_name: str | None = None
    service_tags: list[str] | None = None
    type: str | None = None
    namespace: str | None = None


class ServiceCheckResponse(ConsulResponse):
    """Aggregated health of one service instance."""

    aggregated_status: HealthStatus
    service: ServiceResponse
    checks: list[AgentCheck] | None = None
