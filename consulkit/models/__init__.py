# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .base import ConsulModel, ConsulResponse, ModelBuilder
from .check import RegisterCheckRequest
from .features import Blocking, Consistency, Features
from .request import Request
from .responses import (
    AgentCheck,
    HealthStatus,
    ServiceCheckResponse,
    ServiceResponse,
    ServiceWeights,
)
from .service import (
    Connect,
    DeregisterServiceRequest,
    EnableMaintenanceRequest,
    ListServicesRequest,
    Proxy,
    ReadServiceRequest,
    RegisterServiceRequest,
    ServiceHealthByIdRequest,
    ServiceHealthRequest,
    SidecarService,
    Weight,
)

__all__ = (
    "AgentCheck",
    "Blocking",
    "Connect",
    "Consistency",
    "ConsulModel",
    "ConsulResponse",
    "DeregisterServiceRequest",
    "EnableMaintenanceRequest",
    "Features",
    "HealthStatus",
    "ListServicesRequest",
    "ModelBuilder",
    "Proxy",
    "ReadServiceRequest",
    "RegisterCheckRequest",
    "RegisterServiceRequest",
    "Request",
    "ServiceCheckResponse",
    "ServiceHealthByIdRequest",
    "ServiceHealthRequest",
    "ServiceResponse",
    "ServiceWeights",
    "SidecarService",
    "Weight",
)
