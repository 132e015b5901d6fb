# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Agent service endpoints.

Each function builds the request model from its arguments and runs it
through ``client.execute``. Optional fields are passed as keyword arguments
using their attribute names::

    await service.register(client, "web", port=8080, tags=["v1"])

Reference: https://developer.hashicorp.com/consul/api-docs/agent/service
"""

from typing import Any

from consulkit.client import ConsulClient
from consulkit.models.responses import ServiceCheckResponse, ServiceResponse
from consulkit.models.service import (
    DeregisterServiceRequest,
    EnableMaintenanceRequest,
    ListServicesRequest,
    ReadServiceRequest,
    RegisterServiceRequest,
    ServiceHealthByIdRequest,
    ServiceHealthRequest,
)

__all__ = (
    "list_services",
    "read",
    "register",
    "deregister",
    "maintenance",
    "health",
    "health_by_id",
)


async def list_services(
    client: ConsulClient, **opts: Any
) -> dict[str, ServiceResponse]:
    """Services registered with the local agent, keyed by instance ID."""
    return await client.execute(ListServicesRequest(**opts))


async def read(
    client: ConsulClient, name: str, **opts: Any
) -> ServiceResponse:
    return await client.execute(ReadServiceRequest(name=name, **opts))


async def register(client: ConsulClient, name: str, **opts: Any) -> None:
    await client.execute(RegisterServiceRequest(name=name, **opts))


async def deregister(client: ConsulClient, id: str, **opts: Any) -> None:
    await client.execute(DeregisterServiceRequest(id=id, **opts))


async def maintenance(
    client: ConsulClient, id: str, enable: bool, **opts: Any
) -> None:
    """Toggle maintenance mode.

    A ``reason`` keyword is shown on the maintenance check.
    """
    await client.execute(
        EnableMaintenanceRequest(id=id, enable=enable, **opts)
    )


async def health(
    client: ConsulClient, name: str, **opts: Any
) -> list[ServiceCheckResponse]:
    return await client.execute(ServiceHealthRequest(name=name, **opts))


async def health_by_id(
    client: ConsulClient, id: str, **opts: Any
) -> list[ServiceCheckResponse]:
    return await client.execute(ServiceHealthByIdRequest(id=id, **opts))
