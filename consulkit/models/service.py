# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Request models for the agent service endpoints.

Path fields default to ``Unset`` so a request can be built up gradually;
compiling one whose path field is still unset raises ``MissingPathField``.
"""

from typing import Annotated

from pydantic import Field

from consulkit._sentinel import MaybeUnset, Unset
from consulkit.endpoints.descriptor import ResponseShape
from consulkit.endpoints.fields import PathParam, QueryParam
from consulkit.endpoints.registry import endpoint

from .base import ConsulModel
from .check import RegisterCheckRequest
from .request import Request
from .responses import ServiceCheckResponse, ServiceResponse

__all__ = (
    "HEALTH_STATUSES",
    "ListServicesRequest",
    "ReadServiceRequest",
    "ServiceHealthRequest",
    "ServiceHealthByIdRequest",
    "RegisterServiceRequest",
    "DeregisterServiceRequest",
    "EnableMaintenanceRequest",
    "Connect",
    "Proxy",
    "SidecarService",
    "Weight",
)


# agent health endpoints answer 429 for warning and 503 for critical, with
# the usual body
HEALTH_STATUSES = frozenset({429, 503})


@endpoint(
    "agent/services",
    response=ResponseShape.mapping(ServiceResponse),
)
class ListServicesRequest(Request):
    """List the services registered with the local agent."""

    ns: Annotated[MaybeUnset[str], QueryParam()] = Unset


@endpoint(
    "agent/service/{name}",
    response=ResponseShape.record(ServiceResponse),
)
class ReadServiceRequest(Request):
    """Full definition of one service instance on the local agent."""

    name: Annotated[MaybeUnset[str], PathParam()] = Unset
    ns: Annotated[MaybeUnset[str], QueryParam()] = Unset


@endpoint(
    "agent/health/service/name/{name}",
    response=ResponseShape.sequence(ServiceCheckResponse),
    ok_statuses=HEALTH_STATUSES,
)
class ServiceHealthRequest(Request):
    """Aggregated health of every local instance of a service, by name."""

    name: Annotated[MaybeUnset[str], PathParam()] = Unset
    ns: Annotated[MaybeUnset[str], QueryParam()] = Unset


@endpoint(
    "agent/health/service/id/{id}",
    response=ResponseShape.sequence(ServiceCheckResponse),
    ok_statuses=HEALTH_STATUSES,
)
class ServiceHealthByIdRequest(Request):
    """Health of one local service instance, by instance ID."""

    id: Annotated[MaybeUnset[str], PathParam()] = Unset
    ns: Annotated[MaybeUnset[str], QueryParam()] = Unset


class Proxy(ConsulModel):
    destination_service_name: str


class Weight(ConsulModel):
    passing: MaybeUnset[str] = Unset
    warning: MaybeUnset[str] = Unset


class SidecarService(ConsulModel):
    # the agent derives "<service>-sidecar-proxy" when no name is given
    name: MaybeUnset[str] = Unset
    address: MaybeUnset[str] = Unset
    check: MaybeUnset[RegisterCheckRequest] = Unset
    checks: MaybeUnset[list[RegisterCheckRequest]] = Unset
    enable_tag_override: MaybeUnset[bool] = Unset
    id: MaybeUnset[str] = Field(default=Unset, alias="ID")
    kind: MaybeUnset[str] = Unset
    meta: MaybeUnset[dict[str, str]] = Unset
    ns: MaybeUnset[str] = Field(default=Unset, alias="Namespace")
    port: MaybeUnset[int] = Unset
    proxy: MaybeUnset[Proxy] = Unset
    tagged_addresses: MaybeUnset[dict[str, str]] = Unset
    tags: MaybeUnset[list[str]] = Unset
    weights: MaybeUnset[Weight] = Unset


class Connect(ConsulModel):
    native: MaybeUnset[bool] = Unset
    sidecar_service: MaybeUnset[SidecarService] = Unset


@endpoint("agent/service/register", method="PUT", body=True)
class RegisterServiceRequest(Request):
    """Add a service, with optional health checks, to the local agent."""

    name: str
    address: MaybeUnset[str] = Unset
    check: MaybeUnset[RegisterCheckRequest] = Unset
    checks: MaybeUnset[list[RegisterCheckRequest]] = Unset
    connect: MaybeUnset[Connect] = Unset
    enable_tag_override: MaybeUnset[bool] = Unset
    id: MaybeUnset[str] = Field(default=Unset, alias="ID")
    kind: MaybeUnset[str] = Unset
    meta: MaybeUnset[dict[str, str]] = Unset
    ns: MaybeUnset[str] = Field(default=Unset, alias="Namespace")
    port: MaybeUnset[int] = Unset
    proxy: MaybeUnset[Proxy] = Unset
    tagged_addresses: MaybeUnset[dict[str, str]] = Unset
    tags: MaybeUnset[list[str]] = Unset
    weights: MaybeUnset[Weight] = Unset


@endpoint("agent/service/deregister/{id}", method="PUT")
class DeregisterServiceRequest(Request):
    """Remove a service from the local agent."""

    id: Annotated[MaybeUnset[str], PathParam()] = Unset
    ns: Annotated[MaybeUnset[str], QueryParam()] = Unset


@endpoint("agent/service/maintenance/{id}", method="PUT")
class EnableMaintenanceRequest(Request):
    """Place a service into, or take it out of, maintenance mode."""

    id: Annotated[MaybeUnset[str], PathParam()] = Unset
    enable: Annotated[bool, QueryParam()] = False
    reason: Annotated[MaybeUnset[str], QueryParam()] = Unset
    ns: Annotated[MaybeUnset[str], QueryParam()] = Unset
