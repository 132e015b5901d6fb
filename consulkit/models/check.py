# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field

from consulkit._sentinel import MaybeUnset, Unset

from .base import ConsulModel

__all__ = ("RegisterCheckRequest",)


class RegisterCheckRequest(ConsulModel):
    """Health check definition, standalone or embedded in a service."""

    name: str
    id: MaybeUnset[str] = Field(default=Unset, alias="ID")
    interval: MaybeUnset[str] = Unset
    notes: MaybeUnset[str] = Unset
    deregister_critical_service_after: MaybeUnset[str] = Unset
    args: MaybeUnset[list[str]] = Unset
    alias_node: MaybeUnset[str] = Unset
    alias_service: MaybeUnset[str] = Unset
    docker_container_id: MaybeUnset[str] = Field(
        default=Unset, alias="DockerContainerID"
    )
    grpc: MaybeUnset[str] = Field(default=Unset, alias="GRPC")
    grpc_use_tls: MaybeUnset[bool] = Field(default=Unset, alias="GRPCUseTLS")
    h2ping: MaybeUnset[str] = Field(default=Unset, alias="H2PING")
    http: MaybeUnset[str] = Field(default=Unset, alias="HTTP")
    method: MaybeUnset[str] = Unset
    body: MaybeUnset[str] = Unset
    header: MaybeUnset[dict[str, list[str]]] = Unset
    timeout: MaybeUnset[str] = Unset
    output_max_size: MaybeUnset[int] = Unset
    tls_server_name: MaybeUnset[str] = Field(
        default=Unset, alias="TLSServerName"
    )
    tls_skip_verify: MaybeUnset[bool] = Field(
        default=Unset, alias="TLSSkipVerify"
    )
    tcp: MaybeUnset[str] = Field(default=Unset, alias="TCP")
    ttl: MaybeUnset[str] = Field(default=Unset, alias="TTL")
    service_id: MaybeUnset[str] = Field(default=Unset, alias="ServiceID")
    status: MaybeUnset[str] = Unset
    success_before_passing: MaybeUnset[int] = Unset
    failures_before_critical: MaybeUnset[int] = Unset
