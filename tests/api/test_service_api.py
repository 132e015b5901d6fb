# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import orjson
import pytest

from consulkit.api import service
from consulkit.models import HealthStatus, ServiceCheckResponse


class TestServiceApi:
    @pytest.mark.asyncio
    async def test_list_services(
        self, client, fake_transport, service_payload
    ):
        fake_transport.reply(200, {"web-1": service_payload})

        services = await service.list_services(client)

        assert list(services) == ["web-1"]
        assert fake_transport.sent[0].url == "agent/services"

    @pytest.mark.asyncio
    async def test_read(self, client, fake_transport, service_payload):
        fake_transport.reply(200, service_payload)

        result = await service.read(client, "web-1", ns="team")

        assert result.id == "web-1"
        assert fake_transport.sent[0].url == "agent/service/web-1?ns=team"

    @pytest.mark.asyncio
    async def test_register(self, client, fake_transport):
        await service.register(client, "web", port=8080, tags=["v1"])

        sent = fake_transport.sent[0]
        assert sent.method == "PUT"
        assert sent.path == "agent/service/register"
        assert orjson.loads(sent.body) == {
            "Name": "web",
            "Port": 8080,
            "Tags": ["v1"],
        }

    @pytest.mark.asyncio
    async def test_deregister(self, client, fake_transport):
        await service.deregister(client, "web-1")

        sent = fake_transport.sent[0]
        assert sent.method == "PUT"
        assert sent.url == "agent/service/deregister/web-1"
        assert sent.body is None

    @pytest.mark.asyncio
    async def test_maintenance_with_reason(self, client, fake_transport):
        await service.maintenance(client, "web-1", False, reason="upgrading")

        assert (
            fake_transport.sent[0].url
            == "agent/service/maintenance/web-1?enable=false&reason=upgrading"
        )

    @pytest.mark.asyncio
    async def test_health(self, client, fake_transport, health_payload):
        fake_transport.reply(200, health_payload)

        results = await service.health(client, "web")

        assert isinstance(results[0], ServiceCheckResponse)
        assert results[0].aggregated_status is HealthStatus.PASSING
        assert fake_transport.sent[0].url == "agent/health/service/name/web"

    @pytest.mark.asyncio
    async def test_health_by_id(self, client, fake_transport, health_payload):
        fake_transport.reply(200, health_payload)

        results = await service.health_by_id(client, "web-1")

        assert results[0].service.id == "web-1"
        assert fake_transport.sent[0].url == "agent/health/service/id/web-1"
