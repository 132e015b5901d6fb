# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from unittest.mock import AsyncMock, patch

import orjson
import pytest

from consulkit._errors import (
    ConsulResponseError,
    MalformedDescriptor,
    MissingPathField,
    ResponseDecodeError,
)
from consulkit.api import service
from consulkit.client import ConsulClient
from consulkit.models import (
    DeregisterServiceRequest,
    HealthStatus,
    ListServicesRequest,
    ReadServiceRequest,
    RegisterServiceRequest,
    ServiceResponse,
)
from consulkit.transport import AiohttpTransport


class TestConsulClient:
    def test_default_transport(self):
        client = ConsulClient("http://consul.test:8500/", token="t")
        assert isinstance(client.transport, AiohttpTransport)
        assert client.transport.base_url == "http://consul.test:8500/v1"

    def test_compile_uses_token(self, client):
        resolved = client.compile(ListServicesRequest())
        assert resolved.headers["X-Consul-Token"] == "test-token"

    @pytest.mark.asyncio
    async def test_execute_decodes_mapping(
        self, client, fake_transport, service_payload
    ):
        fake_transport.reply(200, {"web-1": service_payload})

        services = await client.execute(ListServicesRequest(ns="team"))

        assert isinstance(services["web-1"], ServiceResponse)
        assert services["web-1"].service == "web"
        sent = fake_transport.sent[0]
        assert sent.method == "GET"
        assert sent.url == "agent/services?ns=team"

    @pytest.mark.asyncio
    async def test_execute_without_response_shape(
        self, client, fake_transport
    ):
        fake_transport.reply(200)

        result = await client.execute(RegisterServiceRequest(name="web"))

        assert result is None
        assert fake_transport.sent[0].body == b'{"Name":"web"}'

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self, client, fake_transport):
        fake_transport.reply(500, "rpc error")

        with pytest.raises(ConsulResponseError) as exc_info:
            await client.execute(ReadServiceRequest(name="web"))

        assert exc_info.value.status_code == 500
        assert "rpc error" in exc_info.value.body

    @pytest.mark.asyncio
    async def test_not_found_raises(self, client, fake_transport):
        fake_transport.reply(404)

        with pytest.raises(ConsulResponseError) as exc_info:
            await client.execute(DeregisterServiceRequest(id="missing"))
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_missing_path_field_sends_nothing(
        self, client, fake_transport
    ):
        with pytest.raises(MissingPathField):
            await client.execute(ReadServiceRequest())
        assert fake_transport.sent == []

    @pytest.mark.asyncio
    async def test_unregistered_request(self, client, fake_transport):
        with pytest.raises(MalformedDescriptor):
            await client.execute({"name": "web"})
        assert fake_transport.sent == []

    @pytest.mark.asyncio
    async def test_bad_response_body(self, client, fake_transport):
        fake_transport.reply(200, ["not", "a", "record"])

        with pytest.raises(ResponseDecodeError):
            await client.execute(ReadServiceRequest(name="web"))


@pytest.fixture
def aio_client():
    return ConsulClient(
        "http://consul.test:8500",
        token="test-token",
        encode_path_segments=True,
        max_retries=3,
    )


def _with_status(payload, status):
    return [{**entry, "AggregatedStatus": status} for entry in payload]


class TestClientOverAiohttp:
    """Status handling through the aiohttp transport, session mocked."""

    @pytest.mark.asyncio
    async def test_not_found_raises_without_retry(
        self, aio_client, mock_session
    ):
        session = mock_session((404, b"Unknown service ID"))
        with patch.object(
            aio_client.transport, "_create_http_session", return_value=session
        ):
            with pytest.raises(ConsulResponseError) as exc_info:
                await service.read(aio_client, "missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.body == "Unknown service ID"
        assert session.request.call_count == 1

    @pytest.mark.asyncio
    async def test_server_error_raises_after_retries(
        self, aio_client, mock_session
    ):
        session = mock_session(*[(500, b"rpc error")] * 3)
        with (
            patch.object(
                aio_client.transport,
                "_create_http_session",
                return_value=session,
            ),
            patch("asyncio.sleep", new_callable=AsyncMock),
        ):
            with pytest.raises(ConsulResponseError) as exc_info:
                await service.read(aio_client, "web")

        assert exc_info.value.status_code == 500
        assert exc_info.value.body == "rpc error"
        assert session.request.call_count == 3

    @pytest.mark.asyncio
    async def test_server_error_then_success(
        self, aio_client, mock_session, service_payload
    ):
        session = mock_session(
            (500, b"rpc error"), (200, orjson.dumps(service_payload))
        )
        with (
            patch.object(
                aio_client.transport,
                "_create_http_session",
                return_value=session,
            ),
            patch("asyncio.sleep", new_callable=AsyncMock),
        ):
            result = await service.read(aio_client, "web-1")

        assert result.id == "web-1"
        assert session.request.call_count == 2

    @pytest.mark.asyncio
    async def test_critical_health_decoded(
        self, aio_client, mock_session, health_payload
    ):
        body = orjson.dumps(_with_status(health_payload, "critical"))
        session = mock_session((503, body))
        with patch.object(
            aio_client.transport, "_create_http_session", return_value=session
        ):
            results = await service.health(aio_client, "web")

        assert results[0].aggregated_status is HealthStatus.CRITICAL
        assert session.request.call_count == 1

    @pytest.mark.asyncio
    async def test_warning_health_by_id_decoded(
        self, aio_client, mock_session, health_payload
    ):
        body = orjson.dumps(_with_status(health_payload, "warning"))
        session = mock_session((429, body))
        with patch.object(
            aio_client.transport, "_create_http_session", return_value=session
        ):
            results = await service.health_by_id(aio_client, "web-1")

        assert results[0].aggregated_status is HealthStatus.WARNING
        assert session.request.call_count == 1

    @pytest.mark.asyncio
    async def test_health_server_error_still_raises(
        self, aio_client, mock_session
    ):
        session = mock_session(*[(500, b"rpc error")] * 3)
        with (
            patch.object(
                aio_client.transport,
                "_create_http_session",
                return_value=session,
            ),
            patch("asyncio.sleep", new_callable=AsyncMock),
        ):
            with pytest.raises(ConsulResponseError) as exc_info:
                await service.health(aio_client, "web")

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_rate_limited_read_raises_after_retries(
        self, aio_client, mock_session
    ):
        session = mock_session(*[(429, b"too many requests")] * 3)
        with (
            patch.object(
                aio_client.transport,
                "_create_http_session",
                return_value=session,
            ),
            patch("asyncio.sleep", new_callable=AsyncMock),
        ):
            with pytest.raises(ConsulResponseError) as exc_info:
                await service.read(aio_client, "web")

        assert exc_info.value.status_code == 429
        assert session.request.call_count == 3
