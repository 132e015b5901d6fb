# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from unittest.mock import AsyncMock, MagicMock

import orjson
import pytest

from consulkit.client import ConsulClient
from consulkit.transport.base import TransportResponse


class FakeTransport:
    """Records compiled requests and replays a canned response."""

    def __init__(self, response: TransportResponse | None = None):
        self.response = response or TransportResponse(status=200)
        self.sent = []

    def reply(self, status: int = 200, payload=None):
        body = b"" if payload is None else orjson.dumps(payload)
        self.response = TransportResponse(status=status, body=body)

    async def send(self, request):
        self.sent.append(request)
        return self.response


def _mock_response(status, body=b""):
    response = MagicMock()
    response.status = status
    response.headers = {"X-Consul-Index": "7"}
    response.read = AsyncMock(return_value=body)
    return response


def _mock_session(*outcomes):
    """A session whose ``request`` yields each outcome in turn.

    An outcome is either a ``(status, body)`` pair or an exception raised
    when the request context is entered.
    """
    session = MagicMock()
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=None)

    contexts = []
    for outcome in outcomes:
        ctx = MagicMock()
        if isinstance(outcome, BaseException):
            ctx.__aenter__ = AsyncMock(side_effect=outcome)
        else:
            ctx.__aenter__ = AsyncMock(return_value=_mock_response(*outcome))
        ctx.__aexit__ = AsyncMock(return_value=None)
        contexts.append(ctx)
    session.request = MagicMock(side_effect=contexts)
    return session


@pytest.fixture
def mock_session():
    return _mock_session


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def client(fake_transport):
    return ConsulClient(
        address="http://consul.test:8500",
        token="test-token",
        transport=fake_transport,
        encode_path_segments=True,
    )


@pytest.fixture
def service_payload():
    return {
        "ID": "web-1",
        "Service": "web",
        "Tags": ["v1", "primary"],
        "Meta": {"version": "1.2.0"},
        "Port": 8080,
        "Address": "10.0.0.5",
        "Weights": {"Passing": 10, "Warning": 1},
        "EnableTagOverride": False,
        "Datacenter": "dc1",
        "ContentHash": "3e3e",
    }


@pytest.fixture
def health_payload(service_payload):
    return [
        {
            "AggregatedStatus": "passing",
            "Service": service_payload,
            "Checks": [
                {
                    "Node": "node-1",
                    "CheckID": "service:web-1",
                    "Name": "Service 'web' check",
                    "Status": "passing",
                    "Output": "HTTP GET http://10.0.0.5:8080/health: 200 OK",
                    "ServiceID": "web-1",
                    "ServiceName": "web",
                    "ServiceTags": ["v1", "primary"],
                    "Type": "http",
                }
            ],
        }
    ]
