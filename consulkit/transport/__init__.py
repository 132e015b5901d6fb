# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .aiohttp_ import AiohttpTransport
from .base import Transport, TransportResponse

__all__ = ("AiohttpTransport", "Transport", "TransportResponse")
