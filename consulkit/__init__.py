# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    ConsulKitError,
    ConsulResponseError,
    EncodingFailure,
    MalformedDescriptor,
    MissingPathField,
    ResponseDecodeError,
)
from ._sentinel import MaybeUnset, Undefined, Unset, is_sentinel, not_sentinel
from .api import service
from .client import ConsulClient
from .config import settings
from .endpoints import (
    EndpointDescriptor,
    RequestCompiler,
    ResolvedRequest,
    ResponseShape,
    endpoint,
)
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

__all__ = (
    "__version__",
    "ConsulClient",
    "ConsulKitError",
    "ConsulResponseError",
    "EncodingFailure",
    "EndpointDescriptor",
    "MalformedDescriptor",
    "MaybeUnset",
    "MissingPathField",
    "RequestCompiler",
    "ResolvedRequest",
    "ResponseDecodeError",
    "ResponseShape",
    "Undefined",
    "Unset",
    "endpoint",
    "is_sentinel",
    "logger",
    "not_sentinel",
    "service",
    "settings",
)
