# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from consulkit._sentinel import MaybeUnset, Unset
from consulkit.endpoints.descriptor import EndpointDescriptor
from consulkit.endpoints.fields import Skip
from consulkit.endpoints.registry import get_descriptor

from .base import ConsulModel
from .features import Features

__all__ = ("Request",)


class Request(ConsulModel):
    """Base class for every endpoint request model."""

    features: Annotated[MaybeUnset[Features], Skip()] = Unset

    @classmethod
    def describe(cls) -> EndpointDescriptor:
        return get_descriptor(cls)
