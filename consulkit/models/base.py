# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_pascal

from consulkit._sentinel import is_sentinel

__all__ = ("ConsulModel", "ConsulResponse", "ModelBuilder")

B = TypeVar("B", bound=BaseModel)


class ModelBuilder(Generic[B]):
    """Fluent construction helper starting from an all-unset value.

        RegisterServiceRequest.builder().name("web").port(8080).build()

    Only the fields given a setter call are passed to the model, the rest
    keep their declared default.
    """

    def __init__(self, model: type[B]):
        self._model = model
        self._values: dict[str, Any] = {}

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        if name not in self._model.model_fields:
            raise AttributeError(
                f"{self._model.__name__} has no field '{name}'"
            )

        def setter(value: Any) -> "ModelBuilder[B]":
            self._values[name] = value
            return self

        return setter

    def build(self) -> B:
        return self._model(**self._values)


class ConsulModel(BaseModel):
    """Base for request-side shapes sent to the agent.

    Attribute names are snake_case, wire names are PascalCase unless a field
    sets its own alias. Fields left at ``Unset`` are dropped from the dumped
    output at every nesting level, in python and JSON mode. An explicit
    ``None`` is kept, so a field typed ``MaybeUnset[str | None]`` can still
    be sent as ``null``.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        serialize_by_alias=True,
        extra="forbid",
        use_enum_values=True,
    )

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler) -> dict[str, Any]:
        data = handler(self)
        for name, info in type(self).model_fields.items():
            if is_sentinel(getattr(self, name)):
                data.pop(name, None)
                if info.alias:
                    data.pop(info.alias, None)
        return data

    @classmethod
    def builder(cls) -> ModelBuilder:
        return ModelBuilder(cls)


class ConsulResponse(BaseModel):
    """Base for shapes decoded from agent responses.

    Unknown keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )
