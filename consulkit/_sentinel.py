# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Final, Literal, TypeVar, Union

from pydantic_core import core_schema

__all__ = (
    "MaybeUnset",
    "SingletonType",
    "Undefined",
    "UndefinedType",
    "Unset",
    "UnsetType",
    "is_sentinel",
    "not_sentinel",
)

T = TypeVar("T")


class _SingletonMeta(type):
    """Metaclass that guarantees exactly one instance per subclass."""

    _cache: dict[type, SingletonType] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class SingletonType(metaclass=_SingletonMeta):
    """Base class for singleton sentinel types.

    Sentinels keep their identity across copy and deepcopy, evaluate as
    falsy and validate inside pydantic models by identity only, so a field
    annotated ``MaybeUnset[str]`` accepts either a string or the sentinel.
    """

    __slots__: tuple[str, ...] = ()

    def __deepcopy__(self, memo):
        return self

    def __copy__(self):
        return self

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any):
        # owning models drop sentinel fields, JSON mode needs a stand-in
        # until then
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda _: None, when_used="json"
            ),
        )

    # concrete classes *must* override the two methods below
    def __bool__(self) -> bool: ...
    def __repr__(self) -> str: ...


class UndefinedType(SingletonType):
    """Sentinel for an attribute or key entirely missing from an object.

    Example:
        >>> getattr(object(), "id", Undefined) is Undefined
        True
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Undefined"]:
        return "Undefined"

    def __reduce__(self):
        return "Undefined"


class UnsetType(SingletonType):
    """Sentinel for a declared field that was never given a value.

    An unset field is left out of query strings and request bodies. It is
    distinct from ``None``, which is an explicit null.
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Unset"]:
        return "Unset"

    def __reduce__(self):
        return "Unset"


Undefined: Final = UndefinedType()
Unset: Final = UnsetType()

MaybeUnset = Union[T, UnsetType]


def is_sentinel(value: Any) -> bool:
    return value is Undefined or value is Unset


def not_sentinel(value: Any) -> bool:
    return value is not Undefined and value is not Unset
