# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "ConsulKitError",
    "MissingPathField",
    "MalformedDescriptor",
    "EncodingFailure",
    "ResponseDecodeError",
    "ConsulResponseError",
)


class ConsulKitError(Exception):
    default_message: ClassVar[str] = "consulkit error"
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class MissingPathField(ConsulKitError):
    """A path placeholder had no value when the request was compiled."""

    default_message = "Path placeholder could not be resolved"
    __slots__ = ()

    @classmethod
    def for_field(cls, field: str, template: str):
        return cls(
            f"Missing value for path field '{field}' in '{template}'",
            details={"field": field, "template": template},
        )


class MalformedDescriptor(ConsulKitError):
    """An endpoint descriptor is internally inconsistent."""

    default_message = "Malformed endpoint descriptor"
    __slots__ = ()


class EncodingFailure(ConsulKitError):
    """A query or body value cannot be represented on the wire."""

    default_message = "Value cannot be encoded"
    __slots__ = ()


class ResponseDecodeError(ConsulKitError):
    default_message = "Response could not be decoded"
    __slots__ = ()


class ConsulResponseError(ConsulKitError):
    """The agent answered with a non-success status code."""

    default_message = "Consul request failed"
    __slots__ = ("status_code", "body")

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int,
        body: str = "",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details=details)
        self.status_code = status_code
        self.body = body

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = super().to_dict(include_cause=include_cause)
        data["status_code"] = self.status_code
        if self.body:
            data["body"] = self.body
        return data
