# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Literal

from pydantic import SecretStr

AUTH_TYPES = Literal["consul-token", "bearer", "none"]


class HeaderFactory:
    @staticmethod
    def get_token_header(token: str) -> dict[str, str]:
        return {"X-Consul-Token": token}

    @staticmethod
    def get_bearer_auth_header(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    @staticmethod
    def get_header(
        auth_type: AUTH_TYPES = "consul-token",
        content_type: str | None = "application/json",
        token: str | SecretStr | None = None,
        default_headers: dict[str, str] | None = None,
    ) -> dict[str, str]:
        dict_ = {}
        if content_type:
            dict_["Content-Type"] = content_type

        if isinstance(token, SecretStr):
            token = token.get_secret_value()

        if token and auth_type != "none":
            if auth_type == "bearer":
                dict_.update(HeaderFactory.get_bearer_auth_header(token))
            elif auth_type == "consul-token":
                dict_.update(HeaderFactory.get_token_header(token))
            else:
                raise ValueError(f"Unsupported auth type: {auth_type}")

        if default_headers:
            dict_.update(default_headers)
        return dict_
