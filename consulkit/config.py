# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings, frozen=True):
    """Client settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".secrets.env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    CONSUL_HTTP_ADDR: str = Field(
        default="http://127.0.0.1:8500",
        description="Base address of the local Consul agent",
    )
    CONSUL_HTTP_TOKEN: SecretStr | None = None

    CONSULKIT_TIMEOUT: float = Field(
        default=30.0, gt=0, description="Per-request timeout in seconds"
    )
    CONSULKIT_MAX_RETRIES: int = Field(
        default=3, ge=1, description="Transport attempts before giving up"
    )
    CONSULKIT_ENCODE_PATH_SEGMENTS: bool = Field(
        default=True,
        description="Percent-encode values substituted into path templates",
    )


    def get_token(self) -> str | None:
        """Return the ACL token as a plain string, or None when unset."""
        if self.CONSUL_HTTP_TOKEN is None:
            return None
        return self.CONSUL_HTTP_TOKEN.get_secret_value() or None


settings = AppSettings()
