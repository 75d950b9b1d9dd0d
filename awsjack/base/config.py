"""
Pydantic configuration model shared by every service client.

Validates client configuration at construction time instead of
silently passing bad values to the signer, endpoint provider or HTTP client.
"""

from __future__ import annotations

import os
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ClientConfiguration(BaseModel):
    """Configuration for a service client.

    Values are resolved in order:
    1. Explicit values passed in the config dict.
    2. Environment variables (AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY,
       AWS_SESSION_TOKEN, AWS_REGION / AWS_DEFAULT_REGION, AWS_PROFILE,
       AWS_ENDPOINT_URL, AWS_USE_FIPS_ENDPOINT, AWS_USE_DUALSTACK_ENDPOINT).
    3. If neither is set, credential fields are left as None so boto3 can fall
       back to its own credential chain (instance metadata, ~/.aws/credentials, etc.).
    """

    model_config = ConfigDict(extra="forbid")

    region_name: str | None = Field(default=None, description="AWS region (e.g. 'us-east-1')")
    aws_access_key_id: str | None = Field(default=None, description="AWS access key ID")
    aws_secret_access_key: str | None = Field(default=None, description="AWS secret access key")
    aws_session_token: str | None = Field(default=None, description="Temporary session token")
    profile_name: str | None = Field(default=None, description="Shared credentials profile")

    endpoint_override: str | None = Field(
        default=None, description="Fixed endpoint URL used instead of the resolved one"
    )
    use_fips: bool = Field(default=False, description="Resolve FIPS endpoints")
    use_dual_stack: bool = Field(default=False, description="Resolve dual-stack endpoints")

    connect_timeout: float = Field(default=60.0, gt=0, description="Connect timeout in seconds")
    read_timeout: float = Field(default=60.0, gt=0, description="Read timeout in seconds")
    max_connections: int = Field(default=25, ge=1, description="HTTP connection pool size")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    proxies: dict[str, str] | None = Field(default=None, description="Scheme -> proxy URL")
    max_attempts: int = Field(
        default=3, ge=1, description="Total send attempts on connection-level failures"
    )
    max_workers: int | None = Field(
        default=None, ge=1, description="Thread pool size for callable/async operations"
    )
    user_agent_extra: str | None = Field(default=None, description="Appended to User-Agent")

    @model_validator(mode="before")
    @classmethod
    def resolve_from_env(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Fall back to environment variables for missing values."""
        env_map = {
            "aws_access_key_id": ("AWS_ACCESS_KEY_ID",),
            "aws_secret_access_key": ("AWS_SECRET_ACCESS_KEY",),
            "aws_session_token": ("AWS_SESSION_TOKEN",),
            "region_name": ("AWS_REGION", "AWS_DEFAULT_REGION"),
            "profile_name": ("AWS_PROFILE",),
            "endpoint_override": ("AWS_ENDPOINT_URL",),
            "use_fips": ("AWS_USE_FIPS_ENDPOINT",),
            "use_dual_stack": ("AWS_USE_DUALSTACK_ENDPOINT",),
        }
        values = dict(values)
        for field, env_vars in env_map.items():
            if values.get(field) is not None:
                continue
            for env_var in env_vars:
                env_value = os.environ.get(env_var)
                if env_value:
                    values[field] = env_value
                    break
        return values


def validate_config(config: dict | ClientConfiguration | None = None) -> ClientConfiguration:
    """Validate and return a typed client configuration.

    Args:
        config: Raw configuration dictionary, an existing
            :class:`ClientConfiguration`, or ``None`` for defaults.

    Returns:
        A validated :class:`ClientConfiguration`.

    Raises:
        TypeError: If *config* is neither a dict nor a ``ClientConfiguration``.
        pydantic.ValidationError: If the config is invalid.
    """
    if config is None:
        return ClientConfiguration()
    if isinstance(config, ClientConfiguration):
        return config
    if isinstance(config, dict):
        return ClientConfiguration(**config)
    raise TypeError(f"Unsupported config type: {type(config).__name__}")


__all__ = [
    "ClientConfiguration",
    "validate_config",
]
