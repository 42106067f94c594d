"""
Connection configuration for remote nodes.

A ``RemoteConfig`` carries the authority (``host``) a node talks to and
whether it uses TLS. Unknown keys are kept so callers can stash extra
settings alongside, but nothing here interprets them.
"""

import os
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict

ENV_PREFIX = "MAKI_REMOTE_"

_TRUTHY = {"1", "true", "yes", "on"}


class RemoteConfig(BaseModel):
    """Settings for a single remote authority."""

    model_config = ConfigDict(frozen=True, extra="allow")

    host: str | None = None
    secure: bool = False

    @classmethod
    def coerce(cls, value: "RemoteConfig | Mapping[str, Any] | None") -> "RemoteConfig":
        """Build a config from a mapping, an existing config, or nothing."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        data = dict(value)
        # Truthiness, not strict bool parsing: {"secure": 1} means secure
        if "secure" in data:
            data["secure"] = bool(data["secure"])
        return cls(**data)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "RemoteConfig":
        """
        Load configuration from the environment.

        A ``.env`` file in the working directory is read first; variables
        already set in the process environment take precedence over it.

        Args:
            prefix: Environment variable prefix (default ``MAKI_REMOTE_``).

        Returns:
            The resulting configuration.
        """
        load_dotenv(find_dotenv(usecwd=True))
        host = os.getenv(f"{prefix}HOST") or None
        secure = os.getenv(f"{prefix}SECURE", "").strip().lower() in _TRUTHY
        return cls(host=host, secure=secure)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
