"""Store configuration for recstore."""

from __future__ import annotations

import dataclasses
import logging
import os
from enum import StrEnum
from typing import Any

from recstore.exceptions import RecStoreConfigError


class StoreLifetime(StrEnum):
    """How stores are created within one deployment."""

    INSTANCE = "instance"
    SINGLETON = "singleton"


_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """Store configuration.

    Parameters
    ----------
    lifetime : StoreLifetime
        ``INSTANCE`` creates an independent store on every request;
        ``SINGLETON`` hands out one store per record type from a
        :class:`~recstore.state.registry.StoreRegistry`.
    log_level : str
        Console log level used by the command-line entry point.
    strict_types : bool
        Typed stores reject records of any other type.
    """

    lifetime: StoreLifetime = StoreLifetime.INSTANCE
    log_level: str = "INFO"
    strict_types: bool = True

    def __post_init__(self) -> None:
        try:
            lifetime = StoreLifetime(self.lifetime)
        except ValueError as exc:
            raise RecStoreConfigError(f"unknown store lifetime {self.lifetime!r}") from exc
        object.__setattr__(self, "lifetime", lifetime)

        level = str(self.log_level).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise RecStoreConfigError(f"unknown log level {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, **overrides: Any) -> StoreConfig:
        """Create configuration from environment variables.

        Reads ``RECSTORE_LIFETIME``, ``RECSTORE_LOG_LEVEL`` and
        ``RECSTORE_STRICT_TYPES``. Explicit keyword arguments override
        environment values.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        lifetime_env = env.get("RECSTORE_LIFETIME")
        if lifetime_env is not None:
            config_kwargs["lifetime"] = lifetime_env.strip().lower()

        level_env = env.get("RECSTORE_LOG_LEVEL")
        if level_env is not None:
            config_kwargs["log_level"] = level_env

        strict_env = env.get("RECSTORE_STRICT_TYPES")
        if "strict_types" not in overrides:
            if strict_env is not None and strict_env.strip().lower() not in _TRUE_VALUES | _FALSE_VALUES:
                raise RecStoreConfigError(f"unknown strict_types value {strict_env!r}")
            config_kwargs["strict_types"] = _env_bool(strict_env, True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
