"""
Service address resolution and readiness notification.

A ``ConfigRegistry`` hands a ``ConfigProvider`` to every registered callback once
the provider becomes available. ``CONFIG`` is the process-wide default registry;
callers that prefer explicit wiring can create and pass their own.
"""

import logging
import os
import re
import threading
from typing import Callable, Mapping, Protocol, runtime_checkable

from rest_client.errors import ServiceResolutionError
from rest_client.settings import Settings

logger = logging.getLogger(__name__)

SERVICE_TYPE = "rest"


@runtime_checkable
class ConfigProvider(Protocol):
    """Resolves a (resource name, port type) pair to a network address."""

    def get_service_address(self, resource_name: str, port_type: str) -> str: ...


ReadyCallback = Callable[[ConfigProvider], None]


class ConfigRegistry:
    """One-shot readiness notifications for a config provider."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._provider: ConfigProvider | None = None
        self._callbacks: list[ReadyCallback] = []

    @property
    def provider(self) -> ConfigProvider | None:
        return self._provider

    @property
    def is_ready(self) -> bool:
        return self._provider is not None

    def on_ready(self, callback: ReadyCallback) -> None:
        """Run ``callback`` once a provider is ready (immediately if it already is)."""
        with self._lock:
            provider = self._provider
            if provider is None:
                self._callbacks.append(callback)
                return
        callback(provider)

    def mark_ready(self, provider: ConfigProvider) -> None:
        """Publish ``provider`` and fire pending callbacks in registration order."""
        with self._lock:
            self._provider = provider
            callbacks, self._callbacks = self._callbacks, []
        logger.debug("Config provider ready", extra={"callbacks": len(callbacks)})
        for callback in callbacks:
            callback(provider)


CONFIG = ConfigRegistry()


class StaticConfigProvider:
    """Resolve addresses from a fixed resource name to address mapping."""

    def __init__(self, addresses: Mapping[str, str]) -> None:
        self._addresses = dict(addresses)

    def get_service_address(self, resource_name: str, port_type: str) -> str:
        try:
            return self._addresses[resource_name]
        except KeyError:
            raise ServiceResolutionError(
                f"No {port_type} address configured for {resource_name}."
            ) from None


class EnvConfigProvider:
    """
    Resolve addresses from environment variables.

    ``<PREFIX>_<RESOURCE>_<PORT_TYPE>=http://...``, e.g.
    ``SERVICE_ADDRESS_USER_SERVICE_REST`` for resource ``user-service``.
    """

    def __init__(self, prefix: str = "SERVICE_ADDRESS") -> None:
        self._prefix = prefix

    @classmethod
    def from_settings(cls, settings: Settings) -> "EnvConfigProvider":
        return cls(settings.service_address_prefix)

    def env_key(self, resource_name: str, port_type: str) -> str:
        parts = (self._prefix, resource_name, port_type)
        return "_".join(re.sub(r"[-.]", "_", part).upper() for part in parts)

    def get_service_address(self, resource_name: str, port_type: str) -> str:
        key = self.env_key(resource_name, port_type)
        address = os.getenv(key, "").strip()
        if not address:
            raise ServiceResolutionError(f"{key} is required but was not provided.")
        return address
