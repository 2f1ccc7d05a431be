import pytest

from rest_client.config import (
    SERVICE_TYPE,
    ConfigProvider,
    ConfigRegistry,
    EnvConfigProvider,
    StaticConfigProvider,
)
from rest_client.errors import ServiceResolutionError
from rest_client.settings import Settings


def test_registry_fires_callbacks_in_registration_order() -> None:
    registry = ConfigRegistry()
    seen: list[tuple[str, ConfigProvider]] = []
    registry.on_ready(lambda provider: seen.append(("first", provider)))
    registry.on_ready(lambda provider: seen.append(("second", provider)))
    assert seen == []
    assert registry.is_ready is False

    provider = StaticConfigProvider({})
    registry.mark_ready(provider)

    assert seen == [("first", provider), ("second", provider)]
    assert registry.provider is provider
    assert registry.is_ready is True


def test_registry_callbacks_fire_once() -> None:
    registry = ConfigRegistry()
    calls: list[ConfigProvider] = []
    registry.on_ready(calls.append)

    registry.mark_ready(StaticConfigProvider({}))
    registry.mark_ready(StaticConfigProvider({}))

    assert len(calls) == 1


def test_registry_propagates_callback_errors() -> None:
    registry = ConfigRegistry()

    def broken(provider: ConfigProvider) -> None:
        raise RuntimeError("callback failed")

    registry.on_ready(broken)
    with pytest.raises(RuntimeError, match="callback failed"):
        registry.mark_ready(StaticConfigProvider({}))


def test_static_provider_resolves_known_names() -> None:
    provider = StaticConfigProvider({"users": "http://users:8080"})
    assert isinstance(provider, ConfigProvider)
    assert provider.get_service_address("users", SERVICE_TYPE) == "http://users:8080"
    with pytest.raises(ServiceResolutionError):
        provider.get_service_address("orders", SERVICE_TYPE)


def test_env_provider_reads_normalized_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_ADDRESS_USER_SERVICE_REST", " http://users:8080/ ")
    provider = EnvConfigProvider()
    assert provider.env_key("user-service", "rest") == "SERVICE_ADDRESS_USER_SERVICE_REST"
    assert provider.get_service_address("user-service", "rest") == "http://users:8080/"


def test_env_provider_missing_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SERVICE_ADDRESS_ORDERS_REST", raising=False)
    with pytest.raises(ServiceResolutionError, match="SERVICE_ADDRESS_ORDERS_REST"):
        EnvConfigProvider().get_service_address("orders", "rest")


def test_env_provider_from_settings_uses_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCOVERY_BILLING_REST", "http://billing")
    provider = EnvConfigProvider.from_settings(Settings(service_address_prefix="DISCOVERY"))
    assert provider.get_service_address("billing", "rest") == "http://billing"
