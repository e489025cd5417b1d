import pytest

from admin_console.services.service_locator import (
    ServiceAlreadyRegisteredError,
    ServiceLocator,
    ServiceNotFoundError,
)


def test_register_and_get():
    loc = ServiceLocator()
    loc.register("answer", 42)
    assert loc.get("answer") == 42
    assert loc.get_typed("answer", int) == 42
    with pytest.raises(TypeError):
        loc.get_typed("answer", str)


def test_double_registration_guard():
    loc = ServiceLocator()
    loc.register("k", 1)
    with pytest.raises(ServiceAlreadyRegisteredError):
        loc.register("k", 2)
    loc.register("k", 2, allow_override=True)
    assert loc.get("k") == 2


def test_missing_service():
    loc = ServiceLocator()
    with pytest.raises(ServiceNotFoundError):
        loc.get("nope")
    assert loc.try_get("nope", "fallback") == "fallback"


def test_override_context_restores_and_removes():
    loc = ServiceLocator()
    loc.register("bus", "real")
    with loc.override_context(bus="fake", extra=1):
        assert loc.get("bus") == "fake"
        assert loc.get("extra") == 1
    assert loc.get("bus") == "real"
    assert "extra" not in loc.list_keys()
