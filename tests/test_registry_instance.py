import threading

import pytest

from semantic_types.data_items import DataItemType
from semantic_types.registry import (
    DataTypeRegistry, RegistryStatus, clear_data_type_registry, data_type_initializer,
    get_data_type_registry, get_registry_status,
)
from semantic_types.utilities import SetupError
from semantic_types.values import StringValue


class ProbeValue(StringValue):
    pass


def test_get_instance_is_idempotent():
    first = DataTypeRegistry.get_instance()
    second = DataTypeRegistry.get_instance()
    assert first is second
    assert get_data_type_registry() is first
    assert get_registry_status() is RegistryStatus.READY


def test_get_instance_is_initialized():
    registry = DataTypeRegistry.get_instance()
    assert registry.find_type_id("Number") == '_num'
    assert registry.has_data_type_class_by_id('_txt')


def test_clear_rebuilds_and_keeps_old_references():
    first = DataTypeRegistry.get_instance()
    first.register_data_type('_tmp', StringValue, DataItemType.BLOB)

    DataTypeRegistry.clear()
    assert get_registry_status() is RegistryStatus.UNINITIALIZED

    second = DataTypeRegistry.get_instance()
    assert second is not first
    assert not second.has_data_type_class_by_id('_tmp')
    # Earlier references keep working
    assert first.has_data_type_class_by_id('_tmp')


def test_clear_reruns_initializers():
    calls = []

    @data_type_initializer()
    def register_probe(registry):
        calls.append(registry)
        registry.register_data_type('__probe', ProbeValue, DataItemType.BLOB)

    first = DataTypeRegistry.get_instance()
    assert first.get_data_type_class_by_id('__probe') is ProbeValue

    clear_data_type_registry()
    second = DataTypeRegistry.get_instance()
    assert second.get_data_type_class_by_id('__probe') is ProbeValue
    assert calls == [first, second]


def test_instance_uses_configured_language(monkeypatch):
    monkeypatch.setenv("SEMANTIC_TYPES_LANGUAGE", "de")
    assert DataTypeRegistry.get_instance().find_type_id("Zahl") == '_num'

    # Changing the language requires a new registry
    monkeypatch.setenv("SEMANTIC_TYPES_LANGUAGE", "en")
    assert DataTypeRegistry.get_instance().find_type_id("Number") == ""
    DataTypeRegistry.clear()
    assert DataTypeRegistry.get_instance().find_type_id("Number") == '_num'


def test_unknown_language_fails_and_can_be_retried(monkeypatch):
    monkeypatch.setenv("SEMANTIC_TYPES_LANGUAGE", "xx")
    with pytest.raises(SetupError):
        DataTypeRegistry.get_instance()
    assert get_registry_status() is RegistryStatus.UNINITIALIZED

    monkeypatch.setenv("SEMANTIC_TYPES_LANGUAGE", "en")
    assert DataTypeRegistry.get_instance().find_type_id("Text") == '_txt'


def test_initializer_failure_propagates():
    @data_type_initializer()
    def broken(registry):
        raise RuntimeError("broken extension")

    with pytest.raises(RuntimeError, match="broken extension"):
        DataTypeRegistry.get_instance()
    assert get_registry_status() is RegistryStatus.UNINITIALIZED


def test_get_instance_from_initializer_is_rejected():
    @data_type_initializer()
    def reentrant(registry):
        DataTypeRegistry.get_instance()

    with pytest.raises(SetupError):
        DataTypeRegistry.get_instance()


def test_concurrent_first_access_builds_once():
    builds = []

    @data_type_initializer()
    def count_builds(registry):
        builds.append(registry)

    results = []
    threads = [threading.Thread(target=lambda: results.append(get_data_type_registry())) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(builds) == 1
    assert all(result is builds[0] for result in results)
