import pytest

from semantic_types.language import LanguageTables
from semantic_types.registry import DataTypeRegistry, clear_data_type_registry, clear_initializers, create_data_type_registry


@pytest.fixture(autouse=True)
def isolated_registry(monkeypatch):
    # Every test starts without a process-wide registry, module-level initializers or a language override
    monkeypatch.delenv("SEMANTIC_TYPES_LANGUAGE", raising=False)
    clear_initializers()
    clear_data_type_registry()
    yield
    clear_initializers()
    clear_data_type_registry()

@pytest.fixture
def registry() -> DataTypeRegistry:
    # English labels, built-in types only
    return create_data_type_registry("en", initializers={})

@pytest.fixture
def unlabeled_registry() -> DataTypeRegistry:
    # No labels or aliases at all, useful when a test needs full control over labels
    return create_data_type_registry(language_tables=LanguageTables(), initializers={})
