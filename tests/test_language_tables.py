import pytest

from semantic_types.language import LANGUAGES, LanguageTables, get_language_tables
from semantic_types.registry.builtin_types import BUILTIN_DATA_ITEM_IDS
from semantic_types.utilities import SetupError
from semantic_types.utilities.special_values import is_hidden_type_id


def test_default_language_is_english():
    assert get_language_tables() is LANGUAGES["en"]


def test_language_from_environment(monkeypatch):
    monkeypatch.setenv("SEMANTIC_TYPES_LANGUAGE", "DE")
    assert get_language_tables() is LANGUAGES["de"]
    # An explicit language wins over the environment
    assert get_language_tables("en") is LANGUAGES["en"]


def test_unknown_language():
    with pytest.raises(SetupError):
        get_language_tables("xx")


@pytest.mark.parametrize("language", sorted(LANGUAGES))
def test_tables_only_label_user_types(language):
    tables = LANGUAGES[language]
    for type_id in tables.labels:
        assert type_id in BUILTIN_DATA_ITEM_IDS
        assert not is_hidden_type_id(type_id)
    for alias, type_id in tables.aliases.items():
        assert type_id in BUILTIN_DATA_ITEM_IDS
        assert alias not in tables.labels.values()
    # Labels are unique within a language
    assert len(set(tables.labels.values())) == len(tables.labels)


def test_tables_are_read_only():
    tables = LanguageTables(labels={'_txt': "Text"})
    with pytest.raises(TypeError):
        tables.labels['_num'] = "Number"
