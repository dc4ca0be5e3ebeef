import os

from ..utilities.setup_error import SetupError
from .de import DE
from .en import EN
from .language_tables import LanguageTables


DEFAULT_LANGUAGE = "en"

LANGUAGES: dict[str, LanguageTables] = {
    "en": EN,
    "de": DE,
}

def get_language_tables(language: str | None = None) -> LanguageTables:
    """ Returns the datatype labels and aliases for a language code.
    If no language is given, SEMANTIC_TYPES_LANGUAGE is read from the environment, defaulting to English. """
    if not language:
        language = os.environ.get("SEMANTIC_TYPES_LANGUAGE") or DEFAULT_LANGUAGE

    tables = LANGUAGES.get(language.lower())
    if tables is None:
        raise SetupError(f"Unsupported language '{language}' for datatype labels. Set SEMANTIC_TYPES_LANGUAGE to one of: {', '.join(LANGUAGES)}.")
    return tables
