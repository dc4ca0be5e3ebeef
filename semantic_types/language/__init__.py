from .language_tables import LanguageTables
from .get_language_tables import get_language_tables, LANGUAGES
