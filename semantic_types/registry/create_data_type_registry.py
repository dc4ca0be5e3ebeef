from __future__ import annotations

from typing import Mapping

from ..language.get_language_tables import get_language_tables
from ..language.language_tables import LanguageTables
from ..utilities.logger import logger
from .data_type_registry import DataTypeRegistry
from .initializers import Initializer, run_initializers
"""
Documentation:
	- Built-in types are registered before any initializer runs, so initializers can overwrite them.
	- Labels and aliases come from the language tables and are copied: changing the language requires a new registry.
"""

def create_data_type_registry(
		language: str | None = None,
		*,
		language_tables: LanguageTables | None = None,
		initializers: Mapping[str, list[Initializer]] | None = None
	) -> DataTypeRegistry:
	""" Build a new, fully initialized DataTypeRegistry.

	Args:
		language: Language code of the label tables. Defaults to SEMANTIC_TYPES_LANGUAGE, then 'en'. Ignored if language_tables is given.
		language_tables: Label and alias tables to use instead of a built-in language.
		initializers: Initializers by hook to run instead of the module-level ones.
	"""

	logger.debug("Creating data type registry...")

	## Labels ##
	if language_tables is None:
		language_tables = get_language_tables(language)
	registry = DataTypeRegistry(language_tables.labels, language_tables.aliases)

	## Built-in types ##
	registry.register_builtin_types()

	## Extensions ##
	# Legacy hook first, then the current one
	run_initializers(registry, initializers)

	logger.debug(f"Created {registry!r}.")
	return registry
