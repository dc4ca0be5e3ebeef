from __future__ import annotations

from typing import Callable, Mapping, TYPE_CHECKING
from bidict import bidict

from ..data_items.data_item_type import DataItemType
from ..utilities.logger import logger
from ..utilities.no_default_type_error import NoDefaultTypeError
from ..utilities.setup_error import SetupError
from ..utilities.special_values import UNKNOWN_TYPE_ID
from .builtin_types import BUILTIN_DATA_ITEM_IDS, BUILTIN_TYPE_CLASSES, DEFAULT_DATA_ITEM_TYPE_IDS

if TYPE_CHECKING:
    from ..language.language_tables import LanguageTables
    from ..values.data_value import DataValue


class HandlerNameDict(bidict[str, type]):
    """ Data value handler classes by class name. Lets initializers bind a type to a handler by name
    without importing it, and lets us log which handler a type uses. """

    def add(self, handler_cls: type) -> None:
        """Register a single handler class by its name."""
        self[handler_cls.__name__] = handler_cls

    def add_list(self, handler_classes: list[type]) -> None:
        """Register multiple handler classes by their names."""
        for handler_cls in handler_classes:
            self.add(handler_cls)


class DataTypeRegistry:
    """ Resolves between the coordinates of a semantic datatype:
        - the user label (localized, e.g. "Number") and its aliases
        - the internal type id (e.g. "_num")
        - the data value handler class that parses and formats values of the type
        - the data item type (storage kind) values of the type are stored as

    A registry is built by create_data_type_registry(): language tables first, then the built-in types,
    then the initializers of the legacy and the current hook. After that it is read-mostly.
    Most code uses the process-wide instance from get_instance(). """

    def __init__(self, type_labels: Mapping[str, str], type_aliases: Mapping[str, str]) -> None:
        self._type_labels: dict[str, str] = dict(type_labels)
        """ User labels by type id. Types without a label are hidden from users. """

        self._type_aliases: dict[str, str] = dict(type_aliases)
        """ Type ids by alias label. """

        self._type_classes: dict[str, type[DataValue]] = {}
        self._type_data_item_ids: dict[str, DataItemType] = {}
        self._default_data_item_type_ids: bidict[DataItemType, str] = bidict(DEFAULT_DATA_ITEM_TYPE_IDS)

        self.handler_names: HandlerNameDict = HandlerNameDict()

    def __repr__(self) -> str:
        return f"DataTypeRegistry({len(self._type_data_item_ids)} types, {len(self._type_labels)} labels, {len(self._type_aliases)} aliases)"

    # ----- Construction -----

    @classmethod
    def get_instance(cls) -> DataTypeRegistry:
        """ Returns the process-wide registry, building it on first access. """
        from .registry_instance import get_data_type_registry
        return get_data_type_registry()

    @classmethod
    def clear(cls) -> None:
        """ Drops the process-wide registry. The next get_instance() builds a new one.
        Registries obtained earlier are not affected. """
        from .registry_instance import clear_data_type_registry
        clear_data_type_registry()

    @classmethod
    def build(cls, language_tables: LanguageTables | None = None, initializers: Mapping[str, list[Callable[[DataTypeRegistry], None]]] | None = None) -> DataTypeRegistry:
        """ Builds a new, independent registry. See create_data_type_registry(). """
        from .create_data_type_registry import create_data_type_registry
        return create_data_type_registry(language_tables=language_tables, initializers=initializers)

    def register_builtin_types(self) -> None:
        """ Binds all built-in type ids to their handlers and data item types. """
        from ..values.data_value import DataValue
        from .get_all_subclasses import get_all_subclasses

        self.handler_names.add_list(get_all_subclasses(DataValue))
        self._type_classes.update(BUILTIN_TYPE_CLASSES)
        self._type_data_item_ids.update(BUILTIN_DATA_ITEM_IDS)

    # ----- Registration -----

    def register_data_type(self, type_id: str, handler: type[DataValue] | str, data_item_id: DataItemType, label: str | None = None) -> None:
        """ Register or overwrite a datatype. The handler and the data item type are always replaced together.

        Args:
            type_id: The type id, starting with '_' (or '__' for types hidden from users). Not validated.
            handler: The data value handler class, or the name of an already known handler class.
            data_item_id: The data item type values of this datatype are stored as.
            label: The user label. If empty, an existing label is kept and a new type stays hidden.

        Raises:
            SetupError: If handler is a name that no known handler class has.
            ValueError: If data_item_id is not a DataItemType. Nothing is registered then.
        """
        data_item_id = DataItemType(data_item_id)

        if isinstance(handler, str):
            handler_cls = self.handler_names.get(handler)
            if handler_cls is None:
                raise SetupError(f"Cannot register datatype '{type_id}': unknown data value handler '{handler}'.")
        else:
            handler_cls = handler
            self.handler_names.add(handler_cls)

        if type_id in self._type_data_item_ids:
            logger.debug(f"Overwriting datatype '{type_id}' with {handler_cls.__name__} ({data_item_id.name}).")

        self._type_classes[type_id] = handler_cls
        self._type_data_item_ids[type_id] = data_item_id

        if label:
            self._type_labels[type_id] = label

    def register_data_type_alias(self, type_id: str, label: str) -> None:
        """ Add an alias label for a type id. The type id does not have to be registered (yet). """
        if type_id not in self._type_data_item_ids:
            logger.debug(f"Alias '{label}' points to datatype '{type_id}', which is not registered.")
        self._type_aliases[label] = type_id

    # ----- Lookup -----

    def find_type_id(self, label: str, use_alias: bool = True) -> str:
        """ Look up the type id for a user label. Primary labels take precedence over aliases.
        Returns UNKNOWN_TYPE_ID if the label does not belong to a known type.

        NOTE: Labels are expected to be unique. If two types share a label, the type whose label was
        registered first wins. """
        if not label:
            return UNKNOWN_TYPE_ID

        for type_id, type_label in self._type_labels.items():
            if type_label == label:
                return type_id

        if use_alias and label in self._type_aliases:
            return self._type_aliases[label]

        return UNKNOWN_TYPE_ID

    def find_type_label(self, type_id: str) -> str:
        """ Get the user label for a type id. Returns UNKNOWN_TYPE_ID both for internal types without a
        label and for unknown type ids (e.g. historic types after an upgrade): the two can't be told apart. """
        return self._type_labels.get(type_id, UNKNOWN_TYPE_ID)

    def get_known_type_labels(self) -> dict[str, str]:
        """ Returns a copy of all user labels by type id. Hidden types are not included. """
        return dict(self._type_labels)

    def get_known_type_ids(self) -> list[str]:
        """ Returns all type ids that have a data item type, in registration order. """
        return list(self._type_data_item_ids)

    def get_data_item_id(self, type_id: str) -> DataItemType:
        """ Returns the data item type for values of type_id, or DataItemType.NOTYPE if it has none.

        NOTE: Record types are parsed into ContainerItems but stored as wiki pages, so '_rec' returns WIKIPAGE. """
        return self._type_data_item_ids.get(type_id, DataItemType.NOTYPE)

    def get_default_data_item_type_id(self, data_item_id: DataItemType) -> str:
        """ Returns the type id to use for data items of the given type when no property type is known.

        Raises:
            NoDefaultTypeError: For DataItemType.NOTYPE and DataItemType.ERROR. Asking for these is a bug.
        """
        try:
            return self._default_data_item_type_ids[data_item_id]
        except KeyError:
            raise NoDefaultTypeError(f"Data item type {data_item_id!r} has no default datatype.") from None

    def get_data_type_class_by_id(self, type_id: str) -> type[DataValue] | None:
        """ Returns the handler class bound to type_id, or None if no handler is registered. """
        return self._type_classes.get(type_id)

    def has_data_type_class_by_id(self, type_id: str) -> bool:
        return type_id in self._type_classes
