from __future__ import annotations

from typing import TYPE_CHECKING

from ..data_items.data_item import UriItem
from ..utilities.special_values import INTERNAL_PREFIX, TYPE_URI_BASE, UNKNOWN_TYPE_ID, is_hidden_type_id
from ..utilities.validation_error import ValidationError
from .data_value import DataValue

if TYPE_CHECKING:
    from ..registry.data_type_registry import DataTypeRegistry


class TypesValue(DataValue):
    """ Values of the special "has type" property. Users write a type label ("Number", or any alias);
    the value is stored as the URI of the type id. Hidden system types cannot be selected.

    Labels are resolved through the given registry, or the process-wide one if none is given. """
    __data_item_class__ = UriItem
    __uses_registry__ = True

    def __init__(self, type_id: str, *, registry: DataTypeRegistry | None = None) -> None:
        super().__init__(type_id)
        self._registry = registry

    @property
    def registry(self) -> DataTypeRegistry:
        if self._registry is None:
            from ..registry.registry_instance import get_data_type_registry
            self._registry = get_data_type_registry()
        return self._registry

    def parse(self, user_value: str) -> UriItem:
        value = self._require_text(user_value)

        # Type ids may be used directly, e.g. in imported data
        if value.startswith(INTERNAL_PREFIX) and self.registry.get_data_item_id(value):
            type_id = value
        else:
            type_id = self.registry.find_type_id(value[0].upper() + value[1:])

        if type_id == UNKNOWN_TYPE_ID or is_hidden_type_id(type_id):
            raise ValidationError(f"'{value}' is not a known datatype.")
        return UriItem(TYPE_URI_BASE + type_id)

    def get_type_id(self, data_item: UriItem) -> str:
        self.validate(data_item)
        if not data_item.uri.startswith(TYPE_URI_BASE):
            return UNKNOWN_TYPE_ID
        return data_item.uri[len(TYPE_URI_BASE):]

    def format(self, data_item: UriItem) -> str:
        type_id = self.get_type_id(data_item)
        return self.registry.find_type_label(type_id) or type_id
