from typing import Sequence

from ..data_items.data_item import BlobItem, ContainerItem, PropertyItem
from ..utilities.validation_error import ValidationError
from .data_value import DataValue
from .property_value import PropertyValue
from .typed_list import TypedList


class PropertyList(TypedList[PropertyItem]):
    """ The ordered fields of a record type. A property may only appear once. """
    __allowed_types__ = (PropertyItem,)

    def __validate_list__(self, elements: list[PropertyItem]) -> None:
        keys = [prop.key for prop in elements]
        if len(keys) != len(set(keys)):
            raise ValueError(f"Duplicate property in property list: {keys}")


def _split_fields(value: str) -> list[str]:
    return [part.strip() for part in value.split(";")]


class RecordValue(DataValue):
    """ Records are ';'-separated values, one per declared field. Every field is parsed by the data value
    handler of its property; empty fields are skipped. """
    __data_item_class__ = ContainerItem

    def __init__(self, type_id: str, *, properties: PropertyList | None = None, field_values: Sequence[DataValue] = ()) -> None:
        super().__init__(type_id)
        self.properties = properties if properties is not None else PropertyList()
        self.field_values = list(field_values)
        if len(self.properties) != len(self.field_values):
            raise ValueError(f"Record declares {len(self.properties)} properties but {len(self.field_values)} field handlers.")

    def parse(self, user_value: str) -> ContainerItem:
        value = self._require_text(user_value)
        if not self.properties:
            raise ValidationError("This record type does not declare any fields.")

        parts = _split_fields(value)
        if len(parts) > len(self.properties):
            raise ValidationError(f"Too many values: the record has only {len(self.properties)} fields.")

        fields = []
        for prop, field_value, part in zip(self.properties, self.field_values, parts):
            if not part:
                continue
            fields.append((prop, field_value.parse(part)))

        if not fields:
            raise ValidationError("No value was provided.")
        return ContainerItem(tuple(fields))

    def format(self, data_item: ContainerItem) -> str:
        self.validate(data_item)
        values_by_key = {prop.key: item for prop, item in data_item.fields}
        parts = []
        for prop, field_value in zip(self.properties, self.field_values):
            item = values_by_key.get(prop.key)
            parts.append(field_value.format(item) if item is not None else "")
        while parts and not parts[-1]:
            parts.pop()
        return "; ".join(parts)


class PropertyListValue(DataValue):
    """ Declares the fields of a record: a ';'-separated list of property names, stored as a blob. """
    __data_item_class__ = BlobItem

    def parse(self, user_value: str) -> BlobItem:
        return BlobItem(";".join(prop.key for prop in self.parse_properties(user_value)))

    def parse_properties(self, user_value: str) -> PropertyList:
        value = self._require_text(user_value)
        property_value = PropertyValue('__pro')
        properties = PropertyList()
        for name in _split_fields(value):
            if not name:
                raise ValidationError(f"'{value}' contains an empty property name.")
            prop = property_value.parse(name)
            if prop.inverse:
                raise ValidationError(f"The inverse property '{name}' cannot be a record field.")
            try:
                properties.append(prop)
            except ValueError:
                raise ValidationError(f"The property '{name}' is listed more than once.")
        return properties

    def format(self, data_item: BlobItem) -> str:
        self.validate(data_item)
        return "; ".join(key.replace("_", " ") for key in data_item.text.split(";"))
