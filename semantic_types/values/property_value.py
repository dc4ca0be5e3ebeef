import re

from ..data_items.data_item import PropertyItem
from ..utilities.validation_error import ValidationError
from .data_value import DataValue


_INVALID_PROPERTY_CHARS = re.compile(r'[\[\]{}|<>#]')

class PropertyValue(DataValue):
    """ Property names. A leading '-' denotes the inverse property. """
    __data_item_class__ = PropertyItem

    def parse(self, user_value: str) -> PropertyItem:
        value = self._require_text(user_value)
        inverse = value.startswith("-")
        if inverse:
            value = value[1:].strip()

        label = " ".join(value.replace("_", " ").split())
        if not label or _INVALID_PROPERTY_CHARS.search(label):
            raise ValidationError(f"'{user_value.strip()}' is not a valid property name.")

        return PropertyItem(label[0].upper() + label[1:].replace(" ", "_"), inverse)

    def format(self, data_item: PropertyItem) -> str:
        self.validate(data_item)
        return f"-{data_item.label}" if data_item.inverse else data_item.label
