import re

from ..data_items.data_item import BlobItem
from ..utilities.validation_error import ValidationError
from .data_value import DataValue


_QNAME_PATTERN = re.compile(r'^([A-Za-z_][\w.-]*):([\w.-]+)$')

class ImportValue(DataValue):
    """ References to terms of an imported vocabulary, written as 'prefix:name' (e.g. 'foaf:knows'). """
    __data_item_class__ = BlobItem

    def parse(self, user_value: str) -> BlobItem:
        value = self._require_text(user_value)
        if not _QNAME_PATTERN.match(value):
            raise ValidationError(f"'{value}' is not a valid vocabulary reference. Use the form 'prefix:name'.")
        return BlobItem(value)

    def get_namespace_prefix(self, data_item: BlobItem) -> str:
        self.validate(data_item)
        return data_item.text.split(":", 1)[0]
