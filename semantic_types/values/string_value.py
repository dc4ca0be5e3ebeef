from ..data_items.data_item import BlobItem
from .data_value import DataValue


class StringValue(DataValue):
    """ Text, code, the deprecated string type, and internal string types such as sort keys.
    Code values keep their inner whitespace untouched; other types collapse whitespace runs. """
    __data_item_class__ = BlobItem

    def parse(self, user_value: str) -> BlobItem:
        value = self._require_text(user_value)
        if self.type_id != "_cod":
            value = " ".join(value.split())
        return BlobItem(value)

    def format(self, data_item: BlobItem) -> str:
        self.validate(data_item)
        return data_item.text
