from ..data_items.data_item import BooleanItem
from ..utilities.validation_error import ValidationError
from .data_value import DataValue


TRUE_WORDS = {"true", "t", "yes", "y", "1"}
FALSE_WORDS = {"false", "f", "no", "n", "0"}

class BoolValue(DataValue):
    __data_item_class__ = BooleanItem

    def parse(self, user_value: str) -> BooleanItem:
        value = self._require_text(user_value).lower()
        if value in TRUE_WORDS:
            return BooleanItem(True)
        if value in FALSE_WORDS:
            return BooleanItem(False)
        raise ValidationError(f"'{user_value.strip()}' is not a valid boolean. Use 'true' or 'false'.")

    def format(self, data_item: BooleanItem) -> str:
        self.validate(data_item)
        return "true" if data_item.boolean else "false"
