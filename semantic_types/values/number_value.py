import re

from ..data_items.data_item import NumberItem
from ..utilities.validation_error import ValidationError
from .data_value import DataValue


_NUMBER_PATTERN = re.compile(r'^\s*([+-]?(?:\d[\d,]*)?(?:\.\d+)?(?:[eE][+-]?\d+)?)\s*(.*?)\s*$')

class NumberValue(DataValue):
    """ Decimal numbers. Accepts ',' as thousands separator and scientific notation. """
    __data_item_class__ = NumberItem

    def parse(self, user_value: str) -> NumberItem:
        number, unit = self._split_number(user_value)
        if unit:
            raise ValidationError(f"'{user_value.strip()}' is not a number.")
        return NumberItem(number)

    def format(self, data_item: NumberItem) -> str:
        self.validate(data_item)
        if float(data_item.number).is_integer():
            return f"{int(data_item.number):,}"
        return f"{data_item.number:,}"

    def _split_number(self, user_value: str) -> tuple[float, str]:
        """ Split the input into its numeric part and the remaining (unit) text. """
        value = self._require_text(user_value)
        match = _NUMBER_PATTERN.match(value)
        if not match or not re.search(r'\d', match.group(1)):
            raise ValidationError(f"'{value}' is not a number.")
        try:
            number = float(match.group(1).replace(",", ""))
        except ValueError:
            raise ValidationError(f"'{value}' is not a number.")
        return number, match.group(2)
