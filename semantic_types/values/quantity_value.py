import re

from ..data_items.data_item import NumberItem
from ..utilities.logger import logger
from ..utilities.validation_error import ValidationError
from .number_value import NumberValue


_UNIT_PATTERN = re.compile(r'^[^\d\s][^\d]*$')

class QuantityValue(NumberValue):
    """ Numbers with an optional unit of measurement. Unit conversion factors are declared on the
    property, so the stored number is the value as entered. """

    def parse(self, user_value: str) -> NumberItem:
        number, unit = self._split_number(user_value)
        if unit and not _UNIT_PATTERN.match(unit):
            raise ValidationError(f"'{unit}' is not a valid unit of measurement.")
        if unit:
            logger.debug(f"Quantity '{user_value.strip()}' stored without conversion of unit '{unit}'.")
        return NumberItem(number)
