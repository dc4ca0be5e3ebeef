from ..data_items.data_item import NumberItem
from ..utilities.validation_error import ValidationError
from .number_value import NumberValue


# Conversions into Kelvin, the stored unit
_TO_KELVIN = {
    "K": lambda value: value,
    "°C": lambda value: value + 273.15,
    "°F": lambda value: (value - 32) / 1.8 + 273.15,
    "°R": lambda value: value / 1.8,
}

_UNIT_ALIASES = {
    "k": "K", "kelvin": "K",
    "°c": "°C", "c": "°C", "celsius": "°C", "centigrade": "°C",
    "°f": "°F", "f": "°F", "fahrenheit": "°F",
    "°r": "°R", "r": "°R", "rankine": "°R",
}

class TemperatureValue(NumberValue):
    """ Temperatures in Kelvin, Celsius, Fahrenheit or Rankine. Values are always stored in Kelvin. """

    def parse(self, user_value: str) -> NumberItem:
        number, unit = self._split_number(user_value)
        if not unit:
            raise ValidationError(f"'{user_value.strip()}' has no temperature unit. Use K, °C, °F or °R.")

        canonical_unit = _UNIT_ALIASES.get(unit.replace(" ", "").lower())
        if canonical_unit is None:
            raise ValidationError(f"'{unit}' is not a known temperature unit. Use K, °C, °F or °R.")

        kelvin = round(_TO_KELVIN[canonical_unit](number), 10)
        if kelvin < 0:
            raise ValidationError(f"'{user_value.strip()}' is below absolute zero.")
        return NumberItem(kelvin)

    def format(self, data_item: NumberItem) -> str:
        return f"{super().format(data_item)} K"
