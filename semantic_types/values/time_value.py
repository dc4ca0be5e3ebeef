import re
from datetime import date, datetime

from ..data_items.data_item import TimeItem
from ..data_items.time_precision import TimePrecision
from ..utilities.validation_error import ValidationError
from .data_value import DataValue


_YEAR_PATTERN = re.compile(r'^(-?\d{1,9})$')
_YEAR_MONTH_PATTERN = re.compile(r'^(-?\d{1,9})-(\d{1,2})$')

def _parse_year(text: str) -> int:
    year = int(text)
    if year == 0:
        raise ValidationError("There is no year 0.")
    return year


class TimeValue(DataValue):
    """ Dates and times. Accepts a year ('1969', '-300'), a year and month ('1969-07'), an ISO date
    ('1969-07-20') or an ISO datetime ('1969-07-20T20:17:40'). The precision of the input is kept,
    so values format back the way they were given. """
    __data_item_class__ = TimeItem

    def parse(self, user_value: str) -> TimeItem:
        value = self._require_text(user_value)
        try:
            if match := _YEAR_PATTERN.match(value):
                return TimeItem(_parse_year(match.group(1)), precision=TimePrecision.YEAR)

            if match := _YEAR_MONTH_PATTERN.match(value):
                return TimeItem(_parse_year(match.group(1)), int(match.group(2)), precision=TimePrecision.MONTH)

            return self._parse_iso(value)
        except ValueError:
            raise ValidationError(f"'{value}' is not a valid date.")

    def _parse_iso(self, value: str) -> TimeItem:
        try:
            parsed_date = date.fromisoformat(value)
        except ValueError:
            pass
        else:
            return TimeItem(parsed_date.year, parsed_date.month, parsed_date.day, precision=TimePrecision.DAY)

        parsed = datetime.fromisoformat(value)
        return TimeItem(parsed.year, parsed.month, parsed.day, parsed.hour, parsed.minute, parsed.second + parsed.microsecond / 1e6)

    def format(self, data_item: TimeItem) -> str:
        self.validate(data_item)
        output = f"{data_item.year:04d}" if data_item.year > 0 else str(data_item.year)
        if data_item.precision >= TimePrecision.MONTH:
            output += f"-{data_item.month:02d}"
        if data_item.precision >= TimePrecision.DAY:
            output += f"-{data_item.day:02d}"
        if data_item.precision == TimePrecision.TIME:
            output += f"T{data_item.hour:02d}:{data_item.minute:02d}:{int(data_item.second):02d}"
        return output
