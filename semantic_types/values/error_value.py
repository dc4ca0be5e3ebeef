from ..data_items.data_item import ErrorItem
from .data_value import DataValue


class ErrorValue(DataValue):
    """ Carries the errors of a value that could not be stored. Accepts any text and never fails. """
    __data_item_class__ = ErrorItem

    def parse(self, user_value: str) -> ErrorItem:
        text = user_value.strip() if isinstance(user_value, str) else ""
        return ErrorItem((text,) if text else ())
