from abc import ABC, abstractmethod
from typing import ClassVar

from ..data_items.data_item import DataItem
from ..utilities.validation_error import ValidationError


class DataValue(ABC):
    """ Handles user-facing values of one semantic type: parsing user input into a data item,
    validating and formatting data items, and comparing them.

    Handlers are bound to type ids in the DataTypeRegistry. The registry never instantiates them; callers
    construct a handler with the type id it should serve (see create_data_value). """

    __data_item_class__: ClassVar[type[DataItem]]
    """ The data item class produced by parse() and accepted by validate(). Must be set by subclasses. """

    __uses_registry__: ClassVar[bool] = False
    """ Handlers that resolve type labels take a registry= keyword. create_data_value() passes them the registry it was called with. """

    def __init__(self, type_id: str) -> None:
        self.type_id = type_id

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.type_id!r})"

    @abstractmethod
    def parse(self, user_value: str) -> DataItem:
        """ Parse a user-supplied string. Raises ValidationError if the value is not acceptable. """

    def validate(self, data_item: DataItem) -> None:
        """ Raises a ValidationError if the data item cannot be handled by this data value. """
        if not isinstance(data_item, self.__data_item_class__):
            raise ValidationError(f"Type '{self.type_id}' expects a {self.__data_item_class__.__name__}, got {type(data_item).__name__}.")

    def format(self, data_item: DataItem) -> str:
        self.validate(data_item)
        return data_item.serialization()

    def compare(self, left: DataItem, right: DataItem) -> int:
        self.validate(left)
        self.validate(right)
        left_key, right_key = left.sort_key(), right.sort_key()
        return (left_key > right_key) - (left_key < right_key)

    def _require_text(self, user_value: str) -> str:
        """ Returns the stripped value, raising for empty input. """
        if not isinstance(user_value, str):
            raise ValidationError(f"Expected a string value, got {type(user_value).__name__}.")
        value = user_value.strip()
        if not value:
            raise ValidationError("No value was provided.")
        return value
