"""
Semantic datatypes.

The DataTypeRegistry maps datatype labels and aliases to type ids, type ids to data value handlers, and
handlers to the data item types values are stored as.

Usage:
    from semantic_types import DataTypeRegistry

    registry = DataTypeRegistry.get_instance()
    registry.find_type_id("Number")  # '_num'
"""

from .data_items import DataItemType
from .registry import DataTypeRegistry, create_data_type_registry, get_data_type_registry, clear_data_type_registry, data_type_initializer
from .values import DataValue, create_data_value
from .utilities import SetupError, ValidationError, NoDefaultTypeError, UNKNOWN_TYPE_ID
