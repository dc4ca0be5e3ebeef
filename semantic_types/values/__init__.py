"""
Data value handlers.

Every handler parses, validates, formats and compares the values of the type ids it is bound to in the
DataTypeRegistry. Importing this package makes all built-in handlers known to the registry's name lookup.
"""

from .data_value import DataValue
from .string_value import StringValue
from .uri_value import UriValue
from .wiki_page_value import WikiPageValue
from .number_value import NumberValue
from .temperature_value import TemperatureValue
from .quantity_value import QuantityValue
from .time_value import TimeValue
from .bool_value import BoolValue
from .record_value import RecordValue, PropertyListValue, PropertyList
from .types_value import TypesValue
from .concept_value import ConceptValue
from .error_value import ErrorValue
from .import_value import ImportValue
from .property_value import PropertyValue
from .create_data_value import create_data_value
