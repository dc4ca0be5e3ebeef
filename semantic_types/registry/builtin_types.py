from bidict import bidict

from ..data_items.data_item_type import DataItemType
from ..values import (
    StringValue, UriValue, WikiPageValue, NumberValue, TemperatureValue, TimeValue, BoolValue,
    RecordValue, QuantityValue, TypesValue, PropertyListValue, ConceptValue, ErrorValue, ImportValue,
    PropertyValue,
)


"""
Built-in datatypes.

NOTE: all ids must start with an underscore, where two underscores indicate truly internal types that are
not accessible to users. All others should have a label in the language tables, or users can't select them.
"""

BUILTIN_TYPE_CLASSES: dict[str, type] = {
	'_txt': StringValue,  # Text
	'_cod': StringValue,  # Code
	'_str': StringValue,  # DEPRECATED, use '_txt'
	'_ema': UriValue,  # Email
	'_uri': UriValue,  # URL/URI
	'_anu': UriValue,  # Annotation URI
	'_tel': UriValue,  # Telephone number
	'_wpg': WikiPageValue,  # Page
	'_wpp': WikiPageValue,  # Property page
	'_wpc': WikiPageValue,  # Category page
	'_wpf': WikiPageValue,  # Form page
	'_num': NumberValue,  # Number
	'_tem': TemperatureValue,  # Temperature
	'_dat': TimeValue,  # Date
	'_boo': BoolValue,  # Boolean
	'_rec': RecordValue,  # Record
	'_qty': QuantityValue,  # Number with units of measurement
	# System types, not available to users and without a label
	'__typ': TypesValue,  # Type page
	'__pls': PropertyListValue,  # Property list declaring the fields of a record
	'__con': ConceptValue,  # Concept description
	'__sps': StringValue,  # Special string
	'__spu': UriValue,  # Special URI
	'__sup': WikiPageValue,  # Subproperty of
	'__suc': WikiPageValue,  # Subcategory of
	'__spf': WikiPageValue,  # Form page
	'__sin': WikiPageValue,  # Instance of
	'__red': WikiPageValue,  # Redirect
	'__err': ErrorValue,  # Error
	'__imp': ImportValue,  # Imported vocabulary
	'__pro': PropertyValue,  # Property, not necessarily backed by a page
	'__key': StringValue,  # Sort key of a page
}

# '_geo' and '_gpo' have a storage kind but no built-in handler, an extension registers it
BUILTIN_DATA_ITEM_IDS: dict[str, DataItemType] = {
	'_txt': DataItemType.BLOB,
	'_cod': DataItemType.BLOB,
	'_str': DataItemType.BLOB,
	'_ema': DataItemType.URI,
	'_uri': DataItemType.URI,
	'_anu': DataItemType.URI,
	'_tel': DataItemType.URI,
	'_wpg': DataItemType.WIKIPAGE,
	'_wpp': DataItemType.WIKIPAGE,
	'_wpc': DataItemType.WIKIPAGE,
	'_wpf': DataItemType.WIKIPAGE,
	'_num': DataItemType.NUMBER,
	'_tem': DataItemType.NUMBER,
	'_dat': DataItemType.TIME,
	'_boo': DataItemType.BOOLEAN,
	'_rec': DataItemType.WIKIPAGE,  # Records are parsed as containers but stored as subobject pages
	'_geo': DataItemType.GEO,
	'_gpo': DataItemType.BLOB,
	'_qty': DataItemType.NUMBER,
	'__typ': DataItemType.URI,
	'__pls': DataItemType.BLOB,
	'__con': DataItemType.CONCEPT,
	'__sps': DataItemType.BLOB,
	'__spu': DataItemType.URI,
	'__sup': DataItemType.WIKIPAGE,
	'__suc': DataItemType.WIKIPAGE,
	'__spf': DataItemType.WIKIPAGE,
	'__sin': DataItemType.WIKIPAGE,
	'__red': DataItemType.WIKIPAGE,
	'__err': DataItemType.ERROR,
	'__imp': DataItemType.BLOB,
	'__pro': DataItemType.PROPERTY,
	'__key': DataItemType.BLOB,
}

DEFAULT_DATA_ITEM_TYPE_IDS: bidict[DataItemType, str] = bidict({
	DataItemType.BLOB: '_txt',
	DataItemType.URI: '_uri',
	DataItemType.WIKIPAGE: '_wpg',
	DataItemType.NUMBER: '_num',
	DataItemType.TIME: '_dat',
	DataItemType.BOOLEAN: '_boo',
	DataItemType.CONTAINER: '_rec',
	DataItemType.GEO: '_geo',
	DataItemType.CONCEPT: '__con',
	DataItemType.PROPERTY: '__pro',
	# NOTYPE and ERROR intentionally have no default
})
""" Types used to make data values for data items when no property type is known. """
