from .data_item_type import DataItemType
from .time_precision import TimePrecision
from .data_item import (
    DataItem, NumberItem, BlobItem, BooleanItem, UriItem, TimeItem, GeoCoordItem,
    WikiPageItem, PropertyItem, ContainerItem, ConceptItem, ErrorItem,
)
