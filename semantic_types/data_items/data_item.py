from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar

from .data_item_type import DataItemType
from .time_precision import TimePrecision


@dataclass(frozen=True)
class DataItem(ABC):
    """ Immutable primitive value of one storage kind. Data items are what stores persist and compare;
    the user-facing parsing and formatting lives in the data value handlers. """

    __kind__: ClassVar[DataItemType]

    @property
    def kind(self) -> DataItemType:
        return self.__kind__

    @abstractmethod
    def serialization(self) -> str:
        """ Canonical string form, stable across releases. """

    def sort_key(self) -> Any:
        return self.serialization()

    def __str__(self) -> str:
        return self.serialization()


@dataclass(frozen=True)
class NumberItem(DataItem):
    __kind__ = DataItemType.NUMBER
    number: float

    def serialization(self) -> str:
        if float(self.number).is_integer():
            return str(int(self.number))
        return repr(float(self.number))

    def sort_key(self) -> Any:
        return float(self.number)


@dataclass(frozen=True)
class BlobItem(DataItem):
    __kind__ = DataItemType.BLOB
    text: str

    def serialization(self) -> str:
        return self.text


@dataclass(frozen=True)
class BooleanItem(DataItem):
    __kind__ = DataItemType.BOOLEAN
    boolean: bool

    def serialization(self) -> str:
        return "t" if self.boolean else "f"

    def sort_key(self) -> Any:
        return int(self.boolean)


@dataclass(frozen=True)
class UriItem(DataItem):
    __kind__ = DataItemType.URI
    uri: str

    def __post_init__(self):
        if ":" not in self.uri:
            raise ValueError(f"URI '{self.uri}' has no scheme.")

    @property
    def scheme(self) -> str:
        return self.uri.split(":", 1)[0]

    def serialization(self) -> str:
        return self.uri


@dataclass(frozen=True)
class TimeItem(DataItem):
    """ Point in time of a given precision. Fields finer than the precision keep their defaults, so a
    year-only TimeItem(1969, precision=TimePrecision.YEAR) is not the same value as January 1st 1969.
    Years may be negative (before the common era) and are not limited to four digits. """
    __kind__ = DataItemType.TIME
    year: int
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: float = 0.0
    precision: TimePrecision = TimePrecision.TIME

    def __post_init__(self):
        if not (1 <= self.month <= 12):
            raise ValueError(f"Month must be 1-12, got {self.month}")
        if not (1 <= self.day <= 31):
            raise ValueError(f"Day must be 1-31, got {self.day}")
        if not (0 <= self.hour <= 23) or not (0 <= self.minute <= 59) or not (0 <= self.second < 60):
            raise ValueError(f"Invalid time of day {self.hour}:{self.minute}:{self.second}")

        precision = TimePrecision(self.precision)
        finer_fields = (self.month, self.day, self.hour, self.minute, self.second)[self._field_count(precision) - 1:]
        if finer_fields != (1, 1, 0, 0, 0)[self._field_count(precision) - 1:]:
            raise ValueError(f"Fields finer than {precision.name} precision must keep their defaults, got {finer_fields}")

    @staticmethod
    def _field_count(precision: TimePrecision) -> int:
        """ Number of fields, starting with the year, that a value of this precision specifies. """
        return 6 if precision == TimePrecision.TIME else precision + 1

    def serialization(self) -> str:
        # 1 is the Gregorian calendar model
        second = int(self.second) if float(self.second).is_integer() else self.second
        fields = (self.year, self.month, self.day, self.hour, self.minute, second)
        return "/".join(str(value) for value in (1,) + fields[:self._field_count(self.precision)])

    def sort_key(self) -> Any:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)


@dataclass(frozen=True)
class GeoCoordItem(DataItem):
    __kind__ = DataItemType.GEO
    latitude: float
    longitude: float

    def __post_init__(self):
        if not (-90 <= self.latitude <= 90):
            raise ValueError(f"Latitude must be between -90 and 90, got {self.latitude}")
        if not (-360 <= self.longitude <= 360):
            raise ValueError(f"Longitude must be between -360 and 360, got {self.longitude}")

    def serialization(self) -> str:
        return f"{self.latitude},{self.longitude}"

    def sort_key(self) -> Any:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class WikiPageItem(DataItem):
    __kind__ = DataItemType.WIKIPAGE
    title: str
    namespace: int = 0
    interwiki: str = ""
    subobject: str = ""

    def __post_init__(self):
        if not self.title:
            raise ValueError("Wiki page title must not be empty.")

    def serialization(self) -> str:
        return "#".join((self.title.replace(" ", "_"), str(self.namespace), self.interwiki, self.subobject))

    def sort_key(self) -> Any:
        return (self.title, self.namespace, self.interwiki, self.subobject)


@dataclass(frozen=True)
class PropertyItem(DataItem):
    """ A property, identified by its key: the page title with underscores, or an internal id
    starting with '_' for predefined properties. """
    __kind__ = DataItemType.PROPERTY
    key: str
    inverse: bool = False

    def __post_init__(self):
        if not self.key:
            raise ValueError("Property key must not be empty.")

    @property
    def label(self) -> str:
        return self.key.replace("_", " ").strip()

    def serialization(self) -> str:
        return f"-{self.key}" if self.inverse else self.key


@dataclass(frozen=True)
class ContainerItem(DataItem):
    """ Ordered (property, value) pairs. Only used while parsing records; stores keep records as
    subobject pages, which is why the record type is bound to the WIKIPAGE kind. """
    __kind__ = DataItemType.CONTAINER
    fields: tuple[tuple[PropertyItem, DataItem], ...] = field(default_factory=tuple)

    def serialization(self) -> str:
        return ";".join(f"{prop.key}={item.serialization()}" for prop, item in self.fields)

    def sort_key(self) -> Any:
        return tuple(item.sort_key() for _, item in self.fields)


@dataclass(frozen=True)
class ConceptItem(DataItem):
    __kind__ = DataItemType.CONCEPT
    concept: str
    documentation: str = ""
    query_features: int = 0
    size: int = -1
    depth: int = -1

    def serialization(self) -> str:
        return self.concept


@dataclass(frozen=True)
class ErrorItem(DataItem):
    __kind__ = DataItemType.ERROR
    errors: tuple[str, ...]

    def serialization(self) -> str:
        return "; ".join(self.errors)
