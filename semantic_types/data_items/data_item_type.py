from enum import IntEnum


class DataItemType(IntEnum):
    """ The closed set of primitive storage kinds every semantic type reduces to.
    The numeric values are persisted by stores and must never change. """
    NOTYPE = 0
    NUMBER = 1
    BLOB = 2
    BOOLEAN = 4
    URI = 5
    TIME = 6
    GEO = 9
    CONTAINER = 10
    WIKIPAGE = 11
    CONCEPT = 12
    PROPERTY = 13
    ERROR = 14
