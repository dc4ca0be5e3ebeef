from enum import IntEnum


class TimePrecision(IntEnum):
    """ How much of a TimeItem was actually given. Each level includes the fields of the levels below it. """
    YEAR = 0
    MONTH = 1
    DAY = 2
    TIME = 3
