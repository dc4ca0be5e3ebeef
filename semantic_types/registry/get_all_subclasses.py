from typing import TypeVar


T = TypeVar('T')

def get_all_subclasses(cls: type[T]) -> list[type[T]]:
    """Get all subclasses of a class, including indirect subclasses, in definition order.
    A class reachable through several bases is listed once."""
    subclasses: list[type[T]] = []
    for subclass in cls.__subclasses__():
        if subclass not in subclasses:
            subclasses.append(subclass)
        for indirect_subclass in get_all_subclasses(subclass):
            if indirect_subclass not in subclasses:
                subclasses.append(indirect_subclass)
    return subclasses
