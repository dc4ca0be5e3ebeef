from collections.abc import Sequence
from typing import Self, TypeVar, Generic, List, Iterable, overload


T = TypeVar('T')

class TypedList(Generic[T], Sequence[T]):
    """ A list that only accepts elements of the types listed in __allowed_types__.
    Subclasses may override __validate_list__ to check the list as a whole. It is called with the list
    a modification would produce, and the modification is only applied if it passes. """

    __allowed_types__: tuple[type, ...]
    """ Element types must be specified by inheriting classes. """

    def __init__(self, initial_elements: Iterable[T] | None = None):
        self._elements: List[T] = []

        if initial_elements:
            self.extend(initial_elements)
        else:
            self.__validate_list__(self._elements)

    def __validate_list__(self, elements: List[T]) -> None:
        pass

    def __check_type__(self, element: T):
        if not isinstance(element, self.__allowed_types__):
            raise TypeError(f"{self.__class__.__name__} does not accept elements of type {type(element).__name__}.")

    def append(self, element: T):
        self.extend([element])

    def extend(self, elements: Iterable[T]):
        elements = list(elements)
        for element in elements:
            self.__check_type__(element)
        candidate = self._elements + elements
        self.__validate_list__(candidate)
        self._elements = candidate

    @overload
    def __getitem__(self, idxs: int) -> T: ...

    @overload
    def __getitem__(self, idxs: slice) -> Self: ...

    def __getitem__(self, idxs: int | slice) -> T | Self:
        if isinstance(idxs, slice):
            return self.__class__(self._elements[idxs])
        return self._elements[idxs]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedList) or self.__allowed_types__ != other.__allowed_types__:
            return NotImplemented
        return self._elements == other._elements

    def __str__(self) -> str:
        return str(self._elements)
