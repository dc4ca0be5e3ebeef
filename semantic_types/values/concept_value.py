from ..data_items.data_item import ConceptItem
from .data_value import DataValue


class ConceptValue(DataValue):
    """ Concept descriptions: a stored query that defines the members of a concept page. """
    __data_item_class__ = ConceptItem

    def parse(self, user_value: str) -> ConceptItem:
        return ConceptItem(self._require_text(user_value))
