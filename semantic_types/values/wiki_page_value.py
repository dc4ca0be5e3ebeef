import re

from bidict import bidict

from ..data_items.data_item import WikiPageItem
from ..utilities.validation_error import ValidationError
from .data_value import DataValue


NS_MAIN = 0
NS_CATEGORY = 14
NS_PROPERTY = 102
NS_FORM = 106

NAMESPACE_NAMES: bidict[str, int] = bidict({
    "category": NS_CATEGORY,
    "property": NS_PROPERTY,
    "form": NS_FORM,
})

FIXED_NAMESPACES: dict[str, int] = {
    "_wpp": NS_PROPERTY,
    "_wpc": NS_CATEGORY,
    "_wpf": NS_FORM,
    "__sup": NS_PROPERTY,
    "__suc": NS_CATEGORY,
    "__spf": NS_FORM,
    "__sin": NS_CATEGORY,
}
""" Page types whose values always live in one namespace. A namespace prefix in the input is optional for these. """

_INVALID_TITLE_CHARS = re.compile(r'[\[\]{}|<>]')

class WikiPageValue(DataValue):
    __data_item_class__ = WikiPageItem

    def parse(self, user_value: str) -> WikiPageItem:
        value = self._require_text(user_value)

        subobject = ""
        if "#" in value:
            value, subobject = (part.strip() for part in value.split("#", 1))

        namespace = NS_MAIN
        prefix, sep, rest = value.partition(":")
        if sep and prefix.strip().lower() in NAMESPACE_NAMES:
            namespace = NAMESPACE_NAMES[prefix.strip().lower()]
            value = rest.strip()

        fixed_namespace = FIXED_NAMESPACES.get(self.type_id)
        if fixed_namespace is not None:
            if namespace not in (NS_MAIN, fixed_namespace):
                raise ValidationError(f"'{user_value.strip()}' is not a page in the namespace required by this type.")
            namespace = fixed_namespace

        title = " ".join(value.replace("_", " ").split())
        if not title:
            raise ValidationError(f"'{user_value.strip()}' is not a valid page title.")
        if _INVALID_TITLE_CHARS.search(title):
            raise ValidationError(f"'{title}' contains characters that are not allowed in page titles.")

        return WikiPageItem(title[0].upper() + title[1:], namespace, "", subobject)

    def format(self, data_item: WikiPageItem) -> str:
        self.validate(data_item)
        output = data_item.title
        if data_item.namespace != NS_MAIN and self.type_id not in FIXED_NAMESPACES:
            namespace_name = NAMESPACE_NAMES.inverse.get(data_item.namespace, str(data_item.namespace))
            output = f"{namespace_name.capitalize()}:{output}"
        if data_item.subobject:
            output += f"#{data_item.subobject}"
        return output
