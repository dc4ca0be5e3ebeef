import re
from urllib.parse import urlparse

from ..data_items.data_item import UriItem
from ..utilities.validation_error import ValidationError
from .data_value import DataValue


_EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
_PHONE_PATTERN = re.compile(r'^\+?[0-9][0-9 ()./-]*$')

class UriValue(DataValue):
    """ URLs, annotation URIs, email addresses and telephone numbers. The mode depends on the type id:
    '_ema' stores mailto: URIs, '_tel' stores tel: URIs, everything else must be an absolute URI. """
    __data_item_class__ = UriItem

    def parse(self, user_value: str) -> UriItem:
        value = self._require_text(user_value)

        if self.type_id == "_ema":
            if value.lower().startswith("mailto:"):
                value = value[len("mailto:"):]
            if not _EMAIL_PATTERN.match(value):
                raise ValidationError(f"'{value}' is not a valid email address.")
            return UriItem(f"mailto:{value}")

        if self.type_id == "_tel":
            if value.lower().startswith("tel:"):
                value = value[len("tel:"):]
            if not _PHONE_PATTERN.match(value):
                raise ValidationError(f"'{value}' is not a valid telephone number.")
            digits = re.sub(r'[ ()./]', '-', value).strip('-')
            digits = re.sub(r'-+', '-', digits)
            return UriItem(f"tel:{digits}")

        if " " in value:
            raise ValidationError(f"'{value}' is not a valid URI: URIs must not contain spaces.")
        parsed = urlparse(value)
        if not parsed.scheme:
            raise ValidationError(f"'{value}' is not a valid URI: the protocol is missing.")
        if parsed.scheme in ("http", "https", "ftp") and not parsed.netloc:
            raise ValidationError(f"'{value}' is not a valid URI: the host is missing.")
        return UriItem(value)

    def format(self, data_item: UriItem) -> str:
        self.validate(data_item)
        if self.type_id == "_ema" and data_item.scheme == "mailto":
            return data_item.uri[len("mailto:"):]
        if self.type_id == "_tel" and data_item.scheme == "tel":
            return data_item.uri[len("tel:"):]
        return data_item.uri
