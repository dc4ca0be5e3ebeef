from __future__ import annotations

from typing import Any, TYPE_CHECKING

from ..data_items.data_item_type import DataItemType
from ..utilities.logger import logger
from .data_value import DataValue

if TYPE_CHECKING:
    from ..registry.data_type_registry import DataTypeRegistry


def create_data_value(registry: DataTypeRegistry, type_id: str, /, **kwargs: Any) -> DataValue:
    """ Construct the data value handler bound to type_id.
    If no handler is registered for the id, falls back to the default text type so that the value can
    at least be shown. Keyword arguments are passed on to the handler's constructor.
    Handlers that resolve type labels get this registry unless a registry= keyword is given. """

    handler_cls = registry.get_data_type_class_by_id(type_id)
    if handler_cls is None:
        fallback_type_id = registry.get_default_data_item_type_id(DataItemType.BLOB)
        logger.warning(f"No data value handler registered for type '{type_id}'. Falling back to '{fallback_type_id}'.")
        handler_cls = registry.get_data_type_class_by_id(fallback_type_id)
        if handler_cls is None:
            raise LookupError(f"No data value handler registered for type '{type_id}' or the fallback type '{fallback_type_id}'.")
        return handler_cls(fallback_type_id)

    if handler_cls.__uses_registry__:
        kwargs.setdefault("registry", registry)
    return handler_cls(type_id, **kwargs)
