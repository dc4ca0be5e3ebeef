from __future__ import annotations

from typing import Callable, Mapping, TYPE_CHECKING

from ..utilities.logger import logger

if TYPE_CHECKING:
    from .data_type_registry import DataTypeRegistry


LEGACY_INIT_HOOK = "smwInitDatatypes"
""" Deprecated hook, kept for extensions that have not moved to INIT_HOOK. Runs first. """

INIT_HOOK = "SMW::DataType::initTypes"

HOOK_ORDER = (LEGACY_INIT_HOOK, INIT_HOOK)

Initializer = Callable[['DataTypeRegistry'], None]

initializers: dict[str, list[Initializer]] = {hook: [] for hook in HOOK_ORDER}
""" Module state: initializers by hook, in registration order. """


def register_initializer(initializer: Initializer, hook: str = INIT_HOOK) -> Initializer:
    """ Add an initializer that may register datatypes and aliases whenever a registry is built.
    Initializers run in registration order, so a later registration for the same type id wins. """
    if hook not in initializers:
        raise ValueError(f"Unknown datatype hook '{hook}'. Expected one of: {', '.join(HOOK_ORDER)}")
    initializers[hook].append(initializer)
    return initializer

def data_type_initializer(hook: str = INIT_HOOK):
    """ Decorator form of register_initializer().

    Ex:
        @data_type_initializer()
        def register_geo_types(registry: DataTypeRegistry) -> None:
            registry.register_data_type('_geo', GeoCoordinateValue, DataItemType.GEO, 'Geographic coordinate')
    """
    def decorator(f: Initializer) -> Initializer:
        return register_initializer(f, hook)
    return decorator

def clear_initializers(hook: str | None = None) -> None:
    """ Remove the registered initializers of one hook, or of all hooks. """
    for name in HOOK_ORDER if hook is None else (hook,):
        initializers[name].clear()

def run_initializers(registry: DataTypeRegistry, initializers_by_hook: Mapping[str, list[Initializer]] | None = None) -> None:
    """ Run the initializers of every hook in HOOK_ORDER. Exceptions raised by an initializer propagate. """
    if initializers_by_hook is None:
        initializers_by_hook = initializers

    for hook in HOOK_ORDER:
        # Copy, so initializers registered while running only apply to the next build
        for initializer in list(initializers_by_hook.get(hook, [])):
            logger.debug(f"Running datatype initializer {getattr(initializer, '__qualname__', initializer)!s} for hook '{hook}'.")
            initializer(registry)
