import threading
from enum import StrEnum, auto

from ..utilities.setup_error import SetupError
from .create_data_type_registry import create_data_type_registry
from .data_type_registry import DataTypeRegistry


class RegistryStatus(StrEnum):
    UNINITIALIZED = auto()
    INITIALIZING = auto()
    READY = auto()

# Module-level cache for the process-wide registry
_data_type_registry: DataTypeRegistry | None = None
_status: RegistryStatus = RegistryStatus.UNINITIALIZED
_lock = threading.RLock()

def get_data_type_registry() -> DataTypeRegistry:
    """ Returns the process-wide registry, building it on first call. Safe to call from several threads. """
    global _data_type_registry, _status
    if _data_type_registry is not None:
        return _data_type_registry

    with _lock:
        if _status is RegistryStatus.INITIALIZING:
            raise SetupError("The data type registry was requested while it is being initialized. Initializers must use the registry they are given.")

        if _data_type_registry is None:
            _status = RegistryStatus.INITIALIZING
            try:
                registry = create_data_type_registry()
            except BaseException:
                _status = RegistryStatus.UNINITIALIZED
                raise
            _data_type_registry = registry
            _status = RegistryStatus.READY

        return _data_type_registry

def clear_data_type_registry() -> None:
    """ Drops the process-wide registry, e.g. after the language changed or between tests. """
    global _data_type_registry, _status
    with _lock:
        _data_type_registry = None
        _status = RegistryStatus.UNINITIALIZED

def get_registry_status() -> RegistryStatus:
    return _status
