"""
Datatype Registry Module

This module resolves between datatype labels, type ids, data value handlers and data item types.
The process-wide registry is built on first use; extensions add their types with @data_type_initializer().
"""

from .data_type_registry import DataTypeRegistry, HandlerNameDict
from .create_data_type_registry import create_data_type_registry
from .registry_instance import get_data_type_registry, clear_data_type_registry, get_registry_status, RegistryStatus
from .initializers import (
    data_type_initializer, register_initializer, clear_initializers, run_initializers,
    LEGACY_INIT_HOOK, INIT_HOOK,
)
