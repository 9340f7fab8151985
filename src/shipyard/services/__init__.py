"""Service layer exports."""

from .errors import FactoryError
from .factories import create_module_from_template, lookup_module, require_module

__all__ = [
    "FactoryError",
    "create_module_from_template",
    "lookup_module",
    "require_module",
]
