"""Factory helpers for runtime modules."""

from .module_factory import create_module_from_template, lookup_module, require_module

__all__ = [
    "create_module_from_template",
    "lookup_module",
    "require_module",
]
