"""Ship module outfitting core: base stats plus fixed-point modifications."""

from .domain.attributes import MODIFIABLE_ATTRIBUTES, AttributeSpec
from .domain.defs import ModuleTemplate
from .domain.modifications import InvalidModificationError
from .domain.entities import Module
from .services import FactoryError, create_module_from_template, lookup_module, require_module

__all__ = [
    "AttributeSpec",
    "FactoryError",
    "InvalidModificationError",
    "MODIFIABLE_ATTRIBUTES",
    "Module",
    "ModuleTemplate",
    "create_module_from_template",
    "lookup_module",
    "require_module",
]
