"""Domain definition exports."""

from .module_def import ModuleTemplate

__all__ = [
    "ModuleTemplate",
]
