"""Repository exports."""

from .modules_repo import ModulesRepository, parse_module_template

__all__ = [
    "ModulesRepository",
    "parse_module_template",
]
