"""Factories for creating modules from templates or catalog lookups."""
from __future__ import annotations

import logging
from typing import Mapping

from shipyard.data.repositories import ModulesRepository, parse_module_template
from shipyard.domain.defs import ModuleTemplate
from shipyard.domain.entities import Module
from shipyard.services.errors import FactoryError

logger = logging.getLogger(__name__)


def create_module_from_template(template: ModuleTemplate | Mapping[str, object] | None) -> Module:
    """Instantiate a module with no modifications.

    A raw mapping is validated like a catalog entry first. ``None`` gives an
    empty module whose stats all read as 0.
    """
    if template is None:
        return Module()
    if not isinstance(template, ModuleTemplate):
        template = parse_module_template(template)

    return Module(
        grp=template.grp,
        id=template.id,
        name=template.name,
        module_class=template.module_class,
        rating=template.rating,
        attributes=dict(template.stats),
        extra=dict(template.extra),
        mods={},
    )


def lookup_module(grp: str, module_id: str, modules_repo: ModulesRepository) -> Module | None:
    """Return a fresh module for ``grp``/``module_id`` or None if not catalogued."""
    try:
        template = modules_repo.find_module(grp, module_id)
    except KeyError:
        logger.debug("No module '%s' in group '%s'", module_id, grp)
        return None
    return create_module_from_template(template)


def require_module(grp: str, module_id: str, modules_repo: ModulesRepository) -> Module:
    """Like :func:`lookup_module` but raise FactoryError when not found."""
    module = lookup_module(grp, module_id, modules_repo)
    if module is None:
        raise FactoryError(f"Module '{module_id}' not found in group '{grp}'.")
    return module
