"""Module catalog repository."""
from __future__ import annotations

from typing import Dict, Mapping

from shipyard.data.errors import DataValidationError
from shipyard.data.repositories.base import RepositoryBase
from shipyard.domain.attributes import is_modifiable
from shipyard.domain.defs import ModuleTemplate

_IDENTITY_FIELDS = {"id", "grp", "name", "class", "rating"}


class ModulesRepository(RepositoryBase[ModuleTemplate]):
    """Loads module templates keyed by group and id.

    ``modules.json`` maps each group (``pp``, ``sg``, ``pl``, ...) to an object
    of module ids.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("modules.json", base_path)

    def _build_entry(self, grp: str, def_id: str, payload: dict[str, object]) -> ModuleTemplate:
        return parse_module_template(payload, module_id=def_id, grp=grp)

    def find_module(self, grp: str, module_id: str) -> ModuleTemplate:
        """Return the template for ``module_id`` in ``grp`` or raise KeyError."""
        return self.get_in_group(grp, module_id)


def parse_module_template(
    payload: Mapping[str, object],
    *,
    module_id: str | None = None,
    grp: str | None = None,
) -> ModuleTemplate:
    """Validate a raw template mapping and split it into stats and extras.

    ``module_id``/``grp`` fill in identity when the payload does not carry it;
    if both are present they must agree.
    """
    context = f"module '{module_id or payload.get('id') or 'template'}'"
    resolved_id = _resolve_identity(payload, "id", module_id, context)
    resolved_grp = _resolve_identity(payload, "grp", grp, context)

    name = _optional(payload.get("name"), str, f"{context} name")
    module_class = _optional(payload.get("class"), int, f"{context} class")
    rating = _optional(payload.get("rating"), str, f"{context} rating")

    stats: Dict[str, float] = {}
    extra: Dict[str, object] = {}
    for key, value in payload.items():
        if key in _IDENTITY_FIELDS:
            continue
        if is_modifiable(key):
            stats[key] = _require_number(value, f"{context} {key}")
        else:
            extra[key] = value

    return ModuleTemplate(
        id=resolved_id,
        grp=resolved_grp,
        name=name,
        module_class=module_class,
        rating=rating,
        stats=stats,
        extra=extra,
    )


def _resolve_identity(
    payload: Mapping[str, object],
    key: str,
    fallback: str | None,
    context: str,
) -> str | None:
    value = _optional(payload.get(key), str, f"{context} {key}")
    if value is not None and fallback is not None and value != fallback:
        raise DataValidationError(f"{context} declares {key} '{value}' but is listed under '{fallback}'.")
    return value if value is not None else fallback


def _optional(value: object, expected_type: type, context: str):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, expected_type):
        raise DataValidationError(f"{context} must be of type {expected_type.__name__}.")
    return value


def _require_number(value: object, context: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataValidationError(f"{context} must be a number.")
    return value
