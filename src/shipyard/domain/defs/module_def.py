"""Module template definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True, slots=True)
class ModuleTemplate:
    """Catalog definition of a module type.

    ``stats`` only holds keys from the modifiable attribute table; every other
    catalog field is kept untouched in ``extra``.
    """

    id: str
    grp: str
    name: str | None = None
    module_class: int | None = None
    rating: str | None = None
    stats: Mapping[str, float] = field(default_factory=dict)
    extra: Mapping[str, object] = field(default_factory=dict)
