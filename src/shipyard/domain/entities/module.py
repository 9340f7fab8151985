"""Runtime module entity with percentage modifications."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict

from shipyard.domain.attributes import MODIFIABLE_ATTRIBUTES, AttributeSpec
from shipyard.domain.modifications import (
    InvalidModificationError,
    decode_mod_value,
    encode_mod_value,
    is_within_mod_range,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Module:
    """An equippable module in a ship build.

    ``attributes`` holds the base stats copied from the template and ``mods``
    maps a stat name to its fixed-point modification. One getter per entry
    of the attribute table (``get_mass``, ``get_range``, ...) is attached
    below the class; each delegates to :meth:`get_modified_value`.
    """

    grp: str | None = None
    id: str | None = None
    name: str | None = None
    module_class: int | None = None
    rating: str | None = None
    attributes: Dict[str, float] = field(default_factory=dict)
    extra: Dict[str, object] = field(default_factory=dict)
    mods: Dict[str, int] | None = field(default_factory=dict)

    def get_base_value(self, name: str) -> float | None:
        """Return the unmodified stat, or None when the module lacks it."""
        return self.attributes.get(name)

    def get_mod_value(self, name: str) -> float | None:
        """Return the modification for ``name`` as a fraction, or None if unset."""
        if self.mods is None:
            return None
        stored = self.mods.get(name)
        if stored is None:
            return None
        return decode_mod_value(stored)

    def set_mod_value(self, name: str, value: float | None) -> None:
        """Set the modification for ``name``; None or 0 removes it.

        Finite values outside [-1, 1] are stored as given; infinities and NaN
        raise InvalidModificationError and leave existing mods untouched.
        """
        if self.mods is None:
            self.mods = {}
        if value is None or value == 0:
            self.mods.pop(name, None)
            return
        if not math.isfinite(value):
            raise InvalidModificationError(
                f"Modification {name}={value!r} on module {self.id} must be finite."
            )
        if not is_within_mod_range(value):
            logger.warning("Modification %s=%s on module %s is outside [-1, 1]", name, value, self.id)
        stored = encode_mod_value(value)
        if stored == 0:
            self.mods.pop(name, None)
        else:
            self.mods[name] = stored

    def has_mod(self, name: str) -> bool:
        return bool(self.mods) and name in self.mods

    def clear_mods(self) -> None:
        self.mods = {}

    def get_modified_value(self, name: str) -> float:
        """Return the stat after applying its modification.

        Missing or zero stats yield 0 and are never scaled.
        """
        base = self.attributes.get(name)
        if not base:
            return 0
        mult = self.get_mod_value(name)
        if mult:
            return base * (1 + mult)
        return base

    def effective_stats(self) -> Dict[str, float]:
        """Return effective values for every table stat this module carries."""
        return {
            spec.key: self.get_modified_value(spec.key)
            for spec in MODIFIABLE_ATTRIBUTES
            if spec.key in self.attributes
        }


def _make_accessor(spec: AttributeSpec):
    def accessor(self: Module) -> float:
        return self.get_modified_value(spec.key)

    accessor.__name__ = spec.accessor
    accessor.__qualname__ = f"Module.{spec.accessor}"
    accessor.__doc__ = f"Return the {spec.label} of this module, taking modifications into account."
    return accessor


for _spec in MODIFIABLE_ATTRIBUTES:
    setattr(Module, _spec.accessor, _make_accessor(_spec))
del _spec
