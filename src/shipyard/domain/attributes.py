"""Table of modifiable module attributes and their public accessors."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, slots=True)
class AttributeSpec:
    """A numeric module stat that modifications can scale."""

    key: str
    accessor: str
    label: str


MODIFIABLE_ATTRIBUTES: tuple[AttributeSpec, ...] = (
    AttributeSpec("pGen", "get_power_generation", "power generation"),
    AttributeSpec("power", "get_power_usage", "power usage"),
    AttributeSpec("integrity", "get_integrity", "integrity"),
    AttributeSpec("mass", "get_mass", "mass"),
    AttributeSpec("eff", "get_thermal_efficiency", "thermal efficiency"),
    AttributeSpec("maxmass", "get_max_mass", "maximum mass"),
    AttributeSpec("optmass", "get_optimal_mass", "optimal mass"),
    AttributeSpec("optmult", "get_optimal_multiplier", "optimal multiplier"),
    AttributeSpec("dps", "get_damage_per_second", "damage per second"),
    AttributeSpec("eps", "get_energy_per_second", "energy per second"),
    AttributeSpec("hps", "get_heat_per_second", "heat per second"),
    AttributeSpec("maxfuel", "get_max_fuel_per_jump", "maximum fuel per jump"),
    AttributeSpec("syscap", "get_systems_capacity", "systems capacity"),
    AttributeSpec("engcap", "get_engines_capacity", "engines capacity"),
    AttributeSpec("wepcap", "get_weapons_capacity", "weapons capacity"),
    AttributeSpec("sysrate", "get_systems_recharge_rate", "systems recharge rate"),
    AttributeSpec("engrate", "get_engines_recharge_rate", "engines recharge rate"),
    AttributeSpec("weprate", "get_weapons_recharge_rate", "weapons recharge rate"),
    AttributeSpec("kinres", "get_kinetic_resistance", "kinetic resistance"),
    AttributeSpec("thermres", "get_thermal_resistance", "thermal resistance"),
    AttributeSpec("explres", "get_explosive_resistance", "explosive resistance"),
    AttributeSpec("regen", "get_regeneration_rate", "regeneration rate"),
    AttributeSpec("brokenregen", "get_broken_regeneration_rate", "broken regeneration rate"),
    AttributeSpec("range", "get_range", "range"),
    AttributeSpec("arc", "get_capture_arc", "capture arc"),
    AttributeSpec("armour", "get_armour", "armour"),
    AttributeSpec("delay", "get_delay", "delay"),
    AttributeSpec("duration", "get_duration", "duration"),
    AttributeSpec("shieldreinforcement", "get_shield_reinforcement", "shield reinforcement"),
)

_SPECS_BY_KEY: Dict[str, AttributeSpec] = {spec.key: spec for spec in MODIFIABLE_ATTRIBUTES}

ATTRIBUTE_KEYS: frozenset[str] = frozenset(_SPECS_BY_KEY)
ACCESSOR_TO_KEY: Dict[str, str] = {spec.accessor: spec.key for spec in MODIFIABLE_ATTRIBUTES}


def is_modifiable(key: str) -> bool:
    """Return True when ``key`` names a stat from the attribute table."""
    return key in _SPECS_BY_KEY


def get_attribute_spec(key: str) -> AttributeSpec:
    """Return the table entry for ``key`` or raise KeyError."""
    try:
        return _SPECS_BY_KEY[key]
    except KeyError as exc:
        raise KeyError(key) from exc


__all__ = [
    "ACCESSOR_TO_KEY",
    "ATTRIBUTE_KEYS",
    "AttributeSpec",
    "MODIFIABLE_ATTRIBUTES",
    "get_attribute_spec",
    "is_modifiable",
]
