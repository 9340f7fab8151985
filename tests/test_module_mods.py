import logging

import pytest

from shipyard.domain.entities import Module
from shipyard.domain.modifications import InvalidModificationError
from shipyard.services.factories import create_module_from_template


def _module(**stats: float) -> Module:
    return create_module_from_template({"id": "test_1a", "grp": "test", **stats})


def test_mod_value_round_trips_at_four_decimal_places() -> None:
    module = _module(mass=10)

    module.set_mod_value("mass", 0.0534)

    assert module.mods == {"mass": 534}
    assert module.get_mod_value("mass") == 0.0534


def test_mod_value_rounds_to_nearest_ten_thousandth() -> None:
    module = _module(mass=10)

    module.set_mod_value("mass", 0.12346)
    module.set_mod_value("power", -0.00004)

    assert module.mods["mass"] == 1235
    assert "power" not in module.mods


def test_mod_value_stable_under_repeated_reads() -> None:
    module = _module(dps=8)
    module.set_mod_value("dps", 0.3333333)

    first = module.get_mod_value("dps")

    assert first == 0.3333
    assert module.get_mod_value("dps") == first
    module.set_mod_value("dps", first)
    assert module.mods["dps"] == 3333


@pytest.mark.parametrize("cleared", [0, None, 0.0])
def test_zero_or_none_removes_modification(cleared) -> None:
    module = _module(mass=10)
    module.set_mod_value("mass", 0.2)

    module.set_mod_value("mass", cleared)

    assert "mass" not in module.mods
    assert module.get_mod_value("mass") is None
    assert module.get_mass() == 10


def test_removing_absent_modification_is_noop() -> None:
    module = _module(mass=10)

    module.set_mod_value("integrity", None)
    module.set_mod_value("integrity", 0)

    assert module.mods == {}


def test_setting_again_overwrites_previous_value() -> None:
    module = _module(mass=10)
    module.set_mod_value("mass", 0.5)

    module.set_mod_value("mass", -0.25)

    assert module.get_mod_value("mass") == -0.25
    assert module.get_mass() == pytest.approx(7.5)


def test_out_of_range_value_is_stored_and_logged(caplog) -> None:
    module = _module(range=3000)

    with caplog.at_level(logging.WARNING, logger="shipyard.domain.entities.module"):
        module.set_mod_value("range", 1.5)

    assert module.mods["range"] == 15000
    assert module.get_range() == pytest.approx(7500)
    assert "outside [-1, 1]" in caplog.text


def test_modification_scales_base_value() -> None:
    module = _module(mass=10)

    module.set_mod_value("mass", 0.1)

    assert module.get_mass() == pytest.approx(11)


def test_negative_modification_reduces_base_value() -> None:
    module = _module(power=2.0)

    module.set_mod_value("power", -0.4)

    assert module.get_power_usage() == pytest.approx(1.2)


def test_zero_base_is_never_scaled() -> None:
    module = _module(kinres=0)

    module.set_mod_value("kinres", 0.5)

    assert module.get_mod_value("kinres") == 0.5
    assert module.get_kinetic_resistance() == 0


def test_missing_attribute_reads_as_zero() -> None:
    module = _module(power=1.2)
    module.set_mod_value("mass", 0.3)

    assert module.get_base_value("mass") is None
    assert module.get_mass() == 0


def test_unmodified_attribute_returns_base_unchanged() -> None:
    module = _module(integrity=46, pGen=9.6)

    assert module.get_integrity() == 46
    assert module.get_power_generation() == 9.6


def test_get_mod_value_without_mods_map_returns_none() -> None:
    module = _module(mass=10)
    module.mods = None

    assert module.get_mod_value("mass") is None
    assert module.get_mass() == 10
    assert not module.has_mod("mass")


def test_set_mod_value_recreates_cleared_mods_map() -> None:
    module = _module(mass=10)
    module.mods = None

    module.set_mod_value("mass", 0.1)

    assert module.mods == {"mass": 1000}


def test_has_mod_and_clear_mods() -> None:
    module = _module(mass=10, power=2)
    module.set_mod_value("mass", 0.1)
    module.set_mod_value("power", 0.1)

    assert module.has_mod("mass")
    assert not module.has_mod("integrity")

    module.clear_mods()

    assert module.mods == {}
    assert module.get_mass() == 10


def test_effective_stats_covers_carried_attributes_only() -> None:
    module = _module(mass=10, power=2, kinres=0)
    module.set_mod_value("mass", 0.1)

    stats = module.effective_stats()

    assert set(stats) == {"power", "mass", "kinres"}
    assert stats["mass"] == pytest.approx(11)
    assert stats["power"] == 2
    assert stats["kinres"] == 0


def test_empty_module_reads_zero_everywhere() -> None:
    module = Module()

    assert module.mods == {}
    assert module.get_mass() == 0
    assert module.get_shield_reinforcement() == 0
    assert module.effective_stats() == {}


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_modification_is_rejected(value: float) -> None:
    module = _module(mass=10)
    module.set_mod_value("mass", 0.1)

    with pytest.raises(InvalidModificationError):
        module.set_mod_value("mass", value)

    assert module.mods == {"mass": 1000}
    assert module.get_mass() == pytest.approx(11)


def test_two_decimal_mod_values_round_trip_across_full_range() -> None:
    """Every two-decimal value in [-1, 1] must read back exactly as it was set."""
    module = _module(mass=10)
    mismatches = []
    for step in range(-100, 101):
        if step == 0:
            continue
        value = step / 100
        module.set_mod_value("mass", value)
        if module.get_mod_value("mass") != value:
            mismatches.append((value, module.mods["mass"]))

    assert mismatches == [], f"Values that did not round-trip: {mismatches}"
