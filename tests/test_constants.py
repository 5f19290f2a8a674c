import dataclasses

import pytest

from rmd_actuator import constants
from rmd_actuator.constants import ACTUATORS, ActuatorConstants, actuator_constants

ALL_NAMES = [
    "X4V2", "X4V3", "X4_3", "X4_24",
    "X6V2", "X6S2V2", "X6V3", "X6_7", "X6_8", "X6_40",
    "X8V2", "X8ProV2", "X8S2V3", "X8HV3", "X8ProHV3", "X8_20", "X8_25", "X8_60", "X8_90",
    "X10V3", "X10S2V3", "X10_40", "X10_100",
    "X12_150",
    "X15_400",
]


def test_all_models_are_registered_in_order():
    assert [actuator_constants(name).name for name in ACTUATORS] == ALL_NAMES


@pytest.mark.parametrize("name", ALL_NAMES)
def test_lookup_returns_module_constant(name):
    spec = actuator_constants(name)
    assert spec is getattr(constants, name)
    assert spec.name == name


@pytest.mark.parametrize("name", ALL_NAMES)
def test_torque_constant_is_torque_over_current(name):
    spec = actuator_constants(name)
    assert spec.torque_constant * spec.rated_current == pytest.approx(spec.rated_torque)


@pytest.mark.parametrize("name", ALL_NAMES)
def test_rated_values_are_positive(name):
    spec = actuator_constants(name)
    for value in (
        spec.reducer_ratio,
        spec.rated_speed,
        spec.rated_current,
        spec.rated_power,
        spec.rated_torque,
        spec.rotor_inertia,
    ):
        assert value > 0


@pytest.mark.parametrize("name", ALL_NAMES)
def test_no_load_speed_exceeds_rated_speed_when_given(name):
    spec = actuator_constants(name)
    if spec.no_load_speed is None:
        assert spec.speed_constant is None
    else:
        assert spec.no_load_speed > spec.rated_speed


def test_x4v2_values_from_specification():
    spec = actuator_constants("X4V2")
    assert spec.reducer_ratio == 10
    assert spec.rated_torque == 1
    assert spec.rated_current == pytest.approx(1.6)
    assert spec.speed_constant == pytest.approx(12.5)
    assert spec.number_of_pole_pairs == 14


def test_x15_400_values_from_specification():
    spec = actuator_constants("X15_400")
    assert spec.reducer_ratio == pytest.approx(11.4)
    assert spec.rated_power == 1500
    assert spec.rotor_inertia == 175000
    assert spec.number_of_pole_pairs == 21


def test_v3_models_have_no_pole_pair_count():
    assert actuator_constants("X4V3").number_of_pole_pairs is None
    assert actuator_constants("X10V3").number_of_pole_pairs is None


def test_unknown_model_raises_key_error():
    with pytest.raises(KeyError, match="X99"):
        actuator_constants("X99")


def test_lookup_is_case_sensitive():
    with pytest.raises(KeyError):
        actuator_constants("x4v2")


def test_constants_are_immutable():
    spec = actuator_constants("X6V2")
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.rated_torque = 10
    assert actuator_constants("X6V2").rated_torque == pytest.approx(3.5)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        ACTUATORS["custom"] = ActuatorConstants(
            "custom", reducer_ratio=1, rated_speed=1, rated_current=1,
            rated_power=1, rated_torque=1, rotor_inertia=1,
        )
    assert "custom" not in ACTUATORS


def test_custom_spec_torque_constant():
    spec = ActuatorConstants(
        "custom", reducer_ratio=2, rated_speed=100, rated_current=4,
        rated_power=50, rated_torque=8, rotor_inertia=10,
    )
    assert spec.torque_constant == pytest.approx(2.0)
    assert spec.no_load_speed is None


def test_replacement_models_share_ratios():
    assert actuator_constants("X6_8").reducer_ratio == actuator_constants("X6V3").reducer_ratio
    assert actuator_constants("X10_100").rated_torque == actuator_constants("X10S2V3").rated_torque