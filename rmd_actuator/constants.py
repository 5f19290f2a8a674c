"""Technical specifications of the MyActuator RMD-X actuator series."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

__all__ = [
    "ActuatorConstants",
    "ACTUATORS",
    "actuator_constants",
    "X4V2",
    "X4V3",
    "X4_3",
    "X4_24",
    "X6V2",
    "X6S2V2",
    "X6V3",
    "X6_7",
    "X6_8",
    "X6_40",
    "X8V2",
    "X8ProV2",
    "X8S2V3",
    "X8HV3",
    "X8ProHV3",
    "X8_20",
    "X8_25",
    "X8_60",
    "X8_90",
    "X10V3",
    "X10S2V3",
    "X10_40",
    "X10_100",
    "X12_150",
    "X15_400",
]


@dataclass(frozen=True)
class ActuatorConstants:
    """Rated data of one actuator model.

    Units: speeds in rpm, current in A, power in W, torque in Nm,
    speed constant in rpm/V and rotor inertia in g*cm^2. Fields the
    manufacturer does not give for a model are ``None``.
    """

    name: str
    reducer_ratio: float
    rated_speed: float
    rated_current: float
    rated_power: float
    rated_torque: float
    rotor_inertia: float
    no_load_speed: float | None = None
    speed_constant: float | None = None
    number_of_pole_pairs: int | None = None

    @property
    def torque_constant(self) -> float:
        """Torque constant in Nm/A, derived from the rated torque and current."""
        return self.rated_torque / self.rated_current


# X4 series
X4V2 = ActuatorConstants(
    "X4V2", reducer_ratio=10, rated_speed=250, rated_current=1.6, rated_power=27,
    rated_torque=1, rotor_inertia=105, no_load_speed=300, speed_constant=12.5,
    number_of_pole_pairs=14,
)
X4V3 = ActuatorConstants(
    "X4V3", reducer_ratio=6, rated_speed=400, rated_current=3, rated_power=80,
    rated_torque=1.2, rotor_inertia=200, no_load_speed=600, speed_constant=200,
)
X4_3 = ActuatorConstants(
    "X4_3", reducer_ratio=6, rated_speed=200, rated_current=2, rated_power=30,
    rated_torque=1.5, rotor_inertia=1200, number_of_pole_pairs=14,
)
X4_24 = ActuatorConstants(
    "X4_24", reducer_ratio=36, rated_speed=100, rated_current=3.5, rated_power=150,
    rated_torque=9, rotor_inertia=6800, number_of_pole_pairs=14,
)

# X6 series
X6V2 = ActuatorConstants(
    "X6V2", reducer_ratio=6, rated_speed=190, rated_current=4, rated_power=70,
    rated_torque=3.5, rotor_inertia=800, no_load_speed=240, speed_constant=60,
    number_of_pole_pairs=14,
)
X6S2V2 = ActuatorConstants(
    "X6S2V2", reducer_ratio=36, rated_speed=70, rated_current=2.6, rated_power=132,
    rated_torque=18, rotor_inertia=800, no_load_speed=90, speed_constant=135,
    number_of_pole_pairs=14,
)
X6V3 = ActuatorConstants(
    "X6V3", reducer_ratio=8, rated_speed=310, rated_current=3.6, rated_power=135,
    rated_torque=4.5, rotor_inertia=850, no_load_speed=360, speed_constant=62,
)
X6_7 = ActuatorConstants(
    "X6_7", reducer_ratio=6, rated_speed=400, rated_current=4, rated_power=150,
    rated_torque=3.5, rotor_inertia=4800, number_of_pole_pairs=14,
)
X6_8 = ActuatorConstants(
    "X6_8", reducer_ratio=8, rated_speed=310, rated_current=3.6, rated_power=135,
    rated_torque=4.5, rotor_inertia=6800, number_of_pole_pairs=14,
)
X6_40 = ActuatorConstants(
    "X6_40", reducer_ratio=36, rated_speed=90, rated_current=5.2, rated_power=170,
    rated_torque=18, rotor_inertia=28800, number_of_pole_pairs=14,
)

# X8 series
X8V2 = ActuatorConstants(
    "X8V2", reducer_ratio=9, rated_speed=170, rated_current=4.3, rated_power=160,
    rated_torque=9, rotor_inertia=2600, no_load_speed=215, speed_constant=40,
    number_of_pole_pairs=21,
)
X8ProV2 = ActuatorConstants(
    "X8ProV2", reducer_ratio=9, rated_speed=122, rated_current=5, rated_power=166,
    rated_torque=13, rotor_inertia=3400, no_load_speed=160, speed_constant=30,
    number_of_pole_pairs=20,
)
X8S2V3 = ActuatorConstants(
    "X8S2V3", reducer_ratio=36, rated_speed=40, rated_current=3.2, rated_power=110,
    rated_torque=25, rotor_inertia=2670, no_load_speed=46, speed_constant=33,
)
X8HV3 = ActuatorConstants(
    "X8HV3", reducer_ratio=6.2, rated_speed=190, rated_current=3.5, rated_power=120,
    rated_torque=6, rotor_inertia=2670, no_load_speed=260, speed_constant=33,
)
X8ProHV3 = ActuatorConstants(
    "X8ProHV3", reducer_ratio=6.2, rated_speed=160, rated_current=3.75, rated_power=135,
    rated_torque=8, rotor_inertia=3400, no_load_speed=220, speed_constant=30,
)
X8_20 = ActuatorConstants(
    "X8_20", reducer_ratio=6, rated_speed=190, rated_current=5.2, rated_power=200,
    rated_torque=10, rotor_inertia=20000, number_of_pole_pairs=20,
)
X8_25 = ActuatorConstants(
    "X8_25", reducer_ratio=9, rated_speed=110, rated_current=3.2, rated_power=125,
    rated_torque=10, rotor_inertia=30600, number_of_pole_pairs=21,
)
X8_60 = ActuatorConstants(
    "X8_60", reducer_ratio=36, rated_speed=40, rated_current=4, rated_power=130,
    rated_torque=30, rotor_inertia=96000, number_of_pole_pairs=20,
)
X8_90 = ActuatorConstants(
    "X8_90", reducer_ratio=18, rated_speed=130, rated_current=10, rated_power=500,
    rated_torque=25, rotor_inertia=26000, number_of_pole_pairs=21,
)

# X10 series
X10V3 = ActuatorConstants(
    "X10V3", reducer_ratio=7, rated_speed=170, rated_current=5.3, rated_power=215,
    rated_torque=12, rotor_inertia=5675, no_load_speed=190, speed_constant=30,
)
X10S2V3 = ActuatorConstants(
    "X10S2V3", reducer_ratio=35, rated_speed=50, rated_current=6.7, rated_power=265,
    rated_torque=50, rotor_inertia=5675, no_load_speed=55, speed_constant=30,
)
X10_40 = ActuatorConstants(
    "X10_40", reducer_ratio=7, rated_speed=165, rated_current=6.5, rated_power=265,
    rated_torque=15, rotor_inertia=39700, number_of_pole_pairs=21,
)
X10_100 = ActuatorConstants(
    "X10_100", reducer_ratio=35, rated_speed=50, rated_current=6.7, rated_power=265,
    rated_torque=50, rotor_inertia=198600, number_of_pole_pairs=21,
)

# X12 series
X12_150 = ActuatorConstants(
    "X12_150", reducer_ratio=12, rated_speed=100, rated_current=15, rated_power=780,
    rated_torque=50, rotor_inertia=59000, number_of_pole_pairs=21,
)

# X15 series
X15_400 = ActuatorConstants(
    "X15_400", reducer_ratio=11.4, rated_speed=80, rated_current=23, rated_power=1500,
    rated_torque=130, rotor_inertia=175000, number_of_pole_pairs=21,
)

ACTUATORS: Mapping[str, ActuatorConstants] = MappingProxyType(
    {
        spec.name: spec
        for spec in (
            X4V2, X4V3, X4_3, X4_24,
            X6V2, X6S2V2, X6V3, X6_7, X6_8, X6_40,
            X8V2, X8ProV2, X8S2V3, X8HV3, X8ProHV3, X8_20, X8_25, X8_60, X8_90,
            X10V3, X10S2V3, X10_40, X10_100,
            X12_150,
            X15_400,
        )
    }
)


def actuator_constants(name: str) -> ActuatorConstants:
    """Return the specification of the actuator model called ``name``.

    Raises KeyError if the model is unknown.
    """
    try:
        return ACTUATORS[name]
    except KeyError:
        known = ", ".join(ACTUATORS)
        raise KeyError(f"Unknown actuator model '{name}', expected one of: {known}") from None