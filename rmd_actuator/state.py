"""State structures reported by and sent to the actuator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

__all__ = [
    "AccelerationType",
    "CanBaudRate",
    "ControlMode",
    "ErrorCode",
    "PiGains",
    "Gains",
    "MotorStatus1",
    "MotorStatus2",
    "MotorStatus3",
    "Feedback",
]


class AccelerationType(IntEnum):
    """Acceleration (initial to maximum speed) and deceleration (maximum speed to stop) types."""

    POSITION_PLANNING_ACCELERATION = 0x00
    POSITION_PLANNING_DECELERATION = 0x01
    VELOCITY_PLANNING_ACCELERATION = 0x02
    VELOCITY_PLANNING_DECELERATION = 0x03


class CanBaudRate(IntEnum):
    """Communication baud rate of the CAN bus."""

    KBPS500 = 0
    MBPS1 = 1


class ControlMode(IntEnum):
    """Control modes the actuator can operate in."""

    NONE = 0x00
    CURRENT = 0x01
    VELOCITY = 0x02
    POSITION = 0x03


class ErrorCode(IntEnum):
    """Error codes reported by the actuator."""

    NO_ERROR = 0x0000
    MOTOR_STALL = 0x0002
    LOW_VOLTAGE = 0x0004
    OVERVOLTAGE = 0x0008
    OVERCURRENT = 0x0010
    POWER_OVERRUN = 0x0040
    SPEEDING = 0x0100
    # No description is given for the following three codes
    UNSPECIFIED_1 = 0x0200
    UNSPECIFIED_2 = 0x0400
    UNSPECIFIED_3 = 0x0800
    OVERTEMPERATURE = 0x1000
    ENCODER_CALIBRATION_ERROR = 0x2000


def _check_gain(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Gain '{name}' must be an integer, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Gain '{name}' = {value} out of range [0, 255]")


@dataclass
class PiGains:
    """Proportional and integral gains of a PI controller, each one unsigned byte."""

    kp: int = 0
    ki: int = 0

    def __post_init__(self) -> None:
        _check_gain("kp", self.kp)
        _check_gain("ki", self.ki)


@dataclass
class Gains:
    """PI gains of the current, speed and position control loops."""

    current: PiGains = field(default_factory=PiGains)
    speed: PiGains = field(default_factory=PiGains)
    position: PiGains = field(default_factory=PiGains)

    @classmethod
    def from_values(
        cls,
        current_kp: int = 0,
        current_ki: int = 0,
        speed_kp: int = 0,
        speed_ki: int = 0,
        position_kp: int = 0,
        position_ki: int = 0,
    ) -> Gains:
        """Build the gains from the six individual gain values."""
        return cls(
            PiGains(current_kp, current_ki),
            PiGains(speed_kp, speed_ki),
            PiGains(position_kp, position_ki),
        )


@dataclass(frozen=True)
class MotorStatus1:
    """Temperature (1 degC), brake state, voltage (0.1 V) and error code."""

    temperature: int = 0
    is_brake_released: bool = False
    voltage: float = 0.0
    error_code: ErrorCode = ErrorCode.NO_ERROR


@dataclass(frozen=True)
class MotorStatus2:
    """Temperature (1 degC), current (0.01 A), shaft speed (1 dps) and shaft angle (1 deg)."""

    temperature: int = 0
    current: float = 0.0
    shaft_speed: float = 0.0
    shaft_angle: float = 0.0


@dataclass(frozen=True)
class MotorStatus3:
    """Temperature (1 degC) and the currents of the three phases (0.01 A)."""

    temperature: int = 0
    current_phase_a: float = 0.0
    current_phase_b: float = 0.0
    current_phase_c: float = 0.0


# The feedback of any closed-loop control command is motor status 2.
Feedback = MotorStatus2