"""Responses sent from an actuator to the driver."""

from __future__ import annotations

from .message import Message
from .state import ControlMode, Feedback, Gains

__all__ = [
    "MultiTurnEncoderPositionResponse",
    "FeedbackResponse",
    "GainsResponse",
    "GetControlModeResponse",
]


class MultiTurnEncoderPositionResponse(Message):
    """Reply that carries a multi-turn encoder position."""

    @property
    def position(self) -> int:
        """The encoder position, a signed 32-bit value in bytes 4 to 7."""
        return self.get_as(4, size=4, signed=True)


class FeedbackResponse(Message):
    """Reply that carries the closed-loop control feedback."""

    @property
    def status(self) -> Feedback:
        """Temperature, current, shaft speed and shaft angle reported by the actuator."""
        temperature = self.get_as(1, size=1, signed=True)
        current = self.get_as(2, size=2, signed=True) * 0.01
        shaft_speed = float(self.get_as(4, size=2, signed=True))
        shaft_angle = float(self.get_as(6, size=2, signed=True))
        return Feedback(temperature, current, shaft_speed, shaft_angle)


class GainsResponse(Message):
    """Reply that carries the controller gains."""

    @property
    def gains(self) -> Gains:
        """The current, speed and position PI gains held in bytes 2 to 7."""
        current_kp, current_ki, speed_kp, speed_ki, position_kp, position_ki = self.data[2:8]
        return Gains.from_values(
            current_kp, current_ki, speed_kp, speed_ki, position_kp, position_ki
        )


class GetControlModeResponse(Message):
    """Reply that carries the control mode the actuator operates in."""

    @property
    def mode(self) -> ControlMode:
        """The control mode held in the last byte.

        Raises ValueError if the byte is not a known control mode.
        """
        value = self.data[7]
        try:
            return ControlMode(value)
        except ValueError:
            raise ValueError(f"Unknown control mode 0x{value:02x}") from None