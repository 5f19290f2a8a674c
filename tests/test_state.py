import dataclasses

import pytest

from rmd_actuator.state import (
    AccelerationType,
    CanBaudRate,
    ControlMode,
    ErrorCode,
    Feedback,
    Gains,
    MotorStatus1,
    MotorStatus2,
    MotorStatus3,
    PiGains,
)


def test_acceleration_type_values():
    assert [int(a) for a in AccelerationType] == [0x00, 0x01, 0x02, 0x03]
    assert AccelerationType(0x02) is AccelerationType.VELOCITY_PLANNING_ACCELERATION


def test_can_baud_rate_values():
    assert CanBaudRate(0) is CanBaudRate.KBPS500
    assert CanBaudRate(1) is CanBaudRate.MBPS1


def test_control_mode_from_byte():
    assert ControlMode(0x03) is ControlMode.POSITION
    assert ControlMode(0x00) is ControlMode.NONE
    with pytest.raises(ValueError):
        ControlMode(0x04)


def test_error_code_values():
    assert ErrorCode(0x2000) is ErrorCode.ENCODER_CALIBRATION_ERROR
    assert ErrorCode(0x1000) is ErrorCode.OVERTEMPERATURE
    assert ErrorCode(0x0002) is ErrorCode.MOTOR_STALL
    assert ErrorCode.NO_ERROR == 0
    with pytest.raises(ValueError):
        ErrorCode(0x0001)


def test_pi_gains_defaults():
    gains = PiGains()
    assert (gains.kp, gains.ki) == (0, 0)


@pytest.mark.parametrize("kp, ki", [(-1, 0), (0, 256), (300, 1)])
def test_pi_gains_out_of_range(kp, ki):
    with pytest.raises(ValueError):
        PiGains(kp, ki)


def test_pi_gains_rejects_non_integer():
    with pytest.raises(TypeError):
        PiGains(1.5, 0)


def test_gains_from_values_matches_explicit_construction():
    gains = Gains.from_values(1, 2, 3, 4, 5, 6)
    assert gains == Gains(PiGains(1, 2), PiGains(3, 4), PiGains(5, 6))
    assert gains.current.kp == 1
    assert gains.position.ki == 6


def test_gains_defaults_are_zero_and_independent():
    first = Gains()
    second = Gains()
    first.speed.kp = 10
    assert second.speed.kp == 0
    assert Gains.from_values() == second


def test_gains_fields_are_writable():
    gains = Gains.from_values(255, 255, 0, 0, 0, 0)
    gains.position = PiGains(7, 8)
    assert gains.position == PiGains(7, 8)
    assert gains.current == PiGains(255, 255)


def test_motor_status_1_defaults_and_immutability():
    status = MotorStatus1()
    assert status.error_code is ErrorCode.NO_ERROR
    assert status.is_brake_released is False
    with pytest.raises(dataclasses.FrozenInstanceError):
        status.temperature = 30


def test_motor_status_2_fields():
    status = MotorStatus2(25, 1.5, 100.0, -20.0)
    assert (status.temperature, status.current, status.shaft_speed, status.shaft_angle) == (
        25, 1.5, 100.0, -20.0
    )


def test_motor_status_3_fields():
    status = MotorStatus3(40, 0.5, -0.25, 0.75)
    assert status.current_phase_b == -0.25
    assert status == MotorStatus3(40, 0.5, -0.25, 0.75)


def test_feedback_is_motor_status_2():
    assert Feedback is MotorStatus2
    assert Feedback(1, 2.0, 3.0, 4.0) == MotorStatus2(1, 2.0, 3.0, 4.0)