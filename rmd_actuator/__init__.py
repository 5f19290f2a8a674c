"""Actuator specifications, state records, reply decoding and a CAN driver for RMD-X series actuators."""

__version__ = "0.0.1"
__all__ = ["constants", "state", "message", "driver", "responses"]