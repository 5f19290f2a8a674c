"""Drivers that carry actuator messages over a CAN bus."""

from __future__ import annotations

import socket
import struct
from abc import ABC, abstractmethod
from typing import Iterable

from .message import MESSAGE_LENGTH, Message

__all__ = [
    "CAN_REQUEST_OFFSET",
    "CAN_RESPONSE_OFFSET",
    "DriverError",
    "Driver",
    "CanBus",
    "CanNode",
    "SocketCanBus",
    "CanDriver",
]

CAN_REQUEST_OFFSET = 0x140
CAN_RESPONSE_OFFSET = 0x240

_MIN_ACTUATOR_ID = 1
_MAX_ACTUATOR_ID = 32

# struct can_frame: 32-bit id, 8-bit length, 3 padding bytes, 8 data bytes
_CAN_FRAME_FORMAT = "=IB3x8s"
_CAN_FRAME_SIZE = struct.calcsize(_CAN_FRAME_FORMAT)
# struct can_filter: 32-bit id, 32-bit mask
_CAN_FILTER_FORMAT = "=II"
_CAN_SFF_MASK = 0x7FF
_CAN_EFF_FLAG = 0x80000000


class DriverError(Exception):
    """Raised when a driver cannot carry out a request."""


class Driver(ABC):
    """Interface of a driver that exchanges messages with actuators."""

    @abstractmethod
    def add_id(self, actuator_id: int) -> None:
        """Register an actuator so that its replies are received."""

    @abstractmethod
    def send(self, message: Message, actuator_id: int) -> None:
        """Send ``message`` to the actuator with the given id."""

    @abstractmethod
    def send_recv(self, request: Message, actuator_id: int) -> bytes:
        """Send ``request`` to the actuator and return the bytes of its reply."""


class CanBus(ABC):
    """A raw CAN bus endpoint."""

    @abstractmethod
    def write(self, can_id: int, data: bytes) -> None:
        """Write a frame with ``data`` to ``can_id``."""

    @abstractmethod
    def read(self) -> tuple[int, bytes]:
        """Block until a frame arrives and return its id and data."""

    @abstractmethod
    def set_recv_filter(self, can_ids: Iterable[int]) -> None:
        """Only receive frames whose id is one of ``can_ids``."""


class CanNode(Driver):
    """Driver that maps actuator ids to CAN ids by fixed send and receive offsets."""

    def __init__(self, bus: CanBus, send_id_offset: int, receive_id_offset: int) -> None:
        self._bus = bus
        self._send_id_offset = send_id_offset
        self._receive_id_offset = receive_id_offset
        self._actuator_ids: list[int] = []

    @property
    def bus(self) -> CanBus:
        """The bus the node communicates over."""
        return self._bus

    @property
    def actuator_ids(self) -> tuple[int, ...]:
        """The actuator ids registered so far, in order of registration."""
        return tuple(self._actuator_ids)

    def add_id(self, actuator_id: int) -> None:
        """Register ``actuator_id`` and receive replies from all registered actuators."""
        if not _MIN_ACTUATOR_ID <= actuator_id <= _MAX_ACTUATOR_ID:
            raise DriverError(
                f"Given actuator id '{actuator_id}' out of admittable range "
                f"[{_MIN_ACTUATOR_ID}, {_MAX_ACTUATOR_ID}]!"
            )
        self._actuator_ids.append(actuator_id)
        self._bus.set_recv_filter([self.can_receive_id(i) for i in self._actuator_ids])

    def send(self, message: Message, actuator_id: int) -> None:
        """Write ``message`` to the CAN id of the given actuator."""
        self._bus.write(self.can_send_id(actuator_id), message.data)

    def send_recv(self, request: Message, actuator_id: int) -> bytes:
        """Write ``request`` to the actuator and return the data of the next frame read."""
        self._bus.write(self.can_send_id(actuator_id), request.data)
        _, data = self._bus.read()
        return bytes(data)

    def can_send_id(self, actuator_id: int) -> int:
        """CAN id that messages for ``actuator_id`` are sent to."""
        return self._send_id_offset + actuator_id

    def can_receive_id(self, actuator_id: int) -> int:
        """CAN id that replies of ``actuator_id`` arrive from."""
        return self._receive_id_offset + actuator_id


class SocketCanBus(CanBus):
    """CAN bus over a Linux SocketCAN network interface."""

    def __init__(self, ifname: str, timeout: float | None = None) -> None:
        self.ifname = ifname
        try:
            self._socket = socket.socket(socket.PF_CAN, socket.SOCK_RAW, socket.CAN_RAW)
        except (AttributeError, OSError) as error:
            raise DriverError(f"Could not open a CAN socket: {error}") from error
        try:
            self._socket.settimeout(timeout)
            self._socket.bind((ifname,))
        except OSError as error:
            self._socket.close()
            raise DriverError(f"Could not bind to CAN interface '{ifname}': {error}") from error

    def write(self, can_id: int, data: bytes) -> None:
        """Write a frame with up to eight data bytes to ``can_id``."""
        payload = bytes(data)
        if len(payload) > MESSAGE_LENGTH:
            raise ValueError(
                f"CAN frame data must be at most {MESSAGE_LENGTH} bytes, got {len(payload)}"
            )
        frame = struct.pack(
            _CAN_FRAME_FORMAT, can_id, len(payload), payload.ljust(MESSAGE_LENGTH, b"\x00")
        )
        try:
            self._socket.send(frame)
        except OSError as error:
            raise DriverError(f"Could not write CAN frame: {error}") from error

    def read(self) -> tuple[int, bytes]:
        """Read the next frame and return its id and its eight data bytes."""
        try:
            frame = self._socket.recv(_CAN_FRAME_SIZE)
        except OSError as error:
            raise DriverError(f"Could not read CAN frame: {error}") from error
        if len(frame) < _CAN_FRAME_SIZE:
            raise DriverError(f"Incomplete CAN frame of {len(frame)} bytes received")
        can_id, _, data = struct.unpack(_CAN_FRAME_FORMAT, frame)
        if can_id & _CAN_EFF_FLAG:
            can_id &= ~_CAN_EFF_FLAG & 0xFFFFFFFF
        return can_id, data

    def set_recv_filter(self, can_ids: Iterable[int]) -> None:
        """Only receive standard frames whose id is one of ``can_ids``."""
        filters = b"".join(
            struct.pack(_CAN_FILTER_FORMAT, can_id, _CAN_SFF_MASK) for can_id in can_ids
        )
        try:
            self._socket.setsockopt(socket.SOL_CAN_RAW, socket.CAN_RAW_FILTER, filters)
        except OSError as error:
            raise DriverError(f"Could not set CAN receive filter: {error}") from error

    def close(self) -> None:
        """Close the underlying socket."""
        self._socket.close()

    def __enter__(self) -> SocketCanBus:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class CanDriver(CanNode):
    """CAN driver for commanding several actuators on one bus."""

    def __init__(self, interface: str | CanBus) -> None:
        bus = SocketCanBus(interface) if isinstance(interface, str) else interface
        super().__init__(bus, CAN_REQUEST_OFFSET, CAN_RESPONSE_OFFSET)