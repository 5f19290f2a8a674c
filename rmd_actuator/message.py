"""Eight-byte message exchanged between the driver and an actuator."""

from __future__ import annotations

from typing import Iterable

__all__ = ["Message", "MESSAGE_LENGTH"]

MESSAGE_LENGTH = 8


class Message:
    """An eight-byte payload with little-endian integer access."""

    def __init__(self, data: bytes | bytearray | Iterable[int] = bytes(MESSAGE_LENGTH)) -> None:
        payload = bytearray(data)
        if len(payload) != MESSAGE_LENGTH:
            raise ValueError(
                f"Message data must be {MESSAGE_LENGTH} bytes long, got {len(payload)}"
            )
        self._data = payload

    @property
    def data(self) -> bytes:
        """The eight payload bytes."""
        return bytes(self._data)

    def _check_range(self, index: int, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Size must be positive, got {size}")
        if index < 0 or index + size > len(self._data):
            raise IndexError("Requested index out of range!")

    def set_at(self, value: int, index: int, size: int = 1, signed: bool = False) -> None:
        """Store ``value`` as a little-endian integer of ``size`` bytes starting at ``index``."""
        self._check_range(index, size)
        try:
            encoded = int(value).to_bytes(size, "little", signed=signed)
        except OverflowError as error:
            kind = "signed" if signed else "unsigned"
            raise ValueError(
                f"Value {value} does not fit into a {kind} integer of {size} bytes"
            ) from error
        self._data[index:index + size] = encoded

    def get_as(self, index: int, size: int = 1, signed: bool = False) -> int:
        """Read the little-endian integer of ``size`` bytes starting at ``index``."""
        self._check_range(index, size)
        return int.from_bytes(self._data[index:index + size], "little", signed=signed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return type(self) is type(other) and self._data == other._data

    def __hash__(self) -> int:
        return hash((type(self), bytes(self._data)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data.hex(' ')})"