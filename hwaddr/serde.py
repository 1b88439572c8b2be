"""
Bridge between `MACAddress` and format-agnostic serialization frameworks.

A format only has to answer one question, `is_human_readable()`, and
accept or produce the two primitives an address maps onto: a string
(`12:34:56:78:90:ab`) or the raw 6 octets.
"""

import logging
from typing import Any, Protocol, TypeVar

from hwaddr.config import config
from hwaddr.exceptions import DeserializationError, MACAddressError
from hwaddr.types.mac_address import MACAddress

log = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Serializer(Protocol[T_co]):
    def is_human_readable(self) -> bool: ...

    def serialize_str(self, value: str) -> T_co: ...

    def serialize_bytes(self, value: bytes) -> T_co: ...


class Visitor(Protocol[T_co]):
    def expecting(self) -> str: ...

    def visit_str(self, value: str) -> T_co: ...

    def visit_bytes(self, value: bytes) -> T_co: ...


class Deserializer(Protocol):
    def is_human_readable(self) -> bool: ...

    def deserialize_str(self, visitor: Visitor[T]) -> T: ...

    def deserialize_bytes(self, visitor: Visitor[T]) -> T: ...


def serialize(mac: MACAddress, serializer: Serializer[T]) -> T:
    """
    Serializes the MAC address.

    It serializes either to a string or its binary representation, depending
    on what the format prefers.
    """
    if serializer.is_human_readable():
        return serializer.serialize_str(str(mac))
    return serializer.serialize_bytes(mac.to_bytes())


class MACAddressVisitor:
    def expecting(self) -> str:
        return "either a string representation of a MAC address or 6-element byte array"

    def visit_str(self, value: str) -> MACAddress:
        try:
            return MACAddress.parse(value)
        except MACAddressError as err:
            log.debug(f"rejected MAC address string {value!r}: {err}")
            raise DeserializationError.custom(str(err)) from err

    def visit_bytes(self, value: bytes) -> MACAddress:
        try:
            return MACAddress.from_slice(value)
        except MACAddressError as err:
            log.debug(f"rejected {len(value)} byte MAC address: {err}")
            raise DeserializationError.invalid_length(
                len(value), self.expecting()
            ) from err


def deserialize(deserializer: Deserializer) -> MACAddress:
    """
    Deserializes the MAC address.

    It deserializes it from either a byte array (of size 6) or a string. If
    the format is self-describing, whatever it actually holds wins. If not,
    it obeys the human-readable property of the deserializer.
    """
    if deserializer.is_human_readable():
        return deserializer.deserialize_str(MACAddressVisitor())
    return deserializer.deserialize_bytes(MACAddressVisitor())


class ValueSerializer:
    """Serializes into plain Python `str` or `bytes` values."""

    def __init__(self, human_readable: bool | None = None) -> None:
        if human_readable is None:
            human_readable = config.human_readable
        self.human_readable = human_readable

    def is_human_readable(self) -> bool:
        return self.human_readable

    def serialize_str(self, value: str) -> str:
        return value

    def serialize_bytes(self, value: bytes) -> bytes:
        return bytes(value)


class ValueDeserializer:
    """
    Self-describing source wrapping a single Python value.

    The readability hint only decides what is asked for; the visitor always
    receives the value as it actually is, so a string is accepted by a
    binary deserializer and bytes by a human-readable one.
    """

    def __init__(self, value: Any, human_readable: bool | None = None) -> None:
        if human_readable is None:
            human_readable = config.human_readable
        self.value = value
        self.human_readable = human_readable

    def is_human_readable(self) -> bool:
        return self.human_readable

    def deserialize_str(self, visitor: Visitor[T]) -> T:
        return self._deserialize_any(visitor)

    def deserialize_bytes(self, visitor: Visitor[T]) -> T:
        return self._deserialize_any(visitor)

    def _deserialize_any(self, visitor: Visitor[T]) -> T:
        if isinstance(self.value, str):
            return visitor.visit_str(self.value)
        if isinstance(self.value, (bytes, bytearray, memoryview)):
            return visitor.visit_bytes(bytes(self.value))
        raise DeserializationError.invalid_type(
            type(self.value).__name__, visitor.expecting()
        )
