import pytest

from hwaddr.config import config
from hwaddr.exceptions import DeserializationError, InvalidLengthError
from hwaddr.serde import (
    MACAddressVisitor,
    ValueDeserializer,
    ValueSerializer,
    deserialize,
    serialize,
)
from hwaddr.types.mac_address import MACAddress

mac = MACAddress.from_bytes(0x11, 0x22, 0x33, 0x44, 0x55, 0x66)
raw = bytes([0x11, 0x22, 0x33, 0x44, 0x55, 0x66])
expecting = "either a string representation of a MAC address or 6-element byte array"


class RecordingDeserializer:
    """Non self-describing source that only answers what it is asked for."""

    def __init__(self, human_readable: bool, value) -> None:
        self.human_readable = human_readable
        self.value = value
        self.requested = None

    def is_human_readable(self) -> bool:
        return self.human_readable

    def deserialize_str(self, visitor):
        self.requested = "str"
        return visitor.visit_str(self.value)

    def deserialize_bytes(self, visitor):
        self.requested = "bytes"
        return visitor.visit_bytes(self.value)


def test_string():
    assert serialize(mac, ValueSerializer(human_readable=True)) == "11:22:33:44:55:66"
    assert deserialize(ValueDeserializer("11:22:33:44:55:66", True)) == mac
    with pytest.raises(DeserializationError) as excinfo:
        deserialize(ValueDeserializer("not an address", True))
    assert str(excinfo.value) == "Invalid component in a MAC address string"
    # bytes are still detected when provided
    assert deserialize(ValueDeserializer(raw, True)) == mac


def test_bytes():
    assert serialize(mac, ValueSerializer(human_readable=False)) == raw
    assert deserialize(ValueDeserializer(raw, False)) == mac
    assert deserialize(ValueDeserializer(bytearray(raw), False)) == mac
    assert deserialize(ValueDeserializer(memoryview(raw), False)) == mac
    # strings are still decoded in the compact mode
    assert deserialize(ValueDeserializer("11:22:33:44:55:66", False)) == mac


@pytest.mark.parametrize(
    "value", [bytes([0x11, 0x33]), bytes([0x11, 0x22, 0x33, 0x44, 0x55, 0x66, 0x77])]
)
def test_bytes_invalid_length(value):
    with pytest.raises(InvalidLengthError) as excinfo:
        deserialize(ValueDeserializer(value, False))
    assert excinfo.value.length == len(value)
    assert excinfo.value.expected == expecting
    assert str(excinfo.value) == f"invalid length {len(value)}, expected {expecting}"


def test_string_errors_carry_core_message():
    with pytest.raises(DeserializationError) as excinfo:
        deserialize(ValueDeserializer("12:34:56:78", True))
    assert str(excinfo.value) == "Expected 6 components but found 4"
    assert not isinstance(excinfo.value, InvalidLengthError)


def test_invalid_type():
    with pytest.raises(DeserializationError) as excinfo:
        deserialize(ValueDeserializer(1234, True))
    assert str(excinfo.value) == f"invalid type: int, expected {expecting}"


def test_readability_hint_decides_request():
    source = RecordingDeserializer(True, "11:22:33:44:55:66")
    assert deserialize(source) == mac
    assert source.requested == "str"

    source = RecordingDeserializer(False, raw)
    assert deserialize(source) == mac
    assert source.requested == "bytes"


def test_visitor():
    visitor = MACAddressVisitor()
    assert visitor.expecting() == expecting
    assert visitor.visit_str("11:22:33:44:55:66") == mac
    assert visitor.visit_bytes(raw) == mac


def test_default_mode_follows_config(monkeypatch):
    monkeypatch.setattr(config, "human_readable", False)
    assert ValueSerializer().is_human_readable() is False
    assert serialize(mac, ValueSerializer()) == raw
    monkeypatch.setattr(config, "human_readable", True)
    assert ValueDeserializer(raw).is_human_readable() is True
    assert serialize(mac, ValueSerializer()) == "11:22:33:44:55:66"
