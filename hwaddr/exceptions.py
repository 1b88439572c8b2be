from pydantic.dataclasses import dataclass


class HWAddrException(Exception):
    pass


class MACAddressError(HWAddrException, ValueError):
    """Raised when building or parsing a MAC address fails."""


@dataclass(unsafe_hash=True)
class InvalidLength(MACAddressError):
    """The address has too few or too many components, eg. `00:11`."""

    count: int

    def __str__(self) -> str:
        return f"Expected 6 components but found {self.count}"


@dataclass(unsafe_hash=True)
class InvalidComponent(MACAddressError):
    """A component is not a hexadecimal byte, eg. `00:GG:22:33:44:55`."""

    def __str__(self) -> str:
        return "Invalid component in a MAC address string"


@dataclass(unsafe_hash=True)
class DeserializationError(HWAddrException, ValueError):
    msg: str

    def __str__(self) -> str:
        return self.msg

    @classmethod
    def custom(cls, msg: str) -> "DeserializationError":
        return cls(msg)

    @classmethod
    def invalid_length(cls, length: int, expected: str) -> "InvalidLengthError":
        return InvalidLengthError(
            f"invalid length {length}, expected {expected}", length, expected
        )

    @classmethod
    def invalid_type(cls, type_name: str, expected: str) -> "DeserializationError":
        return cls(f"invalid type: {type_name}, expected {expected}")


@dataclass(unsafe_hash=True)
class InvalidLengthError(DeserializationError):
    length: int = 0
    expected: str = ""
