from __future__ import annotations

from string import hexdigits
from typing import Any, Iterable

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from hwaddr.exceptions import InvalidComponent, InvalidLength

MACByteTuple = tuple[int, int, int, int, int, int]

MAC_PATTERN = r"^[0-9a-fA-F]{1,2}(:[0-9a-fA-F]{1,2}){5}$"

_HEX_DIGITS = frozenset(hexdigits)


def _parse_component(component: str) -> int:
    # int(..., 16) also takes signs, underscores, whitespace and a 0x prefix
    if not component or not _HEX_DIGITS.issuperset(component):
        raise InvalidComponent()
    value = int(component, 16)
    if value > 0xFF:
        raise InvalidComponent()
    return value


class MACAddress:
    """A MAC address used to identify a unique machine.

    Instances are immutable and always hold exactly 6 octets.
    """

    __slots__ = ("_octets",)

    _octets: bytes

    def __init__(self, octets: Iterable[int] = bytes(6)) -> None:
        if isinstance(octets, (int, str)):
            raise TypeError(
                f"Expected an iterable of octets, got {type(octets).__name__}. "
                "Use MACAddress.parse() for strings."
            )
        try:
            octets = bytes(octets)
        except ValueError:
            raise InvalidComponent()
        if len(octets) != 6:
            raise InvalidLength(len(octets))
        object.__setattr__(self, "_octets", octets)

    @classmethod
    def new(cls) -> MACAddress:
        """Construct an all-zero address."""
        return cls()

    @classmethod
    def from_bytes(cls, a: int, b: int, c: int, d: int, e: int, f: int) -> MACAddress:
        return cls((a, b, c, d, e, f))

    @classmethod
    def from_tuple(cls, octets: MACByteTuple) -> MACAddress:
        return cls(octets)

    @classmethod
    def from_array(cls, octets: bytes | bytearray | list[int]) -> MACAddress:
        return cls(octets)

    @classmethod
    def from_slice(
        cls, data: bytes | bytearray | memoryview | list[int]
    ) -> MACAddress:
        """
        Build an address from a variable-length byte sequence.

        Raises `InvalidLength` with the observed length unless it is exactly 6.
        """
        if len(data) != 6:
            raise InvalidLength(len(data))
        return cls(data)

    @classmethod
    def parse(cls, s: str) -> MACAddress:
        """
        Parse the colon separated form, eg. `12:34:56:78:90:ab`.

        Components are checked one by one from the left, so the first
        offending component decides which error is raised: an empty or
        non-hex component raises `InvalidComponent`, reaching a seventh
        component raises `InvalidLength(7)` and running out before the
        sixth raises `InvalidLength` with the number found.
        """
        parts = bytearray(6)
        i = 0
        for component in s.split(":"):
            if i == 6:
                raise InvalidLength(i + 1)
            parts[i] = _parse_component(component)
            i += 1

        if i != 6:
            raise InvalidLength(i)
        return cls(parts)

    @property
    def octets(self) -> bytes:
        return self._octets

    def to_bytes(self) -> bytes:
        return self._octets

    def to_tuple(self) -> MACByteTuple:
        return tuple(self._octets)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return ":".join(f"{b:02x}" for b in self._octets)

    def __repr__(self) -> str:
        return str(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MACAddress):
            return NotImplemented
        return self._octets == other._octets

    def __hash__(self) -> int:
        return hash(self._octets)

    def __bytes__(self) -> bytes:
        return self._octets

    def __copy__(self) -> MACAddress:
        return self

    def __deepcopy__(self, memo: dict) -> MACAddress:
        return self

    def __reduce__(self) -> tuple:
        return (type(self), (self._octets,))

    @classmethod
    def _validate(cls, value: Any, info: core_schema.ValidationInfo) -> MACAddress:
        from hwaddr.serde import ValueDeserializer, deserialize

        return deserialize(ValueDeserializer(value, human_readable=info.mode == "json"))

    @classmethod
    def _serialize(cls, value: MACAddress, info: core_schema.SerializationInfo) -> Any:
        from hwaddr.serde import ValueSerializer, serialize

        if info.mode == "json":
            return serialize(value, ValueSerializer(human_readable=True))
        return value

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        base_schema = core_schema.with_info_plain_validator_function(cls._validate)

        return core_schema.json_or_python_schema(
            json_schema=base_schema,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls=cls), base_schema]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": MAC_PATTERN}
