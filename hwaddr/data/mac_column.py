from typing import Any

import sqlalchemy as sa
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine

from hwaddr.serde import ValueDeserializer, ValueSerializer, deserialize, serialize
from hwaddr.types.mac_address import MACAddress


class MACAddressType(TypeDecorator):
    """
    Column holding a `MACAddress`.

    Stored as the 6 raw octets by default, or as the 17 character
    colon separated string when `human_readable` is set.
    """

    impl = sa.LargeBinary
    cache_ok = True

    def __init__(self, human_readable: bool = False) -> None:
        super().__init__()
        self.human_readable = human_readable

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if self.human_readable:
            return dialect.type_descriptor(sa.String(17))
        return dialect.type_descriptor(sa.LargeBinary(6))

    @property
    def python_type(self) -> type:
        return MACAddress

    def process_bind_param(
        self, value: MACAddress | str | bytes | None, dialect: Dialect
    ) -> str | bytes | None:
        if value is None:
            return None
        if not isinstance(value, MACAddress):
            value = deserialize(ValueDeserializer(value, self.human_readable))
        return serialize(value, ValueSerializer(self.human_readable))

    def process_result_value(
        self, value: str | bytes | None, dialect: Dialect
    ) -> MACAddress | None:
        if value is None:
            return None
        return deserialize(ValueDeserializer(value, self.human_readable))
