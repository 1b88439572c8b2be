from typing import AsyncGenerator

import pytest_asyncio
import sqlalchemy as sa
from sqlalchemy import orm
from sqlalchemy.ext.asyncio import AsyncAttrs, AsyncSession, create_async_engine

from hwaddr.data import MACAddressType
from hwaddr.types.mac_address import MACAddress

sample_macs = [MACAddress.from_slice(i.to_bytes(6, "big")) for i in range(256, 259)]
sample_strs = ["00:00:00:00:00:00", "ff:ff:ff:ff:ff:ff", "12:34:56:78:90:ab"]


class ModelBase(AsyncAttrs, orm.DeclarativeBase):
    pass


class Interface(ModelBase):
    __tablename__ = "interfaces"

    id: orm.Mapped[int] = orm.mapped_column(primary_key=True)
    mac: orm.Mapped[MACAddress] = orm.mapped_column(MACAddressType(), unique=True)
    label: orm.Mapped[MACAddress | None] = orm.mapped_column(
        MACAddressType(human_readable=True)
    )


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    engine = create_async_engine(
        sa.make_url("sqlite+aiosqlite:///:memory:"), echo=False
    )
    async with engine.begin() as conn:
        await conn.run_sync(ModelBase.metadata.create_all)
    async with orm.sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )() as session:
        yield session
    await engine.dispose()
