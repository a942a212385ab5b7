from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from flightbooking.config import settings


class Base(DeclarativeBase):
    pass


# echo dei comandi SQL solo se richiesto (DB_ECHO=true)
engine = create_async_engine(
    settings.database_url,
    echo=settings.db_echo,
    pool_pre_ping=True,
)

async_session_maker = async_sessionmaker(engine, expire_on_commit=False)


async def init_models() -> None:
    """Crea le tabelle mancanti. Chiamata nel lifespan all'avvio."""
    import flightbooking.models  # noqa: F401  registra i modelli con Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncIterator[AsyncSession]:
    """Una sessione per richiesta HTTP, chiusa a fine richiesta."""
    async with async_session_maker() as session:
        yield session
