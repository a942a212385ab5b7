"""
Store dei FlightRecord (tabella flight_records).

Due sole operazioni: create (una per ricerca riuscita) e lettura degli ultimi
record. Nessun update/delete da parte del servizio.
"""
from abc import ABC, abstractmethod

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from flightbooking.models.flight_record import FlightRecord


class FlightRecordStore(ABC):

    @abstractmethod
    async def create(self, record: FlightRecord) -> FlightRecord:
        ...

    @abstractmethod
    async def list_recent(self, limit: int) -> list[FlightRecord]:
        ...


class SqlFlightRecordStore(FlightRecordStore):

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, record: FlightRecord) -> FlightRecord:
        """Insert + commit; after refresh the record carries the id assigned by the DB."""
        self.session.add(record)
        await self.session.commit()
        await self.session.refresh(record)
        return record

    async def list_recent(self, limit: int) -> list[FlightRecord]:
        stmt = (
            select(FlightRecord)
            .order_by(FlightRecord.record_date_time.desc(), FlightRecord.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
