import logging
from datetime import datetime
from typing import Callable

from flightbooking.db.records import FlightRecordStore
from flightbooking.models.flight_record import FlightRecord
from flightbooking.models.schemas import SearchParams

logger = logging.getLogger(__name__)


class SearchRecorder:
    """Persists one FlightRecord per search. Store errors are not caught here."""

    def __init__(self, store: FlightRecordStore, clock: Callable[[], datetime] = datetime.now) -> None:
        self.store = store
        self.clock = clock

    async def record(self, params: SearchParams) -> FlightRecord:
        record = FlightRecord(
            fly_to=params.fly_to,
            currency=params.currency,
            date_to=params.date_to,
            date_from=params.date_from,
            record_date_time=self.clock(),
        )
        saved = await self.store.create(record)
        logger.debug("Search record %s saved for %s", saved.id, saved.fly_to)
        return saved
