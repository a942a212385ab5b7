"""
Core logic per la ricerca medie voli (filterFlights).

Flusso:
  1. Validazione aeroporti (LocationValidator), errori restituiti così come sono,
     nessun fetch e nessun record salvato.
  2. Ricerca voli su Tequila/SkyPicker (FlightFetcher).
  3. Raggruppamento per destinazione + medie (aggregator, puro).
  4. Salvataggio del FlightRecord (SearchRecorder).
  5. Risposta con date normalizzate in ISO.

Qualsiasi errore nei passi 2-4 diventa AverageFlightsException: la causa
(FetchError, AggregationError, errore DB...) resta in __cause__.
"""
import logging

from flightbooking.core.exceptions import AverageFlightsException
from flightbooking.models.schemas import SearchHeaderResult, SearchParams
from flightbooking.services.aggregator import aggregate
from flightbooking.services.flight_fetcher import FlightFetcher
from flightbooking.services.location_validator import LocationValidator
from flightbooking.services.recorder import SearchRecorder
from flightbooking.utils.dates import to_iso_date

logger = logging.getLogger(__name__)


class SearchOrchestrator:

    def __init__(
        self,
        validator: LocationValidator,
        fetcher: FlightFetcher,
        recorder: SearchRecorder,
    ) -> None:
        self.validator = validator
        self.fetcher = fetcher
        self.recorder = recorder

    async def filter_flights(self, params: SearchParams) -> SearchHeaderResult:
        logger.info("filterFlights - started: %s", params.to_json())

        params.fly_from = await self.validator.validate(params.fly_to)

        try:
            flights = await self.fetcher.fetch(params)
            average_flights = aggregate(flights)
            # date convertite prima del salvataggio: nessun record se falliscono
            result = SearchHeaderResult(
                date_from=to_iso_date(params.date_from),
                date_to=to_iso_date(params.date_to),
                average_flights=average_flights,
            )

            await self.recorder.record(params)
        except Exception as exc:
            logger.warning(
                "filterFlights %s failed after validation: %s: %s",
                params.fly_from, type(exc).__name__, exc,
            )
            raise AverageFlightsException() from exc

        logger.info("Flights AVG response %s", result.to_json())
        return result
