"""
TequilaClient: client HTTP verso l'API Tequila di Kiwi.com (ex SkyPicker).

Due endpoint usati:
  GET /locations/query  → validazione codici IATA (2 chiamate per ricerca)
  GET /v2/search        → ricerca voli (1 chiamata per ricerca)

Autenticazione: header "apikey" su ogni richiesta.
Nessun retry: un errore HTTP viene sollevato (httpx.HTTPStatusError)
e gestito dal chiamante.

Documentazione: https://tequila.kiwi.com/portal/docs/tequila_api
"""
import logging

import httpx

from flightbooking.models.schemas import LocationResult, SearchParams
from flightbooking.services.providers.base import FlightSearchApi, LocationLookup

logger = logging.getLogger(__name__)

_LOCATIONS_PATH = "/locations/query"
_SEARCH_PATH = "/v2/search"


class TequilaClient(LocationLookup, FlightSearchApi):

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # transport iniettabile per i test (httpx.MockTransport)
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"apikey": self.api_key, "Accept": "application/json"},
            timeout=self.timeout,
            transport=self._transport,
        )

    async def get_location(self, code: str) -> LocationResult:
        params = {"term": code, "location_types": "airport", "limit": 10}
        async with self._client() as client:
            resp = await client.get(_LOCATIONS_PATH, params=params)
        resp.raise_for_status()

        result = LocationResult.model_validate(resp.json())
        logger.debug("Tequila location %s: %d matches", code, len(result.locations))
        return result

    async def get_skypicker_flights(self, params: SearchParams) -> dict | None:
        query = {
            "fly_from": params.fly_from,
            "fly_to": params.fly_to,
            "date_from": params.date_from,
            "date_to": params.date_to,
            "curr": params.currency,
        }
        async with self._client() as client:
            resp = await client.get(_SEARCH_PATH, params=query)
        # client chiuso qui, resp.json() resta accessibile (body già letto da httpx)

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Tequila search %s→%s: HTTP %d, %s",
                params.fly_from, params.fly_to,
                exc.response.status_code,
                exc.response.text[:300],
            )
            raise

        if not resp.content:
            return None
        return resp.json()
