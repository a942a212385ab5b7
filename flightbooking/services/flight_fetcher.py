import logging

import httpx
from pydantic import ValidationError

from flightbooking.core.exceptions import FetchError
from flightbooking.models.schemas import FlightSearchResponse, SearchParams
from flightbooking.services.providers.base import FlightSearchApi

logger = logging.getLogger(__name__)


class FlightFetcher:
    """Single call to the SkyPicker search; no retry."""

    def __init__(self, api: FlightSearchApi) -> None:
        self.api = api

    async def fetch(self, params: SearchParams) -> FlightSearchResponse:
        try:
            body = await self.api.get_skypicker_flights(params)
        except httpx.HTTPError as exc:
            raise FetchError(f"Flight search request failed: {type(exc).__name__}") from exc
        except ValueError as exc:
            # 200 con body non JSON (es. pagina HTML del gateway)
            raise FetchError("Flight search returned a non-JSON body") from exc

        if body is None:
            raise FetchError("Flight search returned an empty body")

        try:
            response = FlightSearchResponse.model_validate(body)
        except ValidationError as exc:
            raise FetchError("Flight search returned a malformed body") from exc

        logger.info(
            "Flights from skyPicker %s→%s: %d offers (%s)",
            params.fly_from, params.fly_to, len(response.data), response.currency,
        )
        return response
