"""
Provider Layer: interfacce astratte verso i servizi esterni.

Il codice applicativo (location_validator, flight_fetcher) usa solo queste classi.
L'implementazione concreta (Tequila) viene iniettata dalle dependency FastAPI,
nei test si passano dei fake/AsyncMock.
"""
from abc import ABC, abstractmethod

from flightbooking.models.schemas import LocationResult, SearchParams


class LocationLookup(ABC):

    @abstractmethod
    async def get_location(self, code: str) -> LocationResult:
        """
        Cerca le location che corrispondono al codice IATA.
        Lista vuota → codice inesistente.
        """
        ...


class FlightSearchApi(ABC):

    @abstractmethod
    async def get_skypicker_flights(self, params: SearchParams) -> dict | None:
        """
        Esegue la ricerca voli con i parametri già validati.
        Restituisce il body JSON grezzo (None se la risposta non ha body).
        """
        ...
