"""
Gerarchia delle eccezioni del servizio.

Errori di input del client (validazione aeroporti) → messaggio preciso, 400.
Errori dopo la validazione (fetch, medie, salvataggio) → raccolti in
AverageFlightsException con la causa originale in __cause__ (solo per i log).
"""

AIRPORT_FORMAT_MESSAGE = (
    "The flight codes is invalid. Please insert TWO AIRPORT CODES separated by commas, "
    "example: (OPO,LIS) or (LIS,OPO) to fetch data from PORTO and LISBON flights. "
    "Consult the link: https://airportcodes.aero/iata/ and see if the codes are valid."
)

# lookup fallito: stesso testo, senza maiuscole
AIRPORT_LOOKUP_MESSAGE = (
    "The flight codes is invalid. Please insert two airport codes separated by commas, "
    "example: (OPO,LIS) or (LIS,OPO) to fetch data from PORTO and LISBON flights. "
    "Consult the link: https://airportcodes.aero/iata/ and see if the codes are valid."
)

AIRPORT_CODE_MESSAGE = (
    "At least one of the airport codes are invalid. "
    "Consult the link: https://airportcodes.aero/iata/ and see if the codes are valid."
)

AVERAGE_FLIGHTS_MESSAGE = "It was not possible to calculate the flights average. Please try again later."


class FlightBookingError(Exception):
    status_code: int = 500
    default_message: str = "Unexpected error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidAirportFormat(FlightBookingError):
    status_code = 400
    default_message = AIRPORT_FORMAT_MESSAGE


class InvalidAirportCode(FlightBookingError):
    status_code = 400
    default_message = AIRPORT_CODE_MESSAGE


class FetchError(FlightBookingError):
    status_code = 502
    default_message = "The flight search returned no usable response."


class AggregationError(FlightBookingError):
    default_message = "Could not compute the average prices per destination."


class AverageFlightsException(FlightBookingError):
    default_message = AVERAGE_FLIGHTS_MESSAGE

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__
