"""
Validazione della coppia di aeroporti ricevuta dal client.

Flusso:
  1. split su "," → esattamente 2 token non vuoti, altrimenti InvalidAirportFormat
  2. pulizia caratteri speciali di ogni token
  3. lookup Tequila per ogni codice (in sequenza)
  4. nessuna location trovata per almeno un codice → InvalidAirportCode

Qualsiasi errore del lookup (rete, JSON inatteso) diventa InvalidAirportFormat
con il messaggio generico: la causa resta in __cause__ per i log.
"""
import logging

from flightbooking.core.exceptions import (
    AIRPORT_LOOKUP_MESSAGE,
    InvalidAirportCode,
    InvalidAirportFormat,
)
from flightbooking.services.providers.base import LocationLookup
from flightbooking.utils.text import replace_special_chars

logger = logging.getLogger(__name__)


def split_airport_codes(fly_to: str) -> tuple[str, str]:
    """Split + sanitize. Raises InvalidAirportFormat unless exactly two codes remain."""
    tokens = [token.strip() for token in fly_to.strip().split(",")]
    if len(tokens) != 2 or not all(tokens):
        raise InvalidAirportFormat()

    first, second = (replace_special_chars(token) for token in tokens)
    if not first or not second:
        raise InvalidAirportFormat()
    return first, second


class LocationValidator:

    def __init__(self, lookup: LocationLookup) -> None:
        self.lookup = lookup

    async def validate(self, fly_to: str) -> str:
        first, second = split_airport_codes(fly_to)

        try:
            location_one = await self.lookup.get_location(first)
            location_two = await self.lookup.get_location(second)
        except Exception as exc:
            logger.warning(
                "Location lookup %s,%s failed: %s: %s",
                first, second, type(exc).__name__, exc,
            )
            raise InvalidAirportFormat(AIRPORT_LOOKUP_MESSAGE) from exc

        if not location_one.locations or not location_two.locations:
            logger.info("Unknown airport code in %s,%s", first, second)
            raise InvalidAirportCode()

        return f"{first},{second}"
