"""
Medie prezzi per destinazione: funzioni pure, nessun I/O.

Per ogni codice destinazione (flyTo):
  - price_average         = media dei price
  - bag_one_average_price = media di bags_price["1"]
  - bag_two_average_price = media di bags_price["2"]
tutte arrotondate a 2 decimali HALF_UP.

city_name viene dalla prima offerta del gruppo in ordine di arrivo
(ordine della risposta Tequila); currency dalla risposta, non dalla singola offerta.
Un errore su una destinazione fa fallire tutta l'aggregazione (AggregationError).
"""
from flightbooking.core.exceptions import AggregationError
from flightbooking.models.schemas import (
    BagsAverage,
    DestinationSummary,
    FlightOffer,
    FlightSearchResponse,
)
from flightbooking.utils.numbers import mean, round_half_up


def group_by_destination(response: FlightSearchResponse) -> dict[str, list[FlightOffer]]:
    groups: dict[str, list[FlightOffer]] = {}
    for offer in response.data:
        groups.setdefault(offer.fly_to, []).append(offer)
    return groups


def summarize(offers: list[FlightOffer], currency: str) -> DestinationSummary:
    # gruppo mai vuoto: nasce dalla prima offerta
    representative = offers[0]
    return DestinationSummary(
        city_name=representative.city_to,
        currency=currency,
        price_average=round_half_up(mean(o.price for o in offers)),
        bags_average=BagsAverage(
            bag_one_average_price=round_half_up(mean(o.baggage.bag_one_price for o in offers)),
            bag_two_average_price=round_half_up(mean(o.baggage.bag_two_price for o in offers)),
        ),
    )


def aggregate(response: FlightSearchResponse) -> dict[str, DestinationSummary]:
    result: dict[str, DestinationSummary] = {}
    for destination, offers in group_by_destination(response).items():
        try:
            result[destination] = summarize(offers, response.currency)
        except Exception as exc:
            raise AggregationError(
                f"Could not compute the averages for destination {destination}"
            ) from exc
    return result
