"""
Arrotondamento standard per tutti i prezzi restituiti: 2 decimali, HALF_UP.

Usato da:
  - DestinationAggregator (medie prezzo e bagagli)
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

_TWO_PLACES = Decimal("0.01")


def round_half_up(value: Decimal) -> Decimal:
    return value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def mean(values: Iterable[Decimal]) -> Decimal:
    """
    Media aritmetica esatta in Decimal.
    Solleva ValueError su sequenza vuota e TypeError se manca un valore (None).
    """
    items = list(values)
    if not items:
        raise ValueError("mean() of an empty sequence")
    total = sum(items, Decimal(0))
    return total / Decimal(len(items))
