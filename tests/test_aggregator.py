"""
Test funzioni di aggregazione: group_by_destination, aggregate.
Tutte le funzioni sono pure (no I/O): nessun mock necessario.
"""
from decimal import Decimal

import pytest

from conftest import make_offer, make_response
from flightbooking.core.exceptions import AggregationError
from flightbooking.services.aggregator import aggregate, group_by_destination


# ---------------------------------------------------------------------------
# group_by_destination
# ---------------------------------------------------------------------------

class TestGroupByDestination:

    def test_same_destination_same_group(self, lis_response):
        groups = group_by_destination(lis_response)

        assert set(groups) == {"LIS", "OPO"}
        assert [o.price for o in groups["LIS"]] == [Decimal("100.00"), Decimal("150.00"), Decimal("125.50")]
        assert len(groups["OPO"]) == 1

    def test_empty_response(self):
        assert group_by_destination(make_response()) == {}


# ---------------------------------------------------------------------------
# aggregate
# ---------------------------------------------------------------------------

class TestAggregate:

    def test_price_average_rounded_half_up(self, lis_response):
        # (100.00 + 150.00 + 125.50) / 3 = 125.1666…
        result = aggregate(lis_response)
        assert result["LIS"].price_average == Decimal("125.17")

    def test_bags_average(self, lis_response):
        lis = aggregate(lis_response)["LIS"]

        assert lis.bags_average.bag_one_average_price == Decimal("11.00")
        assert lis.bags_average.bag_two_average_price == Decimal("22.00")

    def test_half_up_on_exact_half(self):
        response = make_response(
            make_offer("LIS", "Lisbon", "10.00"),
            make_offer("LIS", "Lisbon", "10.01"),
        )
        # 10.005 → 10.01 (HALF_UP, non banker's rounding)
        assert aggregate(response)["LIS"].price_average == Decimal("10.01")

    def test_single_offer(self):
        response = make_response(make_offer("MAD", "Madrid", 42.5, 7, 9))
        summary = aggregate(response)["MAD"]

        assert summary.price_average == Decimal("42.50")
        assert summary.bags_average.bag_one_average_price == Decimal("7.00")

    def test_city_from_first_offer(self):
        response = make_response(
            make_offer("LIS", "Lisboa", "100"),
            make_offer("LIS", "Lisbon", "100"),
        )
        assert aggregate(response)["LIS"].city_name == "Lisboa"

    def test_currency_from_response(self):
        response = make_response(make_offer("LIS", "Lisbon", "100"), currency="GBP")
        assert aggregate(response)["LIS"].currency == "GBP"

    def test_one_summary_per_destination(self, lis_response):
        result = aggregate(lis_response)
        assert set(result) == {"LIS", "OPO"}
        assert result["OPO"].price_average == Decimal("80.00")

    def test_idempotent(self, lis_response):
        assert aggregate(lis_response) == aggregate(lis_response)

    def test_empty_response(self):
        assert aggregate(make_response()) == {}

    def test_missing_bag_price_fails_whole_search(self):
        response = make_response(
            make_offer("OPO", "Porto", "80"),
            make_offer("LIS", "Lisbon", "100", bag_two=None),
        )

        with pytest.raises(AggregationError) as exc_info:
            aggregate(response)
        assert isinstance(exc_info.value.__cause__, TypeError)
