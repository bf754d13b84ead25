from decimal import Decimal

import pytest

from agency.catalog.domain import DESTINATIONS, ORIGINS, RoutePriceTable


class TestRoutePriceTable:
    def test_default_table_has_nine_routes(self):
        assert len(RoutePriceTable.default()) == 9

    def test_lookup_known_route(self):
        table = RoutePriceTable.default()
        assert table.lookup("El Salvador", "Colombia") == Decimal("300.00")

    @pytest.mark.parametrize(
        "origin, destination",
        [
            ("Colombia", "El Salvador"),
            ("Costa Rica", "Mexico"),
            ("el salvador", "Colombia"),
            ("Atlantis", "Mars"),
        ],
    )
    def test_lookup_unknown_route_returns_fallback(self, origin, destination):
        table = RoutePriceTable.default()
        assert table.lookup(origin, destination) == Decimal("999.99")

    def test_contains(self):
        table = RoutePriceTable.default()
        assert ("Honduras", "Panama") in table
        assert ("Panama", "Honduras") not in table

    def test_non_positive_price_raises_error(self):
        with pytest.raises(ValueError, match="must be positive"):
            RoutePriceTable(prices={("A", "B"): Decimal("0")})

    def test_table_is_not_affected_by_source_mutation(self):
        source = {("A", "B"): Decimal("10")}
        table = RoutePriceTable(prices=source)
        source[("A", "B")] = Decimal("20")
        assert table.lookup("A", "B") == Decimal("10")

    def test_table_cannot_be_mutated(self):
        table = RoutePriceTable.default()
        with pytest.raises(TypeError):
            table.prices[("A", "B")] = Decimal("1")

    def test_every_priced_route_uses_offered_choices(self):
        for origin, destination in RoutePriceTable.default().prices:
            assert origin in ORIGINS
            assert destination in DESTINATIONS
