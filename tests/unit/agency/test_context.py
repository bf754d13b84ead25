import pytest

from agency.catalog.domain import RoutePriceTable
from agency.context import AgencyContext
from agency.shared.domain import Currency


class TestAgencyContext:
    def test_default(self):
        context = AgencyContext.default()
        assert context.currency == Currency.usd()
        assert context.price_table == RoutePriceTable.default()

    def test_from_env_defaults_to_usd(self, monkeypatch):
        monkeypatch.delenv("AGENCY_CURRENCY", raising=False)
        assert AgencyContext.from_env().currency == Currency.usd()

    def test_from_env_reads_currency(self, monkeypatch):
        monkeypatch.setenv("AGENCY_CURRENCY", "eur")
        assert AgencyContext.from_env().currency == Currency.eur()

    def test_from_env_rejects_unsupported_currency(self, monkeypatch):
        monkeypatch.setenv("AGENCY_CURRENCY", "JPY")
        with pytest.raises(ValueError, match="Unsupported currency"):
            AgencyContext.from_env()
