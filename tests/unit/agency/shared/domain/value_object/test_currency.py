from decimal import Decimal

import pytest

from agency.shared.domain import Currency


class TestCurrency:
    def test_lowercase_is_normalized(self):
        assert Currency("usd").code == "USD"

    def test_str_returns_code(self):
        assert str(Currency.eur()) == "EUR"

    def test_unsupported_currency_raises_error(self):
        with pytest.raises(ValueError, match="Unsupported currency: JPY"):
            Currency("JPY")

    def test_symbol(self):
        assert Currency.usd().symbol == "$"
        assert Currency.eur().symbol == "€"

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("100"), "$100.00"),
            (Decimal("100.5"), "$100.50"),
            (Decimal("5.999"), "$6.00"),
            (Decimal("0.125"), "$0.13"),
        ],
    )
    def test_format_uses_two_decimals(self, amount, expected):
        assert Currency.usd().format(amount) == expected

    def test_format_amount_beyond_default_precision(self):
        formatted = Currency.usd().format(Decimal("1E+30"))
        assert formatted == "$1" + "0" * 30 + ".00"
