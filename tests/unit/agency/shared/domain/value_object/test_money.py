from decimal import Decimal

import pytest

from agency.shared.domain import Currency, Money


class TestMoney:
    def test_create_usd(self):
        money = Money.usd("300.00")
        assert money.amount == Decimal("300.00")
        assert money.currency == Currency.usd()

    def test_str_is_formatted_with_symbol(self):
        assert str(Money.usd("999.99")) == "$999.99"

    def test_negative_amount_raises_error(self):
        with pytest.raises(ValueError, match="Amount cannot be negative"):
            Money.usd("-1")

    def test_non_finite_amount_raises_error(self):
        with pytest.raises(ValueError, match="Amount must be a finite number"):
            Money(amount=Decimal("NaN"), currency=Currency.usd())

    def test_equal_amounts_are_equal(self):
        assert Money.usd("300") == Money.usd("300.00")
