from decimal import Decimal

import pytest

from services.shared.domain import Currency, Money


class TestMoney:
    def test_negative_amount_is_rejected(self):
        with pytest.raises(ValueError):
            Money.inr(Decimal("-1"))

    def test_add_and_subtract(self):
        total = Money.inr(Decimal("100")).add(Money.inr(Decimal("50.50")))
        assert total == Money.inr(Decimal("150.50"))
        assert total.subtract(Money.inr(Decimal("0.50"))) == Money.inr(Decimal("150"))

    def test_different_currencies_cannot_be_combined(self):
        with pytest.raises(ValueError):
            Money.inr(Decimal("1")).add(Money.usd(Decimal("1")))

    def test_percentage_rounds_half_up_to_minor_unit(self):
        assert Money.inr(Decimal("333.33")).percentage(Decimal("30")) == Money.inr(
            Decimal("100.00")
        )
        assert Money.usd(Decimal("0.05")).percentage(Decimal("50")) == Money.usd(
            Decimal("0.03")
        )

    def test_jpy_has_no_minor_unit(self):
        fee = Money(Decimal("1001"), Currency.jpy()).percentage(Decimal("50"))
        assert fee.amount == Decimal("501")

    def test_comparison(self):
        assert Money.inr(Decimal("1")) < Money.inr(Decimal("2"))
        assert Money.inr(Decimal("2")) <= Money.inr(Decimal("2"))
        assert Money.zero(Currency.inr()).is_zero()

    def test_currency_is_normalized_and_validated(self):
        assert Currency("inr") == Currency.inr()
        with pytest.raises(ValueError):
            Currency("XYZ")
