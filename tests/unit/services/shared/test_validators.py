from decimal import Decimal

import pytest
from pydantic import ValidationError

from services.payment.handlers.request_models import RefundPaymentRequest
from services.shared.utils import to_decimal


class TestToDecimal:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.1, Decimal("0.1")),
            (250, Decimal("250")),
            ("99.50", Decimal("99.50")),
            (Decimal("1.25"), Decimal("1.25")),
        ],
    )
    def test_converts_numbers_without_float_error(self, value, expected):
        assert to_decimal(value) == expected

    @pytest.mark.parametrize("value", [True, "abc", "NaN", "Infinity", None])
    def test_rejects_non_amounts(self, value):
        with pytest.raises(ValueError):
            to_decimal(value)

    def test_invalid_amount_becomes_validation_error(self):
        with pytest.raises(ValidationError):
            RefundPaymentRequest(amount="abc", reason="duplicate charge")

    def test_float_amount_is_kept_exact(self):
        request = RefundPaymentRequest(amount=10.1, reason="duplicate charge")

        assert request.amount == Decimal("10.1")
