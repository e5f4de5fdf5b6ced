from decimal import Decimal
from typing import TypedDict

from services.booking.domain.entity import Booking
from services.payment.domain.entity.payment import Payment
from services.payment.domain.enum.payment_status import PaymentStatus
from services.payment.domain.value_object import (
    PaymentAmount,
    PaymentId,
    PaymentMethod,
)
from services.shared.domain import (
    IsoDateTime,
    ValidationException,
    generate_reference_number,
)


class PaymentDetails(TypedDict):
    """決済の入力データ構造（TypedDict）"""

    amount: Decimal
    taxes: Decimal
    fees: Decimal
    discounts: Decimal
    method: PaymentMethod


class PaymentFactory:
    """決済ファクトリ"""

    def create(
        self,
        booking: Booking,
        payment_details: PaymentDetails,
        now: IsoDateTime,
    ) -> Payment:
        """新規決済エンティティを生成する（通貨は予約の料金に合わせる）"""
        payment_id = PaymentId.from_booking_id(booking.id)

        try:
            amount = PaymentAmount.of(
                base_amount=payment_details["amount"],
                currency=booking.pricing.total_amount.currency,
                taxes=payment_details["taxes"],
                fees=payment_details["fees"],
                discounts=payment_details["discounts"],
            )
        except ValueError as e:
            raise ValidationException(str(e)) from e

        return Payment(
            id=payment_id,
            payment_number=generate_reference_number("PAY", now.value),
            booking_id=booking.id,
            user_id=booking.user_id,
            amount=amount,
            method=payment_details["method"],
            created_at=now,
            status=PaymentStatus.PENDING,
        )
