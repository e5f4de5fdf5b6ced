from decimal import Decimal

from services.booking.domain.entity import Booking
from services.payment.applications.payment_command import PaymentCommandService
from services.payment.domain.entity import Payment
from services.payment.domain.entity.payment import DEFAULT_REFUND_METHOD
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Caller, IsoDateTime, Money, ValidationException


class RefundPaymentService(PaymentCommandService):
    """払い戻しユースケース（管理者）"""

    description = "refund payment"
    admin_only = True

    def refund(
        self,
        payment_id: PaymentId,
        amount: Decimal,
        reason: str,
        caller: Caller,
        now: IsoDateTime,
        method: str = DEFAULT_REFUND_METHOD,
    ) -> Payment:
        """払い戻しを行う（一部払い戻しは繰り返し可能）"""
        if amount <= 0:
            raise ValidationException("Refund amount must be positive")

        def _transition(payment: Payment, booking: Booking | None) -> bool:
            payment.process_refund(
                Money(amount, payment.amount.currency), reason, now, method
            )
            return True

        return self._execute(payment_id, caller, _transition)
