from services.booking.domain.entity import Booking
from services.payment.applications.payment_command import PaymentCommandService
from services.payment.domain.entity import Payment
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Caller


class FailPaymentService(PaymentCommandService):
    """決済失敗ユースケース"""

    description = "fail payment"

    def fail(self, payment_id: PaymentId, reason: str, caller: Caller) -> Payment:
        def _transition(payment: Payment, booking: Booking | None) -> bool:
            payment.fail(reason)
            return True

        return self._execute(payment_id, caller, _transition)
