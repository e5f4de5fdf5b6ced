from services.booking.domain.entity import Booking
from services.payment.applications.payment_command import PaymentCommandService
from services.payment.domain.entity import Payment
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Caller


class RetryPaymentService(PaymentCommandService):
    """決済再試行ユースケース（管理者、failed の決済を pending に戻す）"""

    description = "retry payment"
    admin_only = True

    def retry(self, payment_id: PaymentId, caller: Caller) -> Payment:
        def _transition(payment: Payment, booking: Booking | None) -> bool:
            payment.retry()
            return True

        return self._execute(payment_id, caller, _transition)
